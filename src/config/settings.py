"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use WIKITERM_ prefix (e.g., WIKITERM_WIKI_HOST=https://wiki.example.org/).

Settings can also be loaded from a .env file in the project root.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use WIKITERM_ prefix.

    Examples:
        WIKITERM_WIKI_HOST=https://minecraft.wiki/
        WIKITERM_REQUEST_TIMEOUT=5
        WIKITERM_THEME_NAME=plain
    """

    model_config = SettingsConfigDict(
        env_prefix="WIKITERM_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Wiki endpoint configuration
    wiki_host: str = Field(
        default="https://minecraft.fandom.com/",
        description="Base URL of the MediaWiki site (with trailing slash)",
    )

    api_path: str = Field(
        default="api.php",
        description="Path of the MediaWiki action API relative to wiki_host",
    )

    request_timeout: float = Field(
        default=10.0,
        description="Timeout in seconds for each API request",
    )

    user_agent: str = Field(
        default="wikiterm/1.0 (console wiki reader)",
        description="User-Agent header sent with every API request",
    )

    # Presentation configuration
    theme_name: str = Field(
        default="default",
        description="Console theme used to render style markers",
    )

    debug_mode: bool = Field(
        default=False,
        description="Enable debug output during retrieval",
    )

    def apiUrl_make(self) -> str:
        """
        Build the absolute URL of the action API.

        Returns:
            API endpoint URL (e.g., "https://minecraft.fandom.com/api.php")

        Example:
            >>> settings = AppSettings(wiki_host="https://wiki.example.org")
            >>> settings.apiUrl_make()
            'https://wiki.example.org/api.php'
        """
        return f"{self.wiki_host.rstrip('/')}/{self.api_path.lstrip('/')}"


# Singleton instance - import this in your code
appsettings = AppSettings()
