"""
Theme loader for console rendering.

A theme decides how style markers look on the terminal. Each theme is a
directory containing theme.yaml, which maps marker names to
pygments.console code names:

    markers:
      bold: bold
      italic: standout
      underline: underline
      code: green
      reset: reset
    line_reset: true

An empty code name renders the marker as nothing.
"""

import yaml
from pathlib import Path
from typing import Dict, Any, Optional

from pygments.console import codes

from ..models.markup import StyleMarker


THEMES_DIR: Path = Path(__file__).parent.parent / "themes"


class ThemeError(Exception):
    """Raised when theme loading or validation fails"""
    pass


class Theme:
    """
    Represents a wikiterm console theme.

    A theme consists of:
      - A marker name -> pygments.console code mapping
      - Whether to reset styles at the end of each line
    """

    def __init__(self, theme_name: str, themes_dir: Optional[Path] = None):
        """
        Load a theme by name.

        Args:
            theme_name: Name of the theme directory (e.g., "default", "plain")
            themes_dir: Path to themes directory (default: the packaged themes)

        Raises:
            ThemeError: If the theme directory or theme.yaml don't exist, or
                        theme.yaml names an unknown console code
        """
        self.name = theme_name
        self.themes_dir = Path(themes_dir) if themes_dir is not None else THEMES_DIR
        self.theme_dir = self.themes_dir / theme_name

        # Validate theme directory exists
        if not self.theme_dir.exists():
            raise ThemeError(
                f"Theme '{theme_name}' not found. "
                f"Expected directory: {self.theme_dir}"
            )

        self.config_path = self.theme_dir / "theme.yaml"
        if not self.config_path.exists():
            raise ThemeError(
                f"Theme '{theme_name}' missing theme.yaml"
            )

        self.config = self._config_load()
        self.marker_codes = self._markerCodes_resolve()

    def _config_load(self) -> Dict[str, Any]:
        """Load and parse theme.yaml"""
        try:
            with open(self.config_path, 'r') as f:
                config: Any = yaml.safe_load(f)
                if config is None:
                    config = {}
                return config
        except yaml.YAMLError as e:
            raise ThemeError(f"Failed to parse theme.yaml: {e}")
        except OSError as e:
            raise ThemeError(f"Failed to load theme.yaml: {e}")

    def _markerCodes_resolve(self) -> Dict[StyleMarker, str]:
        """Map every marker to its escape sequence"""
        resolved: Dict[StyleMarker, str] = {}
        for marker in StyleMarker:
            code_name = self.config_get(f"markers.{marker.name.lower()}", "") or ""
            if code_name not in codes:
                raise ThemeError(
                    f"Theme '{self.name}' uses unknown console code '{code_name}' "
                    f"for {marker.name.lower()}"
                )
            resolved[marker] = codes[code_name]
        return resolved

    def config_get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value from theme.yaml.

        Supports nested keys with dot notation:
          theme.config_get('markers.code', 'green')

        Args:
            key: Configuration key (supports dot notation)
            default: Default value if key doesn't exist

        Returns:
            Configuration value or default
        """
        keys: list[str] = key.split('.')
        value: Any = self.config

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def markerCode_get(self, marker: StyleMarker) -> str:
        """Get the escape sequence for a marker ('' if the theme hides it)"""
        return self.marker_codes[marker]

    def lineReset_get(self) -> bool:
        """Whether styled lines end with a reset so styles don't leak"""
        return bool(self.config_get('line_reset', True))

    def __repr__(self) -> str:
        return f"Theme(name='{self.name}', path='{self.theme_dir}')"


def themes_listAvailable(themes_dir: Optional[Path] = None) -> list[str]:
    """
    List all available theme names.

    Args:
        themes_dir: Path to themes directory (default: the packaged themes)

    Returns:
        List of theme names (directory names with valid theme.yaml)
    """
    themes_path: Path = Path(themes_dir) if themes_dir is not None else THEMES_DIR

    if not themes_path.exists():
        return []

    themes: list[str] = []
    for item in themes_path.iterdir():
        if item.is_dir():
            # Check if it has a theme.yaml
            if (item / "theme.yaml").exists():
                themes.append(item.name)

    return sorted(themes)
