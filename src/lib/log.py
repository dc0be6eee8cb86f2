"""
Centralized logging using Loguru with context-aware verbosity.

LOG() respects the verbosity of the ProgramState attached to the current
context, so library code can log without having the state passed in.
WARN() reports recoverable failures (a request that came back empty) at the
same verbosity as request URLs, so normal runs only show the final error.

Usage:
    from lib.log import LOG, WARN, state_connectToLogger

    # At start of the pipeline:
    state_connectToLogger(state)

    # Anywhere in that context:
    LOG("Fetching summary of 'Diamond'", level=2)
    LOG("GET https://minecraft.fandom.com/api.php?...", level=2)
    LOG("Decoded 12 tags into 30 tokens", level=3)
    WARN("request to https://minecraft.fandom.com/api.php failed: timeout")

Setting WIKITERM_DEBUG_MODE=true shows every message regardless of
verbosity.
"""

from loguru import logger
from typing import Any, Dict, Optional
from contextvars import ContextVar
import sys

from ..config import appsettings

# Context variable to hold current ProgramState
_program_state: ContextVar[Optional[Any]] = ContextVar('program_state', default=None)

# Loguru level used for each verbosity level
VERBOSITY_LEVELS: Dict[int, str] = {
    1: "INFO",
    2: "DEBUG",
    3: "TRACE",
}

logger_format = (
    "<green>{time:HH:mm:ss}</green> │ "
    "<level>{level: <7}</level> │ "
    "<cyan>{name}:{function}</cyan> @ "
    "<cyan>{line: <4}</cyan> ║ "
    "<level>{message}</level>"
)

logger.remove()  # Remove default handler
logger.add(sys.stderr, format=logger_format, level="TRACE")


def state_connectToLogger(state: Any) -> None:
    """
    Connect a ProgramState to the logging context.

    Args:
        state: ProgramState instance with verbosity attribute
    """
    _program_state.set(state)


def verbosity_get() -> int:
    """
    Verbosity of the attached state.

    Returns:
        The state's verbosity, 0 when no state is attached (silent), or the
        highest level when debug mode is on
    """
    if appsettings.debug_mode:
        return max(VERBOSITY_LEVELS)

    state = _program_state.get()
    if state is None or not hasattr(state, 'verbosity'):
        return 0
    return state.verbosity


def LOG(message: str, level: int = 1, **kwargs: Any) -> None:
    """
    Log message if current state's verbosity allows.

    Args:
        message: Log message to display
        level: Minimum verbosity level required (1=normal, 2=verbose, 3=debug)
        **kwargs: Additional loguru metadata

    Verbosity levels:
        1 = Normal output (default), logged as INFO
        2 = Verbose (-v), logged as DEBUG
        3 = Debug (-vv or higher), logged as TRACE
    """
    if verbosity_get() >= level:
        logger.opt(depth=1).log(VERBOSITY_LEVELS.get(level, "TRACE"), message, **kwargs)


def WARN(message: str, **kwargs: Any) -> None:
    """
    Report a recoverable failure.

    Shown from verbosity 2 (-v) upward.

    Args:
        message: Description of what failed
        **kwargs: Additional loguru metadata
    """
    if verbosity_get() >= 2:
        logger.opt(depth=1).warning(message, **kwargs)
