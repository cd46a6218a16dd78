"""
Verbosity-gated logging on top of Loguru.

LOG() emits a message only when the object currently connected to the
logging context has ``verbosity >= level``. The connection lives in a
ContextVar, so it follows the code that is running:

- The CLI connects its ProgramState once for the whole pipeline
  (state_connectToLogger)
- A LiveSession connects itself only for the duration of each of its
  calls (state_connectedToLogger / state_logged) and restores whatever was
  connected before, so sessions with different verbosities never see each
  other's setting

Verbosity levels: 1 normal, 2 verbose (arming, publishing), 3 trace.
"""

import functools
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Callable, Iterator, Optional, TypeVar

from loguru import logger


_logged_state: ContextVar[Optional[Any]] = ContextVar('remarklive_logged_state', default=None)

logger_format = (
    "<green>{time:HH:mm:ss}</green> │ "
    "<level>{level: <7}</level> │ "
    "<cyan>{function: <24}</cyan> ║ "
    "<level>{message}</level>"
)

logger.remove()
logger.add(sys.stderr, format=logger_format, level="DEBUG")

F = TypeVar("F", bound=Callable[..., Any])


def state_connectToLogger(state: Any) -> None:
    """Connect state for the rest of the current context (CLI pipelines)"""
    _logged_state.set(state)


@contextmanager
def state_connectedToLogger(state: Any) -> Iterator[Any]:
    """
    Connect state for the body of a with-block only.

    Example:
        with state_connectedToLogger(session):
            LOG("visible if session.verbosity >= 2", level=2)
    """
    token = _logged_state.set(state)
    try:
        yield state
    finally:
        _logged_state.reset(token)


def state_logged(method: F) -> F:
    """Run a method with its instance connected to the logger"""
    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        with state_connectedToLogger(self):
            return method(self, *args, **kwargs)
    return wrapper  # type: ignore[return-value]


def verbosity_get() -> int:
    """Verbosity of the connected state (0 when nothing is connected)"""
    return getattr(_logged_state.get(), 'verbosity', 0)


def LOG(message: str, level: int = 1, **kwargs: Any) -> None:
    """
    Log message if the connected state's verbosity allows.

    Args:
        message: Log message to display
        level: Minimum verbosity required (1=normal, 2=verbose, 3=trace)
        **kwargs: Additional loguru metadata
    """
    if verbosity_get() >= level:
        logger.opt(depth=1).debug(message, **kwargs)


def WARN(message: str, **kwargs: Any) -> None:
    """Log a warning regardless of verbosity"""
    logger.opt(depth=1).warning(message, **kwargs)
