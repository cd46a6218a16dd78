"""
remarklive - Live preview core for remark slide decks

Keeps a browser preview of a single-file remark deck in step with the editor.
"""

__version__ = "1.0.0"

from .lib import (
    LiveSession,
    Materializer,
    DebounceScheduler,
    slide_locate,
    slide_locateAt,
    LOG,
    state_connectToLogger,
)

__all__ = [
    "LiveSession",
    "Materializer",
    "DebounceScheduler",
    "slide_locate",
    "slide_locateAt",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
