"""
remarklive - Live preview core for remark slide decks

Slide location, slide navigation/editing, debounced preview sync and
preview materialization.
"""

__version__ = "1.0.0"

from .document import Document, prefix_get, lines_get
from .locator import slide_locate, slide_locateAt
from .navigation import (
    slide_next,
    slide_prev,
    separator_insert,
    slide_new,
    slideIncremental_new,
    note_new,
    slide_kill,
)
from .scheduler import DebounceScheduler
from .materializer import Materializer, template_materialize, artifact_publish
from .sync import SyncAdapter, NullSyncAdapter, RecordingSyncAdapter, CommandSyncAdapter
from .session import LiveSession
from .errors import (
    RemarkLiveError,
    MaterializeError,
    TemplateNotFoundError,
    TemplateMarkerError,
    PublishError,
)
from .log import LOG, state_connectToLogger

__all__ = [
    "Document",
    "prefix_get",
    "lines_get",
    "slide_locate",
    "slide_locateAt",
    "slide_next",
    "slide_prev",
    "separator_insert",
    "slide_new",
    "slideIncremental_new",
    "note_new",
    "slide_kill",
    "DebounceScheduler",
    "Materializer",
    "template_materialize",
    "artifact_publish",
    "SyncAdapter",
    "NullSyncAdapter",
    "RecordingSyncAdapter",
    "CommandSyncAdapter",
    "LiveSession",
    "RemarkLiveError",
    "MaterializeError",
    "TemplateNotFoundError",
    "TemplateMarkerError",
    "PublishError",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
