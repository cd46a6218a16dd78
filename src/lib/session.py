"""
Live preview session

Entry points the host editor calls while a deck is open. A session keeps
the latest document snapshot, one SyncState and one DebounceScheduler;
several sessions can run side by side on the same event loop.

Host events and what they trigger:
    cursorMoved_handle            -> debounced navigate
    nextSlideCommand_handle       -> slide_next, debounced navigate
    prevSlideCommand_handle       -> slide_prev, debounced navigate
    insertSeparatorCommand_handle -> separator_insert, debounced navigate
    killSlideCommand_handle       -> slide_kill, debounced navigate
    save_handle                   -> materialize + publish + reload
    slide_visit                   -> immediate navigate

Nothing is synced while the adapter reports no active session; saves then
only return a hint for the user.
"""

import asyncio
from pathlib import Path
from typing import Optional, Union

from ..config import appsettings, AppSettings
from ..models.edits import EditResult, SaveOutcome
from ..models.separators import SeparatorKind
from ..models.state import SyncState
from .document import offset_clamp
from .errors import MaterializeError
from .locator import slide_locateAt
from .log import LOG, state_logged
from .materializer import Materializer
from .navigation import separator_insert, slide_kill, slide_next, slide_prev
from .scheduler import DebounceScheduler
from .sync import SyncAdapter


class LiveSession:
    """
    Per-document live sync session

    Attributes:
        adapter: Preview the session drives
        directory: Deck directory the preview artifact is written to
        settings: Application settings (debounce delay, marker, filenames)
        materializer: Builds and writes the preview artifact
        scheduler: Debounce timer for cursor syncs
        state: Current SyncState (None until the first event, or after stop())
        text: Latest document snapshot
        cursor: Latest cursor offset
        verbosity: Logging verbosity for this session
    """

    def __init__(
        self,
        adapter: SyncAdapter,
        directory: Optional[Union[str, Path]] = None,
        settings: AppSettings = appsettings,
        loop: Optional[asyncio.AbstractEventLoop] = None,
        materializer: Optional[Materializer] = None,
        verbosity: int = 1,
    ) -> None:
        self.adapter = adapter
        self.directory = Path(directory) if directory is not None else None
        self.settings = settings
        self.materializer = materializer or Materializer(settings=settings)
        self.scheduler = DebounceScheduler(self.timer_fire, settings.debounce_delay, loop)
        self.state: Optional[SyncState] = None
        self.text = ""
        self.cursor = 0
        self.verbosity = verbosity

    def syncState_get(self) -> SyncState:
        if self.state is None:
            self.state = SyncState()
            LOG("Live sync state created", level=2)
        return self.state

    def snapshot_record(self, text: str, cursor: int) -> None:
        self.text = text
        self.cursor = offset_clamp(text, cursor)

    def sync_schedule(self) -> None:
        """Arm the debounce timer if a preview is attached"""
        if not self.adapter.sessionActive():
            return
        state = self.syncState_get()
        state.pendingTimer = self.scheduler.arm()

    @state_logged
    def timer_fire(self) -> None:
        """
        Sync the preview to the latest cursor

        Navigates only when the cursor moved since the last sync; the
        synced position is updated either way.
        """
        state = self.syncState_get()
        state.pendingTimer = None
        if self.cursor != state.lastSyncedPosition:
            index = slide_locateAt(self.text, self.cursor)
            LOG(f"Syncing preview to slide {index}", level=2)
            self.adapter.navigate(index)
        state.lastSyncedPosition = self.cursor

    def edit_apply(self, result: EditResult) -> EditResult:
        self.snapshot_record(result.text, result.cursor)
        self.sync_schedule()
        return result

    @state_logged
    def cursorMoved_handle(self, text: str, cursor: int) -> None:
        self.snapshot_record(text, cursor)
        self.sync_schedule()

    @state_logged
    def nextSlideCommand_handle(self, text: str, cursor: int) -> EditResult:
        return self.edit_apply(slide_next(text, cursor))

    @state_logged
    def prevSlideCommand_handle(self, text: str, cursor: int) -> EditResult:
        return self.edit_apply(slide_prev(text, cursor))

    @state_logged
    def insertSeparatorCommand_handle(
        self, text: str, cursor: int, kind: Union[SeparatorKind, str]
    ) -> EditResult:
        """
        Insert a slide, incremental or note separator

        Args:
            text: Document text
            cursor: Cursor offset
            kind: SeparatorKind, its name ("slide", "incremental", "note")
                  or its token ("---", "--", "???")
        """
        if not isinstance(kind, SeparatorKind):
            kind = SeparatorKind.fromName(kind)
        return self.edit_apply(separator_insert(text, cursor, kind))

    @state_logged
    def killSlideCommand_handle(self, text: str, cursor: int) -> EditResult:
        return self.edit_apply(slide_kill(text, cursor))

    @state_logged
    def save_handle(self, text: str) -> SaveOutcome:
        """
        Regenerate the preview after the host saved the deck

        Raises:
            MaterializeError: Template unreadable or missing the marker,
                              or no directory configured
            PublishError: Artifact could not be written
        """
        self.snapshot_record(text, self.cursor)

        if not self.adapter.sessionActive():
            LOG(self.settings.save_hint, level=1)
            return SaveOutcome(published=False, hint=self.settings.save_hint)

        if self.directory is None:
            raise MaterializeError("Live session has no preview directory")

        output = self.materializer.preview_build(text, self.directory)
        self.adapter.reload()
        LOG(f"Preview published: {output}", level=1)
        return SaveOutcome(published=True, outputPath=output)

    @state_logged
    def slide_visit(self, text: str, cursor: int) -> int:
        """
        Show the cursor's slide in the preview now, bypassing the debounce

        Returns:
            The slide index of the cursor
        """
        self.snapshot_record(text, cursor)
        self.scheduler.cancel()
        if self.state is not None:
            self.state.pendingTimer = None
        index = slide_locateAt(self.text, self.cursor)
        if self.adapter.sessionActive():
            state = self.syncState_get()
            self.adapter.navigate(index)
            state.lastSyncedPosition = self.cursor
        return index

    def slide_current(self) -> int:
        """Slide index of the latest snapshot"""
        return slide_locateAt(self.text, self.cursor)

    @state_logged
    def stop(self) -> None:
        """End the session: cancel the pending sync and discard its state"""
        self.scheduler.cancel()
        self.state = None
        LOG("Live session stopped", level=2)
