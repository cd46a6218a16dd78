"""
Sync adapters

The live session never talks to a browser itself. It calls a SyncAdapter,
which moves the preview to a slide or reloads it. Adapter calls are
fire-and-forget: their latency and failures are the adapter's concern.

Provided adapters:
- NullSyncAdapter: no preview attached, never active
- RecordingSyncAdapter: remembers every call (embedding and tests)
- CommandSyncAdapter: spawns configurable external commands
"""

import subprocess
from typing import List, Optional, Protocol, Tuple, runtime_checkable

from ..config import appsettings, AppSettings
from .log import LOG, WARN


@runtime_checkable
class SyncAdapter(Protocol):
    """Capabilities the live session needs from a preview"""

    def navigate(self, slideIndex: int) -> None:
        """Show slide slideIndex (1-based) in the preview"""
        ...

    def reload(self) -> None:
        """Reload the preview after the artifact changed"""
        ...

    def sessionActive(self) -> bool:
        """True while a preview is attached"""
        ...


class NullSyncAdapter:
    """Adapter for editing without a preview"""

    def navigate(self, slideIndex: int) -> None:
        pass

    def reload(self) -> None:
        pass

    def sessionActive(self) -> bool:
        return False


class RecordingSyncAdapter:
    """
    Adapter that records calls instead of acting on them

    Attributes:
        active: Value returned by sessionActive()
        calls: ("navigate", index) and ("reload", None) tuples in call order
    """

    def __init__(self, active: bool = True) -> None:
        self.active = active
        self.calls: List[Tuple[str, Optional[int]]] = []

    def navigate(self, slideIndex: int) -> None:
        self.calls.append(("navigate", slideIndex))

    def reload(self) -> None:
        self.calls.append(("reload", None))

    def sessionActive(self) -> bool:
        return self.active

    @property
    def navigations(self) -> List[int]:
        return [index for name, index in self.calls if name == "navigate" and index is not None]

    @property
    def reloads(self) -> int:
        return sum(1 for name, _ in self.calls if name == "reload")


class CommandSyncAdapter:
    """
    Adapter that drives the preview through external commands

    Commands come from settings (navigate_command, reload_command) and are
    spawned without waiting for them. A command that cannot be started, or
    that exits non-zero, is logged and otherwise ignored. With no
    navigate_command configured, navigate() warns once and does nothing.

    Attributes:
        settings: Settings providing the command templates
        cwd: Working directory for spawned commands
    """

    def __init__(self, settings: AppSettings = appsettings, cwd: Optional[str] = None) -> None:
        self.settings = settings
        self.cwd = cwd
        self._active = False
        self._processes: List[subprocess.Popen] = []
        self._navigateWarned = False

    def start(self) -> None:
        self._active = True
        LOG("Command sync adapter started", level=2)

    def stop(self) -> None:
        self._active = False
        self.processes_reap()
        LOG("Command sync adapter stopped", level=2)

    def sessionActive(self) -> bool:
        return self._active

    def navigate(self, slideIndex: int) -> None:
        if not self.settings.navigate_command.strip():
            if not self._navigateWarned:
                WARN("REMARKLIVE_NAVIGATE_COMMAND is not set; the preview will not follow the cursor")
                self._navigateWarned = True
            return
        self.command_spawn(self.settings.navigateCommand_make(slideIndex))

    def reload(self) -> None:
        self.command_spawn(self.settings.reloadCommand_make())

    def command_spawn(self, argv: List[str]) -> Optional[subprocess.Popen]:
        """
        Start a command without waiting for it

        Returns:
            The process, or None if it could not be started
        """
        self.processes_reap()
        if not argv:
            WARN("Sync command is empty; nothing to run")
            return None
        LOG(f"Spawning: {' '.join(argv)}", level=2)
        try:
            process = subprocess.Popen(
                argv,
                cwd=self.cwd,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
        except OSError as e:
            WARN(f"Could not run {argv[0]}: {e}")
            return None
        self._processes.append(process)
        return process

    def processes_reap(self) -> None:
        """Forget processes that have exited, reporting failed ones"""
        running = []
        for process in self._processes:
            code = process.poll()
            if code is None:
                running.append(process)
            elif code != 0:
                WARN(f"Sync command {process.args[0]} exited with status {code}")
        self._processes = running
