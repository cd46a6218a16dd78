"""
Sync adapter and settings tests

Tests the stock adapters and how command templates are built from settings.
"""

import shlex
import sys

from remarklive.config import AppSettings
from remarklive.lib.sync import CommandSyncAdapter, NullSyncAdapter, RecordingSyncAdapter, SyncAdapter


class TestSettings:
    """Command templates and environment overrides"""

    def test_defaults(self):
        settings = AppSettings()
        assert settings.debounce_delay == 0.4
        assert settings.navigate_command == ""
        assert settings.navigateCommand_make(3) == []
        assert settings.reloadCommand_make() == ["browser-sync", "reload"]
        assert settings.template_marker == "</textarea>"
        assert settings.output_filename == "index.html"

    def test_navigate_command(self):
        settings = AppSettings(navigate_command="open-slide --to {slide} now")
        assert settings.navigateCommand_make(7) == ["open-slide", "--to", "7", "now"]

    def test_reload_command(self):
        settings = AppSettings(reload_command="browser-sync reload --port 3000")
        assert settings.reloadCommand_make() == ["browser-sync", "reload", "--port", "3000"]

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("REMARKLIVE_DEBOUNCE_DELAY", "0.25")
        assert AppSettings().debounce_delay == 0.25


class TestAdapters:
    """Stock adapters satisfy the protocol"""

    def test_protocol(self):
        assert isinstance(NullSyncAdapter(), SyncAdapter)
        assert isinstance(RecordingSyncAdapter(), SyncAdapter)
        assert isinstance(CommandSyncAdapter(), SyncAdapter)

    def test_null_adapter_inactive(self):
        assert not NullSyncAdapter().sessionActive()

    def test_recording_adapter(self):
        adapter = RecordingSyncAdapter()
        adapter.navigate(2)
        adapter.reload()
        adapter.navigate(5)
        assert adapter.calls == [("navigate", 2), ("reload", None), ("navigate", 5)]
        assert adapter.navigations == [2, 5]
        assert adapter.reloads == 1


class TestCommandAdapter:
    """External command adapter"""

    def test_active_between_start_and_stop(self):
        adapter = CommandSyncAdapter()
        assert not adapter.sessionActive()
        adapter.start()
        assert adapter.sessionActive()
        adapter.stop()
        assert not adapter.sessionActive()

    def test_missing_binary_is_not_raised(self):
        settings = AppSettings(navigate_command="remarklive-no-such-binary {slide}")
        adapter = CommandSyncAdapter(settings)
        assert adapter.command_spawn(settings.navigateCommand_make(1)) is None
        adapter.navigate(1)

    def test_empty_command(self):
        adapter = CommandSyncAdapter(AppSettings(reload_command=""))
        assert adapter.command_spawn([]) is None
        adapter.reload()

    def test_spawns_reload_command(self):
        settings = AppSettings(reload_command=f"{shlex.quote(sys.executable)} -c pass")
        adapter = CommandSyncAdapter(settings)
        process = adapter.command_spawn(settings.reloadCommand_make())
        assert process is not None
        assert process.wait(timeout=30) == 0

    def test_unconfigured_navigate_warns_once(self, log_messages):
        adapter = CommandSyncAdapter(AppSettings(navigate_command=""))
        adapter.navigate(1)
        adapter.navigate(2)
        warnings = [m for m in log_messages if "NAVIGATE_COMMAND is not set" in m]
        assert len(warnings) == 1
        assert adapter._processes == []

    def test_failed_command_is_reported(self, log_messages):
        command = f"{shlex.quote(sys.executable)} -c 'import sys; sys.exit(3)'"
        adapter = CommandSyncAdapter(AppSettings(reload_command=command))
        process = adapter.command_spawn(adapter.settings.reloadCommand_make())
        assert process.wait(timeout=30) == 3
        adapter.stop()
        assert any("exited with status 3" in m for m in log_messages)
