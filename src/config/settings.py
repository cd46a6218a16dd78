"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use REMARKLIVE_ prefix (e.g., REMARKLIVE_DEBOUNCE_DELAY=0.25).

Settings can also be loaded from a .env file in the project root.
"""

import shlex
from pathlib import Path
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


PACKAGE_ROOT = Path(__file__).parent.parent


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use REMARKLIVE_ prefix.

    Examples:
        REMARKLIVE_DEBOUNCE_DELAY=0.25
        REMARKLIVE_OUTPUT_FILENAME=preview.html
        REMARKLIVE_RELOAD_COMMAND="browser-sync reload"
        REMARKLIVE_NAVIGATE_COMMAND="open-remark-slide --port 3000 {slide}"
    """

    model_config = SettingsConfigDict(
        env_prefix="REMARKLIVE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Live sync configuration
    debounce_delay: float = Field(
        default=0.4,
        gt=0,
        description="Quiescence delay in seconds before a cursor move is synced to the preview",
    )

    # Materializer configuration
    template_marker: str = Field(
        default="</textarea>",
        description="Closing content tag in the template; the deck is spliced in front of it",
    )

    output_filename: str = Field(
        default="index.html",
        description="Name of the preview artifact written into the deck directory",
    )

    default_template: Path = Field(
        default=PACKAGE_ROOT / "assets" / "html" / "index.html",
        description="Template used when no explicit template file is given",
    )

    # External preview commands
    navigate_command: str = Field(
        default="",
        description="Command spawned to move the preview to a slide ({slide} is substituted); empty disables navigation",
    )

    reload_command: str = Field(
        default="browser-sync reload",
        description="Command spawned to reload the preview after a save",
    )

    save_hint: str = Field(
        default="No live preview session; saved without refreshing the preview",
        description="Message surfaced when a save happens outside a live session",
    )

    def navigateCommand_make(self, slide: int) -> List[str]:
        """
        Build the argv for the navigate command.

        Args:
            slide: 1-based slide index

        Returns:
            Argument vector with {slide} substituted

        Example:
            >>> settings = AppSettings(navigate_command="goto-slide --to {slide}")
            >>> settings.navigateCommand_make(3)
            ['goto-slide', '--to', '3']
        """
        return [arg.replace("{slide}", str(slide)) for arg in shlex.split(self.navigate_command)]

    def reloadCommand_make(self) -> List[str]:
        """Build the argv for the reload command"""
        return shlex.split(self.reload_command)


# Singleton instance - import this in your code
appsettings = AppSettings()
