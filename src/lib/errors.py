"""
Exceptions raised by remarklive

All are fatal for the operation that raised them and are surfaced to the
user as-is; nothing retries.
"""


class RemarkLiveError(Exception):
    """Base class for remarklive failures"""
    pass


class MaterializeError(RemarkLiveError):
    """Raised when a preview artifact cannot be produced"""
    pass


class TemplateNotFoundError(MaterializeError):
    """Raised when the template file does not exist or cannot be read"""
    pass


class TemplateMarkerError(MaterializeError):
    """Raised when the template lacks the content marker"""

    def __init__(self, marker: str) -> None:
        super().__init__(f"Template does not contain the marker {marker!r}")
        self.marker = marker


class PublishError(RemarkLiveError):
    """Raised when the preview artifact cannot be written"""

    def __init__(self, path, cause: OSError) -> None:
        super().__init__(f"Cannot write preview to {path}: {cause}")
        self.path = path
        self.cause = cause
