"""
Preview materializer

Splices deck text into an HTML template and writes the result where the
preview expects it.

The template is a remark page whose slides live in a
<textarea id="source"> element; the deck is inserted in front of the
first closing tag and the rest of the template is left untouched.
"""

from pathlib import Path
from typing import Optional, Union

from ..config import appsettings, AppSettings
from .errors import PublishError, TemplateMarkerError, TemplateNotFoundError
from .log import LOG


def template_materialize(templateText: str, documentText: str, marker: str = "</textarea>") -> str:
    """
    Insert document text in front of the first marker occurrence

    Args:
        templateText: Template containing the marker
        documentText: Deck to splice in
        marker: Closing content tag

    Returns:
        Artifact text

    Raises:
        TemplateMarkerError: If the marker does not occur in the template

    Example:
        >>> template_materialize("<textarea></textarea>", "X")
        '<textarea>X</textarea>'
    """
    if marker not in templateText:
        raise TemplateMarkerError(marker)
    return templateText.replace(marker, documentText + marker, 1)


def artifact_publish(artifactText: str, outputPath: Union[str, Path]) -> Path:
    """
    Overwrite the artifact file, writing through symbolic links

    Args:
        artifactText: Materialized artifact
        outputPath: Artifact path; may be a symlink

    Returns:
        The resolved path that was written

    Raises:
        PublishError: If the file cannot be written
    """
    target = Path(outputPath).resolve()
    try:
        target.write_text(artifactText, encoding='utf-8')
    except OSError as e:
        raise PublishError(target, e) from e
    LOG(f"Wrote {len(artifactText)} characters to {target}", level=2)
    return target


class Materializer:
    """
    Template-backed preview builder

    Reads the template on every build, so edits to it show up on the next
    save, and produces the artifact for a deck directory.

    Attributes:
        templatePath: Template file in use
        settings: Settings providing the marker and output filename
    """

    def __init__(
        self,
        templatePath: Optional[Union[str, Path]] = None,
        settings: AppSettings = appsettings,
    ) -> None:
        self.settings = settings
        self.templatePath = Path(templatePath) if templatePath else Path(settings.default_template)

    def template_load(self) -> str:
        """
        Read the template

        Raises:
            TemplateNotFoundError: If the template cannot be read
        """
        try:
            template = self.templatePath.read_text(encoding='utf-8')
        except OSError as e:
            raise TemplateNotFoundError(f"Cannot read template {self.templatePath}: {e}") from e
        LOG(f"Loaded template: {self.templatePath}", level=3)
        return template

    def outputPath_get(self, directory: Union[str, Path]) -> Path:
        """Artifact path inside a deck directory"""
        return Path(directory) / self.settings.output_filename

    def artifact_build(self, documentText: str) -> str:
        """Materialize a deck against the loaded template"""
        return template_materialize(self.template_load(), documentText, self.settings.template_marker)

    def preview_build(self, documentText: str, directory: Union[str, Path]) -> Path:
        """
        Materialize a deck and publish it into directory

        The artifact is built completely before anything is written, so a
        bad template never leaves a truncated file behind.

        Returns:
            Resolved path of the written artifact
        """
        artifact = self.artifact_build(documentText)
        return artifact_publish(artifact, self.outputPath_get(directory))
