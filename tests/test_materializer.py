"""
Preview materializer tests

Tests template splicing, symlink write-through and the fatal failure modes.
"""

import pytest

from remarklive.config import AppSettings
from remarklive.lib.errors import PublishError, TemplateMarkerError, TemplateNotFoundError
from remarklive.lib.materializer import Materializer, artifact_publish, template_materialize


class TestTemplateMaterialize:
    """Splicing the deck in front of the marker"""

    def test_minimal_template(self):
        assert template_materialize("<textarea></textarea>", "X") == "<textarea>X</textarea>"

    def test_only_first_marker_replaced(self):
        template = "<textarea></textarea><textarea></textarea>"
        assert template_materialize(template, "X") == "<textarea>X</textarea><textarea></textarea>"

    def test_rest_of_template_untouched(self):
        template = "<head>h</head><textarea id=\"source\"></textarea><script>s</script>"
        result = template_materialize(template, "# Title\n---\nBody")
        assert result == "<head>h</head><textarea id=\"source\"># Title\n---\nBody</textarea><script>s</script>"

    def test_document_taken_literally(self):
        """Backslashes and group references are not interpreted"""
        assert template_materialize("<textarea></textarea>", r"\1 \n") == r"<textarea>\1 \n</textarea>"

    def test_missing_marker(self):
        with pytest.raises(TemplateMarkerError, match="</textarea>"):
            template_materialize("<html></html>", "X")

    def test_custom_marker(self):
        assert template_materialize("<pre></pre>", "X", marker="</pre>") == "<pre>X</pre>"


class TestArtifactPublish:
    """Writing the artifact"""

    def test_overwrites_existing_file(self, tmp_path):
        target = tmp_path / "index.html"
        target.write_text("old content that is longer", encoding="utf-8")
        written = artifact_publish("new", target)
        assert written == target.resolve()
        assert target.read_text(encoding="utf-8") == "new"

    def test_writes_through_symlink(self, tmp_path):
        real = tmp_path / "real.html"
        real.write_text("old", encoding="utf-8")
        link = tmp_path / "index.html"
        link.symlink_to(real)

        written = artifact_publish("new", link)

        assert written == real.resolve()
        assert link.is_symlink()
        assert real.read_text(encoding="utf-8") == "new"

    def test_missing_directory_is_fatal(self, tmp_path):
        with pytest.raises(PublishError) as excinfo:
            artifact_publish("x", tmp_path / "missing" / "index.html")
        assert isinstance(excinfo.value.cause, OSError)


class TestMaterializer:
    """Template-backed builder"""

    def test_bundled_template_has_one_marker(self):
        assert Materializer().template_load().count("</textarea>") == 1

    def test_preview_build(self, tmp_path):
        template = tmp_path / "template.html"
        template.write_text("<body><textarea></textarea></body>", encoding="utf-8")
        deck_dir = tmp_path / "deck"
        deck_dir.mkdir()

        written = Materializer(template).preview_build("A\n---\nB", deck_dir)

        assert written == (deck_dir / "index.html").resolve()
        assert written.read_text(encoding="utf-8") == "<body><textarea>A\n---\nB</textarea></body>"

    def test_output_filename_from_settings(self, tmp_path):
        settings = AppSettings(output_filename="preview.html")
        assert Materializer(settings=settings).outputPath_get(tmp_path) == tmp_path / "preview.html"

    def test_missing_template(self, tmp_path):
        with pytest.raises(TemplateNotFoundError):
            Materializer(tmp_path / "nope.html").template_load()

    def test_malformed_template_writes_nothing(self, tmp_path):
        template = tmp_path / "template.html"
        template.write_text("<body></body>", encoding="utf-8")
        with pytest.raises(TemplateMarkerError):
            Materializer(template).preview_build("A", tmp_path)
        assert not (tmp_path / "index.html").exists()

    def test_template_edits_picked_up(self, tmp_path):
        """The template is read again on every build"""
        template = tmp_path / "template.html"
        template.write_text("<v1><textarea></textarea>", encoding="utf-8")
        materializer = Materializer(template)

        assert materializer.artifact_build("X") == "<v1><textarea>X</textarea>"
        template.write_text("<v2><textarea></textarea>", encoding="utf-8")
        assert materializer.artifact_build("X") == "<v2><textarea>X</textarea>"
