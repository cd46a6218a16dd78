"""
Document model tests

Tests prefix/line extraction, clamping and anchored separator searches.
"""

from remarklive.lib.document import (
    Document,
    lineBackward_move,
    lineEnd_find,
    lineForward_move,
    lineStart_find,
    lines_get,
    prefix_get,
    separatorBackward_search,
    separatorForward_search,
)
from remarklive.models.separators import SeparatorKind


DECK = "Intro\n---\nB\n---\nC"


class TestPrefixAndLines:
    """Read-only views"""

    def test_prefix(self):
        assert prefix_get(DECK, 8) == "Intro\n--"

    def test_prefix_clamps(self):
        assert prefix_get(DECK, -1) == ""
        assert prefix_get(DECK, 999) == DECK

    def test_lines(self):
        assert lines_get(DECK) == ["Intro", "---", "B", "---", "C"]

    def test_lines_of_empty_document(self):
        assert lines_get("") == [""]

    def test_trailing_newline_gives_empty_line(self):
        assert lines_get("A\n") == ["A", ""]


class TestLineMotion:
    """Line start/end and line-wise moves"""

    def test_line_start_and_end(self):
        assert lineStart_find(DECK, 8) == 6
        assert lineEnd_find(DECK, 8) == 9
        assert lineEnd_find(DECK, 16) == len(DECK)

    def test_forward_and_backward(self):
        assert lineForward_move(DECK, 0) == 6
        assert lineForward_move(DECK, 16) == len(DECK)
        assert lineBackward_move(DECK, 10) == 6
        assert lineBackward_move(DECK, 3) == 0


class TestSeparatorSearch:
    """Anchored line-start searches"""

    def test_forward_includes_line_at_origin(self):
        """A separator line starting exactly at the origin matches"""
        assert separatorForward_search(DECK, 6, "---") == 6

    def test_forward_skips_partial_line(self):
        """From inside a separator line, the next one is found"""
        assert separatorForward_search(DECK, 7, "---") == 12

    def test_forward_none(self):
        assert separatorForward_search(DECK, 13, "---") is None
        assert separatorForward_search("", 0, "---") is None

    def test_backward_requires_complete_match(self):
        """The token must end at or before the origin"""
        assert separatorBackward_search(DECK, 12, "---") == 6
        assert separatorBackward_search(DECK, 15, "---") == 12

    def test_backward_none(self):
        assert separatorBackward_search(DECK, 5, "---") is None


class TestDocument:
    """Snapshot object"""

    def test_separators_list(self):
        doc = Document("A\n---\nB\n--\nC\n???\nD")
        assert doc.separators_list() == [
            (2, SeparatorKind.SLIDE),
            (8, SeparatorKind.INCREMENTAL),
            (13, SeparatorKind.NOTE),
        ]

    def test_slide_breaks_count(self):
        assert Document(DECK).slideBreaks_count() == 2
        assert Document("").slideBreaks_count() == 0

    def test_match_prefers_longest_token(self):
        assert SeparatorKind.match("---") is SeparatorKind.SLIDE
        assert SeparatorKind.match("--") is SeparatorKind.INCREMENTAL
        assert SeparatorKind.match("??? notes") is SeparatorKind.NOTE
        assert SeparatorKind.match("text") is None
