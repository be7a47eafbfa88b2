"""Tests for render.py - result formatting and match emphasis."""

from __future__ import annotations

import io

import pytest

from grepr.matcher import MatchMode, SearchOptions
from grepr.render import Ansi, highlight, render_result, should_use_color, write_result
from grepr.searcher import search

CONTENTS = "this is a test.\nthis is another test!"


class _TTYStream(io.StringIO):
    def isatty(self) -> bool:
        return True


class TestHighlight:
    """Test suite for highlight."""

    def test_wraps_every_occurrence(self) -> None:
        line = highlight("test the test", "test")

        assert line == (
            f"{Ansi.BOLD_RED}test{Ansi.RESET} the {Ansi.BOLD_RED}test{Ansi.RESET}"
        )

    def test_is_case_sensitive(self) -> None:
        """Only literal occurrences of the query as typed are emphasized."""
        assert highlight("Test test", "Test") == f"{Ansi.BOLD_RED}Test{Ansi.RESET} test"

    def test_empty_query_leaves_line_unchanged(self) -> None:
        assert highlight("anything", "") == "anything"

    def test_no_occurrence(self) -> None:
        assert highlight("anything", "nothing") == "anything"


class TestRenderResult:
    """Test suite for render_result and write_result."""

    def test_plain_format(self) -> None:
        result = search(CONTENTS, "this", SearchOptions())

        assert list(render_result(result)) == [
            "0: this is a test.",
            "1: this is another test!",
        ]

    def test_one_based_numbering(self) -> None:
        result = search(CONTENTS, "another", SearchOptions(mode=MatchMode.WORD))

        assert list(render_result(result, number_base=1)) == ["2: this is another test!"]

    def test_colored_format(self) -> None:
        result = search(CONTENTS, "ano", SearchOptions())

        assert list(render_result(result, color=True)) == [
            f"1: this is {Ansi.BOLD_RED}ano{Ansi.RESET}ther test!"
        ]

    def test_emphasis_does_not_change_selection(self) -> None:
        """A case-insensitive hit is still emitted even with nothing to emphasize."""
        result = search(CONTENTS, "ANOTHER", SearchOptions(ignore_case=True))

        assert list(render_result(result, color=True)) == ["1: this is another test!"]

    def test_inverted_result(self) -> None:
        result = search(CONTENTS, "another", SearchOptions(invert=True))

        assert list(render_result(result, color=True)) == ["0: this is a test."]

    def test_write_result_counts_lines(self) -> None:
        stream = io.StringIO()
        result = search(CONTENTS, "", SearchOptions())

        count = write_result(result, stream, number_base=1)

        assert count == 2
        assert stream.getvalue() == "1: this is a test.\n2: this is another test!\n"

    def test_write_empty_result(self) -> None:
        stream = io.StringIO()

        assert write_result(search(CONTENTS, "zzz", SearchOptions()), stream) == 0
        assert stream.getvalue() == ""


class TestShouldUseColor:
    """Test suite for should_use_color."""

    def test_always(self) -> None:
        assert should_use_color("always", io.StringIO()) is True

    def test_never(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("NO_COLOR", raising=False)

        assert should_use_color("never", _TTYStream()) is False

    def test_auto_tty(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("NO_COLOR", raising=False)

        assert should_use_color("auto", _TTYStream()) is True

    def test_auto_not_a_tty(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("NO_COLOR", raising=False)

        assert should_use_color("auto", io.StringIO()) is False

    def test_auto_respects_no_color(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NO_COLOR", "1")

        assert should_use_color("auto", _TTYStream()) is False
