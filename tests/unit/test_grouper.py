"""Tests for the block grouper state machine."""

from listmark.markdown.classifier import (
    LowerAlphaMarker,
    NumberMarker,
    Plain,
    UpperAlphaMarker,
    classify,
)
from listmark.markdown.grouper import HeadingRun, MarkerRun, PlainRun, group_lines


def _group(*lines):
    return group_lines(classify(line) for line in lines)


class TestMarkerRuns:
    def test_empty_input(self):
        assert _group() == []

    def test_consecutive_same_kind(self):
        runs = _group("a. x", "b. y")
        assert len(runs) == 1
        assert isinstance(runs[0], MarkerRun)
        assert runs[0].kind is LowerAlphaMarker
        assert [line.text for line in runs[0].lines] == ["x", "y"]

    def test_blank_lines_inside_run_are_skipped(self):
        runs = _group("a. Do this.", "", "", "b. Do that.")
        assert len(runs) == 1
        assert len(runs[0].lines) == 2

    def test_case_change_starts_new_run(self):
        runs = _group("a. x", "B. y")
        assert len(runs) == 2
        assert runs[0].kind is LowerAlphaMarker
        assert runs[1].kind is UpperAlphaMarker

    def test_number_after_letter_starts_new_run(self):
        runs = _group("a. x", "", "1. y")
        assert [run.kind for run in runs] == [LowerAlphaMarker, NumberMarker]

    def test_plain_line_terminates_run(self):
        runs = _group("a. x", "text", "b. y")
        assert [type(run) for run in runs] == [MarkerRun, PlainRun, MarkerRun]

    def test_plain_after_blank_terminates_run(self):
        runs = _group("a. x", "", "text")
        assert [type(run) for run in runs] == [MarkerRun, PlainRun]
        assert len(runs[0].lines) == 1

    def test_values_need_not_be_consecutive(self):
        runs = _group("a. x", "a. y", "q. z")
        assert len(runs) == 1
        assert len(runs[0].lines) == 3


class TestPlainRuns:
    def test_consecutive_plain_lines_share_a_run(self):
        runs = _group("one", "two")
        assert runs == [PlainRun(lines=[Plain(text="one"), Plain(text="two")])]

    def test_blank_line_splits_plain_runs(self):
        runs = _group("one", "", "two")
        assert len(runs) == 2
        assert all(isinstance(run, PlainRun) for run in runs)

    def test_marker_closes_plain_run(self):
        runs = _group("intro", "1. first")
        assert [type(run) for run in runs] == [PlainRun, MarkerRun]

    def test_leading_and_trailing_blanks(self):
        runs = _group("", "text", "", "")
        assert len(runs) == 1


class TestHeadingRuns:
    def test_heading_is_its_own_run(self):
        runs = _group("## Title", "a. x")
        assert isinstance(runs[0], HeadingRun)
        assert runs[0].line.text == "Title"
        assert isinstance(runs[1], MarkerRun)

    def test_heading_closes_marker_run(self):
        runs = _group("a. x", "# Break", "b. y")
        assert [type(run) for run in runs] == [MarkerRun, HeadingRun, MarkerRun]

    def test_heading_closes_plain_run(self):
        runs = _group("text", "# Title", "more")
        assert [type(run) for run in runs] == [PlainRun, HeadingRun, PlainRun]


class TestNumberRunLimit:
    def test_run_closes_at_marker_width(self):
        runs = _group("999999999. a", "999999999. b")
        assert len(runs) == 2

    def test_run_extends_up_to_the_limit(self):
        runs = _group("999999998. a", "7. b", "8. c")
        assert [len(run.lines) for run in runs] == [2, 1]

    def test_alpha_runs_are_unbounded(self):
        runs = _group(*[f"{letter}. x" for letter in "abcdefghijklmnopqrstuvwxyzab"])
        assert len(runs) == 1
