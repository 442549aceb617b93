"""Unit tests for match highlighting."""

from docnav.application.highlight import highlight_html, highlight_spans


def test_spans_are_case_insensitive_and_non_overlapping() -> None:
    assert highlight_spans("UserUser", "user") == [(0, 4), (4, 8)]
    assert highlight_spans("aaaa", "aa") == [(0, 2), (2, 4)]


def test_no_spans_without_text_or_query() -> None:
    assert highlight_spans("", "a") == []
    assert highlight_spans("abc", "") == []
    assert highlight_spans(None, "a") == []
    assert highlight_spans("abc", "z") == []


def test_html_marks_matches_and_escapes_everything() -> None:
    html = highlight_html("find(List<User>)", "user")
    assert html == "find(List&lt;<mark>User</mark>&gt;)"


def test_html_without_match_is_just_escaped() -> None:
    assert highlight_html("a<b", "zz") == "a&lt;b"
    assert highlight_html(None, "zz") == ""


def test_spans_index_the_original_text_when_lowercasing_changes_length() -> None:
    text = "İxUser"
    spans = highlight_spans(text, "user")

    assert [text[start:end] for start, end in spans] == ["User"]
    assert highlight_html(text, "user") == "İx<mark>User</mark>"


def test_query_is_matched_literally() -> None:
    assert highlight_spans("get(a.b)", "a.b") == [(4, 7)]
    assert highlight_spans("axb", "a.b") == []
