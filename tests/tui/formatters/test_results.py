from docnav.domain.types import SearchCategory, TypeSegment
from docnav.presentation.formatters import format_result_label, format_section_header, format_type_segments
from docnav.presentation.formatters.results import EXTERNAL_STYLE, MATCH_STYLE
from tests.conftest import field_entry, method_entry, type_entry


def matched_text(text) -> list[str]:
    return [text.plain[span.start : span.end] for span in text.spans if span.style == MATCH_STYLE]


def test_section_header_uses_plural_label():
    assert format_section_header(SearchCategory.ANNOTATION).plain == "Annotations"


def test_type_label_shows_badge_and_package():
    label = format_result_label(type_entry(SearchCategory.INTERFACE, "com.acme.repo.Repository"))
    assert label.plain == " I  Repository  com.acme.repo"


def test_method_label_shows_signature_owner_and_return_type():
    entry = method_entry("com.acme.repo.Repository", "findById", "long", "Optional<T>")
    label = format_result_label(entry)
    assert label.plain == " M  findById(long)  com.acme.repo.Repository : Optional<T>"


def test_field_label_shows_declared_type():
    label = format_result_label(field_entry("com.acme.model.User", "status", "Status"))
    assert label.plain.endswith("com.acme.model.User : Status")


def test_every_match_is_highlighted_case_insensitively():
    entry = type_entry(SearchCategory.CLASS, "com.acme.model.UserUser")
    label = format_result_label(entry, "user")
    assert matched_text(label) == ["User", "User"]


def test_context_is_never_highlighted():
    label = format_result_label(type_entry(SearchCategory.CLASS, "com.acme.Widget"), "acme")
    assert matched_text(label) == []


def test_type_segments_links_carry_click_action():
    text = format_type_segments(
        [
            TypeSegment.link("List", "com.acme.util.List"),
            TypeSegment.literal("<"),
            TypeSegment.external("Object"),
            TypeSegment.literal(">"),
        ]
    )

    assert text.plain == "List<Object>"
    link_span = next(span for span in text.spans if text.plain[span.start : span.end] == "List")
    assert link_span.style.meta["@click"] == "app.show_type('com.acme.util.List')"
    external_span = next(span for span in text.spans if text.plain[span.start : span.end] == "Object")
    assert external_span.style == EXTERNAL_STYLE


def test_type_segments_without_link_action():
    text = format_type_segments([TypeSegment.link("User", "com.acme.model.User")], link_action=None)
    assert text.spans[0].style.meta == {}
