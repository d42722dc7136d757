"""Test the legacy definition-list rewrite."""

from bs4 import BeautifulSoup

from m2h import m2h
from m2h.legacy import replace_old_dl


def test_simple_definition():
    assert replace_old_dl("- Term\n- : Definition\n") == "Term\n:   Definition\n"


def test_blank_lines_between_term_and_definition():
    assert replace_old_dl("- Term\n\n- : Definition\n") == "Term\n:   Definition\n"


def test_indentation_is_dropped():
    assert replace_old_dl("  - Term\n  - : Definition\n") == "Term\n:   Definition\n"


def test_blockquote_markers_are_kept():
    assert replace_old_dl("> - Term\n> - : Definition\n") == "> Term\n> :   Definition\n"


def test_multiple_definitions():
    text = "- `alpha`\n- : First letter.\n- `beta`\n- : Second letter.\n"

    assert replace_old_dl(text) == "`alpha`\n:   First letter.\n`beta`\n:   Second letter.\n"


def test_only_term_definition_pairs_are_rewritten():
    text = "- one\n- two\n\n- : three\n"

    assert replace_old_dl("- one\n- two\n") == "- one\n- two\n"
    assert replace_old_dl(text) == "- one\ntwo\n:   three\n"


def test_renders_as_definition_list():
    html = m2h("- Term\n- : Definition\n")
    soup = BeautifulSoup(html, "html.parser")

    assert soup.find("dl") is not None
    assert soup.find("dt").get_text() == "Term"
    assert soup.find("dd").get_text().strip() == "Definition"
    assert soup.find("ul") is None
