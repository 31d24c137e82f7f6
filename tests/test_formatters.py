import re

import pytest

from asciirender.errors import RenderError, UnknownFormatError
from asciirender.formatters import (
    AnsiFormatter,
    HtmlFormatter,
    export_text,
    get_formatter,
    serialize,
    strip_markup,
)
from asciirender.model import Cell, Dimensions, GlyphAlphabet, GlyphCell, RenderedArt

_SPAN_RE = re.compile(r'<span style="color: rgb\((\d+), (\d+), (\d+)\)">([^<]*)</span>')


def make_art(rows, colours=None):
    """Build RenderedArt from glyph rows and an optional matching grid of colours."""
    cells = []
    for r, line in enumerate(rows):
        cells.append(tuple(GlyphCell(char, colours[r][c] if colours else None) for c, char in enumerate(line)))
    return RenderedArt(
        dimensions=Dimensions(columns=len(rows[0]), rows=len(rows)),
        alphabet=GlyphAlphabet("test", "@<& "),
        cells=tuple(cells),
    )


COLOURS = [
    [Cell(255, 0, 0), Cell(0, 255, 0)],
    [Cell(1, 2, 3), Cell(250, 251, 252)],
]


def test_plain_rows_each_end_with_newline():
    art = make_art(["@ ", " @"])
    assert serialize(art, preserve_color=False) == "@ \n @\n"


def test_plain_ignores_formatter():
    art = make_art(["@ ", " @"], COLOURS)
    assert serialize(art, preserve_color=False, formatter=AnsiFormatter()) == "@ \n @\n"


def test_html_is_default_colour_markup():
    art = make_art(["@&"], [COLOURS[0]])
    assert serialize(art, preserve_color=True) == (
        '<span style="color: rgb(255, 0, 0)">@</span>'
        '<span style="color: rgb(0, 255, 0)">&amp;</span>\n'
    )


def test_html_escapes_markup_characters():
    art = make_art(["<&"], [COLOURS[0]])
    text = serialize(art, preserve_color=True)
    assert "&lt;" in text
    assert "&amp;" in text
    assert "<&" not in text


def test_html_colour_round_trip():
    art = make_art(["@ ", "<&"], COLOURS)
    text = serialize(art, preserve_color=True, formatter=HtmlFormatter())
    lines = text.split("\n")[:-1]
    for r, line in enumerate(lines):
        found = [Cell(int(m[1]), int(m[2]), int(m[3])) for m in _SPAN_RE.finditer(line)]
        assert found == COLOURS[r]


def test_ansi_colour_markup():
    art = make_art(["@ "], [COLOURS[0]])
    text = serialize(art, preserve_color=True, formatter=AnsiFormatter())
    assert text == "\033[38;2;255;0;0m@\033[38;2;0;255;0m \033[0m\n"


def test_one_line_per_row_with_colour():
    art = make_art(["@ ", " @"], COLOURS)
    text = serialize(art, preserve_color=True)
    assert text.count("\n") == 2
    assert text.endswith("\n")


@pytest.mark.parametrize("name", ["html", "ansi"])
def test_strip_markup_matches_export(name):
    art = make_art(["@<", "& "], COLOURS)
    annotated = serialize(art, preserve_color=True, formatter=get_formatter(name))
    assert strip_markup(annotated) == export_text(art) == "@<\n& \n"


def test_export_text_has_no_markup():
    art = make_art(["@ ", " @"], COLOURS)
    assert export_text(art) == "@ \n @\n"


def test_lines_property_drops_colour():
    art = make_art(["@<", "& "], COLOURS)
    assert art.lines == ["@<", "& "]
    assert art.colour_preserved
    assert not make_art(["@<"]).colour_preserved


def test_unknown_format():
    with pytest.raises(UnknownFormatError):
        get_formatter("rtf")


_ANSI_GLYPH_RE = re.compile(r"\033\[38;2;(\d+);(\d+);(\d+)m(.)")


def test_ansi_colour_round_trip():
    art = make_art(["@ ", "<&"], COLOURS)
    text = serialize(art, preserve_color=True, formatter=AnsiFormatter())
    lines = text.split("\n")[:-1]
    for r, line in enumerate(lines):
        found = [(Cell(int(m[1]), int(m[2]), int(m[3])), m[4]) for m in _ANSI_GLYPH_RE.finditer(line)]
        assert found == list(zip(COLOURS[r], art.lines[r]))


def test_colour_requested_for_uncoloured_art():
    art = make_art(["@<", "& "])
    with pytest.raises(RenderError, match="without colour"):
        serialize(art, preserve_color=True)


def test_ansi_reset_only_after_coloured_rows():
    art = make_art(["@ ", " @"], [COLOURS[0], [None, None]])
    text = serialize(art, preserve_color=True, formatter=AnsiFormatter())
    first, second = text.split("\n")[:2]
    assert first.endswith("\033[0m")
    assert second == " @"
