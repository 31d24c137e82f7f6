"""Turn rendered glyph grids into text.

Colour markup lives only here: a :class:`~asciirender.model.RenderedArt` is
structured data and every textual form of it, plain or annotated, comes out
of :func:`serialize` with a swappable formatter.
"""

import html
import re
from typing import Protocol

from asciirender.errors import RenderError, UnknownFormatError
from asciirender.model import GlyphCell, RenderedArt

DEFAULT_EXPORT_NAME = "ascii-art.txt"

_TAG_RE = re.compile(r"<[^>]*>")
_ANSI_RE = re.compile(r"\033\[[0-9;]*m")


class Formatter(Protocol):
    def format_glyph(self, cell: GlyphCell) -> str:
        """Text for one output position."""
        ...

    def end_row(self, row: tuple[GlyphCell, ...]) -> str:
        """Text closing a row, emitted before the line break."""
        ...


class PlainFormatter:
    def format_glyph(self, cell: GlyphCell) -> str:
        return cell.char

    def end_row(self, row: tuple[GlyphCell, ...]) -> str:
        return ""


class HtmlFormatter:
    """Wrap each glyph in a span coloured with the cell's sampled RGB."""

    def format_glyph(self, cell: GlyphCell) -> str:
        char = html.escape(cell.char, quote=False)
        if cell.colour is None:
            return char
        r, g, b = cell.colour
        return f'<span style="color: rgb({r}, {g}, {b})">{char}</span>'

    def end_row(self, row: tuple[GlyphCell, ...]) -> str:
        return ""


class AnsiFormatter:
    """Truecolor foreground escapes for terminals."""

    def format_glyph(self, cell: GlyphCell) -> str:
        if cell.colour is None:
            return cell.char
        r, g, b = cell.colour
        return f"\033[38;2;{r};{g};{b}m{cell.char}"

    def end_row(self, row: tuple[GlyphCell, ...]) -> str:
        # Reset only rows that switched colour
        if any(cell.colour is not None for cell in row):
            return "\033[0m"
        return ""


FORMATTERS: dict[str, type] = {
    "html": HtmlFormatter,
    "ansi": AnsiFormatter,
}


def get_formatter(name: str) -> Formatter:
    try:
        return FORMATTERS[name]()
    except KeyError:
        raise UnknownFormatError(f"Unknown format {name!r} (expected one of: {', '.join(FORMATTERS)})") from None


def serialize(art: RenderedArt, preserve_color: bool, formatter: Formatter | None = None) -> str:
    """Join the grid into text, one line per row.

    Every row, the last included, ends with a newline. Without
    ``preserve_color`` the output is always plain glyphs; with it the given
    formatter (HTML spans by default) annotates each glyph, which needs art
    rendered with its colours kept.
    """
    if preserve_color and not art.colour_preserved:
        raise RenderError("Art was rendered without colour; render again with preserve_color")
    if not preserve_color:
        formatter = PlainFormatter()
    elif formatter is None:
        formatter = HtmlFormatter()

    out = []
    for row in art.cells:
        parts = [formatter.format_glyph(cell) for cell in row]
        parts.append(formatter.end_row(row))
        parts.append("\n")
        out.append("".join(parts))
    return "".join(out)


def export_text(art: RenderedArt) -> str:
    """Plain-text variant for saving to a file."""
    return serialize(art, preserve_color=False)


def strip_markup(text: str) -> str:
    """Remove HTML tags and ANSI escapes from colour-annotated output.

    Only meant for output produced with colour preserved: in plain output
    glyphs such as ``<`` are literal text and would be mistaken for tags.
    """
    if _ANSI_RE.search(text):
        # ANSI output carries glyphs unescaped
        return _ANSI_RE.sub("", text)
    return html.unescape(_TAG_RE.sub("", text))
