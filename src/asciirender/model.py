from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

DEFAULT_ALPHABET = "Standard"
DEFAULT_COLUMNS = 100


class Cell(NamedTuple):
    r: int
    g: int
    b: int


@dataclass(frozen=True)
class Dimensions:
    columns: int
    rows: int

    @property
    def cell_count(self) -> int:
        return self.columns * self.rows


@dataclass(frozen=True)
class GlyphAlphabet:
    """Ordered glyphs from darkest/densest (index 0) to lightest/sparsest."""

    name: str
    glyphs: str

    def __post_init__(self):
        if not self.glyphs:
            raise ValueError(f"Alphabet {self.name!r} has no glyphs")

    def __len__(self) -> int:
        return len(self.glyphs)

    def __getitem__(self, index: int) -> str:
        return self.glyphs[index]


@dataclass(frozen=True)
class GlyphCell:
    char: str
    colour: Cell | None = None  # original sampled colour, kept only when colour is preserved


@dataclass(frozen=True)
class RenderOptions:
    alphabet: str | GlyphAlphabet = DEFAULT_ALPHABET
    columns: int = DEFAULT_COLUMNS
    preserve_color: bool = False


@dataclass(frozen=True)
class RenderedArt:
    dimensions: Dimensions
    alphabet: GlyphAlphabet
    cells: tuple[tuple[GlyphCell, ...], ...]

    @property
    def lines(self) -> list[str]:
        """Glyph rows without any colour information."""
        return ["".join(cell.char for cell in row) for row in self.cells]

    @property
    def colour_preserved(self) -> bool:
        return any(cell.colour is not None for row in self.cells for cell in row)
