import math

import numpy as np

from asciirender.model import Cell, GlyphAlphabet


def brightness(r: int, g: int, b: int) -> float:
    """Unweighted channel mean in [0, 255], not perceptual luminance."""
    return (r + g + b) / 3


def glyph_index(value: float, length: int) -> int:
    index = math.floor((value / 255) * (length - 1))
    return min(max(index, 0), length - 1)


def map_to_glyph(cell: Cell, alphabet: GlyphAlphabet) -> str:
    return alphabet[glyph_index(brightness(*cell), len(alphabet))]


def map_grid(grid: np.ndarray, alphabet: GlyphAlphabet) -> np.ndarray:
    """Glyph indices for a (rows, cols, 3) colour grid.

    Performs the same float64 operations in the same order as
    :func:`glyph_index`, so both paths agree on every cell.
    """
    # Sum in int64 first so uint8 channels cannot overflow
    totals = grid.astype(np.int64).sum(axis=-1)
    values = totals.astype(np.float64) / 3
    indices = np.floor((values / 255) * (len(alphabet) - 1)).astype(np.int64)
    return np.clip(indices, 0, len(alphabet) - 1)
