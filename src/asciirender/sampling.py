import numpy as np
from PIL import Image

from asciirender.errors import InvalidDimensionError, InvalidImageError
from asciirender.model import Cell, Dimensions


def compute_dimensions(width: int, height: int, columns: int) -> Dimensions:
    """Work out the character grid for an image, preserving its aspect ratio.

    Rows are ``floor(columns * height / width)``, never fewer than one. Integer
    arithmetic keeps the floor exact for every size.
    """
    if width <= 0 or height <= 0:
        raise InvalidImageError(f"Image has no area: {width}x{height}")
    if isinstance(columns, bool) or not isinstance(columns, (int, np.integer)) or columns <= 0:
        raise InvalidDimensionError(f"Column count must be a positive integer, got {columns!r}")
    rows = max(1, columns * height // width)
    return Dimensions(columns=int(columns), rows=int(rows))


def sample(image: Image.Image, columns: int) -> np.ndarray:
    """Down-sample an image to one RGB triple per output character.

    Each cell is the box-filter average of the block of source pixels it
    covers. Returns a uint8 array of shape (rows, columns, 3).
    """
    dims = compute_dimensions(image.width, image.height, columns)
    rgb = image.convert("RGB")
    resized = rgb.resize((dims.columns, dims.rows), Image.Resampling.BOX)
    return np.asarray(resized, dtype=np.uint8).reshape(dims.rows, dims.columns, 3)


def cell_at(grid: np.ndarray, row: int, col: int) -> Cell:
    r, g, b = grid[row, col]
    return Cell(int(r), int(g), int(b))
