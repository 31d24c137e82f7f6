import logging
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from asciirender.charsets import get_alphabet
from asciirender.density import map_grid
from asciirender.errors import InvalidImageError
from asciirender.formatters import Formatter, serialize
from asciirender.model import (
    DEFAULT_ALPHABET,
    DEFAULT_COLUMNS,
    Cell,
    Dimensions,
    GlyphAlphabet,
    GlyphCell,
    RenderedArt,
    RenderOptions,
)
from asciirender.sampling import sample

logger = logging.getLogger(__name__)


def load_image(path: str | Path) -> Image.Image:
    """Decode an image file. Frames after the first are ignored."""
    try:
        image = Image.open(path)
        image.load()
    except FileNotFoundError:
        raise
    except (UnidentifiedImageError, OSError) as e:
        raise InvalidImageError(f"Cannot read image: {path} ({e})") from e
    return image


def _resolve_alphabet(alphabet: str | GlyphAlphabet) -> GlyphAlphabet:
    if isinstance(alphabet, GlyphAlphabet):
        return alphabet
    return get_alphabet(alphabet)


def render(image: Image.Image, options: RenderOptions) -> RenderedArt:
    alphabet = _resolve_alphabet(options.alphabet)
    grid = sample(image, options.columns)
    rows, cols = grid.shape[:2]
    logger.debug("Rendering %dx%d image as %d columns x %d rows (%s)", image.width, image.height, cols, rows, alphabet.name)

    indices = map_grid(grid, alphabet)
    cells = []
    for r in range(rows):
        row = []
        for c in range(cols):
            colour = None
            if options.preserve_color:
                colour = Cell(int(grid[r, c, 0]), int(grid[r, c, 1]), int(grid[r, c, 2]))
            row.append(GlyphCell(alphabet[int(indices[r, c])], colour))
        cells.append(tuple(row))

    return RenderedArt(dimensions=Dimensions(columns=cols, rows=rows), alphabet=alphabet, cells=tuple(cells))


def image_to_ascii(
    image: Image.Image | str | Path,
    alphabet: str | GlyphAlphabet = DEFAULT_ALPHABET,
    columns: int = DEFAULT_COLUMNS,
    preserve_color: bool = False,
    formatter: Formatter | None = None,
) -> str:
    if not isinstance(image, Image.Image):
        image = load_image(image)
    options = RenderOptions(alphabet=alphabet, columns=columns, preserve_color=preserve_color)
    return serialize(render(image, options), preserve_color, formatter)
