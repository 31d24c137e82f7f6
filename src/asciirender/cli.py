import argparse
import logging
import sys
from pathlib import Path

from asciirender.charsets import alphabet_names
from asciirender.converter import load_image, render
from asciirender.errors import RenderError
from asciirender.formatters import DEFAULT_EXPORT_NAME, FORMATTERS, export_text, get_formatter, serialize
from asciirender.model import DEFAULT_ALPHABET, DEFAULT_COLUMNS, RenderOptions

MIN_COLUMNS = 20
MAX_COLUMNS = 200

logger = logging.getLogger(__name__)


def _columns(value: str) -> int:
    try:
        columns = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}") from None
    if not MIN_COLUMNS <= columns <= MAX_COLUMNS:
        raise argparse.ArgumentTypeError(f"must be between {MIN_COLUMNS} and {MAX_COLUMNS}, got {columns}")
    return columns


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render an image as ASCII art")
    parser.add_argument("image", help="Path to input image")
    parser.add_argument(
        "-s",
        "--size",
        type=_columns,
        default=DEFAULT_COLUMNS,
        help=f"Output width in columns, {MIN_COLUMNS}-{MAX_COLUMNS} (default: {DEFAULT_COLUMNS})",
    )
    parser.add_argument(
        "-a",
        "--alphabet",
        default=DEFAULT_ALPHABET,
        choices=alphabet_names(),
        help=f"Glyph alphabet to use (default: {DEFAULT_ALPHABET})",
    )
    parser.add_argument("-c", "--colour", action="store_true", default=False, help="Keep each cell's colour")
    parser.add_argument(
        "-f",
        "--format",
        default="ansi",
        choices=sorted(FORMATTERS),
        help="Colour markup used with --colour (default: ansi)",
    )
    parser.add_argument(
        "-o",
        "--output",
        nargs="?",
        const=DEFAULT_EXPORT_NAME,
        default=None,
        help=f"Also save plain text to this file (default name: {DEFAULT_EXPORT_NAME})",
    )
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Log debug output")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    image_path = Path(args.image)
    if not image_path.is_file():
        print(f"File not found: {image_path}", file=sys.stderr)
        return 1

    options = RenderOptions(alphabet=args.alphabet, columns=args.size, preserve_color=args.colour)
    try:
        art = render(load_image(image_path), options)
    except RenderError as e:
        print(f"Cannot render {image_path}: {e}", file=sys.stderr)
        return 1

    sys.stdout.write(serialize(art, args.colour, get_formatter(args.format)))

    if args.output is not None:
        output = Path(args.output)
        output.write_text(export_text(art), encoding="utf-8")
        logger.info("Saved plain text to %s", output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
