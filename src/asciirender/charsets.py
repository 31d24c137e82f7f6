from types import MappingProxyType

from asciirender.errors import UnknownAlphabetError
from asciirender.model import GlyphAlphabet

# Each alphabet runs from densest glyph (dark) to sparsest (bright)
STANDARD = "@%#*+=-:. "

COMPLEX = "$@B%8&WM#*oahkbdpqwmZO0QLCJUYXzcvunxrjft/\\|()1{}[]?-_+~<>i!lI;:,\"^`'. "

# Block elements: full block, dark/medium/light shade
SIMPLE = "█▓▒░ "

MINIMAL = "10 "

ALPHABETS = MappingProxyType(
    {
        name: GlyphAlphabet(name, glyphs)
        for name, glyphs in (
            ("Standard", STANDARD),
            ("Complex", COMPLEX),
            ("Simple", SIMPLE),
            ("Minimal", MINIMAL),
        )
    }
)


def alphabet_names() -> list[str]:
    return list(ALPHABETS)


def get_alphabet(name: str) -> GlyphAlphabet:
    try:
        return ALPHABETS[name]
    except KeyError:
        raise UnknownAlphabetError(
            f"Unknown alphabet {name!r} (expected one of: {', '.join(ALPHABETS)})"
        ) from None
