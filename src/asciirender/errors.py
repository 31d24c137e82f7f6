class RenderError(ValueError):
    """Base class for input validation failures raised by the render pipeline."""


class InvalidImageError(RenderError):
    """The source image has no area or could not be read."""


class InvalidDimensionError(RenderError):
    """The requested column count is not a positive integer."""


class UnknownAlphabetError(RenderError, LookupError):
    """No glyph alphabet is registered under the requested name."""


class UnknownFormatError(RenderError, LookupError):
    """No colour formatter is registered under the requested name."""
