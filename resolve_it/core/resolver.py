"""Resolve a requested output format into an encoding descriptor."""

from resolve_it.core.formats import EncodingDescriptor
from resolve_it.utils.validation import validate_quality_range

# Quality used for JPEG when none is given. WebP and JPEG XL have no default,
# a missing quality means lossless for them.
DEFAULT_JPEG_QUALITY = 75

# Format names understood by resolve(), matched exactly
FORMAT_NAMES = ("auto", "jpeg", "jpg", "png", "webp", "jxl")


class UnknownFormatError(ValueError):
    """Raised when a format name is not one of FORMAT_NAMES."""

    def __init__(self, format_name):
        self.format_name = format_name
        super().__init__(f"Invalid image format: {format_name}")


@validate_quality_range
def resolve(content_is_lossy_safe, format_name, quality=None):
    """Resolve a format request into an encoding descriptor.

    Args:
        content_is_lossy_safe: Whether lossy compression is acceptable for the
            content. Only consulted for the "auto" format.
        format_name: One of FORMAT_NAMES
        quality: Optional quality (1-100). Ignored for PNG.

    Returns:
        EncodingDescriptor: The resolved descriptor

    Raises:
        UnknownFormatError: If format_name is not recognized
        AssertionError: If quality is outside [1, 100]
    """
    jpeg_quality = DEFAULT_JPEG_QUALITY if quality is None else quality

    if format_name == "auto":
        if content_is_lossy_safe:
            return EncodingDescriptor.jpeg(jpeg_quality)
        return EncodingDescriptor.png()

    elif format_name in ("jpeg", "jpg"):
        return EncodingDescriptor.jpeg(jpeg_quality)

    elif format_name == "png":
        return EncodingDescriptor.png()

    elif format_name == "webp":
        return EncodingDescriptor.webp(quality)

    elif format_name == "jxl":
        return EncodingDescriptor.jxl(quality)

    raise UnknownFormatError(format_name)
