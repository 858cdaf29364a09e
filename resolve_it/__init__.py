"""resolve_it: resolve image encoding requests into encoding descriptors."""

__version__ = "0.1.0"

from resolve_it.core import (
    DEFAULT_JPEG_QUALITY,
    FORMAT_NAMES,
    EncodingDescriptor,
    FormatKind,
    UnknownFormatError,
    cache_key,
    extension,
    identity_key,
    output_filename,
    resolve,
)

__all__ = [
    "__version__",
    "DEFAULT_JPEG_QUALITY",
    "FORMAT_NAMES",
    "EncodingDescriptor",
    "FormatKind",
    "UnknownFormatError",
    "cache_key",
    "extension",
    "identity_key",
    "output_filename",
    "resolve",
]
