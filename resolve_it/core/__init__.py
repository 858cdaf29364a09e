"""Core functionality for resolve_it."""

from resolve_it.core.formats import (
    FormatKind,
    EncodingDescriptor,
    extension,
    identity_key,
    is_lossless,
)

from resolve_it.core.resolver import (
    DEFAULT_JPEG_QUALITY,
    FORMAT_NAMES,
    UnknownFormatError,
    resolve,
)

from resolve_it.core.naming import cache_key, output_filename

# Define what's available when doing "from resolve_it.core import *"
__all__ = [
    # Descriptors
    "FormatKind",
    "EncodingDescriptor",
    "extension",
    "identity_key",
    "is_lossless",
    # Resolution
    "DEFAULT_JPEG_QUALITY",
    "FORMAT_NAMES",
    "UnknownFormatError",
    "resolve",
    # Output naming
    "cache_key",
    "output_filename",
]
