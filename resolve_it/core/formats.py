"""Encoding descriptors for resolved image formats."""

import enum
import struct
from dataclasses import dataclass
from typing import Optional

from resolve_it.utils.validation import check_quality


class FormatKind(enum.Enum):
    """Image formats an encoding descriptor can select."""

    JPEG = "jpeg"
    PNG = "png"
    WEBP = "webp"
    JXL = "jxl"


# File extensions for each format, kept in sync with output_filename
FORMAT_EXTENSIONS = {
    FormatKind.JPEG: "jpg",
    FormatKind.PNG: "png",
    FormatKind.WEBP: "webp",
    FormatKind.JXL: "jxl",
}

# Whether a format takes a quality: "required", "optional" (None = lossless) or "none"
QUALITY_MODES = {
    FormatKind.JPEG: "required",
    FormatKind.PNG: "none",
    FormatKind.WEBP: "optional",
    FormatKind.JXL: "optional",
}

# Identity bands as (lossless value, quality base). Quality keys are base + quality,
# so every band must stay clear of the next one over the whole 1-100 range.
IDENTITY_BANDS = {
    FormatKind.PNG: (0, None),
    FormatKind.JPEG: (None, 1001),
    FormatKind.WEBP: (2000, 2001),
    FormatKind.JXL: (3000, 3001),
}


@dataclass(frozen=True)
class EncodingDescriptor:
    """A resolved image format together with its quality setting.

    ``quality`` is an integer in [1, 100]. For WebP and JPEG XL a ``None``
    quality means lossless; JPEG always carries one and PNG never does.
    Equality compares kind and quality, and the hash is derived from
    :func:`identity_key`, so descriptors can be used directly as cache keys.
    """

    kind: FormatKind
    quality: Optional[int] = None

    def __post_init__(self):
        if not isinstance(self.kind, FormatKind):
            raise AssertionError(f"Unknown format kind: {self.kind!r}")

        check_quality(self.quality)

        mode = QUALITY_MODES[self.kind]
        if mode == "required" and self.quality is None:
            raise AssertionError(f"{self.kind.value} requires a quality value")
        if mode == "none" and self.quality is not None:
            raise AssertionError(f"{self.kind.value} does not take a quality value")

    def __hash__(self):
        return hash(identity_key(self))

    def __str__(self):
        if self.kind is FormatKind.PNG:
            return self.kind.value
        if self.quality is None:
            return f"{self.kind.value}(lossless)"
        return f"{self.kind.value}(q={self.quality})"

    @classmethod
    def jpeg(cls, quality):
        return cls(FormatKind.JPEG, quality)

    @classmethod
    def png(cls):
        return cls(FormatKind.PNG)

    @classmethod
    def webp(cls, quality=None):
        return cls(FormatKind.WEBP, quality)

    @classmethod
    def jxl(cls, quality=None):
        return cls(FormatKind.JXL, quality)

    @property
    def extension(self):
        return extension(self)


def extension(descriptor):
    """Get the file extension (without dot) for a descriptor.

    The extension only depends on the format, never on the quality.

    Args:
        descriptor: Resolved EncodingDescriptor

    Returns:
        str: File extension
    """
    return FORMAT_EXTENSIONS[descriptor.kind]


def identity_key(descriptor):
    """Build the stable identity key of a descriptor.

    The format and quality are folded into a single 16-bit band value, then
    the extension bytes are appended as a second discriminator.

    Args:
        descriptor: Resolved EncodingDescriptor

    Returns:
        bytes: Key that is unique for every distinct descriptor
    """
    lossless_band, quality_base = IDENTITY_BANDS[descriptor.kind]

    if descriptor.quality is None:
        band = lossless_band
    else:
        band = quality_base + descriptor.quality

    return struct.pack(">H", band) + extension(descriptor).encode("ascii")


def is_lossless(descriptor):
    """Check whether a descriptor encodes without quality loss."""
    if descriptor.kind is FormatKind.JPEG:
        return False
    return descriptor.quality is None
