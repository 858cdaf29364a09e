"""Utilities for inspecting source images."""

import os
import struct

# Pillow format names of sources that were already lossy-compressed
LOSSY_SOURCE_FORMATS = {"JPEG", "MPO"}


def get_source_format(image_path):
    """Get the Pillow format name of an image, reading only its header.

    Args:
        image_path: Path to the image

    Returns:
        str: Format name such as "JPEG" or "PNG"

    Raises:
        FileNotFoundError: If the image does not exist
        PIL.UnidentifiedImageError: If the file is not a readable image
    """
    from PIL import Image

    if not os.path.isfile(image_path):
        raise FileNotFoundError(f"Input file not found: {image_path}")

    with Image.open(image_path) as img:
        return img.format


def _is_lossy_webp(image_path):
    """Walk the RIFF chunks of a WebP file and report whether its bitstream is lossy."""
    with open(image_path, "rb") as f:
        header = f.read(12)
        if len(header) < 12 or header[:4] != b"RIFF" or header[8:12] != b"WEBP":
            return False

        while True:
            chunk_header = f.read(8)
            if len(chunk_header) < 8:
                return False

            fourcc = chunk_header[:4]
            if fourcc == b"VP8 ":
                return True
            if fourcc == b"VP8L":
                return False
            if fourcc == b"ANMF":
                # Frame header, then the frame's own chunks
                f.seek(16, os.SEEK_CUR)
                continue

            # Chunks are padded to an even size
            (size,) = struct.unpack("<I", chunk_header[4:])
            f.seek(size + (size & 1), os.SEEK_CUR)


def is_lossy_source(image_path):
    """Check whether an image was stored with a lossy format.

    Re-encoding such an image lossily does not lose much, which makes it the
    usual signal for picking JPEG over PNG with the "auto" format.

    Args:
        image_path: Path to the image

    Returns:
        bool: True for JPEG and lossy WebP sources
    """
    source_format = get_source_format(image_path)

    if source_format in LOSSY_SOURCE_FORMATS:
        return True
    if source_format == "WEBP":
        return _is_lossy_webp(image_path)
    return False
