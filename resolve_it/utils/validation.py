"""Utilities for input validation."""

import argparse
import functools
import os

# Inclusive bounds of a quality value
MIN_QUALITY = 1
MAX_QUALITY = 100


def check_quality(quality):
    """Check that an optional quality is an integer within [1, 100].

    An out of range quality is a caller bug rather than bad user input, so it
    fails with AssertionError instead of a recoverable error.

    Args:
        quality: Quality value or None

    Raises:
        AssertionError: If quality is not None and not an int in range
    """
    if quality is None:
        return

    if isinstance(quality, bool) or not isinstance(quality, int):
        raise AssertionError(f"Quality must be an integer, got {quality!r}")

    if not MIN_QUALITY <= quality <= MAX_QUALITY:
        raise AssertionError(
            f"Quality must be within the range [{MIN_QUALITY}; {MAX_QUALITY}], "
            f"got {quality}"
        )


def validate_quality_range(func):
    """Decorator to validate quality is within valid range (1-100)."""

    @functools.wraps(func)
    def wrapper(content_is_lossy_safe, format_name, quality=None):
        check_quality(quality)
        return func(content_is_lossy_safe, format_name, quality)

    return wrapper


def parse_quality(value):
    """Parse a quality given on the command line.

    Args:
        value: String from the command line. Empty or "lossless" means no quality.

    Returns:
        int or None: Parsed quality

    Raises:
        argparse.ArgumentTypeError: If the value is not an integer in [1, 100]
    """
    if value is None or value.strip().lower() in ("", "lossless"):
        return None

    try:
        quality = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Quality must be an integer, got {value!r}")

    if not MIN_QUALITY <= quality <= MAX_QUALITY:
        raise argparse.ArgumentTypeError(
            f"Quality must be between {MIN_QUALITY} and {MAX_QUALITY}, got {quality}"
        )

    return quality


def validate_input_files(files):
    """Validate that a list of input files exist.

    Args:
        files: List of file paths to validate

    Returns:
        list: List of existing files

    Raises:
        FileNotFoundError: If any file doesn't exist
    """
    missing = []
    for file_path in files:
        if not os.path.isfile(file_path):
            missing.append(file_path)

    if missing:
        raise FileNotFoundError(f"Files not found: {', '.join(missing)}")

    return files
