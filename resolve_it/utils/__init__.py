"""Utility functions for resolve_it."""

# Import key functions to make them available at the utils package level
from resolve_it.utils.image import get_source_format, is_lossy_source

from resolve_it.utils.validation import (
    check_quality,
    validate_quality_range,
    parse_quality,
    validate_input_files,
)

# Define what's available when doing "from resolve_it.utils import *"
__all__ = [
    # Image utilities
    "get_source_format",
    "is_lossy_source",
    # Validation utilities
    "check_quality",
    "validate_quality_range",
    "parse_quality",
    "validate_input_files",
]
