"""Output file naming for resolved descriptors."""

import hashlib
import struct

from resolve_it.core.formats import extension, identity_key

# Number of hex digits of the cache key used in file names
FILENAME_KEY_LENGTH = 16


def cache_key(descriptor, *parts):
    """Compute a stable cache key for a descriptor and related inputs.

    Unlike ``hash()``, the result is the same across processes and runs, so it
    can be written to disk.

    Args:
        descriptor: Resolved EncodingDescriptor
        *parts: Extra inputs (str or bytes) that identify the content, such as
            the source path or resize operation

    Returns:
        str: Hex SHA-256 digest
    """
    digest = hashlib.sha256()

    # Length-prefix every chunk so ("ab", "c") and ("a", "bc") differ
    for chunk in (identity_key(descriptor), *parts):
        if isinstance(chunk, str):
            chunk = chunk.encode("utf-8")
        digest.update(struct.pack(">I", len(chunk)))
        digest.update(chunk)

    return digest.hexdigest()


def output_filename(stem, descriptor, *parts):
    """Build the output file name for an encoded image.

    Args:
        stem: Base name of the output file
        descriptor: Resolved EncodingDescriptor
        *parts: Extra inputs passed on to cache_key

    Returns:
        str: File name in the form ``{stem}.{key}.{extension}``
    """
    key = cache_key(descriptor, *parts)[:FILENAME_KEY_LENGTH]
    return f"{stem}.{key}.{extension(descriptor)}"
