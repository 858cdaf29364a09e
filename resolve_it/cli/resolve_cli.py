"""CLI commands for resolving output formats."""

import os
import sys

from tqdm import tqdm

from resolve_it.core.formats import extension, identity_key, is_lossless
from resolve_it.core.naming import output_filename
from resolve_it.core.resolver import UnknownFormatError, resolve
from resolve_it.utils.image import is_lossy_source
from resolve_it.utils.validation import validate_input_files


def _stem(image_path):
    return os.path.splitext(os.path.basename(image_path))[0]


def run_resolve(args):
    """Resolve a single format request and print the result.

    Args:
        args: Parsed command-line arguments

    Returns:
        int: Exit code (0 for success, non-zero for error)
    """
    content_is_lossy_safe = args.lossy
    parts = []

    if args.input:
        try:
            content_is_lossy_safe = is_lossy_source(args.input)
        except OSError as e:
            print(f"Error reading {args.input}: {e}", file=sys.stderr)
            return 1

        parts.append(os.path.abspath(args.input))

        if args.verbose:
            kind = "lossy" if content_is_lossy_safe else "lossless"
            print(f"Source image {args.input} is {kind}")

    try:
        descriptor = resolve(content_is_lossy_safe, args.format, args.quality)
    except UnknownFormatError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.stem:
        stem = args.stem
    elif args.input:
        stem = _stem(args.input)
    else:
        stem = "output"

    print(f"Format: {descriptor}")
    print(f"  Extension: {extension(descriptor)}")
    print(f"  Lossless: {'yes' if is_lossless(descriptor) else 'no'}")
    print(f"  Identity key: {identity_key(descriptor).hex()}")
    print(f"  Output file: {output_filename(stem, descriptor, *parts)}")

    return 0


def run_batch(args):
    """Resolve output file names for several images.

    Args:
        args: Parsed command-line arguments

    Returns:
        int: Exit code (0 if every image was resolved, 1 otherwise)
    """
    try:
        validate_input_files(args.images)
        # Fail early on an unknown format rather than once per image
        resolve(False, args.format, args.quality)
    except (FileNotFoundError, UnknownFormatError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    failures = 0

    for image_path in tqdm(args.images, desc=f"{args.format}: resolving"):
        try:
            content_is_lossy_safe = is_lossy_source(image_path)
        except OSError as e:
            tqdm.write(f"Error processing {image_path}: {e}", file=sys.stderr)
            failures += 1
            continue

        descriptor = resolve(content_is_lossy_safe, args.format, args.quality)

        output_dir = args.output_dir or os.path.dirname(image_path)
        output_path = os.path.join(
            output_dir,
            output_filename(_stem(image_path), descriptor, os.path.abspath(image_path)),
        )

        if args.verbose:
            tqdm.write(f"{image_path}: {descriptor}")
        tqdm.write(output_path)

    resolved = len(args.images) - failures
    print(f"\nResolved {resolved} of {len(args.images)} images.")

    return 1 if failures else 0
