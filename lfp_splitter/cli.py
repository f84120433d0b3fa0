"""
Command-line interface for lfp-splitter.
"""

import argparse
import logging
import sys
from pathlib import Path

from .layout import InsufficientSectionsError, LFPFormatError
from .reader import LFPReader, write_outputs
from .utilities import BYTEORDERS, output_prefix


def main(argv=None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        prog="lfp-splitter",
        description="Split a light-field picture (.lfp) into metadata, depth table and JPEG images"
    )

    parser.add_argument(
        "file_path",
        help="Path to the .lfp file to split"
    )

    parser.add_argument(
        "--output-dir",
        type=str,
        help="Directory for the extracted files (default: next to the input)"
    )

    parser.add_argument(
        "--byteorder",
        choices=BYTEORDERS,
        default="little",
        help="Byte order of the depth table samples (default: little)"
    )

    parser.add_argument(
        "--info",
        action="store_true",
        help="List the sections instead of writing files"
    )

    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail if the file ends in a truncated section"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show debug logging"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    reader = LFPReader(strict=args.strict, byteorder=args.byteorder)
    try:
        container = reader.read_file(args.file_path)
    except FileNotFoundError:
        print(f"Failed to open file {args.file_path}", file=sys.stderr)
        return 1
    except LFPFormatError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Failed to open file {args.file_path}: {e}", file=sys.stderr)
        return 1

    if args.info:
        print_info(container)
        return 0

    if args.output_dir:
        try:
            Path(args.output_dir).mkdir(parents=True, exist_ok=True)
        except OSError as e:
            print(f"Error: cannot create output directory {args.output_dir}: {e}", file=sys.stderr)
            return 1
    prefix = output_prefix(args.file_path, args.output_dir)

    try:
        results = write_outputs(container, prefix, args.byteorder)
    except InsufficientSectionsError:
        print(f"Something went wrong, no images found in {args.file_path}", file=sys.stderr)
        return 1

    status = 0
    for name, ok in results:
        if ok:
            print(f"Saved {name}")
        else:
            print(f"Failed to save {name}", file=sys.stderr)
            status = 1
    return status


def print_info(container):
    """Print the section table."""
    print("\n=== SECTIONS ===")
    for i, section in enumerate(container):
        print(
            f"{i:3d}  type={section.type_name!r:8} length={section.length:<10d} "
            f"offset={section.offset:<10d} sha1={section.sha1}"
        )
    print(f"Sections: {len(container)}")
    if container.truncated:
        print(f"Unconsumed bytes: {container.unconsumed} ({container.stop_reason})")


if __name__ == "__main__":
    sys.exit(main())
