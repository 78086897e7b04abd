"""Command-line interface for validating XYZ files."""

import argparse
import logging
import sys
from typing import List, Optional

from tqdm import tqdm

from ..domain.errors import XYZParseError
from ..io.xyz_reader import XYZReader


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.ERROR,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler() if verbose else logging.NullHandler()],
        force=True,
    )


def setup_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(description="Validate XYZ geometry files")
    parser.add_argument("files", nargs="+", help="XYZ files to validate")
    parser.add_argument(
        "--progress", action="store_true", help="Show a progress bar"
    )
    parser.add_argument("--verbose", action="store_true", help="Show detailed output")
    return parser


def validate_file(path: str) -> bool:
    """
    Parse a single file and report the outcome on stdout.

    Args:
        path: Path to the XYZ file

    Returns:
        True if the file parsed successfully
    """
    try:
        molecule = XYZReader.read(path)
    except (XYZParseError, UnicodeDecodeError, OSError) as e:
        logging.error(f"Error validating {path}: {e}")
        message = e.message if isinstance(e, XYZParseError) else str(e)
        print(f"FAIL {path}: {message}")
        return False

    print(f"OK {path}: {molecule.atom_count} atoms")
    return True


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the XYZ validation CLI."""
    parser = setup_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    files = tqdm(args.files, desc="Validating files") if args.progress else args.files
    results = [validate_file(path) for path in files]

    failures = results.count(False)
    logging.info(f"Validated {len(results)} files, {failures} failed")
    return 0 if failures == 0 else 1


if __name__ == "__main__":
    sys.exit(main())
