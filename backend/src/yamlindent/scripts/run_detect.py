#!/usr/bin/env python3
import sys
import argparse
import logging
from datetime import datetime

from yamlindent.core.detect_indentation import detect_indentation_bytes
from yamlindent.core.errors import IndentationDetectionError
from yamlindent.connection import submit_record
from yamlindent.utils.constants import MIN_INDENTATION

log = logging.getLogger(__name__)

NO_INDENTATION = "none"


def detect_file(
    input_file: str | None = None,
    yaml_bytes: bytes | None = None,
    verbose: bool = False,
) -> int | None:
    """
    Detect the indentation of a YAML file or byte string.

    Args:
        input_file: Path to the YAML file. If None, yaml_bytes must be provided.
        yaml_bytes: Raw YAML document. If None, input_file must be provided.
        verbose: Whether to show progress updates on stderr.

    Returns:
        The number of spaces per indentation level, or None when the document
        has no indentation signal.

    Raises:
        FileNotFoundError: If the input file is not found.
        OSError: If the input file cannot be read.
        IndentationDetectionError: If the document is invalid YAML, is not
            UTF-8 or is indented with tabs.
    """
    if yaml_bytes is None:
        if input_file is None:
            raise ValueError("Either input_file or yaml_bytes must be provided.")
        try:
            with open(input_file, "rb") as f:
                yaml_bytes = f.read()
        except FileNotFoundError:
            raise FileNotFoundError(f"Input file '{input_file}' not found")
        except OSError as e:
            raise OSError(f"Error reading input file '{input_file}': {e.strerror or e}") from e

    in_time = datetime.now()
    if verbose:
        print("Detecting indentation...", file=sys.stderr)

    spaces = None
    error = None
    try:
        indentation = detect_indentation_bytes(yaml_bytes)
        spaces = indentation.spaces if indentation is not None else None
        return spaces
    except IndentationDetectionError as e:
        error = f"{type(e).__name__}: {e}"
        raise
    finally:
        _record_detection(yaml_bytes, in_time, spaces, error)


def _record_detection(yaml_bytes: bytes, in_time: datetime, spaces, error):
    try:
        submit_record(
            table="detections",
            in_yaml=yaml_bytes.decode("utf-8", errors="replace"),
            in_time=in_time,
            spaces=spaces,
            error=error,
        )
    except Exception as e:
        log.error("Error submitting record (non-critical): %s", e)


def main(argv: list[str] | None = None):
    """Detect YAML indentation from the command line."""
    parser = argparse.ArgumentParser(
        description="yamlindent - YAML indentation detector"
    )

    parser.add_argument(
        "-i",
        "--input-file",
        required=True,
        help="Path to the YAML file. Use '-' to read from stdin.",
    )

    parser.add_argument(
        "--fallback",
        type=int,
        default=None,
        help="Number of spaces to print when no indentation is detected or detection fails.",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show progress updates during detection.",
    )

    args = parser.parse_args(argv)
    if args.fallback is not None and args.fallback < MIN_INDENTATION:
        parser.error(f"--fallback must be at least {MIN_INDENTATION}")

    yaml_bytes = None
    input_file = args.input_file
    if args.input_file == "-":
        yaml_bytes = sys.stdin.buffer.read()
        input_file = None

    try:
        spaces = detect_file(
            input_file=input_file,
            yaml_bytes=yaml_bytes,
            verbose=args.verbose,
        )
    except (IndentationDetectionError, OSError) as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        if args.fallback is None:
            sys.exit(1)
        spaces = args.fallback

    if spaces is None:
        print(args.fallback if args.fallback is not None else NO_INDENTATION)
    else:
        print(spaces)


if __name__ == "__main__":
    main()
