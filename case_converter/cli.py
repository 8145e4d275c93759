#!/usr/bin/env python3
"""Command-line interface for the case converters."""

import argparse
import sys
import traceback
from collections.abc import Iterable

from case_converter.converter import PRESETS, ConverterPreset, get_preset
from case_converter.errors import CaseConversionError

# Exit codes for better error reporting
EXIT_SUCCESS = 0
EXIT_INVALID_INPUT = 1

DEFAULT_PRESET = "camel-strict"


def parse_command_line_args(args: list[str] | None = None) -> argparse.Namespace:
    """Create and configure the command line argument parser."""
    parser = argparse.ArgumentParser(
        description="Convert strings to camelCase, kebab-case or dot.case",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s "Robin Hood"
  %(prog)s --preset dot "Robin Hood" "Terestial Animal001"
  cat names.txt | %(prog)s --preset kebab --keep-going
        """,
    )
    parser.add_argument(
        "texts",
        nargs="*",
        help="Strings to convert; read one per line from stdin when omitted",
        metavar="TEXT",
    )
    parser.add_argument(
        "--preset",
        "-p",
        choices=sorted(PRESETS),
        default=DEFAULT_PRESET,
        help="Converter to apply (default: %(default)s)",
    )
    parser.add_argument(
        "--keep-going",
        "-k",
        action="store_true",
        help="Report invalid inputs and continue with the remaining ones",
        dest="keep_going",
    )
    parser.add_argument(
        "--list-presets",
        action="store_true",
        help="List the available converters and exit",
        dest="list_presets",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output",
    )

    return parser.parse_args(args)


def print_presets() -> None:
    """Print every preset with its description."""
    width = max(len(name) for name in PRESETS)
    for name in sorted(PRESETS):
        print(f"{name:<{width}}  {PRESETS[name].description}")


def read_stdin_lines() -> list[str]:
    """Read input values from stdin, one per line."""
    return [line.rstrip("\r\n") for line in sys.stdin]


def convert_all(preset: ConverterPreset, texts: Iterable[str], *, keep_going: bool, verbose: bool) -> int:
    """Convert each text and print the result, returning the exit code."""
    exit_code = EXIT_SUCCESS
    for text in texts:
        try:
            print(preset(text))
        except CaseConversionError as e:
            print(f"Error: {text!r}: {e}", file=sys.stderr)
            if verbose:
                traceback.print_exc()
            if not keep_going:
                return EXIT_INVALID_INPUT
            exit_code = EXIT_INVALID_INPUT
    return exit_code


def main(args: list[str] | None = None) -> int:
    """Convert the given strings with the selected preset."""
    parsed_args = parse_command_line_args(args)

    if parsed_args.list_presets:
        print_presets()
        return EXIT_SUCCESS

    preset = get_preset(parsed_args.preset)
    if parsed_args.verbose:
        print(f"Using preset {preset.name}: {preset.description}", file=sys.stderr)

    texts = parsed_args.texts or read_stdin_lines()
    return convert_all(
        preset,
        texts,
        keep_going=parsed_args.keep_going,
        verbose=parsed_args.verbose,
    )


if __name__ == "__main__":
    sys.exit(main())
