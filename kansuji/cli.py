"""
CLI interface for kansuji.

Usage:
    kansuji 12345            # list every numeral form of 12345
    kansuji 百二十万          # read a Kanji numeral
    kansuji --suffix 三十五個
    kansuji --json 255
"""

import argparse
import json
import logging
import sys
from typing import List

from kansuji import __version__, convert, normalize
from kansuji.number_types import NormalizedNumber, NumberString
from kansuji.variations import is_decimal_number


# ============================================================================
# Output Formatting
# ============================================================================

def format_forms(forms: List[NumberString]) -> str:
    """One form per line: value, description, style."""
    return "\n".join(f"{s.value}\t{s.description}\t{s.style.name}" for s in forms)


def format_forms_json(forms: List[NumberString]) -> str:
    data = [
        {"value": s.value, "description": s.description, "style": s.style.name}
        for s in forms
    ]
    return json.dumps(data, ensure_ascii=False, indent=2)


def format_normalized(result: NormalizedNumber) -> str:
    fields = [result.kanji, result.arabic]
    if result.suffix:
        fields.append(result.suffix)
    return "\t".join(fields)


def format_normalized_json(result: NormalizedNumber) -> str:
    return json.dumps(result._asdict(), ensure_ascii=False, indent=2)


# ============================================================================
# Main
# ============================================================================

def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="kansuji",
        description="Japanese numeral transcription",
    )
    parser.add_argument(
        "text",
        nargs="?",
        help="Arabic number to convert, or Kanji numeral to read",
    )
    parser.add_argument(
        "--forms", "-f",
        action="store_true",
        help="Always list numeral forms of an Arabic number",
    )
    parser.add_argument(
        "--trim", "-t",
        action="store_true",
        help="Trim leading zeros when reading a Kanji numeral",
    )
    parser.add_argument(
        "--suffix", "-s",
        action="store_true",
        help="Allow trailing non-numeral text when reading a Kanji numeral",
    )
    parser.add_argument(
        "--json", "-j",
        action="store_true",
        help="Output as JSON",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log why an input was rejected",
    )
    parser.add_argument(
        "--version", "-v",
        action="version",
        version=f"kansuji {__version__}",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(levelname)s - %(message)s',
    )

    if args.text is None:
        # Read from stdin
        text = sys.stdin.read().strip()
    else:
        text = args.text

    if not text:
        parser.print_help()
        sys.exit(1)

    try:
        if args.forms or is_decimal_number(text):
            forms = convert(text)
            if not forms:
                print(f"Error: no numeral forms for {text!r}", file=sys.stderr)
                sys.exit(1)
            print(format_forms_json(forms) if args.json else format_forms(forms))
            return

        result = normalize(text, trim_leading_zeros=args.trim, allow_suffix=args.suffix)
        if result is None:
            print(f"Error: not a valid numeral: {text!r}", file=sys.stderr)
            sys.exit(1)
        print(format_normalized_json(result) if args.json else format_normalized(result))

    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
