"""
Command-line interface for MediYap.

    mediyap hypoglycemia tachycardia      # decode each argument
    mediyap                               # interactive mode
    mediyap --breakdown nephritis         # show the morpheme spans too
    mediyap --check-lexicon --lexicon my_lexicon.yaml
"""

import argparse
import json
import sys
from typing import List, Optional, TextIO

from .decoder import MedicalDecoder
from .lexicon import Lexicon, load_document
from .log import configure_logging, get_logger
from .validator import LexiconError, LexiconValidator

logger = get_logger(__name__)

BANNER = [
    "MediYap - Interactive Mode",
    "Enter medical terms to decode (Ctrl+D or Ctrl+C to exit):",
    "",
]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mediyap",
        description="Decode medical terms into plain English",
    )
    parser.add_argument(
        "terms",
        nargs="*",
        help="Terms to decode (interactive mode when none are given)",
    )
    parser.add_argument(
        "--lexicon",
        metavar="FILE",
        help="YAML lexicon to use instead of the built-in one",
    )
    parser.add_argument(
        "--breakdown",
        action="store_true",
        help="Also print the morpheme spans of each term",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print one JSON document per term",
    )
    parser.add_argument(
        "--show-unmatched",
        action="store_true",
        help="Keep unrecognized text in the phrase as [text]",
    )
    parser.add_argument(
        "--check-lexicon",
        action="store_true",
        help="Lint the lexicon and exit",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Log level for diagnostics on stderr (default: WARNING)",
    )
    return parser


def format_breakdown(decoder: MedicalDecoder, term: str) -> List[str]:
    lines = []
    for morpheme in decoder.segment(term):
        meaning = morpheme.meaning if morpheme.meaning is not None else "?"
        lines.append(f"  {morpheme.kind.value:10s} {morpheme.spelling:12s} {meaning}")
    return lines


def decode_terms(decoder: MedicalDecoder, terms: List[str], out: TextIO,
                 breakdown: bool = False, as_json: bool = False) -> None:
    """Print one `<term>: <phrase>` line per term."""
    for term in terms:
        if as_json:
            print(json.dumps(decoder.explain(term), ensure_ascii=False), file=out)
            continue
        print(f"{term}: {decoder.decode(term)}", file=out)
        if breakdown:
            for line in format_breakdown(decoder, term):
                print(line, file=out)


def run_interactive(decoder: MedicalDecoder, stdin: TextIO, out: TextIO,
                    breakdown: bool = False) -> None:
    """Read terms line by line until end of input or Ctrl+C."""
    for line in BANNER:
        print(line, file=out)

    try:
        while True:
            print("> ", end="", file=out, flush=True)
            line = stdin.readline()
            if not line:
                break
            term = line.strip()
            if not term:
                continue
            print(f"→ {decoder.decode(term)}", file=out)
            if breakdown:
                for row in format_breakdown(decoder, term):
                    print(row, file=out)
            print(file=out)
    except KeyboardInterrupt:
        pass
    except (OSError, UnicodeDecodeError) as e:
        logger.error("read_failed", error=str(e))

    print(file=out)


def check_lexicon(path: Optional[str], out: TextIO) -> int:
    """Lint a lexicon file; returns 1 if it has schema errors."""
    data = load_document(path)
    warnings = LexiconValidator().lint(data)
    for warning in warnings:
        print(warning, file=out)

    if any(w.startswith("SCHEMA_ERROR") for w in warnings):
        return 1

    print(Lexicon.from_dict(data).summary(), file=out)
    return 0


def main(argv: Optional[List[str]] = None, stdin: Optional[TextIO] = None,
         stdout: Optional[TextIO] = None) -> int:
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        if args.check_lexicon:
            return check_lexicon(args.lexicon, stdout)

        lexicon = Lexicon.from_file(args.lexicon) if args.lexicon else None
    except LexiconError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    decoder = MedicalDecoder(lexicon, show_unmatched=args.show_unmatched)

    if args.terms:
        decode_terms(decoder, args.terms, stdout, breakdown=args.breakdown, as_json=args.json)
    else:
        run_interactive(decoder, stdin, stdout, breakdown=args.breakdown)
    return 0


if __name__ == "__main__":
    sys.exit(main())
