# apps/cli/filter.py
"""
One-shot CLI: print the Wordle words that still fit what you know.

This script:
  1) Reads the word list once and logs its diagnostics (flags non 5-letter lines).
  2) Builds a CandidateFilter from it.
  3) Applies --exclude, then --correct, then each --incorrect pattern in order.
  4) Prints the surviving words, one per line.

Usage:
    python -m apps.cli.filter wordle.list -e rsn -c ".a..." -i "..e.. t...."
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from packages.engine import CandidateFilter
from packages.wordlists import pretty_summary, read_words, validate_words

DEFAULT_WORDLIST = "wordle.list"

log = logging.getLogger(__name__)


def add_logging_args(ap: argparse.ArgumentParser, *, default_log=sys.stderr) -> None:
    """-q/-v/-D volume switches and -l/--log, shared with the editor."""
    logs = ap.add_argument_group("Logging")
    logs.add_argument("-l", "--log", type=argparse.FileType("w"), default=default_log,
                      help="write log messages to this file (overwritten)")
    volume = logs.add_mutually_exclusive_group()
    volume.add_argument("-q", "--quiet", dest="volume", action="store_const",
                        const=logging.CRITICAL, default=logging.WARNING)
    volume.add_argument("-v", "--verbose", dest="volume", action="store_const",
                        const=logging.INFO)
    volume.add_argument("-D", "--debug", dest="volume", action="store_const",
                        const=logging.DEBUG)


def configure_logging(args: argparse.Namespace) -> None:
    if args.log is None:
        # No destination: swallow records instead of writing to the terminal
        logging.basicConfig(handlers=[logging.NullHandler()], level=args.volume, force=True)
        return
    logging.basicConfig(stream=args.log, level=args.volume,
                        format="%(levelname)s: %(message)s", force=True)


def close_logging(args: argparse.Namespace) -> None:
    """Flush the root handlers and close a -l/--log file opened by argparse."""
    root = logging.getLogger()
    for h in list(root.handlers):
        h.flush()
        root.removeHandler(h)
    if args.log not in (None, sys.stderr, sys.stdout):
        args.log.close()


def load_filter(path: str) -> CandidateFilter:
    """
    Load `path` into a fresh CandidateFilter and log its diagnostics.

    The file is read once; the validator works on the words already read.
    Raises FileNotFoundError if the word list is missing.
    """
    words = read_words(path)
    rep = validate_words(words, path=path)
    log.info(pretty_summary(rep))
    for issue in rep["issues"]:
        log.warning("%s: %s", path, issue)

    log.info("Read %d words from %s", len(words), path)
    return CandidateFilter(words)


def split_patterns(incorrect: str) -> List[str]:
    """
    Split the --incorrect argument into patterns, one per earlier guess.

    Patterns are separated by single spaces. Empty pieces (doubled, leading
    or trailing spaces, or an empty argument) are dropped with a warning.
    """
    pieces = incorrect.split(" ")
    patterns = [p for p in pieces if p]
    if len(patterns) != len(pieces):
        log.warning("incorrect letters: ignored %d empty pattern(s) in %r",
                    len(pieces) - len(patterns), incorrect)
    return patterns


def run_filters(
        words: CandidateFilter,
        *,
        exclude: Optional[str],
        correct: Optional[str],
        incorrect: Optional[str],
) -> int:
    """
    Apply the constraints in CLI order; bad patterns are logged and skipped.
    Returns the number of patterns rejected.
    """
    patterns = split_patterns(incorrect) if incorrect is not None else []
    skipped = words.apply(exclude=exclude, correct=correct, incorrect=patterns,
                          skip_errors=True)
    for field, e in skipped:
        log.error("%s letters: %s", field, e)
    return len(skipped)


def make_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Display possible Wordle words")
    ap.add_argument("filename", nargs="?", default=DEFAULT_WORDLIST,
                    help=f"file with the list of possible Wordle words (default: {DEFAULT_WORDLIST})")
    ap.add_argument("-e", "--exclude",
                    help="exclude words with these letters")
    ap.add_argument("-c", "--correct",
                    help="letters in the correct position, '.' for those not yet known")
    ap.add_argument("-i", "--incorrect",
                    help="letters in incorrect positions, '.' for those not yet known; "
                         "one pattern per guess as \"xxxxx yyyyy zzzzz\"")
    add_logging_args(ap)
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = make_argparser().parse_args(argv)
    configure_logging(args)
    try:
        try:
            words = load_filter(args.filename)
        except FileNotFoundError as e:
            log.error("word list not found: %s", e)
            return 1

        run_filters(words, exclude=args.exclude, correct=args.correct, incorrect=args.incorrect)
        log.info("%d possible word(s)", len(words))

        for w in words.get_word_list():
            print(w)
        return 0
    finally:
        close_logging(args)


if __name__ == "__main__":
    sys.exit(main())
