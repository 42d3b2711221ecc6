"""
Build the word list the filter CLI and editor read (wordle.list by default).

Sources are allowed-guess lists, given as local files or http(s) URLs; HTML
pages are reduced to their visible text. Every alphabetic run of exactly
WORD_LENGTH letters becomes a candidate, lowercased unless --keep-case (the
constraint patterns are lowercase). Words found in any --exclude source,
e.g. a list of past answers, are left out. The merged list keeps first-seen
order, has no duplicates, and is checked with validate_words before anything
is written: a failing list is reported and the output file left alone.

Usage:
    python -m script.build_wordlist allowed.txt --out wordle.list
    python -m script.build_wordlist https://example.org/allowed.txt \
        --exclude past_answers.txt --sort
"""

import argparse
import logging
import re
import sys
from typing import Iterable, List, Optional, Tuple

import requests
from bs4 import BeautifulSoup  # pip install beautifulsoup4 requests

from packages.engine import WORD_LENGTH
from packages.wordlists import pretty_summary, validate_words, write_words

TOKEN_RE = re.compile(r"[A-Za-z]+")

log = logging.getLogger(__name__)


def load_source(src: str) -> str:
    """Text of a local file or an http(s) URL (HTML reduced to visible text)."""
    if not src.startswith(("http://", "https://")):
        with open(src, encoding="utf-8") as f:
            return f.read()

    r = requests.get(src, timeout=30)
    r.raise_for_status()
    if "html" in r.headers.get("Content-Type", ""):
        return BeautifulSoup(r.text, "html.parser").get_text("\n", strip=True)
    return r.text


def candidate_words(text: str, *, N: int = WORD_LENGTH,
                    lowercase: bool = True) -> Tuple[List[str], int]:
    """
    Alphabetic runs of exactly N letters from `text`, in order.

    Returns (words, dropped) where dropped counts the runs of any other length.
    """
    words: List[str] = []
    dropped = 0
    for tok in TOKEN_RE.findall(text):
        if len(tok) != N:
            dropped += 1
            continue
        words.append(tok.lower() if lowercase else tok)
    return words, dropped


def build_wordlist(texts: Iterable[str], exclude_texts: Iterable[str] = (), *,
                   N: int = WORD_LENGTH, lowercase: bool = True,
                   sort: bool = False) -> List[str]:
    """Merge the source texts into one deduplicated list minus the excluded words."""
    excluded = set()
    for text in exclude_texts:
        excluded.update(candidate_words(text, N=N, lowercase=lowercase)[0])

    merged = {}
    for text in texts:
        words, dropped = candidate_words(text, N=N, lowercase=lowercase)
        if dropped:
            log.info("skipped %d token(s) that are not %d letters", dropped, N)
        for w in words:
            if w not in excluded:
                merged.setdefault(w, None)

    out = list(merged)
    return sorted(out) if sort else out


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Build a Wordle word list from allowed-guess lists")
    ap.add_argument("sources", nargs="+", help="allowed-guess lists (files or URLs)")
    ap.add_argument("--exclude", action="append", default=[],
                    help="file or URL of words to leave out (repeatable)")
    ap.add_argument("--out", default="wordle.list")
    ap.add_argument("--keep-case", action="store_true", help="don't lowercase words")
    ap.add_argument("--sort", action="store_true",
                    help="sort alphabetically instead of keeping source order")
    args = ap.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    words = build_wordlist(
        [load_source(s) for s in args.sources],
        [load_source(s) for s in args.exclude],
        lowercase=not args.keep_case,
        sort=args.sort,
    )

    rep = validate_words(words, path=args.out)
    log.info(pretty_summary(rep))
    if not rep["passed"]:
        for issue in rep["issues"]:
            log.error("%s: %s", args.out, issue)
        log.error("not writing %s", args.out)
        return 1

    write_words(words, args.out)
    log.info("Wrote %d words -> %s", len(words), args.out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
