"""
Word-list validator.

What this module does:
- Check a word source (e.g. wordle.list) before it is handed to the engine.
- Flag lines that are not N alphabetic characters; the positional filters
  drop such words, so they are worth knowing about up front.
- Count duplicates (the engine keeps them) and compute SHA-256 of the raw file.
- Return a machine-readable dict and provide a pretty one-line summary.

Typical use:
    from packages.wordlists import validate_wordlist, pretty_summary
    rep = validate_wordlist("wordle.list")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, Iterable, List
import hashlib

from packages.engine import WORD_LENGTH

from .io import parse_words


@dataclass
class WordListReport:
    """Diagnostics and metadata for one word source."""
    path: str            # file path (as given)
    N: int               # expected word length
    exists: bool         # did the file exist on disk?
    count: int           # number of non-blank lines (what the engine receives)
    valid: int           # lines that are exactly N alphabetic characters
    unique_count: int    # distinct words among the non-blank lines
    invalid_lines: int   # lines with the wrong length or non-letters
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    passed: bool
    issues: List[str] = field(default_factory=list)


def _invalid(words: Iterable[str], N: int) -> List[str]:
    """
    Words that are not exactly N alphabetic characters.

    Case is not checked; the engine compares letters as given.
    """
    return [w for w in words if len(w) != N or not w.isalpha()]


def validate_words(words: List[str], N: int = WORD_LENGTH, *,
                   path: str = "", sha256: str = "") -> Dict:
    """
    Validate words already read from a word source (see io.read_words).

    Returns
    -------
    Dict
        JSON-serializable WordListReport. `passed` requires at least one word
        and no invalid lines. Duplicates are reported in `issues` but do not
        fail the check.
    """
    issues: List[str] = []
    invalid = _invalid(words, N)
    unique_count = len(set(words))

    if not words:
        issues.append("word list contains 0 words")
    if invalid:
        # Show a few examples; a bad file can have thousands
        issues.append(f"{len(invalid)} line(s) are not {N} letters (e.g., {invalid[:5]})")
    if unique_count != len(words):
        issues.append(f"{len(words) - unique_count} duplicate line(s)")

    rep = WordListReport(
        path=path,
        N=N,
        exists=True,
        count=len(words),
        valid=len(words) - len(invalid),
        unique_count=unique_count,
        invalid_lines=len(invalid),
        sha256=sha256,
        passed=bool(words) and not invalid,
        issues=issues,
    )
    return asdict(rep)


def validate_wordlist(path: str, N: int = WORD_LENGTH) -> Dict:
    """
    Validate a word file for length-N words; never raises for a missing file.

    The file is read once: the SHA-256 is taken over the raw bytes and the
    words are parsed from the same bytes.
    """
    p = Path(path)
    if not p.exists():
        issues = [f"word list not found: {path}"]
        return asdict(WordListReport(str(path), N, False, 0, 0, 0, 0, "", False, issues))

    data = p.read_bytes()
    words = parse_words(data.decode("utf-8"))
    return validate_words(words, N, path=str(p), sha256=hashlib.sha256(data).hexdigest())


def pretty_summary(report: Dict) -> str:
    """
    Compact, human-friendly one-liner for logs.

    Example:
        wordle.list | N=5 | words=2315 (uniq=2315, invalid=0, sha=abc123def456) | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"{report['path']} | N={report['N']} | words={report['count']} "
        f"(uniq={report['unique_count']}, invalid={report['invalid_lines']}, sha={sha}) "
        f"| {status}"
    )
