from __future__ import annotations
from pathlib import Path
from typing import Iterable, List


def parse_words(text: str) -> List[str]:
    """
    One word per line: lines are stripped of surrounding whitespace and blank
    lines dropped. Order, duplicates and letter case are kept.
    """
    return [ln.strip() for ln in text.splitlines() if ln.strip()]


def read_words(p: Path | str) -> List[str]:
    """
    Read a UTF-8 word list (see parse_words).
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return parse_words(p.read_text(encoding="utf-8"))


def write_words(words: Iterable[str], p: Path | str) -> str:
    """
    Write words to a UTF-8 text file, one per line, with a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(words) + "\n", encoding="utf-8")
    return str(p)
