from pathlib import Path
import pytest
from packages.wordlists import (
    parse_words, pretty_summary, read_words, validate_wordlist, validate_words, write_words,
)


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_read_words_strips_and_drops_blanks(tmp_path: Path):
    p = tmp_path / "wordle.list"
    p.write_text("crane\n  Slate \r\n\ncrane\nabc\n", encoding="utf-8")
    # no case change, duplicates and odd lengths kept
    assert read_words(p) == ["crane", "Slate", "crane", "abc"]


def test_read_words_missing(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        read_words(tmp_path / "nope.list")


def test_write_then_read(tmp_path: Path):
    out = write_words(["crane", "slate"], tmp_path / "sub" / "w.list")
    assert Path(out).read_text(encoding="utf-8") == "crane\nslate\n"
    assert read_words(out) == ["crane", "slate"]


def test_validate_wordlist_happy_path(tmp_path: Path):
    p = tmp_path / "wordle.list"
    _write(p, ["crane", "raise", "stare"])

    rep = validate_wordlist(str(p))
    assert rep["passed"] is True
    assert rep["count"] == 3 and rep["valid"] == 3 and rep["invalid_lines"] == 0
    assert len(rep["sha256"]) == 64
    s = pretty_summary(rep)
    assert "N=5" in s and "words=3" in s and s.endswith("OK")


def test_validate_wordlist_flags_invalid_lines(tmp_path: Path):
    p = tmp_path / "wordle.list"
    p.write_text("crane\nraiser\n?????\nabc\n", encoding="utf-8")

    rep = validate_wordlist(str(p))
    assert rep["passed"] is False
    assert rep["invalid_lines"] == 3
    assert any("not 5 letters" in msg for msg in rep["issues"])
    assert pretty_summary(rep).endswith("FAIL")


def test_validate_wordlist_duplicates_do_not_fail(tmp_path: Path):
    p = tmp_path / "wordle.list"
    _write(p, ["crane", "crane", "stare"])

    rep = validate_wordlist(str(p))
    assert rep["passed"] is True
    assert rep["unique_count"] == 2
    assert any("duplicate" in msg for msg in rep["issues"])


def test_validate_wordlist_missing_file(tmp_path: Path):
    rep = validate_wordlist(str(tmp_path / "nope.list"))
    assert rep["exists"] is False and rep["passed"] is False
    assert any("not found" in msg for msg in rep["issues"])


def test_validate_wordlist_other_length(tmp_path: Path):
    p = tmp_path / "six.list"
    _write(p, ["raiser", "planet"])
    assert validate_wordlist(str(p), N=6)["passed"] is True
    assert validate_wordlist(str(p))["passed"] is False


def test_validate_words_without_reading_a_file():
    rep = validate_words(["crane", "Slate", "abc", "crane"], path="wordle.list")
    assert rep["path"] == "wordle.list"
    assert rep["count"] == 4 and rep["invalid_lines"] == 1 and rep["unique_count"] == 3
    assert rep["sha256"] == "" and rep["passed"] is False
    assert validate_words([])["passed"] is False


def test_validate_wordlist_matches_validate_words(tmp_path: Path):
    p = tmp_path / "wordle.list"
    p.write_text("crane\n\n slate \n", encoding="utf-8")
    from_file = validate_wordlist(str(p))
    from_words = validate_words(parse_words(p.read_text(encoding="utf-8")), path=str(p),
                                sha256=from_file["sha256"])
    assert from_file == from_words
