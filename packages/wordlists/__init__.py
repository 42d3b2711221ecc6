from .validator import validate_wordlist, validate_words, pretty_summary
from .io import parse_words, read_words, write_words

__all__ = ["validate_wordlist", "validate_words", "pretty_summary",
           "parse_words", "read_words", "write_words"]
