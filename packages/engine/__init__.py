from .constraints import CandidateFilter
from .validation import PatternLengthError, WILDCARD, WORD_LENGTH, check_pattern

__all__ = ["CandidateFilter", "PatternLengthError", "WILDCARD", "WORD_LENGTH", "check_pattern"]
