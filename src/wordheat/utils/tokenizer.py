# src/wordheat/utils/tokenizer.py
import re
from typing import List

# Counting and rendering use independent patterns; they may disagree on edge cases.
WORD_PATTERN = re.compile(r"\b\w+\b", re.ASCII)
SPLIT_PATTERN = re.compile(r"(\W+)", re.ASCII)
WHITESPACE_PATTERN = re.compile(r"\s+")
NON_WORD_PATTERN = re.compile(r"\W+", re.ASCII)

class Tokenizer:

    @staticmethod
    def words(text: str) -> List[str]:
        """Returns every word-character run in text, in order of appearance."""
        # findall gives [] rather than None when nothing matches
        return WORD_PATTERN.findall(text)

    @staticmethod
    def split_line(line: str) -> List[str]:
        """
        Splits a line into alternating word and non-word tokens.
        Empty strings produced at the edges of the split are kept.
        """
        return SPLIT_PATTERN.split(line)

    @staticmethod
    def is_whitespace(token: str) -> bool:
        return WHITESPACE_PATTERN.fullmatch(token) is not None

    @staticmethod
    def is_punctuation(token: str) -> bool:
        """True for a non-empty token made only of non-word characters."""
        return NON_WORD_PATTERN.fullmatch(token) is not None
