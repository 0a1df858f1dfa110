# src/wordheat/core/counter.py
from collections import Counter

from wordheat.utils.tokenizer import Tokenizer

def get_word_counts(content: str) -> Counter:
    """
    Tallies case-insensitive occurrences of every word in content.
    Keys are lower-cased; text without any word yields an empty Counter.
    """
    return Counter(word.lower() for word in Tokenizer.words(content))
