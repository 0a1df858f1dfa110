# src/wordheat/core/colorizer.py
from colorama import Style

from wordheat.config import RARE_MAX_COUNT, COMMON_MAX_COUNT
from wordheat.models import Category, RARE, COMMON, FREQUENT

def select_category(count: int) -> Category:
    """Maps an occurrence count to its frequency bucket."""
    if count == RARE_MAX_COUNT:
        return RARE
    if RARE_MAX_COUNT < count <= COMMON_MAX_COUNT:
        return COMMON
    # Words missing from the counts (count 0) also land here
    return FREQUENT

def color_word(word: str, count: int) -> str:
    if not word:
        return word
    return f"{select_category(count).color}{word}{Style.RESET_ALL}"
