# src/wordheat/core/renderer.py
from typing import Mapping

from wordheat.config import MAX_LINES
from wordheat.core.colorizer import color_word
from wordheat.utils.tokenizer import Tokenizer

def render_line(line: str, word_counts: Mapping[str, int]) -> str:
    """
    Colors every word of a line by its frequency.
    Pure whitespace is kept as is; any other run of non-word characters
    collapses to a single space.
    """
    rendered = []
    for token in Tokenizer.split_line(line):
        if Tokenizer.is_whitespace(token):
            rendered.append(token)
        elif Tokenizer.is_punctuation(token):
            rendered.append(" ")
        else:
            rendered.append(color_word(token, word_counts.get(token.lower(), 0)))
    return "".join(rendered)

def print_colored_lines(content: str, word_counts: Mapping[str, int]) -> None:
    """Prints the first MAX_LINES lines of content with colored words."""
    if not content:
        return

    for line in content.split("\n")[:MAX_LINES]:
        print(render_line(line, word_counts))
