from __future__ import annotations

from typing import List

QUOTE = '"'


def strip_quotes(text: str) -> str:
    """Remove every double quote so the text can be handed to the checker."""
    return text.replace(QUOTE, "")


def split_words(text: str) -> List[str]:
    """Split text on runs of whitespace."""
    return text.split()


def count_words(text: str) -> int:
    """Count whitespace-separated words."""
    return len(split_words(text))
