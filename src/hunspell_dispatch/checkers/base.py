from __future__ import annotations

from abc import ABC, abstractmethod

from ..config import SpellCheckConfig


class SpellChecker(ABC):
    """Abstract checker that turns a block of text into raw diagnostic output."""

    @abstractmethod
    def check(self, text: str, config: SpellCheckConfig) -> str:
        """Return the checker transcript for text, banner line included."""
        raise NotImplementedError
