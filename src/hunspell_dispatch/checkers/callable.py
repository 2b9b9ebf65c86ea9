from __future__ import annotations

from typing import Callable

from ..config import SpellCheckConfig
from .base import SpellChecker


class CallableChecker(SpellChecker):
    """Adapt an arbitrary callable into the SpellChecker interface."""

    def __init__(self, func: Callable[[str, SpellCheckConfig], str]) -> None:
        self._func = func

    def check(self, text: str, config: SpellCheckConfig) -> str:
        return self._func(text, config)
