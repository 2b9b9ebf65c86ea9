from __future__ import annotations

from typing import TYPE_CHECKING

from .base import SpellChecker
from .callable import CallableChecker
from .hunspell import HunspellChecker

if TYPE_CHECKING:  # pragma: no cover - import for typing only
    from ..config import SpellCheckConfig

__all__ = [
    "SpellChecker",
    "CallableChecker",
    "HunspellChecker",
    "build_checker_from_config",
]


def build_checker_from_config(config: "SpellCheckConfig") -> SpellChecker:
    """Build the subprocess-backed checker described by config."""
    return HunspellChecker(executable=config.executable)
