"""
hunspell_dispatch package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .calibration import CalibrationResult, probe_defaults
from .checkers import CallableChecker, HunspellChecker, SpellChecker
from .config import SpellCheckConfig, config_from_dict, config_from_yaml, load_config
from .engine import SuggestionEngine
from .exceptions import (
    ExternalToolError,
    HunspellDispatchError,
    InvalidConfiguration,
    InvalidResponseShape,
    InvalidThreadNumber,
    WordListError,
)
from .models import Incorrect, Misspelled, Suggestion, TextChunk
from .validation import ResponseShape
from .wordlist import WordListEditor, WordListKind

__all__ = [
    "SpellCheckConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "SuggestionEngine",
    "ResponseShape",
    "SpellChecker",
    "HunspellChecker",
    "CallableChecker",
    "Incorrect",
    "Misspelled",
    "Suggestion",
    "TextChunk",
    "CalibrationResult",
    "probe_defaults",
    "WordListEditor",
    "WordListKind",
    "HunspellDispatchError",
    "InvalidConfiguration",
    "InvalidResponseShape",
    "InvalidThreadNumber",
    "ExternalToolError",
    "WordListError",
]

__version__ = "0.1.0"
