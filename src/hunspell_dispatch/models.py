from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, List, Union


@dataclass(slots=True)
class TextChunk:
    """A contiguous run of words handed to a single checker invocation."""

    index: int
    words: List[str]

    @property
    def text(self) -> str:
        return " ".join(self.words)


@dataclass(slots=True)
class Incorrect:
    """A word the checker rejected without offering replacements."""

    word: str
    position: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(slots=True)
class Misspelled:
    """A misspelled word together with the checker's ranked candidates."""

    word: str
    suggestion_count: str
    position: str
    candidates: List[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


Suggestion = Union[Incorrect, Misspelled]
