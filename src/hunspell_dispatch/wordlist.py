from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import List

from .exceptions import WordListError
from .parsing import normalize_newlines

LOGGER = logging.getLogger(__name__)


class WordListKind(str, Enum):
    """Word list file types, keyed by their file extension."""

    DICTIONARY = "dic"
    RULESET = "aff"
    TEMPLATE = "tpl"

    @property
    def has_header(self) -> bool:
        return self is not WordListKind.TEMPLATE


def kind_for_path(path: str | Path) -> WordListKind:
    """Resolve the word list kind from the path's extension."""
    extension = Path(path).suffix.lstrip(".")
    for kind in WordListKind:
        if extension == kind.value:
            return kind
    raise WordListError(f"Invalid extension({extension})")


class WordListEditor:
    """
    Maintain flat word files: one word per line, kept sorted case-insensitively.

    Dictionary and ruleset files start with a line holding the number of
    words, as hunspell expects. Template files carry only the words.
    """

    def create(self, path: str | Path) -> None:
        """Create an empty word list at path, replacing any existing file."""
        target = Path(path)
        kind = kind_for_path(target)
        try:
            self._write(target, kind, [])
        except OSError as exc:
            raise WordListError(f"Failed to create new dictionary: {exc}") from exc
        LOGGER.debug("Created %s word list at %s", kind.name.lower(), target)

    def delete(self, path: str | Path) -> None:
        """Delete the word list at path."""
        target = Path(path)
        kind_for_path(target)
        if not target.is_file():
            raise WordListError(f"Path({path}) is invalid")
        target.unlink()

    def add_word(self, path: str | Path, word: str) -> None:
        """Insert word unless a case-insensitive match is already present."""
        target = Path(path)
        kind, words = self._read(target)
        folded = word.casefold()
        if any(existing.casefold() == folded for existing in words):
            raise WordListError("The word already exists in the database")
        words.append(word)
        self._write(target, kind, words)

    def delete_word(self, path: str | Path, word: str) -> None:
        """Remove the first exact occurrence of word."""
        target = Path(path)
        kind, words = self._read(target)
        if word not in words:
            raise WordListError(
                f"The defined dictionary({path}) does not contain this word({word})"
            )
        words.remove(word)
        self._write(target, kind, words)

    def edit_word(self, path: str | Path, word: str, modified_word: str) -> None:
        """Replace word with modified_word."""
        target = Path(path)
        kind, words = self._read(target)
        if word not in words:
            raise WordListError(
                f"The defined dictionary({path}) does not contain this word({word})"
            )
        folded = modified_word.casefold()
        if any(
            existing.casefold() == folded and existing != word for existing in words
        ):
            raise WordListError("This word is already in the dictionary")
        words[words.index(word)] = modified_word
        self._write(target, kind, words)

    def list_words(self, path: str | Path) -> List[str]:
        """Return the words stored at path, header excluded."""
        _, words = self._read(Path(path))
        return words

    def _read(self, path: Path) -> tuple[WordListKind, List[str]]:
        kind = kind_for_path(path)
        if not path.is_file():
            raise WordListError(f"Path({path}) is invalid")
        lines = [
            line.strip()
            for line in normalize_newlines(path.read_text(encoding="utf-8")).split("\n")
        ]
        lines = [line for line in lines if line]
        # Files written by other tools may lack the count header, and a
        # numeric first word is only the header when it matches the count.
        if (
            kind.has_header
            and lines
            and lines[0].isdecimal()
            and int(lines[0]) == len(lines) - 1
        ):
            lines = lines[1:]
        return kind, lines

    @staticmethod
    def _write(path: Path, kind: WordListKind, words: List[str]) -> None:
        ordered = sorted(words, key=lambda value: (value.casefold(), value))
        lines = [str(len(ordered))] if kind.has_header else []
        lines.extend(ordered)
        contents = "\n".join(lines)
        path.write_text(contents + "\n" if contents else "", encoding="utf-8")
