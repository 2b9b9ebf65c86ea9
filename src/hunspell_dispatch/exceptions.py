from __future__ import annotations

from typing import Mapping


class HunspellDispatchError(Exception):
    """Base class for every error raised by hunspell_dispatch."""


class InvalidConfiguration(HunspellDispatchError, ValueError):
    """Raised when a configuration value fails validation."""


class InvalidResponseShape(InvalidConfiguration):
    """Response shape is not one of the recognized values."""


class InvalidThreadNumber(InvalidConfiguration):
    """Worker count is not a positive integer."""


class ExternalToolError(HunspellDispatchError, RuntimeError):
    """The spell-check process could not be started or exited abnormally."""

    def __init__(
        self,
        message: str,
        *,
        returncode: int | None = None,
        stderr: str | None = None,
        failures: Mapping[int, BaseException] | None = None,
    ) -> None:
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr
        # chunk index -> error, populated when several workers fail together
        self.failures = dict(failures or {})


class WordListError(HunspellDispatchError):
    """A word list operation could not be completed."""
