from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor, wait
from dataclasses import replace
from typing import Any, Dict, List, Union

from .checkers import SpellChecker, build_checker_from_config
from .chunking import plan_chunks
from .config import SpellCheckConfig, validate_config
from .exceptions import ExternalToolError
from .models import Suggestion, TextChunk
from .parsing import parse_outputs, serialize
from .tokenization import count_words, split_words, strip_quotes
from .validation import ResponseShape, validate_response_shape, validate_thread_number

LOGGER = logging.getLogger(__name__)

SuggestResult = Union[str, List[Suggestion]]


class SuggestionEngine:
    """
    Spell-check text through an external checker, fanning out over threads.

    Texts longer than ``min_words_per_worker`` words are split into chunks
    that are checked concurrently, one checker process per chunk. Results are
    merged by chunk index, so the order always follows the input text.

    Word positions are reported by the checker relative to the text it was
    given. On the threaded path that is the chunk, not the whole input, and
    the positions are passed through as-is.
    """

    def __init__(
        self,
        config: SpellCheckConfig | None = None,
        checker: SpellChecker | None = None,
    ) -> None:
        self._config = validate_config(replace(config or SpellCheckConfig()))
        self._checker = checker or build_checker_from_config(self._config)

    @property
    def config(self) -> SpellCheckConfig:
        """A copy of the active configuration."""
        return replace(self._config)

    @property
    def response_shape(self) -> ResponseShape:
        return self._config.response_shape

    @response_shape.setter
    def response_shape(self, value: Any) -> None:
        shape = validate_response_shape(value)
        self._config = replace(self._config, response_shape=shape)

    @property
    def max_workers(self) -> int:
        return self._config.max_workers

    @max_workers.setter
    def max_workers(self, value: Any) -> None:
        workers = validate_thread_number(value)
        self._config = replace(self._config, max_workers=workers)

    @property
    def min_words_per_worker(self) -> int:
        return self._config.min_words_per_worker

    @min_words_per_worker.setter
    def min_words_per_worker(self, value: Any) -> None:
        ratio = validate_thread_number(value)
        self._config = replace(self._config, min_words_per_worker=ratio)

    @property
    def dictionary(self) -> str:
        return self._config.dictionary

    @dictionary.setter
    def dictionary(self, value: str) -> None:
        self._config = replace(self._config, dictionary=value)

    @property
    def encoding(self) -> str:
        return self._config.encoding

    @encoding.setter
    def encoding(self, value: str) -> None:
        self._config = replace(self._config, encoding=value)

    @staticmethod
    def word_count(text: str) -> int:
        return count_words(text)

    def uses_threads(
        self, word_count: int, config: SpellCheckConfig | None = None
    ) -> bool:
        """Whether a text of word_count words takes the threaded path."""
        config = config or self._config
        return (
            config.parallel_enabled
            and config.max_workers > 1
            and word_count > config.min_words_per_worker
        )

    def suggest(self, text: str) -> SuggestResult:
        """Check text and return its suggestions in the configured shape."""
        # Snapshot so a setter called from another thread cannot affect this call.
        config = self._config
        text = strip_quotes(text)
        words = split_words(text)

        if self.uses_threads(len(words), config):
            raw_outputs = self._check_threaded(words, config)
        else:
            raw_outputs = [self._checker.check(text, config)]

        return serialize(parse_outputs(raw_outputs), config.response_shape)

    def _check_threaded(
        self, words: List[str], config: SpellCheckConfig
    ) -> List[str]:
        chunks = plan_chunks(words, config)
        if not chunks:
            return []

        with ThreadPoolExecutor(
            max_workers=len(chunks), thread_name_prefix="hunspell"
        ) as executor:
            futures: List[Future[str]] = [
                executor.submit(self._checker.check, chunk.text, config)
                for chunk in chunks
            ]
            wait(futures)

        return self._collect(chunks, futures)

    @staticmethod
    def _collect(chunks: List[TextChunk], futures: List[Future[str]]) -> List[str]:
        outputs: List[str] = []
        failures: Dict[int, BaseException] = {}
        for chunk, future in zip(chunks, futures):
            error = future.exception()
            if error is not None:
                LOGGER.error("Spell check of chunk %s failed: %s", chunk.index, error)
                failures[chunk.index] = error
                continue
            outputs.append(future.result())

        if failures:
            indices = ", ".join(str(index) for index in sorted(failures))
            first = failures[min(failures)]
            raise ExternalToolError(
                f"Spell check failed for {len(failures)} of {len(chunks)} chunks "
                f"(chunks {indices}): {first}",
                failures=failures,
            ) from first
        return outputs
