from __future__ import annotations

import logging
from typing import List, Sequence, Tuple

from .config import SpellCheckConfig
from .models import TextChunk

LOGGER = logging.getLogger(__name__)


def _ceil_div(numerator: int, denominator: int) -> int:
    return -(-numerator // denominator)


def optimal_workers(word_count: int, config: SpellCheckConfig) -> int:
    """Number of workers worth starting for word_count words."""
    if word_count / config.min_words_per_worker >= config.max_workers:
        return config.max_workers
    return max(1, word_count // config.min_words_per_worker)


def chunk_layout(word_count: int, config: SpellCheckConfig) -> Tuple[int, int]:
    """Return (chunk_size, worker_count) for word_count words."""
    if word_count <= 0:
        return 0, 0
    workers = optimal_workers(word_count, config)
    chunk_size = _ceil_div(word_count, workers)
    # ceil(min(a, b)) == min(ceil(a), b) because workers is whole
    worker_count = min(_ceil_div(word_count, chunk_size), workers)
    return chunk_size, worker_count


def plan_chunks(words: Sequence[str], config: SpellCheckConfig) -> List[TextChunk]:
    """Partition words into contiguous, non-empty chunks, one per worker."""
    chunk_size, worker_count = chunk_layout(len(words), config)
    chunks: List[TextChunk] = []
    for index in range(worker_count):
        start_idx = index * chunk_size
        end_idx = min(start_idx + chunk_size, len(words))
        chunks.append(TextChunk(index=index, words=list(words[start_idx:end_idx])))

    LOGGER.debug(
        "Planned %s chunks of up to %s words for %s words (max_workers=%s)",
        len(chunks),
        chunk_size,
        len(words),
        config.max_workers,
    )
    return chunks
