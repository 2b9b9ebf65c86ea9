from __future__ import annotations

import logging
import os
import time
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Callable, Mapping, Sequence

from .checkers import SpellChecker, build_checker_from_config
from .config import SpellCheckConfig
from .engine import SuggestionEngine
from .validation import ResponseShape

LOGGER = logging.getLogger(__name__)

# Upper bounds for the timing-based predictions.
MAX_PROBE_WORKERS = 128
OPTIMAL_WORDS_PER_WORKER = 128
# Share of words an average typist gets right.
TYPIST_ERROR_RATE = 0.91

CORRECT_WORDS = ("banana", "papaya", "peach", "mango", "tomato")
INCORRECT_WORDS = ("ranom", "potate", "asdasd", "noot", "lolipop")

CPU_COUNT_ENV_VARS = ("NUMBER_OF_PROCESSORS", "_NPROCESSORS_ONLN")
CPUINFO_PATH = Path("/proc/cpuinfo")

Timer = Callable[[], float]


@dataclass(slots=True)
class CalibrationResult:
    """Worker defaults derived from the host."""

    max_workers: int
    min_words_per_worker: int
    parallel_enabled: bool

    def apply(self, config: SpellCheckConfig) -> SpellCheckConfig:
        """Return a copy of config carrying these defaults."""
        return replace(
            config,
            max_workers=self.max_workers,
            min_words_per_worker=self.min_words_per_worker,
            parallel_enabled=self.parallel_enabled,
        )


def generate_text(
    length: int = OPTIMAL_WORDS_PER_WORKER, use_correct_words: bool = False
) -> str:
    """Build a synthetic text of length words cycling through a sample list."""
    words: Sequence[str] = CORRECT_WORDS if use_correct_words else INCORRECT_WORDS
    return " ".join(words[i % len(words)] for i in range(length))


def cpu_count_from_env(env: Mapping[str, str]) -> int | None:
    for name in CPU_COUNT_ENV_VARS:
        value = _positive_int(env.get(name))
        if value is not None:
            return value
    return None


def cpu_count_from_cpuinfo(path: Path = CPUINFO_PATH) -> int | None:
    try:
        contents = path.read_text(encoding="utf-8", errors="replace")
    except OSError:
        return None
    count = sum(1 for line in contents.splitlines() if line.startswith("processor"))
    return count or None


def measure(engine: SuggestionEngine, text: str, workers: int, timer: Timer) -> float:
    """Seconds taken by one suggest call with the given worker count."""
    engine.max_workers = workers
    before = timer()
    engine.suggest(text)
    return timer() - before


def predict_worker_count(
    engine: SuggestionEngine,
    max_probe: int = MAX_PROBE_WORKERS,
    timer: Timer = time.perf_counter,
) -> int:
    """Raise the worker count until a run gets slower than the best one so far."""
    text = generate_text()
    performances: dict[int, float] = {}
    for workers in range(1, max_probe):
        performances[workers] = measure(engine, text, workers, timer)
        best = min(performances, key=performances.__getitem__)
        if performances[workers] > performances[best]:
            return best
    if not performances:
        return 1
    return min(performances, key=performances.__getitem__)


def predict_words_per_worker(
    engine: SuggestionEngine,
    workers: int,
    timer: Timer = time.perf_counter,
) -> int:
    """
    Estimate how many words a worker should get before another one pays off.

    Serial and threaded runs are timed on growing synthetic texts, once with
    misspelled words and once with correct ones, until the threaded run wins.
    The two break-even points are blended by their timing gap and the typist
    error rate.
    """
    incorrect_steps, incorrect_weight = _break_even(engine, workers, False, timer)
    correct_steps, correct_weight = _break_even(engine, workers, True, timer)
    total_weight = correct_weight + incorrect_weight
    if total_weight <= 0:
        return 1
    correct_weight /= total_weight
    incorrect_weight /= total_weight

    result = int(
        (
            correct_steps * TYPIST_ERROR_RATE * incorrect_weight
            + incorrect_steps * (1 - TYPIST_ERROR_RATE) * correct_weight
        )
        / workers
        / 2
    )
    return max(1, result)


def probe_defaults(
    env: Mapping[str, str] | None = None,
    checker: SpellChecker | None = None,
    base_config: SpellCheckConfig | None = None,
    *,
    cpu_count: Callable[[], int | None] = os.cpu_count,
    measure_ratio: bool = True,
    timer: Timer = time.perf_counter,
) -> CalibrationResult:
    """
    Resolve worker defaults once, for use when building a SpellCheckConfig.

    The CPU count comes from the interpreter, then environment variables, then
    /proc/cpuinfo; only if all of those fail is it predicted by timing the
    checker. The word-per-worker ratio is always measured unless
    measure_ratio is False.
    """
    env = os.environ if env is None else env
    config = replace(
        base_config or SpellCheckConfig(),
        response_shape=ResponseShape.ARRAY,
        max_workers=1,
        min_words_per_worker=1,
        parallel_enabled=True,
    )
    engine: SuggestionEngine | None = None

    workers = _positive_int(cpu_count()) or cpu_count_from_env(env)
    workers = workers or cpu_count_from_cpuinfo()
    if workers is None:
        engine = SuggestionEngine(config, checker or build_checker_from_config(config))
        workers = predict_worker_count(engine, timer=timer)

    if workers <= 1:
        LOGGER.info("Single CPU detected; parallel checking disabled.")
        return CalibrationResult(
            max_workers=1, min_words_per_worker=1, parallel_enabled=False
        )

    ratio = 1
    if measure_ratio:
        if engine is None:
            engine = SuggestionEngine(
                config, checker or build_checker_from_config(config)
            )
        ratio = predict_words_per_worker(engine, workers, timer=timer)

    LOGGER.info(
        "Calibrated max_workers=%s min_words_per_worker=%s", workers, ratio
    )
    return CalibrationResult(
        max_workers=workers, min_words_per_worker=ratio, parallel_enabled=True
    )


def _break_even(
    engine: SuggestionEngine,
    workers: int,
    use_correct_words: bool,
    timer: Timer,
) -> tuple[int, float]:
    steps = workers
    single = threaded = 0.0
    while True:
        text = generate_text(steps * workers, use_correct_words)
        single = measure(engine, text, 1, timer)
        threaded = measure(engine, text, workers, timer)
        if threaded < single or steps + 1 >= OPTIMAL_WORDS_PER_WORKER:
            break
        steps += 1
    return steps, abs(threaded - single / workers)


def _positive_int(value: object) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = int(str(value).strip())
    except ValueError:
        return None
    return number if number > 0 else None
