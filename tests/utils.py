from __future__ import annotations

import re
import threading
import time
from typing import Callable, Iterable, Mapping

from hunspell_dispatch.checkers import SpellChecker
from hunspell_dispatch.config import SpellCheckConfig

BANNER = "@(#) International Ispell Version 3.2.06 (but really Hunspell 1.7.0)"
WORD_RE = re.compile(r"[\w']+", re.UNICODE)


class FakeHunspell(SpellChecker):
    """
    In-process stand-in that speaks the hunspell pipe protocol.

    Offsets are reported relative to the text passed to check, like the
    real binary does.
    """

    def __init__(
        self,
        suggestions: Mapping[str, list[str]] | None = None,
        incorrect: Iterable[str] = (),
        delay: Callable[[str], float] | None = None,
    ) -> None:
        self.suggestions = dict(suggestions or {})
        self.incorrect = set(incorrect)
        self.delay = delay
        self.calls: list[str] = []
        self._lock = threading.Lock()

    def check(self, text: str, config: SpellCheckConfig) -> str:
        with self._lock:
            self.calls.append(text)
        if self.delay is not None:
            time.sleep(self.delay(text))
        lines = [BANNER]
        for match in WORD_RE.finditer(text):
            word = match.group()
            offset = match.start()
            if word in self.suggestions:
                candidates = self.suggestions[word]
                lines.append(
                    f"& {word} {len(candidates)} {offset}: {', '.join(candidates)}"
                )
            elif word in self.incorrect:
                lines.append(f"# {word} {offset}")
            else:
                lines.append("*")
        lines.append("")
        return "\n".join(lines) + "\n"


def transcript(*lines: str) -> str:
    """Build a checker transcript with the banner prepended."""
    return "\n".join([BANNER, *lines]) + "\n"
