from __future__ import annotations

import logging
import os
import subprocess
from typing import Dict, List, Mapping

from ..config import SpellCheckConfig
from ..exceptions import ExternalToolError
from ..parsing import normalize_newlines
from .base import SpellChecker

LOGGER = logging.getLogger(__name__)

# Pipe-mode lines starting with this are checked as text, never as commands.
TEXT_PREFIX = "^"


class HunspellChecker(SpellChecker):
    """
    Run hunspell in pipe mode (``-a``) once per call.

    The text is written to the process's standard input and the ispell-style
    transcript is read back from standard output. The locale override lives
    in the environment handed to that single child process, so concurrent
    calls with different encodings do not interfere with each other.

    Every input line is prefixed with ``^`` so lines such as ``*word`` or
    ``#`` are spell-checked rather than run as pipe-mode commands. Word
    positions are returned exactly as hunspell reports them for the escaped
    line.
    """

    def __init__(
        self,
        executable: str = "hunspell",
        base_env: Mapping[str, str] | None = None,
    ) -> None:
        self.executable = executable
        self._base_env = base_env

    def build_command(self, config: SpellCheckConfig) -> List[str]:
        return [self.executable, "-a", "-d", config.dictionary]

    def build_env(self, config: SpellCheckConfig) -> Dict[str, str]:
        env = dict(os.environ if self._base_env is None else self._base_env)
        # Windows builds ignore LANG; leave the environment untouched there.
        if os.name != "nt" and config.encoding:
            env["LANG"] = config.encoding
        return env

    def escape_input(self, text: str) -> str:
        return "\n".join(
            TEXT_PREFIX + line for line in normalize_newlines(text).split("\n")
        )

    def check(self, text: str, config: SpellCheckConfig) -> str:
        cmd = self.build_command(config)
        LOGGER.debug("Running %s on %s characters", " ".join(cmd), len(text))
        try:
            result = subprocess.run(
                cmd,
                input=self.escape_input(text),
                capture_output=True,
                text=True,
                env=self.build_env(config),
                timeout=config.timeout,
            )
        except subprocess.TimeoutExpired as exc:
            raise ExternalToolError(
                f"{self.executable} timed out after {config.timeout} seconds"
            ) from exc
        except OSError as exc:
            raise ExternalToolError(
                f"Failed to start {self.executable}: {exc}"
            ) from exc

        if result.returncode != 0:
            stderr = (result.stderr or "").strip()
            raise ExternalToolError(
                f"{self.executable} exited with status {result.returncode}: {stderr}",
                returncode=result.returncode,
                stderr=stderr,
            )
        return result.stdout
