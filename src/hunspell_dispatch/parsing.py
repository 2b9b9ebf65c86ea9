from __future__ import annotations

import json
import logging
import re
from typing import Iterable, List, Union

from .models import Incorrect, Misspelled, Suggestion
from .validation import ResponseShape

LOGGER = logging.getLogger(__name__)

# Diagnostic markers of the ispell pipe protocol.
MISSPELLED = "&"
INCORRECT = "#"

CANDIDATE_SEPARATOR = ", "
NEWLINE_RE = re.compile(r"\r\n|\r|\n")


def normalize_newlines(text: str) -> str:
    """Collapse CRLF and bare CR line endings into LF."""
    return NEWLINE_RE.sub("\n", text)


def parse_output(raw_output: str) -> List[Suggestion]:
    """Parse the transcript of a single checker invocation."""
    lines = normalize_newlines(raw_output).split("\n")
    suggestions: List[Suggestion] = []
    # Line 0 is the version banner.
    for line in lines[1:]:
        if not line:
            continue
        marker = line[0]
        if marker == INCORRECT:
            suggestion = _parse_incorrect(line)
        elif marker == MISSPELLED:
            suggestion = _parse_misspelled(line)
        else:
            continue
        if suggestion is None:
            LOGGER.debug("Skipping malformed checker line: %r", line)
            continue
        suggestions.append(suggestion)
    return suggestions


def parse_outputs(raw_outputs: Iterable[str]) -> List[Suggestion]:
    """Parse outputs in the order given and concatenate the results."""
    suggestions: List[Suggestion] = []
    for raw_output in raw_outputs:
        suggestions.extend(parse_output(raw_output))
    return suggestions


def serialize(
    suggestions: List[Suggestion], shape: ResponseShape
) -> Union[str, List[Suggestion]]:
    """Render suggestions in the requested response shape."""
    if shape == ResponseShape.JSON:
        return json.dumps([suggestion.to_dict() for suggestion in suggestions])
    return suggestions


def _parse_incorrect(line: str) -> Incorrect | None:
    parts = line.split(" ")
    if len(parts) < 3:
        return None
    return Incorrect(word=parts[1], position=parts[2])


def _parse_misspelled(line: str) -> Misspelled | None:
    head, sep, tail = line.partition(":")
    if not sep:
        return None
    head_parts = head.split(" ")
    if len(head_parts) < 4:
        return None
    return Misspelled(
        word=head_parts[1],
        suggestion_count=head_parts[2],
        position=head_parts[3],
        candidates=tail.strip().split(CANDIDATE_SEPARATOR),
    )
