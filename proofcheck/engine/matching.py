"""Regex helpers used by detectors.

Compiled patterns are immutable, so every scan walks its own local cursor
over the text instead of relying on any shared "last match" state.
"""

from __future__ import annotations

import re
from re import Match, Pattern
from typing import Iterator

# Citation-like tokens: [1], [1, 2], (Smith, 2020), (Smith et al., 2020), [Smith 2020]
CITATION_PATTERN = re.compile(
    r"\[[\d\s,]+\]"
    r"|\([A-Z][a-z]+(?:\s+et\s+al\.)?,?\s+\d{4}\)"
    r"|\[[A-Z][a-z]+(?:\s+et\s+al\.)?,?\s+\d{4}\]",
    re.IGNORECASE,
)

SAMPLE_JUSTIFICATION_PATTERN = re.compile(
    r"justification|rationale|power\s+analysis|representative"
    r"|sampling\s+strategy|sample\s+size\s+calculation",
    re.IGNORECASE,
)

_SENTENCE_PATTERN = re.compile(r"[^.!?]+")
_WORD_PATTERN = re.compile(r"\S+")


def compile_pattern(source: str, flags: int = re.IGNORECASE) -> Pattern[str]:
    return re.compile(source, flags)


def iter_matches(
    pattern: Pattern[str],
    text: str,
    start: int = 0,
    end: int | None = None,
) -> Iterator[Match[str]]:
    """Yield every non-overlapping match of ``pattern`` in ``text[start:end]``.

    The sequence is lazy, finite and restartable: calling again with the same
    arguments yields the same matches. Empty matches move the cursor on by
    one character so the loop always terminates.
    """

    limit = len(text) if end is None else max(0, min(end, len(text)))
    cursor = max(0, start)
    while cursor <= limit:
        match = pattern.search(text, cursor, limit)
        if match is None:
            return
        yield match
        cursor = match.end() if match.end() > match.start() else match.end() + 1


def window(text: str, index: int, radius: int) -> str:
    """Return the text within ``radius`` characters either side of ``index``."""

    return text[max(0, index - radius) : min(len(text), index + radius)]


def has_nearby(pattern: Pattern[str], text: str, index: int, radius: int) -> bool:
    return pattern.search(window(text, index, radius)) is not None


def has_citation_nearby(text: str, index: int, radius: int = 100) -> bool:
    return has_nearby(CITATION_PATTERN, text, index, radius)


def has_sample_justification(text: str, index: int, radius: int = 200) -> bool:
    return has_nearby(SAMPLE_JUSTIFICATION_PATTERN, text, index, radius)


def iter_sentences(text: str) -> Iterator[tuple[int, str]]:
    """Yield ``(offset, sentence)`` pairs with surrounding whitespace removed.

    Sentences are runs of text between ``.``, ``!`` and ``?``; offsets point
    at the first non-space character of each sentence.
    """

    for match in _SENTENCE_PATTERN.finditer(text):
        chunk = match.group(0)
        stripped = chunk.strip()
        if not stripped:
            continue
        leading = len(chunk) - len(chunk.lstrip())
        yield match.start() + leading, stripped


def count_words(text: str) -> int:
    return len(_WORD_PATTERN.findall(text))
