"""Clamp candidate spans and reconcile their text with the document."""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable

from ..models import CandidateIssue


def clamp_span(start: int, end: int, length: int) -> tuple[int, int]:
    """Clamp ``[start, end)`` into ``[0, length]`` keeping ``start <= end``."""

    start = max(0, min(start, length))
    end = max(start, min(end, length))
    return start, end


def reconcile_text(claimed: str, actual: str) -> str:
    """Return the text an issue should report for a span.

    An empty claim takes the actual text and a claim that differs from it
    (ignoring case) is overwritten. A claim that only differs in case is
    kept here; the validator re-extracts the exact text before output.
    """

    if not claimed:
        return actual
    if claimed.lower() != actual.lower():
        return actual
    return claimed


def normalize_candidate(document: str, candidate: CandidateIssue) -> CandidateIssue:
    start, end = clamp_span(candidate.start, candidate.end, len(document))
    actual = document[start:end]
    return replace(
        candidate,
        start=start,
        end=end,
        claimed_text=reconcile_text(candidate.claimed_text, actual),
    )


def normalize_spans(document: str, candidates: Iterable[CandidateIssue]) -> list[CandidateIssue]:
    """Normalise every candidate; never drops any."""

    return [normalize_candidate(document, candidate) for candidate in candidates]
