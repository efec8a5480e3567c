"""Greedy overlap resolution between candidate issues."""

from __future__ import annotations

from typing import Iterable

from ..models import CandidateIssue


def spans_overlap(start: int, end: int, other_start: int, other_end: int) -> bool:
    """Inclusive overlap test covering containment in either direction.

    A zero-width span that sits inside (or at the start of) another span
    counts as overlapping it.
    """

    return (
        (other_start <= start < other_end)
        or (other_start < end <= other_end)
        or (start <= other_start and end >= other_end)
    )


def resolve_conflicts(candidates: Iterable[CandidateIssue]) -> list[CandidateIssue]:
    """Keep the earliest-starting candidates that do not overlap each other.

    The sort is stable, so on equal starts the candidate detected first
    wins. This is a single greedy pass, not optimal interval scheduling:
    a later, more severe issue is dropped if it touches an accepted one.
    """

    accepted: list[CandidateIssue] = []
    for candidate in sorted(candidates, key=lambda item: item.start):
        if any(
            spans_overlap(candidate.start, candidate.end, kept.start, kept.end)
            for kept in accepted
        ):
            continue
        accepted.append(candidate)
    return accepted
