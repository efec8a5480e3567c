"""Final gate: cap the issue list and drop issues without real substance."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Sequence

from pydantic import ValidationError

from ..models import CandidateIssue, FinalIssue
from .spans import clamp_span, reconcile_text

LOGGER = logging.getLogger(__name__)

MAX_ISSUES = 50


def _skip(candidate: CandidateIssue, reason: str) -> None:
    LOGGER.warning(
        "Skipping issue (%s): %s (%s) %r",
        reason,
        candidate.category.value,
        candidate.rule_id or "external",
        candidate.message,
    )


def finalize_issues(
    document: str,
    candidates: Sequence[CandidateIssue],
    max_issues: int = MAX_ISSUES,
) -> list[FinalIssue]:
    """Truncate to ``max_issues`` then validate each survivor.

    An issue is dropped with a warning when its matched text is empty or
    whitespace only, when it has no message, or when the final record fails
    validation. Truncation happens first, so a list that loses issues here
    can end up shorter than the cap even when more candidates were available.
    """

    issues: list[FinalIssue] = []
    for candidate in list(candidates)[: max(0, max_issues)]:
        start, end = clamp_span(candidate.start, candidate.end, len(document))
        actual = document[start:end]
        claimed = reconcile_text(candidate.claimed_text, actual)
        if not claimed.strip() or not actual.strip():
            _skip(candidate, "blank original_text")
            continue
        if not (candidate.message or "").strip():
            _skip(candidate, "missing message")
            continue
        try:
            issue = FinalIssue.from_candidate(
                replace(candidate, start=start, end=end, claimed_text=actual)
            )
        except ValidationError as exc:
            _skip(candidate, f"invalid issue: {exc.error_count()} error(s)")
            continue
        issues.append(issue)
    return issues
