"""Apply a suggested fix to a document and compute document statistics."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from ..errors import IssueStateError
from ..models import FinalIssue, IssueStatus
from .matching import count_words
from .spans import clamp_span

LOGGER = logging.getLogger(__name__)

SEARCH_MARGIN = 50
DEFAULT_PAGE_SIZE = 1800


def _locate_original(content: str, issue: FinalIssue) -> tuple[int, int]:
    """Return the span to replace for ``issue``.

    The recorded offsets are trusted when the text there still agrees with
    the issue's original text. Otherwise the original text is searched for
    near the recorded position, falling back to the offsets.
    """

    start, end = clamp_span(issue.start_index, issue.end_index, len(content))
    current = content[start:end]
    original = issue.original_text
    if original in current or current in original:
        return start, end

    search_from = max(0, start - SEARCH_MARGIN)
    found = content.find(original, search_from)
    if 0 <= found < end + SEARCH_MARGIN:
        LOGGER.debug(
            "Issue text moved from %d to %d; applying at the new position", start, found
        )
        return found, found + len(original)
    return start, end


def apply_issue(content: str, issue: FinalIssue) -> str:
    """Return ``content`` with the issue's suggestion applied.

    Raises:
            IssueStateError: if the issue is not ``open``.
    """

    if issue.status is not IssueStatus.OPEN:
        raise IssueStateError(
            f"Only open issues can be applied (issue status is {issue.status.value!r})"
        )
    start, end = _locate_original(content, issue)
    return content[:start] + issue.suggestion_text + content[end:]


@dataclass(frozen=True)
class DocumentStats:
    char_count: int
    word_count: int
    page_count: int


def document_stats(content: str, page_size: int = DEFAULT_PAGE_SIZE) -> DocumentStats:
    """Character, word and page counts; a page is ``page_size`` characters."""

    if page_size <= 0:
        raise ValueError("page_size must be positive")
    char_count = len(content)
    return DocumentStats(
        char_count=char_count,
        word_count=count_words(content),
        page_count=max(1, math.ceil(char_count / page_size)),
    )
