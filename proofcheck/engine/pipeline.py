"""Single entry point wiring the detection stages together.

``analyze`` runs: region parsing (when requested), detector execution,
external candidate merge, span normalisation, conflict resolution and
final validation. It is pure over its inputs apart from logging; all
diagnostics come back in ``AnalysisMetrics`` rather than module state.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping

from ..errors import DocumentRejectedError
from ..models import (
    AnalysisRequest,
    CandidateIssue,
    CategoryFlags,
    EmailContext,
    FinalIssue,
    ResearchSection,
    WritingMode,
)
from ..rules import default_registry
from .executor import run_detectors
from .regions import parse_regions
from .registry import DetectorRegistry, ScanContext
from .resolver import resolve_conflicts
from .spans import normalize_spans
from .validator import MAX_ISSUES, finalize_issues

LOGGER = logging.getLogger(__name__)

MIN_DOCUMENT_LENGTH = 5


@dataclass
class AnalysisMetrics:
    """Per-call diagnostics returned next to the issues."""

    detector_counts: dict[str, int] = field(default_factory=dict)
    failed_categories: list[str] = field(default_factory=list)
    candidate_total: int = 0
    external_candidates: int = 0
    overlaps_discarded: int = 0
    truncated: int = 0
    dropped_empty: int = 0
    issue_type_counts: dict[str, int] = field(default_factory=dict)


@dataclass
class AnalysisResult:
    issues: list[FinalIssue]
    metrics: AnalysisMetrics
    mode: WritingMode
    section: ResearchSection | None = None

    def to_payload(self) -> dict[str, Any]:
        """Render the response body used by callers of the engine."""

        return {
            "ok": True,
            "issues": [issue.to_payload() for issue in self.issues],
            "metadata": {
                "writing_mode": self.mode.value,
                "academic_level": self.mode.academic_level,
                "total_issues": len(self.issues),
                "section": self.section.value if self.section else None,
            },
        }


def ensure_analyzable(document: object, min_length: int = MIN_DOCUMENT_LENGTH) -> str:
    """Reject missing or too-short documents before they reach the engine.

    Raises:
            DocumentRejectedError: if ``document`` is not a string or its
            trimmed length is below ``min_length``.
    """

    if not isinstance(document, str):
        raise DocumentRejectedError("Content is required and must be a string")
    if len(document.strip()) < min_length:
        raise DocumentRejectedError(
            f"Content must be at least {min_length} characters long"
        )
    return document


def _coerce_request(request: AnalysisRequest | Mapping[str, Any]) -> AnalysisRequest:
    if isinstance(request, AnalysisRequest):
        return request
    return AnalysisRequest.model_validate(dict(request))


def analyze(
    request: AnalysisRequest | Mapping[str, Any],
    *,
    registry: DetectorRegistry | None = None,
    external_candidates: Iterable[CandidateIssue] = (),
    max_issues: int = MAX_ISSUES,
) -> AnalysisResult:
    """Analyse one document and return its validated, non-overlapping issues."""

    request = _coerce_request(request)
    if registry is None:
        registry = default_registry()

    document = request.document
    LOGGER.info(
        "Analysing document (mode=%s, length=%d, section=%s)",
        request.mode.value,
        len(document),
        request.section.value if request.section else None,
    )

    regions = parse_regions(document) if request.wants_regions() else None
    context = ScanContext(
        document=document,
        mode=request.mode,
        email=request.email,
        section=request.section,
        regions=regions,
    )
    report = run_detectors(context, request.categories, registry)

    externals = [
        candidate
        for candidate in external_candidates
        if request.categories.is_enabled(candidate.category)
    ]
    candidates = report.candidates + externals

    normalized = normalize_spans(document, candidates)
    resolved = resolve_conflicts(normalized)
    issues = finalize_issues(document, resolved, max_issues=max_issues)

    kept = min(len(resolved), max(0, max_issues))
    metrics = AnalysisMetrics(
        detector_counts=dict(report.detector_counts),
        failed_categories=list(report.failed_categories),
        candidate_total=len(candidates),
        external_candidates=len(externals),
        overlaps_discarded=len(normalized) - len(resolved),
        truncated=len(resolved) - kept,
        dropped_empty=kept - len(issues),
        issue_type_counts=dict(Counter(issue.type.value for issue in issues)),
    )

    LOGGER.debug("Detector counts: %s", metrics.detector_counts)
    LOGGER.debug("Returned issue types: %s", sorted(metrics.issue_type_counts))
    LOGGER.info(
        "Returning %d issue(s) from %d candidate(s) (%d overlapping, %d truncated, %d empty)",
        len(issues),
        metrics.candidate_total,
        metrics.overlaps_discarded,
        metrics.truncated,
        metrics.dropped_empty,
    )
    if metrics.failed_categories:
        LOGGER.warning("Categories with detector failures: %s", metrics.failed_categories)

    return AnalysisResult(
        issues=issues,
        metrics=metrics,
        mode=request.mode,
        section=request.section,
    )


def analyze_document(
    document: str,
    mode: WritingMode | str = WritingMode.GENERAL,
    categories: CategoryFlags | Mapping[str, bool] | None = None,
    *,
    email: EmailContext | Mapping[str, str] | None = None,
    section: ResearchSection | str | None = None,
    regions_needed: bool | None = None,
    registry: DetectorRegistry | None = None,
    external_candidates: Iterable[CandidateIssue] = (),
    max_issues: int = MAX_ISSUES,
) -> list[FinalIssue]:
    """Convenience wrapper around ``analyze`` returning only the issues."""

    request = AnalysisRequest(
        document=document,
        mode=mode,
        categories=categories,
        email=email,
        section=section,
        regions_needed=regions_needed,
    )
    return analyze(
        request,
        registry=registry,
        external_candidates=external_candidates,
        max_issues=max_issues,
    ).issues
