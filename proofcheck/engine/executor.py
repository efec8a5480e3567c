"""Run registered detectors and collect raw candidate issues."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..models import CandidateIssue, CategoryFlags, IssueCategory
from .registry import Detector, DetectorRegistry, ScanContext

LOGGER = logging.getLogger(__name__)


@dataclass
class ExecutionReport:
    """Raw candidates in detection order plus per-category diagnostics."""

    candidates: list[CandidateIssue] = field(default_factory=list)
    detector_counts: dict[str, int] = field(default_factory=dict)
    failed_categories: list[str] = field(default_factory=list)


def _scan_window(detector: Detector, context: ScanContext) -> tuple[str, int] | None:
    """Return the text a detector should scan and its offset in the document."""

    if detector.target is None:
        return context.document, 0
    if context.regions is None:
        LOGGER.debug(
            "Skipping %s: region %s requested but regions were not parsed",
            detector.detector_id,
            detector.target.value,
        )
        return None
    region = context.regions.get(detector.target)
    if not region.located:
        LOGGER.debug(
            "Skipping %s: region %s not found in document",
            detector.detector_id,
            detector.target.value,
        )
        return None
    return region.text, region.start


def _run_detector(
    detector: Detector,
    category: IssueCategory,
    context: ScanContext,
    registry: DetectorRegistry,
) -> list[CandidateIssue]:
    scan = _scan_window(detector, context)
    if scan is None:
        return []
    text, offset = scan

    template = registry.templates.resolve(detector.detector_id, context.mode)
    base_fields = context.fields
    candidates: list[CandidateIssue] = []
    for hit in detector.scan(text, context):
        fields = {**base_fields, **hit.fields}
        message, suggestion, explanation = template.render(fields)
        candidates.append(
            CandidateIssue(
                category=category,
                severity=template.severity,
                message=message,
                claimed_text=hit.claimed,
                suggestion=suggestion,
                start=offset + hit.start,
                end=offset + hit.end,
                explanation=explanation,
                rule_id=detector.detector_id,
            )
        )
    return candidates


def run_detectors(
    context: ScanContext,
    categories: CategoryFlags,
    registry: DetectorRegistry,
) -> ExecutionReport:
    """Run every enabled, applicable detector against ``context.document``.

    Categories are visited in declaration order and detectors in
    registration order, so the candidate list is deterministic. If any
    detector in a category raises, that whole category contributes nothing
    for this call and the failure is recorded in the report.
    """

    report = ExecutionReport()
    for category in IssueCategory:
        if not categories.is_enabled(category):
            continue
        detectors = [
            detector
            for detector in registry.detectors_for(category, context.mode)
            if detector.applies_to(context) and categories.allows(detector.gate)
        ]
        if not detectors:
            continue

        category_candidates: list[CandidateIssue] = []
        try:
            for detector in detectors:
                category_candidates.extend(
                    _run_detector(detector, category, context, registry)
                )
        except Exception:
            LOGGER.exception(
                "Detector failure in category %s (mode=%s); dropping its candidates",
                category.value,
                context.mode.value,
            )
            report.failed_categories.append(category.value)
            continue

        report.detector_counts[category.value] = len(category_candidates)
        report.candidates.extend(category_candidates)

    return report
