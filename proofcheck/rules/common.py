"""Shared helpers for building rule tables."""

from __future__ import annotations

from typing import Iterable, Sequence

from ..engine.registry import DetectorRegistry, PatternDetector, TemplateKey
from ..engine.templates import MessageTemplate
from ..models import IssueCategory, Severity, WritingMode


def proofreading_variants(
    label: str,
    message: str,
    *,
    general: Severity,
    academic: Severity,
    suggestion: str = "",
    academic_suggestion: str | None = None,
    standard_message: str | None = None,
    research_message: str | None = None,
    email: MessageTemplate | None = None,
) -> dict[TemplateKey, MessageTemplate]:
    """Templates for a detector shared by the proofreading modes.

    General mode uses ``message`` as is, the standard academic mode prefixes
    it with ``label`` unless ``standard_message`` is given, and research mode
    uses ``research_message`` or the plain message.
    """

    academic_hint = suggestion if academic_suggestion is None else academic_suggestion
    variants: dict[TemplateKey, MessageTemplate] = {
        None: MessageTemplate(message, general, suggestion),
        WritingMode.ACADEMIC_STANDARD: MessageTemplate(
            standard_message or f"{label}: {message}", academic, academic_hint
        ),
        WritingMode.ACADEMIC_RESEARCH: MessageTemplate(
            research_message or message, academic, academic_hint
        ),
    }
    if email is not None:
        variants[WritingMode.EMAIL] = email
    return variants


def register_pattern_table(
    registry: DetectorRegistry,
    prefix: str,
    category: IssueCategory,
    severity: Severity,
    table: Sequence[tuple[str, str, str]],
    *,
    modes: Iterable[WritingMode],
    **detector_kwargs,
) -> None:
    """Register one message-only detector per ``(slug, pattern, message)`` row."""

    modes = frozenset(modes)
    for slug, pattern, message in table:
        registry.add(
            PatternDetector(
                f"{prefix}.{slug}",
                category,
                pattern,
                modes=modes,
                **detector_kwargs,
            ),
            {None: MessageTemplate(message, severity)},
        )
