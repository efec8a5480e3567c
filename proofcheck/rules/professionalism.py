"""Professionalism rules: pressure, oversharing and exclamation runs."""

from __future__ import annotations

from ..engine.registry import EMAIL_ONLY, DetectorRegistry, PatternDetector
from ..engine.templates import MessageTemplate
from ..models import EmailPurpose, IssueCategory, RegionName, Severity, WritingMode

_LEAVE_PURPOSES = {EmailPurpose.VACATION_REQUEST.value, EmailPurpose.SICK_LEAVE.value}


def register(registry: DetectorRegistry) -> None:
    registry.add(
        PatternDetector(
            "professionalism.urgent",
            IssueCategory.PROFESSIONALISM,
            r"\b(?:asap|as soon as possible|urgently|immediately)\b",
            modes=EMAIL_ONLY,
        ),
        {
            None: MessageTemplate(
                "Pressuring or urgent language detected",
                Severity.HIGH,
                "at your earliest convenience",
                "Avoid urgent language that pressures the recipient. Use polite alternatives "
                'like "at your earliest convenience" or "when you have a chance".',
            ),
        },
    )
    registry.add(
        PatternDetector(
            "professionalism.demand_response",
            IssueCategory.PROFESSIONALISM,
            r"\b(?:must|have to|need to)\s+respond\b",
            modes=EMAIL_ONLY,
        ),
        {
            None: MessageTemplate(
                "Pressuring or urgent language detected",
                Severity.HIGH,
                "I would appreciate a response",
                "Avoid demanding responses. Use polite requests instead.",
            ),
        },
    )
    registry.add(
        PatternDetector(
            "professionalism.personal_details",
            IssueCategory.PROFESSIONALISM,
            r"\b(?:my family|my personal|my private|TMI|too much information)\b",
            target=RegionName.BODY,
            modes=EMAIL_ONLY,
            when=lambda context: context.email.purpose in _LEAVE_PURPOSES,
        ),
        {
            None: MessageTemplate(
                "Unnecessary personal details",
                Severity.MODERATE,
                "(remove)",
                "Keep workplace emails focused on business. Avoid oversharing personal "
                "information that is not relevant to the request.",
            ),
        },
    )
    registry.add(
        PatternDetector(
            "professionalism.exclamation_run",
            IssueCategory.PROFESSIONALISM,
            r"!{2,}",
            flags=0,
        ),
        {
            None: MessageTemplate("Multiple exclamation marks detected", Severity.MODERATE, "."),
            WritingMode.EMAIL: MessageTemplate(
                "Multiple exclamation marks detected",
                Severity.MODERATE,
                ".",
                "Avoid excessive exclamation marks in professional emails. Use periods for a "
                "more professional tone.",
            ),
        },
    )
