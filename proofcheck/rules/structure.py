"""Structure rules.

Email mode checks that the message has its expected parts (subject,
greeting, a clear request, closing) and that purpose-specific details such
as dates or meeting times are present. Standard academic mode flags
sentences that mix opinion, findings and recommendations.

Missing-part checks anchor on a zero-width position; the validator drops
those because they carry no text, but they still take part in conflict
resolution.
"""

from __future__ import annotations

import re
from re import Match
from typing import Iterator

from ..engine.regions import SUBJECT_PATTERN
from ..engine.registry import (
    EMAIL_ONLY,
    STANDARD_ONLY,
    ContextPredicate,
    DetectorRegistry,
    FunctionDetector,
    Hit,
    PatternDetector,
    ScanContext,
)
from ..engine.templates import MessageTemplate
from ..models import EmailPurpose, IssueCategory, RegionName, Severity

SUBJECT_MAX_LENGTH = 60
BODY_PREVIEW_LENGTH = 50

_EMPTY_SUBJECT = re.compile(r"^Subject:\s*", re.IGNORECASE | re.MULTILINE)
_INFORMAL_GREETING = re.compile(r"\b(?:hey|hi there|yo)\b", re.IGNORECASE)
_REQUEST_WORDS = re.compile(r"\b(?:request|requesting|would like|asking|seeking)\b", re.IGNORECASE)
_LAST_PARAGRAPH = re.compile(r"\n\n([^\n]*)$", re.MULTILINE)
_DATE_RANGE = re.compile(r"\b(?:from|starting|beginning).*\b(?:to|until|through|ending)\b", re.IGNORECASE)
_TIME_SLOT = re.compile(r"\b(?:at|on|by|before|after)\s+\d+|\b(?:morning|afternoon|evening)\b", re.IGNORECASE)

_SUBJECT_HINTS = {
    EmailPurpose.VACATION_REQUEST.value: "Vacation Request",
    EmailPurpose.MEETING_REQUEST.value: "Meeting Request",
}
_REQUEST_LABELS = {
    EmailPurpose.VACATION_REQUEST.value: "vacation requests",
    EmailPurpose.MEETING_REQUEST.value: "meeting requests",
}
_LEAVE_PURPOSES = (EmailPurpose.VACATION_REQUEST, EmailPurpose.SICK_LEAVE)


def _purpose_in(*purposes: EmailPurpose) -> ContextPredicate:
    wanted = {purpose.value for purpose in purposes}

    def predicate(context: ScanContext) -> bool:
        return context.email.purpose in wanted

    return predicate


def _greeting_hint(context: ScanContext) -> str:
    if context.email.recipient_type in ("Manager", "HR"):
        return "Dear [Name],"
    return "Hello,"


def _body_preview(text: str) -> Hit:
    return Hit(
        start=0,
        end=min(BODY_PREVIEW_LENGTH, len(text)),
        claimed=text[:BODY_PREVIEW_LENGTH] + "...",
    )


def scan_missing_subject(text: str, context: ScanContext) -> Iterator[Hit]:
    if context.regions is None or context.regions.subject.text.strip():
        return
    match = _EMPTY_SUBJECT.search(text)
    index = match.end() if match else 0
    hint = _SUBJECT_HINTS.get(context.email.purpose, "Email Subject")
    yield Hit(start=index, end=index, fields={"subject_hint": hint})


def scan_long_subject(text: str, context: ScanContext) -> Iterator[Hit]:
    if context.regions is None:
        return
    subject = context.regions.subject.text
    if len(subject) <= SUBJECT_MAX_LENGTH:
        return
    match = SUBJECT_PATTERN.search(text)
    if match is None:
        return
    yield Hit(
        start=match.start(1),
        end=match.end(1),
        claimed=subject,
        fields={"shortened": subject[: SUBJECT_MAX_LENGTH - 3] + "..."},
    )


def scan_missing_greeting(text: str, context: ScanContext) -> Iterator[Hit]:
    if context.regions is None or context.regions.greeting.text.strip():
        return
    yield Hit(start=0, end=0, fields={"greeting_hint": _greeting_hint(context)})


def scan_informal_greeting(text: str, context: ScanContext) -> Iterator[Hit]:
    if not text.strip() or _INFORMAL_GREETING.search(text) is None:
        return
    yield Hit(start=0, end=len(text), fields={"greeting_hint": _greeting_hint(context)})


def scan_request_statement(text: str, context: ScanContext) -> Iterator[Hit]:
    if not text or _REQUEST_WORDS.search(text):
        return
    hit = _body_preview(text)
    label = _REQUEST_LABELS.get(context.email.purpose, "requests")
    yield Hit(hit.start, hit.end, hit.claimed, {"request_label": label})


def scan_missing_closing(text: str, context: ScanContext) -> Iterator[Hit]:
    if context.regions is None or context.regions.closing.text.strip():
        return
    match = _LAST_PARAGRAPH.search(text)
    index = match.start(1) if match else max(0, len(text) - 1)
    hint = "Sincerely," if context.email.required_tone == "Formal" else "Best regards,"
    yield Hit(start=index, end=index, fields={"closing_hint": hint})


def scan_date_range(text: str, context: ScanContext) -> Iterator[Hit]:
    if len(text) <= BODY_PREVIEW_LENGTH or _DATE_RANGE.search(text):
        return
    hit = _body_preview(text)
    leave = "Vacation" if context.email.purpose == EmailPurpose.VACATION_REQUEST.value else "Leave"
    yield Hit(hit.start, hit.end, hit.claimed, {"leave_label": leave})


def scan_meeting_time(text: str, context: ScanContext) -> Iterator[Hit]:
    if len(text) <= BODY_PREVIEW_LENGTH or _TIME_SLOT.search(text):
        return
    yield _body_preview(text)


def _mixed_focus_claim(match: Match[str]) -> str:
    text = match.group(0)
    return text[:60] + ("..." if len(text) > 60 else "")


_MIXED_FOCUS = (
    (
        "mixed_opinion_findings",
        r"\b(?:I\s+think|I\s+believe|In\s+my\s+opinion|I\s+feel)\s+.*?"
        r"(?:the\s+results|the\s+findings|the\s+data|it\s+shows|it\s+indicates)\b",
        "Structure: This paragraph mixes personal opinion with findings. Academic writing is "
        "clearer when opinions, findings, and recommendations are separated into distinct "
        "paragraphs.",
    ),
    (
        "mixed_findings_recommendations",
        r"\b(?:the\s+results|the\s+findings|the\s+data)\s+.*?(?:should|must|need\s+to|recommend)\b",
        "Structure: This paragraph mixes findings with recommendations. Consider separating "
        "findings and recommendations into distinct paragraphs for better clarity.",
    ),
)


def register(registry: DetectorRegistry) -> None:
    registry.add(
        FunctionDetector(
            "structure.missing_subject",
            IssueCategory.STRUCTURE,
            scan_missing_subject,
            modes=EMAIL_ONLY,
        ),
        {
            None: MessageTemplate(
                "Missing or empty subject line",
                Severity.HIGH,
                "Subject: {subject_hint}",
                "Professional emails must have a clear, descriptive subject line that explains "
                "the email purpose.",
            ),
        },
    )
    registry.add(
        FunctionDetector(
            "structure.subject_too_long",
            IssueCategory.STRUCTURE,
            scan_long_subject,
            modes=EMAIL_ONLY,
        ),
        {
            None: MessageTemplate(
                "Subject line is too long",
                Severity.MODERATE,
                "{shortened}",
                "Subject lines should be concise (under 60 characters) for better readability "
                "and mobile display.",
            ),
        },
    )
    registry.add(
        FunctionDetector(
            "structure.missing_greeting",
            IssueCategory.STRUCTURE,
            scan_missing_greeting,
            target=RegionName.BODY,
            modes=EMAIL_ONLY,
        ),
        {
            None: MessageTemplate(
                "Missing greeting",
                Severity.MODERATE,
                "{greeting_hint}",
                "Professional emails should start with an appropriate greeting. For "
                '{recipient_type}, use "Dear [Name]" or "Hello,".',
            ),
        },
    )
    registry.add(
        FunctionDetector(
            "structure.informal_greeting",
            IssueCategory.STRUCTURE,
            scan_informal_greeting,
            target=RegionName.GREETING,
            modes=EMAIL_ONLY,
        ),
        {
            None: MessageTemplate(
                "Informal greeting detected",
                Severity.HIGH,
                "{greeting_hint}",
                'Use professional greetings for {recipient_type}. "Dear [Name]," or "Hello," '
                "is more appropriate.",
            ),
        },
    )
    registry.add(
        FunctionDetector(
            "structure.request_statement",
            IssueCategory.STRUCTURE,
            scan_request_statement,
            target=RegionName.BODY,
            modes=EMAIL_ONLY,
            when=_purpose_in(
                EmailPurpose.VACATION_REQUEST,
                EmailPurpose.SICK_LEAVE,
                EmailPurpose.MEETING_REQUEST,
            ),
        ),
        {
            None: MessageTemplate(
                "Request statement not clearly stated",
                Severity.MODERATE,
                "I would like to request...",
                "For {request_label}, clearly state what you are requesting using phrases like "
                '"I would like to request..." or "I am requesting...".',
            ),
        },
    )
    registry.add(
        FunctionDetector(
            "structure.missing_closing",
            IssueCategory.STRUCTURE,
            scan_missing_closing,
            modes=EMAIL_ONLY,
        ),
        {
            None: MessageTemplate(
                "Missing professional closing",
                Severity.MODERATE,
                "{closing_hint}",
                "Professional emails should end with an appropriate closing such as "
                '"Best regards," "Sincerely," or "Thank you,".',
            ),
        },
    )
    registry.add(
        FunctionDetector(
            "structure.date_range",
            IssueCategory.STRUCTURE,
            scan_date_range,
            target=RegionName.BODY,
            modes=EMAIL_ONLY,
            when=_purpose_in(*_LEAVE_PURPOSES),
            gate="purpose",
        ),
        {
            None: MessageTemplate(
                "Date range not clearly specified",
                Severity.MODERATE,
                "from [start date] to [end date]",
                "{leave_label} requests should clearly state the date range (e.g., "
                '"from [date] to [date]" or "starting [date] until [date]").',
            ),
        },
    )
    registry.add(
        FunctionDetector(
            "structure.meeting_time",
            IssueCategory.STRUCTURE,
            scan_meeting_time,
            target=RegionName.BODY,
            modes=EMAIL_ONLY,
            when=_purpose_in(EmailPurpose.MEETING_REQUEST),
            gate="purpose",
        ),
        {
            None: MessageTemplate(
                "Meeting time not specified",
                Severity.MODERATE,
                "I am available [time slots]",
                "Meeting requests should include preferred time slots or availability windows "
                "to help the recipient respond efficiently.",
            ),
        },
    )

    for slug, pattern, message in _MIXED_FOCUS:
        registry.add(
            PatternDetector(
                f"structure.{slug}",
                IssueCategory.STRUCTURE,
                pattern,
                modes=STANDARD_ONLY,
                min_length=31,
                max_span=100,
                claim=_mixed_focus_claim,
            ),
            {None: MessageTemplate(message, Severity.LOW)},
        )
