"""Clarity rules: sentence length, vague wording and absolute claims."""

from __future__ import annotations

from typing import Iterator

from ..engine.matching import count_words, iter_sentences
from ..engine.registry import (
    ACADEMIC_MODES,
    EMAIL_ONLY,
    PROOFREADING_MODES,
    STANDARD_ONLY,
    DetectorRegistry,
    FunctionDetector,
    Hit,
    PatternDetector,
    ScanContext,
)
from ..engine.templates import MessageTemplate
from ..models import IssueCategory, RegionName, Severity, WritingMode
from .common import register_pattern_table

MAX_SENTENCE_WORDS = {
    WritingMode.GENERAL: 40,
    WritingMode.ACADEMIC_STANDARD: 35,
    WritingMode.ACADEMIC_RESEARCH: 30,
    WritingMode.EMAIL: 30,
}
EMAIL_SPAN_LIMIT = 50

_VAGUE_STATEMENTS = (
    ("vague_very_important", r"\bthis\s+is\s+very\s+important\b"),
    ("vague_should_be_improved", r"\bsomething\s+should\s+be\s+improved\b"),
    ("vague_many", r"\bmany\s+(?:students|people|researchers|studies)\b"),
)


def _preview(sentence: str) -> str:
    return sentence[:50] + "..."


def scan_long_sentences(text: str, context: ScanContext) -> Iterator[Hit]:
    limit = MAX_SENTENCE_WORDS[context.mode]
    for offset, sentence in iter_sentences(text):
        words = count_words(sentence)
        if words > limit:
            yield Hit(
                start=offset,
                end=offset + len(sentence),
                claimed=_preview(sentence),
                fields={"word_count": str(words), "word_limit": str(limit)},
            )


def scan_long_email_sentences(text: str, context: ScanContext) -> Iterator[Hit]:
    limit = MAX_SENTENCE_WORDS[WritingMode.EMAIL]
    for offset, sentence in iter_sentences(text):
        words = count_words(sentence)
        if words > limit:
            yield Hit(
                start=offset,
                end=offset + min(len(sentence), EMAIL_SPAN_LIMIT),
                claimed=_preview(sentence),
                fields={"word_count": str(words), "word_limit": str(limit)},
            )


def register(registry: DetectorRegistry) -> None:
    registry.add(
        FunctionDetector(
            "clarity.long_sentence",
            IssueCategory.CLARITY,
            scan_long_sentences,
            modes=PROOFREADING_MODES,
        ),
        {
            None: MessageTemplate(
                "This sentence is quite long. Consider breaking it into shorter sentences for "
                "better clarity.",
                Severity.LOW,
            ),
            WritingMode.ACADEMIC_STANDARD: MessageTemplate(
                "Clarity: This sentence is too long for academic writing. Consider breaking it "
                "into shorter, clearer sentences.",
                Severity.MODERATE,
            ),
            WritingMode.ACADEMIC_RESEARCH: MessageTemplate(
                "Clarity: Long sentences reduce readability in research writing. Break into "
                "shorter, focused sentences.",
                Severity.MODERATE,
            ),
        },
    )
    registry.add(
        FunctionDetector(
            "clarity.email_long_sentence",
            IssueCategory.CLARITY,
            scan_long_email_sentences,
            target=RegionName.BODY,
            modes=EMAIL_ONLY,
        ),
        {
            None: MessageTemplate(
                "Sentence is too long",
                Severity.MODERATE,
                explanation="Long sentences reduce clarity. Break into shorter, clearer "
                "sentences (aim for 15-20 words per sentence).",
            ),
        },
    )
    registry.add(
        PatternDetector(
            "clarity.vague_terms",
            IssueCategory.CLARITY,
            r"\b(?:thing|stuff|something|things)\b",
            target=RegionName.BODY,
            modes=EMAIL_ONLY,
        ),
        {
            None: MessageTemplate(
                "Vague language detected",
                Severity.LOW,
                "(be specific)",
                'Use specific terms instead of vague words like "thing" or "stuff" to improve '
                "clarity and professionalism.",
            ),
        },
    )

    registry.add(
        PatternDetector(
            "clarity.absolute_claim",
            IssueCategory.CLARITY,
            r"\bthis\s+clearly\s+(?:proves?|shows?)\s+that\b",
            modes=ACADEMIC_MODES,
        ),
        {
            None: MessageTemplate(
                "This claim may require softer wording or supporting evidence.",
                Severity.MODERATE,
            ),
            WritingMode.ACADEMIC_STANDARD: MessageTemplate(
                "Clarity: This claim may require softer wording or supporting evidence.",
                Severity.MODERATE,
            ),
        },
    )
    registry.add(
        PatternDetector(
            "clarity.absolute_judgement",
            IssueCategory.CLARITY,
            r"\bis\s+very\s+bad\b",
            modes=ACADEMIC_MODES,
        ),
        {
            None: MessageTemplate(
                "Consider using more nuanced language instead of absolute statements.",
                Severity.MODERATE,
            ),
            WritingMode.ACADEMIC_STANDARD: MessageTemplate(
                "Clarity: Consider using more nuanced language instead of absolute statements.",
                Severity.MODERATE,
            ),
        },
    )

    register_pattern_table(
        registry,
        "clarity",
        IssueCategory.CLARITY,
        Severity.LOW,
        [
            (
                slug,
                pattern,
                "Clarity: Vague or imprecise statement detected. Consider clarifying what exactly "
                "is meant to improve academic precision.",
            )
            for slug, pattern in _VAGUE_STATEMENTS
        ],
        modes=STANDARD_ONLY,
    )
