"""Email tone rules: informal expressions and emotional or pressuring language."""

from __future__ import annotations

from ..engine.registry import EMAIL_ONLY, DetectorRegistry, PatternDetector
from ..engine.templates import MessageTemplate
from ..models import IssueCategory, Severity

# (slug, pattern, suggestion, explanation, severity)
_INFORMAL_EXPRESSIONS = (
    (
        "informal_greeting_word",
        r"\b(?:hey|yo|sup|what's up)\b",
        "Hello",
        'Use formal greetings ("Hello" or "Dear [Name]") in workplace emails.',
        Severity.HIGH,
    ),
    (
        "informal_contraction",
        r"\b(?:gonna|wanna|gotta)\b",
        "going to / want to / got to",
        "Avoid contractions and informal language in professional emails. Use full forms.",
        Severity.HIGH,
    ),
    (
        "informal_thanks",
        r"\b(?:thx|thanks a lot|ty)\b",
        "Thank you",
        'Use complete, professional expressions. "Thank you" is more appropriate than '
        '"thx" or "ty".',
        Severity.MODERATE,
    ),
    (
        "internet_slang",
        r"\b(?:lol|omg|btw|fyi)\b",
        "(remove)",
        "Avoid internet slang and abbreviations in professional emails.",
        Severity.MODERATE,
    ),
    (
        "casual_apology",
        r"\b(?:sorry|oops|my bad)\b",
        "I apologize",
        'Use formal apologies ("I apologize" or "I sincerely apologize") instead of casual '
        "expressions.",
        Severity.MODERATE,
    ),
)

_EMOTIONAL_LANGUAGE = (
    (
        "emotional_intensity",
        r"\b(?:very|extremely|really)\s+(?:upset|angry|frustrated|disappointed)\b",
        "concerned",
        'Avoid emotional language. Use neutral, professional terms like "concerned" or '
        '"would like to address".',
    ),
    (
        "pressure",
        r"\b(?:must|have to|need to)\s+(?:urgently|immediately|right away|asap)\b",
        "would appreciate if",
        'Avoid pressure language. Use polite requests like "I would appreciate if..." instead '
        "of demanding urgency.",
    ),
)


def register(registry: DetectorRegistry) -> None:
    for slug, pattern, suggestion, explanation, severity in _INFORMAL_EXPRESSIONS:
        registry.add(
            PatternDetector(f"tone.{slug}", IssueCategory.TONE, pattern, modes=EMAIL_ONLY),
            {
                None: MessageTemplate(
                    'Informal expression detected: "{match}"',
                    severity,
                    suggestion,
                    explanation,
                ),
            },
        )

    for slug, pattern, suggestion, explanation in _EMOTIONAL_LANGUAGE:
        registry.add(
            PatternDetector(f"tone.{slug}", IssueCategory.TONE, pattern, modes=EMAIL_ONLY),
            {
                None: MessageTemplate(
                    "Emotional or pressuring language detected",
                    Severity.HIGH,
                    suggestion,
                    explanation,
                ),
            },
        )
