"""Spelling rules: common misspellings and confused words."""

from __future__ import annotations

import re
from re import Match

from ..engine.registry import PROOFREADING_MODES, DetectorRegistry, PatternDetector
from ..engine.templates import MessageTemplate
from ..models import IssueCategory, Severity
from .common import proofreading_variants

_EVERYDAY_AS_ADVERB = re.compile(r"\beveryday\s+\w+\s+\w+|\w+\s+everyday", re.IGNORECASE)


def _email_template(original: str, suggestion: str, explanation: str) -> MessageTemplate:
    return MessageTemplate(
        f'Spelling error: "{original}" should be "{suggestion}"',
        Severity.MODERATE,
        suggestion,
        explanation,
    )


def _swap_ie(match: Match[str]) -> dict[str, str]:
    # "recieve" -> "receive", keeping the writer's casing
    word = match.group(0)
    index = word.lower().find("ciev") + 1
    return {"corrected": word[:index] + word[index + 1] + word[index] + word[index + 2 :]}


def _everyday_as_adverb(text: str, match: Match[str]) -> bool:
    context = text[max(0, match.start() - 20) : match.start() + 30]
    return _EVERYDAY_AS_ADVERB.search(context) is not None


def register(registry: DetectorRegistry) -> None:
    registry.add(
        PatternDetector("spelling.alot", IssueCategory.SPELLING, r"\balot\b"),
        proofreading_variants(
            "Spelling",
            '"alot" should be written as two words: "a lot"',
            general=Severity.LOW,
            academic=Severity.MODERATE,
            suggestion="a lot",
            email=_email_template(
                "alot",
                "a lot",
                '"alot" is not a word. Use "a lot" (two words) in professional communication.',
            ),
        ),
    )
    registry.add(
        PatternDetector(
            "spelling.its_contraction",
            IssueCategory.SPELLING,
            r"\b(its)\s+(?:is|was|will|has|had)\b",
            group=1,
        ),
        proofreading_variants(
            "Spelling",
            "\"its\" (possessive) vs \"it's\" (contraction). Use \"it's\" here.",
            general=Severity.LOW,
            academic=Severity.MODERATE,
            suggestion="it's",
            email=_email_template(
                "its",
                "it's",
                "Use \"it's\" (contraction of \"it is\") here, not \"its\" (possessive).",
            ),
        ),
    )
    registry.add(
        PatternDetector(
            "spelling.receive",
            IssueCategory.SPELLING,
            r"\b\w*ciev\w*",
            extra_fields=_swap_ie,
        ),
        proofreading_variants(
            "Spelling",
            '"{match}" is misspelled. Use "{corrected}" (i before e, except after c).',
            general=Severity.LOW,
            academic=Severity.MODERATE,
            suggestion="{corrected}",
            email=MessageTemplate(
                'Spelling error: "{match}" should be "{corrected}"',
                Severity.MODERATE,
                "{corrected}",
                'Correct spelling: "receive" (i before e, except after c).',
            ),
        ),
    )
    registry.add(
        PatternDetector(
            "spelling.welcome",
            IssueCategory.SPELLING,
            r"\byour\s+(welcom)\b",
            group=1,
        ),
        proofreading_variants(
            "Spelling",
            '"welcom" is misspelled. The correct spelling is "welcome".',
            general=Severity.LOW,
            academic=Severity.MODERATE,
            suggestion="welcome",
            email=_email_template("welcom", "welcome", 'Correct spelling is "welcome".'),
        ),
    )
    registry.add(
        PatternDetector(
            "spelling.their_there",
            IssueCategory.SPELLING,
            r"\b(their)\s+(?:is|was|are|were)\b",
            group=1,
            modes=PROOFREADING_MODES,
        ),
        proofreading_variants(
            "Spelling",
            '"{match}" (possessive) should be "there" before a form of "to be".',
            general=Severity.LOW,
            academic=Severity.MODERATE,
            suggestion="there",
        ),
    )
    registry.add(
        PatternDetector(
            "spelling.loose_lose",
            IssueCategory.SPELLING,
            r"\b(loose)\s+(?:the|a|an|your|their|its)\b",
            group=1,
            modes=PROOFREADING_MODES,
        ),
        proofreading_variants(
            "Spelling",
            '"loose" (adjective) vs "lose" (verb). Use "lose" here.',
            general=Severity.LOW,
            academic=Severity.MODERATE,
            suggestion="lose",
        ),
    )
    registry.add(
        PatternDetector(
            "spelling.everyday",
            IssueCategory.SPELLING,
            r"\beveryday\b",
            guard=_everyday_as_adverb,
            modes=PROOFREADING_MODES,
        ),
        proofreading_variants(
            "Spelling",
            '"everyday" (adjective) vs "every day" (adverb phrase). '
            'Use "every day" when describing frequency.',
            general=Severity.LOW,
            academic=Severity.MODERATE,
            suggestion="every day",
        ),
    )
