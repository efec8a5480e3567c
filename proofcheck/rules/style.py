"""Style rules: intensifiers, vague qualifiers and passive voice overuse."""

from __future__ import annotations

import re
from typing import Iterator

from ..engine.matching import iter_matches
from ..engine.registry import (
    PROOFREADING_MODES,
    RESEARCH_ONLY,
    DetectorRegistry,
    FunctionDetector,
    Hit,
    PatternDetector,
    ScanContext,
)
from ..engine.templates import MessageTemplate
from ..models import IssueCategory, Severity, WritingMode

PASSIVE_PATTERNS = (
    re.compile(
        r"\b(?:was|were|is|are)\s+(?:conducted|performed|carried\s+out|done|completed|analyzed|"
        r"examined|investigated|studied|explored|measured|collected|gathered|obtained|selected|"
        r"chosen|recruited|included|excluded)\b",
        re.IGNORECASE,
    ),
    re.compile(r"\b(?:by\s+the|by\s+a|by\s+an)\s+(?:researchers?|authors?|team|study|research)\b", re.IGNORECASE),
)
PASSIVE_MIN_LENGTH = 1000
PASSIVE_MAX_COUNT = 10

# (slug, pattern, general suggestion, academic suggestion)
_VAGUE_QUALIFIERS = (
    ("very_important", r"\b(?P<qualifier>very)\s+(?P<adjective>important)\b", "crucial", "significant"),
    ("really_good", r"\b(?P<qualifier>really)\s+(?P<adjective>good)\b", "excellent", "effective"),
    ("very_bad", r"\b(?P<qualifier>very)\s+(?P<adjective>bad)\b", "detrimental", "problematic"),
    (
        "pretty",
        r"\b(?P<qualifier>pretty)\s+(?P<adjective>good|bad|sure)\b",
        "quite {adjective}",
        "moderately {adjective}",
    ),
)


def scan_passive_voice(text: str, context: ScanContext) -> Iterator[Hit]:
    """Flag heavy passive usage once, on the first passive construction."""

    if len(text) <= PASSIVE_MIN_LENGTH:
        return
    matches = [match for pattern in PASSIVE_PATTERNS for match in iter_matches(pattern, text)]
    if len(matches) <= PASSIVE_MAX_COUNT:
        return
    first = min(matches, key=lambda match: match.start())
    yield Hit(
        start=first.start(),
        end=first.end(),
        fields={"passive_count": str(len(matches))},
    )


def register(registry: DetectorRegistry) -> None:
    registry.add(
        PatternDetector(
            "style.repeated_very",
            IssueCategory.STYLE,
            r"\bvery\s+very\b",
            modes=PROOFREADING_MODES,
        ),
        {
            None: MessageTemplate(
                'Repeated "very" weakens the writing. Use a stronger adjective instead.',
                Severity.LOW,
                "extremely",
            ),
            WritingMode.ACADEMIC_STANDARD: MessageTemplate(
                "Style: Avoid repeated intensifiers in academic writing. "
                "Use a more precise adjective instead.",
                Severity.MODERATE,
                "significantly",
            ),
            WritingMode.ACADEMIC_RESEARCH: MessageTemplate(
                "Style: Repeated intensifiers weaken academic argumentation. "
                "Use precise, evidence-based language.",
                Severity.MODERATE,
                "significantly",
            ),
        },
    )

    for slug, pattern, general, academic in _VAGUE_QUALIFIERS:
        registry.add(
            PatternDetector(
                f"style.vague_{slug}",
                IssueCategory.STYLE,
                pattern,
                modes=PROOFREADING_MODES,
            ),
            {
                None: MessageTemplate(
                    'Consider using a more specific word than "{qualifier}".',
                    Severity.LOW,
                    general,
                ),
                WritingMode.ACADEMIC_STANDARD: MessageTemplate(
                    'Style: Avoid vague qualifiers like "{qualifier}" in academic writing. '
                    "Use more precise language.",
                    Severity.MODERATE,
                    academic,
                ),
                WritingMode.ACADEMIC_RESEARCH: MessageTemplate(
                    "Style: Vague qualifiers weaken research credibility. "
                    'Replace "{qualifier}" with precise terminology.',
                    Severity.MODERATE,
                    academic,
                ),
            },
        )

    registry.add(
        FunctionDetector(
            "style.passive_voice",
            IssueCategory.STYLE,
            scan_passive_voice,
            modes=RESEARCH_ONLY,
        ),
        {
            None: MessageTemplate(
                "Style: Excessive passive voice detected ({passive_count} constructions). "
                "While passive voice is appropriate in methodology sections, consider using "
                "active voice where it improves clarity and readability, especially in results "
                "and discussion sections.",
                Severity.LOW,
            ),
        },
    )
