"""Grammar rules: agreement, spacing and research-level phrasing."""

from __future__ import annotations

from ..engine.registry import (
    ACADEMIC_MODES,
    EMAIL_ONLY,
    PROOFREADING_MODES,
    RESEARCH_ONLY,
    DetectorRegistry,
    PatternDetector,
)
from ..engine.templates import MessageTemplate
from ..models import IssueCategory, RegionName, Severity, WritingMode
from .common import proofreading_variants, register_pattern_table

# (slug, pattern, narrowed group, suggestion, subject description)
_AGREEMENT = (
    ("research_aim", r"\bThis\s+(?:research|study|paper|analysis)\s+(aim)\s+to\b", 1, "aims",
     '"This research" requires "aims" (third person singular)'),
    ("students_is", r"\bstudents\s+(is)\b", 1, "are",
     '"Students" (plural) requires "are" (not "is")'),
    ("it_shows", r"\bit\s+(show)\b", 1, "shows",
     '"It" (singular) requires "shows" (third person singular)'),
    ("it_causes", r"\bit\s+(cause)\b", 1, "causes",
     '"It" (singular) requires "causes" (third person singular)'),
    ("it_distracts", r"\bit\s+(distract)\b", 1, "distracts",
     '"It" (singular) requires "distracts" (third person singular)'),
    ("this_proves", r"\bthis\s+clearly\s+(prove)\b", 1, "proves",
     '"This" (singular) requires "proves" (third person singular)'),
)

_TENSE_SHIFTS = (
    (
        "tense_shift_results",
        r"\b(?:this\s+study|the\s+research|the\s+analysis)\s+(?:was|were)\s+"
        r"(?:conducted|performed|carried\s+out)\s+.*?"
        r"(?:the\s+results?\s+(?:show|shows|indicate|indicates|suggest|suggests))\b",
        'Grammar: Tense inconsistency. Past tense for methodology ("was conducted") should be '
        'followed by past tense for results ("showed", "indicated") or present tense for general '
        'statements ("shows", "indicates"). Maintain consistent tense within sections.',
    ),
    (
        "tense_shift_previous",
        r"\b(?:previous|prior|earlier)\s+(?:studies?|research|work)\s+"
        r"(?:shows?|showed|indicates?|indicated|suggests?|suggested)\s+.*?"
        r"(?:this\s+study|the\s+current\s+research)\s+(?:show|shows|indicate|indicates)\b",
        'Grammar: Tense consistency required. When referring to previous research, use past '
        'tense ("showed", "indicated"); when stating general facts or current findings, use '
        'present tense ("shows", "indicates").',
    ),
)

_VERB_HEAVY = (
    (
        "verb_heavy_method",
        r"\b(?:we|I|they|the\s+researchers?)\s+"
        r"(?:decided|chose|selected|picked|used|utilized|applied|employed)\s+"
        r"(?:to|a|an|the)\s+(?:method|approach|technique|procedure)\b",
        'Grammar: Verb-heavy phrasing. Academic writing often benefits from nominalization '
        '(noun forms). Consider: "The selection of the method" instead of "We selected the method".',
    ),
    (
        "verb_heavy_analysis",
        r"\b(?:we|I|they)\s+(?:analyzed|examined|investigated|studied|explored)\s+"
        r"(?:the|a|an)\s+(?:data|results?|findings?)\b",
        'Grammar: Consider nominalization for more formal academic tone. Instead of "We analyzed '
        'the data", consider "The analysis of the data" or "Data analysis revealed".',
    ),
)

_EMAIL_AGREEMENT = (
    ("email_i_need", r"\bI\s+(?:am|is|was)\s+(?:need|needs|want|wants)\b", "I need"),
    ("email_we_request", r"\bWe\s+(?:is|was)\s+(?:request|requests)\b", "We request"),
)


def register(registry: DetectorRegistry) -> None:
    registry.add(
        PatternDetector("grammar.multiple_spaces", IssueCategory.GRAMMAR, r"  +", flags=0),
        {
            None: MessageTemplate("Multiple spaces detected", Severity.LOW, " "),
            WritingMode.EMAIL: MessageTemplate(
                "Multiple spaces detected",
                Severity.LOW,
                " ",
                "Use single space between words. Multiple spaces look unprofessional.",
            ),
        },
    )

    for slug, pattern, group, suggestion, description in _AGREEMENT:
        registry.add(
            PatternDetector(
                f"grammar.{slug}",
                IssueCategory.GRAMMAR,
                pattern,
                group=group,
                modes=PROOFREADING_MODES,
            ),
            proofreading_variants(
                "Grammar",
                f"Subject-verb agreement: {description}",
                general=Severity.MODERATE,
                academic=Severity.HIGH,
                suggestion=suggestion,
                standard_message=f"Grammar: Subject-verb agreement error. {description}.",
            ),
        )

    registry.add(
        PatternDetector(
            "grammar.students_performance",
            IssueCategory.GRAMMAR,
            r"\bstudents\s+performance\b",
            modes=PROOFREADING_MODES,
        ),
        proofreading_variants(
            "Grammar",
            "Use possessive form \"students' performance\" or singular \"student performance\"",
            general=Severity.LOW,
            academic=Severity.MODERATE,
            suggestion="students' performance",
        ),
    )

    registry.add(
        PatternDetector(
            "grammar.singular_subject_verb",
            IssueCategory.GRAMMAR,
            r"\bThe\s+(?:data|research|study)\s+(?P<verb>show|indicate|suggest)\b",
            group="verb",
            modes=ACADEMIC_MODES,
        ),
        {
            None: MessageTemplate(
                "Grammar: Subject-verb agreement error. Singular subject requires singular verb.",
                Severity.HIGH,
                "{verb}s",
            ),
        },
    )

    register_pattern_table(
        registry, "grammar", IssueCategory.GRAMMAR, Severity.MODERATE, _TENSE_SHIFTS,
        modes=RESEARCH_ONLY,
    )
    register_pattern_table(
        registry, "grammar", IssueCategory.GRAMMAR, Severity.LOW, _VERB_HEAVY,
        modes=RESEARCH_ONLY,
    )

    for slug, pattern, fix in _EMAIL_AGREEMENT:
        registry.add(
            PatternDetector(
                f"grammar.{slug}",
                IssueCategory.GRAMMAR,
                pattern,
                target=RegionName.BODY,
                modes=EMAIL_ONLY,
            ),
            {
                None: MessageTemplate(
                    "Subject-verb agreement error",
                    Severity.HIGH,
                    fix,
                    'Ensure the verb matches the subject (first person singular uses "I need", '
                    'not "I needs").',
                ),
            },
        )
