"""Academic writing rules shared by the standard and research modes.

Opinion and self-evaluation findings are reported as ``academic_tone`` in
the standard mode and as ``academic_objectivity`` in the research mode.
"""

from __future__ import annotations

from ..engine.registry import (
    ACADEMIC_MODES,
    STANDARD_ONLY,
    DetectorRegistry,
    PatternDetector,
    TemplateKey,
)
from ..engine.templates import MessageTemplate
from ..models import IssueCategory, Severity, WritingMode
from .common import register_pattern_table

_RESEARCH_OBJECTIVITY = {WritingMode.ACADEMIC_RESEARCH: IssueCategory.ACADEMIC_OBJECTIVITY}

OPINION_CLAIM_PATTERN = (
    r"\b(?:I|we)\s+(?:think|believe|feel)\s+(?:that\s+)?"
    r"(?:this|it|these\s+\w+|the\s+\w+)\s+(?:clearly\s+)?(?:proves?|shows?|demonstrates?)\b"
)

_FIRST_PERSON = (
    ("i_think", r"\bI\s+think\b", "This suggests"),
    ("i_believe", r"\bI\s+believe\b", "The evidence indicates"),
    ("in_my_opinion", r"\bIn\s+my\s+opinion\b", "From the analysis"),
    ("from_my_opinion", r"\bFrom\s+my\s+opinion\b", "From the analysis"),
    ("i_feel_that", r"\bI\s+feel\s+that\b", "The data shows that"),
    ("i_would_say", r"\bI\s+would\s+say\b", "It can be argued"),
)

_CONTRACTIONS = (
    ("cant", r"\bcan't\b", "cannot"),
    ("dont", r"\bdon't\b", "do not"),
    ("wont", r"\bwon't\b", "will not"),
    ("its", r"\bit's\b", "it is"),
    ("thats", r"\bthat's\b", "that is"),
    ("theres", r"\bthere's\b", "there is"),
)

_SELF_EVALUATION = (
    ("self_really_good", r"\bthis\s+(?:research|study|paper|analysis)\s+is\s+really\s+good\b"),
    ("self_very_good", r"\bthis\s+(?:research|study|paper|analysis)\s+is\s+very\s+good\b"),
    ("self_tries_to", r"\bthis\s+(?:research|study|paper|analysis)\s+tries\s+to\b"),
)

_STRONG_CLAIM_MESSAGE = (
    "Academic logic: Overly strong claim detected. Consider softening using academic hedging "
    '(e.g., "suggests", "appears to", "may indicate").'
)
_STRONG_CLAIMS = (
    ("strong_clearly_proves", r"\bclearly\s+proves?\b", _STRONG_CLAIM_MESSAGE),
    ("strong_definitely_shows", r"\bdefinitely\s+shows?\b", _STRONG_CLAIM_MESSAGE),
    ("strong_always", r"\balways\s+(?:means|leads|results|causes)\b", _STRONG_CLAIM_MESSAGE),
    ("strong_never", r"\bnever\s+(?:means|leads|results|causes)\b", _STRONG_CLAIM_MESSAGE),
    ("strong_proves_that", r"\bproves?\s+that\b", _STRONG_CLAIM_MESSAGE),
)

_WEAK_CONCLUSIONS = (
    (
        "conclusion_evaluates_quality",
        r"\bthis\s+(?:study|research|paper|analysis)\s+is\s+(?:really|very)\s+"
        r"(?:good|bad|important|useful)\b",
        "Academic logic: Conclusion evaluates research quality. Academic conclusions should "
        "summarize findings and implications rather than evaluate the quality of the research.",
    ),
    (
        "conclusion_repeats",
        r"\b(?:in\s+conclusion|to\s+conclude|finally)\s+.*?"
        r"(?:this\s+study|this\s+research|this\s+paper)\s+(?:is|was|has|does)\s+"
        r"(?:the\s+same|similar|repeated|again)\b",
        "Academic logic: Conclusion appears to repeat content without summarizing key findings. "
        "Academic conclusions should synthesize and summarize main findings and their "
        "implications.",
    ),
)

_INFORMAL_REGISTER_MESSAGE = (
    "Academic style: Informal or conversational language detected. Consider replacing informal "
    "expressions with more formal academic language."
)
_INFORMAL_REGISTER = (
    ("register_really_good", r"\breally\s+good\b", _INFORMAL_REGISTER_MESSAGE),
    ("register_very_bad", r"\bvery\s+bad\b", _INFORMAL_REGISTER_MESSAGE),
    ("register_a_lot_of", r"\ba\s+lot\s+of\b", _INFORMAL_REGISTER_MESSAGE),
)


def _tone_or_objectivity(
    standard: str,
    research: str,
    severity: Severity,
    suggestion: str = "",
) -> dict[TemplateKey, MessageTemplate]:
    return {
        WritingMode.ACADEMIC_STANDARD: MessageTemplate(standard, severity, suggestion),
        WritingMode.ACADEMIC_RESEARCH: MessageTemplate(research, severity, suggestion),
    }


def register(registry: DetectorRegistry) -> None:
    registry.add(
        PatternDetector(
            "academic.opinion_claim",
            IssueCategory.ACADEMIC_TONE,
            OPINION_CLAIM_PATTERN,
            modes=ACADEMIC_MODES,
            mode_categories=_RESEARCH_OBJECTIVITY,
        ),
        _tone_or_objectivity(
            "Academic tone: Personal opinion is presented as proof. State what the evidence "
            "shows instead of what you think it proves.",
            "Academic objectivity: Opinion framed as proof undermines research credibility. "
            "Report what the evidence indicates without personal framing.",
            Severity.HIGH,
            "The evidence suggests",
        ),
    )

    for slug, pattern, suggestion in _FIRST_PERSON:
        registry.add(
            PatternDetector(
                f"academic.first_person_{slug}",
                IssueCategory.ACADEMIC_TONE,
                pattern,
                modes=ACADEMIC_MODES,
                mode_categories=_RESEARCH_OBJECTIVITY,
            ),
            _tone_or_objectivity(
                "Academic tone: Avoid personal opinion. Use objective, evidence-based language.",
                "Academic objectivity: Personal opinion undermines research credibility. Use "
                "objective, evidence-based language.",
                Severity.HIGH,
                suggestion,
            ),
        )

    for slug, pattern, suggestion in _CONTRACTIONS:
        registry.add(
            PatternDetector(
                f"academic.contraction_{slug}",
                IssueCategory.ACADEMIC_TONE,
                pattern,
                modes=ACADEMIC_MODES,
            ),
            {
                WritingMode.ACADEMIC_STANDARD: MessageTemplate(
                    "Academic tone: Avoid contractions in formal academic writing. Use the full "
                    "form.",
                    Severity.MODERATE,
                    suggestion,
                ),
                WritingMode.ACADEMIC_RESEARCH: MessageTemplate(
                    "Academic tone: Contractions are inappropriate in research writing. Use the "
                    "full form.",
                    Severity.HIGH,
                    suggestion,
                ),
            },
        )

    for slug, pattern in _SELF_EVALUATION:
        registry.add(
            PatternDetector(
                f"academic.{slug}",
                IssueCategory.ACADEMIC_TONE,
                pattern,
                modes=ACADEMIC_MODES,
                mode_categories=_RESEARCH_OBJECTIVITY,
            ),
            _tone_or_objectivity(
                "Academic tone: Avoid self-evaluation in academic writing. Let readers assess "
                "the quality of your work.",
                "Academic objectivity: Self-evaluation undermines research credibility. Remove "
                "subjective assessments and let evidence speak.",
                Severity.HIGH,
            ),
        )

    register_pattern_table(
        registry, "academic", IssueCategory.ACADEMIC_LOGIC, Severity.MODERATE, _STRONG_CLAIMS,
        modes=STANDARD_ONLY,
    )
    register_pattern_table(
        registry, "academic", IssueCategory.ACADEMIC_LOGIC, Severity.LOW, _WEAK_CONCLUSIONS,
        modes=STANDARD_ONLY,
    )
    register_pattern_table(
        registry, "academic", IssueCategory.ACADEMIC_STYLE, Severity.LOW, _INFORMAL_REGISTER,
        modes=STANDARD_ONLY,
    )
