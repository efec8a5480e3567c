"""Research-level rules (PhD writing).

Covers hedging, collective first person, citation warnings, section-aware
hints, methodology, evidence and overall research quality. Every detector
here runs only in the ``academic_research`` mode.
"""

from __future__ import annotations

import re
from re import Match

from ..engine.matching import has_citation_nearby, has_sample_justification
from ..engine.registry import (
    RESEARCH_ONLY,
    ContextPredicate,
    DetectorRegistry,
    PatternDetector,
    ScanContext,
)
from ..engine.templates import MessageTemplate
from ..models import IssueCategory, ResearchSection, Severity
from .common import register_pattern_table

LIMITATIONS_MIN_LENGTH = 2000
OPENING_WINDOW = 500

_LIMITATIONS_WORDING = re.compile(
    r"limitations?|constraints?|limitations?\s+of\s+this\s+study|study\s+limitations?"
    r"|methodological\s+limitations?|potential\s+biases?|acknowledge\s+limitations?",
    re.IGNORECASE,
)

# (slug, pattern, suggestion, message)
_OVERCONFIDENT = (
    (
        "overconfident_that",
        r"\b(?:proves?|proven|definitely|always|never|all|every)\s+that\b",
        "suggests / indicates",
        "Overconfident claim detected. Use hedging language (e.g., \"suggests\", \"indicates\", "
        "\"may\") to reflect uncertainty in research findings.",
    ),
    (
        "binary_judgement",
        r"\bis\s+(?:bad|good|wrong|right|correct|incorrect)\b",
        "may negatively affect / may positively influence",
        "Absolute judgment detected. Use nuanced, evidence-based language instead of binary "
        "judgments.",
    ),
    (
        "overconfident_verb",
        r"\b(?:clearly|obviously|undoubtedly|certainly)\s+(?:shows?|proves?|demonstrates?)\b",
        "suggests / indicates",
        "Overconfident language weakens academic credibility. Use hedging to acknowledge "
        "limitations.",
    ),
)

_COLLECTIVE_FIRST_PERSON = (
    ("we_think", r"\bwe\s+(?:think|believe|feel|consider)\b", "The analysis indicates"),
    ("our_opinion", r"\bour\s+(?:opinion|view|belief)\b", "The findings suggest"),
    ("we_conclude", r"\bwe\s+conclude\s+that\b", "The evidence leads to the conclusion that"),
)

_UNCITED_CLAIMS = (
    (
        "uncited_evidence",
        r"\b(?:studies|research|evidence|data|findings)\s+"
        r"(?:show|prove|demonstrate|indicate|suggest|reveal)\b",
    ),
    (
        "uncited_according_to",
        r"\b(?:according\s+to|as\s+(?:shown|demonstrated|indicated)\s+by)\s+"
        r"(?:studies|research|evidence)\b",
    ),
    ("uncited_previous_work", r"\b(?:previous|prior|earlier)\s+(?:studies|research|work|findings)\b"),
)

_CAUSATION = (
    (
        "causation_direct",
        r"\b(?:causes?|caused|leading\s+to|results?\s+in)\s+(?:directly|immediately|always)\s+"
        r"(?:means?|leads?\s+to|results?\s+in)\b",
        "Methodology: Correlation vs causation error. Correlation does not imply causation. Use "
        'language that acknowledges this distinction (e.g., "is associated with", "may be '
        'related to").',
    ),
    (
        "causation_findings",
        r"\b(?:this|these|the)\s+(?:results?|findings?|data)\s+(?:proves?|demonstrates?|shows?)\s+"
        r"that\s+\w+\s+(?:causes?|directly\s+affects?|leads?\s+to)\b",
        "Methodology: Correlation vs causation error. Research findings show associations, not "
        'necessarily causal relationships. Use appropriate language (e.g., "is associated '
        'with", "may contribute to").',
    ),
    (
        "causation_leap",
        r"\b(?:because|since|as)\s+(?:of|the)\s+\w+\s+(?:therefore|thus|so)\s+(?:it|this|that)\s+"
        r"(?:must|will|always)\s+(?:mean|be|cause)\b",
        "Methodology: Logical leap from correlation to causation. Ensure causal claims are "
        "supported by appropriate research design and analysis.",
    ),
)

_GENERALIZATION = (
    (
        "generalization_population",
        r"\b(?:all|every|always|never|none|no\s+one)\s+"
        r"(?:students?|people|researchers?|studies?|research)\s+(?:are|is|do|does|have|has)\b",
        "Methodology: Unsupported absolute generalization. Research rarely supports absolute "
        'claims. Use qualified language (e.g., "many", "most", "tends to", "often").',
    ),
    (
        "generalization_literature",
        r"\b(?:every|all)\s+(?:study|research|paper|analysis)\s+"
        r"(?:shows?|proves?|demonstrates?|indicates?)\b",
        "Methodology: Overgeneralization from limited evidence. Acknowledge the scope and "
        "limitations of the evidence base.",
    ),
    (
        "generalization_obvious",
        r"\b(?:it\s+is\s+(?:clear|obvious|evident|certain))\s+that\s+(?:all|every|always|never)\b",
        "Methodology: Absolute claim without sufficient evidence. Research requires nuanced, "
        "evidence-based language rather than absolute statements.",
    ),
)

_WEAK_METHODS = (
    (
        "method_vague",
        r"\b(?:simple|basic|easy|straightforward)\s+(?:method|approach|analysis|technique|procedure)\b",
        "Methodology: Vague methodology description. PhD-level research requires precise, "
        "detailed methodology descriptions. Specify the exact methods, procedures, and "
        "analytical techniques used.",
    ),
    (
        "method_standard",
        r"\b(?:we\s+used\s+a|the\s+method\s+was|analysis\s+was\s+done\s+using)\s+"
        r"(?:standard|common|typical|usual)\s+(?:method|approach|technique)\b",
        "Methodology: Insufficient methodological detail. Specify the exact methodology, "
        "including procedures, parameters, and justification for method selection.",
    ),
    (
        "method_collection",
        r"\b(?:data\s+was|were)\s+(?:collected|gathered|obtained)\s+(?:using|through|from)\s+"
        r"(?:a|an|the)\s+(?:survey|interview|questionnaire|method)\b",
        "Methodology: Methodology description lacks precision. Provide detailed information "
        "about data collection procedures, instruments, sampling, and protocols.",
    ),
)

_SAMPLES = (
    (
        "sample_size",
        r"\b(?:sample|participants?|subjects?|respondents?)\s+(?:of|size|number|consisted\s+of)\s+"
        r"(?:\d+)\s+(?:was|were)\s+(?:selected|chosen|recruited)\b",
        "Methodology: Sample size justification missing. PhD-level research requires explicit "
        "justification for sample size, including power analysis, representativeness, and "
        "limitations.",
    ),
    (
        "sample_selection",
        r"\b(?:a\s+total\s+of|total|number\s+of)\s+(?:\d+)\s+"
        r"(?:participants?|subjects?|respondents?|samples?)\s+(?:were|was)\s+"
        r"(?:included|recruited|selected)\b",
        "Methodology: Sample selection and justification required. Explain why this sample size "
        "is appropriate, how participants were selected, and address potential biases or "
        "limitations.",
    ),
)

_ABSOLUTE_EVIDENCE = (
    (
        "evidence_absolute",
        r"\b(?:proves?|proven|definitely|certainly|undoubtedly|without\s+doubt|no\s+question)\s+"
        r"(?:that|this|it)\b",
        "Evidence: Absolute claim requires strong empirical support. Ensure such claims are "
        "backed by robust evidence and consider using hedging language (e.g., \"suggests\", "
        "\"indicates\", \"appears to\").",
    ),
    (
        "evidence_causal",
        r"\b(?:directly\s+causes?|always\s+leads?\s+to|never\s+fails?\s+to)\b",
        "Evidence: Absolute causal claim requires rigorous evidence. Research rarely supports "
        "absolute causal relationships. Use qualified language that acknowledges complexity "
        "and potential exceptions.",
    ),
    (
        "evidence_exclusive",
        r"\b(?:the\s+only|sole|exclusive)\s+(?:cause|reason|factor|explanation)\b",
        "Evidence: Absolute claim of exclusivity requires comprehensive evidence. Research "
        "typically involves multiple factors. Acknowledge complexity and potential alternative "
        "explanations.",
    ),
)

_VAGUE_QUANTIFIERS = (
    (
        "quantifier_vague",
        r"\b(?:many|most|several|some|few|various|numerous)\s+"
        r"(?:students?|people|researchers?|studies?|cases?|examples?)\b",
        "Evidence: Vague quantifier lacks precision. PhD-level research requires specific, "
        'measurable quantities or ranges (e.g., "52%", "approximately 200 participants", '
        '"between 15-20 studies").',
    ),
    (
        "quantifier_informal",
        r"\b(?:a\s+lot\s+of|lots\s+of|plenty\s+of|tons\s+of)\s+(?:evidence|data|research|studies?)\b",
        "Evidence: Informal quantifier inappropriate for research. Use precise quantitative "
        "language or specific ranges.",
    ),
    (
        "quantifier_magnitude",
        r"\b(?:significant|substantial|considerable|large|small)\s+"
        r"(?:number|amount|proportion|percentage)\s+(?:of|without\s+specifying)\b",
        "Evidence: Vague magnitude descriptor. Specify exact numbers, percentages, or provide "
        "clear quantitative ranges.",
    ),
)

_UNCLEAR_OPENINGS = (
    (
        "opening_vague_topic",
        r"^(?:this|the|a|an)\s+(?:study|research|paper|analysis|work)\s+(?:is|was|aims?|seeks?)\s+"
        r"(?:about|regarding|concerning)\s+(?:something|things?|stuff)\b",
        "Structure: Opening statement lacks clarity and precision. Research openings should "
        "clearly state the research question, aim, or objective with specific, measurable terms.",
    ),
    (
        "opening_vague_plan",
        r"^(?:in\s+this\s+(?:study|research|paper),?\s+)?(?:we|I)\s+"
        r"(?:will|shall|are\s+going\s+to)\s+(?:look\s+at|examine|study|investigate)\s+"
        r"(?:things?|stuff|something)\b",
        "Structure: Vague research statement. Clearly articulate the specific research "
        "question, objectives, or hypotheses with precise academic language.",
    ),
)

_AIM_FINDINGS = (
    (
        "aim_states_findings",
        r"\b(?:the\s+aim|objective|purpose|goal)\s+(?:of\s+this\s+study|was|is)\s+"
        r"(?:to\s+find|discover|show|prove|demonstrate)\s+that\s+(?:the\s+results?|findings?|data)\s+"
        r"(?:show|indicate|suggest)\b",
        "Structure: Confusion between research aim and findings. Research aims state what the "
        "study intends to do; findings report what was discovered. Keep these distinct.",
    ),
    (
        "aim_expects_findings",
        r"\b(?:this\s+study\s+aims?\s+to|the\s+objective\s+is\s+to)\s+(?:prove|show|demonstrate)\s+"
        r"(?:that|the\s+fact\s+that)\s+(?:results?|findings?|data)\s+(?:are|is|was|were)\b",
        "Structure: Research aim should not state expected findings. Aims describe what the "
        'study will do (e.g., "investigate", "examine", "explore"), not what it will find.',
    ),
)

_OVERREACH = (
    (
        "conclusion_absolute",
        r"\b(?:in\s+conclusion|to\s+conclude|finally|in\s+summary)\s+.*?"
        r"(?:this\s+study|this\s+research|these\s+findings?)\s+"
        r"(?:proves?|definitely\s+shows?|clearly\s+demonstrates?|undoubtedly\s+establishes?)\s+"
        r"that\s+(?:all|every|always|never)\b",
        "Structure: Conclusion overreach. Conclusions should summarize findings within the "
        "scope of the study, not make absolute claims beyond the evidence presented.",
    ),
    (
        "conclusion_solves_all",
        r"\b(?:conclusion|concluding|final\s+thoughts?)\s+.*?"
        r"(?:this\s+research|this\s+study|these\s+findings?)\s+(?:solves?|resolves?|answers?)\s+"
        r"(?:all|every|the\s+entire|completely)\s+(?:problem|question|issue)\b",
        "Structure: Conclusion overreach. Research conclusions should acknowledge scope and "
        "limitations, not claim to solve all problems or answer all questions.",
    ),
    (
        "conclusion_certain",
        r"\b(?:therefore|thus|hence|consequently)\s+.*?"
        r"(?:it\s+is\s+(?:clear|obvious|certain|proven))\s+that\s+"
        r"(?:all|every|always|never|no\s+one|everyone)\b",
        "Structure: Overconfident conclusion. Conclusions should be measured and acknowledge "
        "the limitations of the evidence, not make absolute claims.",
    ),
)

_RECOMMENDATIONS = (
    (
        "recommendation_broad",
        r"\b(?:recommendations?|suggestions?|implications?)\s+(?:are|is|include|should\s+be)\s+"
        r"(?:that|to)\s+(?:all|every|always|never)\s+(?:should|must|need\s+to|ought\s+to)\b",
        "Structure: Overly broad recommendations. Recommendations should be specific, "
        "actionable, and justified by the research findings, not absolute or universal claims.",
    ),
    (
        "recommendation_scope",
        r"\b(?:based\s+on\s+this\s+study|these\s+findings?|this\s+research)\s+.*?"
        r"(?:all|every|always|never)\s+(?:should|must|need\s+to|ought\s+to|have\s+to)\s+"
        r"(?:do|be|implement|adopt)\b",
        "Structure: Recommendations exceed study scope. Recommendations should be specific to "
        "the context and findings of the research, not universal mandates.",
    ),
    (
        "recommendation_general",
        r"\b(?:the\s+results?\s+(?:show|indicate|suggest))\s+that\s+(?:all|every|always|never)\s+"
        r"(?:institutions?|organizations?|researchers?|practitioners?)\s+(?:should|must|need\s+to)\b",
        "Structure: Overgeneralized recommendations. Base recommendations on the specific "
        "findings and acknowledge limitations in generalizability.",
    ),
)


def _without_citation(text: str, match: Match[str]) -> bool:
    return not has_citation_nearby(text, match.start())


def _without_justification(text: str, match: Match[str]) -> bool:
    return not has_sample_justification(text, match.start())


def _in_sections(*sections: ResearchSection) -> ContextPredicate:
    def predicate(context: ScanContext) -> bool:
        return context.section in sections

    return predicate


def _lacks_limitations(context: ScanContext) -> bool:
    document = context.document
    return len(document) > LIMITATIONS_MIN_LENGTH and not _LIMITATIONS_WORDING.search(document)


def register(registry: DetectorRegistry) -> None:
    for slug, pattern, suggestion, message in _OVERCONFIDENT:
        registry.add(
            PatternDetector(
                f"research.{slug}",
                IssueCategory.ACADEMIC_HEDGING,
                pattern,
                modes=RESEARCH_ONLY,
            ),
            {None: MessageTemplate(message, Severity.HIGH, suggestion)},
        )

    for slug, pattern, suggestion in _COLLECTIVE_FIRST_PERSON:
        registry.add(
            PatternDetector(
                f"research.{slug}",
                IssueCategory.ACADEMIC_OBJECTIVITY,
                pattern,
                modes=RESEARCH_ONLY,
            ),
            {
                None: MessageTemplate(
                    "Research objectivity: Avoid collective first-person opinion. Use objective, "
                    "evidence-based language.",
                    Severity.HIGH,
                    suggestion,
                ),
            },
        )

    registry.add(
        PatternDetector(
            "research.section_opinion",
            IssueCategory.ACADEMIC_OBJECTIVITY,
            r"\b(?:I|we|my|our)\s+(?:think|believe|feel|opinion|view)\b",
            modes=RESEARCH_ONLY,
            when=_in_sections(ResearchSection.ABSTRACT, ResearchSection.RESULTS),
        ),
        {
            None: MessageTemplate(
                "Section context ({section_title}): Personal opinion is inappropriate here. Use "
                "objective, evidence-based language.",
                Severity.HIGH,
                "The findings indicate",
            ),
        },
    )
    registry.add(
        PatternDetector(
            "research.section_results_language",
            IssueCategory.ACADEMIC_TONE,
            r"\b(?:the\s+results\s+(?:show|demonstrate|indicate)|as\s+shown\s+in\s+figure|table\s+\d+)\b",
            modes=RESEARCH_ONLY,
            when=_in_sections(ResearchSection.INTRODUCTION),
        ),
        {
            None: MessageTemplate(
                "Section context (Introduction): Results-specific language should appear in the "
                "Results section, not Introduction.",
                Severity.MODERATE,
            ),
        },
    )

    register_pattern_table(
        registry,
        "research",
        IssueCategory.ACADEMIC_CITATION,
        Severity.MODERATE,
        [
            (
                slug,
                pattern,
                "Citation warning: This claim may require a citation to support the statement. "
                "Consider adding a reference.",
            )
            for slug, pattern in _UNCITED_CLAIMS
        ],
        modes=RESEARCH_ONLY,
        guard=_without_citation,
    )

    register_pattern_table(
        registry, "research", IssueCategory.METHODOLOGY, Severity.HIGH, _CAUSATION,
        modes=RESEARCH_ONLY,
    )
    register_pattern_table(
        registry, "research", IssueCategory.METHODOLOGY, Severity.HIGH, _GENERALIZATION,
        modes=RESEARCH_ONLY,
    )
    register_pattern_table(
        registry, "research", IssueCategory.METHODOLOGY, Severity.MODERATE, _WEAK_METHODS,
        modes=RESEARCH_ONLY,
    )
    register_pattern_table(
        registry, "research", IssueCategory.METHODOLOGY, Severity.MODERATE, _SAMPLES,
        modes=RESEARCH_ONLY,
        guard=_without_justification,
    )
    registry.add(
        PatternDetector(
            "research.missing_limitations",
            IssueCategory.METHODOLOGY,
            r"\b(?:conclusion|discussion|results?|findings?)\s+(?:section|chapter|part)\b",
            modes=RESEARCH_ONLY,
            limit=1,
            when=_lacks_limitations,
        ),
        {
            None: MessageTemplate(
                "Methodology: This research should include a limitations section. PhD-level "
                "work requires explicit acknowledgment of study limitations, methodological "
                "constraints, and potential biases.",
                Severity.MODERATE,
            ),
        },
    )

    register_pattern_table(
        registry, "research", IssueCategory.EVIDENCE, Severity.HIGH, _ABSOLUTE_EVIDENCE,
        modes=RESEARCH_ONLY,
    )
    register_pattern_table(
        registry, "research", IssueCategory.EVIDENCE, Severity.MODERATE, _VAGUE_QUANTIFIERS,
        modes=RESEARCH_ONLY,
    )

    register_pattern_table(
        registry, "research", IssueCategory.RESEARCH_QUALITY, Severity.MODERATE, _UNCLEAR_OPENINGS,
        modes=RESEARCH_ONLY,
        scan_limit=OPENING_WINDOW,
    )
    register_pattern_table(
        registry, "research", IssueCategory.RESEARCH_QUALITY, Severity.HIGH, _AIM_FINDINGS,
        modes=RESEARCH_ONLY,
    )
    register_pattern_table(
        registry, "research", IssueCategory.RESEARCH_QUALITY, Severity.HIGH, _OVERREACH,
        modes=RESEARCH_ONLY,
    )
    register_pattern_table(
        registry, "research", IssueCategory.RESEARCH_QUALITY, Severity.MODERATE, _RECOMMENDATIONS,
        modes=RESEARCH_ONLY,
    )
