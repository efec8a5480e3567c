"""Spelling, grammar, style and clarity rules in the proofreading modes."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from proofcheck.engine.executor import run_detectors
from proofcheck.engine.registry import ScanContext
from proofcheck.models import CandidateIssue, CategoryFlags, IssueCategory, Severity, WritingMode
from proofcheck.rules import default_registry


def candidates(document: str, mode: WritingMode = WritingMode.GENERAL) -> list[CandidateIssue]:
    context = ScanContext(document=document, mode=mode)
    return run_detectors(context, CategoryFlags(), default_registry()).candidates


def by_rule(document: str, rule_id: str, mode: WritingMode = WritingMode.GENERAL) -> list[CandidateIssue]:
    return [c for c in candidates(document, mode) if c.rule_id == rule_id]


class TestSpelling:
    @pytest.mark.parametrize(
        "word, corrected",
        [("recieve", "receive"), ("Recieved", "Received"), ("decieve", "deceive")],
    )
    def test_ie_after_c(self, word: str, corrected: str) -> None:
        [issue] = by_rule(f"We {word} it.", "spelling.receive")
        assert issue.claimed_text == word
        assert issue.suggestion == corrected

    def test_its_contraction_narrows_to_its(self) -> None:
        document = "I think its was broken."
        [issue] = by_rule(document, "spelling.its_contraction")
        assert document[issue.start : issue.end] == "its"
        assert issue.suggestion == "it's"

    def test_their_there(self) -> None:
        [issue] = by_rule("I know their is a problem.", "spelling.their_there")
        assert issue.claimed_text == "their"
        assert issue.suggestion == "there"

    def test_everyday_only_flagged_as_adverb(self) -> None:
        assert by_rule("I go running everyday.", "spelling.everyday")
        assert not by_rule("Everyday.", "spelling.everyday")

    def test_severity_and_label_follow_mode(self) -> None:
        [general] = by_rule("alot of work", "spelling.alot")
        [standard] = by_rule("alot of work", "spelling.alot", WritingMode.ACADEMIC_STANDARD)
        [email] = by_rule("alot of work", "spelling.alot", WritingMode.EMAIL)

        assert general.severity is Severity.LOW
        assert standard.severity is Severity.MODERATE
        assert standard.message.startswith("Spelling: ")
        assert email.message == 'Spelling error: "alot" should be "a lot"'
        assert email.explanation


class TestGrammar:
    def test_multiple_spaces(self) -> None:
        document = "Two  spaces here."
        [issue] = by_rule(document, "grammar.multiple_spaces")
        assert (issue.start, issue.end) == (3, 5)
        assert issue.suggestion == " "

    def test_agreement_narrows_to_verb(self) -> None:
        document = "The students is late."
        [issue] = by_rule(document, "grammar.students_is")
        assert document[issue.start : issue.end] == "is"
        assert issue.suggestion == "are"

    def test_agreement_message_in_standard_mode(self) -> None:
        [issue] = by_rule("Overall it show a trend.", "grammar.it_shows", WritingMode.ACADEMIC_STANDARD)
        assert issue.message.startswith("Grammar: Subject-verb agreement error.")
        assert issue.severity is Severity.HIGH

    def test_tense_shift_is_research_only(self) -> None:
        document = "This study was conducted in 2020 and the results show a gain."
        assert by_rule(document, "grammar.tense_shift_results", WritingMode.ACADEMIC_RESEARCH)
        assert not by_rule(document, "grammar.tense_shift_results", WritingMode.ACADEMIC_STANDARD)


class TestStyle:
    def test_vague_qualifier_spans_phrase(self) -> None:
        document = "This is very important work."
        [general] = by_rule(document, "style.vague_very_important")
        [academic] = by_rule(document, "style.vague_very_important", WritingMode.ACADEMIC_STANDARD)

        assert document[general.start : general.end] == "very important"
        assert general.suggestion == "crucial"
        assert academic.suggestion == "significant"

    def test_pretty_keeps_adjective(self) -> None:
        [issue] = by_rule("It was pretty good.", "style.vague_pretty")
        assert issue.suggestion == "quite good"

    def test_passive_voice_needs_long_text(self) -> None:
        sentence = "The data were collected by the researchers and samples were analyzed. "
        short = sentence * 3
        long = sentence * 16

        assert not by_rule(short, "style.passive_voice", WritingMode.ACADEMIC_RESEARCH)
        [issue] = by_rule(long, "style.passive_voice", WritingMode.ACADEMIC_RESEARCH)
        assert long[issue.start : issue.end] == "were collected"


class TestClarity:
    def test_long_sentence_limit_depends_on_mode(self) -> None:
        document = " ".join(["word"] * 36) + "."

        assert not by_rule(document, "clarity.long_sentence")
        [issue] = by_rule(document, "clarity.long_sentence", WritingMode.ACADEMIC_STANDARD)
        assert (issue.start, issue.end) == (0, len(document) - 1)
        assert issue.claimed_text.endswith("...")
        assert issue.category is IssueCategory.CLARITY

    def test_absolute_claim_is_academic_only(self) -> None:
        document = "This clearly proves that we were right."
        assert not by_rule(document, "clarity.absolute_claim")
        [issue] = by_rule(document, "clarity.absolute_claim", WritingMode.ACADEMIC_STANDARD)
        assert issue.message.startswith("Clarity: ")
