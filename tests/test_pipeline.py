from __future__ import annotations

import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from proofcheck import analyze, analyze_document
from proofcheck.engine.executor import run_detectors
from proofcheck.engine.pipeline import ensure_analyzable
from proofcheck.engine.registry import ScanContext
from proofcheck.engine.resolver import spans_overlap
from proofcheck.errors import DocumentRejectedError
from proofcheck.models import (
    CandidateIssue,
    CategoryFlags,
    IssueCategory,
    IssueStatus,
    Severity,
    WritingMode,
)
from proofcheck.rules import default_registry

RESEARCH_TEXT = (
    "We think this proves that all students always fail. Studies show that sleep matters. "
    "The sample of 12 participants was recruited online. This study aims to prove that "
    "homework causes stress. It is obvious that the results show that all pupils benefit. "
    "In conclusion, homework should be banned. I don't think it's fair."
)

EMAIL_TEXT = (
    "Hey boss,\n"
    "\n"
    "gonna be out tomorrow lol. Please approve ASAP!!\n"
    "\n"
    "Thanks,\n"
    "Jo"
)


def assert_well_formed(document: str, issues) -> None:
    assert len(issues) <= 50
    for issue in issues:
        assert document[issue.start_index : issue.end_index] == issue.original_text
        assert issue.original_text
        assert issue.status is IssueStatus.OPEN
    for a, b in zip(issues, issues[1:]):
        assert a.start_index <= b.start_index
        assert not spans_overlap(a.start_index, a.end_index, b.start_index, b.end_index)


class TestScenarios:
    def test_misspellings_are_flagged_with_offsets(self) -> None:
        document = "I recieve alot of messages."
        issues = analyze_document(document, categories=CategoryFlags.only(["spelling"]))

        assert [(i.original_text, i.suggestion_text) for i in issues] == [
            ("recieve", "receive"),
            ("alot", "a lot"),
        ]
        assert [(i.start_index, i.end_index) for i in issues] == [(2, 9), (10, 14)]
        assert_well_formed(document, issues)

    def test_exclamation_run_is_the_only_general_issue(self) -> None:
        document = "Please respond ASAP!!!"
        issues = analyze_document(document)

        assert len(issues) == 1
        issue = issues[0]
        assert issue.type is IssueCategory.PROFESSIONALISM
        assert issue.original_text == "!!!"
        assert issue.suggestion_text == "."
        assert (issue.start_index, issue.end_index) == (19, 22)

    def test_objectivity_and_hedging_conflict_keeps_one(self) -> None:
        document = "We think this proves that all students always fail."
        context = ScanContext(document=document, mode=WritingMode.ACADEMIC_RESEARCH)
        candidates = run_detectors(context, CategoryFlags(), default_registry()).candidates

        objectivity = [c for c in candidates if c.category is IssueCategory.ACADEMIC_OBJECTIVITY]
        hedging = [c for c in candidates if c.category is IssueCategory.ACADEMIC_HEDGING]
        assert objectivity and hedging
        assert any(
            spans_overlap(o.start, o.end, h.start, h.end) for o in objectivity for h in hedging
        )

        issues = analyze_document(document, mode="academic_research")
        survivors = [
            i
            for i in issues
            if i.type in (IssueCategory.ACADEMIC_OBJECTIVITY, IssueCategory.ACADEMIC_HEDGING)
            and i.start_index < 25
        ]
        assert len(survivors) == 1
        assert survivors[0].type is IssueCategory.ACADEMIC_OBJECTIVITY
        assert survivors[0].original_text == "We think this proves"
        assert_well_formed(document, issues)

    def test_clean_document_returns_empty_list(self) -> None:
        assert analyze_document("The weather is nice today.") == []


class TestProperties:
    @pytest.mark.parametrize("mode", WritingMode.all_values())
    def test_output_is_well_formed_in_every_mode(self, mode: str) -> None:
        for document in (RESEARCH_TEXT, EMAIL_TEXT):
            issues = analyze_document(document, mode=mode)
            assert_well_formed(document, issues)

    def test_analysis_is_idempotent(self) -> None:
        first = analyze_document(RESEARCH_TEXT, mode="academic_research")
        second = analyze_document(RESEARCH_TEXT, mode="academic_research")
        assert [i.to_payload() for i in first] == [i.to_payload() for i in second]

    def test_cap_applies(self) -> None:
        document = " ".join(["alot"] * 80)
        issues = analyze_document(document)
        assert len(issues) == 50

        capped = analyze_document(document, max_issues=5)
        assert len(capped) == 5

    def test_disabled_category_never_appears(self) -> None:
        for category in IssueCategory:
            flags = CategoryFlags().without([category])
            issues = analyze_document(RESEARCH_TEXT, mode="academic_research", categories=flags)
            assert category not in {issue.type for issue in issues}

    def test_all_disabled_returns_nothing(self) -> None:
        flags = CategoryFlags.only([])
        assert analyze_document(RESEARCH_TEXT, mode="academic_research", categories=flags) == []


class TestEmailMode:
    def test_informal_email(self) -> None:
        issues = analyze_document(EMAIL_TEXT, mode="email")
        ids = {issue.rule_id for issue in issues}

        assert {
            "tone.informal_greeting_word",
            "tone.informal_contraction",
            "tone.internet_slang",
            "professionalism.urgent",
            "professionalism.exclamation_run",
        } <= ids
        assert_well_formed(EMAIL_TEXT, issues)

    def test_purpose_alignment(self) -> None:
        document = (
            "Subject: Time off\n"
            "\n"
            "Dear Ms Smith,\n"
            "\n"
            "I will be away next week for a trip and will be back after that.\n"
            "\n"
            "Best regards,\n"
            "Jo"
        )
        issues = analyze_document(
            document,
            mode="email",
            email={"recipient_type": "Manager", "purpose": "vacation_request"},
        )
        by_rule = {issue.rule_id: issue for issue in issues}

        body_start = document.index("I will")
        request = by_rule["structure.request_statement"]
        assert request.start_index == body_start
        assert request.original_text == document[body_start : body_start + 50]
        assert "vacation requests" in request.explanation
        # the date-range preview covers the same span and loses the conflict
        assert "structure.date_range" not in by_rule

    def test_regions_are_not_parsed_outside_email_by_default(self) -> None:
        result = analyze({"document": EMAIL_TEXT, "mode": "general"})
        assert not any(issue.rule_id.startswith("structure.") for issue in result.issues)


class TestAnalyze:
    def test_payload_metadata(self) -> None:
        result = analyze(
            {"document": RESEARCH_TEXT, "mode": "academic_research", "section": "results"}
        )
        payload = result.to_payload()

        assert payload["ok"] is True
        assert payload["metadata"] == {
            "writing_mode": "academic_research",
            "academic_level": "phd",
            "total_issues": len(result.issues),
            "section": "results",
        }
        assert all("startIndex" in item for item in payload["issues"])

    def test_metrics_account_for_every_candidate(self) -> None:
        result = analyze({"document": RESEARCH_TEXT, "mode": "academic_research"})
        metrics = result.metrics

        assert metrics.candidate_total == sum(metrics.detector_counts.values())
        assert (
            metrics.candidate_total
            - metrics.overlaps_discarded
            - metrics.truncated
            - metrics.dropped_empty
            == len(result.issues)
        )
        assert sum(metrics.issue_type_counts.values()) == len(result.issues)

    def test_external_candidates_are_merged_and_gated(self) -> None:
        document = "Teh cat sat on the mat."
        external = CandidateIssue(
            category=IssueCategory.SPELLING,
            severity=Severity.MODERATE,
            message="Possible spelling mistake",
            claimed_text="Teh",
            suggestion="The",
            start=0,
            end=3,
            rule_id="languagetool.MORFOLOGIK_RULE_EN_GB",
        )

        result = analyze({"document": document}, external_candidates=[external])
        assert [i.rule_id for i in result.issues] == ["languagetool.MORFOLOGIK_RULE_EN_GB"]
        assert result.metrics.external_candidates == 1

        gated = analyze(
            {"document": document, "categories": {"spelling": False}},
            external_candidates=[external],
        )
        assert gated.issues == []
        assert gated.metrics.external_candidates == 0

    def test_external_candidate_without_message_is_dropped(self) -> None:
        document = "A perfectly ordinary sentence."
        nameless = CandidateIssue(
            category=IssueCategory.GRAMMAR,
            severity=Severity.LOW,
            message="",
            claimed_text="ordinary",
            suggestion="",
            start=12,
            end=20,
        )

        result = analyze({"document": document}, external_candidates=[nameless])

        assert result.issues == []
        assert result.metrics.dropped_empty == 1

    def test_whitespace_only_issues_are_not_returned(self) -> None:
        result = analyze({"document": "This is  fine text here."})

        assert result.issues == []
        assert result.metrics.detector_counts.get("grammar") == 1

    def test_purpose_flag_is_accepted(self) -> None:
        document = (
            "Dear Priya,\n\nCould we meet to discuss the quarterly plan and the budget?\n\n"
            "Best regards,\nTom"
        )
        result = analyze(
            {
                "document": document,
                "mode": "email",
                "email": {"purpose": "meeting_request"},
                "categories": {"purpose": False},
            }
        )

        assert "structure.meeting_time" not in {issue.rule_id for issue in result.issues}


class TestEnsureAnalyzable:
    def test_accepts_long_enough_text(self) -> None:
        assert ensure_analyzable("Hello there") == "Hello there"

    @pytest.mark.parametrize("document", [None, 42, "", "   ab   "])
    def test_rejects_missing_or_short(self, document) -> None:
        with pytest.raises(DocumentRejectedError):
            ensure_analyzable(document)

    def test_rejection_is_a_value_error(self) -> None:
        with pytest.raises(ValueError, match="at least 10 characters"):
            ensure_analyzable("short", min_length=10)
