from __future__ import annotations

import sys
from pathlib import Path

import pytest
from pydantic import ValidationError

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from proofcheck.models import (
    AnalysisRequest,
    CandidateIssue,
    CategoryFlags,
    EmailContext,
    FinalIssue,
    IssueCategory,
    IssueStatus,
    ResearchSection,
    Severity,
    WritingMode,
)


def test_issue_category_order_matches_executor_order() -> None:
    values = IssueCategory.all_values()
    assert values[0] == "spelling"
    assert values[-1] == "research_quality"
    assert len(values) == 16


def test_writing_mode_parse_accepts_alias_and_blank() -> None:
    assert WritingMode.parse("academic") is WritingMode.ACADEMIC_STANDARD
    assert WritingMode.parse(" Email ") is WritingMode.EMAIL
    assert WritingMode.parse("") is WritingMode.GENERAL
    assert WritingMode.parse(None) is WritingMode.GENERAL


def test_writing_mode_parse_rejects_unknown() -> None:
    with pytest.raises(ValueError, match="Invalid writing mode"):
        WritingMode.parse("poetry")


def test_academic_level_labels() -> None:
    assert WritingMode.ACADEMIC_RESEARCH.academic_level == "phd"
    assert WritingMode.ACADEMIC_STANDARD.academic_level == "standard"
    assert WritingMode.EMAIL.academic_level == "general"
    assert WritingMode.ACADEMIC_RESEARCH.is_academic
    assert not WritingMode.GENERAL.is_academic


def test_category_flags_default_all_enabled() -> None:
    flags = CategoryFlags()
    assert flags.enabled() == list(IssueCategory)


def test_category_flags_reject_unknown_keys() -> None:
    with pytest.raises(ValidationError):
        CategoryFlags(punctuation=True)


def test_category_flags_only_and_without() -> None:
    flags = CategoryFlags.only(["spelling", IssueCategory.CLARITY])
    assert flags.enabled() == [IssueCategory.SPELLING, IssueCategory.CLARITY]

    trimmed = flags.without(["clarity"])
    assert trimmed.enabled() == [IssueCategory.SPELLING]
    # original left untouched
    assert flags.is_enabled("clarity")


def test_category_flags_purpose_gate() -> None:
    flags = CategoryFlags(purpose=False)
    assert not flags.allows("purpose")
    assert flags.allows(None)
    assert flags.enabled() == list(IssueCategory)

    assert CategoryFlags().without(["purpose"]) == flags
    assert not CategoryFlags.only(["structure"]).allows("purpose")
    assert CategoryFlags.only(["structure", "purpose"]).allows("purpose")


def test_email_context_defaults_and_alias() -> None:
    context = EmailContext(recipient_type="", purpose=" Vacation_Request ", tone=None)
    assert context.recipient_type == "Manager"
    assert context.purpose == "vacation_request"
    assert context.required_tone == "Professional"

    formal = EmailContext(tone="Formal")
    assert formal.required_tone == "Formal"


def test_analysis_request_from_mapping() -> None:
    request = AnalysisRequest.model_validate(
        {
            "document": "Some text here.",
            "mode": "academic",
            "categories": {"spelling": False},
            "section": "Results",
        }
    )
    assert request.mode is WritingMode.ACADEMIC_STANDARD
    assert not request.categories.is_enabled("spelling")
    assert request.categories.is_enabled("grammar")
    assert request.section is ResearchSection.RESULTS
    assert request.email == EmailContext()


def test_analysis_request_wants_regions() -> None:
    assert AnalysisRequest(document="x", mode="email").wants_regions()
    assert not AnalysisRequest(document="x").wants_regions()
    assert AnalysisRequest(document="x", regions_needed=True).wants_regions()
    assert not AnalysisRequest(document="x", mode="email", regions_needed=False).wants_regions()


def test_analysis_request_rejects_unknown_fields() -> None:
    with pytest.raises(ValidationError):
        AnalysisRequest(document="x", colour="blue")


def _candidate(**overrides) -> CandidateIssue:
    values = dict(
        category=IssueCategory.SPELLING,
        severity=Severity.LOW,
        message="Bad word",
        claimed_text="alot",
        suggestion="a lot",
        start=4,
        end=8,
        rule_id="spelling.alot",
    )
    values.update(overrides)
    return CandidateIssue(**values)


def test_final_issue_from_candidate_and_payload() -> None:
    issue = FinalIssue.from_candidate(_candidate())
    payload = issue.to_payload()

    assert payload == {
        "type": "spelling",
        "severity": "low",
        "message": "Bad word",
        "original_text": "alot",
        "suggestion_text": "a lot",
        "startIndex": 4,
        "endIndex": 8,
        "status": "open",
    }
    assert issue.rule_id == "spelling.alot"
    assert issue.status is IssueStatus.OPEN


def test_final_issue_keeps_explanation_in_payload() -> None:
    issue = FinalIssue.from_candidate(_candidate(explanation="Because."))
    assert issue.to_payload()["explanation"] == "Because."


@pytest.mark.parametrize(
    "overrides",
    [
        {"claimed_text": ""},
        {"claimed_text": "alo"},
        {"message": "   "},
        {"start": 8, "end": 4},
    ],
)
def test_final_issue_rejects_inconsistent_records(overrides) -> None:
    with pytest.raises(ValidationError):
        FinalIssue.from_candidate(_candidate(**overrides))


def test_candidate_length() -> None:
    assert _candidate().length == 4
