"""Email-mode rules: tone, structure, professionalism and clarity."""

from __future__ import annotations

import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from proofcheck.engine.executor import run_detectors
from proofcheck.engine.regions import parse_regions
from proofcheck.engine.registry import ScanContext
from proofcheck.models import (
    CandidateIssue,
    CategoryFlags,
    EmailContext,
    IssueCategory,
    Severity,
    WritingMode,
)
from proofcheck.rules import default_registry


def email_candidates(
    document: str, flags: CategoryFlags | None = None, **email
) -> list[CandidateIssue]:
    context = ScanContext(
        document=document,
        mode=WritingMode.EMAIL,
        email=EmailContext(**email),
        regions=parse_regions(document),
    )
    return run_detectors(context, flags or CategoryFlags(), default_registry()).candidates


def by_rule(document: str, rule_id: str, **email) -> list[CandidateIssue]:
    return [c for c in email_candidates(document, **email) if c.rule_id == rule_id]


WELL_FORMED = (
    "Subject: Project update\n"
    "\n"
    "Dear Priya,\n"
    "\n"
    "The draft report is attached for your review.\n"
    "\n"
    "Best regards,\n"
    "Tom"
)


def test_well_formed_email_has_no_structure_issues() -> None:
    assert not [c for c in email_candidates(WELL_FORMED) if c.rule_id.startswith("structure.")]


class TestStructure:
    def test_missing_subject_is_zero_width_with_purpose_hint(self) -> None:
        document = "Dear Priya,\n\nI would like to request leave.\n\nBest regards,\nTom"
        [issue] = by_rule(document, "structure.missing_subject", purpose="vacation_request")

        assert issue.start == issue.end == 0
        assert issue.suggestion == "Subject: Vacation Request"

    def test_long_subject_is_shortened(self) -> None:
        subject = "A" * 70
        document = f"Subject: {subject}\n\nDear Priya,\n\nHello.\n\nRegards,\nTom"
        [issue] = by_rule(document, "structure.subject_too_long")

        assert document[issue.start : issue.end] == subject
        assert issue.suggestion == "A" * 57 + "..."

    def test_missing_greeting_hint_depends_on_recipient(self) -> None:
        document = "The draft report is attached.\n\nBest regards,\nTom"

        [manager] = by_rule(document, "structure.missing_greeting")
        [colleague] = by_rule(document, "structure.missing_greeting", recipient_type="Colleague")

        assert manager.suggestion == "Dear [Name],"
        assert colleague.suggestion == "Hello,"
        assert "Colleague" in colleague.explanation

    def test_informal_greeting_spans_whole_greeting(self) -> None:
        document = "Hi there team,\n\nThe report is attached.\n\nRegards,\nTom"
        [issue] = by_rule(document, "structure.informal_greeting")

        assert document[issue.start : issue.end] == "Hi there team,"
        assert issue.severity is Severity.HIGH

    def test_missing_closing_hint_follows_tone(self) -> None:
        document = "Dear Priya,\n\nThe report is attached.\n\nTom"

        [formal] = by_rule(document, "structure.missing_closing", tone="Formal")
        [plain] = by_rule(document, "structure.missing_closing")

        assert formal.suggestion == "Sincerely,"
        assert plain.suggestion == "Best regards,"
        assert formal.start == formal.end

    def test_meeting_request_without_time(self) -> None:
        document = (
            "Dear Priya,\n\nCould we meet to discuss the quarterly plan and the budget?\n\n"
            "Best regards,\nTom"
        )
        assert by_rule(document, "structure.meeting_time", purpose="meeting_request")
        assert not by_rule(document, "structure.meeting_time")

        with_time = document.replace("budget?", "budget at 3pm on Friday?")
        assert not by_rule(with_time, "structure.meeting_time", purpose="meeting_request")

    def test_leave_request_with_dates_passes(self) -> None:
        document = (
            "Dear Priya,\n\nI would like to request leave from 3 June to 7 June for a short break.\n\n"
            "Best regards,\nTom"
        )
        assert not by_rule(document, "structure.date_range", purpose="vacation_request")
        assert not by_rule(document, "structure.request_statement", purpose="vacation_request")

    def test_purpose_flag_gates_purpose_checks_only(self) -> None:
        document = (
            "Dear Priya,\n\nCould we meet to discuss the quarterly plan and the budget?\n\n"
            "Best regards,\nTom"
        )
        enabled = email_candidates(document, purpose="meeting_request")
        disabled = email_candidates(
            document, CategoryFlags(purpose=False), purpose="meeting_request"
        )

        meeting = [c for c in enabled if c.rule_id == "structure.meeting_time"]
        assert meeting and meeting[0].category is IssueCategory.STRUCTURE
        assert "structure.meeting_time" not in {c.rule_id for c in disabled}
        # the rest of the structure checks still run
        assert {c.rule_id for c in enabled} - {"structure.meeting_time"} == {
            c.rule_id for c in disabled
        }


class TestTone:
    def test_informal_expressions(self) -> None:
        document = "Dear Priya,\n\nThx for the notes, btw I'm gonna be late.\n\nRegards,\nTom"
        ids = {c.rule_id for c in email_candidates(document)}

        assert {"tone.informal_thanks", "tone.internet_slang", "tone.informal_contraction"} <= ids

    def test_informal_message_quotes_match(self) -> None:
        [issue] = by_rule("Dear Priya,\n\nSorry for the delay.\n\nRegards,\nTom", "tone.casual_apology")
        assert issue.message == 'Informal expression detected: "Sorry"'
        assert issue.suggestion == "I apologize"

    def test_emotional_language(self) -> None:
        [issue] = by_rule(
            "Dear Priya,\n\nI am really frustrated with this.\n\nRegards,\nTom",
            "tone.emotional_intensity",
        )
        assert issue.claimed_text == "really frustrated"
        assert issue.severity is Severity.HIGH

    def test_tone_rules_do_not_run_in_general_mode(self) -> None:
        context = ScanContext(document="gonna be late lol", mode=WritingMode.GENERAL)
        report = run_detectors(context, CategoryFlags(), default_registry())
        assert not [c for c in report.candidates if c.rule_id.startswith("tone.")]


class TestProfessionalism:
    def test_personal_details_only_for_leave_requests(self) -> None:
        document = "Dear Priya,\n\nI need time off because my family is visiting.\n\nRegards,\nTom"

        [issue] = by_rule(document, "professionalism.personal_details", purpose="sick_leave")
        assert issue.claimed_text == "my family"
        assert issue.suggestion == "(remove)"
        assert not by_rule(document, "professionalism.personal_details")

    def test_urgent_and_demanding_language(self) -> None:
        document = "Dear Priya,\n\nYou must respond immediately.\n\nRegards,\nTom"
        ids = {c.rule_id for c in email_candidates(document)}
        assert {"professionalism.urgent", "professionalism.demand_response"} <= ids


class TestClarity:
    def test_email_long_sentence_span_is_capped(self) -> None:
        sentence = " ".join(["word"] * 35)
        document = f"Dear Priya,\n\n{sentence}.\n\nRegards,\nTom"
        [issue] = by_rule(document, "clarity.email_long_sentence")

        body_start = document.index("word")
        assert (issue.start, issue.end) == (body_start, body_start + 50)

    def test_vague_terms(self) -> None:
        [issue] = by_rule("Dear Priya,\n\nPlease send the stuff.\n\nRegards,\nTom", "clarity.vague_terms")
        assert issue.claimed_text == "stuff"
