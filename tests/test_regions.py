from __future__ import annotations

import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from proofcheck.engine.regions import parse_regions
from proofcheck.models import RegionName

EMAIL = (
    "Subject: Vacation Request\n"
    "\n"
    "Dear Sarah,\n"
    "\n"
    "I would like to request leave from 3 June to 7 June.\n"
    "\n"
    "Best regards,\n"
    "Alex"
)


def test_parse_full_email() -> None:
    regions = parse_regions(EMAIL)

    assert regions.subject.text == "Vacation Request"
    assert regions.greeting.text == "Dear Sarah,"
    assert regions.body.text == "I would like to request leave from 3 June to 7 June."
    assert regions.closing.text == "Best regards,"
    assert regions.signature.text == "Alex"


def test_region_offsets_match_document() -> None:
    regions = parse_regions(EMAIL)
    for name in RegionName:
        region = regions.get(name)
        assert region.located
        assert EMAIL[region.start : region.end] == region.text


def test_missing_parts_are_empty() -> None:
    regions = parse_regions("Can you send me the report by Friday?")

    assert regions.subject.text == ""
    assert regions.greeting.text == ""
    assert regions.closing.text == ""
    assert regions.signature.text == ""
    assert regions.body.text == "Can you send me the report by Friday?"
    assert regions.body.start == 0


def test_greeting_requires_word_boundary() -> None:
    regions = parse_regions("Hiking is fun.\nSee you soon.")
    assert regions.greeting.text == ""
    assert regions.body.text.startswith("Hiking")


def test_closing_is_last_matching_line() -> None:
    document = "Hello team,\nThanks for the update.\nMore text.\nRegards,\nSam"
    regions = parse_regions(document)

    assert regions.closing.text == "Regards,"
    assert regions.body.text == "Thanks for the update.\nMore text."
    assert regions.signature.text == "Sam"


def test_first_occurrence_offsets() -> None:
    # The signature text appears earlier in the body, so its offset points there.
    document = "Hello,\nSam will join.\nRegards,\nSam"
    regions = parse_regions(document)

    assert regions.signature.text == "Sam"
    assert regions.signature.start == document.find("Sam")


def test_as_dict() -> None:
    assert parse_regions(EMAIL).as_dict()["subject"] == "Vacation Request"
