"""Split a letter-shaped document into named regions.

The heuristics are line based: a ``Subject:`` line, the first line opening
with a greeting, the last line opening with a closing, the body in between
and the signature after the closing. Offsets come from the first occurrence
of each region's text in the document, so text that recurs earlier in the
document can be attributed to the wrong place.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from ..models import RegionName

SUBJECT_PATTERN = re.compile(r"^Subject:\s*(.+)$", re.IGNORECASE | re.MULTILINE)
GREETING_PATTERN = re.compile(
    r"^(?:Dear|Hello|Hi|Greetings|Good morning|Good afternoon|Good evening)\b",
    re.IGNORECASE,
)
CLOSING_PATTERN = re.compile(
    r"^(?:Sincerely|Best regards|Regards|Yours sincerely|Best|Thanks|Thank you)\b",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class Region:
    """A named slice of the document.

    ``start`` is ``-1`` when the region text could not be located, in which
    case detectors targeting the region are skipped.
    """

    name: RegionName
    text: str
    start: int

    @property
    def end(self) -> int:
        if self.start < 0:
            return -1
        return self.start + len(self.text)

    @property
    def located(self) -> bool:
        return self.start >= 0


@dataclass(frozen=True)
class RegionMap:
    subject: Region
    greeting: Region
    body: Region
    closing: Region
    signature: Region

    def get(self, name: RegionName | str) -> Region:
        return getattr(self, RegionName(name).value)

    def as_dict(self) -> dict[str, str]:
        return {name.value: self.get(name).text for name in RegionName}


def _locate(document: str, name: RegionName, text: str) -> Region:
    return Region(name=name, text=text, start=document.find(text))


def parse_regions(document: str) -> RegionMap:
    """Return all five regions of ``document``; missing regions are empty."""

    lines = [line.strip() for line in document.split("\n")]

    subject = ""
    subject_match = SUBJECT_PATTERN.search(document)
    if subject_match:
        subject = subject_match.group(1).strip()

    greeting_index = -1
    for index, line in enumerate(lines):
        if GREETING_PATTERN.match(line):
            greeting_index = index
            break

    closing_index = -1
    for index in range(len(lines) - 1, -1, -1):
        if CLOSING_PATTERN.match(lines[index]):
            closing_index = index
            break

    greeting = lines[greeting_index] if greeting_index >= 0 else ""
    closing = lines[closing_index] if closing_index >= 0 else ""

    body_start = greeting_index + 1 if greeting_index >= 0 else 0
    body_end = closing_index if closing_index >= 0 else len(lines)
    body = "\n".join(lines[body_start:body_end]).strip()

    signature = ""
    if 0 <= closing_index < len(lines) - 1:
        signature = "\n".join(lines[closing_index + 1 :]).strip()

    return RegionMap(
        subject=_locate(document, RegionName.SUBJECT, subject),
        greeting=_locate(document, RegionName.GREETING, greeting),
        body=_locate(document, RegionName.BODY, body),
        closing=_locate(document, RegionName.CLOSING, closing),
        signature=_locate(document, RegionName.SIGNATURE, signature),
    )
