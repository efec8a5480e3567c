from __future__ import annotations

import re
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from proofcheck.engine.matching import (
    count_words,
    has_citation_nearby,
    has_sample_justification,
    iter_matches,
    iter_sentences,
    window,
)


def test_iter_matches_is_restartable() -> None:
    pattern = re.compile(r"\balot\b", re.IGNORECASE)
    text = "alot of things, Alot of times"

    first = [m.span() for m in iter_matches(pattern, text)]
    second = [m.span() for m in iter_matches(pattern, text)]

    assert first == [(0, 4), (16, 20)]
    assert first == second


def test_iter_matches_respects_bounds() -> None:
    pattern = re.compile(r"a")
    assert [m.start() for m in iter_matches(pattern, "aaaa", 1, 3)] == [1, 2]


def test_iter_matches_terminates_on_empty_matches() -> None:
    pattern = re.compile(r"x*")
    matches = list(iter_matches(pattern, "abc"))
    assert [m.start() for m in matches] == [0, 1, 2, 3]


def test_window_is_clamped() -> None:
    assert window("abcdef", 1, 3) == "abcd"
    assert window("abcdef", 5, 2) == "def"


def test_citation_detection() -> None:
    text = "Previous studies found this (Smith, 2020)."
    assert has_citation_nearby(text, 0)
    assert has_citation_nearby("As reported [3], the effect holds.", 5)
    assert not has_citation_nearby("Previous studies found this.", 0)


def test_sample_justification_detection() -> None:
    assert has_sample_justification("The sample of 20 was chosen after a power analysis.", 0)
    assert not has_sample_justification("The sample of 20 was chosen.", 0)


def test_iter_sentences_offsets_point_at_text() -> None:
    text = "First one.  Second one!   Third?"
    sentences = list(iter_sentences(text))

    assert [s for _, s in sentences] == ["First one", "Second one", "Third"]
    for offset, sentence in sentences:
        assert text[offset : offset + len(sentence)] == sentence


def test_count_words() -> None:
    assert count_words("  one two\nthree  ") == 3
    assert count_words("") == 0
