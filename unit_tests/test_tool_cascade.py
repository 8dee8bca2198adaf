# unit_tests/test_tool_cascade.py
"""
Unit Tests for Fallback Cascade Helpers
=======================================
Run with: python -m pytest unit_tests/test_tool_cascade.py -v
"""

import re

import pytest

from fitsynth.tools.cascade import (
    BOUNDED_INT,
    DURATION_UNIT,
    as_text,
    dedupe_by,
    is_excluded_name,
    round_half_up,
    try_in_order,
)


# =============================================================================
# try_in_order
# =============================================================================

def test_first_non_empty_rung_wins():
    calls = []

    def empty(value):
        calls.append("empty")
        return []

    def hit(value):
        calls.append("hit")
        return [value.upper()]

    def never(value):
        calls.append("never")
        return ["too late"]

    assert try_in_order((empty, hit, never), "abc") == ["ABC"]
    assert calls == ["empty", "hit"], "Rungs after the first hit must not run"


def test_all_rungs_empty_returns_none():
    assert try_in_order((lambda v: None, lambda v: []), "x") is None


# =============================================================================
# Small helpers
# =============================================================================

@pytest.mark.parametrize("value, expected", [(None, ""), ("texte", "texte"), (42, "42")])
def test_as_text(value, expected):
    assert as_text(value) == expected


def test_dedupe_keeps_first_occurrence_in_order():
    items = ["Riz", "poulet", "riz", "Poulet", "sel"]
    assert dedupe_by(items, key=str.lower) == ["Riz", "poulet", "sel"]


@pytest.mark.parametrize("value, expected", [(2.5, 3), (3.5, 4), (0.4999, 0), (131.275, 131), (-0.5, 0)])
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected


@pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
def test_round_half_up_non_finite_gives_default(value):
    assert round_half_up(value) == 0
    assert round_half_up(value, default=2000) == 2000


DURATION = re.compile(BOUNDED_INT + r"\s*" + DURATION_UNIT)


@pytest.mark.parametrize("text, value, unit", [
    ("20 minutes", "20", "minutes"),
    ("5 mins", "5", "mins"),
    ("45min.", "45", "min"),
    ("1h30", "1", "h"),
    ("2 heures", "2", "heures"),
    ("999999 min", "999999", "min"),
])
def test_duration_fragments(text, value, unit):
    match = DURATION.search(text)
    assert (match.group(1), match.group(2)) == (value, unit)


@pytest.mark.parametrize("text", ["3 hommes", "12 minimum", "1234567 min", "9" * 5000 + " min"])
def test_duration_fragments_reject(text):
    assert DURATION.search(text) is None


@pytest.mark.parametrize("name", ["3 séries", "Repos", "90 secondes", "10 reps", "5 min"])
def test_excluded_names(name):
    assert is_excluded_name(name)


@pytest.mark.parametrize("name", ["Pompes", "Squats", "Gainage", "Fentes"])
def test_exercise_names_are_not_excluded(name):
    assert not is_excluded_name(name)
