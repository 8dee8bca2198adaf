# unit_tests/test_tool_muscle_groups.py
"""
Unit Tests for Muscle-Group Classifier
======================================
Run with: python -m pytest unit_tests/test_tool_muscle_groups.py -v
"""

import pytest

from fitsynth.tools.muscle_groups import DEFAULT_MUSCLE_GROUP, MUSCLE_KEYWORDS, extract_muscle_groups


@pytest.mark.parametrize("text, expected", [
    ("Pompes", "Poitrine/Triceps"),
    ("3x12 Pompes", "Poitrine/Triceps"),
    ("Tractions pronation", "Dos/Biceps"),
    ("Squats sautés", "Jambes/Fessiers"),
    ("Fentes 90s de repos", "Jambes/Fessiers"),
    ("Gainage", "Core"),
    ("Curl biceps", "Biceps"),
    ("Dips entre deux chaises", "Triceps"),
    ("Burpees", "Full Body"),
    ("Mountain Climbers", "Core"),
])
def test_known_exercises(text, expected):
    assert extract_muscle_groups(text) == expected


def test_earlier_keyword_wins():
    # "lat" is listed with the back keywords, before "planche"
    assert extract_muscle_groups("Planche latérale") == "Dos/Biceps"
    # "développé" precedes "développé militaire"
    assert extract_muscle_groups("Développé militaire") == "Poitrine/Triceps"


def test_fallback_groups_used_when_table_misses():
    assert extract_muscle_groups("Push press") == "Poitrine/Triceps"


@pytest.mark.parametrize("text", [None, "", "exercice mystère", "12345"])
def test_unknown_text_is_full_body(text):
    assert extract_muscle_groups(text) == DEFAULT_MUSCLE_GROUP


def test_keyword_table_is_read_only():
    with pytest.raises(TypeError):
        MUSCLE_KEYWORDS["nouveau"] = "Core"
