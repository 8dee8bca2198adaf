# unit_tests/test_tool_workout_synthesizer.py
"""
Unit Tests for Workout Synthesizer
==================================
Run with: python -m pytest unit_tests/test_tool_workout_synthesizer.py -v
"""

import pytest

from fitsynth.tools.workout_synthesizer import (
    DEFAULT_COOLDOWN,
    DEFAULT_TIPS,
    DEFAULT_WARMUP,
    GENERIC_EXERCISES,
    detect_duration,
    detect_session_type,
    extract_exercises_by_lines,
    extract_exercises_by_patterns,
    synthesize_workout,
)


# =============================================================================
# Full card
# =============================================================================

def test_synthesize_fixture_workout(workout_text):
    workout = synthesize_workout(workout_text)

    assert workout.title == "Séance de 30 min full body"
    assert workout.duration == "30 min"
    assert [(e.name, e.sets, e.reps) for e in workout.exercises] == [
        ("Pompes", "3", "12"),
        ("Squats", "4", "15"),
        ("Gainage", "3", "45s"),
        ("Fentes", "3", "10"),
    ]
    assert [e.muscle_groups for e in workout.exercises] == [
        "Poitrine/Triceps", "Jambes/Fessiers", "Core", "Jambes/Fessiers",
    ]
    assert workout.warmup == "5 minutes de corde à sauter"
    assert workout.cooldown == "étirements des jambes et du dos"
    assert workout.tips == ["gardez le dos bien droit pendant les squats"]


def test_rest_and_notes_are_captured(workout_text):
    by_name = {e.name: e for e in synthesize_workout(workout_text).exercises}

    assert by_name["Fentes"].rest == "90s de repos"
    assert by_name["Pompes"].rest == "1-2 min"
    assert by_name["Pompes"].notes is None


def test_notes_in_parentheses():
    exercises = extract_exercises_by_patterns("3 x 10 Rowing haltère - 60s (dos bien plat)")

    assert len(exercises) == 1
    rowing = exercises[0]
    assert (rowing.name, rowing.sets, rowing.reps) == ("Rowing haltère", "3", "10")
    assert rowing.rest == "60s"
    assert rowing.notes == "dos bien plat"
    assert rowing.muscle_groups == "Dos/Biceps"


@pytest.mark.parametrize("text, expected", [
    ("3 séries de 12 pompes", ("pompes", "3", "12")),
    ("4 séries de 10 répétitions de squats", ("squats", "4", "10")),
    ("Tractions (4x8)", ("Tractions", "4", "8")),
    ("Gainage 45 sec", ("Gainage", "1", "45s")),
    ("30 sec Planche", ("Planche", "1", "30s")),
    ("- Dips : 3x10", ("Dips", "3", "10")),
])
def test_pattern_layouts(text, expected):
    exercises = extract_exercises_by_patterns(text)
    assert (exercises[0].name, exercises[0].sets, exercises[0].reps) == expected


def test_duplicate_names_keep_first_hit():
    exercises = extract_exercises_by_patterns("- Pompes: 3x12\n- pompes: 5x20")
    assert [(e.name, e.sets) for e in exercises] == [("Pompes", "3")]


def test_stoplist_names_are_rejected():
    assert extract_exercises_by_patterns("3 x 10 répétitions\n2 x 60 secondes") == []


# =============================================================================
# Ladder fallbacks
# =============================================================================

def test_line_scan_when_no_pattern_matches():
    text = "3x12 - Pompes\n4x10 - Rowing"

    assert extract_exercises_by_patterns(text) == []
    workout = synthesize_workout(text)
    assert [(e.name, e.sets, e.reps) for e in workout.exercises] == [("Pompes", "3", "12"), ("Rowing", "4", "10")]
    assert extract_exercises_by_lines(text) == workout.exercises


def test_generic_circuit_when_nothing_matches():
    workout = synthesize_workout("Repos complet aujourd'hui, profite bien.")

    assert [e.name for e in workout.exercises] == [name for name, _, _, _ in GENERIC_EXERCISES]
    assert workout.duration == "45 min"
    assert workout.warmup == DEFAULT_WARMUP
    assert workout.cooldown == DEFAULT_COOLDOWN
    assert workout.tips == list(DEFAULT_TIPS)


def test_bounds_on_exercises_and_tips():
    letters = "ABCDEFGHIJKL"
    lines = [f"- Mouvement {letter}: 3x10" for letter in letters]
    lines += [f"Conseil : pensez au point technique numéro {i}" for i in range(7)]
    workout = synthesize_workout("\n".join(lines))

    assert len(workout.exercises) == 10
    assert workout.exercises[0].name == "Mouvement A"
    assert len(workout.tips) == 5


# =============================================================================
# Header fields
# =============================================================================

@pytest.mark.parametrize("text, expected", [
    ("Séance de 20 minutes", "20 min"),
    ("Sortie longue de 1 h", "60 min"),
    ("2 heures de vélo", "120 min"),
    ("Circuit de 5 mins", "5 min"),
    ("Sortie de 1h30", "60 min"),
    ("pas de durée", "45 min"),
    ("9" * 5000 + " min", "45 min"),
])
def test_detect_duration(text, expected):
    assert detect_duration(text) == expected


@pytest.mark.parametrize("text, expected", [
    ("Circuit au poids du corps", "sans matériel"),
    ("Travail avec haltères et barre", "avec haltères"),
    ("Développé à la barre", "avec barre"),
    ("HIIT express", "cardio"),
    ("Séance de musculation", "musculation"),
    ("Séance libre", "full body"),
])
def test_detect_session_type(text, expected):
    assert detect_session_type(text) == expected


def test_none_input_gives_populated_card():
    workout = synthesize_workout(None)

    assert workout.title == "Séance de 45 min full body"
    assert len(workout.exercises) == len(GENERIC_EXERCISES)
    assert workout.tips
