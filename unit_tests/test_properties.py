# unit_tests/test_properties.py
"""
Cross-Module Properties
=======================
Every public extractor must accept arbitrary text and still return a
well-formed, bounded result.

Run with: python -m pytest unit_tests/test_properties.py -v
"""

import logging

import pytest

from fitsynth.app_logging import LOGGER_NAME, configure_logging
from fitsynth.config import get_settings
from fitsynth.models import MealNutrition, SynthesizedMeal, SynthesizedWorkout, WorkoutCalorieCalculation
from fitsynth.tools.meal_nutrition import estimate_meal_nutrition
from fitsynth.tools.meal_synthesizer import synthesize_meal
from fitsynth.tools.muscle_groups import extract_muscle_groups
from fitsynth.tools.shopping_parser import categorize_ingredient, extract_ingredients_from_ai_response
from fitsynth.tools.workout_calories import calculate_workout_calories
from fitsynth.tools.workout_synthesizer import synthesize_workout

ADVERSARIAL_INPUTS = [
    None,
    "",
    "   ",
    "\n\n\t\n",
    "Just a plain English sentence about nothing.",
    ".*+?^$()[]{}|\\",
    "((((((((((",
    "- : - : - :",
    "3x\n x3\n××\n-3 x -4",
    "999999999999999999999 x 999999999999999999999 Pompes",
    "<INGREDIENTS>{\"ingredients\": </INGREDIENTS>",
    "<INGREDIENTS>[1, 2, 3]</INGREDIENTS>",
    "Ingrédients : , ; et , ;",
    "💪🔥🥗 " * 20,
    "a" * 500,
    "- 0g de riz\n- 0 œufs",
    "1. \n2. \n3.",
    "9" * 5000 + " min",
    "9" * 5000 + " min de préparation",
    "1" * 400 + " min de course",
    "- " + "9" * 400 + "g de riz",
    "<INGREDIENTS>" + "[" * 3000 + "</INGREDIENTS>",
    '<INGREDIENTS>{"ingredients": [{"name": "riz", "quantity": ' + "9" * 5000 + "}]}</INGREDIENTS>",
]

UNUSUAL_PROFILES = [
    {},
    {"weight": 400, "age": 20},
    {"weight": 1, "height": 1, "age": 99},
    {"age": 30, "weight": "inf", "height": 170},
    {"age": 30, "weight": "nan", "height": 170},
    {"age": "-inf", "weight": 70, "height": "inf"},
    {"age": 30, "weight": 1e308, "height": 170},
]


# =============================================================================
# Totality & bounds
# =============================================================================

@pytest.mark.parametrize("text", ADVERSARIAL_INPUTS)
def test_workout_synthesis_is_total(text):
    workout = synthesize_workout(text)

    assert isinstance(workout, SynthesizedWorkout)
    assert 1 <= len(workout.exercises) <= 10
    assert 1 <= len(workout.tips) <= 5
    assert workout.title and workout.duration


@pytest.mark.parametrize("text", ADVERSARIAL_INPUTS)
def test_meal_synthesis_is_total(text):
    meal = synthesize_meal(text)

    assert isinstance(meal, SynthesizedMeal)
    assert 1 <= len(meal.ingredients) <= 15
    assert 1 <= len(meal.instructions) <= 10
    assert meal.title


@pytest.mark.parametrize("text", ADVERSARIAL_INPUTS)
def test_nutrition_estimate_is_total(text):
    nutrition = estimate_meal_nutrition(text, "snack")

    assert isinstance(nutrition, MealNutrition)
    assert nutrition.calories > 0


@pytest.mark.parametrize("text", ADVERSARIAL_INPUTS)
def test_calorie_calculation_is_total_and_clamped(text, female_profile):
    for profile in [female_profile] + UNUSUAL_PROFILES:
        result = calculate_workout_calories(text, profile)
        assert isinstance(result, WorkoutCalorieCalculation)
        assert 50 <= result.calories <= 2000


@pytest.mark.parametrize("text", ADVERSARIAL_INPUTS)
def test_shopping_extraction_is_total(text):
    items = extract_ingredients_from_ai_response(text)

    assert isinstance(items, list)
    assert all(item.name for item in items)


# =============================================================================
# Examples
# =============================================================================

def test_structured_block_excludes_free_text():
    text = (
        "Ingrédients : 200g de poulet, 3 carottes\n"
        '<INGREDIENTS>{"ingredients":[{"name":"Pommes","quantity":"2","unit":"kg","category":"Fruits"}]}'
        "</INGREDIENTS>"
    )
    items = extract_ingredients_from_ai_response(text)

    assert [(i.name, i.quantity, i.unit, i.category) for i in items] == [("Pommes", "2", "kg", "Fruits")]


@pytest.mark.parametrize("text, expected", [
    ("3x12 Pompes", "Poitrine/Triceps"),
    ("Squats 4x15", "Jambes/Fessiers"),
    ("exercice mystère", "Full Body"),
])
def test_muscle_examples(text, expected):
    assert extract_muscle_groups(text) == expected


@pytest.mark.parametrize("name", ["Poulet", "pommes de terre", "lait", "", "chocolat"])
def test_categorization_is_deterministic(name):
    assert categorize_ingredient(name) == categorize_ingredient(name)


# =============================================================================
# Ambient config
# =============================================================================

def test_settings_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("FITSYNTH_LOG_LEVEL", "debug")
    monkeypatch.setenv("FITSYNTH_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("GOOGLE_API_KEY", "")

    settings = get_settings()
    assert settings.log_level == "DEBUG"
    assert settings.data_dir == str(tmp_path)
    assert settings.gemini_enabled is False


def test_configure_logging_is_idempotent():
    logger = configure_logging("INFO")
    handlers = list(logger.handlers)

    again = configure_logging(logging.DEBUG)

    assert again is logger
    assert logger.name == LOGGER_NAME
    assert logger.handlers == handlers
    assert logger.level == logging.DEBUG
