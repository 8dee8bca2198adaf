# unit_tests/test_tool_meal_nutrition.py
"""
Unit Tests for Meal Nutrition Estimator
=======================================
Run with: python -m pytest unit_tests/test_tool_meal_nutrition.py -v
"""

import pytest

from fitsynth.models import MealNutrition
from fitsynth.tools.meal_nutrition import (
    GRAMS_PER_SPOON,
    MEAL_TYPE_DEFAULTS,
    estimate_meal_nutrition,
    extract_ingredients_from_meal,
)
from fitsynth.tools.nutrition_table import lookup_ingredient_nutrition


# =============================================================================
# Ingredient extraction
# =============================================================================

def test_extract_gram_bare_and_spoon_lines():
    text = "- 100g de riz\n- 2 œufs\n- 1 cuillère à soupe d'huile d'olive\n- 1 kg de poulet"
    ingredients = {item.name: item.quantity for item in extract_ingredients_from_meal(text)}

    assert ingredients == {
        "riz": 100.0,
        "œufs": 2.0,
        "huile d'olive": 1.0 * GRAMS_PER_SPOON,
        "poulet": 1000.0,
    }


def test_extract_ignores_lines_without_dash():
    text = "Déjeuner : 100g de riz\n* 50g de poulet\n- 80g de riz"
    ingredients = extract_ingredients_from_meal(text)

    assert [(i.name, i.quantity) for i in ingredients] == [("riz", 80.0)]


def test_extract_merges_repeated_names():
    ingredients = extract_ingredients_from_meal("- 100g de riz\n- 50g de Riz")
    assert len(ingredients) == 1
    assert ingredients[0].quantity == 150.0


def test_extract_empty_inputs():
    assert extract_ingredients_from_meal("") == []
    assert extract_ingredients_from_meal(None) == []


def test_oversized_quantities_are_ignored():
    text = "- 1234567g de riz\n- " + "9" * 400 + "g de poulet\n- 80g de riz"
    ingredients = extract_ingredients_from_meal(text)

    assert [(i.name, i.quantity) for i in ingredients] == [("riz", 80.0)]

    nutrition = estimate_meal_nutrition("- " + "9" * 400 + "g de riz", "lunch")
    assert nutrition.model_dump() == MEAL_TYPE_DEFAULTS["lunch"]


# =============================================================================
# Estimation
# =============================================================================

def test_estimate_fixture_meal(meal_text):
    nutrition = estimate_meal_nutrition(meal_text, "lunch")
    assert nutrition == MealNutrition(calories=510, carbs=28, protein=49, fat=21)


def test_estimate_rounds_each_total():
    nutrition = estimate_meal_nutrition("- 100g de riz\n- 1 cuillère à soupe d'huile d'olive", "dinner")

    # riz 130 kcal + huile 15g (132.6 kcal)
    assert nutrition.calories == 263
    assert nutrition.carbs == 28
    assert nutrition.protein == 3
    assert nutrition.fat == 15


def test_estimate_is_monotonic_in_known_ingredients():
    base = "- 100g de riz"
    more = base + "\n- 1 banane"

    smaller = estimate_meal_nutrition(base)
    bigger = estimate_meal_nutrition(more)

    assert bigger.calories >= smaller.calories
    assert bigger.carbs >= smaller.carbs


@pytest.mark.parametrize("meal_type", ["breakfast", "lunch", "snack", "dinner"])
def test_baseline_when_nothing_recognised(meal_type):
    nutrition = estimate_meal_nutrition("- 3 licornes\nun repas mystère", meal_type)
    assert nutrition.model_dump() == MEAL_TYPE_DEFAULTS[meal_type]


@pytest.mark.parametrize("meal_type", ["brunch", "", None])
def test_unknown_meal_type_uses_lunch_baseline(meal_type):
    nutrition = estimate_meal_nutrition("rien de reconnu", meal_type)
    assert nutrition.model_dump() == MEAL_TYPE_DEFAULTS["lunch"]


def test_unknown_ingredients_contribute_nothing():
    with_unknown = estimate_meal_nutrition("- 100g de riz\n- 200g de licorne")
    alone = estimate_meal_nutrition("- 100g de riz")
    assert with_unknown == alone


def test_table_lookup_is_case_insensitive():
    assert lookup_ingredient_nutrition("Poulet") == lookup_ingredient_nutrition("poulet")
    assert lookup_ingredient_nutrition("licorne") is None
