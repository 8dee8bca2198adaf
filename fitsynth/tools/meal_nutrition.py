# fitsynth/tools/meal_nutrition.py
"""
FitSynth — Meal Nutrition Estimator
===================================
Estimates calories and macros for a meal block written as a French list:

    - 100g de riz
    - 2 œufs
    - 1 cuillère à soupe d'huile d'olive

Ingredient quantities are normalised to grams and matched against the
static per-100g table. When nothing in the text is recognised the estimate
falls back to a fixed baseline for the meal type.

This is a pure text-processing tool (no AI required).
"""

import logging
import re
from typing import Dict, List, Optional

from fitsynth.models import MealIngredient, MealNutrition
from fitsynth.tools.cascade import as_text, round_half_up, try_in_order
from fitsynth.tools.nutrition_table import lookup_ingredient_nutrition

logger = logging.getLogger(__name__)

# =============================================================================
# CONSTANTS
# =============================================================================
MEAL_TYPES = ("breakfast", "lunch", "snack", "dinner")

# Baselines used when no ingredient of the meal is recognised
MEAL_TYPE_DEFAULTS: Dict[str, Dict[str, int]] = {
    "breakfast": {"calories": 400, "carbs": 50, "protein": 20, "fat": 15},
    "lunch": {"calories": 600, "carbs": 75, "protein": 30, "fat": 20},
    "snack": {"calories": 200, "carbs": 25, "protein": 10, "fat": 8},
    "dinner": {"calories": 500, "carbs": 60, "protein": 35, "fat": 18},
}

GRAMS_PER_SPOON = 15  # approximation, 1 cuillère ~ 15g

_QTY = r"(?<![\d.])(\d{1,6}(?:\.\d+)?)"

# "50g d'épinards", "1 kg de pommes de terre"
GRAM_PATTERN = re.compile(
    _QTY + r"\s*(g|grammes?|kg|kilos?)\s+(?:d'|d’|de\s+)([^,\n]+)",
    re.IGNORECASE,
)
# "2 œufs", "1 banane (mûre)"
BARE_PATTERN = re.compile(
    _QTY + r"\s+(?!cuill|c\.à)([^,\n(]+)(?:\([^)\n]*\))?",
    re.IGNORECASE,
)
# "1 cuillère d'huile d'olive", "2 c.à.s. de miel"
SPOON_PATTERN = re.compile(
    _QTY + r"\s*(?:cuillères?|c\.à\.s\.|c\.à\.c\.)\s+(?:à\s+(?:soupe|café)\s+)?"
    r"(?:d'|d’|de\s+)([^,\n]+)",
    re.IGNORECASE,
)


# =============================================================================
# HELPER: line matchers
# =============================================================================
def _clean_name(raw: str) -> str:
    name = raw.strip().lower()
    name = re.sub(r"^(?:d'|d’|de\s+)", "", name)
    return name.strip().rstrip(".;:").strip()


def _match_grams(line: str) -> List[MealIngredient]:
    found = []
    for match in GRAM_PATTERN.finditer(line):
        quantity = float(match.group(1))
        if match.group(2).lower().startswith("k"):
            quantity *= 1000
        name = _clean_name(match.group(3))
        if name:
            found.append(MealIngredient(name=name, quantity=quantity))
    return found


def _match_bare(line: str) -> List[MealIngredient]:
    found = []
    for match in BARE_PATTERN.finditer(line):
        name = _clean_name(match.group(2))
        if name:
            found.append(MealIngredient(name=name, quantity=float(match.group(1))))
    return found


def _match_spoons(line: str) -> List[MealIngredient]:
    found = []
    for match in SPOON_PATTERN.finditer(line):
        name = _clean_name(match.group(2))
        if name:
            found.append(MealIngredient(name=name, quantity=float(match.group(1)) * GRAMS_PER_SPOON))
    return found


LINE_MATCHERS = (_match_grams, _match_bare, _match_spoons)


# =============================================================================
# TOOL: extract_ingredients_from_meal
# =============================================================================
def extract_ingredients_from_meal(meal_content: str) -> List[MealIngredient]:
    """
    Pull `{name, quantity-in-grams}` pairs out of the dash-prefixed lines of a meal.

    Each list line is tried against the gram, bare-count and spoon patterns in
    that order; the first pattern that matches owns the line. Ingredients whose
    lowercased names collide are merged by summing their quantities.

    Args:
        meal_content: Free-text meal description. Lines not starting with "-"
                      are ignored.

    Returns:
        Ordered list of MealIngredient (first-seen order).

    Example:
        >>> extract_ingredients_from_meal("- 100g de riz\\n- 50g de riz")
        [MealIngredient(name='riz', quantity=150.0)]
    """
    merged: Dict[str, MealIngredient] = {}

    for raw_line in as_text(meal_content).split("\n"):
        line = raw_line.strip()
        if not line.startswith("-"):
            continue

        matches = try_in_order(LINE_MATCHERS, line, label="meal-ingredients") or []
        for ingredient in matches:
            existing = merged.get(ingredient.name)
            if existing:
                existing.quantity += ingredient.quantity
            else:
                merged[ingredient.name] = ingredient

    return list(merged.values())


# =============================================================================
# TOOL: estimate_meal_nutrition
# =============================================================================
def estimate_meal_nutrition(meal_content: str, meal_type: Optional[str] = "lunch") -> MealNutrition:
    """
    Estimate calories, carbs, protein and fat for a meal block.

    Recognised ingredients contribute `table_value * grams / 100`; unknown ones
    contribute nothing. If the calorie total ends up at exactly zero, the whole
    accumulation is replaced by the meal-type baseline.

    Args:
        meal_content: Free-text meal description (see extract_ingredients_from_meal).
        meal_type: "breakfast", "lunch", "snack" or "dinner". Anything else
                   uses the lunch baseline.

    Returns:
        MealNutrition with every value rounded to the nearest integer.

    Example:
        >>> estimate_meal_nutrition("texte sans aucun ingrédient reconnu", "breakfast")
        MealNutrition(calories=400, carbs=50, protein=20, fat=15)
    """
    totals = {"calories": 0.0, "carbs": 0.0, "protein": 0.0, "fat": 0.0}

    for ingredient in extract_ingredients_from_meal(meal_content):
        macros = lookup_ingredient_nutrition(ingredient.name)
        if not macros:
            continue
        factor = ingredient.quantity / 100
        for key in totals:
            totals[key] += macros[key] * factor

    if totals["calories"] == 0:
        key = (meal_type or "").lower()
        if key not in MEAL_TYPE_DEFAULTS:
            key = "lunch"
        logger.debug("meal nutrition: no recognised ingredient, using %s baseline", key)
        return MealNutrition(**MEAL_TYPE_DEFAULTS[key])

    return MealNutrition(**{key: max(0, round_half_up(value)) for key, value in totals.items()})


__all__ = [
    "extract_ingredients_from_meal",
    "estimate_meal_nutrition",
    "MEAL_TYPES",
    "MEAL_TYPE_DEFAULTS",
    "GRAMS_PER_SPOON",
]
