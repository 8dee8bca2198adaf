# fitsynth/tools/meal_synthesizer.py
"""
FitSynth — Meal Synthesizer
===========================
Turns a free-text French recipe into a SynthesizedMeal card: title,
servings, preparation time, ingredients, instructions and the nutrition
facts the text happens to mention.

Ingredients and instructions each go through a ladder (regex scan, then a
looser scan, then generic content), so the card is never empty.
"""

import logging
import re
from typing import List, Optional

from fitsynth.models import RecipeIngredient, RecipeNutrition, SynthesizedMeal
from fitsynth.tools.cascade import BOUNDED_INT, DURATION_UNIT, as_text, dedupe_by, try_in_order

logger = logging.getLogger(__name__)

# =============================================================================
# CONSTANTS
# =============================================================================
MAX_INGREDIENTS = 15
MAX_INSTRUCTIONS = 10
DEFAULT_TITLE = "Recette"
DEFAULT_SERVINGS = "2 portions"
DEFAULT_PREP_TIME = "20 min"
DEFAULT_UNIT = "unités"

# Nutrition facts that look like "30 g de protéines" are not ingredients
NUTRIENT_WORDS = ("protéine", "glucide", "lipide", "fibre", "calorie")

GENERIC_INGREDIENTS = (
    ("Tomates", "2", "unités"),
    ("Oignon", "1", "unité"),
    ("Ail", "2", "gousses"),
    ("Huile d'olive", "2", "cuillères"),
    ("Sel", "1", "pincée"),
    ("Poivre", "1", "pincée"),
)

GENERIC_INSTRUCTIONS = (
    "Préparez tous les ingrédients",
    "Mélangez les ingrédients selon vos goûts",
    "Cuisez à feu moyen jusqu'à ce que ce soit prêt",
    "Servez chaud et dégustez",
)

# Infinitive and imperative forms
ACTION_VERBS = (
    "couper", "coupez", "mélanger", "mélangez", "cuire", "cuisez", "ajouter", "ajoutez",
    "verser", "versez", "chauffer", "chauffez", "mettre", "mettez", "préparer", "préparez",
    "faire", "faites",
)

TITLE_PATTERNS = (
    re.compile(r"(?:recette|plat|repas)\b[^:\n]*:\s*([^\n]+)", re.IGNORECASE),
    re.compile(r"^([^.\n]+?)(?:\s*-\s*\d+)"),
    re.compile(r"^([^\W\d_][^.\n]{5,50})"),
)
SERVINGS_PATTERN = re.compile(r"(\d+)\s*(?:portion|personne)", re.IGNORECASE)
PREP_TIME_PATTERNS = (
    re.compile(BOUNDED_INT + r"\s*" + DURATION_UNIT + r"\s*(?:de\s*)?(?:préparation|cuisson)", re.IGNORECASE),
    re.compile(r"(?:préparation|cuisson)\s*:?\s*" + BOUNDED_INT + r"\s*" + DURATION_UNIT, re.IGNORECASE),
)

_QTY = r"(?P<qty>\d+(?:[.,]\d+)?)"
_UNIT = r"(?P<unit>g|kg|ml|l|cuillères?|tasses?|pincées?|branches?|gousses?|tranches?|unités?)\b"
_SPOON = r"(?:\s+à\s+(?:soupe|café))?"

# Named groups: qty, unit (optional), name
INGREDIENT_PATTERNS = (
    # "200 g de poulet", "2 gousses d'ail", "1 cuillère à soupe d'huile"
    re.compile(_QTY + r"\s*" + _UNIT + _SPOON + r"\s*(?:de\s+|d'|d’)(?P<name>[^,\n]+)", re.IGNORECASE),
    # "200g poulet"
    re.compile(_QTY + r"\s*" + _UNIT + _SPOON + r"\s+(?P<name>[^,\n]+)", re.IGNORECASE),
    # "Poulet : 200 g"
    re.compile(r"(?P<name>[^,\n:]+?)\s*:\s*" + _QTY + r"\s*" + _UNIT, re.IGNORECASE),
    # "- 2 tomates" (list items only)
    re.compile(r"^[•\-\*]\s*" + _QTY + r"\s+(?P<name>[^,\n(]+)", re.IGNORECASE),
)

INSTRUCTION_PATTERNS = (
    re.compile(r"(\d+)\.(?!\d)\s*([^.\n]+)"),
    re.compile(r"étape\s*\d+[^:\n]*:?\s*([^.\n]+)", re.IGNORECASE),
    re.compile(r"instruction[^:\n]*:?\s*([^.\n]+)", re.IGNORECASE),
)

NUTRITION_PATTERNS = {
    "calories": (re.compile(r"(\d+)\s*(?:kcal|calories)", re.IGNORECASE), "{} kcal"),
    "protein": (re.compile(r"(\d+(?:\.\d+)?)\s*g\s*(?:de\s*)?protéines?", re.IGNORECASE), "{}g protéines"),
    "carbs": (re.compile(r"(\d+(?:\.\d+)?)\s*g\s*(?:de\s*)?glucides?", re.IGNORECASE), "{}g glucides"),
    "fat": (re.compile(r"(\d+(?:\.\d+)?)\s*g\s*(?:de\s*)?lipides?", re.IGNORECASE), "{}g lipides"),
}


# =============================================================================
# INGREDIENT LADDER
# =============================================================================
def _line_ingredient(line: str) -> Optional[RecipeIngredient]:
    for pattern in INGREDIENT_PATTERNS:
        match = pattern.search(line)
        if not match:
            continue
        name = match.group("name").strip().rstrip(".;:").strip()
        if len(name) < 2 or any(word in name.lower() for word in NUTRIENT_WORDS):
            continue
        unit = match.groupdict().get("unit")
        return RecipeIngredient(
            name=name,
            quantity=match.group("qty").replace(",", "."),
            unit=unit.strip() if unit else DEFAULT_UNIT,
        )
    return None


def extract_ingredients_by_patterns(text: str) -> List[RecipeIngredient]:
    """One ingredient per line at most, first matching pattern wins."""
    found = []
    for raw_line in text.split("\n"):
        ingredient = _line_ingredient(raw_line.strip())
        if ingredient:
            found.append(ingredient)
    return dedupe_by(found, key=lambda item: item.name.lower())


def extract_ingredients_by_lines(text: str) -> List[RecipeIngredient]:
    """Looser scan: any short line with a number becomes `<first number> unités <rest>`."""
    found = []
    for raw_line in text.split("\n"):
        line = raw_line.strip()
        numbers = re.findall(r"\d+", line)
        if not numbers or not 5 < len(line) < 50:
            continue
        name = re.sub(r"\d+", "", line)
        name = re.sub(r"[×•*\-]|\bx\b", "", name)
        name = re.sub(r"\s+", " ", name).strip()
        if len(name) > 2:
            found.append(RecipeIngredient(name=name, quantity=numbers[0], unit=DEFAULT_UNIT))
    return dedupe_by(found, key=lambda item: item.name.lower())


def generic_ingredients(_text: str = "") -> List[RecipeIngredient]:
    return [RecipeIngredient(name=name, quantity=qty, unit=unit) for name, qty, unit in GENERIC_INGREDIENTS]


INGREDIENT_LADDER = (extract_ingredients_by_patterns, extract_ingredients_by_lines, generic_ingredients)


# =============================================================================
# INSTRUCTION LADDER
# =============================================================================
def extract_instructions_by_patterns(text: str) -> List[str]:
    found = []
    for pattern in INSTRUCTION_PATTERNS:
        for match in pattern.finditer(text):
            instruction = match.group(match.lastindex).strip()
            if len(instruction) > 10:
                found.append(instruction)
    return dedupe_by(found, key=str.lower)


def extract_instructions_by_verbs(text: str) -> List[str]:
    """Sentences longer than 15 characters that contain a cooking verb."""
    found = []
    for sentence in re.split(r"[.!?]", text):
        trimmed = sentence.strip()
        lowered = trimmed.lower()
        if len(trimmed) > 15 and any(verb in lowered for verb in ACTION_VERBS):
            found.append(trimmed)
    return found


def generic_instructions(_text: str = "") -> List[str]:
    return list(GENERIC_INSTRUCTIONS)


INSTRUCTION_LADDER = (extract_instructions_by_patterns, extract_instructions_by_verbs, generic_instructions)


# =============================================================================
# HEADER FIELDS
# =============================================================================
def _to_minutes(value: str, unit: str) -> str:
    minutes = int(value) * (60 if unit.lower().startswith("h") else 1)
    return f"{minutes} min"


def extract_title(text: str) -> str:
    for pattern in TITLE_PATTERNS:
        match = pattern.search(text)
        if match:
            title = match.group(1).strip().strip("*#").strip()
            if title:
                return title
    return DEFAULT_TITLE


def extract_servings(text: str) -> str:
    match = SERVINGS_PATTERN.search(text)
    return f"{match.group(1)} portions" if match else DEFAULT_SERVINGS


def extract_prep_time(text: str) -> str:
    for pattern in PREP_TIME_PATTERNS:
        match = pattern.search(text)
        if match:
            return _to_minutes(match.group(1), match.group(2))
    return DEFAULT_PREP_TIME


def extract_nutrition(text: str) -> Optional[RecipeNutrition]:
    """Each fact is read on its own; None when the text mentions none of them."""
    values = {}
    for field, (pattern, template) in NUTRITION_PATTERNS.items():
        match = pattern.search(text)
        if match:
            values[field] = template.format(match.group(1))
    nutrition = RecipeNutrition(**values)
    return None if nutrition.is_empty() else nutrition


# =============================================================================
# MAIN TOOL: synthesize_meal
# =============================================================================
def synthesize_meal(chat_response: str) -> SynthesizedMeal:
    """
    Build a recipe card from a nutritionist response.

    Args:
        chat_response: Free-text French recipe.

    Returns:
        SynthesizedMeal with at most 15 ingredients and 10 instructions;
        `nutrition` is None unless the text states at least one value.

    Example:
        >>> meal = synthesize_meal("Recette : Poulet curry\\n- 200 g de poulet\\n4 portions")
        >>> meal.title, meal.servings, meal.ingredients[0].name
        ('Poulet curry', '4 portions', 'poulet')
    """
    text = as_text(chat_response)
    ingredients = try_in_order(INGREDIENT_LADDER, text, label="meal-ingredients")
    instructions = try_in_order(INSTRUCTION_LADDER, text, label="meal-instructions")

    return SynthesizedMeal(
        title=extract_title(text),
        servings=extract_servings(text),
        prep_time=extract_prep_time(text),
        ingredients=ingredients[:MAX_INGREDIENTS],
        instructions=instructions[:MAX_INSTRUCTIONS],
        nutrition=extract_nutrition(text),
    )


__all__ = [
    "synthesize_meal",
    "extract_ingredients_by_patterns",
    "extract_ingredients_by_lines",
    "generic_ingredients",
    "extract_instructions_by_patterns",
    "extract_instructions_by_verbs",
    "generic_instructions",
    "extract_title",
    "extract_servings",
    "extract_prep_time",
    "extract_nutrition",
    "GENERIC_INGREDIENTS",
    "GENERIC_INSTRUCTIONS",
]
