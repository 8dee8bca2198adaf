# fitsynth/agents/plan_generator.py
"""
FitSynth — Day Plan Generator
=============================
Asks Gemini for one workout and three meals (French coach / nutritionist
personas), then runs every text through the local synthesizers:

    workout text ──> synthesize_workout + calculate_workout_calories
    meal texts   ──> synthesize_meal + estimate_meal_nutrition
                 ──> extract_ingredients_from_ai_response (shopping list)

Generation needs GOOGLE_API_KEY. Assembly (`assemble_day_plan`) is pure and
works on any texts, so plans can also be rebuilt from stored responses.
"""

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional, Union

from google import genai
from google.genai import types as genai_types

from fitsynth.config import get_settings
from fitsynth.memory.shopping_store import JsonShoppingList
from fitsynth.models import DayPlan, Ingredient, PlanSection, ShoppingItem, UserProfile
from fitsynth.tools.cascade import dedupe_by
from fitsynth.tools.meal_nutrition import estimate_meal_nutrition
from fitsynth.tools.meal_synthesizer import synthesize_meal
from fitsynth.tools.shopping_parser import extract_ingredients_from_ai_response
from fitsynth.tools.workout_calories import calculate_workout_calories
from fitsynth.tools.workout_synthesizer import synthesize_workout

logger = logging.getLogger(__name__)

# =============================================================================
# CONFIGURATION
# =============================================================================
# English meal keys -> French label used in prompts and titles
PLAN_MEALS = {
    "breakfast": "petit-déjeuner",
    "lunch": "déjeuner",
    "dinner": "dîner",
}

WORKOUT_SYSTEM_PROMPT = """Tu es un coach sportif expert. Génère une séance d'entraînement complète et structurée.

{profile_line}

FORMAT REQUIS:
- Titre accrocheur
- Échauffement (5-10 min)
- Exercices principaux (30-45 min)
- Récupération (5-10 min)
- Conseils pratiques

IMPORTANT: Réponse concise et structurée. Évite les répétitions."""

MEAL_SYSTEM_PROMPT = """Tu es un nutritionniste expert. Génère un {meal_label} équilibré et délicieux.

{profile_line}

FORMAT REQUIS:
- Nom du plat
- Ingrédients avec quantités
- Instructions de préparation
- Valeurs nutritionnelles (kcal, protéines, glucides, lipides)

FORMAT RECETTES - Utilise TOUJOURS :
<INGREDIENTS>
{{"ingredients": [{{"name": "nom", "quantity": "qty", "unit": "unité", "category": "catégorie"}}]}}
</INGREDIENTS>

Catégories: Fruits, Légumes, Protéines, Céréales, Épicerie, Laitages, Autres
Unités: g, kg, ml, l, cuillères, tasses, pincées, branches, gousses, tranches, unités

IMPORTANT: Réponse concise et structurée. Évite les répétitions."""

DEFAULT_WORKOUT_PROFILE_LINE = "Profil par défaut: objectif général, 3 séances/semaine"
DEFAULT_MEAL_PROFILE_LINE = "Profil par défaut: objectif général, alimentation équilibrée"


# =============================================================================
# PROMPTS
# =============================================================================
def _coerce_profile(profile: Union[UserProfile, Dict[str, Any], None]) -> Optional[UserProfile]:
    if profile is None or isinstance(profile, UserProfile):
        return profile
    return UserProfile.model_validate(profile)


def _profile_line(profile: Optional[UserProfile]) -> Optional[str]:
    if profile is None:
        return None
    return f"Profil utilisateur: {profile.goal}, {profile.sessions} séances/semaine, {profile.diet}"


def build_workout_prompt(profile: Union[UserProfile, Dict[str, Any], None] = None) -> str:
    line = _profile_line(_coerce_profile(profile)) or DEFAULT_WORKOUT_PROFILE_LINE
    return WORKOUT_SYSTEM_PROMPT.format(profile_line=line)


def build_meal_prompt(meal_label: str, profile: Union[UserProfile, Dict[str, Any], None] = None) -> str:
    line = _profile_line(_coerce_profile(profile)) or DEFAULT_MEAL_PROFILE_LINE
    return MEAL_SYSTEM_PROMPT.format(meal_label=meal_label, profile_line=line)


# =============================================================================
# GEMINI
# =============================================================================
def get_gemini_client() -> Optional[Any]:
    """Build a Gemini client from GOOGLE_API_KEY, or None when no key is set."""
    settings = get_settings()
    if not settings.gemini_enabled:
        return None
    return genai.Client(api_key=settings.google_api_key)


def call_gemini(system_prompt: str, user_message: str, client: Optional[Any] = None,
                model: Optional[str] = None) -> Dict[str, Any]:
    """
    Send one persona prompt to Gemini.

    Returns:
        {"status": "success", "text": ...} or {"status": "error", "message": ...}
    """
    client = client or get_gemini_client()
    if client is None:
        return {"status": "error", "message": "GOOGLE_API_KEY is not set"}

    try:
        response = client.models.generate_content(
            model=model or get_settings().gemini_model,
            contents=[user_message],
            config=genai_types.GenerateContentConfig(system_instruction=system_prompt),
        )
    except Exception as e:
        logger.warning("⚠️ Gemini call failed: %s", e)
        return {"status": "error", "message": str(e)}

    text = (getattr(response, "text", None) or "").strip()
    if not text:
        return {"status": "error", "message": "Empty response from Gemini"}
    return {"status": "success", "text": text}


def _today_fr(now: datetime) -> str:
    return now.strftime("%d/%m/%Y")


def generate_workout(profile: Union[UserProfile, Dict[str, Any], None] = None, client: Optional[Any] = None,
                     now: Optional[datetime] = None) -> Dict[str, Any]:
    """Ask the coach persona for today's session."""
    now = now or datetime.now()
    result = call_gemini(build_workout_prompt(profile), "Génère ma séance d'entraînement du jour", client=client)
    if result["status"] != "success":
        return result
    return {"status": "success", "title": f"Séance {_today_fr(now)}", "content": result["text"]}


def generate_meal(meal_type: str, profile: Union[UserProfile, Dict[str, Any], None] = None,
                  client: Optional[Any] = None, now: Optional[datetime] = None) -> Dict[str, Any]:
    """Ask the nutritionist persona for one meal ("breakfast", "lunch" or "dinner")."""
    now = now or datetime.now()
    label = PLAN_MEALS.get(meal_type, meal_type)
    result = call_gemini(build_meal_prompt(label, profile), f"Génère mon {label} du jour", client=client)
    if result["status"] != "success":
        return result
    return {"status": "success", "title": f"{label.capitalize()} {_today_fr(now)}", "content": result["text"]}


# =============================================================================
# ASSEMBLY
# =============================================================================
def extract_plan_shopping_list(meal_texts: List[str]) -> List[Ingredient]:
    """Shopping entries of every meal, merged by name (first occurrence kept)."""
    items: List[Ingredient] = []
    for text in meal_texts:
        items.extend(extract_ingredients_from_ai_response(text))
    return dedupe_by(items, key=lambda item: item.name.lower())


def assemble_day_plan(
    workout: PlanSection,
    meals: Dict[str, PlanSection],
    profile: Union[UserProfile, Dict[str, Any], None] = None,
    now: Optional[datetime] = None,
) -> DayPlan:
    """
    Build a DayPlan from already generated texts. No network access.

    Args:
        workout: Workout title and text.
        meals: Meal key ("breakfast", "lunch", "dinner") -> title and text.
        profile: Used for the plan title and the calorie estimate.
        now: Creation time (defaults to now).

    Returns:
        DayPlan with synthesized cards, per-meal nutrition, workout calories
        and a deduplicated shopping list.
    """
    now = now or datetime.now()
    user = _coerce_profile(profile)

    title = f"Ma journée {_today_fr(now)}"
    if user is not None and user.goal:
        title += f" - {user.goal}"

    return DayPlan(
        id=f"dayplan_{int(now.timestamp() * 1000)}",
        title=title,
        date=_today_fr(now),
        workout=workout,
        meals=meals,
        synthesized_workout=synthesize_workout(workout.content),
        synthesized_meals={key: synthesize_meal(meal.content) for key, meal in meals.items()},
        shopping_list=extract_plan_shopping_list([meal.content for meal in meals.values()]),
        meal_nutrition={key: estimate_meal_nutrition(meal.content, key) for key, meal in meals.items()},
        workout_calories=calculate_workout_calories(workout.content, user),
        created_at=now.isoformat(),
    )


def generate_day_plan(profile: Union[UserProfile, Dict[str, Any], None] = None, client: Optional[Any] = None,
                      now: Optional[datetime] = None) -> Dict[str, Any]:
    """
    Generate and assemble a full day (workout + breakfast, lunch, dinner).

    Returns:
        {"status": "success", "day_plan": DayPlan} or the first error dict.
    """
    now = now or datetime.now()
    client = client or get_gemini_client()
    if client is None:
        return {"status": "error", "message": "GOOGLE_API_KEY is not set"}

    workout = generate_workout(profile, client=client, now=now)
    if workout["status"] != "success":
        return workout

    meals = {}
    for meal_type in PLAN_MEALS:
        meal = generate_meal(meal_type, profile, client=client, now=now)
        if meal["status"] != "success":
            return meal
        meals[meal_type] = PlanSection(title=meal["title"], content=meal["content"])

    plan = assemble_day_plan(PlanSection(title=workout["title"], content=workout["content"]), meals, profile, now)
    logger.info("📋 Day plan %s: %d exercises, %d shopping items",
                plan.id, len(plan.synthesized_workout.exercises), len(plan.shopping_list))
    return {"status": "success", "day_plan": plan}


def save_plan_shopping_list(plan: DayPlan, store: Optional[JsonShoppingList] = None) -> List[ShoppingItem]:
    """Push the plan's shopping entries into the shopping list store."""
    store = store or JsonShoppingList()
    return store.add_many(plan.shopping_list, source=f"Plan jour {plan.date}")


__all__ = [
    "PLAN_MEALS",
    "build_workout_prompt",
    "build_meal_prompt",
    "get_gemini_client",
    "call_gemini",
    "generate_workout",
    "generate_meal",
    "generate_day_plan",
    "assemble_day_plan",
    "extract_plan_shopping_list",
    "save_plan_shopping_list",
]
