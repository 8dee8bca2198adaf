# fitsynth/tools/workout_calories.py
"""
FitSynth — Workout Calorie Calculator
=====================================
Estimates the energy burned by a workout described in free text.

Pipeline:
  1. extract_workout_info: duration, recognised activities, intensity
  2. average MET of the recognised activities (or an intensity default)
  3. MET adjustments: intensity, age, fitness level, resting metabolism
  4. kcal = MET × weight (kg) × duration (h), clamped to [50, 2000]

Resting metabolism uses the Mifflin-St Jeor equation:
  Men:   BMR = 10 × weight + 6.25 × height - 5 × age + 5
  Women: BMR = 10 × weight + 6.25 × height - 5 × age - 161
"""

import logging
import re
from types import MappingProxyType
from typing import Any, Dict, Optional, Union

from pydantic import ValidationError

from fitsynth.models import UserProfile, WorkoutCalorieCalculation, WorkoutInfo
from fitsynth.tools.cascade import BOUNDED_INT, DURATION_UNIT, round_half_up

logger = logging.getLogger(__name__)

# =============================================================================
# CONSTANTS & FORMULAS
# =============================================================================

# MET values (Metabolic Equivalent of Task), matched as substrings of the text
_ACTIVITY_METS = {
    # Cardio
    "course": 8.0,
    "jogging": 7.0,
    "marche": 3.5,
    "vélo": 8.0,
    "natation": 8.0,
    "rameur": 7.0,
    "elliptique": 5.0,
    "tapis": 6.0,
    "cardio": 6.0,
    # Musculation
    "musculation": 5.0,
    "poids": 5.0,
    "haltères": 5.0,
    "squat": 5.0,
    "pompes": 3.8,
    "tractions": 4.0,
    "dips": 4.0,
    "gainage": 3.0,
    "abdos": 3.0,
    "planche": 3.0,
    # HIIT
    "hiit": 8.0,
    "tabata": 8.0,
    "circuit": 7.0,
    "crossfit": 8.0,
    "burpees": 8.0,
    "mountain climbers": 8.0,
    "jumping jacks": 8.0,
    # Yoga & stretching
    "yoga": 2.5,
    "stretching": 2.0,
    "pilates": 3.0,
    "méditation": 1.0,
    # Sports
    "football": 7.0,
    "basketball": 6.0,
    "tennis": 7.0,
    "badminton": 5.5,
    "volleyball": 3.0,
    "handball": 7.0,
    "rugby": 8.0,
    "boxe": 12.0,
    "arts martiaux": 10.0,
    "danse": 4.8,
    "zumba": 6.0,
    # Outdoor & functional
    "montée escaliers": 8.0,
    "escalade": 8.0,
    "randonnée": 6.0,
    "ski": 7.0,
    "snowboard": 5.0,
    "surf": 5.0,
    "kayak": 5.0,
    "aviron": 7.0,
}
ACTIVITY_METS = MappingProxyType(_ACTIVITY_METS)

HIGH_INTENSITY_KEYWORDS = ("hiit", "tabata", "intense", "maximal", "explosif", "sprint", "burpees", "crossfit")
LOW_INTENSITY_KEYWORDS = ("léger", "doucement", "récupération", "stretching", "yoga", "marche")

# Used when no activity keyword is recognised
INTENSITY_DEFAULT_METS = {"low": 3.0, "moderate": 5.0, "high": 8.0}
INTENSITY_MULTIPLIERS = {"low": 0.8, "moderate": 1.0, "high": 1.3}
FITNESS_MULTIPLIERS = {"débutant": 0.9, "avancé": 1.1}

DEFAULT_DURATION_MIN = 45
DEFAULT_AGE = 25
DEFAULT_WEIGHT_KG = 70
DEFAULT_HEIGHT_CM = 170
DEFAULT_FITNESS_LEVEL = "débutant"
FEMALE_GENDERS = ("female", "femme", "f")

MIN_CALORIES = 50
MAX_CALORIES = 2000

DURATION_PATTERN = re.compile(BOUNDED_INT + r"\s*" + DURATION_UNIT)

DEFAULT_CALCULATION = {"calories": 300, "duration": 45, "intensity": "moderate", "activity_type": "unknown"}


# =============================================================================
# HELPERS
# =============================================================================
def calculate_bmr(weight: float, height: float, age: float, gender: Optional[str] = None) -> float:
    """Mifflin-St Jeor basal metabolic rate in kcal/day."""
    base = 10 * weight + 6.25 * height - 5 * age
    if (gender or "").strip().lower() in FEMALE_GENDERS:
        return base - 161
    return base + 5


def _fitness_level(profile: UserProfile) -> str:
    level = None
    if profile.chat_responses is not None:
        level = profile.chat_responses.fitness_level
    return (level or profile.fitness_level or DEFAULT_FITNESS_LEVEL).strip().lower()


def _coerce_profile(profile: Union[UserProfile, Dict[str, Any], None]) -> Optional[UserProfile]:
    if profile is None or isinstance(profile, UserProfile):
        return profile
    try:
        return UserProfile.model_validate(profile)
    except ValidationError as e:
        logger.debug("workout calories: unusable profile (%s), using defaults", e.error_count())
        return None


def _default_calculation() -> WorkoutCalorieCalculation:
    return WorkoutCalorieCalculation(**DEFAULT_CALCULATION)


# =============================================================================
# TOOL: extract_workout_info
# =============================================================================
def extract_workout_info(content: str) -> WorkoutInfo:
    """
    Read duration, activities and intensity from a workout description.

    Args:
        content: Free-text workout. Non-string input gives the defaults.

    Returns:
        WorkoutInfo(duration=minutes, activities=[keys of ACTIVITY_METS], intensity)

    Example:
        >>> extract_workout_info("Course 1h puis yoga")
        WorkoutInfo(duration=60, activities=['course', 'yoga'], intensity='low')
    """
    if not content or not isinstance(content, str):
        return WorkoutInfo()

    lowered = content.lower()
    lines = lowered.split("\n")

    duration = DEFAULT_DURATION_MIN
    for line in lines:
        match = DURATION_PATTERN.search(line)
        if match:
            value = int(match.group(1))
            duration = value * 60 if match.group(2).startswith("h") else value
            break

    activities = []
    for line in lines:
        for activity in ACTIVITY_METS:
            if activity in line and activity not in activities:
                activities.append(activity)

    if any(keyword in lowered for keyword in HIGH_INTENSITY_KEYWORDS):
        intensity = "high"
    elif any(keyword in lowered for keyword in LOW_INTENSITY_KEYWORDS):
        intensity = "low"
    else:
        intensity = "moderate"

    return WorkoutInfo(duration=duration, activities=activities, intensity=intensity)


# =============================================================================
# MAIN TOOL: calculate_workout_calories
# =============================================================================
def calculate_workout_calories(
    content: str,
    profile: Union[UserProfile, Dict[str, Any], None],
) -> WorkoutCalorieCalculation:
    """
    Estimate the calories burned by a workout for a given user.

    Args:
        content: Free-text workout description.
        profile: UserProfile (or a dict with the same fields, camelCase accepted).
                 Missing age/weight/height default to 25 years / 70 kg / 170 cm.

    Returns:
        WorkoutCalorieCalculation with calories in [50, 2000]. Without a usable
        profile or text: {calories: 300, duration: 45, intensity: moderate,
        activityType: unknown}.

    Example:
        >>> calculate_workout_calories("45 min de course", {"age": 30, "weight": 70,
        ...                            "height": 175, "gender": "male"}).calories
        371
    """
    user = _coerce_profile(profile)
    if user is None or not content or not isinstance(content, str):
        return _default_calculation()

    info = extract_workout_info(content)

    age = user.age or DEFAULT_AGE
    weight = user.weight or DEFAULT_WEIGHT_KG
    height = user.height or DEFAULT_HEIGHT_CM
    bmr = calculate_bmr(weight, height, age, user.gender)

    if info.activities:
        mets = [ACTIVITY_METS[activity] for activity in info.activities]
        met = sum(mets) / len(mets)
    else:
        met = INTENSITY_DEFAULT_METS[info.intensity]

    met *= INTENSITY_MULTIPLIERS[info.intensity]
    if age > 50:
        met *= 0.95
        if age > 65:
            met *= 0.9
    met *= FITNESS_MULTIPLIERS.get(_fitness_level(user), 1.0)

    # Scale by the user's own resting rate (kcal/kg/h) instead of the 1 kcal/kg/h of 1 MET
    if bmr > 0 and weight > 0:
        met *= (bmr / 24) / weight

    calories = round_half_up(met * weight * (info.duration / 60), default=MAX_CALORIES)
    calories = max(MIN_CALORIES, min(MAX_CALORIES, calories))

    logger.debug(
        "workout calories: duration=%s activities=%s intensity=%s bmr=%.1f met=%.3f -> %s kcal",
        info.duration, info.activities, info.intensity, bmr, met, calories,
    )

    return WorkoutCalorieCalculation(
        calories=calories,
        duration=info.duration,
        intensity=info.intensity,
        activity_type=", ".join(info.activities) if info.activities else "unknown",
    )


__all__ = [
    "calculate_workout_calories",
    "extract_workout_info",
    "calculate_bmr",
    "ACTIVITY_METS",
    "HIGH_INTENSITY_KEYWORDS",
    "LOW_INTENSITY_KEYWORDS",
]
