# fitsynth/tools/energy_targets.py
"""
FitSynth — Daily Energy & Steps Targets
=======================================
Daily calorie target from the user profile, and the small helpers behind
the step counter card.

Calorie target:
  maintenance = BMR × activity factor
  then ×0.8 for weight loss, ×1.15 for muscle gain, ×1.05 for plant-based diets,
  clamped to [1200, 4000] kcal.
"""

from datetime import datetime
from typing import Any, Dict, Optional, Union

from fitsynth.models import DailySteps, UserProfile
from fitsynth.tools.cascade import round_half_up
from fitsynth.tools.workout_calories import calculate_bmr

# =============================================================================
# CONSTANTS
# =============================================================================
DEFAULT_BMR = 1800
DAILY_STEPS_TARGET = 10000

SEDENTARY_FACTOR = 1.2
LEVEL_FACTORS = (("débutant", 1.3), ("intermédiaire", 1.4), ("avancé", 1.5))
# (minimum weekly sessions, bonus), highest first
SESSION_BONUSES = ((6, 0.2), (4, 0.15), (2, 0.1))
MAX_ACTIVITY_FACTOR = 1.8

LOSS_GOAL_KEYWORDS = ("perdre", "perte")
GAIN_GOAL_KEYWORDS = ("prendre", "muscle", "masse")
PLANT_DIET_KEYWORDS = ("végétarien", "vegan")

MIN_KCAL_TARGET = 1200
MAX_KCAL_TARGET = 4000


# =============================================================================
# CALORIE TARGET
# =============================================================================
def _profile_bmr(profile: UserProfile) -> int:
    if not (profile.age and profile.weight and profile.height):
        return DEFAULT_BMR
    return round_half_up(calculate_bmr(profile.weight, profile.height, profile.age, profile.gender))


def calculate_activity_factor(profile: UserProfile) -> float:
    """Activity multiplier from fitness level and weekly sessions, capped at 1.8."""
    level = ""
    if profile.chat_responses is not None:
        level = profile.chat_responses.fitness_level or ""
    level = (level or profile.fitness_level or "").lower()

    factor = SEDENTARY_FACTOR
    for keyword, level_factor in LEVEL_FACTORS:
        if keyword in level:
            factor = level_factor
            break

    for min_sessions, bonus in SESSION_BONUSES:
        if (profile.sessions or 0) >= min_sessions:
            factor += bonus
            break

    return min(factor, MAX_ACTIVITY_FACTOR)


def estimate_kcal_target(profile: Union[UserProfile, Dict[str, Any]]) -> int:
    """
    Estimate the daily calorie target for a user.

    Args:
        profile: UserProfile or dict. Without age, weight and height the BMR
                 defaults to 1800 kcal.

    Returns:
        Daily target in kcal, within [1200, 4000].

    Example:
        >>> estimate_kcal_target({"age": 30, "weight": 80, "height": 180,
        ...                       "gender": "male", "goal": "Perdre du poids"})
        1709
    """
    if not isinstance(profile, UserProfile):
        profile = UserProfile.model_validate(profile or {})

    target = round_half_up(_profile_bmr(profile) * calculate_activity_factor(profile))

    goal = (profile.goal or "").lower()
    if any(keyword in goal for keyword in LOSS_GOAL_KEYWORDS):
        target = round_half_up(target * 0.8)
    elif any(keyword in goal for keyword in GAIN_GOAL_KEYWORDS):
        target = round_half_up(target * 1.15)

    diet = (profile.diet or "").lower()
    if any(keyword in diet for keyword in PLANT_DIET_KEYWORDS):
        target = round_half_up(target * 1.05)

    return max(MIN_KCAL_TARGET, min(MAX_KCAL_TARGET, target))


# =============================================================================
# STEPS
# =============================================================================
def get_daily_steps_target() -> int:
    return DAILY_STEPS_TARGET


def is_steps_data_up_to_date(last_updated: str, now: Optional[datetime] = None) -> bool:
    """True when `last_updated` (ISO timestamp) falls on the same calendar day as `now`."""
    now = now or datetime.now()
    try:
        # fromisoformat only accepts the "Z" suffix from Python 3.11
        updated = datetime.fromisoformat(last_updated.replace("Z", "+00:00"))
    except (AttributeError, TypeError, ValueError):
        return False
    if updated.tzinfo is not None and now.tzinfo is None:
        updated = updated.astimezone().replace(tzinfo=None)
    return updated.date() == now.date()


def reset_steps_if_new_day(record: DailySteps, now: Optional[datetime] = None) -> DailySteps:
    """Return `record` unchanged on the same day, a zeroed record otherwise."""
    now = now or datetime.now()
    if is_steps_data_up_to_date(record.last_updated, now):
        return record
    return DailySteps(steps=0, last_updated=now.isoformat())


__all__ = [
    "estimate_kcal_target",
    "calculate_activity_factor",
    "get_daily_steps_target",
    "is_steps_data_up_to_date",
    "reset_steps_if_new_day",
    "DAILY_STEPS_TARGET",
    "DEFAULT_BMR",
]
