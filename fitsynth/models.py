# fitsynth/models.py
"""
FitSynth — Data Models
======================
Pydantic models for every structure the extractors produce. Python code
uses snake_case attributes; `model_dump(by_alias=True)` gives the camelCase
shape consumed by the mobile app (muscleGroups, prepTime, activityType...).
"""

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# BASE
# =============================================================================
class SynthModel(BaseModel):
    """Common config: camelCase aliases, population by field name."""
    model_config = ConfigDict(populate_by_name=True)


# =============================================================================
# INGREDIENTS & SHOPPING
# =============================================================================
class ShoppingCategory(str, Enum):
    FRUITS = "Fruits"
    LEGUMES = "Légumes"
    PROTEINES = "Protéines"
    CEREALES = "Céréales"
    EPICERIE = "Épicerie"
    LAITAGES = "Laitages"
    AUTRES = "Autres"


class MealIngredient(SynthModel):
    """Ingredient found in a meal block, quantity normalised to grams."""
    name: str = Field(..., min_length=1)
    quantity: float = Field(0.0, ge=0)


class Ingredient(SynthModel):
    """Shopping-list entry before it gets an id and a date."""
    name: str = Field(..., min_length=1)
    quantity: str = "1"
    unit: Optional[str] = None
    category: str = ShoppingCategory.AUTRES.value
    checked: bool = False


class ShoppingItem(Ingredient):
    """Persisted shopping-list entry."""
    id: str
    date_added: str = Field(..., alias="dateAdded")
    source: Optional[str] = None


# =============================================================================
# NUTRITION
# =============================================================================
class MealNutrition(SynthModel):
    calories: int = Field(0, ge=0)
    carbs: int = Field(0, ge=0)
    protein: int = Field(0, ge=0)
    fat: int = Field(0, ge=0)


# =============================================================================
# WORKOUT
# =============================================================================
class Exercise(SynthModel):
    name: str = Field(..., min_length=1)
    sets: str = Field(..., min_length=1)
    reps: str = Field(..., min_length=1)
    rest: str = "1-2 min"
    muscle_groups: Optional[str] = Field(None, alias="muscleGroups")
    notes: Optional[str] = None


class SynthesizedWorkout(SynthModel):
    title: str
    duration: str
    exercises: List[Exercise] = Field(default_factory=list, max_length=10)
    warmup: Optional[str] = None
    cooldown: Optional[str] = None
    tips: List[str] = Field(default_factory=list, max_length=5)


class WorkoutInfo(SynthModel):
    """Metadata pulled out of a workout text before calorie estimation."""
    duration: int = 45
    activities: List[str] = Field(default_factory=list)
    intensity: str = "moderate"


class WorkoutCalorieCalculation(SynthModel):
    calories: int = Field(..., ge=50, le=2000)
    duration: int
    intensity: str = Field(..., pattern="^(low|moderate|high)$")
    activity_type: str = Field("unknown", alias="activityType")


# =============================================================================
# MEAL / RECIPE
# =============================================================================
class RecipeIngredient(SynthModel):
    name: str = Field(..., min_length=1)
    quantity: str
    unit: str


class RecipeNutrition(SynthModel):
    """Free-text nutrition facts; a field stays None when not mentioned."""
    calories: Optional[str] = None
    protein: Optional[str] = None
    carbs: Optional[str] = None
    fat: Optional[str] = None

    def is_empty(self) -> bool:
        return not any([self.calories, self.protein, self.carbs, self.fat])


class SynthesizedMeal(SynthModel):
    title: str
    servings: str
    prep_time: str = Field(..., alias="prepTime")
    ingredients: List[RecipeIngredient] = Field(default_factory=list, max_length=15)
    instructions: List[str] = Field(default_factory=list, max_length=10)
    nutrition: Optional[RecipeNutrition] = None


# =============================================================================
# USER PROFILE (read-only snapshot)
# =============================================================================
class ChatResponses(SynthModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    fitness_level: Optional[str] = Field(None, alias="fitnessLevel")
    equipment: Optional[str] = None
    intolerances: Optional[str] = None
    limitations: Optional[str] = None
    preferred_time: Optional[str] = Field(None, alias="preferredTime")


class UserProfile(SynthModel):
    """Profile snapshot read by the calculators. Never mutated here."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    goal: str = ""
    sessions: int = 0
    diet: str = ""
    first_name: Optional[str] = Field(None, alias="firstName")
    age: Optional[float] = Field(None, allow_inf_nan=False)
    weight: Optional[float] = Field(None, allow_inf_nan=False)
    height: Optional[float] = Field(None, allow_inf_nan=False)
    gender: Optional[str] = None
    fitness_level: Optional[str] = Field(None, alias="fitnessLevel")
    chat_responses: Optional[ChatResponses] = Field(None, alias="chatResponses")


class DailySteps(SynthModel):
    steps: int = Field(0, ge=0)
    last_updated: str = Field(..., alias="lastUpdated")


# =============================================================================
# DAY PLAN
# =============================================================================
class PlanSection(SynthModel):
    """Raw generated text and its display title."""
    title: str
    content: str


class DayPlan(SynthModel):
    """One generated day: workout, three meals and everything derived from them."""
    id: str
    title: str
    date: str
    workout: PlanSection
    meals: Dict[str, PlanSection]
    synthesized_workout: SynthesizedWorkout = Field(..., alias="synthesizedWorkout")
    synthesized_meals: Dict[str, SynthesizedMeal] = Field(..., alias="synthesizedMeals")
    shopping_list: List[Ingredient] = Field(default_factory=list, alias="shoppingList")
    meal_nutrition: Dict[str, MealNutrition] = Field(..., alias="mealNutrition")
    workout_calories: WorkoutCalorieCalculation = Field(..., alias="workoutCalories")
    created_at: str = Field(..., alias="createdAt")

    @property
    def total_intake(self) -> int:
        return sum(nutrition.calories for nutrition in self.meal_nutrition.values())


__all__ = [
    "ShoppingCategory",
    "MealIngredient",
    "Ingredient",
    "ShoppingItem",
    "MealNutrition",
    "Exercise",
    "SynthesizedWorkout",
    "WorkoutInfo",
    "WorkoutCalorieCalculation",
    "RecipeIngredient",
    "RecipeNutrition",
    "SynthesizedMeal",
    "ChatResponses",
    "UserProfile",
    "DailySteps",
    "PlanSection",
    "DayPlan",
]
