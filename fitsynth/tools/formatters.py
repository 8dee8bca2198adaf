# fitsynth/tools/formatters.py
"""
FitSynth — Card Formatters
==========================
Render synthesized workouts and meals as the emoji-sectioned text shown in
the app. Pure serialization; the output is meant for display, not for
feeding back into the synthesizers.
"""

from fitsynth.models import SynthesizedMeal, SynthesizedWorkout


def format_synthesized_workout(workout: SynthesizedWorkout) -> str:
    """
    Render a workout card.

    Example:
        🏋️ Séance de 30 min full body
        ⏱️ Durée: 30 min

        💪 Exercices:
        1. Pompes
           3 séries × 12 répétitions
           🎯 Poitrine/Triceps
           Repos: 1-2 min
    """
    lines = [f"🏋️ {workout.title}", f"⏱️ Durée: {workout.duration}", ""]

    if workout.warmup:
        lines += ["🔥 Échauffement:", workout.warmup, ""]

    lines.append("💪 Exercices:")
    for index, exercise in enumerate(workout.exercises, start=1):
        lines.append(f"{index}. {exercise.name}")
        lines.append(f"   {exercise.sets} séries × {exercise.reps} répétitions")
        if exercise.muscle_groups:
            lines.append(f"   🎯 {exercise.muscle_groups}")
        if exercise.rest:
            lines.append(f"   Repos: {exercise.rest}")
        if exercise.notes:
            lines.append(f"   💡 {exercise.notes}")
        lines.append("")

    if workout.cooldown:
        lines += ["🧘 Récupération:", workout.cooldown, ""]

    if workout.tips:
        lines.append("💡 Conseils:")
        lines += [f"• {tip}" for tip in workout.tips]

    return "\n".join(lines).strip()


def format_synthesized_meal(meal: SynthesizedMeal) -> str:
    """Render a recipe card: header, ingredients, numbered steps, nutrition facts."""
    lines = [f"🍽️ {meal.title}", f"👥 {meal.servings} • ⏱️ {meal.prep_time}", ""]

    if meal.ingredients:
        lines.append("🛒 Ingrédients:")
        lines += [f"• {item.quantity} {item.unit} {item.name}" for item in meal.ingredients]
        lines.append("")

    if meal.instructions:
        lines.append("👨‍🍳 Préparation:")
        lines += [f"{index}. {step}" for index, step in enumerate(meal.instructions, start=1)]
        lines.append("")

    if meal.nutrition:
        lines.append("📊 Valeurs nutritionnelles:")
        facts = (meal.nutrition.calories, meal.nutrition.protein, meal.nutrition.carbs, meal.nutrition.fat)
        lines += [f"• {fact}" for fact in facts if fact]

    return "\n".join(lines).strip()


__all__ = ["format_synthesized_workout", "format_synthesized_meal"]
