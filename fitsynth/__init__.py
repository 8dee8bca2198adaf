"""FitSynth: structured workouts, recipes, shopping lists and calorie estimates from French coach responses."""

__version__ = "0.1.0"
