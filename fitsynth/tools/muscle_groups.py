# fitsynth/tools/muscle_groups.py
"""
FitSynth — Muscle-Group Classifier
==================================
Maps an exercise description to a display label (Poitrine/Triceps,
Dos/Biceps, Jambes/Fessiers, Épaules, Core, Biceps, Triceps, Full Body).

The keyword table is scanned in insertion order with a plain substring
test, so broader keywords placed early ("row", "lat", "ab") win over more
specific ones placed later. Keep the order when adding entries.
"""

from types import MappingProxyType

from fitsynth.tools.cascade import as_text

DEFAULT_MUSCLE_GROUP = "Full Body"

_MUSCLE_KEYWORDS = {
    # Poitrine
    "pompe": "Poitrine/Triceps",
    "push-up": "Poitrine/Triceps",
    "pushup": "Poitrine/Triceps",
    "développé": "Poitrine/Triceps",
    "développé couché": "Poitrine/Triceps",
    "bench": "Poitrine/Triceps",
    "bench press": "Poitrine/Triceps",
    "pectoraux": "Poitrine/Triceps",
    "poitrine": "Poitrine/Triceps",
    "chest": "Poitrine/Triceps",
    # Dos
    "traction": "Dos/Biceps",
    "rowing": "Dos/Biceps",
    "row": "Dos/Biceps",
    "lat": "Dos/Biceps",
    "lats": "Dos/Biceps",
    "dorsaux": "Dos/Biceps",
    "pull": "Dos/Biceps",
    "pull-up": "Dos/Biceps",
    "pullup": "Dos/Biceps",
    "dos": "Dos/Biceps",
    "back": "Dos/Biceps",
    # Jambes
    "squat": "Jambes/Fessiers",
    "squats": "Jambes/Fessiers",
    "fente": "Jambes/Fessiers",
    "fentes": "Jambes/Fessiers",
    "lunge": "Jambes/Fessiers",
    "lunges": "Jambes/Fessiers",
    "quadriceps": "Jambes/Fessiers",
    "quads": "Jambes/Fessiers",
    "fessiers": "Jambes/Fessiers",
    "glutes": "Jambes/Fessiers",
    "mollets": "Jambes/Fessiers",
    "calves": "Jambes/Fessiers",
    "jambes": "Jambes/Fessiers",
    "legs": "Jambes/Fessiers",
    # Épaules
    "épaule": "Épaules",
    "épaules": "Épaules",
    "shoulder": "Épaules",
    "shoulders": "Épaules",
    "développé militaire": "Épaules",
    "military press": "Épaules",
    "lateral": "Épaules",
    "lateral raise": "Épaules",
    "élévation": "Épaules",
    # Core
    "gainage": "Core",
    "planche": "Core",
    "plank": "Core",
    "crunch": "Core",
    "crunches": "Core",
    "abdos": "Core",
    "abdominaux": "Core",
    "core": "Core",
    "ab": "Core",
    "abs": "Core",
    "mountain climber": "Core",
    "mountain climbers": "Core",
    # Bras
    "biceps": "Biceps",
    "bicep": "Biceps",
    "triceps": "Triceps",
    "tricep": "Triceps",
    "curl": "Biceps",
    "curls": "Biceps",
    "extension": "Triceps",
    "extensions": "Triceps",
    "dips": "Triceps",
    "dip": "Triceps",
    # Full Body
    "burpee": "Full Body",
    "burpees": "Full Body",
    "thruster": "Full Body",
    "thrusters": "Full Body",
    "clean": "Full Body",
    "snatch": "Full Body",
}

MUSCLE_KEYWORDS = MappingProxyType(_MUSCLE_KEYWORDS)

# Broader groups checked only when no table keyword hit
MUSCLE_FALLBACK_GROUPS = (
    (("pompe", "push", "bench"), "Poitrine/Triceps"),
    (("squat", "fente", "lunge"), "Jambes/Fessiers"),
    (("traction", "rowing", "pull"), "Dos/Biceps"),
    (("gainage", "planche", "crunch"), "Core"),
    (("épaule", "shoulder", "lateral"), "Épaules"),
    (("bicep", "curl"), "Biceps"),
    (("tricep", "extension", "dip"), "Triceps"),
    (("burpee", "thruster"), "Full Body"),
)


def extract_muscle_groups(text: str) -> str:
    """
    Classify an exercise description into a muscle-group label.

    Args:
        text: Exercise name, optionally followed by rest/notes text.

    Returns:
        A label; "Full Body" when nothing is recognised.

    Example:
        >>> extract_muscle_groups("3x12 Pompes")
        'Poitrine/Triceps'
        >>> extract_muscle_groups("exercice mystère")
        'Full Body'
    """
    lowered = as_text(text).lower()

    for keyword, label in MUSCLE_KEYWORDS.items():
        if keyword in lowered:
            return label

    for keywords, label in MUSCLE_FALLBACK_GROUPS:
        if any(keyword in lowered for keyword in keywords):
            return label

    return DEFAULT_MUSCLE_GROUP


__all__ = [
    "extract_muscle_groups",
    "MUSCLE_KEYWORDS",
    "MUSCLE_FALLBACK_GROUPS",
    "DEFAULT_MUSCLE_GROUP",
]
