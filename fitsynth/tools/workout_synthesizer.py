# fitsynth/tools/workout_synthesizer.py
"""
FitSynth — Workout Synthesizer
==============================
Turns a free-text French workout (as written by the coach model) into a
SynthesizedWorkout card: title, duration, exercises, warm-up, cool-down, tips.

Exercise extraction is a three-rung ladder:
  1. Pattern scan: 16 regexes covering "3 x 12 Pompes", "Pompes: 3x12",
     "3 séries de 12 Pompes", "Pompes (3x12)", "Gainage 45 sec",
     "Gainage - 3 x 45 sec"... Every pattern runs; hits are put back in text
     order and deduplicated by name.
  2. Line scan: any short line holding "<N> sec" or "<N>x<M>".
  3. A fixed bodyweight circuit.

The function is total: any input, including None, yields a populated card.
"""

import logging
import re
from typing import Callable, List, Optional, Tuple

from fitsynth.models import Exercise, SynthesizedWorkout
from fitsynth.tools.cascade import (
    BOUNDED_INT,
    DURATION_UNIT,
    as_text,
    dedupe_by,
    is_excluded_name,
    try_in_order,
)
from fitsynth.tools.muscle_groups import extract_muscle_groups

logger = logging.getLogger(__name__)

# =============================================================================
# CONSTANTS
# =============================================================================
MAX_EXERCISES = 10
MAX_TIPS = 5
DEFAULT_DURATION = "45 min"
DEFAULT_REST = "1-2 min"
DEFAULT_WARMUP = "5-10 minutes d'échauffement général"
DEFAULT_COOLDOWN = "5 minutes d'étirements"
DEFAULT_TIPS = (
    "Maintenez une bonne forme pendant tous les exercices",
    "Respirez correctement pendant l'effort",
    "Hydratez-vous régulièrement",
)

GENERIC_EXERCISES = (
    ("Pompes", "4", "12", "Poitrine/Triceps"),
    ("Squats", "4", "15", "Jambes/Fessiers"),
    ("Fentes", "3", "10", "Jambes/Fessiers"),
    ("Gainage", "3", "45s", "Core"),
    ("Burpees", "3", "8", "Full Body"),
    ("Mountain Climbers", "3", "20", "Core"),
)

# First keyword family found decides the session label
SESSION_TYPES = (
    (("sans matériel", "au poids du corps", "bodyweight"), "sans matériel"),
    (("haltères", "dumbbell"), "avec haltères"),
    (("barre", "barbell"), "avec barre"),
    (("cardio", "hiit"), "cardio"),
    (("musculation", "force"), "musculation"),
)
DEFAULT_SESSION_TYPE = "full body"

DURATION_PATTERN = re.compile(BOUNDED_INT + r"\s*" + DURATION_UNIT, re.IGNORECASE)
WARMUP_PATTERN = re.compile(r"échauffement[^:\n]*:?\s*([^.\n]+)", re.IGNORECASE)
COOLDOWN_PATTERN = re.compile(r"(?:récupération|retour au calme)[^:\n]*:?\s*([^.\n]+)", re.IGNORECASE)
TIP_PATTERNS = (
    re.compile(r"conseil[^:\n]*:?\s*([^.\n]+)", re.IGNORECASE),
    re.compile(r"astuce[^:\n]*:?\s*([^.\n]+)", re.IGNORECASE),
    re.compile(r"important[^:\n]*:?\s*([^.\n]+)", re.IGNORECASE),
)

# =============================================================================
# EXERCISE PATTERNS
# =============================================================================
# Separators never cross a line break
_S = r"[ \t]*"
_S1 = r"[ \t]+"
_X = _S + r"[x×]" + _S
_SEC = r"(?:sec|secondes?|s)\b"
_NOT_SEC = r"(?!\d|" + _S + _SEC + r")"
# Name before the numbers: lazy, no digits, confined to one list item
_HEAD = r"([^-\n:(,;\d]+?)"
# Name after the numbers: runs to the end of the item
_TAIL = r"([^-\n(,;]+)"
_REST = r"(?:" + _S + r"-" + _S + r"([^\n(]+))?"
_NOTES = r"(?:" + _S + r"\(([^)\n]+)\))?"
_REPS_OF = r"(?:(?:répétitions?|reps)" + _S1 + r"(?:de" + _S1 + r"|d'|d’))?"

# Group layouts: which capture is sets / reps / name, and whether reps are seconds
SETS_REPS_NAME = "sets_reps_name"
NAME_SETS_REPS = "name_sets_reps"
DURATION_NAME = "duration_name"
NAME_DURATION = "name_duration"
SETS_DURATION_NAME = "sets_duration_name"
NAME_SETS_DURATION = "name_sets_duration"

EXERCISE_PATTERNS: Tuple[Tuple[str, "re.Pattern[str]", str], ...] = tuple(
    (label, re.compile(source, re.IGNORECASE), layout)
    for label, source, layout in (
        ("n_x_m_name", r"(\d+)" + _X + r"(\d+)" + _NOT_SEC + _S1 + _TAIL + _REST + _NOTES, SETS_REPS_NAME),
        ("name_colon_n_x_m", _HEAD + _S + r":" + _S + r"(\d+)" + _X + r"(\d+)" + _NOT_SEC + _REST + _NOTES,
         NAME_SETS_REPS),
        ("n_series_de_m_name", r"(\d+)" + _S + r"séries?" + _S + r"de" + _S + r"(\d+)" + _S1 + _REPS_OF + _TAIL
         + _REST + _NOTES, SETS_REPS_NAME),
        ("name_paren_nxm", _HEAD + _S + r"\((\d+)" + _X + r"(\d+)\)", NAME_SETS_REPS),
        ("name_dash_nxm", _HEAD + _S + r"-" + _S + r"(\d+)" + _X + r"(\d+)" + _NOT_SEC, NAME_SETS_REPS),
        ("name_nxm", _HEAD + _S1 + r"(\d+)[x×](\d+)" + _NOT_SEC, NAME_SETS_REPS),
        ("nxm_name", r"(\d+)[x×](\d+)" + _NOT_SEC + _S1 + _TAIL, SETS_REPS_NAME),
        ("name_n_x_m", _HEAD + _S1 + r"(\d+)" + _X + r"(\d+)" + _NOT_SEC, NAME_SETS_REPS),
        ("bullet_name_colon_nxm", r"[•\-\*]" + _S + _HEAD + _S + r":" + _S + r"(\d+)[x×](\d+)" + _NOT_SEC,
         NAME_SETS_REPS),
        ("bullet_nxm_name", r"[•\-\*]" + _S + r"(\d+)[x×](\d+)" + _NOT_SEC + _S1 + _TAIL, SETS_REPS_NAME),
        ("name_dash_sec", _HEAD + _S + r"-" + _S + r"(\d+)" + _S + _SEC, NAME_DURATION),
        ("name_colon_sec", _HEAD + _S + r":" + _S + r"(\d+)" + _S + _SEC, NAME_DURATION),
        ("name_sec", _HEAD + _S1 + r"(\d+)" + _S + _SEC, NAME_DURATION),
        ("sec_name", r"(\d+)" + _S + _SEC + _S1 + _TAIL, DURATION_NAME),
        ("name_dash_n_x_sec", _HEAD + _S + r"-" + _S + r"(\d+)" + _X + r"(\d+)" + _S + _SEC, NAME_SETS_DURATION),
        ("n_x_sec_name", r"(\d+)" + _X + r"(\d+)" + _S + _SEC + _S1 + _TAIL, SETS_DURATION_NAME),
    )
)

LINE_DURATION_PATTERN = re.compile(r"(\d+)\s*" + _SEC, re.IGNORECASE)
LINE_SETS_REPS_PATTERN = re.compile(r"(\d+)" + _X + r"(\d+)", re.IGNORECASE)

Candidate = Tuple[str, str, str, Optional[str], Optional[str]]


# =============================================================================
# HELPERS
# =============================================================================
def _clean_exercise_name(raw: str) -> str:
    name = re.sub(r"[•\-\*]", "", raw.strip())
    name = re.sub(r"^\d+[.)]?\s*", "", name)
    return re.sub(r"[:,;.)\s]+$", "", name).strip(" .)")


def _read_groups(groups: Tuple[Optional[str], ...], layout: str) -> Candidate:
    """Map raw capture groups to (name, sets, reps, rest, notes)."""
    padded = tuple(groups) + (None,) * (5 - len(groups))
    first, second, third, rest, notes = padded[:5]

    if layout == SETS_REPS_NAME:
        return third, first, second, rest, notes
    if layout == NAME_SETS_REPS:
        return first, second, third, rest, notes
    if layout == DURATION_NAME:
        return second, "1", f"{first}s", None, None
    if layout == NAME_DURATION:
        return first, "1", f"{second}s", None, None
    if layout == SETS_DURATION_NAME:
        return third, first, f"{second}s", None, None
    return first, second, f"{third}s", None, None


def _build_exercise(name: str, sets: str, reps: str, rest: Optional[str] = None,
                    notes: Optional[str] = None) -> Exercise:
    rest = rest.strip() if rest and rest.strip() else None
    notes = notes.strip() if notes and notes.strip() else None
    muscle_groups = extract_muscle_groups(" ".join(part for part in (name, rest, notes) if part))
    return Exercise(
        name=name,
        sets=sets.strip(),
        reps=reps.strip(),
        rest=rest or DEFAULT_REST,
        muscle_groups=muscle_groups,
        notes=notes,
    )


def _make_pattern_matcher(label: str, pattern: "re.Pattern[str]",
                          layout: str) -> Callable[[str], List[Tuple[int, Exercise]]]:
    def matcher(text: str) -> List[Tuple[int, Exercise]]:
        found = []
        for match in pattern.finditer(text):
            name, sets, reps, rest, notes = _read_groups(match.groups(), layout)
            if not (name and sets and reps):
                continue
            clean = _clean_exercise_name(name)
            if is_excluded_name(clean) or len(clean) < 3:
                logger.debug("workout: rejected exercise name %r (%s)", clean, label)
                continue
            found.append((match.start(), _build_exercise(clean, sets, reps, rest, notes)))
        return found

    matcher.__name__ = f"match_{label}"
    return matcher


PATTERN_MATCHERS = tuple(_make_pattern_matcher(*spec) for spec in EXERCISE_PATTERNS)


# =============================================================================
# EXERCISE LADDER
# =============================================================================
def extract_exercises_by_patterns(text: str) -> List[Exercise]:
    """
    Run every exercise pattern and merge the hits.

    Hits are ordered by where they start in the text; on a tie the earlier
    pattern wins. A name seen twice keeps its first hit.
    """
    hits = []
    for rank, matcher in enumerate(PATTERN_MATCHERS):
        hits.extend((start, rank, exercise) for start, exercise in matcher(text))
    hits.sort(key=lambda hit: (hit[0], hit[1]))
    return dedupe_by([exercise for _, _, exercise in hits], key=lambda exercise: exercise.name.lower())


def _line_to_exercise(line: str) -> Optional[Exercise]:
    duration = LINE_DURATION_PATTERN.search(line)
    sets_reps = LINE_SETS_REPS_PATTERN.search(line)

    if duration:
        sets, reps, token = "1", f"{duration.group(1)}s", duration.group(0)
    elif sets_reps:
        sets, reps, token = sets_reps.group(1), sets_reps.group(2), sets_reps.group(0)
    else:
        return None

    name = _clean_exercise_name(line.replace(token, "", 1))
    if not 2 < len(name) < 50 or is_excluded_name(name):
        return None
    return _build_exercise(name, sets, reps)


def extract_exercises_by_lines(text: str) -> List[Exercise]:
    """Fallback scan: short numbered lines carrying a duration or a NxM token."""
    exercises = []
    for raw_line in text.split("\n"):
        line = raw_line.strip()
        if not re.search(r"\d", line) or not 5 < len(line) < 100:
            continue
        exercise = _line_to_exercise(line)
        if exercise:
            exercises.append(exercise)
    return dedupe_by(exercises, key=lambda exercise: exercise.name.lower())


def generic_exercises(_text: str = "") -> List[Exercise]:
    return [
        Exercise(name=name, sets=sets, reps=reps, rest=DEFAULT_REST, muscle_groups=group)
        for name, sets, reps, group in GENERIC_EXERCISES
    ]


EXERCISE_LADDER = (extract_exercises_by_patterns, extract_exercises_by_lines, generic_exercises)


# =============================================================================
# OTHER FIELDS
# =============================================================================
def detect_duration(text: str) -> str:
    match = DURATION_PATTERN.search(text)
    if not match:
        return DEFAULT_DURATION
    minutes = int(match.group(1))
    if match.group(2).lower().startswith("h"):
        minutes *= 60
    return f"{minutes} min"


def detect_session_type(text: str) -> str:
    lowered = text.lower()
    for keywords, session_type in SESSION_TYPES:
        if any(keyword in lowered for keyword in keywords):
            return session_type
    return DEFAULT_SESSION_TYPE


def _first_capture(pattern: "re.Pattern[str]", text: str, default: str) -> str:
    match = pattern.search(text)
    captured = match.group(1).strip() if match else ""
    return captured or default


def extract_tips(text: str) -> List[str]:
    tips = []
    for pattern in TIP_PATTERNS:
        for match in pattern.finditer(text):
            tip = match.group(1).strip()
            if len(tip) > 10:
                tips.append(tip)
    return tips or list(DEFAULT_TIPS)


# =============================================================================
# MAIN TOOL: synthesize_workout
# =============================================================================
def synthesize_workout(chat_response: str) -> SynthesizedWorkout:
    """
    Build a workout card from a coach response.

    Args:
        chat_response: Free-text French workout description.

    Returns:
        SynthesizedWorkout with at most 10 exercises and 5 tips. Missing
        pieces are filled with generic content, never left empty.

    Example:
        >>> workout = synthesize_workout("Séance 30 min\\n- Pompes: 3x12\\n- Squats 4x15")
        >>> workout.title
        'Séance de 30 min full body'
        >>> [e.name for e in workout.exercises]
        ['Pompes', 'Squats']
    """
    text = as_text(chat_response)
    duration = detect_duration(text)
    exercises = try_in_order(EXERCISE_LADDER, text, label="workout-exercises")

    return SynthesizedWorkout(
        title=f"Séance de {duration} {detect_session_type(text)}",
        duration=duration,
        exercises=exercises[:MAX_EXERCISES],
        warmup=_first_capture(WARMUP_PATTERN, text, DEFAULT_WARMUP),
        cooldown=_first_capture(COOLDOWN_PATTERN, text, DEFAULT_COOLDOWN),
        tips=extract_tips(text)[:MAX_TIPS],
    )


__all__ = [
    "synthesize_workout",
    "extract_exercises_by_patterns",
    "extract_exercises_by_lines",
    "generic_exercises",
    "detect_duration",
    "detect_session_type",
    "extract_tips",
    "EXERCISE_PATTERNS",
    "GENERIC_EXERCISES",
    "DEFAULT_TIPS",
]
