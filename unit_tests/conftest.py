import sys
from pathlib import Path
from types import SimpleNamespace

import pytest

# Add root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from fitsynth.memory.shopping_store import JsonShoppingList
from fitsynth.models import UserProfile


WORKOUT_TEXT = """Séance full body de 30 min

Échauffement : 5 minutes de corde à sauter
- Pompes: 3x12
- Squats 4x15
- Gainage - 3 x 45 sec
- 3 x 10 Fentes - 90s de repos

Retour au calme : étirements des jambes et du dos
Conseil : gardez le dos bien droit pendant les squats
"""

MEAL_TEXT = """Recette : Bowl de poulet au riz
Pour 2 personnes, 15 min de préparation

- 100g de riz
- 150g de poulet
- 1 cuillère à soupe d'huile d'olive

1. Faites cuire le riz dans l'eau bouillante salée
2. Saisissez le poulet coupé en dés à la poêle

Valeurs : 520 kcal, 42g de protéines, 55g de glucides, 14g de lipides

<INGREDIENTS>
{"ingredients": [
  {"name": "Riz", "quantity": "100", "unit": "g", "category": "Céréales"},
  {"name": "Poulet", "quantity": "150", "unit": "g", "category": "Protéines"},
  {"name": "Huile d'olive", "quantity": "1", "unit": "cuillères", "category": "Épicerie"}
]}
</INGREDIENTS>
"""


class StubModels:
    """Stands in for `client.models`: records calls, answers by persona."""

    def __init__(self, workout_text: str, meal_text: str, fail: bool = False):
        self.workout_text = workout_text
        self.meal_text = meal_text
        self.fail = fail
        self.calls = []

    def generate_content(self, model, contents, config=None):
        self.calls.append({"model": model, "contents": contents, "config": config})
        if self.fail:
            raise RuntimeError("quota exceeded")
        prompt = config.system_instruction if config is not None else ""
        text = self.workout_text if "coach sportif" in prompt else self.meal_text
        return SimpleNamespace(text=text)


class StubGeminiClient:
    def __init__(self, workout_text: str = WORKOUT_TEXT, meal_text: str = MEAL_TEXT, fail: bool = False):
        self.models = StubModels(workout_text, meal_text, fail=fail)


@pytest.fixture
def workout_text():
    return WORKOUT_TEXT


@pytest.fixture
def meal_text():
    return MEAL_TEXT


@pytest.fixture
def male_profile():
    return UserProfile(age=30, weight=80, height=180, gender="male", goal="Prendre du muscle", sessions=4)


@pytest.fixture
def female_profile():
    return UserProfile(age=30, weight=80, height=180, gender="female", goal="Prendre du muscle", sessions=4)


@pytest.fixture
def shopping_store(tmp_path):
    return JsonShoppingList(str(tmp_path / "shopping_list.json"))


@pytest.fixture
def stub_client():
    return StubGeminiClient()


@pytest.fixture
def failing_client():
    return StubGeminiClient(fail=True)
