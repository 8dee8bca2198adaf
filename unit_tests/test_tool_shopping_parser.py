# unit_tests/test_tool_shopping_parser.py
"""
Unit Tests for Shopping Ingredient Extractor
============================================
Run with: python -m pytest unit_tests/test_tool_shopping_parser.py -v
"""

import re
from datetime import datetime

import pytest

from fitsynth.models import Ingredient, ShoppingCategory
from fitsynth.tools.shopping_parser import (
    categorize_ingredient,
    create_shopping_item,
    extract_ingredients_from_ai_response,
    extract_ingredients_from_json,
    extract_ingredients_from_text,
    generate_shopping_summary,
    group_items_by_category,
    parse_ingredient,
    search_ingredients,
)


def _item(name, quantity="1", unit=None, category=None, checked=False):
    draft = Ingredient(
        name=name,
        quantity=quantity,
        unit=unit,
        category=category or categorize_ingredient(name),
        checked=checked,
    )
    return create_shopping_item(draft, source="test")


# =============================================================================
# Tier 1: tagged JSON block
# =============================================================================

def test_json_block_wins_over_text(meal_text):
    items = extract_ingredients_from_ai_response(meal_text)

    assert [(i.name, i.quantity, i.unit, i.category) for i in items] == [
        ("Riz", "100", "g", "Céréales"),
        ("Poulet", "150", "g", "Protéines"),
        ("Huile d'olive", "1", "cuillères", "Épicerie"),
    ]
    assert not any(item.checked for item in items)


def test_json_items_without_name_are_dropped():
    text = '<INGREDIENTS>{"ingredients": [{"quantity": "2"}, {"name": "Sel"}, "pomme"]}</INGREDIENTS>'
    items = extract_ingredients_from_json(text)

    assert len(items) == 1
    assert items[0].name == "Sel"
    assert items[0].quantity == "1"
    assert items[0].category == ShoppingCategory.AUTRES.value


def test_malformed_json_falls_back_to_text():
    text = "<INGREDIENTS>{pas du json</INGREDIENTS>\nIngrédients : 2 tomates, 100g de riz"

    assert extract_ingredients_from_json(text) == []
    items = extract_ingredients_from_ai_response(text)
    assert [(i.name, i.category) for i in items] == [("tomates", "Légumes"), ("riz", "Céréales")]


@pytest.mark.parametrize("block", [
    "[" * 100000,
    '{"ingredients": [{"name": "riz", "quantity": ' + "9" * 5000 + "}]}",
])
def test_unparseable_json_block_falls_back_to_text(block):
    text = "<INGREDIENTS>" + block + "</INGREDIENTS>\nIngrédients : 2 tomates"

    assert extract_ingredients_from_json(text) == []
    assert [i.name for i in extract_ingredients_from_ai_response(text)] == ["tomates"]


def test_empty_json_list_falls_back_to_text():
    text = '<INGREDIENTS>{"ingredients": []}</INGREDIENTS>\nIngrédients : sel et poivre'
    names = [item.name for item in extract_ingredients_from_ai_response(text)]
    assert names == ["sel", "poivre"]


# =============================================================================
# Tier 2: label patterns
# =============================================================================

def test_text_tier_splits_on_commas_and_et():
    items = extract_ingredients_from_text("Ingrédients : 200g de poulet, 2 citrons et sel")

    assert [(i.name, i.quantity, i.unit, i.category) for i in items] == [
        ("poulet", "200", "g", "Protéines"),
        ("citrons", "2", None, "Fruits"),
        ("sel", "1", None, "Épicerie"),
    ]


def test_text_tier_dedupes_across_labels():
    text = "Ingrédients : 100g de riz, poulet\nVous aurez besoin de : riz, brocoli"
    names = [item.name for item in extract_ingredients_from_text(text)]
    assert names == ["riz", "poulet", "brocoli"]


def test_no_ingredients_returns_empty_list():
    assert extract_ingredients_from_ai_response("Bonjour, bonne séance !") == []
    assert extract_ingredients_from_ai_response(None) == []


@pytest.mark.parametrize("token, expected", [
    ("200g de poulet", ("poulet", "200", "g")),
    ("1 l de lait frais", ("lait", "1", "l")),
    ("3 bananes", ("bananes", "3", None)),
    ("du fromage râpé", ("fromage", "1", None)),
])
def test_parse_ingredient(token, expected):
    parsed = parse_ingredient(token)
    assert (parsed.name, parsed.quantity, parsed.unit) == expected


@pytest.mark.parametrize("token", ["", "x", "3 d'"])
def test_parse_ingredient_rejects_short_names(token):
    assert parse_ingredient(token) is None


# =============================================================================
# Categorizer
# =============================================================================

@pytest.mark.parametrize("name, category", [
    ("Ananas", "Fruits"),
    ("Carottes", "Légumes"),
    ("Saumon fumé", "Protéines"),
    ("riz basmati", "Céréales"),
    ("Huile d'olive", "Épicerie"),
    ("Beurre doux", "Laitages"),
    ("Chocolat noir", "Autres"),
])
def test_categorize_ingredient(name, category):
    assert categorize_ingredient(name) == category


def test_categorize_first_bucket_wins():
    # "lait" is listed under both Protéines and Laitages
    assert categorize_ingredient("lait") == "Protéines"


def test_categorize_always_returns_a_known_aisle():
    aisles = {category.value for category in ShoppingCategory}
    for name in ("", "???", "œufs", "PÂTES", "12345"):
        assert categorize_ingredient(name) in aisles


# =============================================================================
# List helpers
# =============================================================================

def test_create_shopping_item_stamps_id_and_date():
    now = datetime(2024, 3, 5, 8, 30)
    item = create_shopping_item(Ingredient(name="riz", quantity="500", unit="g"), source="Plan", now=now)

    assert re.fullmatch(rf"{int(now.timestamp() * 1000)}_[a-z0-9]{{9}}", item.id)
    assert item.date_added == now.isoformat()
    assert item.source == "Plan"
    assert item.checked is False


def test_group_items_merges_same_name_and_category():
    items = [
        _item("riz", "100", "g"),
        _item("Riz", "50 g", "g", checked=True),
        _item("poulet", "200", "g"),
    ]
    grouped = group_items_by_category(items)

    assert set(grouped) == {"Céréales", "Protéines"}
    merged = grouped["Céréales"][0]
    assert merged.id == "grouped_riz_Céréales"
    assert merged.quantity == "150"
    assert merged.source == "Groupé"
    assert merged.checked is False, "Only checked when every member is"
    assert grouped["Protéines"][0].name == "poulet"


def test_group_items_counts_non_numeric_quantity_as_one():
    grouped = group_items_by_category([_item("sel", "une pincée"), _item("sel", "2.5")])
    assert grouped["Épicerie"][0].quantity == "3.5"


def test_generate_shopping_summary():
    items = [_item("riz", checked=True), _item("pâtes"), _item("poulet")]
    summary = generate_shopping_summary(items)

    assert summary.startswith("🛒 Liste de courses (3 articles)")
    assert "✅ Coché: 1 | ⏳ À acheter: 2" in summary
    assert "Céréales (2): 1/2 cochés" in summary
    assert "Protéines (1): 0/1 cochés" in summary


def test_search_ingredients():
    assert search_ingredients("pom") == [{"name": "Pommes", "category": "Fruits"}]
    assert [hit["name"] for hit in search_ingredients("FROM")] == ["Fromage", "Fromage blanc"]
    assert len(search_ingredients("", limit=3)) == 3
