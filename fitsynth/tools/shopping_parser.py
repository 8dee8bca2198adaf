# fitsynth/tools/shopping_parser.py
"""
FitSynth — Shopping Ingredient Extractor
========================================
Turns an AI meal-plan response into shopping-list entries.

Two tiers:
  1. Structured: a `<INGREDIENTS>{"ingredients": [...]}</INGREDIENTS>` block
     emitted when the generator followed the requested format.
  2. Free text: label regexes ("Ingrédients :", "Pour 4 personnes :", ...)
     whose captured fragment is split and parsed token by token.

Every entry is sorted into one of seven aisles (Fruits, Légumes, Protéines,
Céréales, Épicerie, Laitages, Autres). Also hosts the list helpers used by
the shopping screen: grouping, summary text and the common-items catalogue.
"""

import json
import logging
import random
import re
import string
import time
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional

from fitsynth.models import Ingredient, ShoppingCategory, ShoppingItem
from fitsynth.tools.cascade import as_text, dedupe_by, try_in_order

logger = logging.getLogger(__name__)

# =============================================================================
# TIER 1: STRUCTURED BLOCK
# =============================================================================
INGREDIENTS_BLOCK_PATTERN = re.compile(r"<INGREDIENTS>([\s\S]*?)</INGREDIENTS>", re.IGNORECASE)

# =============================================================================
# TIER 2: LABEL PATTERNS (applied in order, once each)
# =============================================================================
LABEL_PATTERNS = [
    re.compile(r"ingrédients?\s*:\s*([^.\n]+)", re.IGNORECASE),
    re.compile(r"pour\s+\d+\s+personnes?\s*:\s*([^.\n]+)", re.IGNORECASE),
    re.compile(r"liste\s+des\s+ingrédients?\s*:\s*([^.\n]+)", re.IGNORECASE),
    re.compile(r"vous\s+aurez\s+besoin\s+de\s*:\s*([^.\n]+)", re.IGNORECASE),
    re.compile(r"recette\s*:\s*([^.\n]+)", re.IGNORECASE),
    re.compile(r"préparation\s*:\s*([^.\n]+)", re.IGNORECASE),
    re.compile(r"matériel\s*:\s*([^.\n]+)", re.IGNORECASE),
]

TOKEN_SPLIT_PATTERN = re.compile(r"[,;]|\s+et\s+")

KNOWN_UNITS = r"g|kg|ml|l|cuillères?|tasses?|pincées?|branches?|gousses?|tranches?|unités?"
UNIT_QUANTITY_PATTERN = re.compile(r"^(\d+(?:\.\d+)?)\s*(" + KNOWN_UNITS + r")\s+(.+)", re.IGNORECASE)
BARE_QUANTITY_PATTERN = re.compile(r"^(\d+(?:\.\d+)?)\s+(.+)")

LEADING_ARTICLE_PATTERN = re.compile(r"^(?:de\s+|du\s+|des\s+|le\s+|la\s+|les\s+|d'|d’|l'|l’)", re.IGNORECASE)
TRAILING_QUALIFIER_PATTERN = re.compile(
    r"\s+(?:frais|râpé|complet|entier|moulu|haché|concassé|découpé)$", re.IGNORECASE
)

# =============================================================================
# CATEGORY KEYWORDS (first matching bucket wins)
# =============================================================================
CATEGORY_KEYWORDS = [
    (ShoppingCategory.FRUITS, [
        "pomme", "banane", "orange", "fraise", "framboise", "myrtille", "mangue", "ananas",
        "kiwi", "pêche", "poire", "raisin", "citron", "citron vert", "pamplemousse",
    ]),
    (ShoppingCategory.LEGUMES, [
        "carotte", "poivron", "courgette", "brocoli", "épinard", "salade", "tomate", "oignon",
        "ail", "échalote", "poireau", "champignon", "asperge", "haricot", "petit pois", "maïs",
        "patate", "pomme de terre",
    ]),
    (ShoppingCategory.PROTEINES, [
        "poulet", "dinde", "boeuf", "bœuf", "porc", "agneau", "poisson", "saumon", "thon",
        "cabillaud", "crevette", "oeuf", "œuf", "fromage", "yaourt", "lait", "amande", "noix",
        "noisette", "pistache",
    ]),
    (ShoppingCategory.CEREALES, [
        "riz", "quinoa", "avoine", "blé", "pâtes", "pain", "farine", "semoule", "couscous",
        "boulgour", "millet", "sarrasin",
    ]),
    (ShoppingCategory.EPICERIE, [
        "huile", "vinaigre", "sel", "poivre", "sucre", "miel", "sirop", "épice", "herbe",
        "bouillon", "sauce", "ketchup", "moutarde", "mayonnaise",
    ]),
    (ShoppingCategory.LAITAGES, [
        "lait", "yaourt", "fromage", "beurre", "crème", "fromage blanc", "cottage", "ricotta",
        "mozzarella", "parmesan", "cheddar",
    ]),
]

# Whole-word match, tolerating a plural s/x
_CATEGORY_PATTERNS = [
    (category, re.compile(r"\b(?:" + "|".join(map(re.escape, words)) + r")(?:s|x)?\b"))
    for category, words in CATEGORY_KEYWORDS
]

# =============================================================================
# COMMON INGREDIENTS CATALOGUE
# =============================================================================
COMMON_INGREDIENTS: Dict[str, List[Dict[str, str]]] = {
    "Fruits": [
        {"name": "Pommes", "quantity": "6", "unit": "unités"},
        {"name": "Bananes", "quantity": "1", "unit": "kg"},
        {"name": "Oranges", "quantity": "4", "unit": "unités"},
        {"name": "Fraises", "quantity": "500", "unit": "g"},
        {"name": "Citrons", "quantity": "3", "unit": "unités"},
    ],
    "Légumes": [
        {"name": "Carottes", "quantity": "500", "unit": "g"},
        {"name": "Poivrons", "quantity": "3", "unit": "unités"},
        {"name": "Courgettes", "quantity": "4", "unit": "unités"},
        {"name": "Brocoli", "quantity": "1", "unit": "unité"},
        {"name": "Oignons", "quantity": "500", "unit": "g"},
        {"name": "Ail", "quantity": "1", "unit": "tête"},
    ],
    "Protéines": [
        {"name": "Poulet", "quantity": "500", "unit": "g"},
        {"name": "Saumon", "quantity": "400", "unit": "g"},
        {"name": "Oeufs", "quantity": "6", "unit": "unités"},
        {"name": "Fromage", "quantity": "200", "unit": "g"},
        {"name": "Yaourt", "quantity": "4", "unit": "unités"},
    ],
    "Céréales": [
        {"name": "Riz", "quantity": "500", "unit": "g"},
        {"name": "Quinoa", "quantity": "250", "unit": "g"},
        {"name": "Pâtes", "quantity": "400", "unit": "g"},
        {"name": "Pain", "quantity": "1", "unit": "baguette"},
        {"name": "Flocons d'avoine", "quantity": "500", "unit": "g"},
    ],
    "Épicerie": [
        {"name": "Huile d'olive", "quantity": "1", "unit": "bouteille"},
        {"name": "Sel", "quantity": "1", "unit": "paquet"},
        {"name": "Poivre", "quantity": "1", "unit": "moulin"},
        {"name": "Sucre", "quantity": "500", "unit": "g"},
        {"name": "Farine", "quantity": "1", "unit": "kg"},
    ],
    "Laitages": [
        {"name": "Lait", "quantity": "1", "unit": "l"},
        {"name": "Beurre", "quantity": "250", "unit": "g"},
        {"name": "Crème fraîche", "quantity": "200", "unit": "ml"},
        {"name": "Fromage blanc", "quantity": "4", "unit": "unités"},
    ],
}


# =============================================================================
# CATEGORIZER
# =============================================================================
def categorize_ingredient(name: str) -> str:
    """
    Sort an ingredient name into its shopping aisle.

    Args:
        name: Ingredient name, any case.

    Returns:
        One of the ShoppingCategory values; "Autres" when no keyword matches.
    """
    lowered = as_text(name).lower()
    for category, pattern in _CATEGORY_PATTERNS:
        if pattern.search(lowered):
            return category.value
    return ShoppingCategory.AUTRES.value


# =============================================================================
# TOKEN PARSER
# =============================================================================
def _clean_ingredient_name(name: str) -> str:
    name = LEADING_ARTICLE_PATTERN.sub("", name.strip())
    name = TRAILING_QUALIFIER_PATTERN.sub("", name)
    return name.strip()


def parse_ingredient(text: str) -> Optional[Ingredient]:
    """
    Parse one free-text token ("200g de poulet", "2 citrons", "sel") into an entry.

    Tries `<N><unit> <name>`, then `<N> <name>`, then treats the whole token as
    the name with quantity "1". Leading articles and trailing qualifiers
    (frais, râpé, haché...) are dropped from the name.

    Returns:
        Ingredient, or None when the token is too short to be an ingredient.
    """
    clean = re.sub(r"^\d+\.\s*", "", as_text(text)).strip()
    if len(clean) < 2:
        return None

    quantity, unit, name = "1", None, clean
    match = UNIT_QUANTITY_PATTERN.match(clean)
    if match:
        quantity, unit, name = match.group(1), match.group(2), match.group(3)
    else:
        match = BARE_QUANTITY_PATTERN.match(clean)
        if match:
            quantity, name = match.group(1), match.group(2)

    name = _clean_ingredient_name(name).lower()
    if len(name) < 2:
        return None

    return Ingredient(
        name=name,
        quantity=quantity,
        unit=unit.strip() if unit else None,
        category=categorize_ingredient(name),
        checked=False,
    )


# =============================================================================
# TIERS
# =============================================================================
def _json_item_to_ingredient(item: Any) -> Optional[Ingredient]:
    if not isinstance(item, dict):
        return None
    name = as_text(item.get("name") or "").strip()
    if not name:
        return None
    return Ingredient(
        name=name,
        quantity=as_text(item.get("quantity") or "1"),
        unit=as_text(item.get("unit")) or None,
        category=as_text(item.get("category") or ShoppingCategory.AUTRES.value),
        checked=False,
    )


def extract_ingredients_from_json(text: str) -> List[Ingredient]:
    """Tier 1: read the tagged JSON block. Any problem yields an empty list."""
    block = INGREDIENTS_BLOCK_PATTERN.search(as_text(text))
    if not block:
        return []

    try:
        data = json.loads(block.group(1).strip())
    except (ValueError, RecursionError) as e:
        # JSONDecodeError is a ValueError, as is an int past the digit limit
        logger.debug("⚠️ INGREDIENTS block is not valid JSON: %s. Using text fallback...", e)
        return []

    if not isinstance(data, dict) or not isinstance(data.get("ingredients"), list):
        return []

    parsed = (_json_item_to_ingredient(item) for item in data["ingredients"])
    return [item for item in parsed if item is not None]


def extract_ingredients_from_text(text: str) -> List[Ingredient]:
    """Tier 2: label regexes over the whole text, deduplicated by name."""
    text = as_text(text)
    found: List[Ingredient] = []

    for pattern in LABEL_PATTERNS:
        match = pattern.search(text)
        if not match:
            continue
        tokens = [token.strip() for token in TOKEN_SPLIT_PATTERN.split(match.group(1))]
        for token in tokens:
            if len(token) <= 2:
                continue
            parsed = parse_ingredient(token)
            if parsed:
                found.append(parsed)

    return dedupe_by(found, key=lambda item: item.name.lower())


# =============================================================================
# MAIN TOOL: extract_ingredients_from_ai_response
# =============================================================================
def extract_ingredients_from_ai_response(text: str) -> List[Ingredient]:
    """
    Extract shopping-list entries from an AI meal-plan response.

    The tagged JSON block wins whenever it yields at least one named entry;
    free-text label parsing runs only otherwise.

    Args:
        text: Raw AI response, possibly containing
              <INGREDIENTS>{"ingredients": [{"name", "quantity", "unit", "category"}]}</INGREDIENTS>

    Returns:
        List of Ingredient (unchecked, no id/date yet). May be empty.

    Example:
        >>> extract_ingredients_from_ai_response("Ingrédients : 200g de poulet, 2 citrons")
        [Ingredient(name='poulet', quantity='200', unit='g', category='Protéines', ...),
         Ingredient(name='citrons', quantity='2', unit=None, category='Fruits', ...)]
    """
    tiers = (extract_ingredients_from_json, extract_ingredients_from_text)
    return try_in_order(tiers, as_text(text), label="shopping-ingredients") or []


# =============================================================================
# LIST HELPERS
# =============================================================================
def _generate_item_id(now: Optional[datetime] = None) -> str:
    timestamp = int((now.timestamp() if now else time.time()) * 1000)
    suffix = "".join(random.choices(string.ascii_lowercase + string.digits, k=9))
    return f"{timestamp}_{suffix}"


def create_shopping_item(
    draft: Ingredient,
    source: Optional[str] = None,
    now: Optional[datetime] = None,
) -> ShoppingItem:
    """Stamp an extracted entry with an id and a creation date."""
    now = now or datetime.now()
    return ShoppingItem(
        **draft.model_dump(),
        id=_generate_item_id(now),
        date_added=now.isoformat(),
        source=source,
    )


def _leading_number(quantity: str) -> float:
    match = re.match(r"\s*(\d+(?:\.\d+)?|\.\d+)", as_text(quantity))
    value = float(match.group(1)) if match else 0.0
    return value or 1.0


def _format_quantity(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


def group_items_by_category(items: Iterable[ShoppingItem]) -> Dict[str, List[ShoppingItem]]:
    """
    Group a list by aisle, merging entries that share a name and category.

    Merged entries get the id `grouped_<name>_<category>`, the summed numeric
    quantity (non-numeric quantities count as 1) and are checked only when
    every member is checked.
    """
    by_key: Dict[str, List[ShoppingItem]] = {}
    for item in items:
        by_key.setdefault(f"{item.name.lower()}_{item.category}", []).append(item)

    grouped: Dict[str, List[ShoppingItem]] = {}
    for members in by_key.values():
        first = members[0]
        bucket = grouped.setdefault(first.category, [])
        if len(members) == 1:
            bucket.append(first)
            continue

        total = sum(_leading_number(member.quantity) for member in members)
        bucket.append(ShoppingItem(
            id=f"grouped_{first.name}_{first.category}",
            name=first.name,
            quantity=_format_quantity(total),
            unit=first.unit,
            category=first.category,
            checked=all(member.checked for member in members),
            date_added=first.date_added,
            source="Groupé",
        ))
    return grouped


def generate_shopping_summary(items: List[ShoppingItem]) -> str:
    """Render the short per-aisle progress summary shown above the list."""
    total = len(items)
    checked = sum(1 for item in items if item.checked)

    by_category: Dict[str, List[ShoppingItem]] = {}
    for item in items:
        by_category.setdefault(item.category, []).append(item)

    summary = f"🛒 Liste de courses ({total} articles)\n"
    summary += f"✅ Coché: {checked} | ⏳ À acheter: {total - checked}\n\n"
    for category, category_items in by_category.items():
        category_checked = sum(1 for item in category_items if item.checked)
        summary += f"{category} ({len(category_items)}): {category_checked}/{len(category_items)} cochés\n"
    return summary


def search_ingredients(query: str, limit: int = 10) -> List[Dict[str, str]]:
    """Substring search over COMMON_INGREDIENTS, at most `limit` hits."""
    needle = as_text(query).lower()
    results = [
        {"name": item["name"], "category": category}
        for category, catalogue in COMMON_INGREDIENTS.items()
        for item in catalogue
        if needle in item["name"].lower()
    ]
    return results[:limit]


# =============================================================================
# EXPORTS
# =============================================================================
__all__ = [
    "extract_ingredients_from_ai_response",
    "extract_ingredients_from_json",
    "extract_ingredients_from_text",
    "parse_ingredient",
    "categorize_ingredient",
    "create_shopping_item",
    "group_items_by_category",
    "generate_shopping_summary",
    "search_ingredients",
    "CATEGORY_KEYWORDS",
    "COMMON_INGREDIENTS",
    "LABEL_PATTERNS",
]
