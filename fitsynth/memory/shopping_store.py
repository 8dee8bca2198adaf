# fitsynth/memory/shopping_store.py
"""
FitSynth — JSON Shopping List Store
===================================
- Local JSON file persistence of ShoppingItem records (newest first)
- Whole-list read/modify/write on every operation
- Grouped ids ("grouped_<name>_<category>") toggle every underlying item
"""

import json
import logging
import os
from typing import Dict, Iterable, List, Optional, Union

from pydantic import ValidationError

from fitsynth.config import get_settings
from fitsynth.models import Ingredient, ShoppingItem
from fitsynth.tools.shopping_parser import create_shopping_item, group_items_by_category

logger = logging.getLogger(__name__)

SHOPPING_FILE_NAME = "shopping_list.json"
GROUPED_PREFIX = "grouped_"


class ShoppingItemNotFound(KeyError):
    """Raised in strict mode when an id matches no stored item."""


# =============================================================================
# JSON SHOPPING LIST
# =============================================================================
class JsonShoppingList:
    """Reads and writes the shopping list to a JSON file."""

    def __init__(self, filepath: Optional[str] = None, strict: bool = False):
        if filepath is None:
            data_dir = get_settings().data_dir
            os.makedirs(data_dir, exist_ok=True)
            filepath = os.path.join(data_dir, SHOPPING_FILE_NAME)
        self.filepath = filepath
        self.strict = strict

    def _load(self) -> List[ShoppingItem]:
        if not os.path.exists(self.filepath):
            return []
        try:
            with open(self.filepath, "r", encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("⚠️ Shopping list unreadable (%s), starting empty", e)
            return []
        if not isinstance(raw, list):
            return []

        items = []
        for entry in raw:
            try:
                items.append(ShoppingItem.model_validate(entry))
            except ValidationError:
                logger.debug("Skipping malformed shopping entry: %r", entry)
        return items

    def _save(self, items: List[ShoppingItem]) -> None:
        directory = os.path.dirname(self.filepath)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.filepath, "w", encoding="utf-8") as f:
            json.dump([item.model_dump(by_alias=True) for item in items], f, indent=2, ensure_ascii=False)

    def _missing(self, item_id: str) -> None:
        if self.strict:
            raise ShoppingItemNotFound(item_id)
        logger.debug("No shopping item with id %s", item_id)

    # -------------------------------------------------------------------------
    # Public API
    # -------------------------------------------------------------------------
    def list(self) -> List[ShoppingItem]:
        return self._load()

    def add(self, item: Union[Ingredient, ShoppingItem], source: Optional[str] = None) -> ShoppingItem:
        """Store a new entry at the top of the list and return it with its id."""
        if not isinstance(item, ShoppingItem):
            item = create_shopping_item(item, source=source)
        self._save([item] + self._load())
        return item

    def add_many(self, items: Iterable[Ingredient], source: Optional[str] = None) -> List[ShoppingItem]:
        """Store several entries in one write; the last one given ends up first."""
        created = [
            item if isinstance(item, ShoppingItem) else create_shopping_item(item, source=source)
            for item in items
        ]
        self._save(list(reversed(created)) + self._load())
        return created

    def toggle(self, item_id: str) -> List[ShoppingItem]:
        """Flip `checked` on one item, or on every member of a grouped id."""
        items = self._load()
        if item_id.startswith(GROUPED_PREFIX):
            key = item_id.lower()
            targets = [i for i in items if f"{GROUPED_PREFIX}{i.name}_{i.category}".lower() == key]
        else:
            targets = [i for i in items if i.id == item_id]

        if not targets:
            self._missing(item_id)
            return items

        for item in targets:
            item.checked = not item.checked
        self._save(items)
        return items

    def remove(self, item_id: str) -> List[ShoppingItem]:
        items = self._load()
        remaining = [item for item in items if item.id != item_id]
        if len(remaining) == len(items):
            self._missing(item_id)
            return items
        self._save(remaining)
        return remaining

    def clear_checked(self) -> List[ShoppingItem]:
        remaining = [item for item in self._load() if not item.checked]
        self._save(remaining)
        return remaining

    def by_category(self) -> Dict[str, List[ShoppingItem]]:
        return group_items_by_category(self._load())


__all__ = ["JsonShoppingList", "ShoppingItemNotFound", "SHOPPING_FILE_NAME"]
