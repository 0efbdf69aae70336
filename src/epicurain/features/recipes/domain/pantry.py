"""
Server-side model of the two editable item lists on the recipe form.
Items keep their insertion order and are unique per list.
"""
from __future__ import annotations

from enum import Enum
from typing import Dict, Iterable, List, Mapping, Tuple

COMMON_INGREDIENTS: Tuple[str, ...] = (
    "Salt", "Pepper", "Olive oil", "Butter", "All-purpose flour", "Sugar", "Eggs", "Milk",
    "Garlic", "Onion", "Lemons", "White Vinegar", "Apple Cider Vinegar", "Soy sauce",
    "Baking powder", "Cumin",
)
COMMON_EQUIPMENT: Tuple[str, ...] = ("Stove top", "Oven", "Microwave")

SEPARATOR = ", "


class ItemKind(str, Enum):
    INGREDIENT = "ingredient"
    EQUIPMENT = "equipment"

    @property
    def field_name(self) -> str:
        return "ingredientsList" if self is ItemKind.INGREDIENT else "equipmentList"

    @property
    def input_name(self) -> str:
        return "newItem" if self is ItemKind.INGREDIENT else "newEquipment"

    @property
    def common_items(self) -> Tuple[str, ...]:
        return COMMON_INGREDIENTS if self is ItemKind.INGREDIENT else COMMON_EQUIPMENT

    @property
    def heading(self) -> str:
        return "Ingredients" if self is ItemKind.INGREDIENT else "Equipment"


def split_items(text: str) -> List[str]:
    return [p.strip() for p in (text or "").split(",") if p.strip()]


class PantrySelection:
    def __init__(self, ingredients: Iterable[str] = (), equipment: Iterable[str] = ()) -> None:
        self._items: Dict[ItemKind, Dict[str, None]] = {
            ItemKind.INGREDIENT: dict.fromkeys(ingredients),
            ItemKind.EQUIPMENT: dict.fromkeys(equipment),
        }

    @classmethod
    def default(cls) -> "PantrySelection":
        return cls(COMMON_INGREDIENTS, COMMON_EQUIPMENT)

    @classmethod
    def from_form(cls, form: Mapping[str, str]) -> "PantrySelection":
        return cls(
            split_items(form.get(ItemKind.INGREDIENT.field_name, "")),
            split_items(form.get(ItemKind.EQUIPMENT.field_name, "")),
        )

    def items(self, kind: ItemKind) -> List[str]:
        return list(self._items[kind])

    def add(self, kind: ItemKind, item: str) -> None:
        item = (item or "").strip()
        if not item or item in self._items[kind]:
            return
        self._items[kind][item] = None

    def remove(self, kind: ItemKind, item: str) -> None:
        self._items[kind].pop(item, None)

    def toggle_common(self, kind: ItemKind, include: bool) -> None:
        if include:
            for item in kind.common_items:
                self._items[kind].setdefault(item, None)
        else:
            for item in kind.common_items:
                self._items[kind].pop(item, None)

    def includes_common(self, kind: ItemKind) -> bool:
        return all(item in self._items[kind] for item in kind.common_items)

    def as_text(self, kind: ItemKind) -> str:
        return SEPARATOR.join(self._items[kind])

    @property
    def can_generate(self) -> bool:
        return all(self._items[kind] for kind in ItemKind)


class PantryOp(str, Enum):
    ADD = "add"
    REMOVE = "remove"
    INCLUDE_COMMON = "include_common"
    EXCLUDE_COMMON = "exclude_common"


def parse_action(action: str) -> Tuple[PantryOp, ItemKind, str]:
    """
    Decode a form button value of the shape "<op>:<kind>[:<item>]".
    Raises ValueError for unknown ops or kinds.
    """
    parts = (action or "").split(":", 2)
    if len(parts) < 2:
        raise ValueError(f"malformed pantry action: {action!r}")
    item = parts[2] if len(parts) == 3 else ""
    return PantryOp(parts[0]), ItemKind(parts[1]), item


def apply_edit(selection: PantrySelection, op: PantryOp, kind: ItemKind, item: str = "") -> PantrySelection:
    if op is PantryOp.ADD:
        selection.add(kind, item)
    elif op is PantryOp.REMOVE:
        selection.remove(kind, item)
    else:
        selection.toggle_common(kind, op is PantryOp.INCLUDE_COMMON)
    return selection
