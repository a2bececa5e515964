# server/sim/materials.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple


@dataclass(frozen=True)
class MaterialDef:
    """
    Definition of a material trait (what an item is made of).
    This is 'what is oak?' not 'which sword is made of oak?'.
    """
    id: str
    name: str
    category: str  # e.g. "metal", "wood", "stone"


# Canonical material list.
# Single source of truth: everywhere else should refer to these IDs.
MATERIALS: Dict[str, MaterialDef] = {
    # --- Metal ---
    "iron": MaterialDef(id="iron", name="Iron", category="metal"),
    "bronze": MaterialDef(id="bronze", name="Bronze", category="metal"),
    "steel": MaterialDef(id="steel", name="Steel", category="metal"),
    "silver": MaterialDef(id="silver", name="Silver", category="metal"),

    # --- Wood ---
    "oak": MaterialDef(id="oak", name="Oak", category="wood"),
    "ash": MaterialDef(id="ash", name="Ash", category="wood"),
    "yew": MaterialDef(id="yew", name="Yew", category="wood"),

    # --- Stone ---
    "granite": MaterialDef(id="granite", name="Granite", category="stone"),
    "obsidian": MaterialDef(id="obsidian", name="Obsidian", category="stone"),

    # --- Organic ---
    "bone": MaterialDef(id="bone", name="Bone", category="organic"),
    "leather": MaterialDef(id="leather", name="Leather", category="organic"),
    "silk": MaterialDef(id="silk", name="Silk", category="organic"),
}


def group_by_category(materials: Dict[str, MaterialDef]) -> Dict[str, Tuple[str, ...]]:
    """
    Two-level view used by the generator: category -> material ids.
    Keeps the insertion order of `materials`.
    """
    grouped: Dict[str, list[str]] = {}
    for m in materials.values():
        grouped.setdefault(m.category, []).append(m.id)
    return {cat: tuple(ids) for cat, ids in grouped.items()}


MATERIAL_CATEGORIES: Dict[str, Tuple[str, ...]] = group_by_category(MATERIALS)


def is_valid_material(material_id: str) -> bool:
    return material_id in MATERIALS
