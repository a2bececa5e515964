# server/sim/items.py
from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Iterable, Literal, Tuple


ItemSlot = Literal["weapon", "armor", "trinket", "tool"]


@dataclass(frozen=True)
class ItemDef:
    """
    Pure data definition for an item in the draw pool.

    Notes:
    - type: unique key inside the available/used pools. Two items with the
      same type are the same item as far as the store is concerned.
    - slot/description are descriptive only (the UI shows them).
    """
    type: str
    name: str
    slot: ItemSlot
    description: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class GeneratedItem(ItemDef):
    """
    An ItemDef after a draw: same fields plus the rolled material id.
    """
    material: str

    @staticmethod
    def from_item(item: ItemDef, material: str) -> "GeneratedItem":
        """
        Copy every field of `item` and attach `material`.
        Re-decorating a GeneratedItem replaces its material.
        """
        data = asdict(item)
        data["material"] = material
        return GeneratedItem(**data)


# ----------------------------
# Item catalog (Data Only)
# ----------------------------

ITEMS: Tuple[ItemDef, ...] = (
    # --- Weapons ---
    ItemDef(type="sword", name="Sword", slot="weapon",
            description="A straight, double-edged blade."),
    ItemDef(type="axe", name="Axe", slot="weapon",
            description="Heavy head, short haft."),
    ItemDef(type="spear", name="Spear", slot="weapon",
            description="Long reach, sharp point."),
    ItemDef(type="bow", name="Bow", slot="weapon",
            description="Strung for distance."),
    ItemDef(type="dagger", name="Dagger", slot="weapon",
            description="Small enough to hide in a boot."),

    # --- Armor ---
    ItemDef(type="shield", name="Shield", slot="armor",
            description="Round and dented."),
    ItemDef(type="helmet", name="Helmet", slot="armor",
            description="Keeps the rain and the arrows off."),
    ItemDef(type="gauntlets", name="Gauntlets", slot="armor",
            description="A matched pair, somehow."),

    # --- Trinkets ---
    ItemDef(type="ring", name="Ring", slot="trinket",
            description="Plain band, faint engraving inside."),
    ItemDef(type="amulet", name="Amulet", slot="trinket",
            description="Hangs from a cord that has seen better days."),
    ItemDef(type="idol", name="Idol", slot="trinket",
            description="Squat figure of no god anyone remembers."),

    # --- Tools ---
    ItemDef(type="lantern", name="Lantern", slot="tool",
            description="Still smells of oil."),
    ItemDef(type="hammer", name="Hammer", slot="tool",
            description="For nails, mostly."),
    ItemDef(type="key", name="Key", slot="tool",
            description="Opens something, somewhere."),
)


def catalog_types(items: Iterable[ItemDef]) -> list[str]:
    return [i.type for i in items]
