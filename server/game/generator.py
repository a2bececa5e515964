# server/game/generator.py
from __future__ import annotations

import logging
import random
from typing import Any, Dict, Optional, Sequence

from server.game.state import GameState
from server.sim.items import GeneratedItem, ItemDef
from server.sim.materials import MATERIAL_CATEGORIES

log = logging.getLogger(__name__)


def index_random(seq: Sequence[Any], rng: Any = random) -> int:
    """Uniform index into seq, bounded by its length right now."""
    return rng.randrange(len(seq))


class ItemGenerator:
    """
    Draws items out of a GameState without replacement and gives each one
    a random material.

    rng only needs randrange(); defaults to the random module.
    Raises ValueError if there are no categories or a category has no materials.
    """

    def __init__(
        self,
        state: GameState,
        categories: Optional[Dict[str, Sequence[str]]] = None,
        rng: Any = None,
    ):
        self.state = state
        self.categories = categories if categories is not None else MATERIAL_CATEGORIES
        self.rng = rng or random

        self._category_names = list(self.categories.keys())

        # Every draw needs a category and a material inside it
        if not self._category_names:
            raise ValueError("material_categories_empty")
        for name, materials in self.categories.items():
            if not materials:
                raise ValueError(f"material_category_empty: {name}")

    def apply_traits(self, item: ItemDef) -> GeneratedItem:
        category = self.categories[self._category_names[index_random(self._category_names, self.rng)]]
        material = category[index_random(category, self.rng)]
        return GeneratedItem.from_item(item, material)

    def create_random_item(self) -> Optional[GeneratedItem]:
        """
        Draw one item. Returns None once the pool is empty.
        """
        with self.state.lock:
            available = self.state.items_available
            if not available:
                log.debug("draw: pool empty")
                return None

            item = available[index_random(available, self.rng)]
            generated = self.apply_traits(item)

            self.state.mark_item_used(generated)

        return generated

    def create_item_set(self, amount: int) -> list[GeneratedItem]:
        """
        Draw up to `amount` items; the list is shorter if the pool runs out.
        """
        item_set: list[GeneratedItem] = []

        for _ in range(amount):
            item = self.create_random_item()
            if item is None:
                break
            item_set.append(item)

        if len(item_set) < amount:
            log.info("item set short: wanted %d, drew %d", amount, len(item_set))

        return item_set
