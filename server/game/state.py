# server/game/state.py
from __future__ import annotations

import logging
import threading
from typing import Any, Dict, Iterable, Tuple

from server.sim.items import ITEMS, GeneratedItem, ItemDef

log = logging.getLogger(__name__)


class GameState:
    """
    Which items are still in the pool and which have been drawn this round.

    One instance per game. The catalog passed in is snapshotted once;
    reset() always goes back to that snapshot.
    """

    def __init__(self, catalog: Iterable[ItemDef] = ITEMS):
        self._catalog: Tuple[ItemDef, ...] = tuple(catalog)

        self._available: list[ItemDef] = list(self._catalog)
        self._used: list[GeneratedItem] = []

        # Re-entrant so the generator can hold it across pick -> mark_item_used
        self.lock = threading.RLock()

    @property
    def catalog(self) -> Tuple[ItemDef, ...]:
        return self._catalog

    @property
    def items_available(self) -> Tuple[ItemDef, ...]:
        return tuple(self._available)

    @property
    def items_used(self) -> Tuple[GeneratedItem, ...]:
        return tuple(self._used)

    def mark_item_used(self, item: GeneratedItem) -> None:
        """
        Move a drawn item from the pool to the used list.

        Removes the first available item with the same type. If none matches
        the pool is left alone, but the item is still appended to the used list.
        """
        with self.lock:
            for idx, candidate in enumerate(self._available):
                if candidate.type == item.type:
                    del self._available[idx]
                    break
            else:
                log.debug("mark_item_used: %s not in pool", item.type)

            self._used.append(item)
            log.debug(
                "item used: %s (%s), %d left",
                item.type, getattr(item, "material", None), len(self._available),
            )

    def reset(self) -> None:
        with self.lock:
            self._available = list(self._catalog)
            self._used = []
        log.info("game state reset: %d items available", len(self._catalog))

    def snapshot(self) -> Dict[str, Any]:
        with self.lock:
            available = [i.to_dict() for i in self._available]
            used = [i.to_dict() for i in self._used]
        return {
            "available": available,
            "used": used,
            "available_count": len(available),
            "used_count": len(used),
        }
