# server/app.py
from typing import Any, Optional

from fastapi import Body, FastAPI, HTTPException

from server.config import GameConfig
from server.game.generator import ItemGenerator
from server.game.state import GameState
from server.sim.items import ITEMS
from server.sim.materials import MATERIAL_CATEGORIES, MATERIALS

app = FastAPI()

config = GameConfig(max_set_size=20, default_set_size=3)

state = GameState(ITEMS)
generator = ItemGenerator(state, MATERIAL_CATEGORIES)


# ----------------------------
# Lifecycle
# ----------------------------

@app.on_event("startup")
def on_startup():
    state.reset()
    print(f"🎲 Server starting up ({len(state.items_available)} items in pool)")


@app.on_event("shutdown")
def on_shutdown():
    print("🛑 Server shutting down cleanly")


# ----------------------------
# Helpers
# ----------------------------

def http_from_valueerror(msg: str) -> HTTPException:
    """
    Convert request ValueError messages to consistent HTTP errors.
    Keep these stable: the UI depends on them.

    Every code parse_amount raises is a validation error, so all map to 400.
    """
    return HTTPException(status_code=400, detail=str(msg))


def parse_amount(raw: Any, cfg: GameConfig) -> int:
    if raw is None:
        return int(cfg.default_set_size)

    # bool is an int subclass; "true" is not an amount
    if isinstance(raw, bool):
        raise ValueError("amount_must_be_integer")
    try:
        amount = int(raw)
    except (TypeError, ValueError, OverflowError):
        raise ValueError("amount_must_be_integer")
    if isinstance(raw, float) and raw != amount:
        raise ValueError("amount_must_be_integer")

    if amount < 0:
        raise ValueError("amount_must_be_non_negative")
    if amount > cfg.max_set_size:
        raise ValueError(f"amount_exceeds_max: {cfg.max_set_size}")
    return amount


# ----------------------------
# Catalog API
# ----------------------------

@app.get("/api/items")
def api_items():
    return {"ok": True, "items": [i.to_dict() for i in state.catalog]}


@app.get("/api/materials")
def api_materials():
    return {
        "ok": True,
        "materials": [{"id": m.id, "name": m.name, "category": m.category} for m in MATERIALS.values()],
        "categories": {cat: list(ids) for cat, ids in MATERIAL_CATEGORIES.items()},
    }


# ----------------------------
# Core game API
# ----------------------------

@app.get("/api/state")
def api_state():
    return {"ok": True, "state": state.snapshot()}


@app.post("/api/items/draw")
def api_draw():
    item = generator.create_random_item()
    return {
        "ok": True,
        "item": item.to_dict() if item is not None else None,
        "available_count": len(state.items_available),
    }


@app.post("/api/items/set")
def api_draw_set(payload: Optional[dict] = Body(default=None)):
    payload = payload or {}
    try:
        amount = parse_amount(payload.get("amount"), config)
    except ValueError as e:
        raise http_from_valueerror(str(e))

    items = generator.create_item_set(amount)
    return {
        "ok": True,
        "requested": amount,
        "items": [i.to_dict() for i in items],
        "available_count": len(state.items_available),
    }


@app.post("/api/reset")
def api_reset():
    state.reset()
    return {"ok": True, "state": state.snapshot()}
