# server/config.py
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class GameConfig:
    max_set_size: int = 20      # largest set the API will draw in one call
    default_set_size: int = 3   # used when a set request omits "amount"
