# Model package init
from .entities import Enemy, Item, ItemKind, Player  # noqa: F401 re-export

__all__ = [
    "Enemy",
    "Item",
    "ItemKind",
    "Player",
]
