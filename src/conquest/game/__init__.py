from .map import RegionGroup, Territory, TerritoryGraph, build_graph
from .orders import AttackTransferOrder, PlaceOrder
from .state import NEUTRAL, UNKNOWN, GameState, count_territories, initial_state

__all__ = [
    "RegionGroup",
    "Territory",
    "TerritoryGraph",
    "build_graph",
    "AttackTransferOrder",
    "PlaceOrder",
    "GameState",
    "count_territories",
    "initial_state",
    "NEUTRAL",
    "UNKNOWN",
]
