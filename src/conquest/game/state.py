from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

import numpy as np

from .map import TerritoryGraph


UNKNOWN = "unknown"
NEUTRAL = "neutral"


@dataclass
class GameState:
    graph: TerritoryGraph
    owners: np.ndarray
    troops: np.ndarray
    my_name: str = ""
    opponent_name: str = ""
    starting_armies: int = 0
    round: int = 0
    opponent_moves: List[str] = field(default_factory=list)

    def clone(self) -> "GameState":
        return GameState(
            graph=self.graph,
            owners=self.owners.copy(),
            troops=self.troops.copy(),
            my_name=self.my_name,
            opponent_name=self.opponent_name,
            starting_armies=self.starting_armies,
            round=self.round,
            opponent_moves=list(self.opponent_moves),
        )

    def owner(self, territory_id: int) -> str:
        return str(self.owners[self.graph.index_of(territory_id)])

    def units(self, territory_id: int) -> int:
        return int(self.troops[self.graph.index_of(territory_id)])

    def owned_by(self, territory_id: int, player: str) -> bool:
        return self.owner(territory_id) == player

    def neighbors(self, territory_id: int) -> Tuple[int, ...]:
        return self.graph.neighbors(territory_id)

    def owned_territories(self, player: str) -> List[int]:
        ids = self.graph.territory_ids
        return [ids[idx] for idx in np.flatnonzero(self.owners == player)]

    def set_territory(self, territory_id: int, player: str, units: int) -> None:
        if units < 0:
            raise ValueError(f"Negative unit count {units} for territory {territory_id}")
        idx = self.graph.index_of(territory_id)
        self.owners[idx] = player
        self.troops[idx] = units

    def reset_visibility(self) -> None:
        self.owners[:] = UNKNOWN
        self.troops[:] = 0


def initial_state(graph: TerritoryGraph, owners: Dict[int, Tuple[str, int]] | None = None) -> GameState:
    num_territories = len(graph)
    state = GameState(
        graph=graph,
        owners=np.full(num_territories, UNKNOWN, dtype=object),
        troops=np.zeros(num_territories, dtype=np.int64),
    )
    for territory_id, (player, units) in (owners or {}).items():
        state.set_territory(territory_id, player, units)
    return state


def count_territories(owners: np.ndarray, player: str) -> int:
    return int(np.sum(owners == player))
