from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List

from conquest.game.state import GameState


@dataclass(frozen=True)
class TroopAdvantage:
    territory: int
    differential: int

    def __str__(self) -> str:
        return f"{self.territory}: {self.differential}"


def strongest_hostile_neighbor(state: GameState, territory_id: int, player: str) -> int:
    strongest = 0
    for neighbor in state.neighbors(territory_id):
        if not state.owned_by(neighbor, player):
            strongest = max(strongest, state.units(neighbor))
    return strongest


def rank_advantages(
    state: GameState, territory_ids: Iterable[int], player: str
) -> List[TroopAdvantage]:
    advantages = [
        TroopAdvantage(
            territory_id,
            state.units(territory_id) - strongest_hostile_neighbor(state, territory_id, player),
        )
        for territory_id in territory_ids
    ]
    # sorted() is stable, so equal differentials keep their input order.
    return sorted(advantages, key=lambda advantage: advantage.differential)
