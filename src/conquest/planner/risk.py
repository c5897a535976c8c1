from __future__ import annotations

from conquest.game.state import GameState


def is_safe(state: GameState, territory_id: int, player: str) -> bool:
    """True when every neighbor is owned by `player` (vacuously true without neighbors)."""
    return all(state.owned_by(neighbor, player) for neighbor in state.neighbors(territory_id))


def is_threatened(state: GameState, territory_id: int, opponent: str) -> bool:
    """True when at least one neighbor is owned by `opponent`."""
    return any(state.owned_by(neighbor, opponent) for neighbor in state.neighbors(territory_id))
