from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from conquest.game.map import TerritoryGraph
from conquest.game.state import GameState, initial_state


def state_to_dict(state: GameState) -> Dict[str, Any]:
    graph = state.graph
    return {
        "my_name": state.my_name,
        "opponent_name": state.opponent_name,
        "starting_armies": state.starting_armies,
        "round": state.round,
        "groups": [{"id": group.id, "bonus": group.bonus} for group in graph.groups()],
        "territories": [
            {
                "id": territory.id,
                "group": territory.group_id,
                "neighbors": list(territory.neighbors),
                "owner": state.owner(territory.id),
                "units": state.units(territory.id),
            }
            for territory in graph.territories()
        ],
    }


def state_from_dict(record: Dict[str, Any]) -> GameState:
    graph = TerritoryGraph()
    for group in record["groups"]:
        graph.add_group(int(group["id"]), int(group.get("bonus", 0)))
    for territory in record["territories"]:
        graph.add_territory(int(territory["id"]), int(territory["group"]))
    for territory in record["territories"]:
        for neighbor in territory["neighbors"]:
            graph.connect(int(territory["id"]), int(neighbor))
    graph.freeze()

    state = initial_state(
        graph,
        {
            int(territory["id"]): (territory["owner"], int(territory["units"]))
            for territory in record["territories"]
            if "owner" in territory
        },
    )
    state.my_name = record.get("my_name", "")
    state.opponent_name = record.get("opponent_name", "")
    state.starting_armies = int(record.get("starting_armies", 0))
    state.round = int(record.get("round", 0))
    return state


def save_snapshot(path: str | Path, state: GameState) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        json.dump(state_to_dict(state), handle, indent=2)


def load_snapshot(path: str | Path) -> GameState:
    path = Path(path)
    with path.open("r", encoding="utf-8") as handle:
        return state_from_dict(json.load(handle))
