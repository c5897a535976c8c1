from __future__ import annotations

import logging
import random
from typing import List, Sequence

from conquest.config import BotConfig
from conquest.game.orders import AttackTransferOrder, PlaceOrder
from conquest.game.state import GameState, count_territories
from conquest.planner import place_reinforcements, plan_attacks


LOG = logging.getLogger(__name__)


class Bot:
    def __init__(self, config: BotConfig | None = None) -> None:
        self.config = config or BotConfig()
        self.config.planner.validate()
        self.rng = random.Random(self.config.seed)

    def pick_starting_regions(
        self, state: GameState, pickable: Sequence[int], timeout: int | None = None
    ) -> List[int]:
        preferred_groups = set(self.config.preferred_groups)
        preferred_slots = max(self.config.pick_count - self.config.random_picks, 0)
        picks = [
            territory_id
            for territory_id in dict.fromkeys(pickable)
            if state.graph.group_of(territory_id) in preferred_groups
        ][:preferred_slots]

        # Random picks fill the remaining slots.
        rest = [territory_id for territory_id in dict.fromkeys(pickable) if territory_id not in picks]
        extra = min(self.config.pick_count - len(picks), len(rest))
        picks.extend(self.rng.sample(rest, extra))
        LOG.info("Starting picks (timeout %s): %s", timeout, picks)
        return picks

    def place_armies(self, state: GameState, timeout: int | None = None) -> List[PlaceOrder]:
        LOG.debug("place_armies round %d, timeout %s", state.round, timeout)
        return place_reinforcements(state)

    def attack_transfer(
        self, state: GameState, timeout: int | None = None
    ) -> List[AttackTransferOrder]:
        LOG.debug("attack_transfer round %d, timeout %s", state.round, timeout)
        owned = state.owned_territories(state.my_name)
        return plan_attacks(
            state,
            owned,
            state.my_name,
            state.opponent_name,
            config=self.config.planner,
            owned_count=count_territories(state.owners, state.my_name),
        )
