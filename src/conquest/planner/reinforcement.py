from __future__ import annotations

import logging
from typing import List, Sequence

from conquest.game.orders import PlaceOrder, sum_units
from conquest.game.state import GameState
from .advantage import TroopAdvantage, rank_advantages
from .risk import is_safe


LOG = logging.getLogger(__name__)


def _disadvantaged_prefix(ranked: Sequence[TroopAdvantage]) -> int:
    end = 0
    while end < len(ranked) and ranked[end].differential < 0:
        end += 1
    return end


def _proportional_orders(
    entries: Sequence[TroopAdvantage], total_units: int, player: str
) -> List[PlaceOrder]:
    weight_sum = sum(entry.differential for entry in entries)
    if weight_sum == 0:
        return []

    orders: List[PlaceOrder] = []
    remaining = total_units
    for entry in entries:
        # Both signs match, so the ratio is non-negative and floor == trunc.
        share = (total_units * abs(entry.differential)) // abs(weight_sum)
        if share > 0 and remaining >= share:
            orders.append(PlaceOrder(player, entry.territory, share))
            remaining -= share
    return orders


def allocate(
    ranked: Sequence[TroopAdvantage], total_units: int, player: str
) -> List[PlaceOrder]:
    if not ranked or total_units <= 0:
        return []

    prefix = _disadvantaged_prefix(ranked)
    if prefix > 0:
        orders = _proportional_orders(ranked[:prefix], total_units, player)
    else:
        orders = _proportional_orders(ranked, total_units, player)

    # Truncation leftovers go to the most disadvantaged entry.
    leftover = total_units - sum_units(orders)
    if leftover > 0:
        orders.append(PlaceOrder(player, ranked[0].territory, leftover))
    return orders


def place_reinforcements(state: GameState) -> List[PlaceOrder]:
    player = state.my_name
    owned = state.owned_territories(player)
    candidates = [territory_id for territory_id in owned if not is_safe(state, territory_id, player)]
    if not candidates:
        candidates = owned

    ranked = rank_advantages(state, candidates, player)
    LOG.debug("Advantage ranking: %s", ", ".join(str(entry) for entry in ranked))
    orders = allocate(ranked, state.starting_armies, player)
    LOG.info(
        "Round %d: placing %d units in %d orders",
        state.round,
        sum_units(orders),
        len(orders),
    )
    return orders
