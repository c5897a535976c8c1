from __future__ import annotations

import logging
import math
from typing import Iterable, List

from conquest.config import PlannerConfig
from conquest.game.orders import AttackTransferOrder
from conquest.game.state import GameState, count_territories
from .risk import is_safe, is_threatened


LOG = logging.getLogger(__name__)


def estimate_attacking_troops(target_units: int, success_rate: float) -> int:
    """Units needed to take a territory holding `target_units` at `success_rate`."""
    return int(math.ceil(target_units / (1.0 - success_rate)))


def _covers(attacker_units: int, target_units: int, rate: float) -> bool:
    return target_units <= attacker_units * rate


def combo_attack_chance(
    state: GameState,
    origin: int,
    present: int,
    target: int,
    player: str,
    config: PlannerConfig,
) -> bool:
    """Two owned territories can each take on `target` on their own terms."""
    target_units = state.units(target)
    if not state.graph.are_adjacent(origin, target):
        return False
    if present <= config.combo_min_troops:
        return False
    if not _covers(present, target_units, config.combo_min_rate):
        return False

    for partner in state.neighbors(target):
        if partner == origin or not state.owned_by(partner, player):
            continue
        partner_units = state.units(partner)
        if partner_units > config.combo_min_troops and _covers(
            partner_units, target_units, config.combo_min_rate
        ):
            return True
    return False


def _plan_origin_attacks(
    state: GameState,
    origin: int,
    player: str,
    opponent: str,
    config: PlannerConfig,
    orders: List[AttackTransferOrder],
) -> int:
    present = state.units(origin)
    if present <= config.garrison_floor:
        return present

    threatened = is_threatened(state, origin, opponent)
    for target in state.neighbors(origin):
        target_units = state.units(target)
        enemy_target = state.owned_by(target, opponent)
        required = estimate_attacking_troops(target_units, config.success_rate)

        if enemy_target and combo_attack_chance(state, origin, present, target, player, config):
            committed = int(present * config.combo_attack_rate)
            rule = "combo"
        elif enemy_target and threatened and present > required:
            committed = required
            rule = "defense"
        elif (
            not state.owned_by(target, player)
            and not threatened
            and present > config.garrison_floor
            and target_units < present * config.superiority_rate
        ):
            committed = int(present * config.attack_neutral_rate)
            rule = "expansion"
        else:
            continue

        # At least one unit always stays behind in the origin.
        if 0 < committed < present:
            LOG.debug("%s attack %d -> %d with %d of %d", rule, origin, target, committed, present)
            orders.append(AttackTransferOrder(player, origin, target, committed))
            present -= committed
    return present


def _plan_redistribution(
    state: GameState,
    origin: int,
    present: int,
    player: str,
    orders: List[AttackTransferOrder],
) -> None:
    neighbors = state.neighbors(origin)
    spare = present - 1
    if spare <= 0 or not neighbors:
        return

    destinations = [
        neighbor
        for neighbor in neighbors
        if state.owned_by(neighbor, player) and not is_safe(state, neighbor, player)
    ]
    if not destinations:
        destinations = list(neighbors)

    chunk = spare // len(destinations)
    if chunk <= 0:
        return
    for destination in destinations:
        LOG.debug("transfer %d -> %d with %d", origin, destination, chunk)
        orders.append(AttackTransferOrder(player, origin, destination, chunk))


def plan_attacks(
    state: GameState,
    owned_ids: Iterable[int],
    player: str,
    opponent: str,
    config: PlannerConfig | None = None,
    owned_count: int | None = None,
) -> List[AttackTransferOrder]:
    config = config or PlannerConfig()
    if owned_count is None:
        owned_count = count_territories(state.owners, player)

    orders: List[AttackTransferOrder] = []
    for origin in sorted(owned_ids):
        present = _plan_origin_attacks(state, origin, player, opponent, config, orders)
        if owned_count < config.world_dominance_limit and is_safe(state, origin, player):
            _plan_redistribution(state, origin, present, player, orders)

    LOG.info("Planned %d attack/transfer orders", len(orders))
    return orders
