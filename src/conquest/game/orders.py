from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class PlaceOrder:
    player: str
    territory: int
    units: int


@dataclass(frozen=True)
class AttackTransferOrder:
    player: str
    source: int
    target: int
    units: int


def sum_units(orders: Iterable[PlaceOrder | AttackTransferOrder]) -> int:
    return sum(order.units for order in orders)
