from .advantage import TroopAdvantage, rank_advantages
from .attack import combo_attack_chance, estimate_attacking_troops, plan_attacks
from .reinforcement import allocate, place_reinforcements
from .risk import is_safe, is_threatened

__all__ = [
    "TroopAdvantage",
    "rank_advantages",
    "combo_attack_chance",
    "estimate_attacking_troops",
    "plan_attacks",
    "allocate",
    "place_reinforcements",
    "is_safe",
    "is_threatened",
]
