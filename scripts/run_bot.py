from __future__ import annotations

import argparse
import logging
import sys

from conquest.bot import Bot
from conquest.config import BotConfig, PlannerConfig
from conquest.protocol import BotParser


def parse_groups(raw_value: str) -> tuple[int, ...]:
    groups = []
    for chunk in raw_value.split(","):
        chunk = chunk.strip()
        if chunk:
            groups.append(int(chunk))
    return tuple(groups)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run the bot against a host engine on stdin/stdout.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the starting picks.")
    parser.add_argument("--log", type=str, default=None, help="Write log records to this file.")
    parser.add_argument("--log-level", type=str, default="INFO")
    parser.add_argument(
        "--preferred-groups",
        type=str,
        default="2,6",
        help="Comma-separated region group ids to prefer when picking starting territories.",
    )
    parser.add_argument("--superiority-rate", type=float, default=0.6)
    parser.add_argument("--success-rate", type=float, default=0.7)
    parser.add_argument("--attack-neutral-rate", type=float, default=0.8)
    parser.add_argument("--combo-min-rate", type=float, default=0.8)
    parser.add_argument("--combo-attack-rate", type=float, default=0.8)
    parser.add_argument("--combo-min-troops", type=int, default=12)
    parser.add_argument(
        "--garrison-floor",
        type=int,
        default=2,
        help="Origins holding this many units or fewer launch no attacks.",
    )
    parser.add_argument("--world-dominance-limit", type=int, default=30)
    return parser


def main() -> None:
    args = build_parser().parse_args()

    # stdout carries the protocol, log records go to a file or stderr.
    level = getattr(logging, args.log_level.upper(), logging.INFO)
    log_format = "%(asctime)s %(name)s %(levelname)s %(message)s"
    if args.log:
        logging.basicConfig(filename=args.log, filemode="w", level=level, format=log_format)
    else:
        logging.basicConfig(stream=sys.stderr, level=level, format=log_format)

    BotParser(Bot(build_config(args))).run(sys.stdin, sys.stdout)


def build_config(args: argparse.Namespace) -> BotConfig:
    planner = PlannerConfig(
        superiority_rate=args.superiority_rate,
        success_rate=args.success_rate,
        attack_neutral_rate=args.attack_neutral_rate,
        combo_min_rate=args.combo_min_rate,
        combo_attack_rate=args.combo_attack_rate,
        combo_min_troops=args.combo_min_troops,
        garrison_floor=args.garrison_floor,
        world_dominance_limit=args.world_dominance_limit,
    )
    return BotConfig(
        planner=planner,
        preferred_groups=parse_groups(args.preferred_groups),
        seed=args.seed,
    )


if __name__ == "__main__":
    main()
