from __future__ import annotations

import argparse
import logging

from conquest.bot import Bot
from conquest.protocol import format_orders
from conquest.utils.serialization import load_snapshot


def main() -> None:
    parser = argparse.ArgumentParser(description="Plan one turn from a JSON snapshot.")
    parser.add_argument("snapshot", type=str)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    state = load_snapshot(args.snapshot)
    bot = Bot()
    print(f"place_armies: {format_orders(bot.place_armies(state))}")
    print(f"attack/transfer: {format_orders(bot.attack_transfer(state))}")


if __name__ == "__main__":
    main()
