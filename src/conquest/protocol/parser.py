from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, List, Sequence, TextIO, Tuple

from conquest.bot import Bot
from conquest.game.map import TerritoryGraph
from conquest.game.orders import AttackTransferOrder, PlaceOrder
from conquest.game.state import GameState, initial_state


LOG = logging.getLogger(__name__)

NO_MOVES = "No moves"


class ProtocolError(ValueError):
    pass


def format_orders(orders: Sequence[PlaceOrder | AttackTransferOrder]) -> str:
    if not orders:
        return NO_MOVES
    parts: List[str] = []
    for order in orders:
        if isinstance(order, PlaceOrder):
            parts.append(f"{order.player} place_armies {order.territory} {order.units}")
        else:
            parts.append(
                f"{order.player} attack/transfer {order.source} {order.target} {order.units}"
            )
    return ", ".join(parts)


def _to_int(token: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise ProtocolError(f"Expected an integer, got {token!r}") from None


def _chunks(tokens: Sequence[str], size: int) -> Iterable[Tuple[str, ...]]:
    if len(tokens) % size:
        raise ProtocolError(f"Expected groups of {size} values, got {len(tokens)} values")
    for start in range(0, len(tokens), size):
        yield tuple(tokens[start:start + size])


class BotParser:
    def __init__(self, bot: Bot) -> None:
        self.bot = bot
        self.graph = TerritoryGraph()
        self.state: GameState | None = None
        self._my_name = ""
        self._opponent_name = ""
        self._starting_armies = 0
        self._commands: Dict[str, Callable[[List[str]], str | None]] = {
            "settings": self._settings,
            "setup_map": self._setup_map,
            "pick_starting_regions": self._pick_starting_regions,
            "update_map": self._update_map,
            "opponent_moves": self._opponent_moves,
            "go": self._go,
        }

    def run(self, input_stream: TextIO, output_stream: TextIO) -> None:
        for line in input_stream:
            try:
                reply = self.handle_line(line)
            except ProtocolError as exc:
                LOG.error("Skipping malformed line %r: %s", line.strip(), exc)
                continue
            if reply is not None:
                output_stream.write(reply + "\n")
                output_stream.flush()

    def handle_line(self, line: str) -> str | None:
        tokens = line.split()
        if not tokens:
            return None
        handler = self._commands.get(tokens[0])
        if handler is None:
            LOG.warning("Unknown command %r", tokens[0])
            return None
        return handler(tokens[1:])

    def _ensure_state(self) -> GameState:
        if self.state is None:
            self.graph.freeze()
            self.state = initial_state(self.graph)
        self.state.my_name = self._my_name
        self.state.opponent_name = self._opponent_name
        self.state.starting_armies = self._starting_armies
        return self.state

    def _settings(self, args: List[str]) -> None:
        if len(args) != 2:
            raise ProtocolError(f"settings expects a key and a value, got {args}")
        key, value = args
        if key == "your_bot":
            self._my_name = value
        elif key == "opponent_bot":
            self._opponent_name = value
        elif key == "starting_armies":
            self._starting_armies = _to_int(value)
        else:
            LOG.debug("Ignoring setting %s=%s", key, value)
            return
        if self.state is not None:
            self._ensure_state()

    def _setup_map(self, args: List[str]) -> None:
        if not args:
            raise ProtocolError("setup_map without a section")
        if self.graph.frozen:
            raise ProtocolError("setup_map received after the map was frozen")
        section, values = args[0], args[1:]
        try:
            if section == "super_regions":
                for group_id, bonus in _chunks(values, 2):
                    self.graph.add_group(_to_int(group_id), _to_int(bonus))
            elif section == "regions":
                for territory_id, group_id in _chunks(values, 2):
                    self.graph.add_territory(_to_int(territory_id), _to_int(group_id))
            elif section == "neighbors":
                for territory_id, neighbors in _chunks(values, 2):
                    for neighbor in neighbors.split(","):
                        self.graph.connect(_to_int(territory_id), _to_int(neighbor))
            else:
                LOG.warning("Unknown setup_map section %r", section)
        except ProtocolError:
            raise
        except (KeyError, ValueError) as exc:
            raise ProtocolError(str(exc)) from exc

    def _pick_starting_regions(self, args: List[str]) -> str:
        if not args:
            raise ProtocolError("pick_starting_regions without a timeout")
        timeout = _to_int(args[0])
        pickable = [_to_int(token) for token in args[1:]]
        state = self._ensure_state()
        unknown = [territory_id for territory_id in pickable if territory_id not in self.graph]
        if unknown:
            raise ProtocolError(f"Unknown pickable territories {unknown}")
        picks = self.bot.pick_starting_regions(state, pickable, timeout)
        return " ".join(str(territory_id) for territory_id in picks)

    def _update_map(self, args: List[str]) -> None:
        state = self._ensure_state()
        updates = [
            (_to_int(territory_id), player, _to_int(units))
            for territory_id, player, units in _chunks(args, 3)
        ]
        unknown = [territory_id for territory_id, _, _ in updates if territory_id not in self.graph]
        if unknown:
            raise ProtocolError(f"Unknown territories in update_map {unknown}")
        if any(units < 0 for _, _, units in updates):
            raise ProtocolError("Negative unit count in update_map")

        state.reset_visibility()
        for territory_id, player, units in updates:
            state.set_territory(territory_id, player, units)
        state.round += 1
        LOG.debug("Round %d: %d visible territories", state.round, len(updates))

    def _opponent_moves(self, args: List[str]) -> None:
        state = self._ensure_state()
        state.opponent_moves = list(args)

    def _go(self, args: List[str]) -> str:
        if len(args) != 2:
            raise ProtocolError(f"go expects a phase and a timeout, got {args}")
        phase, timeout = args[0], _to_int(args[1])
        state = self._ensure_state()
        if phase == "place_armies":
            return format_orders(self.bot.place_armies(state.clone(), timeout))
        if phase == "attack/transfer":
            return format_orders(self.bot.attack_transfer(state.clone(), timeout))
        raise ProtocolError(f"Unknown phase {phase!r}")
