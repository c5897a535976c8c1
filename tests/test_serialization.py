from conquest.bot import Bot
from conquest.game.map import build_graph
from conquest.game.state import initial_state
from conquest.utils.serialization import load_snapshot, save_snapshot, state_to_dict


def _make_state():
    graph = build_graph(
        groups={1: 2, 2: 3},
        territories={1: 1, 2: 1, 3: 2},
        adjacency={1: [2], 2: [3]},
    )
    state = initial_state(graph, {1: ("me", 10), 2: ("neutral", 2), 3: ("enemy", 5)})
    state.my_name = "me"
    state.opponent_name = "enemy"
    state.starting_armies = 5
    state.round = 4
    return state


def test_snapshot_round_trip_preserves_planning(tmp_path):
    state = _make_state()
    path = tmp_path / "nested" / "turn.json"
    save_snapshot(path, state)
    loaded = load_snapshot(path)

    assert state_to_dict(loaded) == state_to_dict(state)
    assert loaded.graph.frozen
    assert loaded.graph.neighbors(2) == (1, 3)
    bot = Bot()
    assert bot.place_armies(loaded) == bot.place_armies(state)
    assert bot.attack_transfer(loaded) == bot.attack_transfer(state)
