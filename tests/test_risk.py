from conquest.game.map import build_graph
from conquest.game.state import initial_state
from conquest.planner.risk import is_safe, is_threatened


def _make_state(adjacency, owners):
    graph = build_graph({1: 0}, {tid: 1 for tid in adjacency}, adjacency)
    return initial_state(graph, owners)


def test_safe_requires_every_neighbor_owned():
    state = _make_state(
        {1: [2, 3], 2: [], 3: []},
        {1: ("me", 3), 2: ("me", 1), 3: ("me", 1)},
    )
    assert is_safe(state, 1, "me")

    state.set_territory(3, "neutral", 2)
    assert not is_safe(state, 1, "me")


def test_territory_without_neighbors_is_safe():
    state = _make_state({1: []}, {1: ("me", 3)})
    assert is_safe(state, 1, "me")
    assert not is_threatened(state, 1, "enemy")


def test_threatened_requires_an_opponent_neighbor():
    state = _make_state(
        {1: [2, 3], 2: [], 3: []},
        {1: ("me", 3), 2: ("neutral", 2), 3: ("me", 1)},
    )
    assert not is_threatened(state, 1, "enemy")

    state.set_territory(2, "enemy", 2)
    assert is_threatened(state, 1, "enemy")


def test_safe_and_threatened_are_not_negations_with_three_players():
    state = _make_state(
        {1: [2], 2: []},
        {1: ("me", 3), 2: ("neutral", 2)},
    )
    assert not is_safe(state, 1, "me")
    assert not is_threatened(state, 1, "enemy")


def test_classification_ignores_own_owner():
    state = _make_state(
        {1: [2], 2: []},
        {1: ("enemy", 3), 2: ("me", 2)},
    )
    assert is_safe(state, 1, "me")
    assert is_threatened(state, 2, "enemy")
