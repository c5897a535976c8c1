from conquest.game.map import build_graph
from conquest.game.state import initial_state
from conquest.planner.advantage import TroopAdvantage, rank_advantages, strongest_hostile_neighbor


def _make_state(adjacency, owners):
    graph = build_graph({1: 0}, {tid: 1 for tid in adjacency}, adjacency)
    return initial_state(graph, owners)


def test_differential_uses_strongest_non_owned_neighbor():
    state = _make_state(
        {1: [2, 3, 4], 2: [], 3: [], 4: []},
        {1: ("me", 5), 2: ("enemy", 7), 3: ("neutral", 9), 4: ("me", 30)},
    )
    assert strongest_hostile_neighbor(state, 1, "me") == 9
    assert rank_advantages(state, [1], "me") == [TroopAdvantage(1, -4)]


def test_differential_without_hostile_neighbors_is_own_units():
    state = _make_state({1: [2], 2: []}, {1: ("me", 5), 2: ("me", 1)})
    assert rank_advantages(state, [1], "me") == [TroopAdvantage(1, 5)]


def test_ranking_is_ascending_and_stable():
    state = _make_state(
        {1: [9], 2: [9], 3: [9], 4: [9], 9: []},
        {
            1: ("me", 6),
            2: ("me", 2),
            3: ("me", 6),
            4: ("me", 2),
            9: ("enemy", 4),
        },
    )
    ranked = rank_advantages(state, [3, 1, 4, 2], "me")
    assert [entry.territory for entry in ranked] == [4, 2, 3, 1]
    assert [entry.differential for entry in ranked] == [-2, -2, 2, 2]


def test_ranking_is_a_permutation_of_the_input():
    state = _make_state(
        {1: [2], 2: [3], 3: [4], 4: []},
        {1: ("me", 1), 2: ("enemy", 8), 3: ("me", 4), 4: ("neutral", 2)},
    )
    ranked = rank_advantages(state, [1, 3], "me")
    assert sorted(entry.territory for entry in ranked) == [1, 3]
    differentials = [entry.differential for entry in ranked]
    assert differentials == sorted(differentials)


def test_empty_input_gives_empty_ranking():
    state = _make_state({1: []}, {1: ("me", 1)})
    assert rank_advantages(state, [], "me") == []
