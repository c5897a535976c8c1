from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple


@dataclass(frozen=True)
class Territory:
    id: int
    group_id: int
    neighbors: Tuple[int, ...]


@dataclass(frozen=True)
class RegionGroup:
    id: int
    bonus: int
    territory_ids: Tuple[int, ...]


class TerritoryGraph:
    def __init__(self) -> None:
        self._groups: Dict[int, int] = {}
        self._group_members: Dict[int, List[int]] = {}
        self._territory_group: Dict[int, int] = {}
        self._adjacency: Dict[int, List[int]] = {}
        self._index: Dict[int, int] = {}
        self._frozen = False

    def add_group(self, group_id: int, bonus: int = 0) -> None:
        self._check_mutable()
        self._groups[group_id] = bonus
        self._group_members.setdefault(group_id, [])

    def add_territory(self, territory_id: int, group_id: int) -> None:
        self._check_mutable()
        if group_id not in self._groups:
            raise KeyError(f"Unknown region group {group_id}")
        if territory_id in self._territory_group:
            raise ValueError(f"Territory {territory_id} already exists")
        self._territory_group[territory_id] = group_id
        self._group_members[group_id].append(territory_id)
        self._adjacency[territory_id] = []
        self._index[territory_id] = len(self._index)

    def connect(self, a: int, b: int) -> None:
        self._check_mutable()
        if a == b:
            raise ValueError(f"Territory {a} cannot neighbor itself")
        for territory_id in (a, b):
            if territory_id not in self._adjacency:
                raise KeyError(f"Unknown territory {territory_id}")
        if b not in self._adjacency[a]:
            self._adjacency[a].append(b)
        if a not in self._adjacency[b]:
            self._adjacency[b].append(a)

    def freeze(self) -> "TerritoryGraph":
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def _check_mutable(self) -> None:
        if self._frozen:
            raise RuntimeError("The territory graph is frozen.")

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, territory_id: object) -> bool:
        return territory_id in self._index

    @property
    def territory_ids(self) -> Tuple[int, ...]:
        return tuple(self._index)

    def index_of(self, territory_id: int) -> int:
        try:
            return self._index[territory_id]
        except KeyError:
            raise KeyError(f"Unknown territory {territory_id}") from None

    def neighbors(self, territory_id: int) -> Tuple[int, ...]:
        try:
            return tuple(self._adjacency[territory_id])
        except KeyError:
            raise KeyError(f"Unknown territory {territory_id}") from None

    def are_adjacent(self, a: int, b: int) -> bool:
        return b in self._adjacency.get(a, ())

    def territory(self, territory_id: int) -> Territory:
        return Territory(
            id=territory_id,
            group_id=self._territory_group[territory_id],
            neighbors=self.neighbors(territory_id),
        )

    def territories(self) -> List[Territory]:
        return [self.territory(territory_id) for territory_id in self._index]

    def group(self, group_id: int) -> RegionGroup:
        return RegionGroup(
            id=group_id,
            bonus=self._groups[group_id],
            territory_ids=tuple(self._group_members[group_id]),
        )

    def groups(self) -> List[RegionGroup]:
        return [self.group(group_id) for group_id in self._groups]

    def group_of(self, territory_id: int) -> int:
        return self._territory_group[territory_id]

    @property
    def edge_list(self) -> List[Tuple[int, int]]:
        return [
            (src, dst)
            for src, neighbors in self._adjacency.items()
            for dst in neighbors
        ]


def build_graph(
    groups: Dict[int, int],
    territories: Dict[int, int],
    adjacency: Dict[int, Iterable[int]],
) -> TerritoryGraph:
    """Build a frozen graph from plain dicts (group -> bonus, territory -> group, adjacency)."""
    graph = TerritoryGraph()
    for group_id, bonus in groups.items():
        graph.add_group(group_id, bonus)
    for territory_id, group_id in territories.items():
        graph.add_territory(territory_id, group_id)
    for src, neighbors in adjacency.items():
        for dst in neighbors:
            graph.connect(src, dst)
    return graph.freeze()
