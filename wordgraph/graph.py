from types import MappingProxyType
from typing import Dict, FrozenSet, Generic, Hashable, List, Mapping, Tuple, TypeVar

L = TypeVar("L", bound=Hashable)


class WeightedDirectedGraph(Generic[L]):
    """
    A mutable, weighted, directed graph with labeled vertices.

    Labels must be hashable and must never be mutated once inserted.
    Every stored edge has a strictly positive integer weight; setting a
    weight of 0 removes the edge.
    """

    def __init__(self):
        # source -> {target: weight}
        self._adjacency: Dict[L, Dict[L, int]] = {}

    @classmethod
    def empty(cls) -> "WeightedDirectedGraph":
        return cls()

    def add_vertex(self, vertex: L) -> bool:
        """Add a vertex. Returns True if it was not already present."""
        if vertex in self._adjacency:
            return False
        self._adjacency[vertex] = {}
        return True

    def set_edge(self, source: L, target: L, weight: int) -> int:
        """
        Set the weight of the edge source -> target.

        Both endpoints are added as vertices if missing. A weight of 0
        removes the edge.

        Returns:
            The previous weight of the edge, or 0 if there was none.

        Raises:
            TypeError: weight is not an int
            ValueError: weight is negative
        """
        if isinstance(weight, bool) or not isinstance(weight, int):
            raise TypeError(f"Edge weight must be an int, got {type(weight).__name__}")
        if weight < 0:
            raise ValueError(f"Edge weight must be non-negative, got {weight}")

        self.add_vertex(source)
        self.add_vertex(target)

        edges = self._adjacency[source]
        previous = edges.get(target, 0)
        if weight == 0:
            edges.pop(target, None)
        else:
            edges[target] = weight

        assert edges.get(target, 1) > 0, f"stored weight {weight} on {source!r} -> {target!r}"
        return previous

    def remove_vertex(self, vertex: L) -> bool:
        """Remove a vertex and every edge into or out of it."""
        if vertex not in self._adjacency:
            return False

        del self._adjacency[vertex]
        for edges in self._adjacency.values():
            edges.pop(vertex, None)

        assert all(vertex not in edges for edges in self._adjacency.values())
        return True

    def vertices(self) -> FrozenSet[L]:
        return frozenset(self._adjacency)

    def sources_of(self, target: L) -> Mapping[L, int]:
        """Vertices with an edge into target, mapped to that edge's weight."""
        sources = {
            source: edges[target]
            for source, edges in self._adjacency.items()
            if target in edges
        }
        return MappingProxyType(sources)

    def targets_of(self, source: L) -> Mapping[L, int]:
        """Vertices reached by an edge from source, mapped to that edge's weight."""
        edges = self._adjacency.get(source)
        if edges is None:
            return MappingProxyType({})
        return MappingProxyType(edges)

    def edges(self) -> List[Tuple[L, L, int]]:
        return [
            (source, target, weight)
            for source, edges in self._adjacency.items()
            for target, weight in edges.items()
        ]

    def copy(self) -> "WeightedDirectedGraph":
        clone = type(self)()
        clone._adjacency = {v: dict(edges) for v, edges in self._adjacency.items()}
        return clone

    def check_rep(self):
        """Assert the full representation invariant. A no-op under python -O."""
        for source, edges in self._adjacency.items():
            for target, weight in edges.items():
                assert weight > 0, f"non-positive weight {weight} on {source!r} -> {target!r}"
                assert target in self._adjacency, f"dangling edge target {target!r}"

    def __len__(self):
        return len(self._adjacency)

    def __contains__(self, vertex):
        return vertex in self._adjacency

    def __repr__(self):
        return f"{type(self).__name__}({self._adjacency!r})"

    def __str__(self):
        return str(self._adjacency)
