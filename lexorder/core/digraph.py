from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Dict, Generic, Hashable, Iterator, List, Set, TypeVar, Union
import logging

V = TypeVar("V", bound=Hashable)


@dataclass(frozen=True)
class TopologicalOrder(Generic[V]):
    """The one and only topological order of the graph."""
    order: List[V] = field(default_factory=list)

    ok = True


@dataclass(frozen=True)
class AmbiguousOrder(Generic[V]):
    """More than one vertex was ready at the same step."""
    candidates: List[V] = field(default_factory=list)

    ok = False


@dataclass(frozen=True)
class CyclicGraph(Generic[V]):
    """Kahn's algorithm stalled; `remaining` holds the vertices never emitted."""
    remaining: List[V] = field(default_factory=list)

    ok = False


SortOutcome = Union[TopologicalOrder, AmbiguousOrder, CyclicGraph]


class DirectedGraph(Generic[V]):
    def __init__(self):
        # Edge u -> v means u must come before v. Successors keep insertion order.
        self.adj: Dict[V, Dict[V, None]] = {}
        # Vertices without predecessors are not tracked here.
        self.in_degrees: Dict[V, int] = {}

    def __len__(self) -> int:
        return len(self.adj)

    def __contains__(self, vertex) -> bool:
        return vertex in self.adj

    def __iter__(self) -> Iterator[V]:
        return iter(self.adj)

    def add_vertex(self, vertex: V):
        if vertex not in self.adj:
            self.adj[vertex] = {}

    def has_edge(self, src: V, dst: V) -> bool:
        successors = self.adj.get(src)
        if successors is None:
            return False
        return dst in successors

    def add_edge(self, src: V, dst: V):
        if self.has_edge(src, dst):
            return
        self.add_vertex(src)
        self.add_vertex(dst)
        self.adj[src][dst] = None
        self.in_degrees[dst] = self.in_degrees.get(dst, 0) + 1

    def successors(self, vertex: V) -> Set[V]:
        return set(self.adj.get(vertex, ()))

    def in_degree(self, vertex: V) -> int:
        return self.in_degrees.get(vertex, 0)

    def vertex_count(self) -> int:
        return len(self.adj)

    def edge_count(self) -> int:
        return sum(len(successors) for successors in self.adj.values())

    def topological_sort(self) -> SortOutcome:
        """Kahn's algorithm that insists on a unique result.

        Returns TopologicalOrder when exactly one order exists, AmbiguousOrder
        as soon as two vertices are ready at once, and CyclicGraph when some
        vertices can never be reached.
        """
        # Owned copy, the graph's own counts stay untouched.
        in_degree: Dict[V, int] = {v: self.in_degrees.get(v, 0) for v in self.adj}

        queue: Deque[V] = deque(v for v, degree in in_degree.items() if degree == 0)
        result: List[V] = []

        while queue:
            if len(queue) > 1:
                logging.debug(f"Ambiguous order between {list(queue)} after {len(result)} vertices")
                return AmbiguousOrder(candidates=list(queue))

            u = queue.popleft()
            result.append(u)

            for v in self.adj[u]:
                in_degree[v] -= 1
                if in_degree[v] == 0:
                    queue.append(v)

        if len(result) != self.vertex_count():
            emitted = set(result)
            remaining = [v for v in self.adj if v not in emitted]
            logging.debug(f"Cycle detected among {remaining}")
            return CyclicGraph(remaining=remaining)

        return TopologicalOrder(order=result)
