"""Directed graphs, union-find and classic graph problems."""

from __future__ import annotations

from collections import Counter, defaultdict, deque
from collections.abc import Iterable, Sequence


class Graph:
    """A directed graph on nodes ``0..size-1`` with weighted edges.

    Neighbours are reported newest edge first.
    """

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._adjacency: list[list[tuple[int, int]]] = [[] for _ in range(size)]

    def __len__(self) -> int:
        return len(self._adjacency)

    def _check(self, u: int) -> None:
        if not 0 <= u < len(self._adjacency):
            raise ValueError(f"node {u} is not in the graph")

    def add_edge(self, u: int, v: int, w: int = 1) -> None:
        """Add an edge from ``u`` to ``v`` with weight ``w``."""
        self._check(u)
        self._check(v)
        self._adjacency[u].append((v, w))

    def neighbors(self, u: int) -> list[tuple[int, int]]:
        """Return ``(target, weight)`` pairs for the edges leaving ``u``."""
        self._check(u)
        return self._adjacency[u][::-1]

    def dfs_order(self) -> list[int]:
        """Nodes in depth-first order, descending into each neighbour as it is met."""
        visited = [False] * len(self)
        order: list[int] = []
        for root in range(len(self)):
            if visited[root]:
                continue
            visited[root] = True
            order.append(root)
            stack = [iter(self.neighbors(root))]
            while stack:
                for v, _ in stack[-1]:
                    if not visited[v]:
                        visited[v] = True
                        order.append(v)
                        stack.append(iter(self.neighbors(v)))
                        break
                else:
                    stack.pop()
        return order

    def dfs_stack_order(self) -> list[int]:
        """Nodes in the order an explicit stack search pops them.

        A node is marked when pushed, so the order differs from :meth:`dfs_order`.
        """
        visited = [False] * len(self)
        order: list[int] = []
        for root in range(len(self)):
            if visited[root]:
                continue
            visited[root] = True
            stack = [root]
            while stack:
                u = stack.pop()
                order.append(u)
                for v, _ in self.neighbors(u):
                    if not visited[v]:
                        visited[v] = True
                        stack.append(v)
        return order


class UnionFind:
    """Disjoint sets over ``0..size-1`` with path compression."""

    def __init__(self, size: int) -> None:
        self._parent = list(range(size))

    def find(self, u: int) -> int:
        """Return the representative of the set holding ``u``."""
        root = u
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[u] != root:
            self._parent[u], u = root, self._parent[u]
        return root

    def link(self, u: int, v: int) -> None:
        """Merge the sets holding ``u`` and ``v``."""
        self._parent[self.find(u)] = self.find(v)

    def is_union(self, u: int, v: int) -> bool:
        """Tell whether ``u`` and ``v`` are in the same set."""
        return self.find(u) == self.find(v)


def find_itinerary(tickets: Iterable[Sequence[str]]) -> list[str]:
    """Lexically smallest route from ``"JFK"`` that uses every ticket once.

    When no such route exists the result is ``["JFK"]`` alone.
    """
    targets: defaultdict[str, Counter[str]] = defaultdict(Counter)
    total = 0
    for source, destination in tickets:
        targets[source][destination] += 1
        total += 1
    route = ["JFK"]

    def travel() -> bool:
        if len(route) == total + 1:
            return True
        counts = targets.get(route[-1])
        if not counts:
            return False
        for destination in sorted(counts):
            if counts[destination] > 0:
                counts[destination] -= 1
                route.append(destination)
                if travel():
                    return True
                route.pop()
                counts[destination] += 1
        return False

    travel()
    return route


def find_order(
    num_courses: int, prerequisites: Iterable[Sequence[int]]
) -> list[int]:
    """A course order honouring every ``[course, prerequisite]`` pair, or [] on a cycle."""
    followers: list[list[int]] = [[] for _ in range(num_courses)]
    in_degree = [0] * num_courses
    for course, required in prerequisites:
        in_degree[course] += 1
        followers[required].append(course)

    queue = deque(c for c in range(num_courses) if in_degree[c] == 0)
    order: list[int] = []
    while queue:
        current = queue.popleft()
        order.append(current)
        for course in followers[current]:
            in_degree[course] -= 1
            if in_degree[course] == 0:
                queue.append(course)
    return order if len(order) == num_courses else []


def is_bipartite(graph: Sequence[Sequence[int]]) -> bool:
    """Tell whether the undirected graph, given as adjacency lists, is two-colourable."""
    color: dict[int, int] = {}
    for start in range(len(graph)):
        if start in color:
            continue
        color[start] = 0
        stack = [start]
        while stack:
            node = stack.pop()
            for neighbour in graph[node]:
                if neighbour not in color:
                    color[neighbour] = 1 - color[node]
                    stack.append(neighbour)
                elif color[neighbour] == color[node]:
                    return False
    return True


def find_redundant_connection(edges: Sequence[Sequence[int]]) -> list[int]:
    """First edge, over nodes ``1..len(edges)``, that closes a cycle; [] if none does."""
    sets = UnionFind(len(edges) + 1)
    for u, v in edges:
        if sets.is_union(u, v):
            return [u, v]
        sets.link(u, v)
    return []