"""Shortest transformation sequences between words that differ one letter at a time."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Optional


def _one_apart(a: str, b: str) -> bool:
    return len(a) == len(b) and sum(x != y for x, y in zip(a, b)) == 1


def _word_graph(
    begin_word: str, word_list: Sequence[str]
) -> tuple[list[str], int, list[list[int]]]:
    """Return the words (begin word appended if absent), its index and the adjacency.

    Neighbours are listed from the highest index to the lowest, which fixes the
    order in which the searches below explore the graph.
    """
    words = list(word_list)
    try:
        start = words.index(begin_word)
    except ValueError:
        words.append(begin_word)
        start = len(words) - 1
    graph = [
        [j for j in reversed(range(len(words))) if _one_apart(word, words[j])]
        for word in words
    ]
    return words, start, graph


def ladder_length(begin_word: str, end_word: str, word_list: Sequence[str]) -> int:
    """Number of words in the shortest ladder from ``begin_word`` to ``end_word``.

    Every step changes exactly one letter and every word after the first must
    come from ``word_list``. Returns 0 when no ladder exists.
    """
    words, start, graph = _word_graph(begin_word, word_list)
    visited = [False] * len(words)
    frontier = [start]
    level = 1
    while frontier:
        following: list[int] = []
        for node in frontier:
            if visited[node]:
                continue
            visited[node] = True
            if words[node] == end_word:
                return level
            following.extend(j for j in graph[node] if not visited[j])
        frontier = following
        level += 1
    return 0


def find_ladders(
    begin_word: str, end_word: str, word_list: Sequence[str]
) -> list[list[str]]:
    """Return every shortest ladder from ``begin_word`` to ``end_word``.

    Returns an empty list when no ladder exists.
    """
    words, start, graph = _word_graph(begin_word, word_list)
    size = len(words)
    visited = [False] * size
    distance: list[Optional[int]] = [None] * size
    distance[start] = 0
    predecessors: list[list[int]] = [[] for _ in range(size)]

    target: Optional[int] = None
    frontier = [start]
    level = 1
    while frontier and target is None:
        following: list[int] = []
        for node in frontier:
            if visited[node]:
                continue
            visited[node] = True
            if words[node] == end_word:
                target = node
                break
            for neighbour in graph[node]:
                if visited[neighbour]:
                    continue
                following.append(neighbour)
                if distance[neighbour] is None:
                    distance[neighbour] = level
                if distance[neighbour] > distance[node]:
                    predecessors[neighbour].append(node)
        frontier = following
        level += 1

    if target is None:
        return []

    def walk(node: int, trail: list[int]) -> Iterator[list[str]]:
        if node == start:
            yield [words[index] for index in reversed(trail)]
            return
        for previous in predecessors[node]:
            yield from walk(previous, trail + [previous])

    return list(walk(target, [target]))