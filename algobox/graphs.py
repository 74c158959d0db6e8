"""Shortest paths and topological ordering."""

from __future__ import annotations

import heapq
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple


def dijkstra(graph: Sequence[Sequence[int]], source: int) -> List[Optional[int]]:
    """Shortest distances from ``source`` over an adjacency matrix.

    A zero entry means there is no edge. Vertices that cannot be reached
    get None.
    """
    size = len(graph)
    if any(len(row) != size for row in graph):
        raise ValueError("adjacency matrix must be square")
    if not 0 <= source < size:
        raise IndexError(f"source {source} out of range")

    distances: List[Optional[int]] = [None] * size
    distances[source] = 0
    settled = [False] * size
    queue: List[Tuple[int, int]] = [(0, source)]
    while queue:
        distance, vertex = heapq.heappop(queue)
        if settled[vertex]:
            continue
        settled[vertex] = True
        for neighbour, weight in enumerate(graph[vertex]):
            if not weight or settled[neighbour]:
                continue
            candidate = distance + weight
            current = distances[neighbour]
            if current is None or candidate < current:
                distances[neighbour] = candidate
                heapq.heappush(queue, (candidate, neighbour))
    return distances


def topological_sort(adjacency: Sequence[Iterable[int]]) -> List[int]:
    """Order vertices ``0..n-1`` so that every edge points forward.

    Uses depth-first search from each unvisited vertex in turn and reverses
    the finishing order. Cycles are not detected; every vertex still appears
    exactly once.
    """
    visited = [False] * len(adjacency)
    finished: List[int] = []
    for start in range(len(adjacency)):
        if visited[start]:
            continue
        visited[start] = True
        stack: List[Tuple[int, Iterator[int]]] = [(start, iter(adjacency[start]))]
        while stack:
            vertex, successors = stack[-1]
            for successor in successors:
                if not visited[successor]:
                    visited[successor] = True
                    stack.append((successor, iter(adjacency[successor])))
                    break
            else:
                stack.pop()
                finished.append(vertex)
    finished.reverse()
    return finished