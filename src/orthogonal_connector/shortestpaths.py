"""
Shortest orthogonal path search.

Dijkstra over (node, heading) states so that bends can be counted exactly.
A path's cost is ``(length + bend_penalty * bends, bends)`` compared
lexicographically: with no penalty the shortest path wins and, among
equally short ones, the one with fewest bends. Remaining ties go to the
entry pushed first, which follows edge insertion order.
"""

from __future__ import annotations

import heapq
import itertools
from typing import Optional

from .geometry import Direction
from .graph import PointGraph
from .validation import UnroutableError

_INF = float("inf")

_State = tuple[int, Optional[Direction]]


def shortest_path(
    graph: PointGraph,
    start: int,
    end: int,
    bend_penalty: float = 0.0,
) -> list[int]:
    """
    Find the cheapest path from ``start`` to ``end``.

    Args:
        graph: Routing graph
        start: Start node index
        end: End node index
        bend_penalty: Extra cost added for each change of direction

    Returns:
        Node indices of the path, including both ends

    Raises:
        UnroutableError: If ``end`` cannot be reached
    """
    if start == end:
        return [start]

    best: dict[_State, tuple[float, int]] = {(start, None): (0.0, 0)}
    parent: dict[_State, _State] = {}
    order = itertools.count()

    # (cost, bends, push order, node, heading)
    heap: list[tuple[float, int, int, int, Optional[Direction]]] = [
        (0.0, 0, next(order), start, None)
    ]

    while heap:
        cost, bends, _, u, heading = heapq.heappop(heap)
        state = (u, heading)
        if (cost, bends) > best.get(state, (_INF, 0)):
            continue
        if u == end:
            return _unwind(parent, state)

        for v, weight in graph.neighbors(u):
            going = graph.direction_of(u, v)
            turn = heading is not None and going != heading
            nb = bends + 1 if turn else bends
            nc = cost + weight + (bend_penalty if turn else 0.0)
            nstate = (v, going)
            if (nc, nb) < best.get(nstate, (_INF, 0)):
                best[nstate] = (nc, nb)
                parent[nstate] = state
                heapq.heappush(heap, (nc, nb, next(order), v, going))

    raise UnroutableError(
        f"no orthogonal path from {graph.point(start)} to {graph.point(end)}"
    )


def _unwind(parent: dict[_State, _State], state: _State) -> list[int]:
    path = [state[0]]
    while state in parent:
        state = parent[state]
        path.append(state[0])
    path.reverse()
    return path


__all__ = [
    "shortest_path",
]
