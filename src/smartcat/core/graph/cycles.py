from __future__ import annotations

"""
Cycle Detector.

Depth-first search over every component of the graph. Each walk keeps a 
path-local set holding only the nodes of the current branch; reaching a 
node of that set closes a cycle. Nodes leave the global 'unexplored' set 
once all their dependencies are exhausted and are never entered again, so 
two branches meeting at a shared dependency (a diamond) are not a cycle.

The walk uses an explicit stack, so chain depth is bounded by memory rather 
than by the interpreter's recursion limit.
"""

from typing import Dict, Iterator, List, Optional, Set, Tuple

from smartcat.domain.graph_models import DependencyGraph


def find_cycle(graph: DependencyGraph) -> Optional[List[str]]:
    """
    Locate one directed cycle.

    Args:
        graph: The fully built dependency graph.

    Returns:
        Optional[List[str]]: The cycle as node ids, first node repeated at the
        end (a self-require yields [a, a]); None if the graph is acyclic.
    """
    # dict keeps scan order, so the reported cycle is stable between runs
    unexplored: Dict[str, None] = dict.fromkeys(graph)

    while unexplored:
        start = next(iter(unexplored))

        path: List[str] = [start]
        on_path: Set[str] = {start}
        stack: List[Tuple[str, Iterator[str]]] = [(start, iter(graph.requires_of(start)))]

        while stack:
            node_id, pending = stack[-1]
            dep = next(pending, None)

            if dep is None:
                stack.pop()
                path.pop()
                on_path.discard(node_id)
                unexplored.pop(node_id, None)
                continue

            if dep in on_path:
                return path[path.index(dep):] + [dep]

            if dep not in unexplored:
                continue

            path.append(dep)
            on_path.add(dep)
            stack.append((dep, iter(graph.requires_of(dep))))

    return None


def has_cycle(graph: DependencyGraph) -> bool:
    """Return True if any directed cycle exists anywhere in the graph."""
    return find_cycle(graph) is not None
