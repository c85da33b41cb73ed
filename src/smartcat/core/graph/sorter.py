from __future__ import annotations

"""
Topological Sorter.

Dependency-first post-order traversal: a node is emitted only after every 
node it requires. Traversal starts from the nodes nobody depends on, then 
sweeps any node still unvisited so the order is always complete.
"""

from typing import Iterator, List, Set, Tuple

from smartcat.domain.graph_models import DependencyGraph


def topological_order(graph: DependencyGraph) -> List[str]:
    """
    Order every node so that dependencies precede their dependents.

    The graph must be acyclic (check with find_cycle first). Order between
    mutually independent nodes follows scan order but is not a contract.

    Args:
        graph: An acyclic dependency graph.

    Returns:
        List[str]: Every node id exactly once.

    Raises:
        ValueError: If a cycle is met during the traversal.
    """
    order: List[str] = []
    finished: Set[str] = set()
    in_progress: Set[str] = set()

    seeds = [n for n in graph if n not in graph.required_by]
    seeds.extend(n for n in graph if n in graph.required_by)

    for seed in seeds:
        if seed in finished:
            continue

        in_progress.add(seed)
        stack: List[Tuple[str, Iterator[str]]] = [(seed, iter(graph.requires_of(seed)))]

        while stack:
            node_id, pending = stack[-1]
            dep = next(pending, None)

            if dep is None:
                stack.pop()
                in_progress.discard(node_id)
                finished.add(node_id)
                order.append(node_id)
                continue

            if dep in finished:
                continue
            if dep in in_progress:
                raise ValueError(f"Dependency cycle through {dep}; sort is undefined")

            in_progress.add(dep)
            stack.append((dep, iter(graph.requires_of(dep))))

    return order
