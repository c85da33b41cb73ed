from __future__ import annotations

"""
Dependency Graph Builder.

Turns the scanned file set and the directives of each file into a 
DependencyGraph. Directives are resolved against the root with the same 
canonicalization as the scanner; targets that match no file are dropped.
"""

import logging
from typing import Callable, Iterable, List, Tuple

from smartcat.domain.graph_models import DependencyGraph, DirectiveReadError
from smartcat.infra.fs import canonical_id, relative_label, resolve_directive

logger = logging.getLogger(__name__)

DirectiveReader = Callable[[str], List[str]]


def build_graph(
        root: str,
        file_ids: Iterable[str],
        read_directives: DirectiveReader,
        *,
        report_dropped: bool = True,
) -> Tuple[DependencyGraph, List[DirectiveReadError]]:
    """
    Build the dependency graph of one run.

    Args:
        root: Absolute root directory.
        file_ids: Canonical identifiers from the scanner.
        read_directives: Callable returning the raw directive paths of a file.
        report_dropped: Log a warning for every dangling directive.

    Returns:
        Tuple[DependencyGraph, List[DirectiveReadError]]: The populated graph
        and the files whose directives could not be read.
    """
    graph = DependencyGraph(root=canonical_id(root))
    for file_id in file_ids:
        graph.add_node(file_id)

    errors: List[DirectiveReadError] = []

    for node_id in list(graph):
        try:
            raw_paths = read_directives(node_id)
        except (OSError, UnicodeDecodeError) as e:
            rel = relative_label(graph.root, node_id)
            logger.error(f"Error while reading {rel}: {e}")
            errors.append(DirectiveReadError(rel_path=rel, error=str(e)))
            continue

        for raw in raw_paths:
            target = resolve_directive(graph.root, raw)
            if target in graph:
                graph.add_edge(node_id, target)
            else:
                graph.dropped_directives += 1
                log = logger.warning if report_dropped else logger.debug
                log(
                    f"{relative_label(graph.root, node_id)}: "
                    f"required file '{raw}' not found, directive ignored"
                )

    logger.debug(
        f"Graph built: {len(graph)} node(s), {graph.edge_count()} edge(s), "
        f"{graph.dropped_directives} dropped directive(s)"
    )
    return graph, errors
