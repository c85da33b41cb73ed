from __future__ import annotations

"""
Dependency Graph Domain Models.

Defines the node and graph structures shared by the builder, the cycle 
detector and the sorter. Nodes reference each other by canonical identifier 
only; the graph owns the id -> node mapping.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Set

# -----------------------------------------------------------------------------
# NODE MODEL
# -----------------------------------------------------------------------------

@dataclass(eq=False)
class FileNode:
    """
    One discovered file.

    Attributes:
        id: Canonical path identifier (unique key).
        requires: Ordered ids of the nodes this file depends on. May contain
                  duplicates and self-references.
    """
    id: str
    requires: List[str] = field(default_factory=list)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FileNode):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

# -----------------------------------------------------------------------------
# GRAPH MODEL
# -----------------------------------------------------------------------------

@dataclass
class DependencyGraph:
    """
    Per-run dependency graph.

    Populated once by the builder and only read afterwards.

    Attributes:
        root: Absolute root directory the ids were resolved against.
        nodes: Mapping from canonical id to node, in scan order.
        required_by: Ids that are the target of at least one edge.
        dropped_directives: Number of directives whose target matched no node.
    """
    root: str
    nodes: Dict[str, FileNode] = field(default_factory=dict)
    required_by: Set[str] = field(default_factory=set)
    dropped_directives: int = 0

    def __contains__(self, node_id: object) -> bool:
        return node_id in self.nodes

    def __iter__(self) -> Iterator[str]:
        return iter(self.nodes)

    def __len__(self) -> int:
        return len(self.nodes)

    def add_node(self, node_id: str) -> FileNode:
        node = self.nodes.get(node_id)
        if node is None:
            node = FileNode(node_id)
            self.nodes[node_id] = node
        return node

    def add_edge(self, dependent: str, dependency: str) -> None:
        """Record that 'dependent' requires 'dependency'. Both must be known."""
        self.nodes[dependent].requires.append(dependency)
        self.required_by.add(dependency)

    def requires_of(self, node_id: str) -> List[str]:
        return self.nodes[node_id].requires

    def edge_count(self) -> int:
        return sum(len(n.requires) for n in self.nodes.values())

# -----------------------------------------------------------------------------
# ERROR TRACKING MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class DirectiveReadError:
    """
    Per-file read failure. The file stays in the graph but contributes no edges.

    Attributes:
        rel_path: File path relative to the root.
        error: Descriptive exception message.
    """
    rel_path: str
    error: str
