from __future__ import annotations

"""
Pipeline Domain Data Models.

Defines the result structure and factory functions used to communicate 
execution results between the pipeline engine and the CLI.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from smartcat.domain.graph_models import DirectiveReadError

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ConcatenationResult:
    """
    Unified result object of a complete pipeline execution.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        root_path: Normalized root directory processed.
        output_path: Absolute path of the artifact (empty if not computed).
        order: Root-relative paths in dependency-first order.
        cycle: Root-relative paths forming a detected cycle (first node repeated
               at the end), empty when the graph is acyclic.
        errors: Per-file read failures that were isolated during the run.
        summary: Technical execution summary and counters.
    """
    ok: bool
    error: str

    root_path: str
    output_path: str = ""

    order: List[str] = field(default_factory=list)
    cycle: List[str] = field(default_factory=list)
    errors: List[DirectiveReadError] = field(default_factory=list)

    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        root_path: str,
        output_path: str = "",
        cycle: Optional[List[str]] = None,
        errors: Optional[List[DirectiveReadError]] = None,
        summary_extra: Optional[Dict[str, Any]] = None
) -> ConcatenationResult:
    """
    Create a failed pipeline result instance.

    Args:
        error: Detailed error description.
        root_path: The target root directory.
        output_path: Calculated artifact path, if known.
        cycle: Members of the detected cycle, if that was the failure.
        errors: Per-file errors gathered before the failure.
        summary_extra: Additional metadata for the summary payload.

    Returns:
        ConcatenationResult: An immutable error result object.
    """
    return ConcatenationResult(
        ok=False,
        error=error,
        root_path=root_path,
        output_path=output_path,
        cycle=cycle or [],
        errors=errors or [],
        summary=summary_extra or {},
    )


def create_success_result(
        root_path: str,
        output_path: str,
        order: List[str],
        errors: Optional[List[DirectiveReadError]] = None,
        summary_extra: Optional[Dict[str, Any]] = None
) -> ConcatenationResult:
    """
    Create a successful pipeline result instance.

    Args:
        root_path: Normalized root directory.
        output_path: Absolute artifact path.
        order: Dependency-first order of root-relative paths.
        errors: Per-file errors that were isolated during the run.
        summary_extra: Final execution metrics.

    Returns:
        ConcatenationResult: An immutable success result object.
    """
    return ConcatenationResult(
        ok=True,
        error="",
        root_path=root_path,
        output_path=output_path,
        order=list(order),
        errors=errors or [],
        summary=summary_extra or {},
    )
