from __future__ import annotations

"""
Core orchestration pipeline.

This module coordinates one concatenation run:
1. Validates configuration and the root directory.
2. Scans the tree for input files.
3. Parses directives and builds the dependency graph.
4. Rejects graphs containing a dependency cycle.
5. Computes the dependency-first order.
6. Writes the concatenated artifact into the root directory.

Every stage runs to completion before the next starts. Structural failures
end the run with an error result; per-file read failures are isolated.
"""

import logging
import os
from functools import partial
from typing import Any, Dict, List, Optional

from smartcat.core.graph.builder import build_graph
from smartcat.core.graph.cycles import find_cycle
from smartcat.core.graph.directives import read_directives
from smartcat.core.graph.sorter import topological_order
from smartcat.core.pipeline.components.writer import concatenate_files
from smartcat.core.pipeline.stages.validator import validate_config
from smartcat.core.services.scanner import ScanError, scan_files
from smartcat.domain.graph_models import DirectiveReadError
from smartcat.domain.pipeline_models import (
    ConcatenationResult,
    create_error_result,
    create_success_result,
)
from smartcat.infra.fs import normalize_path, relative_label

logger = logging.getLogger(__name__)


def run_pipeline(
        config: Optional[Dict[str, Any]],
        *,
        dry_run: bool = False,
) -> ConcatenationResult:
    """
    Execute the full concatenation pipeline.

    Args:
        config: The configuration dictionary (raw or partial).
        dry_run: If True, compute the order without writing the artifact.

    Returns:
        ConcatenationResult: Object containing status, order and summary.
    """
    logger.info("Pipeline execution started.")

    # -------------------------------------------------------------------------
    # 1) Config & Root Validation
    # -------------------------------------------------------------------------
    cfg, warnings = validate_config(config, strict=False)
    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    raw_root = cfg["root_path"]
    if not raw_root:
        msg = "Path is empty"
        logger.error(msg)
        return create_error_result(msg, "")

    root = normalize_path(raw_root, os.getcwd())
    if not os.path.isdir(root):
        msg = f"Path is not a directory: {root}"
        logger.error(msg)
        return create_error_result(msg, root)

    output_path = os.path.join(root, cfg["output_name"])
    encoding = cfg["encoding"]

    # -------------------------------------------------------------------------
    # 2) Scan
    # -------------------------------------------------------------------------
    try:
        file_ids = scan_files(root)
    except ScanError as e:
        logger.error(str(e))
        return create_error_result(str(e), root, output_path)

    if os.path.isfile(output_path):
        logger.info(
            f"Existing artifact {cfg['output_name']} is scanned as an input file "
            f"and will be replaced."
        )

    # -------------------------------------------------------------------------
    # 3) Parse & Build
    # -------------------------------------------------------------------------
    graph, read_errors = build_graph(
        root,
        file_ids,
        partial(read_directives, encoding=encoding),
        report_dropped=cfg["report_dropped"],
    )

    summary: Dict[str, Any] = {
        "files": len(graph),
        "edges": graph.edge_count(),
        "dropped_directives": graph.dropped_directives,
        "read_errors": len(read_errors),
        "dry_run": dry_run,
    }

    # -------------------------------------------------------------------------
    # 4) Cycle Detection
    # -------------------------------------------------------------------------
    cycle = find_cycle(graph)
    if cycle is not None:
        labels = [relative_label(graph.root, n) for n in cycle]
        msg = "There are cycle dependencies. Can't concatenate files."
        logger.error(f"{msg} Cycle: {' -> '.join(labels)}")
        return create_error_result(
            msg, root, output_path, cycle=labels, errors=read_errors, summary_extra=summary
        )

    # -------------------------------------------------------------------------
    # 5) Sort
    # -------------------------------------------------------------------------
    order = topological_order(graph)
    labels = [relative_label(graph.root, n) for n in order]

    if dry_run:
        logger.info("Dry run: skipping artifact write.")
        return create_success_result(
            root, output_path, labels, errors=read_errors, summary_extra=summary
        )

    # -------------------------------------------------------------------------
    # 6) Write
    # -------------------------------------------------------------------------
    try:
        failures = concatenate_files(order, output_path, encoding)
    except OSError as e:
        msg = f"Error while writing file {output_path}: {e}"
        logger.error(msg)
        return create_error_result(
            msg, root, output_path, errors=read_errors, summary_extra=summary
        )

    errors: List[DirectiveReadError] = list(read_errors)
    errors.extend(
        DirectiveReadError(rel_path=relative_label(graph.root, path), error=err)
        for path, err in failures
    )
    summary["written"] = len(order) - len(failures)

    logger.info(f"Concatenation finished: {output_path}")
    return create_success_result(
        root, output_path, labels, errors=errors, summary_extra=summary
    )
