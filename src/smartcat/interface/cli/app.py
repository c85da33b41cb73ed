from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging initialization, merging of 
configuration sources (defaults, settings file, CLI overrides), the 
interactive root prompt, pipeline execution and result rendering.
"""

import json
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from smartcat.core.pipeline.engine import run_pipeline
from smartcat.core.pipeline.stages.validator import validate_config
from smartcat.domain.config import get_default_config, load_config
from smartcat.domain.pipeline_models import ConcatenationResult
from smartcat.infra.logging import LoggingConfig, configure_logging, get_logger
from smartcat.interface.cli import args as cli_args
from smartcat.interface.cli.prompt import prompt_for_root
from smartcat.utils.i18n import i18n

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 for success, 1 for failure, 130 if cancelled).
    """
    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Resolve base configuration (Default vs settings file)
    base_conf = get_default_config() if args.use_defaults else load_config()
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))

    # 3. Logging bootstrap (Console stderr + optional rotating file)
    log_level = "DEBUG" if args.debug else "INFO"
    configure_logging(
        LoggingConfig(level=log_level, console=True, log_file=raw_conf.get("log_file") or None)
    )
    logger.debug("CLI execution initiated.")

    clean_conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    try:
        # 4. Interactive root acquisition
        if not clean_conf["root_path"]:
            root = prompt_for_root()
            if root is None:
                print(f"ERROR: {i18n.t('cli.prompt.aborted')}", file=sys.stderr)
                return 1
            clean_conf["root_path"] = root

        # 5. Pipeline execution phase
        result = run_pipeline(clean_conf, dry_run=bool(args.dry_run))

    except KeyboardInterrupt:
        msg = i18n.t("cli.status.interrupted")
        logger.warning(msg)
        print(msg, file=sys.stderr)
        return 130
    except Exception as e:
        msg = i18n.t("cli.errors.pipeline_fail", error=str(e))
        logger.critical(msg, exc_info=True)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 1

    # 6. Output rendering phase
    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result)

    return 0 if result.ok else 1

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Shallow merge of non-None overrides into the base configuration."""
    out = dict(base)
    for k, v in overrides.items():
        if v is not None:
            out[k] = v
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(result: ConcatenationResult) -> None:
    """
    Format and print the execution result.

    Args:
        result: The pipeline result to render.
    """
    if not result.ok:
        if result.cycle:
            print(i18n.t("cli.errors.cycle"), file=sys.stderr)
            print(i18n.t("cli.errors.cycle_path", path=" -> ".join(result.cycle)), file=sys.stderr)
        else:
            print(f"ERROR: {result.error}", file=sys.stderr)
        return

    print(i18n.t("cli.status.order"))
    for rel_path in result.order:
        print(f"  {rel_path}")

    if result.errors:
        print(i18n.t("cli.status.skipped", count=len(result.errors)))

    if result.summary.get("dry_run"):
        print(i18n.t("cli.status.dry_run"))
        return

    print(i18n.t("cli.status.output", path=result.output_path))
    print(i18n.t("cli.status.success"))


if __name__ == "__main__":
    sys.exit(main())
