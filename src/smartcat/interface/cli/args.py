from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema and translates the parsed 
argparse namespace into configuration overrides. Every flag is optional: 
with no arguments the tool asks for the root directory interactively.
"""

import argparse
from typing import Any, Dict

from smartcat.domain.constants import CURRENT_CONFIG_VERSION
from smartcat.utils.i18n import i18n

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the SmartCat CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="smartcat",
        description=i18n.t("app.description"),
    )

    # --- Path Management ---
    p.add_argument(
        "-i", "--input",
        dest="root_path",
        default=None,
        help=i18n.t("cli.args.input"),
    )
    p.add_argument(
        "-o", "--output",
        dest="output_name",
        default=None,
        help=i18n.t("cli.args.output"),
    )
    p.add_argument(
        "--encoding",
        dest="encoding",
        default=None,
        help=i18n.t("cli.args.encoding"),
    )

    # --- Runtime Behaviour ---
    p.add_argument(
        "--dry-run",
        action="store_true",
        help=i18n.t("cli.args.dry_run"),
    )
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help=i18n.t("cli.args.defaults"),
    )

    # --- Diagnostics & Format ---
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help=i18n.t("cli.args.json"),
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help=i18n.t("cli.args.log_file"),
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help=i18n.t("cli.args.debug"),
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {CURRENT_CONFIG_VERSION}",
        help=i18n.t("cli.args.version"),
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration overrides dict.

    Only values the user actually supplied are returned, so that settings
    from the config file survive when a flag is absent.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    for key in ("root_path", "output_name", "encoding", "log_file"):
        value = getattr(args, key)
        if value is not None:
            overrides[key] = value

    return overrides
