from __future__ import annotations

"""
Unit tests for the CLI Application Controller.

Runs main() in-process against real temporary trees. The interactive prompt 
and the pipeline are patched where a test needs to control them.
"""

import json
import os
from unittest.mock import patch

from smartcat.domain.pipeline_models import create_error_result
from smartcat.interface.cli.app import main

SCENARIO_A_ORDER = [
    os.path.join("Folder 2", "File 2-1"),
    os.path.join("Folder 1", "File 1-1"),
    os.path.join("Folder 2", "File 2-2"),
]


def test_main_success_prints_order_and_location(scenario_a, capsys) -> None:
    code = main(["-i", str(scenario_a)])

    out = capsys.readouterr().out
    assert code == 0
    lines = out.splitlines()
    assert lines[0] == "Concatenation order:"
    assert [ln.strip() for ln in lines[1:4]] == SCENARIO_A_ORDER
    assert f"Concatenated file is located at {scenario_a / 'concatenated.txt'}" in out
    assert lines[-1] == "Concatenation finished"
    assert (scenario_a / "concatenated.txt").is_file()


def test_main_cycle_reports_and_fails(make_tree, capsys) -> None:
    root = make_tree({"A": "require 'B'\n", "B": "require 'A'\n"})

    code = main(["-i", str(root)])

    captured = capsys.readouterr()
    assert code == 1
    assert "There are cycle dependencies. Can't concatenate files." in captured.err
    assert "Cycle: A -> B -> A" in captured.err
    assert not (root / "concatenated.txt").exists()


def test_main_not_a_directory(tmp_path, capsys) -> None:
    code = main(["-i", str(tmp_path / "missing")])

    assert code == 1
    assert "ERROR: Path is not a directory" in capsys.readouterr().err


def test_main_json_output(scenario_a, capsys) -> None:
    code = main(["-i", str(scenario_a), "--json", "--dry-run"])

    payload = json.loads(capsys.readouterr().out)
    assert code == 0
    assert payload["ok"] is True
    assert payload["order"] == SCENARIO_A_ORDER
    assert payload["summary"]["dry_run"] is True
    assert not (scenario_a / "concatenated.txt").exists()


def test_main_dry_run_message(scenario_a, capsys) -> None:
    code = main(["-i", str(scenario_a), "--dry-run"])

    out = capsys.readouterr().out
    assert code == 0
    assert "Dry run: no file was written." in out
    assert "Concatenation finished" not in out


def test_main_prompts_when_root_missing(scenario_a, capsys) -> None:
    with patch("smartcat.interface.cli.app.prompt_for_root",
               return_value=str(scenario_a)) as prompt:
        code = main([])

    assert code == 0
    prompt.assert_called_once()
    assert (scenario_a / "concatenated.txt").is_file()


def test_main_prompt_eof_fails(capsys) -> None:
    with patch("smartcat.interface.cli.app.prompt_for_root", return_value=None):
        code = main([])

    assert code == 1
    assert "ERROR: No root folder was entered." in capsys.readouterr().err


def test_main_keyboard_interrupt_returns_130(capsys) -> None:
    with patch("smartcat.interface.cli.app.prompt_for_root",
               side_effect=KeyboardInterrupt):
        code = main([])

    assert code == 130
    assert "Operation cancelled by user." in capsys.readouterr().err


def test_main_unexpected_error_returns_1(scenario_a, capsys) -> None:
    with patch("smartcat.interface.cli.app.run_pipeline", side_effect=RuntimeError("kaboom")):
        code = main(["-i", str(scenario_a)])

    assert code == 1
    assert "ERROR: Unexpected failure: kaboom" in capsys.readouterr().err


def test_main_failed_result_without_cycle(scenario_a, capsys) -> None:
    failed = create_error_result("Error while writing file x: denied", str(scenario_a))
    with patch("smartcat.interface.cli.app.run_pipeline", return_value=failed):
        code = main(["-i", str(scenario_a)])

    assert code == 1
    assert "ERROR: Error while writing file x: denied" in capsys.readouterr().err


def test_main_settings_file_and_overrides(scenario_a, tmp_path, capsys) -> None:
    data_dir = tmp_path / "user_data"
    data_dir.mkdir()
    (data_dir / "config.json").write_text(
        json.dumps({"output_name": "from_settings.txt"}), encoding="utf-8"
    )

    assert main(["-i", str(scenario_a)]) == 0
    assert (scenario_a / "from_settings.txt").is_file()

    assert main(["-i", str(scenario_a), "-o", "from_flag.txt"]) == 0
    assert (scenario_a / "from_flag.txt").is_file()

    assert main(["-i", str(scenario_a), "--use-defaults"]) == 0
    assert (scenario_a / "concatenated.txt").is_file()


def test_main_writes_log_file(scenario_a, tmp_path) -> None:
    log_file = tmp_path / "logs" / "run.log"

    assert main(["-i", str(scenario_a), "--log-file", str(log_file), "--debug"]) == 0
    assert "Pipeline execution started." in log_file.read_text(encoding="utf-8")
