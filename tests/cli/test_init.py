# linguify:header:start
#
#   project      : Linguify
#   file         : test_init.py
#   file_relpath : tests/cli/test_init.py
#   license      : MIT
#   copyright    : (c) 2025 The Linguify Authors
#
# linguify:header:end

"""CLI tests for `linguify init`."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from linguify.cli.exit_codes import ExitCode
from linguify.config.io import load_config
from linguify.config.model import Config
from tests.cli.conftest import assert_SUCCESS, run_cli_in

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result

CONFIG_NAME = "linguify.config.json"


def test_init_writes_default_config(tmp_path: Path) -> None:
    """A fresh directory receives the default config as indented JSON."""
    result: Result = run_cli_in(tmp_path, ["init"])

    assert_SUCCESS(result)

    path: Path = tmp_path / CONFIG_NAME
    assert json.loads(path.read_text(encoding="utf-8")) == Config().to_dict()
    assert load_config(path) == Config()
    assert "Initiating linguify" in result.output
    assert f"Linguify config saved to {path}" in result.output
    assert "Linguify initiated successfully" in result.output


def test_init_declined_overwrite_keeps_file(tmp_path: Path) -> None:
    """Answering no leaves an existing config untouched and exits successfully."""
    path: Path = tmp_path / CONFIG_NAME
    path.write_text('{"custom": true}\n', encoding="utf-8")

    result: Result = run_cli_in(tmp_path, ["init"], input_text="n\n")

    assert_SUCCESS(result)

    assert "already exists" in result.output
    assert "Exiting linguify initiating" in result.output
    assert "Linguify initiated successfully" not in result.output
    assert path.read_text(encoding="utf-8") == '{"custom": true}\n'


def test_init_default_answer_is_no(tmp_path: Path) -> None:
    """Pressing enter at the prompt keeps the existing file."""
    path: Path = tmp_path / CONFIG_NAME
    path.write_text("{}", encoding="utf-8")

    result: Result = run_cli_in(tmp_path, ["init"], input_text="\n")

    assert_SUCCESS(result)

    assert path.read_text(encoding="utf-8") == "{}"


def test_init_accepted_overwrite_replaces_file(tmp_path: Path) -> None:
    """Answering yes overwrites the existing config."""
    path: Path = tmp_path / CONFIG_NAME
    path.write_text("{}", encoding="utf-8")

    result: Result = run_cli_in(tmp_path, ["init"], input_text="y\n")

    assert_SUCCESS(result)

    assert "Overwriting linguify config" in result.output
    assert json.loads(path.read_text(encoding="utf-8")) == Config().to_dict()


def test_init_custom_config_path(tmp_path: Path) -> None:
    """`--config` selects the file to write."""
    target: Path = tmp_path / "conf" / "my.json"
    target.parent.mkdir()

    result: Result = run_cli_in(tmp_path, ["init", "--config", str(target)])

    assert_SUCCESS(result)

    assert target.exists()
    assert not (tmp_path / CONFIG_NAME).exists()


def test_init_unwritable_location(tmp_path: Path) -> None:
    """A write failure is reported with the I/O exit code."""
    target: Path = tmp_path / "missing-dir" / CONFIG_NAME

    result: Result = run_cli_in(tmp_path, ["init", "--config", str(target)])

    assert result.exit_code == ExitCode.IO_ERROR, result.output
    assert "Cannot write config file" in result.output
