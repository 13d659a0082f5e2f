from __future__ import annotations

import gzip
import importlib
from pathlib import Path

import pytest

TEST_DATA = Path(__file__).parent / "test_data"


def test_console_entrypoint_exposes_app() -> None:
    pytest.importorskip("typer")

    module = importlib.import_module("flyg_format.main")

    assert hasattr(module, "app")
    assert module.app is not None


def test_inspect_prints_recording() -> None:
    from typer.testing import CliRunner

    from flyg_format.main import app

    result = CliRunner().invoke(app, ["inspect", str(TEST_DATA / "uncompressed.flyg")])

    assert result.exit_code == 0
    assert "planeInformation" in result.stdout
    assert "Cessna 172 Skyhawk" in result.stdout


def test_inspect_reports_error_kind(tmp_path: Path) -> None:
    from typer.testing import CliRunner

    from flyg_format.main import app

    result = CliRunner().invoke(app, ["inspect", str(tmp_path / "missing.flyg")])

    assert result.exit_code == 1
    assert "could_not_open_file" in result.stdout


def test_inspect_without_compression(tmp_path: Path) -> None:
    from typer.testing import CliRunner

    from flyg_format.main import app

    path = tmp_path / "flight.flygz"
    path.write_bytes(gzip.compress((TEST_DATA / "uncompressed.flyg").read_bytes()))

    enabled = CliRunner().invoke(app, ["inspect", str(path)])
    disabled = CliRunner().invoke(app, ["inspect", "--no-compression", str(path)])

    assert enabled.exit_code == 0
    assert disabled.exit_code == 1
    assert "file_format_not_recognized" in disabled.stdout


def test_config_shows_settings() -> None:
    from typer.testing import CliRunner

    from flyg_format.main import app

    result = CliRunner().invoke(app, ["config"])

    assert result.exit_code == 0
    assert "compression_enabled" in result.stdout
