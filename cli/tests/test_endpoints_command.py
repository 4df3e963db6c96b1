from __future__ import annotations

from typer.testing import CliRunner

from ovh_cli import main


def test_endpoints_command_lists_table() -> None:
    result = CliRunner().invoke(main.app, ["endpoints"])
    assert result.exit_code == 0
    assert "ovh-eu" in result.output
    assert "https://eu.api.ovh.com/1.0" in result.output


def test_help_lists_groups() -> None:
    app = main._build_app()
    result = CliRunner().invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "config" in result.output
    assert "endpoints" in result.output
