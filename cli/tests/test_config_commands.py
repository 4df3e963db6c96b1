from __future__ import annotations

from typer.testing import CliRunner

from ovh_cli import main
from ovh_cli.commands import config_cmd
from ovh_client.resolve import ConfigResolver


def _use_resolver(monkeypatch, paths, environ) -> None:
    monkeypatch.setattr(config_cmd, "_resolver", lambda: ConfigResolver(paths=paths, environ=environ))


def test_config_show_prints_resolved_values(tmp_path, monkeypatch) -> None:
    conf = tmp_path / "ovh.conf"
    conf.write_text(
        "\n".join(
            [
                "[default]",
                "endpoint=ovh-ca",
                "",
                "[ovh-ca]",
                "application_key=ca-key",
                "application_secret=supersecret",
                "",
            ]
        ),
        encoding="utf-8",
    )
    _use_resolver(monkeypatch, [conf], {})

    result = CliRunner().invoke(main.app, ["config", "show"])

    assert result.exit_code == 0
    assert "endpoint=https://ca.api.ovh.com/1.0" in result.output
    assert "application_key=ca-key" in result.output
    assert "application_secret=su*******et" in result.output
    assert "supersecret" not in result.output
    assert "consumer_key=(empty)" in result.output


def test_config_show_with_endpoint_option(monkeypatch) -> None:
    _use_resolver(monkeypatch, [], {"OVH_APPLICATION_KEY": "k", "OVH_APPLICATION_SECRET": "s", "OVH_CONSUMER_KEY": "c"})

    result = CliRunner().invoke(main.app, ["config", "show", "--endpoint", "https://api.example.com/1.0"])

    assert result.exit_code == 0
    assert "endpoint=https://api.example.com/1.0" in result.output
    assert "application_secret=****" in result.output
    assert "consumer_key=(set)" in result.output


def test_config_show_reports_missing_key(monkeypatch) -> None:
    _use_resolver(monkeypatch, [], {"OVH_APPLICATION_SECRET": "s"})

    result = CliRunner().invoke(main.app, ["config", "show"])

    assert result.exit_code == 2
    assert "Missing application key" in result.output


def test_config_show_reports_unknown_endpoint(monkeypatch) -> None:
    _use_resolver(monkeypatch, [], {"OVH_APPLICATION_KEY": "k", "OVH_APPLICATION_SECRET": "s"})

    result = CliRunner().invoke(main.app, ["config", "show", "-e", "ovh-mars"])

    assert result.exit_code == 2
    assert "Unknown endpoint 'ovh-mars'" in result.output


def test_config_sources_lists_files(tmp_path, monkeypatch) -> None:
    present = tmp_path / "present.conf"
    present.write_text("[default]\n", encoding="utf-8")
    absent = tmp_path / "absent.conf"
    broken = tmp_path / "broken.conf"
    broken.write_text("application_key=no-section\n", encoding="utf-8")
    _use_resolver(monkeypatch, [present, absent, broken], {})

    result = CliRunner().invoke(main.app, ["config", "sources"])

    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert f"{present} (loaded)" in lines
    assert f"{absent} (missing)" in lines
    assert f"{broken} (ignored)" in lines


def test_mask_secret() -> None:
    assert config_cmd.mask_secret("") == "(empty)"
    assert config_cmd.mask_secret("abcd") == "****"
    assert config_cmd.mask_secret("abcdef") == "ab**ef"
