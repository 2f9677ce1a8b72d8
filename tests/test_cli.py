# tests/test_cli.py
"""
Tests for the `water` CLI.
"""

import json

from typer.testing import CliRunner

from water_workspace import __version__
from water_workspace.cli import app

runner = CliRunner()


# ---------------------------------------------------------
# Smoke tests
# ---------------------------------------------------------
def test_cli_root_help():
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "discover" in result.stdout


def test_all_commands_help():
    for cmd in app.registered_commands:
        if cmd.name is None:
            continue
        result = runner.invoke(app, [cmd.name, "--help"])
        assert result.exit_code == 0, f"Help failed for '{cmd.name}'"


def test_cli_version():
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert __version__ in result.stdout


# ---------------------------------------------------------
# discover / modules
# ---------------------------------------------------------
def test_discover(user_workspace):
    result = runner.invoke(app, ["discover", str(user_workspace)])
    assert result.exit_code == 0
    assert result.stdout.split() == [":User-api", ":User-model", ":User-service"]


def test_discover_missing_root(tmp_path):
    result = runner.invoke(app, ["discover", str(tmp_path / "missing")])
    assert result.exit_code == 1
    assert "not found" in result.output


def test_modules_json(user_workspace):
    result = runner.invoke(app, ["modules", str(user_workspace)])
    assert result.exit_code == 0

    rows = json.loads(result.stdout)
    by_address = {row["address"]: row for row in rows}
    assert list(by_address) == [":", ":User-api", ":User-model", ":User-service"]
    assert by_address[":User-service"]["parent"] == ":"
    assert by_address[":User-service"]["coordinate"] == "it.water:User-service:1.0.0"
    assert by_address[":User-service"]["moduleId"] == "it.water.user"
    assert by_address[":User-model"]["moduleId"] is None
    assert by_address[":"]["parent"] is None


# ---------------------------------------------------------
# catalog
# ---------------------------------------------------------
def test_catalog():
    result = runner.invoke(app, ["catalog"])
    assert result.exit_code == 0
    for name in ["jdbc", "api-gateway", "service-discovery", "cluster-coordinator", "authentication-issuer"]:
        assert name in result.output


def test_catalog_single():
    result = runner.invoke(app, ["catalog", "api-gateway"])
    assert result.exit_code == 0
    assert "api-gateway" in result.output
    assert "jdbc" not in result.output


def test_catalog_unknown():
    result = runner.invoke(app, ["catalog", "redis"])
    assert result.exit_code == 1
    assert "Unknown standard Water PIN" in result.output


# ---------------------------------------------------------
# show / generate
# ---------------------------------------------------------
def test_show(user_workspace):
    result = runner.invoke(app, ["show", ":User-service", "--root", str(user_workspace)])
    assert result.exit_code == 0

    data = json.loads(result.stdout)
    assert data["moduleId"] == "it.water.user"
    assert not (user_workspace / "User-service" / "build" / "water").exists()


def test_show_module_without_descriptor(user_workspace):
    result = runner.invoke(app, ["show", ":User-model", "--root", str(user_workspace)])
    assert result.exit_code == 1
    assert "moduleId" in result.output


def test_generate(user_workspace):
    result = runner.invoke(app, ["generate", str(user_workspace)])
    assert result.exit_code == 0
    assert "2 written" in result.output
    assert (user_workspace / "User-api" / "build" / "water" / "User-api-1.0.0.water.json").exists()

    result = runner.invoke(app, ["generate", str(user_workspace)])
    assert result.exit_code == 0
    assert "0 written, 2 up-to-date" in result.output

    result = runner.invoke(app, ["generate", str(user_workspace), "--force"])
    assert result.exit_code == 0
    assert "2 written" in result.output


def test_generate_unknown_standard_pin(tmp_path, write_module):
    write_module("A", waterDescriptor={"moduleId": "a", "output": [{"standardPin": "redis"}]})

    result = runner.invoke(app, ["generate", str(tmp_path)])
    assert result.exit_code == 1
    assert "Unknown standard Water PIN" in result.output


def test_generate_verbose(user_workspace):
    result = runner.invoke(app, ["--verbose", "generate", str(user_workspace)])
    assert result.exit_code == 0


def test_show_masks_sensitive_defaults(tmp_path, write_module):
    write_module(
        "A",
        name="A",
        waterDescriptor={
            "moduleId": "a",
            "properties": [{"key": "pw", "sensitive": True, "defaultValue": "s3cret"}],
        },
    )

    result = runner.invoke(app, ["show", ":A", "--root", str(tmp_path)])
    assert result.exit_code == 0
    assert "s3cret" not in result.output
    assert json.loads(result.stdout)["properties"][0]["defaultValue"] == "******"

    # The emitted descriptor keeps the declared value
    result = runner.invoke(app, ["generate", str(tmp_path)])
    assert result.exit_code == 0
    assert "s3cret" in (tmp_path / "A" / "build" / "water" / "A-unspecified.water.json").read_text(encoding="utf-8")
