"""Integration tests for the command line interface."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from nsresolve.cli import app

runner = CliRunner()


@pytest.fixture
def config_path(temp_dir: Path) -> Path:
    """Sources file pointing at a small source tree."""
    src = temp_dir / "src"
    (src / "Models").mkdir(parents=True)
    (src / "Config.py").write_text("")
    (src / "Models" / "User.py").write_text("")

    path = temp_dir / "nsresolve.yaml"
    path.write_text(
        """
sources:
  - name: app
    class_map:
      App.Kernel: kernel.py
    prefixes:
      App: src
"""
    )
    return path


class TestShow:
    """Tests for the show command."""

    def test_json(self, config_path: Path) -> None:
        result = runner.invoke(app, ["show", "App", "--config", str(config_path), "--json"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["name"] == "App"
        assert data["parent"] == ""
        assert [c["name"] for c in data["classes"]] == ["Kernel", "Config"]
        assert data["classes"][1]["qualified_name"] == "App.Config"
        assert data["classes"][1]["location"].endswith("Config.py")
        assert data["namespaces"] == [{"name": "Models", "qualified_name": "App.Models"}]

    def test_text(self, config_path: Path) -> None:
        result = runner.invoke(app, ["show", "App.Models", "--config", str(config_path)])

        assert result.exit_code == 0
        assert "App.Models" in result.output
        assert "User" in result.output

    def test_empty_namespace(self, config_path: Path) -> None:
        result = runner.invoke(app, ["show", "Nothing", "--config", str(config_path)])

        assert result.exit_code == 0
        assert "Nothing found" in result.output

    def test_bad_config(self, temp_dir: Path) -> None:
        bad = temp_dir / "bad.yaml"
        bad.write_text("sources: [unclosed")

        result = runner.invoke(app, ["show", "App", "--config", str(bad)])
        assert result.exit_code == 1


class TestTree:
    """Tests for the tree command."""

    def test_json(self, config_path: Path) -> None:
        result = runner.invoke(app, ["tree", "App", "--config", str(config_path), "--json"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["qualified_name"] == "App"
        assert data["classes"] == ["Kernel", "Config"]
        assert data["children"][0]["qualified_name"] == "App.Models"
        assert data["children"][0]["classes"] == ["User"]

    def test_depth_limit(self, config_path: Path) -> None:
        args = ["tree", "App", "--config", str(config_path), "--json", "--depth", "0"]
        result = runner.invoke(app, args)

        assert result.exit_code == 0
        assert json.loads(result.output)["children"] == []

    def test_text(self, config_path: Path) -> None:
        result = runner.invoke(app, ["tree", "App", "--config", str(config_path)])

        assert result.exit_code == 0
        assert "Models" in result.output
        assert "User" in result.output
        assert "Classes: 2 | Namespaces: 1" in result.output
