"""Tests for the Typer CLI (convert, show, doctor)."""

from __future__ import annotations

import json

import pytest
import typer
from typer.testing import CliRunner

from cli.main import app
from cli.overrides import build_overrides
from conftest import write_json

runner = CliRunner()


@pytest.fixture
def ts_project(project):
    write_json(
        project / "tsconfig.json",
        {"compilerOptions": {"target": "ES2020", "module": "CommonJS", "esModuleInterop": True}},
    )
    return project


class TestBuildOverrides:
    """Tests for --set parsing."""

    def test_dotted_paths_and_json_values(self):
        overrides = build_overrides(
            ["jsc.minify.compress=true", "module.type=amd", "jsc.loose=false", "env={\"mode\": \"usage\"}"]
        )

        assert overrides == {
            "jsc": {"minify": {"compress": True}, "loose": False},
            "module": {"type": "amd"},
            "env": {"mode": "usage"},
        }

    def test_later_assignment_wins(self):
        assert build_overrides(["a.b=1", "a=2"]) == {"a": 2}

    @pytest.mark.parametrize("raw", ["no-equals", "=value", "jsc..target=es5"])
    def test_invalid(self, raw):
        with pytest.raises(typer.BadParameter):
            build_overrides([raw])


class TestConvertCommand:
    """Tests for `convert`."""

    def test_prints_json(self, ts_project):
        result = runner.invoke(app, ["convert", "--cwd", str(ts_project)])

        assert result.exit_code == 0, result.output
        options = json.loads(result.stdout)
        assert options["jsc"]["target"] == "es2020"
        assert options["module"] == {"type": "commonjs"}

    def test_set_overrides(self, ts_project):
        result = runner.invoke(
            app,
            ["convert", "-c", str(ts_project), "-s", "module.type=umd", "-s", "sourceMaps=\"inline\""],
        )

        assert result.exit_code == 0, result.output
        options = json.loads(result.stdout)
        assert options["module"]["type"] == "umd"
        assert options["sourceMaps"] == "inline"

    def test_swcrc_overrides(self, ts_project, tmp_path):
        swcrc = tmp_path / "base.swcrc"
        swcrc.write_text('{\n  // existing\n  "jsc": {"target": "es5"},\n}\n', encoding="utf-8")

        result = runner.invoke(app, ["convert", "-c", str(ts_project), "--swcrc", str(swcrc)])

        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout)["jsc"]["target"] == "es5"

    def test_writes_output_file(self, ts_project):
        out = ts_project / "build" / "swc.json"

        result = runner.invoke(app, ["convert", "-c", str(ts_project), "-o", str(out)])

        assert result.exit_code == 0, result.output
        written = out.read_text(encoding="utf-8")
        assert written.endswith("\n")
        assert json.loads(written)["jsc"]["target"] == "es2020"

    def test_output_directory_uses_swcrc_name(self, ts_project):
        result = runner.invoke(app, ["convert", "-c", str(ts_project), "-o", str(ts_project)])

        assert result.exit_code == 0, result.output
        assert (ts_project / ".swcrc").is_file()

    def test_custom_filename(self, project):
        write_json(project / "tsconfig.build.json", {"compilerOptions": {"target": "es6"}})

        result = runner.invoke(
            app, ["convert", "-c", str(project), "-f", "tsconfig.build.json"]
        )

        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout)["jsc"]["target"] == "es2015"

    def test_broken_tsconfig_exits_with_error(self, project):
        (project / "tsconfig.json").write_text("{ broken", encoding="utf-8")

        result = runner.invoke(app, ["convert", "-c", str(project)])

        assert result.exit_code == 1
        assert "Error" in result.output

    def test_missing_extends_exits_with_error(self, project):
        write_json(project / "tsconfig.json", {"extends": "./missing.json"})

        result = runner.invoke(app, ["convert", "-c", str(project)])

        assert result.exit_code == 1
        assert "missing.json" in result.output

    def test_malformed_extends_exits_with_error(self, project):
        write_json(project / "tsconfig.json", {"extends": 5})

        result = runner.invoke(app, ["convert", "-c", str(project)])

        assert result.exit_code == 1
        assert "Error" in result.output

    def test_bad_set_is_usage_error(self, ts_project):
        result = runner.invoke(app, ["convert", "-c", str(ts_project), "-s", "oops"])

        assert result.exit_code == 2


class TestShowCommand:
    """Tests for `show`."""

    def test_renders_table(self, ts_project):
        result = runner.invoke(app, ["show", "-c", str(ts_project)])

        assert result.exit_code == 0, result.output
        assert "jsc.parser.syntax" in result.output
        assert "typescript" in result.output


class TestDoctorCommand:
    """Tests for `doctor`."""

    def test_run_ok(self, ts_project):
        result = runner.invoke(app, ["doctor", "run", "-c", str(ts_project)])

        assert result.exit_code == 0, result.output

    def test_run_reports_broken_manifest(self, tmp_path):
        (tmp_path / "package.json").write_text("nope", encoding="utf-8")

        result = runner.invoke(app, ["doctor", "run", "-c", str(tmp_path)])

        assert result.exit_code == 1

    def test_settings(self):
        result = runner.invoke(app, ["doctor", "settings"])

        assert result.exit_code == 0, result.output
        assert "tsconfig_filename" in result.output

    def test_run_reports_non_object_compiler_options(self, project):
        write_json(project / "tsconfig.json", {"compilerOptions": 3})

        result = runner.invoke(app, ["doctor", "run", "-c", str(project)])

        assert result.exit_code == 1
        assert not isinstance(result.exception, TypeError)
