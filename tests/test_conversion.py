"""Tests for the end-to-end convert() entry point."""

from __future__ import annotations

from conftest import StubManifestLoader, write_json
from core.services.conversion import convert


class TestConvert:
    """Tests for convert()."""

    def test_project_on_disk(self, tmp_path):
        write_json(tmp_path / "package.json", {"type": "module"})
        write_json(
            tmp_path / "tsconfig.base.json",
            {"compilerOptions": {"target": "ES2022", "experimentalDecorators": True}},
        )
        write_json(
            tmp_path / "tsconfig.json",
            {
                "extends": "./tsconfig.base.json",
                "compilerOptions": {"jsx": "react-jsx", "sourceMap": True, "esModuleInterop": True},
            },
        )

        result = convert("tsconfig.json", tmp_path)

        assert result["jsc"]["target"] == "es2022"
        assert result["jsc"]["keepClassNames"] is True
        assert result["jsc"]["parser"] == {
            "syntax": "typescript",
            "tsx": True,
            "decorators": True,
            "dynamicImport": True,
        }
        assert result["jsc"]["transform"]["react"] == {"runtime": "automatic"}
        assert result["module"] == {"type": "es6"}
        assert result["sourceMaps"] is True

    def test_missing_tsconfig_uses_defaults(self, project):
        result = convert("tsconfig.json", project)

        assert result["jsc"]["target"] == "es3"
        assert result["module"] == {"type": "commonjs", "noInterop": True}

    def test_overrides(self, project):
        write_json(project / "tsconfig.json", {"compilerOptions": {"sourceMap": True}})

        result = convert("tsconfig.json", project, {"sourceMaps": "inline", "minify": True})

        assert result["sourceMaps"] == "inline"
        assert result["minify"] is True

    def test_injected_loaders(self, tmp_path):
        calls = []

        def config_loader(filename="tsconfig.json", cwd=None):
            calls.append((filename, cwd))
            return {"module": None, "target": "es2018"}

        manifest_loader = StubManifestLoader()
        result = convert(
            "tsconfig.app.json",
            tmp_path,
            config_loader=config_loader,
            manifest_loader=manifest_loader,
        )

        assert calls == [("tsconfig.app.json", tmp_path)]
        assert manifest_loader.calls == [tmp_path]
        assert result["jsc"]["target"] == "es2018"
        assert result["module"]["type"] == "commonjs"
