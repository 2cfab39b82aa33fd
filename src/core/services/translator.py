"""tsconfig -> swc option translation.

This module holds the whole mapping from TypeScript `compilerOptions` to an
swc configuration object. It is pure with respect to its explicit inputs: the
only side-effect is a lazy read of the nearest `package.json`, and only when
the module kind cannot be decided from the compiler options alone.

Absent values are `None` all the way through and are dropped on
serialization, so anything the caller passes in `swc_options` wins the merge.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from adapters.package_manifest import load_nearest_manifest
from core.domain.models import (
    SWC_SCHEMA_URL,
    CompilerOptions,
    JscConfig,
    ModuleConfig,
    ParserConfig,
    ReactConfig,
    SwcOptions,
    TransformConfig,
)
from core.interfaces.loaders import ManifestLoader
from core.merge import deep_merge, prune_none

logger = logging.getLogger(__name__)

DEFAULT_TARGET = "es3"

MODULE_TYPES = frozenset({"commonjs", "amd", "umd", "es6"})
ES6_MODULE_KINDS = frozenset({"es2015", "es2020", "es2022", "esnext", "node16", "nodenext", "none"})

# https://swc.rs/docs/migrating-from-tsc#usedefineforclassfields
LEGACY_CLASS_FIELD_TARGETS = frozenset(
    {
        "es3",
        "es5",
        "es6",
        "es2015",
        "es2016",
        "es2017",
        "es2018",
        "es2019",
        "es2020",
        "es2021",
    }
)
NO_CLASS_NAMES_TARGETS = frozenset({"es3", "es5", "es6", "es2015"})

DEFAULT_JSX_FACTORY = "React.createElement"
DEFAULT_JSX_FRAGMENT_FACTORY = "React.Fragment"
DEFAULT_JSX_IMPORT_SOURCE = "react"
AUTOMATIC_JSX_MODES = frozenset({"react-jsx", "react-jsxdev"})


def _lower(value: Any) -> Any:
    return value.lower() if isinstance(value, str) else value


def _is_one_of(value: Any, choices: frozenset[str]) -> bool:
    return isinstance(value, str) and value in choices


def _suppress(value: Any, default: Any) -> Any:
    """Drop `value` only when it is the default itself (`1` is not `True`)."""

    return None if type(value) is type(default) and value == default else value


def _flag(value: Any) -> Any:
    """Truthy -> the value itself, falsy -> absent (never an explicit False)."""

    return value if value else None


def resolve_target(target: Any) -> Any:
    """Normalize a tsconfig `target` into an swc `jsc.target`.

    Lower-cases the value and maps the `es6` alias to `es2015`. Unknown values
    pass through so newer ECMAScript versions keep working.
    """

    normalized = _lower(target)
    return "es2015" if normalized == "es6" else normalized


def resolve_module(
    module: Any,
    cwd: str | Path | None = None,
    *,
    manifest_loader: ManifestLoader = load_nearest_manifest,
) -> str:
    """Pick the swc `module.type` for a tsconfig `module` value.

    Order:
    1. Already an swc module type (commonjs, amd, umd, es6).
    2. An ES module kind (es2015, esnext, node16, nodenext, ...) -> es6.
    3. The nearest package.json declares `"type": "module"` -> es6.
    4. commonjs.
    """

    normalized = _lower(module)
    if _is_one_of(normalized, MODULE_TYPES):
        return normalized
    if _is_one_of(normalized, ES6_MODULE_KINDS):
        return "es6"

    manifest = manifest_loader(cwd)
    if manifest is not None and manifest.type == "module":
        logger.debug("package.json declares type=module; using es6 modules")
        return "es6"

    return "commonjs"


def _as_mapping(compiler_options: CompilerOptions | Mapping[str, Any] | None) -> Mapping[str, Any]:
    if compiler_options is None:
        return {}
    if isinstance(compiler_options, CompilerOptions):
        return compiler_options.to_tsconfig_dict()
    return compiler_options


def _overrides_to_dict(swc_options: SwcOptions | Mapping[str, Any] | None) -> dict[str, Any]:
    if swc_options is None:
        return {}
    if isinstance(swc_options, SwcOptions):
        return swc_options.model_dump(mode="json", by_alias=True, exclude_unset=True)
    return dict(swc_options)


def _build_react(options: Mapping[str, Any]) -> ReactConfig | None:
    jsx = _lower(options.get("jsx"))

    config = ReactConfig(
        development=True if jsx == "react-jsxdev" else None,
        pragma=_suppress(options.get("jsxFactory"), DEFAULT_JSX_FACTORY),
        pragma_frag=_suppress(options.get("jsxFragmentFactory"), DEFAULT_JSX_FRAGMENT_FACTORY),
        import_source=_suppress(options.get("jsxImportSource"), DEFAULT_JSX_IMPORT_SOURCE),
        runtime="automatic" if _is_one_of(jsx, AUTOMATIC_JSX_MODES) else None,
    )
    if not (
        config.development
        or config.pragma
        or config.pragma_frag
        or config.import_source
        or config.runtime
    ):
        return None
    return config


def build_swc_options(
    compiler_options: CompilerOptions | Mapping[str, Any] | None,
    cwd: str | Path | None = None,
    *,
    manifest_loader: ManifestLoader = load_nearest_manifest,
) -> SwcOptions:
    """Compute the swc options implied by `compiler_options` (no overrides)."""

    options = _as_mapping(compiler_options)

    target = options.get("target")
    if target is None:
        target = DEFAULT_TARGET
    normalized_target = _lower(target)
    jsx = _lower(options.get("jsx"))

    default_define_for_class_fields = not _is_one_of(normalized_target, LEGACY_CLASS_FIELD_TARGETS)
    use_define_for_class_fields = _suppress(
        options.get("useDefineForClassFields"),
        default_define_for_class_fields,
    )

    always_strict = options.get("alwaysStrict")
    no_implicit_use_strict = options.get("noImplicitUseStrict")

    return SwcOptions(
        schema_url=SWC_SCHEMA_URL,
        jsc=JscConfig(
            external_helpers=_flag(options.get("importHelpers")),
            target=resolve_target(target),
            parser=ParserConfig(
                syntax="typescript",
                tsx=True if jsx else None,
                decorators=_flag(options.get("experimentalDecorators")),
                dynamic_import=True,
            ),
            transform=TransformConfig(
                legacy_decorator=True,
                decorator_metadata=_flag(options.get("emitDecoratorMetadata")),
                react=_build_react(options),
                use_define_for_class_fields=use_define_for_class_fields,
            ),
            keep_class_names=None if _is_one_of(normalized_target, NO_CLASS_NAMES_TARGETS) else True,
            paths=options.get("paths"),
            base_url=options.get("baseUrl"),
        ),
        module=ModuleConfig(
            type=resolve_module(options.get("module"), cwd, manifest_loader=manifest_loader),
            strict_mode=None if always_strict or not no_implicit_use_strict else False,
            no_interop=None if options.get("esModuleInterop") else True,
        ),
        source_maps=_flag(options.get("sourceMap")),
    )


def translate(
    compiler_options: CompilerOptions | Mapping[str, Any] | None,
    swc_options: SwcOptions | Mapping[str, Any] | None = None,
    cwd: str | Path | None = None,
    *,
    manifest_loader: ManifestLoader = load_nearest_manifest,
) -> dict[str, Any]:
    """Translate tsconfig `compilerOptions` and merge caller overrides on top.

    Returns the `.swcrc` object as a JSON-ready dict. Override values win at
    every nested key; an override of `None` removes the computed key.
    """

    computed = build_swc_options(compiler_options, cwd, manifest_loader=manifest_loader)
    merged = deep_merge(computed.to_swcrc_dict(), _overrides_to_dict(swc_options))
    return prune_none(merged)
