"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Describe los dos esquemas (tsconfig `compilerOptions` y `.swcrc`) con
  nombres Python y alias camelCase, sin acoplar el Core a la lectura de disco.
- `model_dump(by_alias=True, exclude_none=True)` produce directamente el JSON
  que consume swc: un campo ausente es `None` y no se serializa.

Nota:
- Estos modelos describen *qué* es cada configuración, no *cómo* se traduce.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, JsonValue
from pydantic.config import ConfigDict


SWC_SCHEMA_URL = "https://swc.rs/schema.json"


class CompilerOptions(BaseModel):
    """Subconjunto de `compilerOptions` de tsconfig que se traduce a swc.

    Todos los campos son opcionales: la ausencia tiene significado (activa los
    defaults de TypeScript). Cualquier otra opción se conserva como extra pero
    se ignora en la traducción.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    es_module_interop: bool | None = Field(
        default=None,
        alias="esModuleInterop",
        description="Interop CommonJS/ESM; si es falso swc recibe `module.noInterop`.",
    )
    source_map: bool | None = Field(
        default=None,
        alias="sourceMap",
        description="Genera source maps.",
    )
    import_helpers: bool | None = Field(
        default=None,
        alias="importHelpers",
        description="Importa helpers desde tslib en lugar de inlinearlos.",
    )
    experimental_decorators: bool | None = Field(
        default=None,
        alias="experimentalDecorators",
        description="Habilita decoradores legacy.",
    )
    emit_decorator_metadata: bool | None = Field(
        default=None,
        alias="emitDecoratorMetadata",
        description="Emite metadata de tipos para decoradores.",
    )
    target: str | None = Field(
        default=None,
        description="Versión ECMAScript de salida (p.ej. 'es2015', 'ESNext').",
    )
    module: str | None = Field(
        default=None,
        description="Sistema de módulos de salida (p.ej. 'CommonJS', 'NodeNext').",
    )
    jsx: str | None = Field(
        default=None,
        description="Modo JSX ('preserve', 'react', 'react-jsx', 'react-jsxdev', ...).",
    )
    jsx_factory: str | None = Field(
        default=None,
        alias="jsxFactory",
        description="Función pragma para JSX clásico.",
    )
    jsx_fragment_factory: str | None = Field(
        default=None,
        alias="jsxFragmentFactory",
        description="Factory de fragmentos para JSX clásico.",
    )
    jsx_import_source: str | None = Field(
        default=None,
        alias="jsxImportSource",
        description="Módulo desde el que se importan los helpers del runtime automático.",
    )
    always_strict: bool | None = Field(
        default=None,
        alias="alwaysStrict",
        description="Emite 'use strict' en cada archivo.",
    )
    no_implicit_use_strict: bool | None = Field(
        default=None,
        alias="noImplicitUseStrict",
        description="No emite 'use strict' implícito en módulos.",
    )
    paths: dict[str, list[str]] | None = Field(
        default=None,
        description="Tabla de path mapping (se copia tal cual).",
    )
    base_url: str | None = Field(
        default=None,
        alias="baseUrl",
        description="Directorio base para resolver módulos no relativos.",
    )
    use_define_for_class_fields: bool | None = Field(
        default=None,
        alias="useDefineForClassFields",
        description="Semántica [[Define]] para class fields.",
    )

    def to_tsconfig_dict(self) -> dict[str, Any]:
        """Devuelve el objeto `compilerOptions` con las claves camelCase originales."""

        return self.model_dump(by_alias=True, exclude_none=True)


class ReactConfig(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    development: bool | None = None
    pragma: JsonValue = None
    pragma_frag: JsonValue = Field(default=None, alias="pragmaFrag")
    import_source: JsonValue = Field(default=None, alias="importSource")
    runtime: str | None = Field(
        default=None,
        description="'automatic' para el runtime JSX nuevo; ausente equivale a 'classic'.",
    )


class ParserConfig(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    syntax: str = Field(default="typescript")
    tsx: bool | None = None
    decorators: JsonValue = None
    dynamic_import: bool | None = Field(default=None, alias="dynamicImport")


class TransformConfig(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    legacy_decorator: bool | None = Field(default=None, alias="legacyDecorator")
    decorator_metadata: JsonValue = Field(default=None, alias="decoratorMetadata")
    react: ReactConfig | None = None
    use_define_for_class_fields: JsonValue = Field(
        default=None,
        alias="useDefineForClassFields",
    )


class JscConfig(BaseModel):
    """Sección `jsc` de `.swcrc` (parser, transform y target)."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    external_helpers: JsonValue = Field(default=None, alias="externalHelpers")
    target: Any = Field(
        default=None,
        description="JscTarget normalizado (minúsculas, 'es6' -> 'es2015').",
    )
    parser: ParserConfig | None = None
    transform: TransformConfig | None = None
    keep_class_names: bool | None = Field(default=None, alias="keepClassNames")
    paths: Any = None
    base_url: Any = Field(default=None, alias="baseUrl")


class ModuleConfig(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    type: str | None = Field(
        default=None,
        description="Uno de 'commonjs', 'amd', 'umd', 'es6'.",
    )
    strict_mode: bool | None = Field(default=None, alias="strictMode")
    no_interop: bool | None = Field(default=None, alias="noInterop")


class SwcOptions(BaseModel):
    """Configuración completa de swc (contenido de `.swcrc`).

    Los campos en `None` significan "ausente": no se serializan y cualquier
    override del usuario gana en el merge.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    schema_url: str | None = Field(
        default=None,
        alias="$schema",
        description="Puntero al JSON schema de swc.",
    )
    jsc: JscConfig | None = None
    module: ModuleConfig | None = None
    source_maps: Any = Field(
        default=None,
        alias="sourceMaps",
        description="true/false o 'inline'.",
    )

    def to_swcrc_dict(self) -> dict[str, Any]:
        """Serializa a JSON de swc (camelCase, sin campos ausentes)."""

        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class PackageManifest(BaseModel):
    """Vista de solo lectura de `package.json`.

    Solo se consulta `type`; el resto del manifest se conserva como extra.
    """

    model_config = ConfigDict(extra="allow")

    name: str | None = None
    type: str | None = Field(
        default=None,
        description="'module' para paquetes ESM; ausente o 'commonjs' en otro caso.",
    )
    tsconfig: str | None = Field(
        default=None,
        description="Ruta del tsconfig que exporta el paquete (presets `@tsconfig/*`).",
    )
