"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan los adaptadores de carga.
- El Core depende de abstracciones, no de rutas de disco concretas.
"""

from core.interfaces.loaders import CompilerOptionsLoader, ManifestLoader

__all__ = ["CompilerOptionsLoader", "ManifestLoader"]
