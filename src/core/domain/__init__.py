"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras (Pydantic v2) de ambos esquemas.
- El dominio no conoce disco, CLI ni swc: solo los conceptos de configuración.
"""
