"""Modelos y entidades del dominio.

Por qué:
- Aquí viven los tipos puros e inmutables (Pydantic v2, Enum).
- El dominio no conoce `subprocess`, CLI ni variables de entorno.
"""
