"""Servicios del Core.

Por qué:
- Aquí vive el protocolo de fan-out/fusión, independiente de FastAPI y Typer.
"""
