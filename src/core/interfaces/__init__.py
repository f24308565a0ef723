"""Interfaces/abstracciones del Core.

Por qué:
- Define el contrato (Protocol) que implementa cada cliente de servicio.
- El coordinador de fan-out depende de la abstracción, no de httpx.
"""
