"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos del balanceador: cazadores, operaciones
  y resultados etiquetados de cada servicio.
- El dominio no conoce HTTP, CLI ni a los servicios concretos.
"""
