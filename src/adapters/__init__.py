"""Adaptadores de I/O (clientes HTTP hacia los servicios de cazadores)."""
