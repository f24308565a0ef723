"""Core del balanceador: dominio, contratos y servicios (sin HTTP ni CLI)."""
