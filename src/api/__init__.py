"""API HTTP del balanceador (FastAPI)."""
