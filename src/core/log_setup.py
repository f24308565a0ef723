"""Logging del balanceador (stdlib `logging` + `rich`)."""

from __future__ import annotations

import logging

from rich.logging import RichHandler

_HANDLER_NAME = "balanceador-rich"


def configure_logging(level: str = "INFO") -> None:
    """Instala un `RichHandler` en el root logger (idempotente)."""

    root = logging.getLogger()
    root.setLevel(level)
    if any(handler.get_name() == _HANDLER_NAME for handler in root.handlers):
        return

    handler = RichHandler(rich_tracebacks=True, show_path=False)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    root.addHandler(handler)
    # httpx registra cada request en INFO; solo interesan los fallos.
    logging.getLogger("httpx").setLevel(logging.WARNING)
