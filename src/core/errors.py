"""Errores del balanceador que llegan al cliente.

Solo cruzan la frontera del coordinador de fan-out los errores agregados
(entrada inválida, fallo total). Los fallos de un único servicio viajan como
`Failure`, nunca como excepción.
"""

from __future__ import annotations


class GatewayError(Exception):
    """Error con mensaje genérico y status HTTP asociado."""

    status_code: int = 500

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class InvalidRequestError(GatewayError):
    """Entrada del cliente inválida; se reporta antes de contactar servicios."""

    status_code = 400


class AllBackendsFailedError(GatewayError):
    """Ningún servicio respondió con éxito."""

    status_code = 502


class NotFoundInAnyBackendError(GatewayError):
    """Ningún servicio tiene el registro pedido (update/delete)."""

    status_code = 404
