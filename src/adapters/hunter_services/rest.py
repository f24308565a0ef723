"""Cliente REST genérico para un servicio de cazadores.

Ambos servicios (Mongo y Postgres) publican la misma superficie bajo
`/cazadores`; lo único que cambia es la base URL y el nombre.

Responsabilidad:
- Traducir una `HunterOperation` a la llamada HTTP correspondiente.
- Convertir cualquier fallo de red, status o decodificación en un `Failure`.
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import httpx

from core.domain.operations import HunterOperation, OperationKind
from core.domain.outcomes import BackendOutcome, Failure, FailureKind, Success
from core.interfaces.hunter_service import HunterService

logger = logging.getLogger(__name__)

RESOURCE = "/cazadores"


class RestHunterService(HunterService):
    """Servicio de cazadores accesible por HTTP/JSON."""

    def __init__(self, *, name: str, base_url: str, client: httpx.AsyncClient) -> None:
        self.name = name
        self.base_url = base_url.rstrip("/")
        self._client = client

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, base_url={self.base_url!r})"

    def _request_args(self, operation: HunterOperation) -> tuple[str, str, dict[str, Any]]:
        root = f"{self.base_url}{RESOURCE}"
        kind = operation.kind
        if kind is OperationKind.LIST:
            return "GET", root, {}
        if kind is OperationKind.FIND_BY_NAME:
            return "GET", f"{root}/buscar", {"params": {"nombre": operation.name}}
        if kind is OperationKind.CREATE:
            return "POST", root, {"json": operation.body}

        item_url = f"{root}/{quote(str(operation.record_id), safe='')}"
        if kind is OperationKind.UPDATE:
            return "PUT", item_url, {"json": operation.body}
        return "DELETE", item_url, {}

    async def execute(self, operation: HunterOperation) -> BackendOutcome:
        method, url, kwargs = self._request_args(operation)
        logger.debug("%s %s %s", self.name, method, url)

        try:
            response = await self._client.request(method, url, **kwargs)
        except httpx.TimeoutException as exc:
            return self._failure(FailureKind.TIMEOUT, f"timeout en {method} {url}", cause=exc)
        except httpx.RequestError as exc:
            return self._failure(FailureKind.NETWORK, f"error de red en {method} {url}: {exc}", cause=exc)

        if not response.is_success:
            return self._failure(
                FailureKind.STATUS,
                f"{method} {url} respondió HTTP {response.status_code}",
                status_code=response.status_code,
            )

        if not response.content:
            return Success(backend=self.name, payload=None)

        try:
            payload = response.json()
        except ValueError as exc:
            return self._failure(
                FailureKind.DECODE,
                f"{method} {url} devolvió un cuerpo que no es JSON",
                status_code=response.status_code,
                cause=exc,
            )
        return Success(backend=self.name, payload=payload)

    def _failure(
        self,
        kind: FailureKind,
        reason: str,
        *,
        status_code: int | None = None,
        cause: BaseException | None = None,
    ) -> Failure:
        return Failure(
            backend=self.name,
            kind=kind,
            reason=reason,
            status_code=status_code,
            cause=cause,
        )
