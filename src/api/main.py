"""
FastAPI app del balanceador de cazadores.

Presenta un único recurso `cazadores` respaldado por dos servicios
independientes (Mongo y Postgres) bajo el prefijo `/balanceador`.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from adapters.http_client import build_async_client
from adapters.hunter_services import build_hunter_services
from api.routes import cazadores
from core.config import AppSettings
from core.errors import GatewayError
from core.log_setup import configure_logging
from core.services.hunters_gateway import HuntersGateway

logger = logging.getLogger(__name__)

SERVICE_NAME = "Balanceador de cazadores"
VERSION = "0.1.0"


async def gateway_error_handler(request: Request, exc: GatewayError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


def create_app(settings: AppSettings | None = None, *, gateway: HuntersGateway | None = None) -> FastAPI:
    """Construye la app.

    Sin `gateway`, el lifespan crea un `httpx.AsyncClient` compartido y los
    clientes de cada servicio a partir de `settings`. Los tests inyectan uno
    propio.
    """
    settings = settings or AppSettings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup and shutdown events."""
        if gateway is not None:
            app.state.gateway = gateway
            yield
            return

        logger.info("Iniciando balanceador: %s", settings.service_urls())
        async with build_async_client(settings) as client:
            app.state.gateway = HuntersGateway(
                build_hunter_services(settings, client=client),
                identity_fields=settings.identity_fields,
            )
            yield
        # Shutdown: las llamadas en vuelo se abandonan al cerrar el cliente.
        logger.info("Balanceador detenido")

    app = FastAPI(
        title=SERVICE_NAME,
        description="API que unifica los servicios de cazadores de Mongo y Postgres",
        version=VERSION,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", "X-Requested-With"],
    )
    app.add_exception_handler(GatewayError, gateway_error_handler)

    app.include_router(cazadores.router, prefix=settings.api_prefix, tags=["Balanceador"])

    @app.get("/")
    async def root():
        """Health check endpoint."""
        return {
            "status": "ok",
            "version": VERSION,
            "service": SERVICE_NAME,
            "backends": settings.service_urls(),
        }

    return app


def build_app() -> FastAPI:
    """Factory para `uvicorn --factory api.main:build_app`."""
    settings = AppSettings()
    configure_logging(settings.log_level)
    return create_app(settings)
