"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from tradesec_gateway.api.middleware import RequestContextMiddleware
from tradesec_gateway.api.v1 import payments, receivables
from tradesec_gateway.infrastructure.observability.logging import setup_logging
from tradesec_gateway.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="TradeSec Gateway",
        description="Receivable submission and security checkout forms",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Request ID + latency for every route
    app.add_middleware(RequestContextMiddleware)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(receivables.router, prefix="/v1", tags=["receivables"])
    app.include_router(payments.router, prefix="/v1", tags=["payments"])

    return app


app = create_app()
