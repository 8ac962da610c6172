"""FastAPI application factory"""

import logging
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from nwfee_gateway.api.middleware import RequestIDMiddleware, MetricsMiddleware
from nwfee_gateway.api.v1 import fees, ruleset
from nwfee_gateway.domain.exceptions import RulesetNotLoadedError
from nwfee_gateway.infrastructure.observability.logging import setup_logging
from nwfee_gateway.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Network Fee Gateway",
        description="Card network assessment fee calculation service",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    @app.exception_handler(RulesetNotLoadedError)
    async def ruleset_unavailable(request: Request, exc: RulesetNotLoadedError):
        logging.warning(f"Fee ruleset unavailable: {exc}")
        return JSONResponse(status_code=503, content={"detail": "Fee ruleset unavailable"})

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(fees.router, prefix="/v1", tags=["fees"])
    app.include_router(ruleset.router, prefix="/v1", tags=["ruleset"])

    return app


app = create_app()
