# src/product_api/main.py
import logging
from datetime import UTC, datetime

import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from product_api.api import products
from product_api.api.errors import register_exception_handlers
from product_api.core.config import get_settings
from product_api.core.metrics import REQUEST_COUNT

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

WELCOME_TEXT = "Welcome to the Product API! Go to /api/products to see all products."


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        target = request.url.path
        if request.url.query:
            target = f"{target}?{request.url.query}"
        logger.info("[%s] %s %s", datetime.now(UTC).isoformat(), request.method, target)
        return await call_next(request)


class MetricsMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        response = await call_next(request)
        REQUEST_COUNT.labels(
            method=request.method,
            path=request.url.path,
            status_code=str(response.status_code),
        ).inc()
        return response


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

register_exception_handlers(app)

# Metrics Middleware
app.add_middleware(MetricsMiddleware)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["X-API-Key", "Content-Type"],
)

# Request logging
app.add_middleware(RequestLoggingMiddleware)

app.include_router(products.router)


@app.get("/", response_class=PlainTextResponse, tags=["Root"])
async def welcome() -> str:
    return WELCOME_TEXT


@app.get("/healthz", tags=["Health"])
async def health_check() -> dict[str, str]:
    return {"status": "ok", "version": settings.app_version}


@app.get("/readyz", tags=["Health"])
async def readiness_check() -> dict[str, str]:
    return {"status": "ready"}


@app.get("/metrics", tags=["Monitoring"])
async def metrics_endpoint() -> Response:
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)


def run() -> None:
    """Console entry point: serves the app with uvicorn on the configured port."""
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
