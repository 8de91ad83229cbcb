"""
Nutrition API - local HTTP server

Serves the same router the Lambda handler uses (api.router.handler) over
FastAPI/uvicorn, so the API can be run and exercised without a gateway.
"""

from fastapi import FastAPI, Request
from starlette.responses import Response
import logging
import uvicorn
from contextlib import asynccontextmanager
import anyio

from api.events import Request as RouterRequest
from api.middleware import RequestLoggingMiddleware
from api.router import build_router
from app.config import settings
from domain.models import init_database

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()), format=settings.log_format
)
_logger = logging.getLogger("nutrition.main")

HTTP_METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH", "HEAD"]


@asynccontextmanager
async def lifespan(app: FastAPI):
    _logger.info(f"Starting {settings.app_name} in {settings.environment.value} mode")
    # Run blocking init in a thread to avoid blocking the event loop
    await anyio.to_thread.run_sync(init_database)
    _logger.info("Database initialization succeeded")
    try:
        yield
    finally:
        _logger.info(f"Shutting down {settings.app_name}")


app = FastAPI(
    title=settings.api_title,
    version=settings.app_version,
    lifespan=lifespan,
    debug=settings.debug,
    openapi_url=None,
    docs_url=None,
    redoc_url=None,
)
app.add_middleware(RequestLoggingMiddleware)
app.state.router = build_router()


@app.api_route("/{path:path}", methods=HTTP_METHODS)
async def dispatch(path: str, request: Request) -> Response:
    """Hand every request to the router and replay its envelope as an HTTP response"""
    body = await request.body()
    router_request = RouterRequest(
        method=request.method,
        path=request.url.path,
        query_params=dict(request.query_params),
        body=body.decode("utf-8") if body else None,
        headers=dict(request.headers),
        request_id=getattr(request.state, "request_id", None),
    )
    result = await anyio.to_thread.run_sync(request.app.state.router.dispatch, router_request)
    return Response(
        content=result.get("body") or "",
        status_code=result["statusCode"],
        headers=result.get("headers") or {},
    )


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development(),
        log_level=settings.log_level.lower(),
    )
