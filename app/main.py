"""FastAPI entry point."""
import logging
import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

from app.api.v1.router import router as api_router
from src.config.log_config import configure_logging
from src.config.settings import settings

configure_logging()

logger = logging.getLogger(__name__)

DOCS_PATHS = ("/api/docs", "/api/redoc", "/api/openapi.json")


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Add security headers to all responses."""

    # Swagger UI / ReDoc load their assets from a CDN
    DOCS_CSP = (
        "default-src 'self'; "
        "script-src 'self' 'unsafe-inline' https://cdn.jsdelivr.net; "
        "style-src 'self' 'unsafe-inline' https://cdn.jsdelivr.net; "
        "img-src 'self' data: https://cdn.jsdelivr.net https://fastapi.tiangolo.com; "
        "font-src 'self' https://cdn.jsdelivr.net; "
        "frame-ancestors 'none'"
    )

    # JSON only, nothing to load
    JSON_CSP = "default-src 'none'; frame-ancestors 'none'"

    HEADERS = {
        "X-Content-Type-Options": "nosniff",
        "X-Frame-Options": "DENY",
        "Referrer-Policy": "no-referrer",
    }

    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        docs = request.url.path in DOCS_PATHS
        response.headers["Content-Security-Policy"] = self.DOCS_CSP if docs else self.JSON_CSP
        response.headers.update(self.HEADERS)
        return response


app = FastAPI(
    title="Meta Tag Checker API",
    description="""
API for analyzing the SEO and social meta tags of a web page.

## Features

- **Category scores**: title, meta description, Open Graph, Twitter Card
- **Issues**: missing or badly sized tags, with documentation links
- **Recommendations**: prioritized fixes with example markup
- **History**: recently analyzed sites, cached for one hour per URL
""",
    version="1.0.0",
    docs_url=DOCS_PATHS[0],
    redoc_url=DOCS_PATHS[1],
    openapi_url=DOCS_PATHS[2],
)


@app.middleware("http")
async def log_and_expose_limits(request: Request, call_next):
    """Log each request and echo the caller's rate limit state."""
    start = time.perf_counter()
    response = await call_next(request)
    elapsed = time.perf_counter() - start
    logger.info(
        "%s %s -> %d (%.3fs)",
        request.method, request.url.path, response.status_code, elapsed,
    )

    limit_state = getattr(request.state, "rate_limit", None)
    if limit_state is not None:
        response.headers.update(limit_state.headers())
    return response


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.api.cors_origins,
    allow_credentials="*" not in settings.api.cors_origins,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)
app.add_middleware(SecurityHeadersMiddleware)

app.include_router(api_router, prefix="/api/v1")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
