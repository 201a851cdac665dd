"""Profiles API application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import ORJSONResponse
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from api.exception_handlers import setup_exception_handlers
from api.middleware.logging import RequestLoggingMiddleware
from api.middleware.request_id import RequestIDMiddleware
from api.middleware.security import SecurityHeadersMiddleware
from api.routes.health import router as health_router
from api.v1 import router as v1_router
from core.config import settings
from core.logging import setup_logging
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter, rate_limit_exceeded_handler
from infrastructure.database.session import engine

setup_logging()

logger = structlog.get_logger()

DESCRIPTION = f"""\
## Profiles

Public profiles with globally unique screen names. Anyone may read a
profile; the owning user id is only returned to the owner.

### Credentials
Sent as headers, never in the body:
```
X-Token-Id / X-Token-Key    API token (master token for writes)
X-User-Id / X-User-Pass     password login, used to issue tokens
X-Recaptcha                 reCAPTCHA response, used to register
```

### Rate Limits
- Reads: {READ_LIMIT}
- Writes: {WRITE_LIMIT}
"""

OPENAPI_TAGS = [
    {"name": "health", "description": "Liveness and readiness"},
    {"name": "profiles", "description": "Profile lookup and editing"},
    {"name": "users", "description": "User registration"},
    {"name": "tokens", "description": "Token issuance"},
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    logger.info("startup", app=settings.app_name, environment=settings.app_env)
    if not settings.recaptcha_secret_key:
        logger.warning("recaptcha_secret_missing", detail="user registration will be rejected")
    yield
    await engine.dispose()
    logger.info("shutdown")


def _add_middleware(app: FastAPI) -> None:
    """Install middleware. Starlette runs the last one added first."""
    app.add_middleware(SlowAPIMiddleware)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(GZipMiddleware, minimum_size=1000)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT"],
        allow_headers=["*"],
    )


def create_app() -> FastAPI:
    """Build the Profiles API application."""
    app = FastAPI(
        lifespan=lifespan,
        default_response_class=ORJSONResponse,
        title=settings.app_name,
        description=DESCRIPTION,
        version=settings.app_version,
        debug=settings.debug,
        openapi_tags=OPENAPI_TAGS,
    )

    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    _add_middleware(app)
    setup_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(v1_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=not settings.is_production,
    )
