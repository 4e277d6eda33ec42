from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from routers import greeting
from config.settings import settings
from config.logging_config import setup_logging

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Error handlers
# -----------------------------------------------------------------------------
def register_error_handlers(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def on_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.warning("validation error on %s: %s", request.url.path, exc.errors())
        return JSONResponse(status_code=422, content={"detail": jsonable_encoder(exc.errors())})

    @app.exception_handler(Exception)
    async def on_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("unhandled error on %s", request.url.path)
        return JSONResponse(status_code=500, content={"detail": "Internal Server Error"})


# -----------------------------------------------------------------------------
# App factory
# -----------------------------------------------------------------------------
def create_app() -> FastAPI:
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.APP_TITLE,
        description="Greeting endpoint returning HAL hypermedia links.",
        version="0.1.0",
    )

    register_error_handlers(app)

    # -------------------------------------------------------------------------
    # Routers to public RESTful resources
    # -------------------------------------------------------------------------
    app.include_router(router=greeting.router)

    logger.info("application created (environment=%s)", settings.ENVIRONMENT)
    return app


app = create_app()

# -----------------------------------------------------------------------------
# Entrypoint for `python main.py`
# -----------------------------------------------------------------------------
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
        proxy_headers=settings.TRUST_FORWARDED_HEADERS,
        forwarded_allow_ips="*" if settings.TRUST_FORWARDED_HEADERS else None,
    )
