"""Module: main."""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse

from petrecords.api.api import api_router
from petrecords.core.config import settings
from petrecords.core.errors import RecordError, StoreError, ValidationError
from petrecords.core.logging_config import setup_logging
from petrecords.db.gateway import Gateway
from petrecords.db.init_db import init_db

logger = logging.getLogger(__name__)


async def record_error_handler(request: Request, exc: RecordError) -> PlainTextResponse:
    if isinstance(exc, StoreError):
        logger.exception("%s %s failed", request.method, request.url.path, exc_info=exc)
    else:
        logger.info("%s %s -> %d %s", request.method, request.url.path, exc.status_code, exc.message)
    return PlainTextResponse(exc.message, status_code=exc.status_code)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> PlainTextResponse:
    # Malformed path ids land here; report them like any other bad input.
    return await record_error_handler(request, ValidationError())


def create_app(gateway: Gateway | None = None, create_tables: bool = True) -> FastAPI:
    setup_logging(settings.log_level)

    if gateway is None:
        from petrecords.db.session import gateway as default_gateway

        gateway = default_gateway

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if create_tables:
            init_db(app.state.gateway.engine)
        yield
        app.state.gateway.engine.dispose()

    app = FastAPI(title="Pet Records", version="0.1.0", lifespan=lifespan)
    app.state.gateway = gateway

    app.add_exception_handler(RecordError, record_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    app.include_router(api_router)
    return app


def run() -> None:
    uvicorn.run("petrecords.main:create_app", factory=True, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
