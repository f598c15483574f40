from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from .config import APP_VERSION
from .log import get_logger
from .routers.hello import router as hello_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger: logging.Logger = app.state.logger

    try:
        yield
    finally:
        logger.info("Server stopped")


def create_app(logger: Optional[logging.Logger] = None) -> FastAPI:
    app = FastAPI(title="hello_server", version=APP_VERSION, lifespan=lifespan)

    # one handle for the whole process; every request reads it from app.state
    app.state.logger = logger if logger is not None else get_logger()

    app.include_router(hello_router)

    return app
