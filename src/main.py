"""
FastAPI Application

Also the bootstrap file of the test harness: executing this file yields a new
``app`` with its own container every time.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.logging.loguru_io import Logger


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Wire the app's container on startup, unwire it on shutdown."""
    Logger.base.info('🚀 [User Directory] Starting up...')

    container = app.state.container
    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [User Directory] Dependency injection wired')

    yield

    Logger.base.info('🛑 [User Directory] Shutting down...')
    container.unwire()
    container.reset_singletons()
    Logger.base.info('👋 [User Directory] Shutdown complete')


app = create_app(lifespan=lifespan)


@app.get('/', include_in_schema=False)
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')
