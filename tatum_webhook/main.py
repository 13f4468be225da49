import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from tatum_webhook.api.routers import health, webhook
from tatum_webhook.config import ReceiverSettings
from tatum_webhook.logging_config import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    logger.info("Webhook receiver started")
    yield
    logger.info("Webhook receiver stopped")


def create_app(settings: ReceiverSettings | None = None) -> FastAPI:
    if settings is None:
        settings = ReceiverSettings()
    settings.require()

    app = FastAPI(title="Tatum Webhook Receiver", lifespan=lifespan)
    app.state.settings = settings

    app.include_router(health.router)
    app.include_router(webhook.router)
    return app


def run() -> None:
    settings = ReceiverSettings()
    setup_logging(settings.log_level)
    app = create_app(settings)
    uvicorn.run(
        app,
        host=settings.receiver_host,
        port=settings.receiver_port,
        log_config=None,
    )


if __name__ == "__main__":
    run()
