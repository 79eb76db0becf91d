# shippo_adapter/main.py

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from shippo_adapter.core.config import get_settings
from shippo_adapter.core.logging_config import configure_logging
from shippo_adapter.integrations.base import OutputChannel, StaticDataStore
from shippo_adapter.integrations.host import JsonFileStaticData, ListOutputChannel
from shippo_adapter.routes import health
from shippo_adapter.routes.webhooks import router as webhook_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(get_settings().LOG_LEVEL)
    yield


def create_app(
    output_channel: Optional[OutputChannel] = None,
    static_data: Optional[StaticDataStore] = None,
) -> FastAPI:
    settings = get_settings()
    app = FastAPI(
        title="Shippo Adapter",
        lifespan=lifespan
    )

    app.state.output_channel = output_channel or ListOutputChannel()
    app.state.static_data = static_data or JsonFileStaticData(settings.SHIPPO_STATIC_DATA_FILE)

    app.include_router(webhook_router)
    app.include_router(health.router)
    return app


app = create_app()
