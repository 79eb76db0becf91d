from fastapi import Depends, Request

from shippo_adapter.core.config import Settings, get_settings
from shippo_adapter.integrations.base import OutputChannel, StaticDataStore
from shippo_adapter.services.shippo.client import ShippoClient
from shippo_adapter.services.shippo.trigger import ShippoTrigger


def get_shippo_client(settings: Settings = Depends(get_settings)) -> ShippoClient:
    """Dependency for a Shippo client using the configured token."""
    return ShippoClient(settings=settings)


def get_output_channel(request: Request) -> OutputChannel:
    return request.app.state.output_channel


def get_static_data(request: Request) -> StaticDataStore:
    return request.app.state.static_data


def get_trigger(
    request: Request,
    client: ShippoClient = Depends(get_shippo_client),
    static_data: StaticDataStore = Depends(get_static_data),
    settings: Settings = Depends(get_settings),
) -> ShippoTrigger:
    """The app keeps one trigger so its licensing notice is only logged once."""
    trigger = getattr(request.app.state, "trigger", None)
    if trigger is None:
        trigger = ShippoTrigger(
            client=client,
            static_data=static_data,
            webhook_url=settings.SHIPPO_WEBHOOK_URL,
            event=settings.SHIPPO_WEBHOOK_EVENT,
            is_test=settings.SHIPPO_WEBHOOK_IS_TEST,
        )
        request.app.state.trigger = trigger
    return trigger
