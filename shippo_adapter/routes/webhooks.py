import logging

from fastapi import APIRouter, Depends, HTTPException, Request

from shippo_adapter.dependencies import get_output_channel, get_trigger
from shippo_adapter.integrations.base import OutputChannel
from shippo_adapter.services.shippo.trigger import ShippoTrigger

router = APIRouter(tags=["webhooks"])

logger = logging.getLogger(__name__)


@router.post("/webhooks/shippo")
async def shippo_webhook(
    request: Request,
    trigger: ShippoTrigger = Depends(get_trigger),
    channel: OutputChannel = Depends(get_output_channel),
):
    """Receive a Shippo event and hand it to the output channel unchanged"""
    try:
        payload = await request.json()
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid JSON payload")

    items = trigger.receive(payload)
    await channel.emit(items)
    logger.info(f"Received Shippo webhook event ({len(items)} item(s))")

    return {"status": "received", "items": len(items)}
