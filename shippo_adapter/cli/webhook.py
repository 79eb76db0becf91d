# shippo_adapter/cli/webhook.py
import asyncio
import logging
import sys

import click

from shippo_adapter.core.config import get_settings
from shippo_adapter.core.enums import WebhookEvent
from shippo_adapter.integrations.host import JsonFileStaticData
from shippo_adapter.services.shippo.client import ShippoClient, check_credentials
from shippo_adapter.services.shippo.trigger import ShippoTrigger

logger = logging.getLogger(__name__)

EVENT_CHOICE = click.Choice([event.value for event in WebhookEvent])


def build_trigger(url=None, event=None) -> ShippoTrigger:
    settings = get_settings()
    return ShippoTrigger(
        client=ShippoClient(settings=settings),
        static_data=JsonFileStaticData(settings.SHIPPO_STATIC_DATA_FILE),
        webhook_url=url or settings.SHIPPO_WEBHOOK_URL,
        event=event or settings.SHIPPO_WEBHOOK_EVENT,
        is_test=settings.SHIPPO_WEBHOOK_IS_TEST,
    )


@click.group()
def webhook():
    """Manage the Shippo webhook subscription for the receiver"""


@webhook.command("check")
@click.option("--url", default=None, help="Receiver URL (defaults to SHIPPO_WEBHOOK_URL)")
@click.option("--event", type=EVENT_CHOICE, default=None, help="Shippo event (defaults to SHIPPO_WEBHOOK_EVENT)")
def check(url, event):
    """Look for an existing subscription and remember its id"""
    trigger = build_trigger(url, event)
    if asyncio.run(trigger.check_exists()):
        click.echo(f"Webhook exists: {trigger.webhook_id}")
    else:
        click.echo("No matching webhook found")
        sys.exit(1)


@webhook.command("create")
@click.option("--url", default=None, help="Receiver URL (defaults to SHIPPO_WEBHOOK_URL)")
@click.option("--event", type=EVENT_CHOICE, default=None, help="Shippo event (defaults to SHIPPO_WEBHOOK_EVENT)")
def create(url, event):
    """Register the receiver URL with Shippo"""
    trigger = build_trigger(url, event)
    if not trigger.webhook_url:
        click.echo("Error: no webhook URL given (use --url or SHIPPO_WEBHOOK_URL)", err=True)
        sys.exit(1)

    if asyncio.run(trigger.create()):
        click.echo(f"Webhook created: {trigger.webhook_id}")
    else:
        click.echo("Error: webhook could not be created", err=True)
        sys.exit(1)


@webhook.command("delete")
def delete():
    """Delete the remembered subscription"""
    trigger = build_trigger()
    webhook_id = trigger.webhook_id
    if asyncio.run(trigger.delete()):
        click.echo(f"Webhook deleted: {webhook_id}" if webhook_id else "No webhook to delete")
    else:
        click.echo(f"Error: webhook {webhook_id} could not be deleted", err=True)
        sys.exit(1)


@click.command("test-credentials")
def test_credentials():
    """Check the API token against GET /addresses"""
    ok, message = asyncio.run(check_credentials(ShippoClient()))
    if ok:
        click.echo(message)
    else:
        click.echo(f"Error: {message}", err=True)
        sys.exit(1)
