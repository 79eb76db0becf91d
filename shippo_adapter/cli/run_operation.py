# shippo_adapter/cli/run_operation.py
import asyncio
import json
import logging
import sys
from typing import Any, Dict, List, Optional

import click

from shippo_adapter.core.exceptions import BaseServiceError
from shippo_adapter.integrations.host import ItemParameters
from shippo_adapter.services.shippo.client import ShippoClient
from shippo_adapter.services.shippo.dispatcher import ShippoDispatcher

logger = logging.getLogger(__name__)


def _load_json_option(value: Optional[str], name: str) -> Any:
    try:
        return json.loads(value) if value else None
    except ValueError as e:
        raise click.BadParameter(f"Invalid JSON: {e}", param_hint=name)


def _load_items(path: Optional[str]) -> Optional[List[Dict[str, Any]]]:
    """Items file: a JSON array with one parameter object per input item."""
    if not path:
        return None
    with open(path, "r", encoding="utf-8") as fh:
        items = json.load(fh)
    if isinstance(items, dict):
        items = [items]
    if not isinstance(items, list) or not all(isinstance(item, dict) for item in items):
        raise click.BadParameter("Items file must hold a JSON object or an array of objects", param_hint="--items")
    return items


@click.command("run")
@click.argument("resource")
@click.argument("operation")
@click.option("--params", "params_json", default=None, help="JSON object of parameters shared by every item")
@click.option("--items", "items_path", type=click.Path(exists=True, dir_okay=False), default=None,
              help="JSON file with one parameter object per input item")
@click.option("--continue-on-fail", is_flag=True, help="Record failing items as {\"error\": ...} and keep going")
def run_operation(resource, operation, params_json, items_path, continue_on_fail):
    """Run one Shippo RESOURCE OPERATION over the input items"""
    parameters = _load_json_option(params_json, "--params") or {}
    if not isinstance(parameters, dict):
        raise click.BadParameter("Parameters must be a JSON object", param_hint="--params")
    parameters.update({"resource": resource, "operation": operation})

    items = _load_items(items_path)

    try:
        results = asyncio.run(run(parameters, items, continue_on_fail))
    except BaseServiceError as e:
        logger.error(f"Shippo {resource}.{operation} failed: {e}")
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(json.dumps(results, indent=2))


async def run(parameters: Dict[str, Any], items: Optional[List[Dict[str, Any]]] = None,
              continue_on_fail: bool = False) -> List[Dict[str, Any]]:
    dispatcher = ShippoDispatcher(
        client=ShippoClient(),
        params=ItemParameters(parameters, items),
        continue_on_fail=continue_on_fail,
    )
    output = await dispatcher.execute()
    return [item.to_host() for item in output]
