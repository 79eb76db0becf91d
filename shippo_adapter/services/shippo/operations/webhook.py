"""Webhook subscription management (the trigger manages its own subscription)."""
from typing import Any, Dict

from shippo_adapter.integrations.base import ParameterSource
from shippo_adapter.services.shippo.client import ShippoClient
from shippo_adapter.services.shippo.operations.common import (
    collection,
    copy_flags,
    copy_if_set,
    get_all,
)


async def create(client: ShippoClient, params: ParameterSource, i: int):
    body: Dict[str, Any] = {
        'url': params.get_parameter('url', i),
        'event': params.get_parameter('event', i),
    }
    copy_flags(collection(params, 'options', i), body, {'isTest': 'is_test'})
    return await client.post('/webhooks', data=body)


async def get(client: ShippoClient, params: ParameterSource, i: int):
    webhook_id = params.get_parameter('webhookId', i)
    return await client.get(f'/webhooks/{webhook_id}')


async def get_many(client: ShippoClient, params: ParameterSource, i: int):
    return await get_all(client, params, i, '/webhooks')


async def update(client: ShippoClient, params: ParameterSource, i: int):
    webhook_id = params.get_parameter('webhookId', i)
    update_fields = collection(params, 'updateFields', i)

    body: Dict[str, Any] = {}
    copy_if_set(update_fields, body, {'url': 'url', 'event': 'event'})
    copy_flags(update_fields, body, {'isTest': 'is_test'})

    return await client.put(f'/webhooks/{webhook_id}', data=body)


async def delete(client: ShippoClient, params: ParameterSource, i: int):
    webhook_id = params.get_parameter('webhookId', i)
    await client.delete(f'/webhooks/{webhook_id}')
    return {'success': True, 'deleted': webhook_id}


OPERATIONS = {
    'create': create,
    'get': get,
    'getAll': get_many,
    'update': update,
    'delete': delete,
}
