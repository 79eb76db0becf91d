"""Label refund operations: create, get, getAll."""
from typing import Any, Dict

from shippo_adapter.integrations.base import ParameterSource
from shippo_adapter.services.shippo.client import ShippoClient
from shippo_adapter.services.shippo.operations.common import collection, copy_flags, get_all


async def create(client: ShippoClient, params: ParameterSource, i: int):
    body: Dict[str, Any] = {
        'transaction': params.get_parameter('transactionId', i),
    }
    copy_flags(collection(params, 'options', i), body, {'async': 'async'})
    return await client.post('/refunds', data=body)


async def get(client: ShippoClient, params: ParameterSource, i: int):
    refund_id = params.get_parameter('refundId', i)
    return await client.get(f'/refunds/{refund_id}')


async def get_many(client: ShippoClient, params: ParameterSource, i: int):
    return await get_all(client, params, i, '/refunds')


OPERATIONS = {
    'create': create,
    'get': get,
    'getAll': get_many,
}
