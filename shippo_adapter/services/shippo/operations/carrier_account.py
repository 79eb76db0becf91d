"""Carrier account operations."""
from typing import Any, Dict

from shippo_adapter.integrations.base import ParameterSource
from shippo_adapter.services.shippo.client import ShippoClient
from shippo_adapter.services.shippo.operations.common import (
    collection,
    copy_flags,
    copy_if_set,
    get_all,
)
from shippo_adapter.services.shippo.payload_builder import parse_json_field, validate_required_fields

PARAMETERS_FIELD = 'carrier parameters'


async def create(client: ShippoClient, params: ParameterSource, i: int):
    parameters = parse_json_field(params.get_parameter('parameters', i), PARAMETERS_FIELD, item_index=i)
    body: Dict[str, Any] = {
        'carrier': params.get_parameter('carrier', i),
        'account_id': params.get_parameter('accountId', i),
        'parameters': parameters,
    }
    validate_required_fields(body, ('carrier', 'account_id'), item_index=i)
    copy_flags(collection(params, 'options', i), body, {'active': 'active', 'test': 'test'})
    return await client.post('/carrier_accounts', data=body)


async def get(client: ShippoClient, params: ParameterSource, i: int):
    carrier_account_id = params.get_parameter('carrierAccountId', i)
    return await client.get(f'/carrier_accounts/{carrier_account_id}')


async def get_many(client: ShippoClient, params: ParameterSource, i: int):
    qs: Dict[str, Any] = {}
    copy_if_set(collection(params, 'filters', i), qs, {'carrier': 'carrier'})
    return await get_all(client, params, i, '/carrier_accounts', qs=qs)


async def update(client: ShippoClient, params: ParameterSource, i: int):
    carrier_account_id = params.get_parameter('carrierAccountId', i)
    update_fields = collection(params, 'updateFields', i)

    body: Dict[str, Any] = {}
    copy_if_set(update_fields, body, {'accountId': 'account_id'})
    copy_flags(update_fields, body, {'active': 'active'})
    if update_fields.get('parameters'):
        body['parameters'] = parse_json_field(update_fields['parameters'], PARAMETERS_FIELD, item_index=i)

    return await client.put(f'/carrier_accounts/{carrier_account_id}', data=body)


async def delete(client: ShippoClient, params: ParameterSource, i: int):
    carrier_account_id = params.get_parameter('carrierAccountId', i)
    await client.delete(f'/carrier_accounts/{carrier_account_id}')
    return {'success': True, 'deleted': carrier_account_id}


OPERATIONS = {
    'create': create,
    'get': get,
    'getAll': get_many,
    'update': update,
    'delete': delete,
}
