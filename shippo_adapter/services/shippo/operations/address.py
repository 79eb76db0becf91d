"""Address operations: create, get, getAll, validate."""
from shippo_adapter.integrations.base import ParameterSource
from shippo_adapter.services.shippo.client import ShippoClient
from shippo_adapter.services.shippo.operations.common import collection, get_all
from shippo_adapter.services.shippo.payload_builder import build_address_object


async def create(client: ShippoClient, params: ParameterSource, i: int):
    fields = {
        'name': params.get_parameter('name', i, ''),
        'street1': params.get_parameter('street1', i),
        'city': params.get_parameter('city', i),
        'state': params.get_parameter('state', i),
        'zip': params.get_parameter('zip', i),
        'country': params.get_parameter('country', i),
    }
    fields.update(collection(params, 'additionalFields', i))
    return await client.post('/addresses', data=build_address_object(fields))


async def get(client: ShippoClient, params: ParameterSource, i: int):
    address_id = params.get_parameter('addressId', i)
    return await client.get(f'/addresses/{address_id}')


async def get_many(client: ShippoClient, params: ParameterSource, i: int):
    return await get_all(client, params, i, '/addresses')


async def validate(client: ShippoClient, params: ParameterSource, i: int):
    address_id = params.get_parameter('addressId', i)
    return await client.get(f'/addresses/{address_id}/validate')


OPERATIONS = {
    'create': create,
    'get': get,
    'getAll': get_many,
    'validate': validate,
}
