"""Parcel operations: create, get, getAll."""
from shippo_adapter.integrations.base import ParameterSource
from shippo_adapter.services.shippo.client import ShippoClient
from shippo_adapter.services.shippo.operations.common import collection, get_all
from shippo_adapter.services.shippo.payload_builder import build_parcel_object


async def create(client: ShippoClient, params: ParameterSource, i: int):
    fields = {
        'length': params.get_parameter('length', i),
        'width': params.get_parameter('width', i),
        'height': params.get_parameter('height', i),
        'distanceUnit': params.get_parameter('distanceUnit', i),
        'weight': params.get_parameter('weight', i),
        'massUnit': params.get_parameter('massUnit', i),
    }
    fields.update(collection(params, 'additionalFields', i))
    return await client.post('/parcels', data=build_parcel_object(fields))


async def get(client: ShippoClient, params: ParameterSource, i: int):
    parcel_id = params.get_parameter('parcelId', i)
    return await client.get(f'/parcels/{parcel_id}')


async def get_many(client: ShippoClient, params: ParameterSource, i: int):
    return await get_all(client, params, i, '/parcels')


OPERATIONS = {
    'create': create,
    'get': get,
    'getAll': get_many,
}
