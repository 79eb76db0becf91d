"""Tracking operations: register a tracking number, get its status."""
from shippo_adapter.integrations.base import ParameterSource
from shippo_adapter.services.shippo.client import ShippoClient
from shippo_adapter.services.shippo.operations.common import collection, copy_if_set
from shippo_adapter.services.shippo.payload_builder import validate_required_fields


async def create(client: ShippoClient, params: ParameterSource, i: int):
    tracking_data = {
        'carrier': params.get_parameter('carrier', i),
        'tracking_number': params.get_parameter('trackingNumber', i),
    }
    validate_required_fields(tracking_data, ('carrier', 'tracking_number'), item_index=i)
    copy_if_set(collection(params, 'additionalFields', i), tracking_data, {'metadata': 'metadata'})
    return await client.post('/tracks', data=tracking_data)


async def get(client: ShippoClient, params: ParameterSource, i: int):
    carrier = params.get_parameter('carrier', i)
    tracking_number = params.get_parameter('trackingNumber', i)
    return await client.get(f'/tracks/{carrier}/{tracking_number}')


OPERATIONS = {
    'create': create,
    'get': get,
}
