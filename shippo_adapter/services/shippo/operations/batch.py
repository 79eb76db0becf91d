"""Batch label operations."""
from typing import Any, Dict

from shippo_adapter.integrations.base import ParameterSource
from shippo_adapter.services.shippo.client import ShippoClient
from shippo_adapter.services.shippo.operations.common import collection, copy_if_set, get_all
from shippo_adapter.services.shippo.payload_builder import parse_json_field, split_list


async def create(client: ShippoClient, params: ParameterSource, i: int):
    batch_shipments = parse_json_field(
        params.get_parameter('batchShipments', i), 'batch shipments', item_index=i
    )
    batch_data: Dict[str, Any] = {
        'default_carrier_account': params.get_parameter('defaultCarrierAccount', i),
        'default_servicelevel_token': params.get_parameter('defaultServicelevelToken', i),
        'batch_shipments': batch_shipments,
    }
    copy_if_set(collection(params, 'additionalFields', i), batch_data, {
        'labelFiletype': 'label_filetype',
        'metadata': 'metadata',
    })
    return await client.post('/batches', data=batch_data)


async def get(client: ShippoClient, params: ParameterSource, i: int):
    batch_id = params.get_parameter('batchId', i)
    return await client.get(f'/batches/{batch_id}')


async def get_many(client: ShippoClient, params: ParameterSource, i: int):
    return await get_all(client, params, i, '/batches')


async def add_shipments(client: ShippoClient, params: ParameterSource, i: int):
    batch_id = params.get_parameter('batchId', i)
    shipments = parse_json_field(params.get_parameter('shipments', i), 'shipments', item_index=i)
    return await client.post(f'/batches/{batch_id}/add_shipments', data=shipments)


async def remove_shipments(client: ShippoClient, params: ParameterSource, i: int):
    batch_id = params.get_parameter('batchId', i)
    shipment_ids = split_list(params.get_parameter('shipmentIds', i))
    return await client.post(f'/batches/{batch_id}/remove_shipments', data=shipment_ids)


async def purchase(client: ShippoClient, params: ParameterSource, i: int):
    batch_id = params.get_parameter('batchId', i)
    return await client.post(f'/batches/{batch_id}/purchase')


OPERATIONS = {
    'create': create,
    'get': get,
    'getAll': get_many,
    'addShipments': add_shipments,
    'removeShipments': remove_shipments,
    'purchase': purchase,
}
