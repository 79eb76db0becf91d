"""Manifest (scan form) operations: create, get, getAll."""
from typing import Any, Dict

from shippo_adapter.integrations.base import ParameterSource
from shippo_adapter.services.shippo.client import ShippoClient
from shippo_adapter.services.shippo.operations.common import collection, copy_flags, get_all
from shippo_adapter.services.shippo.payload_builder import split_list


async def create(client: ShippoClient, params: ParameterSource, i: int):
    manifest_data: Dict[str, Any] = {
        'carrier_account': params.get_parameter('carrierAccount', i),
        'shipment_date': params.get_parameter('shipmentDate', i),
    }

    if params.get_parameter('addressFromType', i, 'fields') == 'id':
        manifest_data['address_from'] = params.get_parameter('addressFromId', i)
    else:
        # Manifests take the bare postal address, no contact fields
        manifest_data['address_from'] = {
            'street1': params.get_parameter('fromStreet1', i),
            'city': params.get_parameter('fromCity', i),
            'state': params.get_parameter('fromState', i),
            'zip': params.get_parameter('fromZip', i),
            'country': params.get_parameter('fromCountry', i),
        }

    additional_fields = collection(params, 'additionalFields', i)
    copy_flags(additional_fields, manifest_data, {'async': 'async'})
    if additional_fields.get('transactions'):
        manifest_data['transactions'] = split_list(additional_fields['transactions'])

    return await client.post('/manifests', data=manifest_data)


async def get(client: ShippoClient, params: ParameterSource, i: int):
    manifest_id = params.get_parameter('manifestId', i)
    return await client.get(f'/manifests/{manifest_id}')


async def get_many(client: ShippoClient, params: ParameterSource, i: int):
    return await get_all(client, params, i, '/manifests')


OPERATIONS = {
    'create': create,
    'get': get,
    'getAll': get_many,
}
