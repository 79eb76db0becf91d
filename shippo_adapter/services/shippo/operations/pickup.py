"""Carrier pickup scheduling."""
from typing import Any, Dict

from shippo_adapter.integrations.base import ParameterSource
from shippo_adapter.services.shippo.client import ShippoClient
from shippo_adapter.services.shippo.operations.common import (
    collection,
    copy_flags,
    copy_if_set,
)
from shippo_adapter.services.shippo.payload_builder import build_address_object, split_list


def pickup_address(params: ParameterSource, i: int):
    """`addressType` == "id" -> the `addressId` string, otherwise an inline address."""
    if params.get_parameter('addressType', i, 'fields') == 'id':
        return params.get_parameter('addressId', i)

    return build_address_object({
        'name': params.get_parameter('locationName', i, ''),
        'street1': params.get_parameter('locationStreet1', i),
        'city': params.get_parameter('locationCity', i),
        'state': params.get_parameter('locationState', i),
        'zip': params.get_parameter('locationZip', i),
        'country': params.get_parameter('locationCountry', i),
        'phone': params.get_parameter('locationPhone', i),
    })


async def create(client: ShippoClient, params: ParameterSource, i: int):
    additional_fields = collection(params, 'additionalFields', i)

    location: Dict[str, Any] = {
        'building_location_type': params.get_parameter('buildingLocationType', i),
        'address': pickup_address(params, i),
    }
    copy_if_set(additional_fields, location, {
        'buildingType': 'building_type',
        'instructions': 'instructions',
    })

    pickup_data: Dict[str, Any] = {
        'carrier_account': params.get_parameter('carrierAccount', i),
        'location': location,
        'transactions': split_list(params.get_parameter('transactions', i)),
        'requested_start_time': params.get_parameter('requestedStartTime', i),
        'requested_end_time': params.get_parameter('requestedEndTime', i),
    }
    copy_flags(additional_fields, pickup_data, {'isTest': 'is_test'})
    copy_if_set(additional_fields, pickup_data, {'metadata': 'metadata'})

    return await client.post('/pickups', data=pickup_data)


async def get(client: ShippoClient, params: ParameterSource, i: int):
    pickup_id = params.get_parameter('pickupId', i)
    return await client.get(f'/pickups/{pickup_id}')


OPERATIONS = {
    'create': create,
    'get': get,
}
