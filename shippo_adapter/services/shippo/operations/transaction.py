"""Transaction (label purchase) operations: create, get, getAll."""
from typing import Any, Dict

from shippo_adapter.integrations.base import ParameterSource
from shippo_adapter.services.shippo.client import ShippoClient
from shippo_adapter.services.shippo.operations.common import (
    collection,
    copy_flags,
    copy_if_set,
    get_all,
)
from shippo_adapter.services.shippo.operations.shipment import inline_address
from shippo_adapter.services.shippo.payload_builder import build_parcel_object

ONE_CALL_PARCEL_PARAMS = {
    'length': 'ocLength',
    'width': 'ocWidth',
    'height': 'ocHeight',
    'distanceUnit': 'ocDistanceUnit',
    'weight': 'ocWeight',
    'massUnit': 'ocMassUnit',
}


def one_call_shipment(params: ParameterSource, i: int) -> Dict[str, Any]:
    parcel_fields = {
        field: params.get_parameter(name, i) for field, name in ONE_CALL_PARCEL_PARAMS.items()
    }
    return {
        'address_from': inline_address(params, i, 'ocFrom'),
        'address_to': inline_address(params, i, 'ocTo'),
        'parcels': [build_parcel_object(parcel_fields)],
    }


async def create(client: ShippoClient, params: ParameterSource, i: int):
    """
    Purchase a label.

    creationMethod "fromRate" buys the given rate; any other value is the
    one-call purchase (shipment + carrier account + service level in one request).
    """
    creation_method = params.get_parameter('creationMethod', i, 'fromRate')
    additional_fields = collection(params, 'additionalFields', i)

    transaction_data: Dict[str, Any] = {
        'label_file_type': params.get_parameter('labelFileType', i),
    }
    copy_flags(additional_fields, transaction_data, {'async': 'async'})
    copy_if_set(additional_fields, transaction_data, {'metadata': 'metadata'})

    if creation_method == 'fromRate':
        transaction_data['rate'] = params.get_parameter('rateId', i)
    else:
        transaction_data['carrier_account'] = params.get_parameter('carrierAccount', i)
        transaction_data['servicelevel_token'] = params.get_parameter('servicelevelToken', i)
        transaction_data['shipment'] = one_call_shipment(params, i)

    return await client.post('/transactions', data=transaction_data)


async def get(client: ShippoClient, params: ParameterSource, i: int):
    transaction_id = params.get_parameter('transactionId', i)
    return await client.get(f'/transactions/{transaction_id}')


async def get_many(client: ShippoClient, params: ParameterSource, i: int):
    filters = collection(params, 'filters', i)
    qs: Dict[str, Any] = {}
    copy_if_set(filters, qs, {
        'objectStatus': 'object_status',
        'trackingStatus': 'tracking_status',
    })
    return await get_all(client, params, i, '/transactions', qs=qs)


OPERATIONS = {
    'create': create,
    'get': get,
    'getAll': get_many,
}
