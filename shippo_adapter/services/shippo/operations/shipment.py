"""Shipment operations: create, get, getAll."""
from typing import Any, Dict

from shippo_adapter.integrations.base import ParameterSource
from shippo_adapter.services.shippo.client import ShippoClient
from shippo_adapter.services.shippo.operations.common import (
    collection,
    copy_flags,
    copy_if_set,
    get_all,
)
from shippo_adapter.services.shippo.payload_builder import (
    build_address_object,
    build_extras_object,
    build_parcel_object,
    is_set,
    split_list,
)

ADDRESS_PARAMS = ('Street1', 'City', 'State', 'Zip', 'Country')
PARCEL_PARAMS = {
    'length': 'parcelLength',
    'width': 'parcelWidth',
    'height': 'parcelHeight',
    'distanceUnit': 'parcelDistanceUnit',
    'weight': 'parcelWeight',
    'massUnit': 'parcelMassUnit',
}


def inline_address(params: ParameterSource, i: int, prefix: str) -> Dict[str, Any]:
    """Address built from prefixed form fields, e.g. fromName, fromStreet1..."""
    fields = {'name': params.get_parameter(f'{prefix}Name', i, '')}
    for suffix in ADDRESS_PARAMS:
        fields[suffix[0].lower() + suffix[1:]] = params.get_parameter(f'{prefix}{suffix}', i)
    return build_address_object(fields)


def address_reference(params: ParameterSource, i: int, prefix: str):
    """`<prefix>Type` == "id" -> the `<prefix>Id` string, otherwise an inline object."""
    if params.get_parameter(f'address{prefix.capitalize()}Type', i, 'fields') == 'id':
        return params.get_parameter(f'address{prefix.capitalize()}Id', i)
    return inline_address(params, i, prefix)


def shipment_extras(extras: Dict[str, Any]) -> Dict[str, Any]:
    """Flat extra-service form fields -> the `extra` wire object."""
    nested: Dict[str, Any] = {}
    for key in ('signatureConfirmation', 'reference1', 'reference2',
                'saturdayDelivery', 'bypassAddressValidation', 'isReturn'):
        if key in extras:
            nested[key] = extras[key]

    if is_set(extras.get('insuranceAmount')):
        nested['insurance'] = {
            'amount': extras['insuranceAmount'],
            'currency': extras.get('insuranceCurrency'),
            'content': extras.get('insuranceContent'),
        }
    if is_set(extras.get('codAmount')):
        nested['cod'] = {
            'amount': extras['codAmount'],
            'currency': extras.get('codCurrency'),
            'paymentMethod': extras.get('codPaymentMethod'),
        }
    return build_extras_object(nested)


async def create(client: ShippoClient, params: ParameterSource, i: int):
    shipment_data: Dict[str, Any] = {
        'address_from': address_reference(params, i, 'from'),
        'address_to': address_reference(params, i, 'to'),
    }

    if params.get_parameter('parcelType', i, 'fields') == 'id':
        shipment_data['parcels'] = [params.get_parameter('parcelId', i)]
    else:
        parcel_fields = {
            field: params.get_parameter(name, i) for field, name in PARCEL_PARAMS.items()
        }
        shipment_data['parcels'] = [build_parcel_object(parcel_fields)]

    additional_fields = collection(params, 'additionalFields', i)
    copy_flags(additional_fields, shipment_data, {'async': 'async'})
    if additional_fields.get('carrierAccounts'):
        shipment_data['carrier_accounts'] = split_list(additional_fields['carrierAccounts'])
    copy_if_set(additional_fields, shipment_data, {
        'customsDeclaration': 'customs_declaration',
        'metadata': 'metadata',
        'addressReturn': 'address_return',
    })

    extra = shipment_extras(collection(params, 'extras', i))
    if extra:
        shipment_data['extra'] = extra

    return await client.post('/shipments', data=shipment_data)


async def get(client: ShippoClient, params: ParameterSource, i: int):
    shipment_id = params.get_parameter('shipmentId', i)
    return await client.get(f'/shipments/{shipment_id}')


async def get_many(client: ShippoClient, params: ParameterSource, i: int):
    return await get_all(client, params, i, '/shipments')


OPERATIONS = {
    'create': create,
    'get': get,
    'getAll': get_many,
}
