"""Customs declarations and customs items."""
from typing import Any, Dict

from shippo_adapter.integrations.base import ParameterSource
from shippo_adapter.services.shippo.client import ShippoClient
from shippo_adapter.services.shippo.operations.common import collection, copy_if_set
from shippo_adapter.services.shippo.payload_builder import split_list

DECLARATION_OPTIONAL_FIELDS = {
    'contentsExplanation': 'contents_explanation',
    'exporterReference': 'exporter_reference',
    'importerReference': 'importer_reference',
    'invoice': 'invoice',
    'license': 'license',
    'certificate': 'certificate',
    'notes': 'notes',
    'eelPfc': 'eel_pfc',
    'aesItn': 'aes_itn',
    'incoterm': 'incoterm',
    'b13aFilingOption': 'b13a_filing_option',
    'b13aNumber': 'b13a_number',
    'metadata': 'metadata',
}

ITEM_OPTIONAL_FIELDS = {
    'tariffNumber': 'tariff_number',
    'skuCode': 'sku_code',
    'eccnEar99': 'eccn_ear99',
    'metadata': 'metadata',
}


async def create_declaration(client: ShippoClient, params: ParameterSource, i: int):
    declaration_data: Dict[str, Any] = {
        'contents_type': params.get_parameter('contentsType', i),
        'non_delivery_option': params.get_parameter('nonDeliveryOption', i),
        'certify': params.get_parameter('certify', i),
        'certify_signer': params.get_parameter('certifySigner', i),
        'items': split_list(params.get_parameter('customsItems', i)),
    }
    copy_if_set(collection(params, 'declarationAdditionalFields', i),
                declaration_data, DECLARATION_OPTIONAL_FIELDS)
    return await client.post('/customs/declarations', data=declaration_data)


async def get_declaration(client: ShippoClient, params: ParameterSource, i: int):
    declaration_id = params.get_parameter('declarationId', i)
    return await client.get(f'/customs/declarations/{declaration_id}')


async def create_item(client: ShippoClient, params: ParameterSource, i: int):
    item_data: Dict[str, Any] = {
        'description': params.get_parameter('itemDescription', i),
        'quantity': params.get_parameter('quantity', i),
        'net_weight': params.get_parameter('netWeight', i),
        'mass_unit': params.get_parameter('itemMassUnit', i),
        # Shippo expects the declared value as a decimal string
        'value_amount': str(params.get_parameter('valueAmount', i)),
        'value_currency': params.get_parameter('valueCurrency', i),
        'origin_country': params.get_parameter('originCountry', i),
    }
    copy_if_set(collection(params, 'itemAdditionalFields', i), item_data, ITEM_OPTIONAL_FIELDS)
    return await client.post('/customs/items', data=item_data)


async def get_item(client: ShippoClient, params: ParameterSource, i: int):
    item_id = params.get_parameter('itemId', i)
    return await client.get(f'/customs/items/{item_id}')


OPERATIONS = {
    'createDeclaration': create_declaration,
    'getDeclaration': get_declaration,
    'createItem': create_item,
    'getItem': get_item,
}
