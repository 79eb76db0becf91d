"""Rate operations."""
from shippo_adapter.integrations.base import ParameterSource
from shippo_adapter.services.shippo.client import ShippoClient
from shippo_adapter.services.shippo.operations.common import collection


async def get_for_shipment(client: ShippoClient, params: ParameterSource, i: int):
    """Rates of an existing shipment, optionally converted to `currencyCode`."""
    shipment_id = params.get_parameter('shipmentId', i)
    options = collection(params, 'options', i)

    qs = {}
    if options.get('currencyCode'):
        qs['currency'] = options['currencyCode']

    return await client.get(f'/shipments/{shipment_id}/rates', params=qs)


OPERATIONS = {
    'getForShipment': get_for_shipment,
}
