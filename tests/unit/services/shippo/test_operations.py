# Request construction for the per-resource operations
import pytest

from shippo_adapter.core.enums import Resource
from shippo_adapter.core.exceptions import ValidationError
from shippo_adapter.services.shippo.operations import OPERATION_REGISTRY


async def run_operation(client, make_params, resource, operation, **parameters):
    handler = OPERATION_REGISTRY[(Resource(resource), operation)]
    return await handler(client, make_params(parameters), 0)

"""
1. Addresses and parcels
"""

@pytest.mark.asyncio
async def test_address_create(mock_make_request, shippo_client, make_params):
    await run_operation(
        shippo_client, make_params, "address", "create",
        name="Mr Hippo", street1="215 Clayton St.", city="San Francisco", state="CA",
        zip="94117", country="US", additionalFields={"isResidential": True, "company": ""},
    )

    mock_make_request.assert_called_once_with("POST", "/addresses", data={
        "name": "Mr Hippo", "street1": "215 Clayton St.", "city": "San Francisco",
        "state": "CA", "zip": "94117", "country": "US", "is_residential": True,
    })


@pytest.mark.asyncio
async def test_address_validate(mock_make_request, shippo_client, make_params):
    await run_operation(shippo_client, make_params, "address", "validate", addressId="adr_9")
    mock_make_request.assert_called_once_with("GET", "/addresses/adr_9/validate", params=None)


@pytest.mark.asyncio
async def test_parcel_get_all_uses_default_limit(mock_make_request, shippo_client, make_params):
    await run_operation(shippo_client, make_params, "parcel", "getAll")
    mock_make_request.assert_called_once_with("GET", "/parcels", data=None, params={"page": 1, "results": 25})

"""
2. Shipments and transactions
"""

@pytest.mark.asyncio
async def test_shipment_create_with_ids(mock_make_request, shippo_client, make_params):
    await run_operation(
        shippo_client, make_params, "shipment", "create",
        addressFromType="id", addressFromId="adr_from",
        addressToType="id", addressToId="adr_to",
        parcelType="id", parcelId="par_1",
        additionalFields={"async": False, "carrierAccounts": "ca_1, ca_2"},
    )

    mock_make_request.assert_called_once_with("POST", "/shipments", data={
        "address_from": "adr_from",
        "address_to": "adr_to",
        "parcels": ["par_1"],
        "async": False,
        "carrier_accounts": ["ca_1", "ca_2"],
    })


@pytest.mark.asyncio
async def test_shipment_create_inline_with_extras(mock_make_request, shippo_client, make_params):
    await run_operation(
        shippo_client, make_params, "shipment", "create",
        fromName="Sender", fromStreet1="1 Main St", fromCity="Austin", fromState="TX",
        fromZip="78701", fromCountry="US",
        toStreet1="2 High St", toCity="Boston", toState="MA", toZip="02110", toCountry="US",
        parcelLength=10, parcelWidth=8, parcelHeight=6, parcelDistanceUnit="in",
        parcelWeight=2.5, parcelMassUnit="lb",
        extras={"signatureConfirmation": "STANDARD", "insuranceAmount": 50, "insuranceContent": "Books"},
    )

    _, kwargs = mock_make_request.call_args
    data = kwargs["data"]
    assert data["address_from"]["name"] == "Sender"
    assert "name" not in data["address_to"]
    assert data["parcels"] == [{
        "length": 10, "width": 8, "height": 6, "distance_unit": "in", "weight": 2.5, "mass_unit": "lb",
    }]
    assert data["extra"] == {
        "signature_confirmation": "STANDARD",
        "insurance": {"amount": 50, "content": "Books", "currency": "USD"},
    }


@pytest.mark.asyncio
async def test_rates_for_shipment_currency(mock_make_request, shippo_client, make_params):
    await run_operation(
        shippo_client, make_params, "rate", "getForShipment",
        shipmentId="shp_1", options={"currencyCode": "EUR"},
    )
    mock_make_request.assert_called_once_with("GET", "/shipments/shp_1/rates", params={"currency": "EUR"})


@pytest.mark.asyncio
async def test_transaction_from_rate(mock_make_request, shippo_client, make_params):
    await run_operation(
        shippo_client, make_params, "transaction", "create",
        creationMethod="fromRate", rateId="rate_1", labelFileType="PDF_4x6",
        additionalFields={"async": False},
    )
    mock_make_request.assert_called_once_with("POST", "/transactions", data={
        "label_file_type": "PDF_4x6", "async": False, "rate": "rate_1",
    })


@pytest.mark.asyncio
async def test_transaction_get_all_filters(mock_make_request, shippo_client, make_params):
    await run_operation(
        shippo_client, make_params, "transaction", "getAll",
        returnAll=True, filters={"objectStatus": "SUCCESS", "trackingStatus": ""},
    )
    mock_make_request.assert_called_once_with(
        "GET", "/transactions", data=None,
        params={"object_status": "SUCCESS", "page": 1, "results": 100},
    )

"""
3. Batches, carrier accounts, refunds
"""

@pytest.mark.asyncio
async def test_batch_create_invalid_json_makes_no_request(mock_make_request, shippo_client, make_params):
    with pytest.raises(ValidationError, match="Invalid JSON format for batch shipments"):
        await run_operation(
            shippo_client, make_params, "batch", "create",
            defaultCarrierAccount="ca_1", defaultServicelevelToken="usps_priority",
            batchShipments="[{oops",
        )
    mock_make_request.assert_not_called()


@pytest.mark.asyncio
async def test_batch_remove_shipments(mock_make_request, shippo_client, make_params):
    await run_operation(
        shippo_client, make_params, "batch", "removeShipments",
        batchId="b_1", shipmentIds="shp_1, shp_2",
    )
    mock_make_request.assert_called_once_with(
        "POST", "/batches/b_1/remove_shipments", data=["shp_1", "shp_2"]
    )


@pytest.mark.asyncio
async def test_carrier_account_create_requires_account_id(mock_make_request, shippo_client, make_params):
    with pytest.raises(ValidationError, match='The field "account_id" is required'):
        await run_operation(
            shippo_client, make_params, "carrierAccount", "create",
            carrier="ups", accountId="", parameters="{}",
        )
    mock_make_request.assert_not_called()


@pytest.mark.asyncio
async def test_carrier_account_delete_result(mock_make_request, shippo_client, make_params):
    result = await run_operation(
        shippo_client, make_params, "carrierAccount", "delete", carrierAccountId="ca_1"
    )
    mock_make_request.assert_called_once_with("DELETE", "/carrier_accounts/ca_1")
    assert result == {"success": True, "deleted": "ca_1"}


@pytest.mark.asyncio
async def test_refund_get_all_is_paginated(mocker, shippo_client, make_params):
    from shippo_adapter.services.shippo.client import ShippoClient

    mock_make_request = mocker.patch.object(ShippoClient, "_make_request", side_effect=[
        {"next": "page-2", "results": [{"object_id": "ref_1"}]},
        {"next": None, "results": [{"object_id": "ref_2"}]},
    ])

    result = await run_operation(shippo_client, make_params, "refund", "getAll", returnAll=True)

    assert [r["object_id"] for r in result] == ["ref_1", "ref_2"]
    assert mock_make_request.call_count == 2


@pytest.mark.asyncio
async def test_tracking_get(mock_make_request, shippo_client, make_params):
    await run_operation(
        shippo_client, make_params, "tracking", "get", carrier="usps", trackingNumber="9205590164917312751089"
    )
    mock_make_request.assert_called_once_with("GET", "/tracks/usps/9205590164917312751089", params=None)


@pytest.mark.asyncio
async def test_transaction_one_call_purchase(mock_make_request, shippo_client, make_params):
    await run_operation(
        shippo_client, make_params, "transaction", "create",
        creationMethod="oneCall", carrierAccount="ca_usps", servicelevelToken="usps_priority",
        labelFileType="PDF",
        ocFromName="Sender", ocFromStreet1="1 Main St", ocFromCity="Austin", ocFromState="TX",
        ocFromZip="78701", ocFromCountry="US",
        ocToStreet1="2 High St", ocToCity="Boston", ocToState="MA", ocToZip="02110", ocToCountry="US",
        ocLength=10, ocWidth=8, ocHeight=6, ocDistanceUnit="in", ocWeight=2, ocMassUnit="lb",
    )

    mock_make_request.assert_called_once_with("POST", "/transactions", data={
        "label_file_type": "PDF",
        "carrier_account": "ca_usps",
        "servicelevel_token": "usps_priority",
        "shipment": {
            "address_from": {
                "name": "Sender", "street1": "1 Main St", "city": "Austin",
                "state": "TX", "zip": "78701", "country": "US",
            },
            "address_to": {
                "street1": "2 High St", "city": "Boston", "state": "MA", "zip": "02110", "country": "US",
            },
            "parcels": [{
                "length": 10, "width": 8, "height": 6, "distance_unit": "in", "weight": 2, "mass_unit": "lb",
            }],
        },
    })

"""
4. Pagination parameters
"""

@pytest.mark.asyncio
async def test_get_all_rejects_zero_limit(mock_make_request, shippo_client, make_params):
    with pytest.raises(ValidationError, match="Invalid limit: 0"):
        await run_operation(shippo_client, make_params, "parcel", "getAll", limit=0)
    mock_make_request.assert_not_called()


@pytest.mark.asyncio
async def test_get_all_rejects_non_numeric_limit(mock_make_request, shippo_client, make_params):
    with pytest.raises(ValidationError, match="Invalid limit"):
        await run_operation(shippo_client, make_params, "shipment", "getAll", limit="lots")
    mock_make_request.assert_not_called()


@pytest.mark.asyncio
async def test_get_all_return_all_string_false(mock_make_request, shippo_client, make_params):
    await run_operation(shippo_client, make_params, "address", "getAll", returnAll="false", limit=10)
    mock_make_request.assert_called_once_with("GET", "/addresses", data=None, params={"page": 1, "results": 10})


@pytest.mark.asyncio
async def test_get_all_rejects_bad_return_all(mock_make_request, shippo_client, make_params):
    with pytest.raises(ValidationError, match="Invalid returnAll"):
        await run_operation(shippo_client, make_params, "address", "getAll", returnAll="sometimes")
    mock_make_request.assert_not_called()

"""
5. Customs, pickups, manifests, webhooks
"""

@pytest.mark.asyncio
async def test_customs_create_declaration(mock_make_request, shippo_client, make_params):
    await run_operation(
        shippo_client, make_params, "customs", "createDeclaration",
        contentsType="MERCHANDISE", nonDeliveryOption="RETURN", certify=True,
        certifySigner="Shawn Ippotle", customsItems="ci_1, ci_2",
        declarationAdditionalFields={"incoterm": "DDU", "notes": ""},
    )

    mock_make_request.assert_called_once_with("POST", "/customs/declarations", data={
        "contents_type": "MERCHANDISE",
        "non_delivery_option": "RETURN",
        "certify": True,
        "certify_signer": "Shawn Ippotle",
        "items": ["ci_1", "ci_2"],
        "incoterm": "DDU",
    })


@pytest.mark.asyncio
async def test_customs_create_item_value_is_string(mock_make_request, shippo_client, make_params):
    await run_operation(
        shippo_client, make_params, "customs", "createItem",
        itemDescription="T-Shirt", quantity=2, netWeight=400, itemMassUnit="g",
        valueAmount=29.99, valueCurrency="USD", originCountry="US",
        itemAdditionalFields={"tariffNumber": "6109.10", "skuCode": ""},
    )

    mock_make_request.assert_called_once_with("POST", "/customs/items", data={
        "description": "T-Shirt",
        "quantity": 2,
        "net_weight": 400,
        "mass_unit": "g",
        "value_amount": "29.99",
        "value_currency": "USD",
        "origin_country": "US",
        "tariff_number": "6109.10",
    })


@pytest.mark.asyncio
async def test_pickup_create_with_address_id(mock_make_request, shippo_client, make_params):
    await run_operation(
        shippo_client, make_params, "pickup", "create",
        carrierAccount="ca_usps", addressType="id", addressId="adr_1",
        buildingLocationType="Front Door", transactions="tx_1, tx_2",
        requestedStartTime="2026-11-02T09:00:00Z", requestedEndTime="2026-11-02T17:00:00Z",
        additionalFields={"isTest": False, "instructions": "Ring the bell"},
    )

    mock_make_request.assert_called_once_with("POST", "/pickups", data={
        "carrier_account": "ca_usps",
        "location": {
            "building_location_type": "Front Door",
            "address": "adr_1",
            "instructions": "Ring the bell",
        },
        "transactions": ["tx_1", "tx_2"],
        "requested_start_time": "2026-11-02T09:00:00Z",
        "requested_end_time": "2026-11-02T17:00:00Z",
        "is_test": False,
    })


@pytest.mark.asyncio
async def test_pickup_create_with_inline_address(mock_make_request, shippo_client, make_params):
    await run_operation(
        shippo_client, make_params, "pickup", "create",
        carrierAccount="ca_usps", buildingLocationType="Office", transactions="tx_1",
        requestedStartTime="2026-11-02T09:00:00Z", requestedEndTime="2026-11-02T17:00:00Z",
        locationName="Warehouse", locationStreet1="1 Dock Rd", locationCity="Austin",
        locationState="TX", locationZip="78701", locationCountry="US", locationPhone="",
    )

    _, kwargs = mock_make_request.call_args
    assert kwargs["data"]["location"] == {
        "building_location_type": "Office",
        "address": {
            "name": "Warehouse", "street1": "1 Dock Rd", "city": "Austin",
            "state": "TX", "zip": "78701", "country": "US",
        },
    }


@pytest.mark.asyncio
async def test_manifest_create_inline_postal_address(mock_make_request, shippo_client, make_params):
    await run_operation(
        shippo_client, make_params, "manifest", "create",
        carrierAccount="ca_usps", shipmentDate="2026-11-02T00:00:00Z",
        fromName="Ignored", fromStreet1="1 Main St", fromCity="Austin", fromState="TX",
        fromZip="78701", fromCountry="US",
        additionalFields={"async": False, "transactions": "tx_1,tx_2"},
    )

    mock_make_request.assert_called_once_with("POST", "/manifests", data={
        "carrier_account": "ca_usps",
        "shipment_date": "2026-11-02T00:00:00Z",
        "address_from": {
            "street1": "1 Main St", "city": "Austin", "state": "TX", "zip": "78701", "country": "US",
        },
        "async": False,
        "transactions": ["tx_1", "tx_2"],
    })


@pytest.mark.asyncio
async def test_webhook_create_sends_false_is_test(mock_make_request, shippo_client, make_params):
    await run_operation(
        shippo_client, make_params, "webhook", "create",
        url="https://example.com/hook", event="track_updated", options={"isTest": False},
    )

    mock_make_request.assert_called_once_with("POST", "/webhooks", data={
        "url": "https://example.com/hook", "event": "track_updated", "is_test": False,
    })


@pytest.mark.asyncio
async def test_webhook_update_sends_false_is_test(mock_make_request, shippo_client, make_params):
    await run_operation(
        shippo_client, make_params, "webhook", "update",
        webhookId="wh_1", updateFields={"url": "", "event": "all", "isTest": False},
    )

    mock_make_request.assert_called_once_with("PUT", "/webhooks/wh_1", data={
        "event": "all", "is_test": False,
    })
