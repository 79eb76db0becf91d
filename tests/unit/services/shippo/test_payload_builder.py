# Payload builder unit tests
import pytest

from shippo_adapter.core.exceptions import ValidationError
from shippo_adapter.services.shippo.payload_builder import (
    ADDRESS_FIELDS,
    PARCEL_FIELDS,
    build_address_object,
    build_extras_object,
    build_object,
    build_parcel_object,
    parse_json_field,
    split_list,
    validate_required_fields,
)

BASE_ADDRESS = {
    "name": "Shawn Ippotle",
    "street1": "215 Clayton St.",
    "city": "San Francisco",
    "state": "CA",
    "zip": "94117",
    "country": "US",
}

"""
1. Address / parcel objects
"""

def test_address_with_required_fields_only():
    result = build_address_object(BASE_ADDRESS)
    assert result == BASE_ADDRESS
    assert len(result) == 6


def test_address_is_residential_renamed():
    result = build_address_object({**BASE_ADDRESS, "isResidential": True})
    assert result["is_residential"] is True
    assert "isResidential" not in result


def test_address_drops_unset_values():
    result = build_address_object({**BASE_ADDRESS, "company": "", "street2": None, "phone": "+1 555 341 9393"})
    assert "company" not in result
    assert "street2" not in result
    assert result["phone"] == "+1 555 341 9393"


def test_address_ignores_unknown_keys():
    result = build_address_object({**BASE_ADDRESS, "nickname": "home", "is_residential": True})
    assert set(result) <= set(ADDRESS_FIELDS.values())
    assert "nickname" not in result


def test_parcel_object_exact():
    result = build_parcel_object({
        "length": 10, "width": 8, "height": 6, "distanceUnit": "in", "weight": 2.5, "massUnit": "lb",
    })
    assert result == {
        "length": 10, "width": 8, "height": 6, "distance_unit": "in", "weight": 2.5, "mass_unit": "lb",
    }


def test_parcel_keeps_zero_values():
    result = build_parcel_object({"length": 0, "weight": 0, "massUnit": "lb"})
    assert result == {"length": 0, "weight": 0, "mass_unit": "lb"}


@pytest.mark.parametrize("fields", [
    {},
    {"length": "", "width": None},
    {"foo": "bar", "distanceUnit": "cm", "template": ""},
])
def test_build_object_never_emits_unknown_or_unset(fields):
    result = build_object(fields, PARCEL_FIELDS)
    assert set(result) <= set(PARCEL_FIELDS.values())
    assert all(value is not None and value != "" for value in result.values())

"""
2. Extras
"""

def test_extras_empty():
    assert build_extras_object({}) == {}


def test_extras_insurance_defaults_currency():
    result = build_extras_object({"insurance": {"amount": 50, "content": "Books"}})
    assert result == {"insurance": {"amount": 50, "content": "Books", "currency": "USD"}}


def test_extras_insurance_keeps_given_currency():
    result = build_extras_object({"insurance": {"amount": 50, "currency": "EUR"}})
    assert result["insurance"]["currency"] == "EUR"


def test_extras_cod_defaults():
    result = build_extras_object({"cod": {"amount": 25}})
    assert result == {"cod": {"amount": 25, "currency": "USD", "payment_method": "ANY"}}


def test_extras_renames_and_keeps_false_flags():
    result = build_extras_object({
        "signatureConfirmation": "ADULT",
        "reference1": "order-1",
        "reference2": "",
        "saturdayDelivery": False,
        "isReturn": False,
    })
    assert result == {
        "signature_confirmation": "ADULT",
        "reference_1": "order-1",
        "saturday_delivery": False,
        "is_return": False,
    }

"""
3. Helpers
"""

def test_parse_json_field_decodes_strings():
    assert parse_json_field('[{"shipment": {}}]', "batch shipments") == [{"shipment": {}}]


def test_parse_json_field_passes_decoded_values():
    value = {"username": "ups"}
    assert parse_json_field(value, "carrier parameters") is value


def test_parse_json_field_invalid():
    with pytest.raises(ValidationError) as excinfo:
        parse_json_field("{not json", "carrier parameters", item_index=2)
    assert "Invalid JSON format for carrier parameters" in str(excinfo.value)
    assert excinfo.value.item_index == 2


def test_split_list():
    assert split_list("shp_1, shp_2 ,shp_3") == ["shp_1", "shp_2", "shp_3"]
    assert split_list(["a ", " b"]) == ["a", "b"]
    assert split_list(None) == []


def test_validate_required_fields():
    validate_required_fields({"carrier": "usps", "accountId": "acc"}, ["carrier", "accountId"])
    with pytest.raises(ValidationError, match='The field "accountId" is required'):
        validate_required_fields({"carrier": "usps", "accountId": ""}, ["carrier", "accountId"])
