# shippo_adapter/services/shippo/payload_builder.py
"""
Shippo Payload Builder

Converts loosely-typed form input (camelCase keys, optional values) into the
snake_case objects the Shippo API expects.

Presence rule: a value is sent only when it is set, i.e. not None and not the
empty string. False and 0 are set values and are always sent.
"""

import json
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from shippo_adapter.core.enums import CodPaymentMethod
from shippo_adapter.core.exceptions import ValidationError


ADDRESS_FIELDS: Dict[str, str] = {
    'name': 'name',
    'company': 'company',
    'street1': 'street1',
    'street2': 'street2',
    'street3': 'street3',
    'city': 'city',
    'state': 'state',
    'zip': 'zip',
    'country': 'country',
    'phone': 'phone',
    'email': 'email',
    'isResidential': 'is_residential',
    'validate': 'validate',
    'metadata': 'metadata',
}

PARCEL_FIELDS: Dict[str, str] = {
    'length': 'length',
    'width': 'width',
    'height': 'height',
    'distanceUnit': 'distance_unit',
    'weight': 'weight',
    'massUnit': 'mass_unit',
    'template': 'template',
    'metadata': 'metadata',
}

# Top-level extras: scalar values copied when set
EXTRAS_FIELDS: Dict[str, str] = {
    'signatureConfirmation': 'signature_confirmation',
    'reference1': 'reference_1',
    'reference2': 'reference_2',
    'saturdayDelivery': 'saturday_delivery',
    'bypassAddressValidation': 'bypass_address_validation',
    'isReturn': 'is_return',
}

INSURANCE_FIELDS: Dict[str, str] = {
    'amount': 'amount',
    'currency': 'currency',
    'content': 'content',
}

COD_FIELDS: Dict[str, str] = {
    'amount': 'amount',
    'currency': 'currency',
    'paymentMethod': 'payment_method',
}

DEFAULT_CURRENCY = "USD"
DEFAULT_COD_PAYMENT_METHOD = CodPaymentMethod.ANY.value


def is_set(value: Any) -> bool:
    """True unless the value is None or an empty string."""
    return value is not None and value != ""


def build_object(fields: Mapping[str, Any], field_mappings: Mapping[str, str]) -> Dict[str, Any]:
    """
    Rename and presence-filter a flat field map.

    Args:
        fields: internal field name -> caller value
        field_mappings: internal field name -> wire field name

    Returns:
        New dict with wire names; unset values and fields missing from
        `field_mappings` are dropped. Values are not type-checked.
    """
    payload: Dict[str, Any] = {}
    for input_field, api_field in field_mappings.items():
        value = fields.get(input_field)
        if is_set(value):
            payload[api_field] = value
    return payload


def build_address_object(fields: Mapping[str, Any]) -> Dict[str, Any]:
    """Build a Shippo address object from form fields."""
    return build_object(fields, ADDRESS_FIELDS)


def build_parcel_object(fields: Mapping[str, Any]) -> Dict[str, Any]:
    """Build a Shippo parcel object from form fields."""
    return build_object(fields, PARCEL_FIELDS)


def _with_defaults(sub_fields: Mapping[str, Any], mappings: Mapping[str, str],
                   defaults: Mapping[str, Any]) -> Dict[str, Any]:
    obj = build_object(sub_fields, mappings)
    for api_field, default in defaults.items():
        obj.setdefault(api_field, default)
    return obj


def build_extras_object(extras: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Build the `extra` object of a shipment.

    Insurance and cash-on-delivery are nested objects; both default their
    currency to USD and COD defaults its payment method to ANY. Boolean flags
    are kept when False.

    Args:
        extras: signatureConfirmation, insurance {amount, currency, content},
            reference1, reference2, saturdayDelivery, bypassAddressValidation,
            isReturn, cod {amount, currency, paymentMethod}

    Returns:
        Dict[str, Any]: wire-format extras ({} when nothing is set)
    """
    extras_obj = build_object(extras, EXTRAS_FIELDS)

    insurance = extras.get('insurance')
    if is_set(insurance):
        extras_obj['insurance'] = _with_defaults(
            insurance, INSURANCE_FIELDS, {'currency': DEFAULT_CURRENCY}
        )

    cod = extras.get('cod')
    if is_set(cod):
        extras_obj['cod'] = _with_defaults(
            cod, COD_FIELDS,
            {'currency': DEFAULT_CURRENCY, 'payment_method': DEFAULT_COD_PAYMENT_METHOD},
        )

    return extras_obj


def split_list(value: Union[str, Iterable[str], None]) -> List[str]:
    """Turn "a, b ,c" into ["a", "b", "c"]; lists pass through trimmed."""
    if value is None:
        return []
    if isinstance(value, str):
        return [part.strip() for part in value.split(',')]
    return [str(part).strip() for part in value]


def parse_json_field(value: Any, field_name: str, item_index: Optional[int] = None) -> Any:
    """
    Decode a free-form JSON parameter.

    Already-decoded values (dict/list) pass through.

    Raises:
        ValidationError: if `value` is a string that is not valid JSON
    """
    if not isinstance(value, str):
        return value
    try:
        return json.loads(value)
    except ValueError:
        raise ValidationError(f"Invalid JSON format for {field_name}", item_index=item_index)


def validate_required_fields(data: Mapping[str, Any], required_fields: Iterable[str],
                             item_index: Optional[int] = None) -> None:
    """Raise ValidationError naming the first required field that is unset."""
    for field in required_fields:
        if not is_set(data.get(field)):
            raise ValidationError(f'The field "{field}" is required', item_index=item_index)
