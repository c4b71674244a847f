"""
Validation Module - Contact submission checks and coercion
"""

import math
from .errors import ValidationError


REQUIRED_CONTACT_FIELDS = ('name', 'email', 'message')

# The JSON API and the legacy form endpoint keep different defaults
JSON_SERVICE_DEFAULT = None
FORM_SERVICE_DEFAULT = 'General Inquiry'


def coerce_service_price(value):
    """Integer price; absent or non-numeric values become 0"""
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    try:
        number = float(str(value).strip())
    except (TypeError, ValueError):
        return 0
    if math.isnan(number) or math.isinf(number):
        return 0
    return int(number)


def _clean_text(value):
    if value is None:
        return ''
    return str(value).strip()


def validate_contact(payload, default_service=JSON_SERVICE_DEFAULT):
    """
    Validate a contact submission and build the document to persist

    Args:
        payload (Mapping): Submitted fields (JSON body or form data)
        default_service: Value stored when no service was chosen

    Returns:
        dict: name, email, message, service and servicePrice

    Raises:
        ValidationError: when name, email or message is missing or blank
    """
    if payload is None or not hasattr(payload, 'get'):
        raise ValidationError(missing_fields=REQUIRED_CONTACT_FIELDS)

    cleaned = {field: _clean_text(payload.get(field)) for field in REQUIRED_CONTACT_FIELDS}
    missing = [field for field in REQUIRED_CONTACT_FIELDS if not cleaned[field]]
    if missing:
        raise ValidationError(missing_fields=missing)

    service = payload.get('service')
    if isinstance(service, str):
        service = service.strip()
    cleaned['service'] = service if service else default_service
    cleaned['servicePrice'] = coerce_service_price(payload.get('servicePrice'))
    return cleaned


def require_json_object(payload):
    """Service and portfolio bodies must be JSON objects"""
    if not isinstance(payload, dict):
        raise ValidationError('Request body must be a JSON object')
    return payload
