"""JSON schemas for embedded list sub-fields.

The main table stores ``categories``, ``titles`` and ``shuhras`` as JSON
arrays of strings; location shards store ``ms_locations`` as a JSON array
of objects.
"""

from jsonschema import Draft202012Validator

__all__ = [
    "STRING_LIST_SCHEMA",
    "LOCATION_LIST_SCHEMA",
    "STRING_LIST_VALIDATOR",
    "LOCATION_LIST_VALIDATOR",
]

STRING_LIST_SCHEMA: dict = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "array",
    "items": {"type": "string"},
}

_LOCATION_VALUE = {"type": ["string", "number", "null"]}

LOCATION_LIST_SCHEMA: dict = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "array",
    "items": {
        "type": "object",
        "properties": {
            "library": _LOCATION_VALUE,
            "country": _LOCATION_VALUE,
            "city": _LOCATION_VALUE,
            "catalog_num": _LOCATION_VALUE,
        },
    },
}

STRING_LIST_VALIDATOR = Draft202012Validator(STRING_LIST_SCHEMA)
LOCATION_LIST_VALIDATOR = Draft202012Validator(LOCATION_LIST_SCHEMA)
