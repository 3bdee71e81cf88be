import json
import re

from marshmallow import fields

NUMERIC_PATTERN = re.compile(r'^[+-]?\d+(\.\d+)?$')


class FlexibleString(fields.String):
    """String field that also accepts JSON numbers (phone numbers sent as ints)."""

    def _deserialize(self, value, attr, data, **kwargs):
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            value = str(value)
        return super()._deserialize(value, attr, data, **kwargs)


class TrimmedString(fields.String):
    """String with surrounding whitespace removed, so blank text fails Length(min=1)."""

    def _deserialize(self, value, attr, data, **kwargs):
        value = super()._deserialize(value, attr, data, **kwargs)
        return value.strip()


class NumericString(fields.Field):
    """Numeric value (number or digit string) stored as text."""

    default_error_messages = {"invalid": "Must be a number."}

    def _deserialize(self, value, attr, data, **kwargs):
        if isinstance(value, bool):
            raise self.make_error("invalid")
        if isinstance(value, (int, float)):
            return str(value)
        if isinstance(value, str) and NUMERIC_PATTERN.match(value.strip()):
            return value.strip()
        raise self.make_error("invalid")


class JsonText(fields.Field):
    """Any JSON value kept as text: strings as-is, everything else JSON encoded."""

    def _deserialize(self, value, attr, data, **kwargs):
        if value is None or isinstance(value, str):
            return value
        return json.dumps(value)


def decode_json_text(value):
    """Inverse of JsonText for responses; plain strings come back unchanged."""
    if value is None:
        return None
    try:
        return json.loads(value)
    except (json.JSONDecodeError, TypeError):
        return value
