from __future__ import annotations

import math
from typing import Any, Dict, List

FIELD_TYPES = [
    'text',
    'textarea',
    'number',
    'radio',
    'select',
    'checkbox',
    'range',
    'color',
    'image_picker',
    'url',
    'richtext',
    'html',
    'video_url',
    'product',
    'collection',
    'page',
    'blog',
    'article',
]

NUMERIC_TYPES = ('number', 'range')


def field_type_label(field_type: str) -> str:
    """Display label for a field type, e.g. 'image_picker' -> 'image picker'."""
    return field_type.replace('_', ' ', 1).lower()


def _in_range(fields: List[Dict[str, Any]], index) -> bool:
    return isinstance(index, int) and 0 <= index < len(fields)


def add_field(fields: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Append a text field numbered after the current list length.

    Numbering follows the count, so removing and re-adding fields can repeat
    an id that is still in use.
    """
    fields = fields or []
    n = len(fields) + 1
    return [*fields, {'type': 'text', 'id': f'field_{n}', 'label': f'Field {n}'}]


def remove_field(fields: List[Dict[str, Any]], index: int) -> List[Dict[str, Any]]:
    fields = fields or []
    if not _in_range(fields, index):
        return list(fields)
    return [f for i, f in enumerate(fields) if i != index]


def update_field(fields: List[Dict[str, Any]], index: int, new_field: Dict[str, Any]) -> List[Dict[str, Any]]:
    fields = fields or []
    updated = list(fields)
    if _in_range(fields, index):
        updated[index] = new_field
    return updated


def set_field_attribute(fields: List[Dict[str, Any]], index: int, key: str, value: Any) -> List[Dict[str, Any]]:
    """Replace one attribute of the field at `index`, leaving the rest as-is."""
    fields = fields or []
    if not _in_range(fields, index):
        return list(fields)
    return update_field(fields, index, {**fields[index], key: value})


def parse_default_input(field_type: str, raw: Any) -> Any:
    """Turn text typed into the default box into a value for the schema.

    Numeric text becomes a number for number/range fields and 'true'/'false'
    becomes a bool for checkboxes. Anything else is kept as typed.
    """
    if not isinstance(raw, str):
        return raw

    text = raw.strip()
    if field_type in NUMERIC_TYPES and text:
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            return raw
        # NaN and infinity have no JSON form.
        return number if math.isfinite(number) else raw

    if field_type == 'checkbox' and text.lower() in ('true', 'false'):
        return text.lower() == 'true'

    return raw


def format_default_for_input(value: Any) -> str:
    if value is None:
        return ''
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return str(value)
