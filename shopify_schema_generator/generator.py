from __future__ import annotations

import json
from typing import Any, Dict, List

from .handles import make_handle


def translation_key(handle: str, field_id: str, attribute: str) -> str:
    return f"t:sections.{handle}.settings.{field_id}.{attribute}"


def _has_info(field: Dict[str, Any]) -> bool:
    info = field.get('info')
    return isinstance(info, str) and info != ''


def build_schema(name: str, fields: List[Dict[str, Any]]) -> Dict[str, Any]:
    """Build the section schema: one settings entry per field, in order.

    Labels and help text are emitted as translation keys pointing into the
    locale document. `default` is copied whenever the key is present, even
    for 0, False or an empty string.
    """
    handle = make_handle(name)
    settings: List[Dict[str, Any]] = []
    for field in fields or []:
        field_id = field.get('id')
        entry: Dict[str, Any] = {
            'type': field.get('type'),
            'id': field_id,
            'label': translation_key(handle, field_id, 'label'),
        }
        if 'default' in field and field['default'] is not None:
            entry['default'] = field['default']
        if _has_info(field):
            entry['info'] = translation_key(handle, field_id, 'info')
        settings.append(entry)
    return {'name': name, 'settings': settings}


def build_locales(name: str, fields: List[Dict[str, Any]]) -> Dict[str, Any]:
    """Build the locale document keyed by handle, then by field id.

    Duplicate ids collapse to the last field carrying them.
    """
    settings: Dict[str, Dict[str, Any]] = {}
    for field in fields or []:
        entry: Dict[str, Any] = {'label': field.get('label')}
        if _has_info(field):
            entry['info'] = field['info']
        settings[field.get('id')] = entry
    return {'sections': {make_handle(name): {'name': name, 'settings': settings}}}


def to_json_text(document: Any) -> str:
    return json.dumps(document, indent=2, ensure_ascii=False)


def generate_schema(name: str, fields: List[Dict[str, Any]]) -> str:
    return to_json_text(build_schema(name, fields))


def generate_locales(name: str, fields: List[Dict[str, Any]]) -> str:
    return to_json_text(build_locales(name, fields))
