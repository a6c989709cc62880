from __future__ import annotations

import logging
from copy import deepcopy
from datetime import datetime
from typing import Any, Dict, List

import gradio as gr

from .config import settings
from .fields import parse_default_input, set_field_attribute
from .generator import generate_locales, generate_schema
from .io_utils import download_filename, write_download_file
from .repository import find_project, make_project
from .status import flash

logger = logging.getLogger(__name__)

SAVE_MESSAGE = "Project saved successfully!"
NEW_PROJECT_MESSAGE = "Started new project"
COPY_LABEL = "Copy"
COPIED_LABEL = "Copied!"

# Handlers that sleep while a status clears run without a per-event worker cap.
FLASH_LISTENER_OPTIONS = {"concurrency_limit": None}


def refresh_documents(name, fields):
    name = name or ""
    fields = fields or []
    return generate_schema(name, fields), generate_locales(name, fields)


def handle_field_change(fields, value, index, key):
    fields = fields or []
    if not (0 <= index < len(fields)):
        return list(fields)

    field = fields[index]
    # Leaving an untouched empty box should not add the key.
    if key not in field and value in (None, ""):
        return list(fields)

    if key == "default":
        value = parse_default_input(field.get("type"), value)
    return set_field_attribute(fields, index, key, value)


def format_last_modified(timestamp: Any) -> str:
    if not isinstance(timestamp, str) or not timestamp:
        return ""
    try:
        parsed = datetime.fromisoformat(timestamp.replace("Z", "+00:00"))
    except ValueError:
        return timestamp
    return parsed.date().isoformat()


def project_summary(project: Dict[str, Any]) -> str:
    return f"**{project.get('name', '')}**  \nLast modified: {format_last_modified(project.get('lastModified'))}"


def handle_new_project():
    logger.info("Starting a new project")
    first = True
    for message in flash(NEW_PROJECT_MESSAGE, settings.status_clear_seconds):
        if first:
            first = False
            yield settings.default_project_name, [], gr.update(visible=False), message
        else:
            yield gr.update(), gr.update(), gr.update(), message


def handle_save_project(repository, projects, name, fields):
    updated = repository.save(projects or [], make_project(name or "", fields or []))
    for message in flash(SAVE_MESSAGE, settings.status_clear_seconds):
        yield updated, message


def handle_load_project(projects, project_id):
    project = find_project(projects or [], project_id)
    if project is None:
        logger.warning(f"Project '{project_id}' is not in the saved list")
        return gr.update(), gr.update(), gr.update(visible=True)

    logger.info(f"Loaded project '{project_id}'")
    return project.get("name", ""), deepcopy(project.get("fields") or []), gr.update(visible=False)


def handle_delete_project(repository, projects, project_id) -> List[Dict[str, Any]]:
    return repository.delete(projects or [], project_id)


def handle_download(name, fields, kind):
    name = name or ""
    fields = fields or []
    text = generate_schema(name, fields) if kind == "schema" else generate_locales(name, fields)
    try:
        return write_download_file(text, download_filename(name, kind))
    except ValueError as e:
        logger.warning(f"Could not prepare {kind} download: {e}")
        return None


def handle_copy_ack(_text=None):
    """Flash the copy button label; the clipboard write itself runs in the browser."""
    for label in flash(COPIED_LABEL, settings.status_clear_seconds, cleared=COPY_LABEL):
        yield gr.update(value=label)
