from __future__ import annotations

import json
import logging
from copy import deepcopy
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional

from .handles import make_handle

logger = logging.getLogger(__name__)

PROJECTS_KEY = 'shopifySchemaProjects'


def utc_timestamp(now: Optional[datetime] = None) -> str:
    """ISO-8601 UTC timestamp with milliseconds and a trailing 'Z'."""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


def make_project(name: str, fields: List[Dict[str, Any]]) -> Dict[str, Any]:
    return {
        'id': make_handle(name),
        'name': name,
        'fields': deepcopy(list(fields or [])),
        'lastModified': utc_timestamp(),
    }


def find_project(projects: List[Dict[str, Any]], project_id: str) -> Optional[Dict[str, Any]]:
    for project in projects or []:
        if project.get('id') == project_id:
            return project
    return None


class ProjectRepository:
    """Saved projects kept as one JSON array under a single storage key.

    There is no locking: two writers sharing a backend overwrite each other
    and the last save wins.
    """

    def __init__(self, storage, key: str = PROJECTS_KEY, clock: Callable[[], str] = utc_timestamp):
        self.storage = storage
        self.key = key
        self.clock = clock

    def load(self) -> List[Dict[str, Any]]:
        try:
            raw = self.storage.get_item(self.key)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not read saved projects from '{self.key}': {e}")
            return []

        if raw is None:
            return []

        try:
            data = json.loads(raw)
        except ValueError as e:
            logger.warning(f"Ignoring malformed saved projects under '{self.key}': {e}")
            return []

        if not isinstance(data, list):
            logger.warning(f"Ignoring saved projects under '{self.key}': expected a list, got {type(data).__name__}")
            return []

        return [p for p in data if isinstance(p, dict)]

    def _persist(self, projects: List[Dict[str, Any]]) -> None:
        self.storage.set_item(self.key, json.dumps(projects, ensure_ascii=False))

    def save(self, projects: List[Dict[str, Any]], project: Dict[str, Any]) -> List[Dict[str, Any]]:
        """Insert or replace `project` by the id derived from its name.

        A matching entry keeps its position; otherwise the project is appended.
        """
        saved = {
            **project,
            'id': make_handle(project.get('name', '')),
            'fields': deepcopy(list(project.get('fields') or [])),
            'lastModified': self.clock(),
        }

        updated = list(projects or [])
        for idx, existing in enumerate(updated):
            if existing.get('id') == saved['id']:
                updated[idx] = saved
                break
        else:
            updated.append(saved)

        self._persist(updated)
        logger.info(f"Saved project '{saved.get('name', '')}' as '{saved['id']}' ({len(saved['fields'])} fields)")
        return updated

    def delete(self, projects: List[Dict[str, Any]], project_id: str) -> List[Dict[str, Any]]:
        updated = [p for p in projects or [] if p.get('id') != project_id]
        self._persist(updated)
        logger.info(f"Deleted project '{project_id}' ({len(projects or []) - len(updated)} removed)")
        return updated
