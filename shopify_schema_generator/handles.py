from __future__ import annotations

import re

_WHITESPACE_RUN = re.compile(r'\s+')


def make_handle(name: str) -> str:
    """Lowercase a section name and collapse each whitespace run into '_'.

    Used for translation keys, locale section keys, project ids and
    download filenames, so all of them stay in step.
    """
    if name is None:
        return ''
    if not isinstance(name, str):
        name = str(name)
    return _WHITESPACE_RUN.sub('_', name.lower())
