from __future__ import annotations

import logging
import os
import tempfile

from .handles import make_handle

logger = logging.getLogger(__name__)

DOCUMENT_KINDS = ('schema', 'locales')


def download_filename(name: str, kind: str) -> str:
    """File name offered for a generated document, e.g. 'my_section_schema.json'."""
    if kind not in DOCUMENT_KINDS:
        raise ValueError(f"Unknown document kind: {kind!r}")
    handle = make_handle(name)
    # Path separators would escape the download directory; browsers swap them too.
    for sep in {'/', os.sep, os.altsep} - {None}:
        handle = handle.replace(sep, '_')
    return f"{handle}_{kind}.json"


def write_download_file(text: str, filename: str) -> str:
    """Write `text` to a fresh temp directory under `filename` and return the path."""
    if not filename or not filename.strip():
        raise ValueError("A file name is required.")
    if os.path.basename(filename) != filename or filename in ('.', '..'):
        raise ValueError(f"Invalid file name: {filename!r}")

    path = os.path.join(tempfile.mkdtemp(prefix='schema_generator_'), filename)
    with open(path, 'w', encoding='utf-8') as f:
        f.write(text)
    logger.debug(f"Wrote download file {path}")
    return path
