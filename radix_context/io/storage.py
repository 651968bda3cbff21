"""
Copy bundle files into a target project.

Two primitives back the install stages:

- :func:`copy_context` mirrors the top-level entries of the bundle's
  ``context/`` directory into ``<target>/context``, overwriting files
  with the same name and leaving unrelated files alone.
- :func:`merge_index` appends the bundle's ``AGENTS.md`` to an
  existing index (after a single newline separator) or copies it in
  when the target has none.

Both work on bytes so the result is exact regardless of encoding or
line endings. Neither is transactional: an ``OSError`` halfway through
leaves the entries already written in place.
"""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import List

from ..types import IndexAction

INDEX_SEPARATOR = b"\n"


def context_entries(src_dir: Path) -> List[Path]:
    """Top-level entries of ``src_dir`` that get copied (hidden names are skipped)."""
    return sorted(p for p in src_dir.iterdir() if not p.name.startswith("."))


def copy_context(src_dir: Path, dest_dir: Path) -> int:
    """Copy every entry of ``src_dir`` into ``dest_dir`` and return the entry count.

    ``dest_dir`` is created if missing. Sub-directories are copied
    recursively and merged into existing ones.
    """
    dest_dir.mkdir(parents=True, exist_ok=True)
    entries = context_entries(src_dir)
    for entry in entries:
        dest = dest_dir / entry.name
        if entry.is_dir():
            shutil.copytree(entry, dest, dirs_exist_ok=True)
        else:
            shutil.copy(entry, dest)
    return len(entries)


def merge_index(src_file: Path, dest_file: Path) -> IndexAction:
    """Append ``src_file`` to ``dest_file`` if it exists, otherwise copy it.

    Appending is not idempotent: running twice adds the index twice.
    """
    if dest_file.is_file():
        payload = src_file.read_bytes()
        with dest_file.open("ab") as fh:
            fh.write(INDEX_SEPARATOR)
            fh.write(payload)
        return IndexAction.APPEND
    shutil.copy(src_file, dest_file)
    return IndexAction.COPY
