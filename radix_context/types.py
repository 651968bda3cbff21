"""
Shared dataclasses for the installer.

These capture the values passed between the bootstrap step (which
finds or fetches a bundle), the install stages and the CLI.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional


class IndexAction(str, Enum):
    APPEND = "append"
    COPY = "copy"


@dataclass(frozen=True)
class Bundle:
    """A resolved reference bundle.

    Attributes
    ----------
    root : Path
        Directory holding the bundle.
    context_dir : Path
        The ``context/`` directory whose entries are copied.
    index_file : Path
        The ``AGENTS.md`` index file.
    remote : bool
        ``True`` when the bundle was cloned into a temporary directory.
        Such a bundle is only valid inside ``ensure_bundle()``.
    """

    root: Path
    context_dir: Path
    index_file: Path
    remote: bool = False


@dataclass(frozen=True)
class InstallReport:
    """Outcome of a successful install."""

    target: Path
    files_copied: int
    index_action: IndexAction
    remote: bool = False


@dataclass(frozen=True)
class SourceRepo:
    """An upstream repository checked out by ``radix-context-setup``."""

    name: str
    remote: str
    branch: Optional[str] = None
