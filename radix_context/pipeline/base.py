"""
Abstract base classes for install stages.

Stages are small units that each perform one step of an install (copy
the context directory, merge the index file). Each stage receives a
:class:`StageContext` holding the resolved target, the bundle and a
mutable data dictionary. Stages write their outputs into
``context.data`` under agreed keys so the caller can build a report
once the run finishes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from ..config import Settings
from ..types import Bundle


@dataclass
class StageResult:
    """Represents the outcome of a stage.

    Filesystem errors are not reported here: they propagate out of
    :meth:`BaseStage.run` and abort the install. ``success=False`` is
    reserved for a stage that decides, without an exception, that the
    install cannot continue.
    """
    name: str
    success: bool
    data: Any = None
    message: Optional[str] = None


@dataclass
class StageContext:
    """Holds contextual information passed to each stage.

    Attributes
    ----------
    target : Path
        Absolute path of the directory being installed into.
    bundle : Bundle
        The resolved bundle to copy from.
    settings : Settings
        Active configuration (directory and file names).
    data : Dict[str, Any]
        Mutable mapping storing stage outputs, e.g. ``files_copied``
        and ``index_action``.
    """
    target: Path
    bundle: Bundle
    settings: Settings
    data: Dict[str, Any] = field(default_factory=dict)


class BaseStage:
    """Base class for all install stages.

    Subclasses implement :meth:`run`.
    """

    name: str = "base"

    def run(self, context: StageContext) -> StageResult:
        raise NotImplementedError
