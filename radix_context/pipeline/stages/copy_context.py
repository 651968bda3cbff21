"""
Context directory copy stage.

Creates ``<target>/context`` and copies the bundle's context entries
into it. The number of top-level entries copied is stored under
``context.data["files_copied"]``.
"""

from __future__ import annotations

from ... import console
from ...io import storage
from ..base import BaseStage, StageContext, StageResult


class CopyContextStage(BaseStage):
    name = "copy_context"

    def run(self, context: StageContext) -> StageResult:
        dir_name = context.settings.CONTEXT_DIR_NAME
        dest_dir = context.target / dir_name
        count = storage.copy_context(context.bundle.context_dir, dest_dir)
        context.data["files_copied"] = count
        console.say("copy", f"{dir_name}/ -> {dest_dir}/ ({count} files)")
        return StageResult(name=self.name, success=True, data={"dest": dest_dir, "count": count})
