"""
Index file merge stage.

Appends the bundle's ``AGENTS.md`` to the target's existing index, or
copies it in when there is none. The action taken is stored under
``context.data["index_action"]``.
"""

from __future__ import annotations

from ... import console
from ...io import storage
from ..base import BaseStage, StageContext, StageResult


class MergeIndexStage(BaseStage):
    name = "merge_index"

    def run(self, context: StageContext) -> StageResult:
        file_name = context.settings.INDEX_FILE_NAME
        dest_file = context.target / file_name
        action = storage.merge_index(context.bundle.index_file, dest_file)
        context.data["index_action"] = action
        console.say(action.value, f"{file_name} -> {dest_file}")
        return StageResult(name=self.name, success=True, data={"dest": dest_file, "action": action})
