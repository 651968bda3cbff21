"""
Install orchestrator.

Runs a sequence of stages against one :class:`StageContext`. Stage
results are recorded in ``context.data`` under ``<stage>_result``.
Exceptions raised by a stage propagate unchanged; nothing that earlier
stages wrote is rolled back.

Example
-------
>>> from .stages import CopyContextStage, MergeIndexStage
>>> orchestrator = PipelineOrchestrator([CopyContextStage(), MergeIndexStage()])
>>> ctx = StageContext(target=Path('/tmp/proj'), bundle=bundle, settings=settings)
>>> orchestrator.run(ctx)
"""

from __future__ import annotations

from typing import Iterable, List

from .base import BaseStage, StageContext, StageResult


class PipelineOrchestrator:
    """Execute a series of stages on a given context."""

    def __init__(self, stages: Iterable[BaseStage]):
        self.stages: List[BaseStage] = list(stages)

    def run(self, context: StageContext) -> List[StageResult]:
        """Run all stages sequentially.

        Returns
        -------
        list of StageResult
            The results returned by each stage in order. If a stage
            reports ``success=False`` the remaining stages are skipped.
        """
        results: List[StageResult] = []
        for stage in self.stages:
            result = stage.run(context)
            results.append(result)
            context.data[f"{stage.name}_result"] = result.data
            if not result.success:
                print(f"[Pipeline] Halting install due to failure in stage '{stage.name}': {result.message}")
                break
        return results
