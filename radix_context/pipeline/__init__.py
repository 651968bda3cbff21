"""Install pipeline: a context object, stage base classes and the orchestrator."""

from .base import BaseStage, StageContext, StageResult
from .orchestrator import PipelineOrchestrator

__all__ = ["BaseStage", "StageContext", "StageResult", "PipelineOrchestrator"]
