"""Stage modules for the install pipeline.

This package exposes all concrete stage classes so that they can be
easily imported elsewhere without referencing individual files.
"""

from .copy_context import CopyContextStage
from .merge_index import MergeIndexStage

__all__ = [
    "CopyContextStage",
    "MergeIndexStage",
]


def default_stages():
    """Stages of a regular install, in order."""
    return [CopyContextStage(), MergeIndexStage()]
