"""
Centralized enums for Snapshot Print Flow.
"""

from enum import Enum


class PipelineStage(str, Enum):
    """Stages of the snapshot pipeline, in execution order."""

    FIND = "find"
    OPEN = "open"
    CROP = "crop"
    BRIGHTEN = "brighten"
    WRITE = "write"
    PRINT = "print"

    @property
    def description(self) -> str:
        """Human-readable progress message for this stage."""
        return _STAGE_DESCRIPTIONS[self]


_STAGE_DESCRIPTIONS = {
    PipelineStage.FIND: "finding image",
    PipelineStage.OPEN: "opening image",
    PipelineStage.CROP: "cropping image",
    PipelineStage.BRIGHTEN: "brightening image",
    PipelineStage.WRITE: "writing image",
    PipelineStage.PRINT: "printing image",
}
