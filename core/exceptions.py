"""
Exception hierarchy for Snapshot Print Flow.

Core components raise these directly; the service layer chains them into
SnapshotProcessingError so each failure names the stage that produced it,
and the API layer maps them to HTTP status codes.
"""

from pathlib import Path
from typing import Optional

from core.constants import ErrorMessages
from core.enums import PipelineStage


class SnapshotFlowError(Exception):
    """Base class for all Snapshot Print Flow errors."""

    def chain(self):
        """Yield this error and every chained cause, outermost first."""
        error: Optional[BaseException] = self
        while error is not None:
            yield error
            error = error.__cause__


class InvalidPixelBufferError(SnapshotFlowError, ValueError):
    """Pixel buffer does not have shape (H, W, 3) and dtype uint8."""


class NoContentFoundError(SnapshotFlowError):
    """Entire image classified as background."""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        super().__init__(ErrorMessages.NO_CONTENT_FOUND.format(width=width, height=height))


class OutOfBoundsError(SnapshotFlowError):
    """Crop rectangle is empty or does not fit inside the source buffer."""


class SnapshotNotFoundError(SnapshotFlowError):
    """No usable snapshot in the given directory."""

    def __init__(self, message: str, directory: Optional[Path] = None):
        self.directory = directory
        super().__init__(message)


class ImageDecodeError(SnapshotFlowError):
    """Snapshot file could not be read or decoded."""


class ImageEncodeError(SnapshotFlowError):
    """Output image could not be encoded or written."""


class PrintDispatchError(SnapshotFlowError):
    """Print handler failed."""


class PrintNotSupportedError(PrintDispatchError):
    """No print handler exists for this platform."""

    def __init__(self, platform: str):
        self.platform = platform
        super().__init__(ErrorMessages.PRINT_NOT_SUPPORTED.format(platform=platform))


class SnapshotProcessingError(SnapshotFlowError):
    """A pipeline stage failed; the original error is chained as __cause__."""

    def __init__(self, stage: PipelineStage, message: str):
        self.stage = stage
        super().__init__(message)
