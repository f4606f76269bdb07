"""
Snapshot Service - Business logic for the snapshot print pipeline.

This service orchestrates one run of the pipeline: find the latest
snapshot, decode it, crop its black borders, lift its levels, write the
result next to the source and optionally print it. Every failure is
re-raised as SnapshotProcessingError tagged with the stage that failed.
"""

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Union

from core.enums import PipelineStage
from core.exceptions import OutOfBoundsError, SnapshotFlowError, SnapshotProcessingError
from core.image.processors import crop
from core.print_dispatcher import PrintDispatcher
from core.snapshot_store import SnapshotStore
from core.utils.decorators import timer
from schemas import BoundingRect, Size
from vision.border_scanner import scan_borders
from vision.levels_remap import remap_levels

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[PipelineStage], None]

_STAGE_FAILURES = {
    PipelineStage.FIND: "failed to get most recent file in given directory",
    PipelineStage.OPEN: "failed to open snapshot",
    PipelineStage.CROP: "failed to crop snapshot",
    PipelineStage.BRIGHTEN: "failed to brighten snapshot",
    PipelineStage.WRITE: "failed to write output image",
    PipelineStage.PRINT: "failed to print output image",
}


@dataclass
class SnapshotResult:
    """Outcome of one pipeline run"""

    source_path: Path
    output_path: Path
    bounding_rect: BoundingRect
    original_size: Size
    output_size: Size
    luma_offset: int
    printed: bool
    processing_time_ms: int = 0


class SnapshotService:
    """
    Service for processing captured snapshots.

    Combines the snapshot store, border scanner, levels remap and print
    dispatcher into a single run.
    """

    def __init__(
        self,
        store: Optional[SnapshotStore] = None,
        printer: Optional[PrintDispatcher] = None,
    ):
        """
        Initialize snapshot service.

        Args:
            store: Snapshot store instance
            printer: Print dispatcher instance
        """
        self.store = store or SnapshotStore()
        self.printer = printer or PrintDispatcher()

    @contextmanager
    def _stage(self, stage: PipelineStage, progress: Optional[ProgressCallback]):
        if progress is not None:
            progress(stage)
        logger.info(stage.description)

        try:
            yield
        except OutOfBoundsError:
            # Scanner/cropper contract violation, not a user-facing failure
            logger.critical(f"Crop rectangle rejected during {stage.value} stage", exc_info=True)
            raise
        except (SnapshotFlowError, ValueError) as e:
            logger.error(f"{stage.value} stage failed: {e}")
            raise SnapshotProcessingError(stage, _STAGE_FAILURES[stage]) from e

    def process(
        self,
        snapshot_dir: Union[str, Path],
        luma_offset: int,
        send_to_printer: bool = True,
        progress: Optional[ProgressCallback] = None,
    ) -> SnapshotResult:
        """
        Run the full pipeline on the newest snapshot in a directory.

        Args:
            snapshot_dir: Directory to take the newest snapshot from
            luma_offset: Brightness lift in [0, 255]
            send_to_printer: Whether to dispatch the output to the printer
            progress: Optional callback invoked before each stage

        Returns:
            SnapshotResult describing the written output

        Raises:
            SnapshotProcessingError: If any stage fails
            OutOfBoundsError: If the scanned rectangle does not fit the image
        """
        with timer() as t:
            with self._stage(PipelineStage.FIND, progress):
                source_path = self.store.find_latest(snapshot_dir)

            with self._stage(PipelineStage.OPEN, progress):
                pixels = self.store.load(source_path)
            height, width = pixels.shape[:2]

            with self._stage(PipelineStage.CROP, progress):
                rect = scan_borders(pixels)
                cropped = crop(pixels, rect)
            del pixels

            with self._stage(PipelineStage.BRIGHTEN, progress):
                remap_levels(cropped, luma_offset)

            with self._stage(PipelineStage.WRITE, progress):
                output_path = self.store.save(cropped, self.store.output_path_for(source_path))

            printed = False
            if send_to_printer:
                with self._stage(PipelineStage.PRINT, progress):
                    self.printer.dispatch(output_path)
                printed = True

        result = SnapshotResult(
            source_path=source_path,
            output_path=output_path,
            bounding_rect=rect,
            original_size=Size(width=width, height=height),
            output_size=Size(width=rect.width, height=rect.height),
            luma_offset=luma_offset,
            printed=printed,
            processing_time_ms=t.elapsed_ms,
        )

        logger.info(
            f"Processed {source_path.name}: cropped {width}x{height} to "
            f"{rect.width}x{rect.height}, output {output_path.name} in {t.elapsed_ms}ms"
        )

        return result

    def latest_snapshot(self, snapshot_dir: Union[str, Path]) -> Path:
        """Return the snapshot the next run would pick."""
        with self._stage(PipelineStage.FIND, None):
            return self.store.find_latest(snapshot_dir)
