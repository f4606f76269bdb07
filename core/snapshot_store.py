"""
Snapshot Store - finds, decodes and writes snapshot image files
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

import numpy as np
from PIL import Image, UnidentifiedImageError

from core.constants import ErrorMessages, SnapshotConstants
from core.exceptions import ImageDecodeError, ImageEncodeError, SnapshotNotFoundError
from core.image.buffer import validate_pixel_buffer
from core.image.converters import ImageConverters

logger = logging.getLogger(__name__)


@dataclass
class SnapshotFile:
    """Candidate snapshot file"""

    path: Path
    created: float


def _creation_time(stat: os.stat_result) -> float:
    # st_birthtime exists on macOS/BSD/Windows; Linux only exposes ctime
    return getattr(stat, "st_birthtime", stat.st_ctime)


class SnapshotStore:
    """
    File-side collaborator of the snapshot pipeline.

    Locates the newest snapshot in a directory, decodes it into an RGB pixel
    buffer and writes processed buffers back next to the source with a
    derived name. Files carrying the output suffix are never selected, so
    the store does not pick up its own prior outputs.
    """

    def __init__(
        self,
        output_suffix: str = SnapshotConstants.OUTPUT_SUFFIX,
        prefix: Optional[str] = None,
    ):
        """
        Initialize Snapshot Store

        Args:
            output_suffix: Suffix appended to the source stem for outputs
            prefix: If set, only files whose name starts with it are candidates
        """
        self.output_suffix = output_suffix
        self.prefix = prefix

    def _is_candidate(self, entry: SnapshotFile) -> bool:
        stem = entry.path.stem
        if self.output_suffix and self.output_suffix in stem:
            return False
        if self.prefix and not entry.path.name.startswith(self.prefix):
            return False
        return True

    def list_candidates(self, directory: Union[str, Path]) -> List[SnapshotFile]:
        """
        List candidate snapshot files in a directory.

        Entries whose metadata cannot be read are skipped with a warning.

        Args:
            directory: Directory to search

        Returns:
            Candidate files (unordered)

        Raises:
            SnapshotNotFoundError: If the directory cannot be read
        """
        directory = Path(directory)

        try:
            entries = list(os.scandir(directory))
        except OSError as e:
            raise SnapshotNotFoundError(
                ErrorMessages.SNAPSHOT_DIR_UNREADABLE.format(directory=directory), directory
            ) from e

        candidates = []
        for entry in entries:
            try:
                if not entry.is_file():
                    continue
                snapshot = SnapshotFile(path=Path(entry.path), created=_creation_time(entry.stat()))
            except OSError as e:
                logger.warning(f"Couldn't get metadata of file {entry.path}: {e}")
                continue

            if self._is_candidate(snapshot):
                candidates.append(snapshot)

        return candidates

    def find_latest(self, directory: Union[str, Path]) -> Path:
        """
        Find the most recently created snapshot in a directory.

        Args:
            directory: Directory to search

        Returns:
            Path of the newest candidate file

        Raises:
            SnapshotNotFoundError: If the directory is unreadable or has no candidates
        """
        directory = Path(directory)
        candidates = self.list_candidates(directory)

        if not candidates:
            raise SnapshotNotFoundError(
                ErrorMessages.NO_SNAPSHOT_FOUND.format(directory=directory), directory
            )

        latest = max(candidates, key=lambda f: (f.created, f.path.name))
        logger.info(f"Latest snapshot in {directory}: {latest.path.name}")
        return latest.path

    @staticmethod
    def load(path: Union[str, Path]) -> np.ndarray:
        """
        Decode an image file into an RGB pixel buffer.

        Args:
            path: Image file path

        Returns:
            Pixel buffer of shape (H, W, 3), dtype uint8

        Raises:
            ImageDecodeError: If the file cannot be read or decoded
        """
        path = Path(path)

        try:
            with Image.open(path) as image:
                pixels = ImageConverters.pil_to_numpy(image)
        except (OSError, UnidentifiedImageError, ValueError) as e:
            raise ImageDecodeError(ErrorMessages.DECODE_FAILED.format(path=path)) from e

        logger.debug(f"Loaded {path.name}: {pixels.shape[1]}x{pixels.shape[0]}")
        return pixels

    def output_path_for(self, source: Union[str, Path]) -> Path:
        """
        Derive the output path for a source file: same directory and
        extension, stem extended by the output suffix.
        """
        source = Path(source)
        return source.with_name(f"{source.stem}{self.output_suffix}{source.suffix}")

    @staticmethod
    def save(pixels: np.ndarray, path: Union[str, Path]) -> Path:
        """
        Encode a pixel buffer to the format implied by the file extension.

        Args:
            pixels: RGB pixel buffer
            path: Destination file path

        Returns:
            The destination path

        Raises:
            ImageEncodeError: If encoding or writing fails
        """
        path = Path(path)
        validate_pixel_buffer(pixels)

        try:
            ImageConverters.numpy_to_pil(pixels).save(path)
        except (OSError, ValueError, KeyError) as e:
            raise ImageEncodeError(ErrorMessages.ENCODE_FAILED.format(path=path)) from e

        logger.info(f"Saved {pixels.shape[1]}x{pixels.shape[0]} image to {path}")
        return path
