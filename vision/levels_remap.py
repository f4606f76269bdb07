"""
Brightness lift for cropped snapshots.

Each channel c is remapped as

    255 - floor((255 - c) * (255 - offset) / 255)

with the factor and product in float32, truncated toward zero. Pure white
is a fixed point; offset 0 is the identity and offset 255 maps everything
to white.
"""

import logging
import numbers

import numpy as np

from core.constants import ErrorMessages, LevelsConstants
from core.image.buffer import validate_pixel_buffer

logger = logging.getLogger(__name__)


def _check_luma_offset(luma_offset) -> int:
    if isinstance(luma_offset, bool) or not isinstance(luma_offset, numbers.Integral):
        raise ValueError(ErrorMessages.INVALID_LUMA_OFFSET.format(value=luma_offset))

    if not LevelsConstants.MIN_LUMA_OFFSET <= luma_offset <= LevelsConstants.MAX_LUMA_OFFSET:
        raise ValueError(ErrorMessages.INVALID_LUMA_OFFSET.format(value=luma_offset))

    return int(luma_offset)


def build_levels_lut(luma_offset: int) -> np.ndarray:
    """
    Build the 256-entry lookup table for a luma offset.

    Args:
        luma_offset: Brightness lift in [0, 255]

    Returns:
        uint8 array where lut[c] is the remapped value of channel value c
    """
    luma_offset = _check_luma_offset(luma_offset)
    channel_max = np.float32(LevelsConstants.CHANNEL_MAX)

    factor = np.float32(LevelsConstants.CHANNEL_MAX - luma_offset) / channel_max
    levels = np.arange(LevelsConstants.CHANNEL_MAX + 1, dtype=np.float32)

    lifted = np.trunc((channel_max - levels) * factor)
    return (channel_max - lifted).astype(np.uint8)


def remap_levels(pixels: np.ndarray, luma_offset: int) -> None:
    """
    Lift shadows of a pixel buffer in place.

    All three channels of every pixel are remapped with the same factor.
    An offset of 0 leaves the buffer untouched.

    Args:
        pixels: RGB pixel buffer, modified in place
        luma_offset: Brightness lift in [0, 255]

    Raises:
        ValueError: If luma_offset is not an integer in [0, 255]
    """
    validate_pixel_buffer(pixels)
    luma_offset = _check_luma_offset(luma_offset)

    if luma_offset == LevelsConstants.NO_CHANGE_OFFSET:
        return

    lut = build_levels_lut(luma_offset)
    pixels[...] = lut[pixels]

    logger.debug(f"Remapped levels of {pixels.shape[1]}x{pixels.shape[0]} buffer with offset {luma_offset}")
