"""
Pixel buffer validation.

A pixel buffer is a NumPy array of shape (height, width, 3) and dtype uint8,
RGB channel order, row-major.
"""

import numpy as np

from core.constants import BorderConstants, ErrorMessages
from core.exceptions import InvalidPixelBufferError


def validate_pixel_buffer(pixels: np.ndarray) -> np.ndarray:
    """
    Check that an array is a well-formed RGB pixel buffer.

    Args:
        pixels: Candidate pixel buffer

    Returns:
        The same array, unchanged

    Raises:
        InvalidPixelBufferError: If shape or dtype is wrong
    """
    if not isinstance(pixels, np.ndarray):
        raise InvalidPixelBufferError(
            ErrorMessages.INVALID_PIXEL_BUFFER.format(reason=f"expected ndarray, got {type(pixels).__name__}")
        )

    if pixels.ndim != 3 or pixels.shape[2] != BorderConstants.CHANNELS:
        raise InvalidPixelBufferError(
            ErrorMessages.INVALID_PIXEL_BUFFER.format(reason=f"expected shape (H, W, 3), got {pixels.shape}")
        )

    if pixels.dtype != np.uint8:
        raise InvalidPixelBufferError(
            ErrorMessages.INVALID_PIXEL_BUFFER.format(reason=f"expected dtype uint8, got {pixels.dtype}")
        )

    return pixels

