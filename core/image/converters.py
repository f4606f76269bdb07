"""
Image format conversion utilities.

Handles conversions between different image formats:
- NumPy pixel buffers (RGB, uint8)
- PIL Images
- Base64 encoded strings
- Grayscale luma planes
"""

import base64
import io
import logging
from typing import Union

import numpy as np
from PIL import Image

from core.constants import BorderConstants

logger = logging.getLogger(__name__)


class ImageConverters:
    """Utilities for converting between image formats."""

    @staticmethod
    def numpy_to_pil(image: np.ndarray) -> Image.Image:
        """
        Convert NumPy pixel buffer to PIL Image.

        Args:
            image: NumPy array in RGB format

        Returns:
            PIL Image in RGB format
        """
        return Image.fromarray(np.ascontiguousarray(image))

    @staticmethod
    def pil_to_numpy(image: Image.Image) -> np.ndarray:
        """
        Convert PIL Image to an owned RGB pixel buffer.

        Palette, greyscale and alpha images are converted to 3-channel RGB;
        alpha is discarded.

        Args:
            image: PIL Image

        Returns:
            NumPy array of shape (H, W, 3), dtype uint8
        """
        if image.mode != "RGB":
            image = image.convert("RGB")

        return np.array(image, dtype=np.uint8)

    @staticmethod
    def to_luma(image: np.ndarray) -> np.ndarray:
        """
        Compute the BT.601 luma plane of an RGB pixel buffer.

        Args:
            image: RGB pixel buffer

        Returns:
            Grayscale uint8 array of shape (H, W), rounded down
        """
        weights = np.array(BorderConstants.LUMA_WEIGHTS, dtype=np.uint32)
        weighted = image.astype(np.uint32) @ weights
        return (weighted // BorderConstants.LUMA_WEIGHT_SCALE).astype(np.uint8)

    @staticmethod
    def to_base64(
        image: Union[np.ndarray, Image.Image, bytes], format: str = "JPEG", quality: int = 85
    ) -> str:
        """
        Convert image to base64 string.

        Args:
            image: Input image (NumPy array, PIL Image, or raw bytes)
            format: Image format (JPEG, PNG, etc.)
            quality: JPEG quality (1-100, ignored for PNG)

        Returns:
            Base64 encoded string
        """
        try:
            # If already bytes, directly encode
            if isinstance(image, bytes):
                return base64.b64encode(image).decode("utf-8")

            if isinstance(image, np.ndarray):
                image = ImageConverters.numpy_to_pil(image)

            buffer = io.BytesIO()
            save_kwargs = {"format": format}

            if format.upper() == "JPEG":
                save_kwargs["quality"] = quality
                save_kwargs["optimize"] = True

            image.save(buffer, **save_kwargs)

            return base64.b64encode(buffer.getvalue()).decode("utf-8")

        except Exception as e:
            logger.error(f"Failed to convert image to base64: {e}")
            raise
