"""
Image processing utilities - modular architecture.

This package provides focused image processing utilities:
- buffer: Pixel buffer validation
- converters: Format conversions (NumPy, PIL, base64, luma)
- processors: Image operations (crop, thumbnail)
"""

from core.image.buffer import validate_pixel_buffer
from core.image.converters import ImageConverters
from core.image.processors import create_thumbnail, crop

__all__ = ["ImageConverters", "create_thumbnail", "crop", "validate_pixel_buffer"]
