"""
Tests for image processors (crop, thumbnail)
"""

import base64

import numpy as np
import pytest

from core.exceptions import InvalidPixelBufferError, OutOfBoundsError
from core.image.processors import create_thumbnail, crop
from schemas import BoundingRect
from vision.border_scanner import scan_borders


class TestCrop:
    """Test cropping to a bounding rectangle"""

    def test_crop_dimensions(self, gradient_image):
        rect = BoundingRect(left=2, top=1, width=4, height=3)
        cropped = crop(gradient_image, rect)
        assert cropped.shape == (3, 4, 3)

    def test_crop_pixels_match_source(self, gradient_image):
        """Pixel (x, y) of the crop equals source pixel (left + x, top + y)"""
        rect = BoundingRect(left=3, top=2, width=5, height=4)
        cropped = crop(gradient_image, rect)

        for y in range(rect.height):
            for x in range(rect.width):
                np.testing.assert_array_equal(
                    cropped[y, x], gradient_image[rect.top + y, rect.left + x]
                )

    def test_full_image_crop(self, gradient_image):
        height, width = gradient_image.shape[:2]
        cropped = crop(gradient_image, BoundingRect(left=0, top=0, width=width, height=height))
        np.testing.assert_array_equal(cropped, gradient_image)

    def test_crop_is_independent_of_source(self, gradient_image):
        rect = BoundingRect(left=1, top=1, width=3, height=3)
        cropped = crop(gradient_image, rect)
        assert not np.shares_memory(cropped, gradient_image)
        assert cropped.flags["C_CONTIGUOUS"]

        cropped[:] = 0
        assert gradient_image[1, 1].any()

    def test_crop_of_scanned_rect(self, bordered_image):
        cropped = crop(bordered_image, scan_borders(bordered_image))
        assert cropped.shape == (38, 54, 3)
        assert np.all(cropped == 200)

    @pytest.mark.parametrize(
        "rect",
        [
            BoundingRect(left=0, top=0, width=9, height=6),
            BoundingRect(left=0, top=0, width=8, height=7),
            BoundingRect(left=5, top=0, width=4, height=2),
            BoundingRect(left=0, top=6, width=1, height=1),
        ],
    )
    def test_out_of_bounds_raises(self, gradient_image, rect):
        with pytest.raises(OutOfBoundsError):
            crop(gradient_image, rect)

    @pytest.mark.parametrize(
        "rect",
        [
            BoundingRect(left=0, top=0, width=0, height=3),
            BoundingRect(left=0, top=0, width=3, height=0),
        ],
    )
    def test_empty_rect_raises(self, gradient_image, rect):
        with pytest.raises(OutOfBoundsError):
            crop(gradient_image, rect)

    def test_rejects_invalid_buffer(self):
        with pytest.raises(InvalidPixelBufferError):
            crop(np.zeros((4, 4, 4), dtype=np.uint8), BoundingRect(left=0, top=0, width=1, height=1))


class TestCreateThumbnail:
    """Test thumbnail creation"""

    def test_large_image_is_downscaled(self):
        image = np.full((200, 640, 3), 128, dtype=np.uint8)
        thumb, thumb_base64 = create_thumbnail(image, width=320)
        assert thumb.shape == (100, 320, 3)
        assert base64.b64decode(thumb_base64)[:2] == b"\xff\xd8"

    def test_small_image_kept(self, gradient_image):
        thumb, _ = create_thumbnail(gradient_image, width=320)
        assert thumb.shape == gradient_image.shape
