"""
Pytest configuration and fixtures for Snapshot Print Flow tests
"""

import numpy as np
import pytest
from PIL import Image

from core.print_dispatcher import PrintDispatcher
from core.snapshot_store import SnapshotStore
from services.snapshot_service import SnapshotService


def make_bordered_image(width, height, border, value=200):
    """Uniform bright rectangle surrounded by a black border of `border` pixels."""
    image = np.zeros((height, width, 3), dtype=np.uint8)
    image[border : height - border, border : width - border] = value
    return image


def write_image(path, pixels):
    """Encode a pixel buffer to disk with Pillow and return the path."""
    Image.fromarray(pixels).save(path)
    return path


@pytest.fixture
def image_factory():
    """Factory for bordered test images"""
    return make_bordered_image


@pytest.fixture
def bordered_image():
    """64x48 image with a 5 pixel black border"""
    return make_bordered_image(64, 48, 5)


@pytest.fixture
def gradient_image():
    """Image where every pixel has distinct, non-background channel values"""
    height, width = 6, 8
    ys, xs = np.mgrid[0:height, 0:width]
    image = np.stack(
        [
            (xs * 30 + 20) % 256,
            (ys * 40 + 20) % 256,
            np.full_like(xs, 120),
        ],
        axis=-1,
    )
    return image.astype(np.uint8)


@pytest.fixture
def snapshot_dir(tmp_path):
    """Directory holding one bordered PNG snapshot"""
    write_image(tmp_path / "vlcsnap-0001.png", make_bordered_image(40, 30, 4, value=100))
    return tmp_path


@pytest.fixture
def store():
    """SnapshotStore with default output suffix"""
    return SnapshotStore()


@pytest.fixture
def unsupported_printer():
    """Print dispatcher for a platform without a print handler"""
    return PrintDispatcher(platform="linux")


@pytest.fixture
def snapshot_service(store, unsupported_printer):
    """SnapshotService wired to a real store and a non-printing dispatcher"""
    return SnapshotService(store=store, printer=unsupported_printer)
