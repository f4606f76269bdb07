"""
Tests for SnapshotStore module
"""

import os
import time

import numpy as np
import pytest
from PIL import Image

from core.exceptions import ImageDecodeError, ImageEncodeError, SnapshotNotFoundError
from core.snapshot_store import SnapshotStore


def _touch_image(path, value=100, size=(8, 6)):
    Image.new("RGB", size, (value, value, value)).save(path)
    return path


class TestFindLatest:
    """Test snapshot discovery"""

    def test_single_file(self, store, snapshot_dir):
        assert store.find_latest(snapshot_dir).name == "vlcsnap-0001.png"

    def test_newest_file_wins(self, store, tmp_path):
        _touch_image(tmp_path / "vlcsnap-0001.png")
        time.sleep(0.02)
        _touch_image(tmp_path / "vlcsnap-0002.png")

        assert store.find_latest(tmp_path).name == "vlcsnap-0002.png"

    def test_skips_prior_outputs(self, store, tmp_path):
        _touch_image(tmp_path / "vlcsnap-0001.png")
        time.sleep(0.02)
        _touch_image(tmp_path / "vlcsnap-0001-vlc-print-out.png")

        assert store.find_latest(tmp_path).name == "vlcsnap-0001.png"

    def test_skips_directories(self, store, tmp_path):
        _touch_image(tmp_path / "vlcsnap-0001.png")
        time.sleep(0.02)
        (tmp_path / "vlcsnap-0002.png").mkdir()

        assert store.find_latest(tmp_path).name == "vlcsnap-0001.png"

    def test_prefix_filter(self, tmp_path):
        store = SnapshotStore(prefix="vlcsnap-")
        _touch_image(tmp_path / "vlcsnap-0001.png")
        time.sleep(0.02)
        _touch_image(tmp_path / "holiday.png")

        assert store.find_latest(tmp_path).name == "vlcsnap-0001.png"

    def test_custom_output_suffix(self, tmp_path):
        store = SnapshotStore(output_suffix="_printed")
        _touch_image(tmp_path / "a.png")
        time.sleep(0.02)
        _touch_image(tmp_path / "a_printed.png")

        assert store.find_latest(tmp_path).name == "a.png"

    def test_empty_directory_raises(self, store, tmp_path):
        with pytest.raises(SnapshotNotFoundError) as exc_info:
            store.find_latest(tmp_path)
        assert exc_info.value.directory == tmp_path

    def test_only_outputs_raises(self, store, tmp_path):
        _touch_image(tmp_path / "x-vlc-print-out.png")
        with pytest.raises(SnapshotNotFoundError):
            store.find_latest(tmp_path)

    def test_missing_directory_raises(self, store, tmp_path):
        with pytest.raises(SnapshotNotFoundError) as exc_info:
            store.find_latest(tmp_path / "missing")
        assert isinstance(exc_info.value.__cause__, OSError)

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unavailable")
    def test_broken_entries_are_skipped(self, store, tmp_path):
        _touch_image(tmp_path / "vlcsnap-0001.png")
        try:
            os.symlink(tmp_path / "nowhere.png", tmp_path / "vlcsnap-9999.png")
        except OSError:
            pytest.skip("cannot create symlinks here")

        assert store.find_latest(tmp_path).name == "vlcsnap-0001.png"


class TestLoadSave:
    """Test decode/encode round trips through files"""

    def test_load_rgb(self, store, tmp_path):
        path = _touch_image(tmp_path / "a.png", value=77, size=(5, 3))
        pixels = store.load(path)
        assert pixels.shape == (3, 5, 3)
        assert pixels.dtype == np.uint8
        assert np.all(pixels == 77)

    def test_load_converts_alpha_and_greyscale(self, store, tmp_path):
        Image.new("RGBA", (4, 4), (10, 20, 30, 0)).save(tmp_path / "rgba.png")
        Image.new("L", (4, 4), 90).save(tmp_path / "grey.png")

        assert store.load(tmp_path / "rgba.png").shape == (4, 4, 3)
        grey = store.load(tmp_path / "grey.png")
        assert grey.shape == (4, 4, 3)
        assert np.all(grey == 90)

    def test_load_missing_file_raises(self, store, tmp_path):
        with pytest.raises(ImageDecodeError):
            store.load(tmp_path / "missing.png")

    def test_load_garbage_raises(self, store, tmp_path):
        path = tmp_path / "garbage.png"
        path.write_bytes(b"not an image")
        with pytest.raises(ImageDecodeError):
            store.load(path)

    def test_save_png_is_lossless(self, store, tmp_path, gradient_image):
        path = store.save(gradient_image, tmp_path / "out.png")
        np.testing.assert_array_equal(store.load(path), gradient_image)

    def test_save_unknown_extension_raises(self, store, tmp_path, gradient_image):
        with pytest.raises(ImageEncodeError):
            store.save(gradient_image, tmp_path / "out.unknownext")

    def test_save_to_missing_directory_raises(self, store, tmp_path, gradient_image):
        with pytest.raises(ImageEncodeError):
            store.save(gradient_image, tmp_path / "missing" / "out.png")


class TestOutputPath:
    """Test output file naming"""

    def test_same_directory_and_extension(self, store, tmp_path):
        source = tmp_path / "vlcsnap-2024-01-01-12h00m00s.jpg"
        assert store.output_path_for(source) == tmp_path / "vlcsnap-2024-01-01-12h00m00s-vlc-print-out.jpg"

    def test_output_is_not_a_candidate(self, store, tmp_path):
        source = _touch_image(tmp_path / "vlcsnap-0001.png")
        output = store.output_path_for(source)
        time.sleep(0.02)
        _touch_image(output)

        assert store.find_latest(tmp_path) == source
