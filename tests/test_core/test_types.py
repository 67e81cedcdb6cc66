"""Tests for core types and errors."""

import numpy as np
import pytest

from chromakey.core import (
    ChromaKeyError, CodecUnavailableError, ConfigurationError, StreamIOError,
    KeyColor, KeyParameters, KeySelection, SyncResult,
)


class TestKeyColor:
    def test_channel_range(self):
        with pytest.raises(ConfigurationError):
            KeyColor(0, 256, 0)
        with pytest.raises(ConfigurationError):
            KeyColor(-1, 0, 0)

    def test_from_frame(self):
        image = np.zeros((4, 6, 3), dtype=np.uint8)
        image[3, 5] = (10, 20, 30)
        color = KeyColor.from_frame(image, x=5, y=3)
        assert color.bgr == (10, 20, 30)
        assert isinstance(color.b, int)

    def test_from_frame_out_of_bounds(self):
        image = np.zeros((4, 6, 3), dtype=np.uint8)
        with pytest.raises(ValueError):
            KeyColor.from_frame(image, x=6, y=0)
        with pytest.raises(ValueError):
            KeyColor.from_frame(image, x=0, y=-1)

    def test_green_to_hsv(self):
        hue, saturation, value = KeyColor(0, 255, 0).to_hsv()
        assert hue == pytest.approx(120.0)
        assert saturation == pytest.approx(1.0)
        assert value == pytest.approx(1.0)

    def test_gray_has_no_saturation(self):
        _, saturation, value = KeyColor(128, 128, 128).to_hsv()
        assert saturation == pytest.approx(0.0)
        assert value == pytest.approx(128 / 255)

    def test_from_hsv(self):
        assert KeyColor.from_hsv(120.0, 1.0, 1.0).bgr == (0, 255, 0)
        assert KeyColor.from_hsv(240.0, 1.0, 1.0).bgr == (255, 0, 0)
        assert KeyColor.from_hsv(0.0, 0.0, 0.0).bgr == (0, 0, 0)

    def test_hashable(self):
        assert len({KeyColor(0, 255, 0), KeyColor(0, 255, 0)}) == 1


class TestKeyParameters:
    def test_defaults(self):
        params = KeyParameters()
        assert (params.tolerance, params.softness, params.defringe) == (12, 2, 40)

    @pytest.mark.parametrize("kwargs", [
        {"tolerance": -1},
        {"tolerance": 101},
        {"softness": -1},
        {"defringe": -1},
        {"defringe": 101},
    ])
    def test_out_of_range(self, kwargs):
        with pytest.raises(ConfigurationError):
            KeyParameters(**kwargs)

    def test_bounds_accepted(self):
        KeyParameters(tolerance=0, softness=0, defringe=0)
        KeyParameters(tolerance=100, softness=50, defringe=100)

    def test_frozen(self):
        params = KeyParameters()
        with pytest.raises(AttributeError):
            params.tolerance = 50


class TestKeySelection:
    def test_frame_size(self):
        selection = KeySelection(
            reference_frame=np.zeros((24, 32, 3), dtype=np.uint8),
            color=KeyColor(0, 255, 0),
            parameters=KeyParameters(),
        )
        assert selection.frame_size == (32, 24)


def test_sync_result_defaults():
    result = SyncResult()
    assert result.frames_processed == 0
    assert result.cancelled is False


def test_error_hierarchy():
    assert issubclass(ConfigurationError, ChromaKeyError)
    assert issubclass(ConfigurationError, ValueError)
    assert issubclass(StreamIOError, IOError)
    assert issubclass(CodecUnavailableError, RuntimeError)
    assert not issubclass(StreamIOError, ConfigurationError)
