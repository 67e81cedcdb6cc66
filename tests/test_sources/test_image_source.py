"""Tests for the still image source."""

import numpy as np
import pytest

from chromakey.core import CodecUnavailableError, ConfigurationError, MediaType
from chromakey.sources import ImageFileSource


@pytest.fixture
def image_path(write_image, red_square_frame):
    return write_image("fg.png", red_square_frame)


def test_missing_file(tmp_path):
    with pytest.raises(ConfigurationError):
        ImageFileSource(tmp_path / "missing.png")


def test_undecodable_file(tmp_path):
    path = tmp_path / "not_an_image.png"
    path.write_text("definitely not a PNG")
    with pytest.raises(CodecUnavailableError):
        ImageFileSource(path)


def test_properties(image_path, red_square_frame):
    source = ImageFileSource(image_path, looped=True)
    assert source.media_type == MediaType.IMAGE
    assert source.is_looped is True
    assert source.path == str(image_path)
    assert not source.is_open

    with source:
        assert source.is_open
        frame = source.read()
        assert source.resolution == (32, 24)
        assert (frame.width, frame.height) == (32, 24)
        assert frame.source_name == "image:fg.png"
    assert not source.is_open


def test_looped_returns_identical_frames(image_path, red_square_frame):
    with ImageFileSource(image_path, looped=True) as source:
        frames = [source.read() for _ in range(5)]

    for number, frame in enumerate(frames):
        assert frame.frame_number == number
        np.testing.assert_array_equal(frame.image, red_square_frame)
    # Each read hands out its own copy
    frames[0].image[:] = 0
    np.testing.assert_array_equal(frames[1].image, red_square_frame)


def test_not_looped_exhausts_after_one_frame(image_path):
    with ImageFileSource(image_path) as source:
        assert source.read() is not None
        assert source.read() is None
        assert source.read() is None


def test_iteration(image_path):
    with ImageFileSource(image_path) as source:
        assert len(list(source)) == 1


def test_reset_rereads_the_file(image_path, write_image, green_frame):
    with ImageFileSource(image_path) as source:
        source.read()
        write_image("fg.png", green_frame)
        source.reset()
        frame = source.read()
    np.testing.assert_array_equal(frame.image, green_frame)


def test_read_requires_open(image_path):
    with pytest.raises(RuntimeError):
        ImageFileSource(image_path).read()
