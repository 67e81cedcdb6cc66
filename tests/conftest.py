"""Pytest configuration and shared fixtures for chromakey tests."""

import logging

import cv2
import numpy as np
import pytest

GREEN = (0, 255, 0)
RED = (0, 0, 255)
BLUE = (255, 0, 0)


def solid(height, width, bgr):
    """A solid BGR uint8 frame."""
    frame = np.empty((height, width, 3), dtype=np.uint8)
    frame[:] = bgr
    return frame


@pytest.fixture
def green_frame():
    return solid(24, 32, GREEN)


@pytest.fixture
def red_square_frame():
    """Green frame with a red square in the middle."""
    frame = solid(24, 32, GREEN)
    frame[8:16, 12:20] = RED
    return frame


@pytest.fixture
def write_image(tmp_path):
    """Write a frame to a lossless image file and return its path."""

    def _write(name, image):
        path = tmp_path / name
        assert cv2.imwrite(str(path), image)
        return path

    return _write


@pytest.fixture
def write_video(tmp_path):
    """Write frames to an MJPG .avi file, skipping when no encoder exists."""

    def _write(name, frames, fps=10.0):
        path = tmp_path / name
        height, width = frames[0].shape[:2]
        writer = cv2.VideoWriter(str(path), cv2.VideoWriter_fourcc(*"MJPG"), fps, (width, height))
        if not writer.isOpened():
            pytest.skip("MJPG encoder not available")
        for frame in frames:
            writer.write(frame)
        writer.release()
        return path

    return _write


@pytest.fixture
def make_frame():
    """Factory for solid frames: ``make_frame(height, width, bgr)``."""
    return solid


@pytest.fixture(autouse=True)
def _drop_configured_handlers():
    """Remove handlers installed by ``setup_logging`` during a test."""
    yield
    root = logging.getLogger()
    for handler in root.handlers[:]:
        if type(handler).__module__.startswith("logging"):
            root.removeHandler(handler)
            handler.close()
