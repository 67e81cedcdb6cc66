"""Still image sink."""

import logging
from pathlib import Path

import cv2
import numpy as np

from chromakey.core import CodecUnavailableError, SinkType, StreamIOError
from chromakey.sinks.base import MediaSink

logger = logging.getLogger(__name__)


class ImageFileSink(MediaSink):
    """Writes frames to a single image file; the last frame written wins.

    Args:
        path: Output image path.
        frame_size: Unused; accepted so every file sink is built the same way.

    Raises:
        CodecUnavailableError: OpenCV has no encoder for the extension.
    """

    def __init__(self, path: str | Path, frame_size: tuple[int, int] = (0, 0)):
        super().__init__(str(path))
        if not cv2.haveImageWriter(self._path):
            raise CodecUnavailableError(f"No encoder for this image file: {self._path}")
        self._written = 0

    def write(self, image: np.ndarray) -> None:
        if not cv2.imwrite(self._path, image):
            raise StreamIOError(f"Failed to write image: {self._path}")
        self._written += 1
        logger.info("Wrote image %s (%dx%d)", self._path, image.shape[1], image.shape[0])

    @property
    def frames_written(self) -> int:
        return self._written

    @property
    def media_type(self) -> SinkType:
        return SinkType.IMAGE
