"""Still image frame source."""

import logging
from pathlib import Path
from typing import Optional

import cv2
import numpy as np

from chromakey.core import CodecUnavailableError, ConfigurationError, MediaType, StreamIOError
from chromakey.sources.base import MediaSource
from chromakey.sources.frame import Frame

logger = logging.getLogger(__name__)


class ImageFileSource(MediaSource):
    """Frame source backed by a single image file.

    The image is decoded on the first read and cached. A looped source
    keeps returning copies of the cached image; otherwise the second read
    reports exhaustion.

    Args:
        path: Path to the image (jpg, png, bmp, ...).
        looped: Return the image on every read instead of only once.

    Raises:
        ConfigurationError: The file does not exist.
        CodecUnavailableError: OpenCV has no decoder for the file.
    """

    def __init__(self, path: str | Path, looped: bool = False):
        super().__init__(str(path), looped)
        if not Path(self._path).exists():
            raise ConfigurationError(f"Input image doesn't exist: {self._path}")
        if not cv2.haveImageReader(self._path):
            raise CodecUnavailableError(f"No decoder for this image file: {self._path}")

        self._cache: Optional[np.ndarray] = None
        self._opened: bool = False
        self._delivered: int = 0

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def open(self) -> None:
        if self._opened:
            return
        self._opened = True
        self._delivered = 0
        logger.info("ImageFileSource opened: %s  looped=%s", self._path, self._looped)

    def close(self) -> None:
        if self._opened:
            self._opened = False
            self._cache = None
            logger.info("ImageFileSource closed: %s", self._path)

    def read(self) -> Optional[Frame]:
        if not self._opened:
            raise RuntimeError("Source is not open")

        if self._cache is None:
            image = cv2.imread(self._path, cv2.IMREAD_COLOR)
            if image is None:
                raise StreamIOError(f"Failed to decode image: {self._path}")
            self._cache = image
        elif not self._looped:
            return None

        frame = Frame(
            image=self._cache.copy(),
            frame_number=self._delivered,
            source_name=f"image:{Path(self._path).name}",
        )
        self._delivered += 1
        return frame

    def reset(self) -> None:
        # Forces the image to be decoded again
        self._cache = None

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def media_type(self) -> MediaType:
        return MediaType.IMAGE

    @property
    def fps(self) -> float:
        return 0.0

    @property
    def resolution(self) -> tuple[int, int]:
        if self._cache is None:
            return (0, 0)
        height, width = self._cache.shape[:2]
        return (width, height)

    @property
    def is_open(self) -> bool:
        return self._opened
