"""Camera source selected with a ``webcam:<device>`` pseudo-path."""

import logging
from typing import Optional

import cv2

from chromakey.core import CodecUnavailableError, MediaType, StreamIOError
from chromakey.sources.base import MediaSource
from chromakey.sources.frame import Frame

logger = logging.getLogger(__name__)

WEBCAM_PREFIX = "webcam:"


def parse_device(path: str) -> int | str:
    """Device index or V4L2 path from a ``webcam:<device>`` pseudo-path."""
    device = path[len(WEBCAM_PREFIX):] if path.startswith(WEBCAM_PREFIX) else path
    return int(device) if device.isdigit() else device


class WebcamSource(MediaSource):
    """Live frames from a camera, captured at the device's own settings.

    A camera never runs out of frames, so looping has no effect and
    :meth:`reset` does nothing. Nothing touches the device until
    :meth:`open`.

    Args:
        device: Device index, V4L2 path or ``"webcam:<device>"``.
        looped: Accepted so every source shares one constructor shape.
    """

    def __init__(self, device: int | str = 0, looped: bool = False):
        if isinstance(device, str):
            device = parse_device(device)
        super().__init__(f"{WEBCAM_PREFIX}{device}", looped)
        self._device = device
        self._cap: Optional[cv2.VideoCapture] = None
        self._grabbed = 0

    def open(self) -> None:
        if self._cap is not None:
            return
        cap = cv2.VideoCapture(self._device)
        if not cap.isOpened():
            cap.release()
            raise CodecUnavailableError(f"Could not open webcam device: {self._device}")
        self._cap = cap
        self._grabbed = 0
        logger.info("Webcam %s opened at %dx%d", self._device, *self.resolution)

    def close(self) -> None:
        if self._cap is None:
            return
        self._cap.release()
        self._cap = None
        logger.info("Webcam %s closed after %d frames", self._device, self._grabbed)

    def read(self) -> Optional[Frame]:
        if self._cap is None:
            raise RuntimeError("Source is not open")
        ok, image = self._cap.read()
        if not ok or image is None:
            raise StreamIOError(f"Failed to grab a frame from webcam {self._device}")

        fps = self.fps
        frame = Frame(
            image=image,
            frame_number=self._grabbed,
            source_name=self._path,
            timestamp=self._grabbed / fps if fps else 0.0,
        )
        self._grabbed += 1
        return frame

    def reset(self) -> None:
        pass

    @property
    def media_type(self) -> MediaType:
        return MediaType.WEBCAM

    @property
    def fps(self) -> float:
        """Rate reported by the driver, ``0.0`` when unknown or closed."""
        if self._cap is None:
            return 0.0
        return float(self._cap.get(cv2.CAP_PROP_FPS) or 0.0)

    @property
    def resolution(self) -> tuple[int, int]:
        if self._cap is None:
            return (0, 0)
        return (
            int(self._cap.get(cv2.CAP_PROP_FRAME_WIDTH)),
            int(self._cap.get(cv2.CAP_PROP_FRAME_HEIGHT)),
        )

    @property
    def is_open(self) -> bool:
        return self._cap is not None
