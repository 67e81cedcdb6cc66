"""Video file sink using OpenCV VideoWriter."""

import logging
from pathlib import Path
from typing import Optional

import cv2
import numpy as np

from chromakey.core import CodecUnavailableError, ConfigurationError, SinkType, StreamIOError
from chromakey.sinks.base import MediaSink

logger = logging.getLogger(__name__)


class VideoFileSink(MediaSink):
    """Encodes frames into a video file.

    Args:
        path: Output video path.
        frame_size: ``(width, height)`` of every frame to be written.
        fourcc: Four-character codec code, e.g. ``"mp4v"`` or ``"MJPG"``.
        fps: Output frame rate.

    Raises:
        ConfigurationError: ``fourcc`` is not four characters long.
        CodecUnavailableError: No encoder could be opened for the path.
    """

    def __init__(
        self,
        path: str | Path,
        frame_size: tuple[int, int],
        fourcc: str = "mp4v",
        fps: float = 30.0,
    ):
        super().__init__(str(path))
        if len(fourcc) != 4:
            raise ConfigurationError(f"FOURCC code must have 4 characters: {fourcc!r}")

        self._frame_size = (int(frame_size[0]), int(frame_size[1]))
        self._fourcc = fourcc
        self._fps = fps
        self._written = 0

        self._writer: Optional[cv2.VideoWriter] = cv2.VideoWriter(
            self._path, cv2.VideoWriter_fourcc(*fourcc), fps, self._frame_size, True
        )
        if not self._writer.isOpened():
            self._writer = None
            raise CodecUnavailableError(
                f"No encoder for {self._path} (fourcc={fourcc})"
            )
        logger.info(
            "VideoFileSink opened: %s  %dx%d @ %.1f fps  fourcc=%s",
            self._path, *self._frame_size, fps, fourcc,
        )

    def write(self, image: np.ndarray) -> None:
        if self._writer is None:
            raise StreamIOError(f"Video sink is closed: {self._path}")
        height, width = image.shape[:2]
        if (width, height) != self._frame_size:
            raise StreamIOError(
                f"Frame size {width}x{height} does not match the video size "
                f"{self._frame_size[0]}x{self._frame_size[1]}"
            )
        self._writer.write(image)
        self._written += 1

    def close(self) -> None:
        if self._writer is not None:
            self._writer.release()
            self._writer = None
            logger.info("VideoFileSink closed: %s  (%d frames)", self._path, self._written)

    @property
    def frames_written(self) -> int:
        return self._written

    @property
    def media_type(self) -> SinkType:
        return SinkType.VIDEO
