"""Pre-recorded video file frame source."""

import logging
from pathlib import Path
from typing import Optional

import cv2

from chromakey.core import CodecUnavailableError, ConfigurationError, MediaType, StreamIOError
from chromakey.sources.base import MediaSource
from chromakey.sources.frame import Frame

logger = logging.getLogger(__name__)


class VideoFileSource(MediaSource):
    """Frame source backed by a video file on disk.

    The file is probed at construction so a missing decoder is reported
    before anything else happens.

    Args:
        path: Path to the video file (mp4, avi, ...).
        looped: When ``True``, reopen the file and continue from the first
            frame on EOF instead of returning ``None``.

    Raises:
        ConfigurationError: The file does not exist.
        CodecUnavailableError: OpenCV cannot open the file.
    """

    def __init__(self, path: str | Path, looped: bool = False):
        super().__init__(str(path), looped)
        if not Path(self._path).exists():
            raise ConfigurationError(f"Input video doesn't exist: {self._path}")

        probe = cv2.VideoCapture(self._path)
        try:
            if not probe.isOpened():
                raise CodecUnavailableError(f"Could not open video: {self._path}")
            self._native_fps: float = probe.get(cv2.CAP_PROP_FPS) or 30.0
            self._total_frames: int = int(probe.get(cv2.CAP_PROP_FRAME_COUNT))
            self._width: int = int(probe.get(cv2.CAP_PROP_FRAME_WIDTH))
            self._height: int = int(probe.get(cv2.CAP_PROP_FRAME_HEIGHT))
        finally:
            probe.release()

        self._cap: Optional[cv2.VideoCapture] = None

        # Counters
        self._delivered: int = 0  # frames returned to caller
        self._raw_pos: int = 0  # position within the current pass
        self._rewinds: int = 0

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def open(self) -> None:
        if self._cap is not None:
            return
        self._cap = self._open_capture()
        self._delivered = 0
        self._raw_pos = 0
        self._rewinds = 0

        duration = self._total_frames / self._native_fps if self._native_fps else 0
        logger.info(
            "VideoFileSource opened: %s  %dx%d @ %.1f fps  "
            "%d frames (%.1fs)  looped=%s",
            self._path, self._width, self._height, self._native_fps,
            self._total_frames, duration, self._looped,
        )

    def close(self) -> None:
        if self._cap is not None:
            self._cap.release()
            self._cap = None
            logger.info("VideoFileSource closed: %s", self._path)

    def read(self) -> Optional[Frame]:
        if self._cap is None:
            raise RuntimeError("Source is not open")

        ret, image = self._cap.read()
        if not ret:
            if not self._looped:
                return None  # end of the stream

            # Close and try reading again from the start
            logger.debug("Rewinding looped video: %s", self._path)
            self.reset()
            ret, image = self._cap.read()
            if not ret:
                raise StreamIOError(f"Failed to read the input file: {self._path}")
            self._rewinds += 1

        frame = Frame(
            image=image,
            frame_number=self._delivered,
            source_name=f"file:{Path(self._path).name}",
            timestamp=self._raw_pos / self._native_fps,
        )
        self._delivered += 1
        self._raw_pos += 1
        return frame

    def reset(self) -> None:
        if self._cap is None:
            return  # open() starts from the first frame anyway
        self._cap.release()
        self._cap = None
        self._cap = self._open_capture()
        self._raw_pos = 0

    def _open_capture(self) -> cv2.VideoCapture:
        cap = cv2.VideoCapture(self._path)
        if not cap.isOpened():
            raise StreamIOError(f"Could not reopen video: {self._path}")
        return cap

    # ------------------------------------------------------------------
    # Extra properties
    # ------------------------------------------------------------------

    @property
    def total_frames(self) -> int:
        """Frame count reported by the container (may be approximate)."""
        return self._total_frames

    @property
    def frames_delivered(self) -> int:
        """Number of frames returned since :meth:`open`."""
        return self._delivered

    @property
    def rewinds(self) -> int:
        """How many times a looped source has wrapped around."""
        return self._rewinds

    # ------------------------------------------------------------------
    # MediaSource properties
    # ------------------------------------------------------------------

    @property
    def media_type(self) -> MediaType:
        return MediaType.VIDEO

    @property
    def fps(self) -> float:
        return self._native_fps

    @property
    def resolution(self) -> tuple[int, int]:
        return (self._width, self._height)

    @property
    def is_open(self) -> bool:
        return self._cap is not None and self._cap.isOpened()
