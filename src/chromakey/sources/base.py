"""Abstract base class for all chromakey media sources."""

from abc import ABC, abstractmethod
from typing import Iterator, Optional

from chromakey.core import MediaType
from chromakey.sources.frame import Frame


class MediaSource(ABC):
    """Uniform interface for reading frames from images, videos and cameras.

    A *looped* source never reports exhaustion: once it runs out of frames
    it rewinds and continues from the first one. A source that is not
    looped returns ``None`` from :meth:`read` when it is exhausted.

    Usage::

        with VideoFileSource("clip.mp4") as src:
            for frame in src:
                process(frame.image)
    """

    def __init__(self, path: str, looped: bool = False):
        self._path = path
        self._looped = looped

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @abstractmethod
    def open(self) -> None:
        """Open the underlying file or device."""

    @abstractmethod
    def close(self) -> None:
        """Release the underlying file or device."""

    @abstractmethod
    def read(self) -> Optional[Frame]:
        """Read the next frame.

        Returns:
            A :class:`Frame`, or ``None`` when the source is not looped and
            has no more frames.

        Raises:
            StreamIOError: A looped source failed to read even after
                rewinding, or the media could not be decoded.
        """

    @abstractmethod
    def reset(self) -> None:
        """Rewind so the next :meth:`read` returns the first frame."""

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    @abstractmethod
    def media_type(self) -> MediaType:
        """Kind of media behind this source."""

    @property
    @abstractmethod
    def fps(self) -> float:
        """Frames per second (native for files, target for live sources)."""

    @property
    @abstractmethod
    def resolution(self) -> tuple[int, int]:
        """``(width, height)`` of the frames, ``(0, 0)`` until known."""

    @property
    @abstractmethod
    def is_open(self) -> bool:
        """``True`` when the source has been opened and not yet closed."""

    @property
    def path(self) -> str:
        return self._path

    @property
    def is_looped(self) -> bool:
        """Fixed at construction."""
        return self._looped

    # ------------------------------------------------------------------
    # Context manager
    # ------------------------------------------------------------------

    def __enter__(self) -> "MediaSource":
        self.open()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Iterator protocol
    # ------------------------------------------------------------------

    def __iter__(self) -> Iterator[Frame]:
        return self

    def __next__(self) -> Frame:
        frame = self.read()
        if frame is None:
            raise StopIteration
        return frame
