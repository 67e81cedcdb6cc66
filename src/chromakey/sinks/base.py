"""Abstract base class for all chromakey media sinks."""

from abc import ABC, abstractmethod

import numpy as np

from chromakey.core import SinkType


class MediaSink(ABC):
    """Destination for composited frames.

    Sinks are context managers; :meth:`close` flushes anything buffered.
    """

    def __init__(self, path: str = ""):
        self._path = path

    @abstractmethod
    def write(self, image: np.ndarray) -> None:
        """Persist (or discard) one BGR uint8 frame."""

    def close(self) -> None:
        """Flush and release the destination."""

    @property
    @abstractmethod
    def media_type(self) -> SinkType:
        """Kind of destination behind this sink."""

    @property
    def path(self) -> str:
        return self._path

    def __enter__(self) -> "MediaSink":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
