"""Sink used when no output destination is requested."""

import numpy as np

from chromakey.core import SinkType
from chromakey.sinks.base import MediaSink


class DummySink(MediaSink):
    """Accepts and discards every frame."""

    def write(self, image: np.ndarray) -> None:
        pass

    @property
    def media_type(self) -> SinkType:
        return SinkType.DUMMY
