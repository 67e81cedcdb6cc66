"""Frame dataclass for the MediaSource abstraction."""

from dataclasses import dataclass

import numpy as np


@dataclass
class Frame:
    """A single frame read from a media source.

    Attributes:
        image: BGR uint8 numpy array of shape (H, W, 3).
        frame_number: Sequential counter starting from 0. Keeps counting
            across loop rewinds.
        source_name: Human-readable identifier, e.g. ``"image:bg.png"``,
            ``"file:clip.mp4"``, ``"webcam:0"``.
        timestamp: Seconds into the stream (0.0 for still images).
    """

    image: np.ndarray
    frame_number: int
    source_name: str
    timestamp: float = 0.0

    @property
    def width(self) -> int:
        return self.image.shape[1]

    @property
    def height(self) -> int:
        return self.image.shape[0]
