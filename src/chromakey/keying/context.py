"""Reusable scratch buffers for the per-frame keying steps."""

from typing import Optional, Tuple

import numpy as np


class ProcessingContext:
    """Scratch buffers for one pipeline, sized on first use.

    Buffers are reallocated whenever the frame size changes. A context
    must not be shared between pipelines that are active at the same time.
    Results never depend on whether a context is reused or created fresh.
    """

    def __init__(self):
        self.shape: Optional[Tuple[int, int]] = None
        self.frame_f: Optional[np.ndarray] = None  # normalized foreground
        self.background_f: Optional[np.ndarray] = None  # normalized background
        self.hsv: Optional[np.ndarray] = None
        self.mask_b: Optional[np.ndarray] = None  # 0/255 match field
        self.wrap_b: Optional[np.ndarray] = None  # hue wraparound band
        self.mask: Optional[np.ndarray] = None  # float alpha in 0..1
        self.mask3: Optional[np.ndarray] = None
        self.output: Optional[np.ndarray] = None

    def ensure(self, height: int, width: int) -> None:
        """Make sure all buffers fit a ``height`` x ``width`` frame."""
        if self.shape == (height, width):
            return

        self.shape = (height, width)
        self.frame_f = np.empty((height, width, 3), dtype=np.float32)
        self.background_f = np.empty((height, width, 3), dtype=np.float32)
        self.hsv = np.empty((height, width, 3), dtype=np.float32)
        self.mask_b = np.empty((height, width), dtype=np.uint8)
        self.wrap_b = np.empty((height, width), dtype=np.uint8)
        self.mask = np.empty((height, width), dtype=np.float32)
        self.mask3 = np.empty((height, width, 3), dtype=np.float32)
        self.output = np.empty((height, width, 3), dtype=np.uint8)
