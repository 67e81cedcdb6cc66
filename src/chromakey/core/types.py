"""Core data types for chromakey."""

from dataclasses import dataclass
from typing import Tuple

import cv2
import numpy as np

from .errors import ConfigurationError


# ============================================================================
# Key color
# ============================================================================

@dataclass(frozen=True)
class KeyColor:
    """The reference background color, stored as an 8-bit BGR sample."""
    b: int
    g: int
    r: int

    def __post_init__(self):
        for channel in (self.b, self.g, self.r):
            if not 0 <= channel <= 255:
                raise ConfigurationError(
                    f"Color channel out of range 0..255: {channel}"
                )

    @property
    def bgr(self) -> Tuple[int, int, int]:
        return (self.b, self.g, self.r)

    @classmethod
    def from_frame(cls, image: np.ndarray, x: int, y: int) -> "KeyColor":
        """Read the color at column ``x``, row ``y`` of a BGR image."""
        height, width = image.shape[:2]
        if not (0 <= x < width and 0 <= y < height):
            raise ValueError(
                f"Pixel ({x}, {y}) is outside the {width}x{height} frame"
            )
        b, g, r = image[y, x][:3]
        return cls(int(b), int(g), int(r))

    @classmethod
    def from_hsv(cls, hue: float, saturation: float, value: float) -> "KeyColor":
        """Nearest 8-bit color for hue in degrees and saturation/value in 0..1."""
        hsv = np.array([[[hue, saturation, value]]], dtype=np.float32)
        bgr = cv2.cvtColor(hsv, cv2.COLOR_HSV2BGR)[0, 0]
        b, g, r = np.clip(np.rint(bgr * 255.0), 0, 255).astype(int)
        return cls(int(b), int(g), int(r))

    def to_hsv(self) -> Tuple[float, float, float]:
        """Return ``(hue 0..360, saturation 0..1, value 0..1)``.

        Uses the same normalized float conversion as the mask engine so
        the key hue lines up exactly with the frame hues it is compared to.
        """
        sample = np.array([[self.bgr]], dtype=np.float32) / 255.0
        hue, saturation, value = cv2.cvtColor(sample, cv2.COLOR_BGR2HSV)[0, 0]
        return float(hue), float(saturation), float(value)


# ============================================================================
# Keying parameters
# ============================================================================

@dataclass(frozen=True)
class KeyParameters:
    """Tuning for one keying pass. Frozen for the whole pass."""
    tolerance: int = 12  # half-width of the hue band, percent of 360 degrees
    softness: int = 2  # dilate/blur radius in pixels
    defringe: int = 40  # saturation and value floor, percent

    def __post_init__(self):
        if not 0 <= self.tolerance <= 100:
            raise ConfigurationError(
                f"tolerance must be within 0..100, got {self.tolerance}"
            )
        if self.softness < 0:
            raise ConfigurationError(
                f"softness must be non-negative, got {self.softness}"
            )
        if not 0 <= self.defringe <= 100:
            raise ConfigurationError(
                f"defringe must be within 0..100, got {self.defringe}"
            )


# ============================================================================
# Acquisition handoff and pass results
# ============================================================================

@dataclass(frozen=True)
class KeySelection:
    """Everything the core needs before keying can start.

    Produced in one piece by a picker once the user is done; the core never
    sees a half-made selection.
    """
    reference_frame: np.ndarray
    color: KeyColor
    parameters: KeyParameters

    @property
    def frame_size(self) -> Tuple[int, int]:
        """``(width, height)`` of the reference frame."""
        height, width = self.reference_frame.shape[:2]
        return (width, height)


@dataclass
class SyncResult:
    """Outcome of one keying pass."""
    frames_processed: int = 0
    cancelled: bool = False
