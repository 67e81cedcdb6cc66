"""Key color and parameter acquisition.

A picker turns a foreground source into one complete
:class:`~chromakey.core.KeySelection`, or ``None`` when the user is done.
Mouse and slider callbacks stay inside the picker; callers only ever see
the finished selection.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

import cv2
import numpy as np

from chromakey.core import KeyColor, KeyParameters, KeySelection, StreamIOError
from chromakey.interactive.preview import ESCAPE_KEY
from chromakey.sources import MediaSource

logger = logging.getLogger(__name__)


class KeyPicker(ABC):
    """Source of key selections for successive keying passes."""

    @abstractmethod
    def pick(self, source: MediaSource) -> Optional[KeySelection]:
        """Acquire a selection from ``source`` (not yet opened).

        Returns:
            The selection, or ``None`` when no further pass is wanted.
        """


def _read_reference(source: MediaSource) -> np.ndarray:
    frame = source.read()
    if frame is None:
        raise StreamIOError(f"No frames available in {source.path}")
    return frame.image


class StaticPicker(KeyPicker):
    """Headless picker with a fixed color or a fixed pixel coordinate.

    Args:
        parameters: Parameters to hand out with every selection.
        color: Key color to use as-is.
        point: ``(x, y)`` of the pixel to sample from the first frame.
        passes: Number of selections to produce before returning ``None``.
    """

    def __init__(
        self,
        parameters: KeyParameters,
        color: Optional[KeyColor] = None,
        point: Optional[tuple[int, int]] = None,
        passes: int = 1,
    ):
        if (color is None) == (point is None):
            raise ValueError("Exactly one of color or point must be given")
        self.parameters = parameters
        self.color = color
        self.point = point
        self._remaining = passes

    def pick(self, source: MediaSource) -> Optional[KeySelection]:
        if self._remaining <= 0:
            return None
        self._remaining -= 1

        with source:
            reference = _read_reference(source)

        if self.color is not None:
            color = self.color
        else:
            color = KeyColor.from_frame(reference, *self.point)
        logger.info("Key color BGR=%s  %s", color.bgr, self.parameters)
        return KeySelection(reference, color, self.parameters)


class ColorPicker(KeyPicker):
    """Interactive picker: click the background color in an OpenCV window.

    The foreground plays in a window with Tolerance, Softness and Defringe
    sliders. Releasing the left mouse button picks the color under the
    cursor and ends the acquisition; the cancel key ends it without a
    selection. Slider positions carry over to the next :meth:`pick`.

    Args:
        window_name: Title of the acquisition window.
        defaults: Initial slider positions.
        softness_max: Upper end of the Softness slider.
        delay_ms: Keystroke wait between displayed frames.
        cancel_key: Key code that ends acquisition.
    """

    def __init__(
        self,
        window_name: str = "Chroma Keying",
        defaults: Optional[KeyParameters] = None,
        softness_max: int = 10,
        delay_ms: int = 10,
        cancel_key: int = ESCAPE_KEY,
    ):
        self.window_name = window_name
        self.defaults = defaults or KeyParameters()
        self.softness_max = softness_max
        self.delay_ms = delay_ms
        self.cancel_key = cancel_key

    def pick(self, source: MediaSource) -> Optional[KeySelection]:
        current: dict = {"frame": None, "color": None}

        def on_mouse(event, x, y, flags, param):
            image = current["frame"]
            if event != cv2.EVENT_LBUTTONUP or image is None:
                return
            height, width = image.shape[:2]
            if 0 <= x < width and 0 <= y < height:
                current["color"] = KeyColor.from_frame(image, x, y)

        name = self.window_name
        cv2.namedWindow(name)
        cv2.setMouseCallback(name, on_mouse)
        cv2.createTrackbar("Tolerance", name, self.defaults.tolerance, 100, _ignore)
        cv2.createTrackbar(
            "Softness", name, min(self.defaults.softness, self.softness_max),
            self.softness_max, _ignore,
        )
        cv2.createTrackbar("Defringe", name, self.defaults.defringe, 100, _ignore)

        try:
            with source:
                key = 0
                while current["color"] is None and (key & 0xFF) != self.cancel_key:
                    current["frame"] = _read_reference(source)
                    cv2.imshow(name, current["frame"])
                    key = cv2.waitKey(self.delay_ms)

            if current["color"] is None:
                logger.info("Color picking cancelled")
                return None

            parameters = KeyParameters(
                tolerance=cv2.getTrackbarPos("Tolerance", name),
                softness=cv2.getTrackbarPos("Softness", name),
                defringe=cv2.getTrackbarPos("Defringe", name),
            )
        finally:
            cv2.destroyWindow(name)

        self.defaults = parameters
        logger.info("Picked key color BGR=%s  %s", current["color"].bgr, parameters)
        return KeySelection(current["frame"].copy(), current["color"], parameters)


def _ignore(value: int) -> None:
    """Trackbars are polled once picking ends."""
