"""Live preview of composited frames."""

import logging
from abc import ABC, abstractmethod

import cv2
import numpy as np

logger = logging.getLogger(__name__)

ESCAPE_KEY = 27


class Preview(ABC):
    """Shows frames as they are produced and reports cancellation."""

    @abstractmethod
    def show(self, image: np.ndarray, delay_ms: int) -> bool:
        """Display ``image`` and wait up to ``delay_ms`` for a keystroke.

        Returns:
            ``True`` when the user asked to stop.
        """

    def close(self) -> None:
        """Tear down whatever the preview displayed."""


class NullPreview(Preview):
    """Headless preview that never cancels."""

    def show(self, image: np.ndarray, delay_ms: int) -> bool:
        return False


class WindowPreview(Preview):
    """OpenCV HighGUI window; the cancel key stops the pass.

    A ``delay_ms`` of 0 waits for a key indefinitely, which is what a
    single composited image wants.
    """

    def __init__(self, window_name: str = "Chroma Keying", cancel_key: int = ESCAPE_KEY):
        self.window_name = window_name
        self.cancel_key = cancel_key

    def show(self, image: np.ndarray, delay_ms: int) -> bool:
        cv2.imshow(self.window_name, image)
        key = cv2.waitKey(delay_ms)
        return (key & 0xFF) == self.cancel_key

    def close(self) -> None:
        try:
            cv2.destroyWindow(self.window_name)
        except cv2.error as e:
            # Raised when the window was never shown
            logger.debug("Failed to destroy window %r: %s", self.window_name, e)
