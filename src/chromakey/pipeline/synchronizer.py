"""Frame-by-frame pairing of a foreground stream with a background stream."""

import logging
from contextlib import ExitStack
from typing import Optional

import cv2
import numpy as np

from chromakey.core import (
    ConfigurationError,
    KeySelection,
    MediaType,
    SinkType,
    StreamIOError,
    SyncResult,
)
from chromakey.interactive.preview import Preview
from chromakey.keying import KeyMaskEngine, ProcessingContext, composite
from chromakey.sinks import MediaSink
from chromakey.sources import MediaSource

logger = logging.getLogger(__name__)


def fit_background(image: np.ndarray, size: tuple[int, int]) -> np.ndarray:
    """Resize a background image to ``size = (height, width)``.

    Shrinking uses area interpolation, enlarging uses bicubic. An image
    that already has the right size is returned unchanged.
    """
    height, width = size
    bg_height, bg_width = image.shape[:2]
    if (bg_height, bg_width) == (height, width):
        return image

    if bg_height * bg_width > height * width:
        interpolation = cv2.INTER_AREA
    else:
        interpolation = cv2.INTER_CUBIC
    return cv2.resize(image, (width, height), interpolation=interpolation)


def check_pairing(foreground: MediaSource, background: MediaSource, sink_type: SinkType) -> None:
    """Check that the sources can feed a sink of ``sink_type``.

    Only the sink's kind is needed, so the check can run before a sink
    (and the file behind it) is created.

    Raises:
        ConfigurationError: On any invalid combination.
    """
    if foreground.is_looped:
        raise ConfigurationError("The foreground source must not be looped")
    if not background.is_looped:
        raise ConfigurationError("The background source must be looped")

    fg_type = foreground.media_type
    if fg_type in (MediaType.VIDEO, MediaType.WEBCAM):
        if sink_type not in (SinkType.VIDEO, SinkType.DUMMY):
            raise ConfigurationError(
                "Mismatching media types: the input is a video, but the output is not."
            )
    elif fg_type == MediaType.IMAGE:
        if background.media_type != MediaType.IMAGE:
            raise ConfigurationError("Background must be an image.")
        if sink_type not in (SinkType.IMAGE, SinkType.DUMMY):
            raise ConfigurationError(
                "Mismatching media types: the input is an image, but the output is not."
            )


class FrameSynchronizer:
    """Runs one keying pass over a foreground/background pair.

    Each frame goes through the full cycle (read foreground, read
    background, resize, mask, composite, write, preview) before the next
    one is read. The pass ends when the foreground runs out or the preview
    reports cancellation, always after the current frame has been written.

    Args:
        foreground: Source to key; must not be looped.
        background: Replacement source; must be looped so that a shorter
            background (or a still image) keeps producing frames.
        sink: Destination for composited frames.
        preview: Optional live display; ``None`` disables it.
        frame_delay_ms: Keystroke wait per video frame. Image foregrounds
            wait indefinitely.
    """

    def __init__(
        self,
        foreground: MediaSource,
        background: MediaSource,
        sink: MediaSink,
        preview: Optional[Preview] = None,
        frame_delay_ms: int = 10,
    ):
        self.foreground = foreground
        self.background = background
        self.sink = sink
        self.preview = preview
        self.frame_delay_ms = frame_delay_ms
        self._context = ProcessingContext()

    def validate(self) -> None:
        """Check that the sources and sink can be paired.

        Raises:
            ConfigurationError: On any invalid combination.
        """
        check_pairing(self.foreground, self.background, self.sink.media_type)

    def run(self, selection: KeySelection) -> SyncResult:
        """Key out every foreground frame using ``selection``.

        Raises:
            ConfigurationError: Invalid source/sink pairing, before any read.
            StreamIOError: A required frame could not be read or written.
        """
        self.validate()

        engine = KeyMaskEngine(selection.color, selection.parameters)
        if self.foreground.media_type == MediaType.IMAGE:
            delay = 0  # keep a single composited image on screen until a key
        else:
            delay = self.frame_delay_ms

        result = SyncResult()
        logger.info(
            "Keying %s over %s -> %s  %s",
            self.foreground.path, self.background.path,
            self.sink.path or "<preview only>", selection.parameters,
        )

        with ExitStack() as stack:
            stack.enter_context(self.foreground)
            stack.enter_context(self.background)
            stack.enter_context(self.sink)

            while True:
                fg_frame = self.foreground.read()
                if fg_frame is None:
                    break

                bg_frame = self.background.read()
                if bg_frame is None:
                    raise StreamIOError(
                        f"Failed to read a background frame from {self.background.path}"
                    )

                background = fit_background(bg_frame.image, fg_frame.image.shape[:2])
                mask = engine.compute(fg_frame.image, self._context)
                output = composite(fg_frame.image, background, mask, self._context)

                self.sink.write(output)
                result.frames_processed += 1
                logger.debug(
                    "Frame %d composited with background frame %d",
                    fg_frame.frame_number, bg_frame.frame_number,
                )

                if self.preview is not None and self.preview.show(output, delay):
                    result.cancelled = True
                    logger.info("Keying cancelled by the user")
                    break

        logger.info("Keying finished: %d frames", result.frames_processed)
        return result
