"""Creation of media sources and sinks from file paths.

The media kind is decided by the file extension against a fixed
allow-list; anything else is rejected before a frame is touched.
``webcam:<device>`` selects a camera as the source.
"""

import logging
from pathlib import Path
from typing import Optional

from chromakey.core import ConfigurationError, SinkType
from chromakey.sinks import DummySink, ImageFileSink, MediaSink, VideoFileSink
from chromakey.sources import ImageFileSource, MediaSource, VideoFileSource, WebcamSource
from chromakey.sources.webcam import WEBCAM_PREFIX

logger = logging.getLogger(__name__)

IMAGE_EXTENSIONS = frozenset({".jpg", ".jpeg", ".png", ".bmp"})
VIDEO_EXTENSIONS = frozenset({".mp4", ".avi"})


def get_file_extension(path: str | Path) -> str:
    """Lower-cased extension including the dot, e.g. ``".png"``."""
    return Path(path).suffix.lower()


def create_source(path: str | Path, loop: bool = False) -> MediaSource:
    """Build the source matching ``path``.

    Raises:
        ConfigurationError: Unsupported extension or missing file.
        CodecUnavailableError: No decoder for the file.
    """
    path = str(path)
    if path.startswith(WEBCAM_PREFIX):
        return WebcamSource(path, looped=loop)

    ext = get_file_extension(path)
    if ext in IMAGE_EXTENSIONS:
        return ImageFileSource(path, looped=loop)
    if ext in VIDEO_EXTENSIONS:
        return VideoFileSource(path, looped=loop)
    raise ConfigurationError(f"Input file type is not supported: {ext or path}")


def sink_type_for(path: Optional[str | Path]) -> SinkType:
    """Kind of sink :func:`create_sink` would build, without touching disk.

    Raises:
        ConfigurationError: Unsupported extension.
    """
    if not path:
        return SinkType.DUMMY
    ext = get_file_extension(path)
    if ext in IMAGE_EXTENSIONS:
        return SinkType.IMAGE
    if ext in VIDEO_EXTENSIONS:
        return SinkType.VIDEO
    raise ConfigurationError(f"Output file type is not supported: {ext or path}")


def create_sink(
    path: Optional[str | Path],
    frame_size: tuple[int, int],
    fourcc: str = "mp4v",
    fps: float = 30.0,
) -> MediaSink:
    """Build the sink matching ``path``; no path means a :class:`DummySink`.

    Raises:
        ConfigurationError: Unsupported extension.
        CodecUnavailableError: No encoder for the file.
    """
    sink_type = sink_type_for(path)
    if sink_type == SinkType.DUMMY:
        logger.info("No output requested, frames will only be previewed")
        return DummySink()
    if sink_type == SinkType.IMAGE:
        return ImageFileSink(path, frame_size)
    return VideoFileSink(path, frame_size, fourcc=fourcc, fps=fps)
