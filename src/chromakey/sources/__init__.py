"""Media sources feeding frames into the keying pipeline.

Quick start::

    from chromakey.sources import VideoFileSource

    with VideoFileSource("clip.mp4", looped=True) as src:
        frame = src.read()
"""

from chromakey.sources.frame import Frame
from chromakey.sources.base import MediaSource
from chromakey.sources.image_file import ImageFileSource
from chromakey.sources.video_file import VideoFileSource
from chromakey.sources.webcam import WebcamSource

__all__ = [
    "Frame",
    "MediaSource",
    "ImageFileSource",
    "VideoFileSource",
    "WebcamSource",
]
