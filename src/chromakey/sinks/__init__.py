"""Media sinks receiving composited frames."""

from chromakey.sinks.base import MediaSink
from chromakey.sinks.dummy import DummySink
from chromakey.sinks.image_file import ImageFileSink
from chromakey.sinks.video_file import VideoFileSink

__all__ = [
    "MediaSink",
    "DummySink",
    "ImageFileSink",
    "VideoFileSink",
]
