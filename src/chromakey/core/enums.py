"""Core enumerations for chromakey."""

from enum import Enum, auto


class MediaType(Enum):
    """Kinds of media a source can read from."""
    IMAGE = auto()
    VIDEO = auto()
    WEBCAM = auto()


class SinkType(Enum):
    """Kinds of destinations a sink can write to."""
    IMAGE = auto()
    VIDEO = auto()
    DUMMY = auto()  # discards every frame


class RunState(Enum):
    """Lifecycle of a keying session."""
    UNINITIALIZED = auto()
    READY = auto()
    RUNNING = auto()
    DONE = auto()
