"""Core types, enums and errors for chromakey."""

from .enums import MediaType, SinkType, RunState

from .errors import (
    ChromaKeyError,
    ConfigurationError,
    StreamIOError,
    CodecUnavailableError,
)

from .types import (
    KeyColor,
    KeyParameters,
    KeySelection,
    SyncResult,
)

__all__ = [
    # Enums
    "MediaType",
    "SinkType",
    "RunState",
    # Errors
    "ChromaKeyError",
    "ConfigurationError",
    "StreamIOError",
    "CodecUnavailableError",
    # Types
    "KeyColor",
    "KeyParameters",
    "KeySelection",
    "SyncResult",
]
