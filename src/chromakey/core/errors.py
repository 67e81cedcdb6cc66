"""Fatal error kinds raised by the keying pipeline.

None of these are retried. They are raised where the problem is detected
and propagate to the caller, which decides how to report them.
"""


class ChromaKeyError(Exception):
    """Base class for all chromakey errors."""


class ConfigurationError(ChromaKeyError, ValueError):
    """Unsupported extension, missing file, bad parameters or an invalid
    source/sink pairing. Detected before the frame loop starts."""


class StreamIOError(ChromaKeyError, IOError):
    """A required frame could not be read or written."""


class CodecUnavailableError(ChromaKeyError, RuntimeError):
    """No decoder or encoder exists for the requested path or device."""
