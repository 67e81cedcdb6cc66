"""Keying pipeline: stream synchronization and the session state machine."""

from chromakey.pipeline.synchronizer import FrameSynchronizer, check_pairing, fit_background
from chromakey.pipeline.session import KeyingSession

__all__ = [
    "FrameSynchronizer",
    "check_pairing",
    "fit_background",
    "KeyingSession",
]
