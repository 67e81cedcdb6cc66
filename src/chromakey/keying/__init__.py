"""Per-frame keying: mask computation and compositing."""

from chromakey.keying.context import ProcessingContext
from chromakey.keying.mask import KeyMaskEngine, compute_key_mask, hue_bands
from chromakey.keying.compositor import composite

__all__ = [
    "ProcessingContext",
    "KeyMaskEngine",
    "compute_key_mask",
    "hue_bands",
    "composite",
]
