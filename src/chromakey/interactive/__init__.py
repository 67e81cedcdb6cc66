"""Interactive surfaces: live preview and key color acquisition."""

from chromakey.interactive.preview import Preview, NullPreview, WindowPreview
from chromakey.interactive.picker import KeyPicker, StaticPicker, ColorPicker

__all__ = [
    "Preview",
    "NullPreview",
    "WindowPreview",
    "KeyPicker",
    "StaticPicker",
    "ColorPicker",
]
