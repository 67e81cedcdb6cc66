"""chromakey - green-screen background replacement for images and video.

A single key color picked from the foreground plus three parameters
(tolerance, softness, defringe) drive an HSV mask that blends the
foreground over a replacement background.
"""

__version__ = "0.1.0"
