"""Key mask computation in HSV space.

The mask is 1 where a pixel is close to the key color (background to be
replaced) and 0 where it belongs to the foreground subject. Hue drives the
match; the defringe floor on saturation and value keeps dark shadows and
bright highlights on the subject from matching on hue alone.
"""

import logging
from typing import List, Optional, Tuple

import cv2
import numpy as np

from chromakey.core import KeyColor, KeyParameters
from chromakey.keying.context import ProcessingContext

logger = logging.getLogger(__name__)

HUE_RANGE = 360.0


def hue_bands(key_hue: float, tolerance: int) -> List[Tuple[float, float]]:
    """Hue intervals, in degrees, that count as a match.

    The first band is centered on the key hue and may stick out of
    ``[0, 360]``. Hue is circular, so the part that sticks out below 0
    or above 360 is folded back as an extra band.

    Example:
        >>> hue_bands(355.0, 50)
        [(175.0, 535.0), (0.0, 175.0)]
    """
    span = tolerance / 100.0 * HUE_RANGE
    lower, upper = key_hue - span, key_hue + span

    bands = [(lower, upper)]
    if lower < 0:
        bands.append((lower + HUE_RANGE, HUE_RANGE))
    if upper > HUE_RANGE:
        bands.append((0.0, upper - HUE_RANGE))
    return bands


def compute_key_mask(
    frame: np.ndarray,
    key_hsv: Tuple[float, float, float],
    parameters: KeyParameters,
    context: Optional[ProcessingContext] = None,
) -> np.ndarray:
    """Compute the alpha mask of a BGR uint8 frame.

    Args:
        frame: BGR uint8 image of shape (H, W, 3).
        key_hsv: Key color as ``(hue 0..360, saturation, value)``.
        parameters: Tolerance, softness and defringe for this pass.
        context: Scratch buffers to reuse. The returned mask lives in
            ``context.mask`` and is overwritten by the next call.

    Returns:
        float32 array of shape (H, W) with every value in ``[0, 1]``.
    """
    ctx = context if context is not None else ProcessingContext()
    height, width = frame.shape[:2]
    ctx.ensure(height, width)

    # 32-bit float input gives hue in degrees and saturation/value in 0..1
    np.multiply(frame, 1.0 / 255, out=ctx.frame_f)
    cv2.cvtColor(ctx.frame_f, cv2.COLOR_BGR2HSV, dst=ctx.hsv)

    floor = parameters.defringe / 100.0
    bands = hue_bands(key_hsv[0], parameters.tolerance)

    lower, upper = bands[0]
    cv2.inRange(ctx.hsv, (lower, floor, floor), (upper, 1.0, 1.0), dst=ctx.mask_b)
    for lower, upper in bands[1:]:
        cv2.inRange(ctx.hsv, (lower, floor, floor), (upper, 1.0, 1.0), dst=ctx.wrap_b)
        cv2.bitwise_or(ctx.mask_b, ctx.wrap_b, dst=ctx.mask_b)

    np.multiply(ctx.mask_b, 1.0 / 255, out=ctx.mask)

    if parameters.softness > 0:
        ksize = 2 * parameters.softness + 1
        kernel = cv2.getStructuringElement(cv2.MORPH_RECT, (ksize, ksize))
        cv2.dilate(ctx.mask, kernel, dst=ctx.mask)
        cv2.GaussianBlur(ctx.mask, (ksize, ksize), 0, dst=ctx.mask)
        np.clip(ctx.mask, 0.0, 1.0, out=ctx.mask)

    return ctx.mask


class KeyMaskEngine:
    """Computes masks for a fixed key color and parameter set.

    Args:
        color: The picked key color.
        parameters: Parameters frozen for the whole pass.
    """

    def __init__(self, color: KeyColor, parameters: KeyParameters):
        self.color = color
        self.parameters = parameters
        self.key_hsv = color.to_hsv()
        logger.debug(
            "Key color BGR=%s HSV=(%.1f, %.2f, %.2f) bands=%s",
            color.bgr, *self.key_hsv,
            hue_bands(self.key_hsv[0], parameters.tolerance),
        )

    def compute(
        self,
        frame: np.ndarray,
        context: Optional[ProcessingContext] = None,
    ) -> np.ndarray:
        return compute_key_mask(frame, self.key_hsv, self.parameters, context)
