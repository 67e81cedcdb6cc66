"""Alpha compositing of a foreground over a replacement background."""

from typing import Optional

import cv2
import numpy as np

from chromakey.keying.context import ProcessingContext


def composite(
    foreground: np.ndarray,
    background: np.ndarray,
    mask: np.ndarray,
    context: Optional[ProcessingContext] = None,
) -> np.ndarray:
    """Blend ``background * mask + foreground * (1 - mask)``.

    Args:
        foreground: BGR uint8 image of shape (H, W, 3).
        background: BGR uint8 image, already resized to (H, W, 3).
        mask: float32 alpha of shape (H, W), values in ``[0, 1]``.
        context: Scratch buffers to reuse. The returned image lives in
            ``context.output`` and is overwritten by the next call.

    Returns:
        BGR uint8 image of shape (H, W, 3).
    """
    if background.shape != foreground.shape:
        raise ValueError(
            f"Background shape {background.shape} does not match "
            f"foreground shape {foreground.shape}"
        )
    if mask.shape != foreground.shape[:2]:
        raise ValueError(
            f"Mask shape {mask.shape} does not match frame size "
            f"{foreground.shape[:2]}"
        )

    ctx = context if context is not None else ProcessingContext()
    height, width = foreground.shape[:2]
    ctx.ensure(height, width)

    cv2.merge((mask, mask, mask), dst=ctx.mask3)

    # Background where the mask is close to 1
    np.multiply(background, 1.0 / 255, out=ctx.background_f)
    np.multiply(ctx.background_f, ctx.mask3, out=ctx.background_f)

    # Foreground where the mask is close to 0
    np.subtract(1.0, ctx.mask3, out=ctx.mask3)
    np.multiply(foreground, 1.0 / 255, out=ctx.frame_f)
    np.multiply(ctx.frame_f, ctx.mask3, out=ctx.frame_f)

    np.add(ctx.frame_f, ctx.background_f, out=ctx.frame_f)

    # Back to 0..255; the blend stays within [0, 1] so rounding is enough
    np.multiply(ctx.frame_f, 255.0, out=ctx.frame_f)
    np.rint(ctx.frame_f, out=ctx.frame_f)
    np.copyto(ctx.output, ctx.frame_f, casting="unsafe")
    return ctx.output
