# masking_utils/cut_ops.py
import numpy as np
from PIL import Image

from .errors import OutOfBoundsError
from .mask import Mask


def as_source_np(image):
    """PIL image or uint8 (H,W) / (H,W,3) / (H,W,4) array -> uint8 array with 3 or 4 channels."""
    if isinstance(image, Image.Image):
        mode = "RGBA" if "A" in image.getbands() else "RGB"
        return np.array(image.convert(mode))

    if not isinstance(image, np.ndarray):
        raise ValueError(f"Unsupported source image type: {type(image).__name__}")

    if image.ndim == 2:
        image = np.repeat(image[:, :, None], 3, axis=2)
    elif image.ndim != 3 or image.shape[2] not in (3, 4):
        raise ValueError(f"Expected (H,W), (H,W,3) or (H,W,4) image, got {image.shape}")

    if image.dtype != np.uint8:
        raise ValueError(f"Expected a uint8 image, got {image.dtype}")
    return image


def extract(source, mask: Mask) -> np.ndarray:
    """
    Cut the pixels a mask selects out of a source image.

    Parameters
    ----------
    source : np.ndarray | PIL.Image.Image
        Image the mask is placed on.
    mask : Mask
        Selection flags and anchor. Not modified.

    Returns
    -------
    np.ndarray
        (mask.height, mask.width, 4) uint8 RGBA. Unselected cells are fully
        transparent, selected cells copy the source pixel (alpha 255 unless
        the source carries its own alpha).

    Raises
    ------
    OutOfBoundsError
        If any selected cell lands outside the source image.
    """
    src = as_source_np(source)
    H, W = src.shape[:2]
    x0, y0 = mask.position

    out = np.zeros((mask.height, mask.width, 4), dtype=np.uint8)

    rows, cols = np.nonzero(mask.bits)
    if rows.size == 0:
        return out

    xs = cols + x0
    ys = rows + y0
    bad = (xs < 0) | (xs >= W) | (ys < 0) | (ys >= H)
    if bad.any():
        i = int(np.argmax(bad))
        raise OutOfBoundsError(
            f"Mask cell ({rows[i]}, {cols[i]}) at anchor {mask.position} "
            f"reads ({xs[i]}, {ys[i]}) outside {W}x{H} image"
        )

    out[rows, cols, :3] = src[ys, xs, :3]
    out[rows, cols, 3] = src[ys, xs, 3] if src.shape[2] == 4 else 255
    return out


def extract_all(source, masks):
    src = as_source_np(source)
    return [extract(src, m) for m in masks]
