# masking_utils/node_ops.py
import logging
from enum import Enum

from .mask import Mask
from .mask_array import MaskCollection

logger = logging.getLogger(__name__)


class GeneratorType(Enum):
    NONE = "none"       # fallback, generates nothing
    SQUARE = "square"   # regular grid of rectangular pieces


def _splits(total, parts):
    step = total // parts
    starts = [i * step for i in range(parts)]
    sizes = [step] * (parts - 1) + [total - step * (parts - 1)]
    return list(zip(starts, sizes))


def square_grid(height, width, rows, cols) -> MaskCollection:
    """
    Tile an image with a rows x cols grid of fully selected masks.

    Masks come out row-major. The last row / column absorbs the remainder
    so every pixel is covered exactly once.
    """
    if rows < 1 or cols < 1:
        raise ValueError(f"Grid must be at least 1x1, got {rows}x{cols}")
    if rows > height or cols > width:
        raise ValueError(f"Grid {rows}x{cols} does not fit a {width}x{height} image")

    masks = MaskCollection()
    for y, h in _splits(height, rows):
        for x, w in _splits(width, cols):
            m = Mask(h, w)
            m.select_all()
            m.set_position(x, y)
            masks.add(m)

    logger.debug(f"Square grid {rows}x{cols} over {width}x{height}: {len(masks)} nodes")
    return masks


def generate_nodes(generator, image_shape, rows, cols) -> MaskCollection:
    H, W = image_shape[:2]
    generator = GeneratorType(generator)

    if generator is GeneratorType.NONE:
        return MaskCollection()
    if generator is GeneratorType.SQUARE:
        return square_grid(H, W, rows, cols)

    raise ValueError(f"Unsupported generator: {generator}")
