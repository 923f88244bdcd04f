# masking_utils/io_ops.py
import logging
from pathlib import Path

import numpy as np
from PIL import Image

from app_utils.config import IMAGE_EXTS
from .cut_ops import as_source_np, extract

logger = logging.getLogger(__name__)


def load_image(path) -> np.ndarray:
    path = Path(path)
    if path.suffix.lower() not in IMAGE_EXTS:
        raise ValueError(f"Unsupported image type: {path.suffix or path.name}")

    with Image.open(path) as img:
        arr = np.array(img.convert("RGB"))
    logger.info(f"Loaded {path.name} ({arr.shape[1]}x{arr.shape[0]})")
    return arr


def save_png(rgba: np.ndarray, name: str, out_dir) -> Path:
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    out_path = out_dir / f"{name}.png"
    Image.fromarray(rgba.astype(np.uint8)).save(out_path, format="PNG")
    return out_path


def export_masks(source, masks, out_dir, prefix="node"):
    """Extract every mask and write one PNG each, named <prefix>_<index>.png."""
    src = as_source_np(source)
    paths = []
    for i, m in enumerate(masks):
        paths.append(save_png(extract(src, m), f"{prefix}_{i}", out_dir))

    logger.info(f"Exported {len(paths)} masks to {out_dir}")
    return paths
