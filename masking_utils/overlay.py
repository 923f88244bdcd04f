# masking_utils/overlay.py
import numpy as np
import cv2
import matplotlib.pyplot as plt

from .cut_ops import as_source_np

NODE_COLOR = (253, 248, 96)


def draw_nodes(image, masks, color=NODE_COLOR, alpha=0.35, thickness=1):
    """
    RGB preview of the nodes laid over an image.

    Selected cells of each placed mask are tinted with `color`, and the mask
    rectangle is outlined. Cells falling outside the image are skipped here,
    the preview is not where out-of-bounds masks get reported.
    """
    base = as_source_np(image)[:, :, :3].copy()
    H, W = base.shape[:2]
    tint = np.zeros((H, W), dtype=bool)

    for m in masks:
        if not m.is_placed:
            continue
        x0, y0 = m.position
        rows, cols = np.nonzero(m.bits)
        xs, ys = cols + x0, rows + y0
        keep = (xs >= 0) & (xs < W) & (ys >= 0) & (ys < H)
        tint[ys[keep], xs[keep]] = True

    layer = base.copy()
    layer[tint] = color
    out = cv2.addWeighted(layer, alpha, base, 1 - alpha, 0)

    for m in masks:
        if not m.is_placed:
            continue
        x0, y0 = m.position
        cv2.rectangle(out, (x0, y0), (x0 + m.width - 1, y0 + m.height - 1),
                      color, thickness)
    return out


def show_nodes(image, masks, title="Nodes"):
    fig, axs = plt.subplots(1, 2, figsize=(10, 5))
    axs[0].imshow(as_source_np(image)[:, :, :3]); axs[0].set_title("Image")
    axs[1].imshow(draw_nodes(image, masks));      axs[1].set_title(f"{title} ({len(masks)})")
    for ax in axs: ax.axis("off")
    plt.tight_layout()
    return fig
