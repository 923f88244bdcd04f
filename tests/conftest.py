import matplotlib
matplotlib.use("Agg")

import numpy as np
import pytest


@pytest.fixture
def gradient_image():
    """10x10 RGB image where pixel (x, y) = (x*10, y*10, x + y)."""
    ys, xs = np.mgrid[0:10, 0:10]
    return np.stack([xs * 10, ys * 10, xs + ys], axis=-1).astype(np.uint8)
