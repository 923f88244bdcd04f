import numpy as np
import pytest
from PIL import Image

from masking_utils.errors import OutOfBoundsError
from masking_utils.io_ops import export_masks, load_image, save_png
from masking_utils.mask import Mask
from masking_utils.node_ops import square_grid


def test_load_image_rgb(tmp_path, gradient_image):
    path = tmp_path / "src.png"
    Image.fromarray(gradient_image).convert("RGBA").save(path)
    arr = load_image(path)
    assert arr.shape == (10, 10, 3)
    np.testing.assert_array_equal(arr, gradient_image)


def test_save_png_keeps_alpha(tmp_path):
    rgba = np.zeros((2, 3, 4), np.uint8)
    rgba[0, 0] = (1, 2, 3, 255)
    out = save_png(rgba, "piece", tmp_path / "nested")
    assert out == tmp_path / "nested" / "piece.png"

    with Image.open(out) as img:
        assert img.mode == "RGBA"
        np.testing.assert_array_equal(np.array(img), rgba)


def test_export_masks(tmp_path, gradient_image):
    paths = export_masks(gradient_image, square_grid(10, 10, 2, 2), tmp_path, prefix="tile")
    assert [p.name for p in paths] == ["tile_0.png", "tile_1.png", "tile_2.png", "tile_3.png"]

    with Image.open(paths[3]) as img:
        np.testing.assert_array_equal(np.array(img)[:, :, :3], gradient_image[5:, 5:])


def test_export_propagates_out_of_bounds(tmp_path, gradient_image):
    m = Mask(2, 2)
    m.select_all()
    m.set_position(9, 9)
    with pytest.raises(OutOfBoundsError):
        export_masks(gradient_image, [m], tmp_path)


@pytest.mark.parametrize("name", ["notes.txt", "image", "scan.npy"])
def test_load_image_rejects_extension(tmp_path, name):
    path = tmp_path / name
    path.write_bytes(b"")
    with pytest.raises(ValueError):
        load_image(path)


def test_load_image_extension_case_insensitive(tmp_path, gradient_image):
    path = tmp_path / "SRC.PNG"
    Image.fromarray(gradient_image).save(path, format="PNG")
    assert load_image(path).shape == (10, 10, 3)
