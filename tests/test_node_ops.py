import numpy as np
import pytest

from masking_utils.cut_ops import extract
from masking_utils.node_ops import GeneratorType, generate_nodes, square_grid


class TestSquareGrid:

    def test_even_split(self):
        masks = square_grid(10, 10, 2, 5)
        assert len(masks) == 10
        assert all(m.shape == (5, 2) for m in masks)
        assert masks.first().position == (0, 0)
        assert masks.get(1).position == (2, 0)
        assert masks.last().position == (8, 5)

    def test_remainder_goes_last(self):
        masks = square_grid(7, 10, 2, 3)
        assert [m.shape for m in masks] == [(3, 3), (3, 3), (3, 4),
                                            (4, 3), (4, 3), (4, 4)]

    def test_covers_every_pixel_once(self):
        H, W = 11, 13
        cover = np.zeros((H, W), dtype=int)
        for m in square_grid(H, W, 3, 4):
            x, y = m.position
            cover[y:y + m.height, x:x + m.width] += m.bits
        assert (cover == 1).all()

    def test_nodes_extract_cleanly(self, gradient_image):
        for m in square_grid(10, 10, 3, 3):
            x, y = m.position
            out = extract(gradient_image, m)
            np.testing.assert_array_equal(
                out[:, :, :3], gradient_image[y:y + m.height, x:x + m.width]
            )

    @pytest.mark.parametrize("rows,cols", [(0, 1), (1, 0), (11, 1), (1, 11)])
    def test_bad_grid(self, rows, cols):
        with pytest.raises(ValueError):
            square_grid(10, 10, rows, cols)


class TestGenerateNodes:

    def test_none(self):
        assert generate_nodes(GeneratorType.NONE, (10, 10, 3), 2, 2).is_empty

    def test_square_by_name(self):
        assert len(generate_nodes("square", (10, 10, 3), 2, 2)) == 4

    def test_unknown(self):
        with pytest.raises(ValueError):
            generate_nodes("square_noise", (10, 10), 2, 2)
