import numpy as np
import pytest

from blockdrop.game.pieces import PIECE_TYPES, get_piece
from blockdrop.renderer import PIECE_COLORS, preview_origin


def test_every_piece_has_a_color():
    assert set(PIECE_COLORS) == {piece["id"] for piece in PIECE_TYPES}


@pytest.mark.parametrize("name, expected", [
    ("I", (0, 0)),
    ("O", (1, 1)),
    ("T", (0, 0)),
])
def test_preview_origin_centers_shape(name, expected):
    assert preview_origin(get_piece(name)["shape"]) == expected


def test_preview_origin_odd_fit():
    assert preview_origin(np.ones((1, 3), dtype=np.int8)) == (1, 0)
