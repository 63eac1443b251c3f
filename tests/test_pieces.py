import random

import numpy as np
import pytest

from blockdrop.game.pieces import (
    PIECE_TYPES,
    PIECES_BY_ID,
    get_piece,
    kick_offsets,
    random_piece,
    rotate_clockwise,
)


@pytest.mark.parametrize("piece", PIECE_TYPES, ids=lambda p: p["name"])
def test_shape_cells_carry_type_id(piece):
    values = set(np.unique(piece["shape"])) - {0}
    assert values == {piece["id"]}


@pytest.mark.parametrize("piece", PIECE_TYPES, ids=lambda p: p["name"])
def test_four_rotations_return_original(piece):
    shape = piece["shape"]
    for _ in range(4):
        shape = rotate_clockwise(shape)
    assert np.array_equal(shape, piece["shape"])


def test_rotate_clockwise_transposes_then_reverses_rows():
    t = get_piece("T")["shape"]
    expected = np.array([
        [0, 6, 0],
        [6, 6, 0],
        [0, 6, 0],
    ])
    assert np.array_equal(rotate_clockwise(t), expected)


def test_rotate_clockwise_non_square():
    shape = np.array([[1, 1, 1], [0, 0, 1]], dtype=np.int8)
    assert np.array_equal(rotate_clockwise(shape), [[0, 1], [0, 1], [1, 1]])


def test_rotation_leaves_catalog_untouched():
    i = get_piece("I")
    original = i["shape"].copy()
    rotated = rotate_clockwise(i["shape"])
    rotated[:] = 0
    assert np.array_equal(i["shape"], original)
    with pytest.raises(ValueError):
        i["shape"][0, 0] = 9


def test_rotate_rejects_malformed_shape():
    with pytest.raises(AssertionError):
        rotate_clockwise(np.array([1, 1, 1]))


@pytest.mark.parametrize("width, expected", [
    (1, []),
    (2, [1]),
    (3, [1, -1]),
    (4, [1, -1, 2]),
])
def test_kick_offsets(width, expected):
    assert list(kick_offsets(width)) == expected


def test_random_piece_draws_every_type():
    rng = random.Random(7)
    names = {random_piece(rng)["name"] for _ in range(500)}
    assert names == {"I", "J", "L", "O", "S", "T", "Z"}


def test_random_piece_is_reproducible_with_seed():
    rng_a, rng_b = random.Random(3), random.Random(3)
    a = [random_piece(rng_a)["name"] for _ in range(20)]
    b = [random_piece(rng_b)["name"] for _ in range(20)]
    assert a == b


def test_get_piece_unknown_name():
    with pytest.raises(KeyError):
        get_piece("X")


@pytest.mark.parametrize("piece", PIECE_TYPES, ids=lambda p: p["name"])
def test_lookup_by_id_matches_name(piece):
    assert PIECES_BY_ID[piece["id"]] is get_piece(piece["name"])
