import itertools
import string

import numpy as np
import pytest

from geometry import dist
from layout import (
    LayoutInfeasibleError,
    generate_field_nodes,
    terminal_nodes,
    terminal_position,
    terminal_positions,
)


@pytest.mark.parametrize("w, h", [(1000, 500), (390, 844), (1.5, 2.5)])
def test_terminal_positions_follow_formula(w, h):
    bottom, top = terminal_positions(w, h)
    for i in range(3):
        x = w * 0.2 + i * w * 0.3
        assert bottom[i] == pytest.approx((x, h * 0.9))
        assert top[i] == pytest.approx((x, h * 0.1))


def test_terminal_positions_track_resize():
    small = terminal_positions(400, 300)
    large = terminal_positions(800, 600)
    assert small != large
    assert terminal_positions(400, 300) == small
    assert terminal_position(True, 2, 800, 600) == large[0][2]
    assert terminal_position(False, 1, 800, 600) == large[1][1]


def test_terminal_nodes_cover_both_groups():
    nodes = terminal_nodes(1000, 500)
    assert len(nodes) == 6
    assert sorted((n.is_bottom, n.index) for n in nodes) == [
        (False, 0), (False, 1), (False, 2), (True, 0), (True, 1), (True, 2),
    ]


@pytest.mark.parametrize("w, h, count, sep, seed", [
    (800, 600, 30, 50, 0),
    (800, 600, 30, 50, 99),
    (390, 844, 30, 50, 3),
    (1200, 900, 60, 70, 11),
    (300, 300, 5, 40, 5),
    (640, 480, 1, 50, 8),
])
def test_field_nodes_count_spacing_bounds(w, h, count, sep, seed):
    rng = np.random.default_rng(seed)
    nodes = generate_field_nodes(w, h, count=count, min_separation=sep, rng=rng)

    assert len(nodes) == count
    for a, b in itertools.combinations(nodes, 2):
        assert dist(a.position, b.position) >= sep
    for n in nodes:
        assert 0.1 * w <= n.position[0] < 0.9 * w
        assert 0.1 * h <= n.position[1] < 0.9 * h
        assert len(n.letter) == 1 and n.letter in string.ascii_uppercase
    assert len({n.id for n in nodes}) == count


def test_field_nodes_repeat_with_same_seed():
    a = generate_field_nodes(800, 600, rng=np.random.default_rng(7))
    b = generate_field_nodes(800, 600, rng=np.random.default_rng(7))
    assert [(n.position, n.letter) for n in a] == [(n.position, n.letter) for n in b]


def test_field_nodes_use_params_defaults(params):
    nodes = generate_field_nodes(800, 600, params=params)
    assert len(nodes) == params.node_count


def test_zero_count_is_empty(rng):
    assert generate_field_nodes(800, 600, count=0, rng=rng) == []


def test_infeasible_layout_raises(rng):
    with pytest.raises(LayoutInfeasibleError) as info:
        generate_field_nodes(100, 100, count=30, min_separation=50, rng=rng, max_attempts=500)

    err = info.value
    assert isinstance(err, RuntimeError)
    assert err.count == 30
    assert err.placed < 30
    assert err.attempts == 500
    assert (err.width, err.height) == (100.0, 100.0)
    assert "30" in str(err) and "100x100" in str(err)
