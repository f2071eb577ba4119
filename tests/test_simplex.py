import pytest

from camshake.simplex import OpenSimplex

POINTS = [(i * 0.37, j * 0.61) for i in range(-10, 10) for j in range(-5, 5)]


def test_deterministic_for_same_seed():
    a = OpenSimplex(3)
    b = OpenSimplex(3)
    assert [a.get(x, y) for x, y in POINTS] == [b.get(x, y) for x, y in POINTS]


def test_values_within_unit_range():
    noise = OpenSimplex(0)
    values = [noise.get(x, y) for x, y in POINTS]
    assert all(-1.0 <= v <= 1.0 for v in values)


def test_values_vary_over_space():
    noise = OpenSimplex(1)
    values = {round(noise.get(x, y), 9) for x, y in POINTS}
    assert len(values) > 50


def test_different_seeds_give_different_noise():
    a = OpenSimplex(0)
    b = OpenSimplex(1)
    diffs = [abs(a.get(x, y) - b.get(x, y)) for x, y in POINTS]
    assert max(diffs) > 1e-3


@pytest.mark.parametrize("seed", [0, 1, 2])
def test_noise_is_continuous(seed):
    noise = OpenSimplex(seed)
    for t in range(200):
        x = t * 0.05
        assert abs(noise.get(x, 0.0) - noise.get(x + 1e-5, 0.0)) < 1e-2


def test_seed_is_kept():
    assert OpenSimplex(7).seed == 7