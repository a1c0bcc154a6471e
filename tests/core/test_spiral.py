import itertools
import math

import pytest

from tagcloud.core.exceptions import InvalidArgumentError
from tagcloud.core.geometry import Point
from tagcloud.core.spiral import Spiral

CENTER = Point(250, 250)


def test_constructor_with_valid_arguments():
    spiral = Spiral(CENTER, 0.1, 0.2)
    assert spiral.center == CENTER
    assert spiral.angle_step == 0.1
    assert spiral.radius_step == 0.2
    assert spiral.steps == 0


@pytest.mark.parametrize(
    "angle_step,radius_step",
    [
        pytest.param(0, 0, id="zero steps"),
        pytest.param(-0.1, 0.2, id="negative angle step"),
        pytest.param(0.1, -0.2, id="negative radius step"),
        pytest.param(0.1, 0, id="zero radius step"),
        pytest.param(float("nan"), 0.2, id="nan angle step"),
        pytest.param(0.1, float("inf"), id="infinite radius step"),
        pytest.param(float("inf"), 0.2, id="infinite angle step"),
    ],
)
def test_constructor_rejects_invalid_steps(angle_step, radius_step):
    with pytest.raises(InvalidArgumentError):
        Spiral(CENTER, angle_step, radius_step)


def test_invalid_step_is_a_value_error():
    with pytest.raises(ValueError):
        Spiral(CENTER, 0.1, -1)


def test_invalid_step_names_argument():
    with pytest.raises(InvalidArgumentError) as exc_info:
        Spiral(CENTER, 0.1, -0.2)
    assert exc_info.value.argument == "radius_step"
    assert exc_info.value.value == -0.2


def test_first_point_is_center():
    spiral = Spiral(CENTER, 0.1, 0.2)
    assert spiral.next_point() == CENTER


def test_points_follow_archimedean_formula():
    spiral = Spiral(CENTER, 0.1, 0.2)
    points = [spiral.next_point() for _ in range(50)]

    for i, point in enumerate(points):
        angle = i * 0.1
        radius = i * 0.2
        assert point.x == pytest.approx(CENTER.x + radius * math.cos(angle))
        assert point.y == pytest.approx(CENTER.y + radius * math.sin(angle))


def test_radius_strictly_increases():
    spiral = Spiral(CENTER, 0.3, 0.5)
    distances = [
        math.hypot(p.x - CENTER.x, p.y - CENTER.y)
        for p in itertools.islice(spiral, 200)
    ]
    assert all(b > a for a, b in zip(distances, distances[1:]))


def test_state_advances_with_each_point():
    spiral = Spiral(CENTER, 0.25, 2.0)
    for _ in range(4):
        spiral.next_point()

    assert spiral.steps == 4
    assert spiral.angle == pytest.approx(1.0)
    assert spiral.radius == pytest.approx(8.0)


def test_iterator_protocol():
    spiral = Spiral(CENTER, 0.1, 0.2)
    assert iter(spiral) is spiral
    assert next(spiral) == CENTER
    assert spiral.steps == 1


def test_new_spiral_replays_sequence():
    first = list(itertools.islice(Spiral(CENTER, 0.1, 0.2), 30))
    second = list(itertools.islice(Spiral(CENTER, 0.1, 0.2), 30))
    assert first == second


def test_repr_mentions_state():
    spiral = Spiral(CENTER, 0.1, 0.2)
    spiral.next_point()
    assert "steps=1" in repr(spiral)
