import pytest

from tagcloud.core.geometry import Point, Rectangle, Size


class TestPoint:
    def test_offset_returns_new_point(self):
        p = Point(3, 4)
        assert p.offset(2, -1) == Point(5, 3)
        assert p == Point(3, 4)

    def test_point_immutable(self):
        p = Point(1, 2)
        with pytest.raises(AttributeError):
            p.x = 5


class TestSize:
    @pytest.mark.parametrize(
        "width,height,valid",
        [
            (8, 8, True),
            (1, 1, True),
            (0, 5, False),
            (5, 0, False),
            (-4, 16, False),
            (77, -8, False),
        ],
    )
    def test_is_valid(self, width, height, valid):
        assert Size(width, height).is_valid is valid

    def test_size_immutable(self):
        size = Size(8, 8)
        with pytest.raises(AttributeError):
            size.width = 3


class TestRectangle:
    def test_edges(self):
        rect = Rectangle(Point(10, 20), Size(30, 40))
        assert rect.left == 10
        assert rect.top == 20
        assert rect.right == 40
        assert rect.bottom == 60
        assert rect.width == 30
        assert rect.height == 40

    def test_center_uses_floor_division(self):
        rect = Rectangle(Point(0, 0), Size(7, 5))
        assert rect.center == Point(3, 2)

    @pytest.mark.parametrize("size", [Size(8, 8), Size(7, 5), Size(1, 1), Size(77, 6)])
    def test_from_center_round_trips_center(self, size):
        center = Point(720, 720)
        rect = Rectangle.from_center(center, size)
        assert rect.center == center
        assert rect.size == size

    def test_from_center_location(self):
        rect = Rectangle.from_center(Point(10, 10), Size(7, 5))
        assert rect.location == Point(7, 8)

    def test_moved_keeps_size(self):
        rect = Rectangle(Point(0, 0), Size(4, 2))
        moved = rect.moved(3, -2)
        assert moved.location == Point(3, -2)
        assert moved.size == rect.size
        assert rect.location == Point(0, 0)

    def test_equality_by_value(self):
        assert Rectangle(Point(1, 2), Size(3, 4)) == Rectangle(Point(1, 2), Size(3, 4))
