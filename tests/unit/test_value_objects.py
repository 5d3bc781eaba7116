"""Unit tests for geometry value objects."""

import math

import pytest

from kitchens.domain import Dimensions, Direction, ModuleType, Vector3


class TestDirection:
    """Tests for layout line directions."""

    @pytest.mark.parametrize(
        "direction,expected",
        [
            (Direction(1, 0), 0.0),
            (Direction(0, -1), 90.0),
            (Direction(-1, 0), 180.0),
            (Direction(0, 1), 270.0),
        ],
    )
    def test_yaw_degrees(self, direction: Direction, expected: float) -> None:
        assert direction.yaw_degrees() == pytest.approx(expected)

    def test_yaw_is_in_half_open_range(self) -> None:
        yaw = Direction(1, -1e-15).yaw_degrees()
        assert 0.0 <= yaw < 360.0

    def test_unit_normalizes(self) -> None:
        unit = Direction(3, 4).unit()
        assert unit.x == pytest.approx(0.6)
        assert unit.z == pytest.approx(0.8)
        assert unit.length == pytest.approx(1.0)

    def test_zero_direction_is_degenerate(self) -> None:
        direction = Direction(0, 0)
        assert direction.is_degenerate
        with pytest.raises(ValueError, match="non-zero"):
            direction.unit()

    def test_perpendicular_dot_is_zero(self) -> None:
        assert Direction(1, 0).dot(Direction(0, 1)) == 0
        dot = Direction(1, 1).unit().dot(Direction(-1, 1).unit())
        assert math.isclose(dot, 0.0, abs_tol=1e-12)


class TestDimensions:
    def test_positive_dimensions(self) -> None:
        dims = Dimensions(width=60, height=88, depth=60)
        assert dims.volume == 60 * 88 * 60

    @pytest.mark.parametrize("width,height,depth", [(0, 1, 1), (1, -1, 1), (1, 1, 0)])
    def test_non_positive_dimensions_rejected(
        self, width: float, height: float, depth: float
    ) -> None:
        with pytest.raises(ValueError, match="positive"):
            Dimensions(width=width, height=height, depth=depth)


class TestVector3:
    def test_add(self) -> None:
        assert Vector3(1, 2, 3) + Vector3(1, -2, 0.5) == Vector3(2, 0, 3.5)

    def test_negative_components_allowed(self) -> None:
        assert Vector3(0, -12, 0).y == -12

    def test_is_close(self) -> None:
        assert Vector3(1, 1, 1).is_close(Vector3(1 + 1e-12, 1, 1))
        assert not Vector3(1, 1, 1).is_close(Vector3(1.1, 1, 1))


class TestModuleType:
    def test_values(self) -> None:
        assert ModuleType.values() == ["base", "sink", "wall", "tall", "corner"]
