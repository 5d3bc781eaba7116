"""Unit tests for sequential placement along a layout line.

Covers:
- Reject policy: unscaled placement, unused slack, overflow errors
- Auto-fix policy: uniform scaling on overflow and underflow, gaps included
- Ordering and non-overlap of consecutive modules
"""

from typing import Callable

import pytest

from kitchens.domain import (
    LayoutLine,
    LayoutRules,
    LineLengthMismatchError,
    MismatchPolicy,
    ModuleSpec,
)
from kitchens.domain.services import (
    LayoutLineResolver,
    naive_total_length,
    scale_factor_for,
)

REJECT = LayoutRules(mismatch_policy=MismatchPolicy.REJECT)
AUTO_FIX = LayoutRules(mismatch_policy=MismatchPolicy.AUTO_FIX)


@pytest.fixture
def resolver() -> LayoutLineResolver:
    return LayoutLineResolver()


@pytest.fixture
def line_of(
    make_module: Callable[..., ModuleSpec], make_line: Callable[..., LayoutLine]
) -> Callable[..., LayoutLine]:
    def _line(widths: list[float], length: float) -> LayoutLine:
        modules = [make_module(f"m{i}", width=w) for i, w in enumerate(widths)]
        return make_line(modules, length)

    return _line


class TestRejectPolicy:
    def test_modules_placed_in_order_with_slack(
        self, resolver: LayoutLineResolver, line_of: Callable[..., LayoutLine]
    ) -> None:
        resolved = resolver.resolve_line(line_of([60, 60, 60], 360), REJECT)

        assert [p.offset for p in resolved.placements] == [0, 60, 120]
        assert [p.width for p in resolved.placements] == [60, 60, 60]
        assert resolved.scale_factor == 1.0
        assert resolved.slack == pytest.approx(180)

    def test_overflow_raises_mismatch(
        self, resolver: LayoutLineResolver, line_of: Callable[..., LayoutLine]
    ) -> None:
        with pytest.raises(LineLengthMismatchError) as exc_info:
            resolver.resolve_line(line_of([60, 60], 100), REJECT)

        assert exc_info.value.required == 120
        assert exc_info.value.available == 100
        assert exc_info.value.line_id == "main_wall"

    def test_exact_fit_accepted(
        self, resolver: LayoutLineResolver, line_of: Callable[..., LayoutLine]
    ) -> None:
        resolved = resolver.resolve_line(line_of([40, 60], 100), REJECT)
        assert resolved.used_length == pytest.approx(100)
        assert resolved.slack == pytest.approx(0)

    def test_gap_counts_towards_length(
        self,
        resolver: LayoutLineResolver,
        line_of: Callable[..., LayoutLine],
    ) -> None:
        rules = LayoutRules(mismatch_policy=MismatchPolicy.REJECT, gap_between_modules=5)
        with pytest.raises(LineLengthMismatchError) as exc_info:
            resolver.resolve_line(line_of([50, 50], 100), rules)
        assert exc_info.value.required == 105


class TestAutoFixPolicy:
    def test_overflow_scaled_uniformly(
        self, resolver: LayoutLineResolver, line_of: Callable[..., LayoutLine]
    ) -> None:
        resolved = resolver.resolve_line(line_of([60, 60], 100), AUTO_FIX)

        assert resolved.scale_factor == pytest.approx(100 / 120)
        assert [p.width for p in resolved.placements] == pytest.approx([50, 50])
        assert [p.offset for p in resolved.placements] == pytest.approx([0, 50])
        assert resolved.used_length == pytest.approx(100)

    def test_underflow_scaled_up(
        self, resolver: LayoutLineResolver, line_of: Callable[..., LayoutLine]
    ) -> None:
        resolved = resolver.resolve_line(line_of([40, 60], 200), AUTO_FIX)

        assert resolved.scale_factor == pytest.approx(2.0)
        assert [p.width for p in resolved.placements] == pytest.approx([80, 120])
        assert resolved.used_length == pytest.approx(200)

    def test_proportions_preserved(
        self, resolver: LayoutLineResolver, line_of: Callable[..., LayoutLine]
    ) -> None:
        resolved = resolver.resolve_line(line_of([30, 60, 90], 150), AUTO_FIX)
        widths = [p.width for p in resolved.placements]
        assert widths[1] / widths[0] == pytest.approx(2)
        assert widths[2] / widths[0] == pytest.approx(3)

    def test_gaps_scaled_with_widths(
        self,
        resolver: LayoutLineResolver,
        make_module: Callable[..., ModuleSpec],
        make_line: Callable[..., LayoutLine],
    ) -> None:
        line = make_line([make_module("a", 60), make_module("b", 60)], 100)
        rules = LayoutRules(
            mismatch_policy=MismatchPolicy.AUTO_FIX, gap_between_modules=2
        )
        resolved = resolver.resolve_line(line, rules)

        factor = 100 / 122
        assert resolved.gap == pytest.approx(2 * factor)
        second = resolved.placements[1]
        assert second.offset == pytest.approx((60 + 2) * factor)
        assert resolved.used_length == pytest.approx(100)

    def test_exact_fit_unscaled(
        self, resolver: LayoutLineResolver, line_of: Callable[..., LayoutLine]
    ) -> None:
        resolved = resolver.resolve_line(line_of([50, 50], 100), AUTO_FIX)
        assert resolved.scale_factor == 1.0

    def test_empty_line(
        self, resolver: LayoutLineResolver, line_of: Callable[..., LayoutLine]
    ) -> None:
        resolved = resolver.resolve_line(line_of([], 100), AUTO_FIX)
        assert resolved.placements == ()
        assert resolved.used_length == 0.0


class TestPlacementProperties:
    @pytest.mark.parametrize(
        "widths,length,rules",
        [
            ([60, 60, 60], 360, REJECT),
            ([45, 80, 60, 90], 250, AUTO_FIX),
            ([30, 30], 400, AUTO_FIX),
        ],
    )
    def test_ordered_and_non_overlapping(
        self,
        resolver: LayoutLineResolver,
        line_of: Callable[..., LayoutLine],
        widths: list[float],
        length: float,
        rules: LayoutRules,
    ) -> None:
        placements = resolver.resolve_line(line_of(widths, length), rules).placements
        for previous, current in zip(placements, placements[1:]):
            assert current.offset >= previous.offset + previous.width - 1e-9

    def test_placements_keep_declared_specs(
        self, resolver: LayoutLineResolver, line_of: Callable[..., LayoutLine]
    ) -> None:
        line = line_of([60, 70], 200)
        resolved = resolver.resolve_line(line, AUTO_FIX)
        assert [p.spec.id for p in resolved.placements] == ["m0", "m1"]


class TestHelpers:
    def test_naive_total_length(self, line_of: Callable[..., LayoutLine]) -> None:
        assert naive_total_length(line_of([60, 40, 20], 0), 3) == 126

    def test_scale_factor_is_one_under_reject(
        self, line_of: Callable[..., LayoutLine]
    ) -> None:
        assert scale_factor_for(line_of([60, 60], 100), REJECT) == 1.0
