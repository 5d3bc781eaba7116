"""Sequential placement of modules along a layout line.

Modules are placed left to right in declared order with a running cursor.
Under the auto_fix policy a single factor f = length / naive_total is
applied to every width and every gap of the line, so all modules keep their
relative proportions and the line is filled exactly. Under the reject
policy widths are never scaled: an overflow is an error and any slack at
the end of the line stays unused.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..entities import LayoutLine, LayoutRules, ModuleSpec
from ..errors import LayoutInvariantError, LineLengthMismatchError
from ..value_objects import MismatchPolicy

logger = logging.getLogger(__name__)

# Relative tolerance for "fills the line exactly"
LINE_TOLERANCE = 1e-6


@dataclass(frozen=True)
class PlacedModule:
    """A module with its resolved offset and effective width.

    Attributes:
        spec: The module as declared.
        offset: Leading edge of the bounding box along the line direction.
        width: Effective width after any auto_fix scaling.
    """

    spec: ModuleSpec
    offset: float
    width: float


@dataclass(frozen=True)
class ResolvedLine:
    """Result of resolving one layout line.

    Attributes:
        line: The line as declared.
        placements: Placed modules in declared order.
        scale_factor: Factor applied to widths and gaps (1.0 when unscaled).
        gap: Effective gap between consecutive modules.
    """

    line: LayoutLine
    placements: tuple[PlacedModule, ...]
    scale_factor: float
    gap: float

    @property
    def used_length(self) -> float:
        """Distance from the line start to the trailing edge of the last module."""
        if not self.placements:
            return 0.0
        last = self.placements[-1]
        return last.offset + last.width

    @property
    def slack(self) -> float:
        return self.line.length - self.used_length


def naive_total_length(line: LayoutLine, gap: float) -> float:
    """Sum of declared widths plus the gaps between them."""
    count = len(line.modules)
    if count == 0:
        return 0.0
    return sum(module.width for module in line.modules) + (count - 1) * gap


def scale_factor_for(line: LayoutLine, rules: LayoutRules) -> float:
    """Return the factor auto_fix would apply to this line.

    1.0 for the reject policy, for empty lines, and for lines that already
    fill their length within tolerance.
    """
    if rules.mismatch_policy is not MismatchPolicy.AUTO_FIX or not line.modules:
        return 1.0
    naive = naive_total_length(line, rules.gap_between_modules)
    if naive <= 0 or abs(naive - line.length) <= LINE_TOLERANCE * line.length:
        return 1.0
    return line.length / naive


class LayoutLineResolver:
    """Walk a line's modules and compute their offsets along the line."""

    def resolve_line(self, line: LayoutLine, rules: LayoutRules) -> ResolvedLine:
        """Resolve offsets and effective widths for one line.

        Args:
            line: The layout line with its ordered module sequence.
            rules: Mismatch policy and gap between modules.

        Returns:
            ResolvedLine with one PlacedModule per declared module.

        Raises:
            LineLengthMismatchError: If modules overflow the line under reject.
            LayoutInvariantError: If an auto_fix pass does not end on the
                line length within tolerance.
        """
        gap = rules.gap_between_modules
        naive = naive_total_length(line, gap)
        overflow = naive - line.length > LINE_TOLERANCE * line.length
        if overflow and rules.mismatch_policy is MismatchPolicy.REJECT:
            raise LineLengthMismatchError(line.id, naive, line.length)

        factor = scale_factor_for(line, rules)
        placements = self._place(line, gap * factor, factor)
        resolved = ResolvedLine(
            line=line, placements=placements, scale_factor=factor, gap=gap * factor
        )

        if factor != 1.0:
            logger.debug(
                f"Line '{line.id}' scaled by {factor:.6f} "
                f"({naive:.2f} -> {line.length:.2f})"
            )

        if rules.mismatch_policy is MismatchPolicy.AUTO_FIX and placements:
            end = resolved.used_length
            if abs(end - line.length) > LINE_TOLERANCE * line.length:
                raise LayoutInvariantError(
                    f"Line '{line.id}' ends at {end!r} after auto_fix, "
                    f"expected {line.length!r}"
                )
        return resolved

    def _place(
        self, line: LayoutLine, gap: float, factor: float
    ) -> tuple[PlacedModule, ...]:
        placements: list[PlacedModule] = []
        cursor = 0.0
        for index, module in enumerate(line.modules):
            if index > 0:
                cursor += gap
            width = module.width * factor
            placements.append(PlacedModule(spec=module, offset=cursor, width=width))
            cursor += width
        return tuple(placements)
