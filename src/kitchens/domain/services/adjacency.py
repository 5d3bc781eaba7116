"""Corner neighbour lookup shared by validation and synthesis.

A corner module turns from one layout line onto the next. It must be the
last module of its line with a following line, or the first module of its
line with a preceding line; the adjoining module is the first (or last)
module of that other line.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..components.corner import PERPENDICULAR_TOLERANCE
from ..entities import KitchenConfig, LayoutLine, ModuleSpec


@dataclass(frozen=True)
class CornerNeighbor:
    module: ModuleSpec
    line: LayoutLine


def find_corner_neighbor(
    config: KitchenConfig, line_index: int, module_index: int
) -> CornerNeighbor | None:
    """Return the module a corner at the given position turns onto, if any."""
    lines = config.layout_lines
    line = lines[line_index]
    is_last = module_index == len(line.modules) - 1
    is_first = module_index == 0

    if is_last and line_index + 1 < len(lines) and lines[line_index + 1].modules:
        following = lines[line_index + 1]
        return CornerNeighbor(module=following.modules[0], line=following)
    if is_first and line_index > 0 and lines[line_index - 1].modules:
        preceding = lines[line_index - 1]
        return CornerNeighbor(module=preceding.modules[-1], line=preceding)
    return None


def corner_problem(
    config: KitchenConfig, line_index: int, module_index: int
) -> str | None:
    """Describe why a corner at this position is invalid, or None if it is valid."""
    neighbor = find_corner_neighbor(config, line_index, module_index)
    if neighbor is None:
        return (
            "must be the last module of a line followed by another line, "
            "or the first module of a line preceded by one"
        )
    own = config.layout_lines[line_index].direction
    other = neighbor.line.direction
    if own.is_degenerate or other.is_degenerate:
        return "line direction is undefined"
    if abs(own.unit().dot(other.unit())) > PERPENDICULAR_TOLERANCE:
        return f"line '{neighbor.line.id}' is not perpendicular to its own line"
    return None
