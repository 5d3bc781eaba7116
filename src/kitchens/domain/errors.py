"""Exceptions raised by layout synthesis.

Every user-facing synthesis failure derives from LayoutError and is fatal
only to the synthesis call that raised it. LayoutInvariantError signals a
bug in the engine rather than a problem with the configuration.
"""

from __future__ import annotations


class LayoutError(Exception):
    """Base class for synthesis failures caused by the configuration."""

    code = "layout_error"


class LineLengthMismatchError(LayoutError):
    """Raised when modules overflow a line under the reject policy."""

    code = "line_length_mismatch"

    def __init__(self, line_id: str, required: float, available: float) -> None:
        self.line_id = line_id
        self.required = required
        self.available = available
        super().__init__(
            f"Line '{line_id}' needs {required:.2f} cm but only "
            f"{available:.2f} cm is available"
        )


class UnknownModuleTypeError(LayoutError):
    """Raised when a module type has no registered carcass builder."""

    code = "unknown_module_type"

    def __init__(self, module_id: str, module_type: str) -> None:
        self.module_id = module_id
        self.module_type = module_type
        super().__init__(f"Module '{module_id}' has unknown type '{module_type}'")


class HandleTooCloseToEdgeError(LayoutError):
    """Raised when a handle template cannot keep its edge clearance."""

    code = "handle_too_close_to_edge"

    def __init__(
        self, module_id: str, clearance: float, required: float, edge: str
    ) -> None:
        self.module_id = module_id
        self.clearance = clearance
        self.required = required
        self.edge = edge
        super().__init__(
            f"Handle on module '{module_id}' is {clearance:.2f} cm from the "
            f"{edge} edge (minimum {required:.2f} cm)"
        )


class CornerAdjacencyError(LayoutError):
    """Raised when a corner module has no perpendicular neighbouring line."""

    code = "invalid_corner_adjacency"

    def __init__(self, module_id: str, reason: str) -> None:
        self.module_id = module_id
        self.reason = reason
        super().__init__(f"Corner module '{module_id}': {reason}")


class UnknownAlignmentTargetError(LayoutError):
    """Raised when a hanging module aligns with a module that does not exist."""

    code = "unknown_alignment_target"

    def __init__(self, module_id: str, target: str) -> None:
        self.module_id = module_id
        self.target = target
        super().__init__(
            f"Hanging module '{module_id}' aligns with unknown module '{target}'"
        )


class StructureOverflowError(LayoutError):
    """Raised when a module's fit-out does not fit inside its carcass."""

    code = "structure_overflow"

    def __init__(
        self, module_id: str, required: float, available: float, detail: str
    ) -> None:
        self.module_id = module_id
        self.required = required
        self.available = available
        self.detail = detail
        super().__init__(f"Module '{module_id}': {detail}")


class UnknownMaterialError(LayoutError):
    """Raised when a material id does not resolve in the material catalog."""

    code = "unknown_material_id"

    def __init__(self, module_id: str, slot: str, material_id: str) -> None:
        self.module_id = module_id
        self.slot = slot
        self.material_id = material_id
        super().__init__(
            f"Module '{module_id}' references unknown {slot} material '{material_id}'"
        )


class LayoutInvariantError(RuntimeError):
    """Raised when the engine's own post-conditions do not hold."""
