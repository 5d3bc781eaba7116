"""Unit tests for the validate and generate commands."""

from typing import Callable

import pytest

from kitchens.application.commands import GenerateKitchenCommand, ValidateKitchenCommand
from kitchens.domain import (
    ConfigValidator,
    KitchenConfig,
    LayoutEngine,
    LayoutLine,
    ModuleSpec,
    UnknownAlignmentTargetError,
)


class TestValidateKitchenCommand:
    def test_returns_validation_result(
        self,
        validator: ConfigValidator,
        make_module: Callable[..., ModuleSpec],
        make_line: Callable[..., LayoutLine],
        make_config: Callable[..., KitchenConfig],
    ) -> None:
        config = make_config([make_line([make_module("b1", 25)], 100)])
        result = ValidateKitchenCommand(validator).execute(config)

        assert not result.is_valid
        assert "out_of_range_width" in result.error_codes


class TestGenerateKitchenCommand:
    def test_success(
        self,
        validator: ConfigValidator,
        engine: LayoutEngine,
        make_module: Callable[..., ModuleSpec],
        make_line: Callable[..., LayoutLine],
        make_config: Callable[..., KitchenConfig],
    ) -> None:
        config = make_config([make_line([make_module("b1", 60)], 60)])
        output = GenerateKitchenCommand(validator, engine).execute(config)

        assert output.is_valid
        assert output.kitchen_id == "test_kitchen"
        assert output.module_count == 1
        assert output.error_code is None

    def test_validation_errors_block_synthesis(
        self,
        validator: ConfigValidator,
        engine: LayoutEngine,
        make_module: Callable[..., ModuleSpec],
        make_line: Callable[..., LayoutLine],
        make_config: Callable[..., KitchenConfig],
    ) -> None:
        config = make_config([make_line([make_module("b1", 25)], 25)])
        output = GenerateKitchenCommand(validator, engine).execute(config)

        assert not output.is_valid
        assert output.modules == []
        assert output.error_code == "validation"
        assert output.errors[0].startswith("layoutLines[0].modules[0].width: ")

    def test_warnings_carried_through(
        self,
        validator: ConfigValidator,
        engine: LayoutEngine,
        make_module: Callable[..., ModuleSpec],
        make_line: Callable[..., LayoutLine],
        make_config: Callable[..., KitchenConfig],
    ) -> None:
        config = make_config([make_line([make_module("b1", 50)], 60)])
        output = GenerateKitchenCommand(validator, engine).execute(config)

        assert output.is_valid
        assert [w.code for w in output.validation.warnings] == ["auto_fix_scaled"]
        assert output.modules[0].dimensions.width == 60

    def test_synthesis_error_reported_not_raised(
        self,
        validator: ConfigValidator,
        engine: LayoutEngine,
        make_module: Callable[..., ModuleSpec],
        make_line: Callable[..., LayoutLine],
        make_config: Callable[..., KitchenConfig],
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        def fail(config: KitchenConfig) -> list:
            raise UnknownAlignmentTargetError("w1", "b9")

        monkeypatch.setattr(engine, "generate", fail)
        config = make_config([make_line([make_module("b1", 60)], 60)])
        output = GenerateKitchenCommand(validator, engine).execute(config)

        assert output.modules == []
        assert output.error_code == "unknown_alignment_target"
        assert output.errors == ["Hanging module 'w1' aligns with unknown module 'b9'"]
