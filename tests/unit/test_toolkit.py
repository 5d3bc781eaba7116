"""Unit tests for the agent tool surface.

Tools never raise on bad input; every failure comes back in the payload.
"""

import copy
from typing import Any

import pytest

from kitchens.application.factory import ServiceFactory
from kitchens.application.tools import DEFAULT_DESCRIPTION, KitchenToolkit
from kitchens.infrastructure.store import KitchenConfigNotFoundError


@pytest.fixture
def toolkit() -> KitchenToolkit:
    return ServiceFactory().get_toolkit()


class TestLibraries:
    def test_material_library_all(self, toolkit: KitchenToolkit) -> None:
        data = toolkit.get_material_library()
        assert set(data) == {"facades", "countertops", "handles"}

    def test_material_library_category(self, toolkit: KitchenToolkit) -> None:
        data = toolkit.get_material_library("handles")
        assert [m["id"] for m in data["handles"]] == ["minimalist_bar_black"]

    def test_material_library_unknown_category(self, toolkit: KitchenToolkit) -> None:
        assert toolkit.get_material_library("floors") == {
            "error": 'Material category "floors" not found'
        }

    def test_module_library(self, toolkit: KitchenToolkit) -> None:
        data = toolkit.get_module_library("tall")
        assert data["tall"]["variants"]["pantry"]["maxWidth"] == 80

    def test_module_library_unknown_type(self, toolkit: KitchenToolkit) -> None:
        assert toolkit.get_module_library("island") == {
            "error": 'Module type "island" not found'
        }


class TestValidateKitchenConfig:
    def test_valid(self, toolkit: KitchenToolkit, minimal_doc: dict[str, Any]) -> None:
        assert toolkit.validate_kitchen_config(minimal_doc) == {
            "isValid": True,
            "errors": [],
            "warnings": [],
        }

    def test_domain_errors(
        self, toolkit: KitchenToolkit, minimal_doc: dict[str, Any]
    ) -> None:
        minimal_doc["layoutLines"][0]["modules"][0]["width"] = 25
        result = toolkit.validate_kitchen_config(minimal_doc)

        assert result["isValid"] is False
        assert result["errors"][0]["code"] == "out_of_range_width"
        assert result["errors"][0]["path"] == "layoutLines[0].modules[0].width"

    def test_schema_errors(
        self, toolkit: KitchenToolkit, minimal_doc: dict[str, Any]
    ) -> None:
        del minimal_doc["defaultMaterials"]
        result = toolkit.validate_kitchen_config(minimal_doc)

        assert result["isValid"] is False
        assert result["errors"] == [
            {"code": "schema", "path": "defaultMaterials", "message": "Field required"}
        ]


class TestGenerateLayout:
    def test_success(self, toolkit: KitchenToolkit, minimal_doc: dict[str, Any]) -> None:
        result = toolkit.generate_layout(minimal_doc)

        assert result["success"] is True
        assert result["errors"] == []
        assert [m["id"] for m in result["modules"]] == ["base-1"]

    def test_validation_failure_has_no_modules(
        self, toolkit: KitchenToolkit, minimal_doc: dict[str, Any]
    ) -> None:
        minimal_doc["defaultMaterials"]["facade"] = "neon_pink"
        result = toolkit.generate_layout(minimal_doc)

        assert result["success"] is False
        assert result["modules"] == []
        assert result["errors"][0]["code"] == "unknown_material_id"
        assert result["errors"][0]["ref"] == "neon_pink"

    def test_schema_failure(self, toolkit: KitchenToolkit) -> None:
        result = toolkit.generate_layout({"kitchenId": "x"})

        assert result["success"] is False
        assert result["modules"] == []
        assert {e["code"] for e in result["errors"]} == {"schema"}

    def test_auto_fix_squeeze_reported_not_raised(
        self, toolkit: KitchenToolkit, minimal_doc: dict[str, Any]
    ) -> None:
        minimal_doc["globalSettings"]["rules"]["mismatchPolicy"] = "auto_fix"
        line = minimal_doc["layoutLines"][0]
        line["length"] = 5
        line["modules"].append(
            {
                "id": "base-2",
                "type": "base",
                "width": 60,
                "positioning": {"anchor": "floor"},
            }
        )

        validation = toolkit.validate_kitchen_config(minimal_doc)
        assert validation["isValid"] is False
        assert {e["code"] for e in validation["errors"]} == {"structure_overflow"}

        result = toolkit.generate_layout(minimal_doc)
        assert result["success"] is False
        assert result["modules"] == []
        assert [e["path"] for e in result["errors"]] == [
            "layoutLines[0].modules[0].width",
            "layoutLines[0].modules[1].width",
        ]

    def test_warnings_reported(
        self, toolkit: KitchenToolkit, straight_kitchen_doc: dict[str, Any]
    ) -> None:
        line = straight_kitchen_doc["layoutLines"][0]
        line["length"] = line["length"] + 20
        result = toolkit.generate_layout(straight_kitchen_doc)

        assert result["success"] is True
        assert [w["code"] for w in result["warnings"]] == ["auto_fix_scaled"]

    def test_input_not_mutated(
        self, toolkit: KitchenToolkit, l_shaped_doc: dict[str, Any]
    ) -> None:
        snapshot = copy.deepcopy(l_shaped_doc)
        toolkit.generate_layout(l_shaped_doc)
        assert l_shaped_doc == snapshot


class TestSavedConfigs:
    def test_save_and_get(
        self, toolkit: KitchenToolkit, minimal_doc: dict[str, Any]
    ) -> None:
        modules = toolkit.generate_layout(minimal_doc)["modules"]
        saved = toolkit.save_kitchen_config(minimal_doc, modules, "Tiny kitchen")

        assert saved["success"] is True
        assert saved["description"] == "Tiny kitchen"
        assert saved["configId"].startswith("kitchen-")
        assert saved["timestamp"].endswith("Z")

        stored = toolkit.get_kitchen_config(saved["configId"])
        assert stored["config"] == minimal_doc
        assert stored["modules"] == modules
        assert stored["timestamp"] == saved["timestamp"]

    def test_save_does_not_read_back(
        self, toolkit: KitchenToolkit, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """An entry evicted right after saving still reports success."""

        def evicted(config_id: str) -> None:
            raise KitchenConfigNotFoundError(config_id)

        monkeypatch.setattr(toolkit.store, "get", evicted)
        saved = toolkit.save_kitchen_config({"kitchenId": "k"}, [])

        assert saved["success"] is True
        assert saved["configId"].startswith("kitchen-")
        assert saved["timestamp"].endswith("Z")

    def test_default_description(self, toolkit: KitchenToolkit) -> None:
        saved = toolkit.save_kitchen_config({}, [])
        assert saved["description"] == DEFAULT_DESCRIPTION

    def test_get_unknown(self, toolkit: KitchenToolkit) -> None:
        result = toolkit.get_kitchen_config("kitchen-1-abcdefghi")
        assert result == {
            "error": "Kitchen configuration not found: kitchen-1-abcdefghi"
        }


def test_tool_names(toolkit: KitchenToolkit) -> None:
    assert sorted(toolkit.as_tools()) == [
        "generateLayout",
        "getKitchenConfig",
        "getMaterialLibrary",
        "getModuleLibrary",
        "saveKitchenConfig",
        "validateKitchenConfig",
    ]
