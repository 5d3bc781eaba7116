"""Predefined kitchens shipped as JSON package data.

Each template is a complete configuration that validates without findings.
It is meant to be listed, printed or copied out as the start of a new
design.
"""

import json
from importlib import resources
from pathlib import Path
from typing import Any

DATA_PACKAGE = "kitchens.application.templates.data"

TEMPLATE_METADATA: dict[str, str] = {
    "straight-kitchen": "Single 360 cm run with pantry, drawers, sink and wall units",
    "l-shaped-kitchen": "Two perpendicular runs joined by a corner unit",
    "compact-kitchen": "240 cm run with a ceiling-hung top cabinet",
}


class TemplateNotFoundError(Exception):
    """No bundled template has the requested name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Template not found: {name}")


class TemplateManager:
    """Read access to the bundled kitchen templates.

    Template names are the keys of ``TEMPLATE_METADATA``; the document for
    ``name`` lives in ``data/<name>.json``.

    Example:
        manager = TemplateManager()
        manager.init_template("l-shaped-kitchen", Path("my-kitchen.json"))
    """

    def __init__(self, data_package: str = DATA_PACKAGE) -> None:
        self._data_package = data_package

    def _resource(self, name: str):
        if not self.template_exists(name):
            raise TemplateNotFoundError(name)
        return resources.files(self._data_package) / f"{name}.json"

    def template_exists(self, name: str) -> bool:
        return name in TEMPLATE_METADATA

    def list_templates(self) -> list[tuple[str, str]]:
        """Return ``(name, description)`` pairs in display order."""
        return list(TEMPLATE_METADATA.items())

    def get_template(self, name: str) -> str:
        """Return the raw JSON text of template ``name``.

        Raises:
            TemplateNotFoundError: If ``name`` is unknown or its data file
                is missing from the installation.
        """
        resource = self._resource(name)
        try:
            return resource.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise TemplateNotFoundError(name) from e

    def get_template_data(self, name: str) -> dict[str, Any]:
        return json.loads(self.get_template(name))

    def init_template(
        self, name: str, output_path: Path, overwrite: bool = False
    ) -> None:
        """Write template ``name`` to ``output_path``.

        Raises:
            TemplateNotFoundError: If the template does not exist.
            FileExistsError: If ``output_path`` exists and ``overwrite`` is
                false. The existing file is left untouched.
        """
        content = self.get_template(name)
        if not overwrite and output_path.exists():
            raise FileExistsError(f"Output file already exists: {output_path}")
        output_path.write_text(content, encoding="utf-8")
