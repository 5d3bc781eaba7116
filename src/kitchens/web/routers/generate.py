"""Layout generation endpoints."""

from fastapi import APIRouter

from kitchens.application.config import config_to_domain, load_config_from_dict
from kitchens.application.dtos import LayoutOutput
from kitchens.infrastructure.exporters import SCHEMA_VERSION, modules_to_list
from kitchens.web.dependencies import GenerateCommandDep
from kitchens.web.exceptions import KitchenGenerationError
from kitchens.web.schemas.requests import GenerateFromConfigRequest
from kitchens.web.schemas.responses import LayoutResponseSchema

router = APIRouter(prefix="/generate", tags=["generate"])


def _failure_details(output: LayoutOutput) -> list[dict]:
    if output.validation.errors:
        return [error.to_dict() for error in output.validation.errors]
    return [{"code": output.error_code, "message": m} for m in output.errors]


@router.post("", response_model=LayoutResponseSchema)
async def generate_layout(
    request: GenerateFromConfigRequest,
    command: GenerateCommandDep,
) -> LayoutResponseSchema:
    """Validate a configuration and generate its renderable modules.

    Raises:
        ConfigError: If the configuration does not parse (422).
        KitchenGenerationError: If validation or synthesis fails (422).
    """
    config = config_to_domain(load_config_from_dict(request.config))
    output = command.execute(config)
    if not output.is_valid:
        raise KitchenGenerationError(_failure_details(output))

    return LayoutResponseSchema(
        schema_version=SCHEMA_VERSION,
        kitchen_id=output.kitchen_id,
        modules=modules_to_list(output.modules),
        warnings=[w.to_dict() for w in output.validation.warnings],
    )
