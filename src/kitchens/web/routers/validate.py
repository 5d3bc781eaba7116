"""Configuration validation endpoints."""

from fastapi import APIRouter

from kitchens.application.config import config_to_domain, load_config_from_dict
from kitchens.web.dependencies import ValidatorDep
from kitchens.web.schemas.requests import ConfigValidateRequest
from kitchens.web.schemas.responses import ValidationResultSchema

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post("", response_model=ValidationResultSchema)
async def validate_configuration(
    request: ConfigValidateRequest,
    validator: ValidatorDep,
) -> ValidationResultSchema:
    """Validate a kitchen configuration without generating.

    Schema failures raise ConfigError, answered with 422 by the exception
    handler. Semantic findings are returned in the body with status 200.
    """
    config = config_to_domain(load_config_from_dict(request.config))
    result = validator.validate(config)
    return ValidationResultSchema(
        is_valid=result.is_valid,
        errors=[e.to_dict() for e in result.errors],
        warnings=[w.to_dict() for w in result.warnings],
    )
