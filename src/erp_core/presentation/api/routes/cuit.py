from typing import Any

from fastapi import APIRouter, HTTPException

from erp_core.application.use_cases.normalize_cuit import NormalizeCUITUseCase
from erp_core.application.use_cases.validate_cuit import ValidateCUITUseCase
from erp_core.domain.errors import InvalidCUITError
from erp_core.domain.services.cuit_validator import generate_cuit_from_dni
from erp_core.infrastructure.metrics import CUIT_VALIDATIONS

router = APIRouter(prefix="/v1/cuit", tags=["cuit"])

_validate = ValidateCUITUseCase()


@router.post("/validate")
def validate_endpoint(body: dict[str, Any]):  # type: ignore[misc]
    dto = _validate.execute(body.get("cuit"))
    CUIT_VALIDATIONS.labels(str(dto.valid).lower()).inc()
    return dto.to_dict()


@router.post("/normalize")
def normalize_endpoint(body: dict[str, Any]):  # type: ignore[misc]
    uc = NormalizeCUITUseCase(required=bool(body.get("required", True)))
    try:
        cuit = uc.execute(body.get("cuit"))
    except InvalidCUITError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    return {"cuit": cuit}


@router.get("/generate")
def generate_endpoint(dni: str, gender: str = "M"):  # type: ignore[misc]
    try:
        cuit = generate_cuit_from_dni(dni, gender)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=f"Género inválido: {gender}") from e
    return {"cuit": cuit}
