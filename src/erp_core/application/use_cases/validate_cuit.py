from erp_core.application.dtos.cuit_validation_dto import CUITValidationDTO
from erp_core.domain.services.cuit_validator import validate_cuit


class ValidateCUITUseCase:
    def execute(self, raw: str | None) -> CUITValidationDTO:
        return CUITValidationDTO.from_domain(validate_cuit(raw))
