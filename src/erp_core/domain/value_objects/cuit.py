from __future__ import annotations

from erp_core.domain.errors import InvalidCUITError
from erp_core.domain.services.cuit_validator import normalize_cuit, validate_cuit
from erp_core.domain.value_objects.cuit_subject import (
    COMPANY_TYPE_CODES,
    INDIVIDUAL_TYPE_CODES,
    CUITSubject,
    classify_type_code,
)


class CUIT(str):
    """Value Object para CUIT/CUIL (11 dígitos, verificador válido).

    Accepts any input ``validate_cuit`` accepts and stores the bare digits.
    """

    def __new__(cls, value: str) -> "CUIT":
        result = validate_cuit(value)
        if not result.valid:
            raise InvalidCUITError(result.error or "CUIT inválido")
        return str.__new__(cls, normalize_cuit(value))

    @property
    def type_code(self) -> str:
        return self[:2]

    @property
    def body(self) -> str:
        return self[2:10]

    @property
    def check_digit(self) -> int:
        return int(self[10])

    @property
    def formatted(self) -> str:
        return f"{self.type_code}-{self.body}-{self[10]}"

    @property
    def subject(self) -> CUITSubject:
        subject = classify_type_code(self.type_code)
        assert subject is not None, "type code already validated"
        return subject

    @property
    def is_company(self) -> bool:
        return self.type_code in COMPANY_TYPE_CODES

    @property
    def is_individual(self) -> bool:
        return self.type_code in INDIVIDUAL_TYPE_CODES
