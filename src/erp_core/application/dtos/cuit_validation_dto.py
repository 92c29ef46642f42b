from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from erp_core.domain.entities.cuit_validation import CUITValidationResult
from erp_core.domain.value_objects.cuit_subject import Company, Individual


@dataclass(frozen=True)
class CUITDetailsDTO:
    type: str
    subject: str | None  # "individual" | "company"
    gender: str | None
    check_digit: int
    calculated_check_digit: int


@dataclass(frozen=True)
class CUITValidationDTO:
    valid: bool
    error: str | None = None
    formatted: str | None = None
    details: CUITDetailsDTO | None = None

    @classmethod
    def from_domain(cls, result: CUITValidationResult) -> "CUITValidationDTO":
        details = None
        if result.details is not None:
            d = result.details
            subject: str | None = None
            gender: str | None = None
            if isinstance(d.subject, Company):
                subject = "company"
            elif isinstance(d.subject, Individual):
                subject = "individual"
                gender = d.subject.gender.value if d.subject.gender else None
            details = CUITDetailsDTO(
                type=d.type,
                subject=subject,
                gender=gender,
                check_digit=d.check_digit,
                calculated_check_digit=d.calculated_check_digit,
            )
        return cls(
            valid=result.valid,
            error=result.error,
            formatted=result.formatted,
            details=details,
        )

    def to_dict(self) -> dict[str, Any]:
        """Plain dict without the keys that do not apply to this outcome."""
        return {k: v for k, v in asdict(self).items() if v is not None}
