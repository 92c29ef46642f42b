from __future__ import annotations

from dataclasses import dataclass

from erp_core.domain.value_objects.cuit_subject import CUITSubject


@dataclass(frozen=True)
class CUITDetails:
    type: str
    check_digit: int
    calculated_check_digit: int
    subject: CUITSubject | None = None


@dataclass(frozen=True)
class CUITValidationResult:
    """Outcome of a single CUIT validation.

    ``formatted`` is only set when ``valid``. ``details`` is set when valid and
    on a check-digit mismatch, so both digits can be reported.
    """

    valid: bool
    error: str | None = None
    formatted: str | None = None
    details: CUITDetails | None = None

    @classmethod
    def failure(cls, error: str, details: CUITDetails | None = None) -> "CUITValidationResult":
        return cls(valid=False, error=error, details=details)
