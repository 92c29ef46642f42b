"""CUIT/CUIL validation (AFIP modulo-11 algorithm).

Every function here is pure and total over its input: invalid input is
reported through the return value, never raised. Callers that need a hard
failure build a :class:`~erp_core.domain.value_objects.cuit.CUIT` or raise
:class:`~erp_core.domain.errors.InvalidCUITError` themselves.
"""

from __future__ import annotations

import re

from erp_core.domain.entities.cuit_validation import CUITDetails, CUITValidationResult
from erp_core.domain.value_objects.cuit_subject import (
    COMPANY_TYPE_CODES,
    GENDER_TYPE_CODES,
    INDIVIDUAL_TYPE_CODES,
    VALID_TYPE_CODES,
    Gender,
    classify_type_code,
)

CUIT_LENGTH = 11
DNI_LENGTH = 8
CHECK_DIGIT_WEIGHTS: tuple[int, ...] = (5, 4, 3, 2, 7, 6, 5, 4, 3, 2)

ERROR_EMPTY = "El CUIT no puede estar vacío"
ERROR_CHARACTERS = "El CUIT debe contener solo números (guiones y espacios permitidos)"
ERROR_LENGTH = "El CUIT debe tener 11 dígitos"

_NON_DIGITS = re.compile(r"[^0-9]")
_ALLOWED_CHARS = re.compile(r"^[0-9\- ]+$")


def normalize_cuit(value: str | None) -> str:
    """Strip every non-digit character. ``None`` becomes ``""``."""
    if value is None:
        return ""
    return _NON_DIGITS.sub("", str(value))


def compute_check_digit(digits: str) -> int:
    """Compute the verifier digit for the first 10 digits of a CUIT.

    ``11 - (sum % 11)``, where 11 maps to 0 and 10 maps to 9.
    """
    total = sum(int(d) * w for d, w in zip(digits[:10], CHECK_DIGIT_WEIGHTS))
    calculated = 11 - (total % 11)
    if calculated == 11:
        return 0
    if calculated == 10:
        return 9
    return calculated


def _join(digits: str) -> str:
    return f"{digits[:2]}-{digits[2:10]}-{digits[10]}"


def validate_cuit(value: str | None) -> CUITValidationResult:
    """Validate a user-entered CUIT/CUIL.

    Rules run in order and the first failure is reported: empty input,
    characters other than digits/dashes/spaces, digit count, type code and
    finally the check digit.

    Args:
        value (str | None): Raw input, e.g. ``"20-12345678-6"`` or ``"20123456786"``.

    Returns:
        CUITValidationResult: ``formatted`` and ``details`` are present on success.
    """
    if value is None:
        return CUITValidationResult.failure(ERROR_EMPTY)
    trimmed = str(value).strip()
    if not trimmed:
        return CUITValidationResult.failure(ERROR_EMPTY)

    if not _ALLOWED_CHARS.match(trimmed):
        return CUITValidationResult.failure(ERROR_CHARACTERS)

    digits = normalize_cuit(trimmed)
    if len(digits) != CUIT_LENGTH:
        return CUITValidationResult.failure(ERROR_LENGTH)

    type_code = digits[:2]
    if type_code not in VALID_TYPE_CODES:
        return CUITValidationResult.failure(f"Tipo de CUIT inválido: {type_code}")

    declared = int(digits[10])
    calculated = compute_check_digit(digits)
    subject = classify_type_code(type_code)
    details = CUITDetails(
        type=subject.label if subject else "",
        check_digit=declared,
        calculated_check_digit=calculated,
        subject=subject,
    )
    if declared != calculated:
        return CUITValidationResult.failure(
            f"Dígito verificador incorrecto (esperado {calculated}, recibido {declared})",
            details,
        )

    return CUITValidationResult(valid=True, formatted=_join(digits), details=details)


def format_cuit(value: str | None) -> str:
    """Return the canonical ``TT-BBBBBBBB-C`` form, or the input unchanged if invalid."""
    result = validate_cuit(value)
    if result.valid and result.formatted:
        return result.formatted
    return "" if value is None else str(value)


def format_cuit_as_typed(value: str | None) -> str:
    """Progressively insert separators while the user is typing.

    Keeps digits only, adds a dash after the type code once a third digit
    arrives and another before the check digit; digits past 11 are dropped.
    """
    digits = normalize_cuit(value)[:CUIT_LENGTH]
    if len(digits) <= 2:
        return digits
    if len(digits) <= 10:
        return f"{digits[:2]}-{digits[2:]}"
    return _join(digits)


def _type_code_of(value: str | None) -> str | None:
    digits = normalize_cuit(value)
    if len(digits) != CUIT_LENGTH:
        return None
    return digits[:2]


def is_company_cuit(value: str | None) -> bool:
    """Structural check only; the check digit is not verified."""
    return _type_code_of(value) in COMPANY_TYPE_CODES


def is_individual_cuit(value: str | None) -> bool:
    """Structural check only; the check digit is not verified."""
    return _type_code_of(value) in INDIVIDUAL_TYPE_CODES


def generate_cuit_from_dni(dni: str | int, gender: str | Gender = Gender.MASCULINO) -> str:
    """Build a valid CUIL from a DNI, for test and demo data.

    Args:
        dni (str | int): National ID. Shorter values are left-padded with zeros;
            longer values keep their rightmost 8 digits.
        gender (str | Gender, optional): ``"M"`` (type 20) or ``"F"`` (type 27).
            Defaults to ``"M"``.

    Returns:
        str: CUIT in ``TT-BBBBBBBB-C`` format.

    Raises:
        ValueError: If ``gender`` is not ``M`` or ``F``.
    """
    if not isinstance(gender, Gender):
        gender = Gender(str(gender).strip().upper())
    body = normalize_cuit(str(dni)).zfill(DNI_LENGTH)[-DNI_LENGTH:]
    ten = GENDER_TYPE_CODES[gender] + body
    return _join(f"{ten}{compute_check_digit(ten)}")


def cuit_lookup_values(value: str | None) -> tuple[str, ...]:
    """Variants to search when checking for an already stored CUIT.

    Returns the formatted form, the bare digits and the raw input, without
    duplicates and in that order. Invalid input yields only the raw value.
    """
    raw = "" if value is None else str(value)
    result = validate_cuit(value)
    if not result.valid or not result.formatted:
        return (raw,) if raw.strip() else ()
    candidates = (result.formatted, normalize_cuit(result.formatted), raw)
    return tuple(dict.fromkeys(candidates))
