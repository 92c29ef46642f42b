from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Gender(str, Enum):
    MASCULINO = "M"
    FEMENINO = "F"


@dataclass(frozen=True)
class Individual:
    """Persona física (CUIL). ``gender`` is only known for codes 20 and 27."""

    gender: Gender | None = None

    @property
    def label(self) -> str:
        if self.gender is Gender.MASCULINO:
            return "CUIL Masculino"
        if self.gender is Gender.FEMENINO:
            return "CUIL Femenino"
        return "CUIL"


@dataclass(frozen=True)
class Company:
    """Persona jurídica (sociedad)."""

    @property
    def label(self) -> str:
        return "Sociedad"


CUITSubject = Individual | Company

INDIVIDUAL_TYPE_CODES: frozenset[str] = frozenset({"20", "23", "24", "25", "26", "27"})
COMPANY_TYPE_CODES: frozenset[str] = frozenset({"30", "33", "34"})
VALID_TYPE_CODES: frozenset[str] = INDIVIDUAL_TYPE_CODES | COMPANY_TYPE_CODES

GENDER_TYPE_CODES: dict[Gender, str] = {
    Gender.MASCULINO: "20",
    Gender.FEMENINO: "27",
}


def classify_type_code(type_code: str) -> CUITSubject | None:
    """Map a 2-digit type code to its subject, or ``None`` if unknown."""
    if type_code in COMPANY_TYPE_CODES:
        return Company()
    if type_code not in INDIVIDUAL_TYPE_CODES:
        return None
    for gender, code in GENDER_TYPE_CODES.items():
        if code == type_code:
            return Individual(gender)
    return Individual()
