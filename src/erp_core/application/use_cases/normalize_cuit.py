from __future__ import annotations

import logging

from erp_core.domain.errors import InvalidCUITError
from erp_core.domain.services.cuit_validator import validate_cuit

logger = logging.getLogger(__name__)


class NormalizeCUITUseCase:
    """Turns user input into the stored ``TT-BBBBBBBB-C`` form before a write.

    Suppliers require a CUIT (``required=True``); clients may leave it blank,
    in which case ``None`` is returned.
    """

    def __init__(self, *, required: bool = True) -> None:
        self.required = required

    def execute(self, raw: str | None) -> str | None:
        if not self.required and (raw is None or not str(raw).strip()):
            return None
        result = validate_cuit(raw)
        if not result.valid or result.formatted is None:
            logger.info("rejected CUIT: %s", result.error)
            raise InvalidCUITError(result.error or "CUIT inválido")
        return result.formatted
