INVALID_CUIT_TAG = "INVALID_CUIT"


class ErpCoreError(Exception):
    """Base class for domain errors."""


class InvalidCUITError(ErpCoreError, ValueError):
    """Raised by callers that need a hard failure on an invalid CUIT.

    The message is ``INVALID_CUIT:<reason>`` so HTTP handlers can branch on the
    tag and still show the human-readable reason.
    """

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"{INVALID_CUIT_TAG}:{reason}")
