"""
Typed failures raised by services and dependencies.

Every failure renders as the same envelope, ``{"ok": false, "<kind>": true}``,
so callers can branch on a flag without ever seeing store error text.
"""

from typing import Any, Dict


class GatewayError(Exception):
    kind: str = "error"
    status_code: int = 500

    def __init__(self, message: str = ""):
        super().__init__(message or self.kind)

    def to_envelope(self) -> Dict[str, Any]:
        return {"ok": False, self.kind: True}


class ConfigurationError(GatewayError):
    """Store settings are absent or unusable."""
    kind = "missing_env"
    status_code = 500


class BadRequestError(GatewayError):
    kind = "bad_request"
    status_code = 400


class NotFoundError(GatewayError):
    kind = "not_found"
    status_code = 404


class StoreError(GatewayError):
    """The store rejected or failed an operation."""
    kind = "error"
    status_code = 500


class PartialFailureError(StoreError):
    """A multi-step operation failed after an earlier step was already applied."""

    def to_envelope(self) -> Dict[str, Any]:
        envelope = super().to_envelope()
        envelope["partial_failure"] = True
        return envelope
