"""Exceptions raised by the Zarinpal payment session."""

from typing import Any, Dict, Optional


class ZarinpalError(Exception):
    """Base class for payment session failures."""


class GatewayRejection(ZarinpalError):
    """The gateway answered with a non-success ``Status`` code."""

    def __init__(self, code: int, message: str, *, payload: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(f"Gateway rejected request (code {code}): {message}")
        self.code = code
        self.message = message
        self.payload = payload or {}


class MalformedCallback(ZarinpalError):
    """The callback URL is missing ``Status``/``Authority`` or carries a foreign authority."""

    def __init__(self, message: str, *, url: Optional[str] = None) -> None:
        super().__init__(message)
        self.url = url


class PaymentStateError(ZarinpalError):
    """A status change would move the payment backwards."""
