"""
Zarinpal gateway integration.

Exposes the payment session state machine together with its endpoint table,
callback parsing and exceptions.
"""

from .endpoints import ENDPOINTS, START_PAY_URL, Operation, Variant, endpoint_for, is_extended
from .errors import GatewayRejection, MalformedCallback, PaymentStateError, ZarinpalError
from .session import DefaultZarinpalPaymentSession

__all__ = [
    "DefaultZarinpalPaymentSession",
    "ENDPOINTS", "START_PAY_URL", "Operation", "Variant", "endpoint_for", "is_extended",
    "GatewayRejection", "MalformedCallback", "PaymentStateError", "ZarinpalError",
]
