"""
Integrations layer.
This package contains all code used to communicate with the Zarinpal payment gateway:
- contracts: payment, configuration and result shapes plus the transport interface
- clients: the real httpx invoker and an in-memory mock gateway
- policy: normalization of raw gateway responses
- zarinpal: the payment session state machine

Key rule:
- The payment session MUST NOT perform HTTP calls itself.
- It calls whichever HttpServiceInvoker it was constructed with.
"""

from .contracts.interfaces import HttpServiceInvoker
from .contracts.payments import (
    Payment,
    PaymentStatus,
    RegistrationResult,
    VerificationResult,
    WageCalculator,
    ZarinpalServiceConfig,
    validate_payment,
)
from .zarinpal import (
    DefaultZarinpalPaymentSession,
    GatewayRejection,
    MalformedCallback,
    PaymentStateError,
    ZarinpalError,
)

__all__ = [
    # interfaces
    "HttpServiceInvoker",
    # payments
    "Payment", "PaymentStatus", "RegistrationResult", "VerificationResult",
    "WageCalculator", "ZarinpalServiceConfig", "validate_payment",
    # session
    "DefaultZarinpalPaymentSession",
    "GatewayRejection", "MalformedCallback", "PaymentStateError", "ZarinpalError",
]
