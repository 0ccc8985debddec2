"""
Payment contracts.

Defines the data shapes shared by the Zarinpal payment session, the
transport clients and their callers:
- the payment being registered/verified and its lifecycle status
- the service configuration (merchant id + per-call hooks)
- the results returned from register() and verify()

Both clients/mocks/zarinpal.py and clients/real_http/invoker.py feed
responses that are mapped onto these models.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Optional


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class PaymentStatus(str, Enum):
    CREATED = "CREATED"
    REGISTERED = "REGISTERED"
    VERIFIED = "VERIFIED"


_STATUS_ORDER = {
    PaymentStatus.CREATED: 0,
    PaymentStatus.REGISTERED: 1,
    PaymentStatus.VERIFIED: 2,
}


def status_rank(status: PaymentStatus) -> int:
    """Position of ``status`` in the lifecycle; higher never moves back."""
    return _STATUS_ORDER[status]


# ---------------------------------------------------------------------------
# Payment
# ---------------------------------------------------------------------------

@dataclass
class Payment:
    amount: int = 0                      # smallest currency unit (Rial/Toman as agreed with gateway)
    description: str = ""
    email: Optional[str] = None
    mobile: Optional[str] = None
    status: PaymentStatus = PaymentStatus.CREATED
    authority: Optional[str] = None
    ref_id: Optional[str] = None
    callback_url: Optional[str] = None
    extra_detail: Dict[str, Any] = field(default_factory=dict)


# Maps beneficiary id -> share description, e.g.
# {"zp.1.1": {"Amount": 120, "Description": "commission"}}
WageSplit = Dict[str, Dict[str, Any]]
WageCalculator = Callable[[Payment], WageSplit]


@dataclass(frozen=True)
class ZarinpalServiceConfig:
    merchant_id: str
    wage_calculator: Optional[WageCalculator] = None
    expire_in: Optional[int] = None      # seconds

    def __post_init__(self) -> None:
        if not self.merchant_id:
            raise ValueError("merchant_id is required")
        if self.expire_in is not None and self.expire_in <= 0:
            raise ValueError(f"expire_in must be a positive number of seconds; got {self.expire_in}")


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------

@dataclass
class RegistrationResult:
    authority: str
    gateway_url: str
    status_code: int


@dataclass
class VerificationResult:
    success: bool
    status: str                          # callback Status, "OK" when the payer finished checkout
    authority: str
    amount: int
    ref_id: Optional[str] = None
    status_code: Optional[int] = None
    extra_detail: Dict[str, Any] = field(default_factory=dict)


# ---------------------------------------------------------------------------
# Validation helpers
# ---------------------------------------------------------------------------

def validate_payment(payment: Payment) -> None:
    """Raise ValueError when the payment cannot be sent to the gateway."""
    if isinstance(payment.amount, bool) or not isinstance(payment.amount, int):
        raise ValueError(f"amount must be an integer; got {payment.amount!r}")
    if payment.amount <= 0:
        raise ValueError(f"amount must be greater than zero; got {payment.amount}")
