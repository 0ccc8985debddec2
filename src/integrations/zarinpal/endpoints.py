"""
Zarinpal endpoint table.

Every URL the session talks to lives here, keyed by operation and variant.
The extended ("~WithExtra") variant accepts AdditionalData (wage split,
custom expiration) and is chosen purely from the service configuration.
"""

from enum import Enum
from typing import Dict, Tuple

from src.integrations.contracts.payments import ZarinpalServiceConfig

ZARINPAL_BASE_URL = "https://www.zarinpal.com/pg"
START_PAY_URL = f"{ZARINPAL_BASE_URL}/StartPay/"
WEBGATE_URL = f"{ZARINPAL_BASE_URL}/rest/WebGate"


class Operation(str, Enum):
    REGISTER = "register"
    VERIFY = "verify"


class Variant(str, Enum):
    STANDARD = "standard"
    EXTENDED = "extended"


ENDPOINTS: Dict[Tuple[Operation, Variant], str] = {
    (Operation.REGISTER, Variant.STANDARD): f"{WEBGATE_URL}/PaymentRequest.json",
    (Operation.REGISTER, Variant.EXTENDED): f"{WEBGATE_URL}/PaymentRequestWithExtra.json",
    (Operation.VERIFY, Variant.STANDARD): f"{WEBGATE_URL}/PaymentVerification.json",
    (Operation.VERIFY, Variant.EXTENDED): f"{WEBGATE_URL}/PaymentVerificationWithExtra.json",
}


def is_extended(config: ZarinpalServiceConfig) -> bool:
    return config.wage_calculator is not None or config.expire_in is not None


def select_variant(config: ZarinpalServiceConfig) -> Variant:
    return Variant.EXTENDED if is_extended(config) else Variant.STANDARD


def endpoint_for(operation: Operation, config: ZarinpalServiceConfig) -> str:
    return ENDPOINTS[(operation, select_variant(config))]


def start_pay_url(authority: str) -> str:
    return f"{START_PAY_URL}{authority}"
