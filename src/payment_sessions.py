"""
Payment session wiring.

The selection of mock vs real invokers happens here and nowhere else.
INTEGRATIONS_MODE=mock|test forces the in-memory gateway, real|live forces
httpx; when unset, a merchant id from the environment means real.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from src.integrations.clients.mocks.zarinpal import MockZarinpalInvoker
from src.integrations.clients.real_http.invoker import HttpxServiceInvoker
from src.integrations.contracts.interfaces import HttpServiceInvoker
from src.integrations.contracts.payments import WageCalculator
from src.integrations.zarinpal.session import DefaultZarinpalPaymentSession
from src.utils.config_loader import ZarinpalSettings, build_service_config

logger = logging.getLogger(__name__)


def _should_use_real_integrations() -> bool:
    mode = os.getenv("INTEGRATIONS_MODE", "").strip().lower()
    if mode in {"real", "live"}:
        return True
    if mode in {"mock", "test"}:
        return False
    return bool(os.getenv("ZARINPAL_MERCHANT_ID"))


def select_invoker(settings: ZarinpalSettings) -> HttpServiceInvoker:
    if _should_use_real_integrations():
        return HttpxServiceInvoker(timeout_seconds=settings.timeout_seconds)
    logger.info("Using mock Zarinpal invoker")
    return MockZarinpalInvoker()


def create_payment_session(
    settings: ZarinpalSettings,
    amount: int,
    description: Optional[str] = None,
    *,
    email: Optional[str] = None,
    mobile: Optional[str] = None,
    invoker: Optional[HttpServiceInvoker] = None,
    wage_calculator: Optional[WageCalculator] = None,
) -> DefaultZarinpalPaymentSession:
    session = DefaultZarinpalPaymentSession(
        build_service_config(settings, wage_calculator=wage_calculator),
        invoker or select_invoker(settings),
    )
    session.payment.amount = amount
    session.payment.description = description if description is not None else settings.default_description
    session.payment.email = email
    session.payment.mobile = mobile
    return session
