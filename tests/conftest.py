"""Pytest fixtures for the Zarinpal payment session tests."""

import pytest

from src.integrations.clients.mocks.zarinpal import MockZarinpalInvoker
from src.integrations.contracts.payments import PaymentStatus, ZarinpalServiceConfig
from src.integrations.zarinpal.session import DefaultZarinpalPaymentSession

MERCHANT_ID = "00000000-0000-0000-0000-000000000000"
CALLBACK_URL = "https://my.domain.com/payment/callback"
AUTHORITY = "00000000000000000000987"
REF_ID = "999999999999"


@pytest.fixture
def invoker():
    return MockZarinpalInvoker(fixed_response={"Status": "100", "Authority": AUTHORITY, "RefID": REF_ID})


@pytest.fixture
def make_session(invoker):
    """Factory for a CREATED session with amount and description filled in."""

    def _make(config=None, session_invoker=None, amount=1000):
        session = DefaultZarinpalPaymentSession(
            config or ZarinpalServiceConfig(MERCHANT_ID),
            session_invoker or invoker,
        )
        session.payment.amount = amount
        session.payment.description = "Test payment"
        return session

    return _make


@pytest.fixture
def make_registered_session(make_session):
    """Factory for a session already REGISTERED under the test authority."""

    def _make(config=None, session_invoker=None):
        session = make_session(config, session_invoker)
        session.payment.status = PaymentStatus.REGISTERED
        session.payment.authority = AUTHORITY
        return session

    return _make


@pytest.fixture
def session(make_session):
    return make_session()


@pytest.fixture
def registered_session(make_registered_session):
    return make_registered_session()


@pytest.fixture
def callback_request():
    return {"url": f"{CALLBACK_URL}?Status=OK&Authority={AUTHORITY}"}
