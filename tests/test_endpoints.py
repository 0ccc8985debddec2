import pytest

from src.integrations.contracts.payments import ZarinpalServiceConfig
from src.integrations.zarinpal.endpoints import (
    ENDPOINTS,
    Operation,
    Variant,
    endpoint_for,
    is_extended,
    select_variant,
    start_pay_url,
)

MERCHANT_ID = "00000000-0000-0000-0000-000000000000"


def _wages(payment):
    return {}


@pytest.mark.parametrize(
    "config,extended",
    [
        (ZarinpalServiceConfig(MERCHANT_ID), False),
        (ZarinpalServiceConfig(MERCHANT_ID, wage_calculator=_wages), True),
        (ZarinpalServiceConfig(MERCHANT_ID, expire_in=1000), True),
        (ZarinpalServiceConfig(MERCHANT_ID, wage_calculator=_wages, expire_in=1000), True),
    ],
)
def test_extended_iff_wage_calculator_or_expiration(config, extended):
    assert is_extended(config) is extended
    assert select_variant(config) == (Variant.EXTENDED if extended else Variant.STANDARD)

    register_url = endpoint_for(Operation.REGISTER, config)
    verify_url = endpoint_for(Operation.VERIFY, config)
    assert register_url.endswith("PaymentRequestWithExtra.json" if extended else "PaymentRequest.json")
    assert verify_url.endswith("PaymentVerificationWithExtra.json" if extended else "PaymentVerification.json")


def test_endpoint_table_covers_every_operation_and_variant():
    assert set(ENDPOINTS) == {(op, variant) for op in Operation for variant in Variant}
    assert all(url.startswith("https://www.zarinpal.com/pg/rest/WebGate/") for url in ENDPOINTS.values())


def test_start_pay_url():
    assert start_pay_url("A123") == "https://www.zarinpal.com/pg/StartPay/A123"


def test_config_rejects_non_positive_expiration():
    with pytest.raises(ValueError):
        ZarinpalServiceConfig(MERCHANT_ID, expire_in=0)


def test_config_requires_merchant_id():
    with pytest.raises(ValueError):
        ZarinpalServiceConfig("")
