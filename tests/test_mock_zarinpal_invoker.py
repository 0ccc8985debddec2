import pytest

from src.integrations.clients.mocks.zarinpal import MockZarinpalInvoker

REQUEST_URL = "https://www.zarinpal.com/pg/rest/WebGate/PaymentRequest.json"
VERIFY_URL = "https://www.zarinpal.com/pg/rest/WebGate/PaymentVerification.json"


async def _register(gateway, amount=1000):
    return await gateway.invoke(
        REQUEST_URL,
        "POST",
        {"MerchantID": "m", "Amount": amount, "Description": "d", "CallbackURL": "https://cb"},
    )


@pytest.mark.asyncio
async def test_register_then_verify_issues_authority_and_ref_id():
    gateway = MockZarinpalInvoker()

    registered = await _register(gateway)
    assert registered["Status"] == 100
    assert len(registered["Authority"]) == 36

    verified = await gateway.invoke(VERIFY_URL, "POST", {"MerchantID": "m", "Amount": 1000, "Authority": registered["Authority"]})
    assert verified["Status"] == 100
    assert verified["RefID"]

    again = await gateway.invoke(VERIFY_URL, "POST", {"MerchantID": "m", "Amount": 1000, "Authority": registered["Authority"]})
    assert again == {"Status": 101, "RefID": verified["RefID"]}
    assert len(gateway.calls) == 3


@pytest.mark.asyncio
async def test_amount_mismatch_and_unknown_authority():
    gateway = MockZarinpalInvoker()
    registered = await _register(gateway)

    mismatch = await gateway.invoke(VERIFY_URL, "POST", {"MerchantID": "m", "Amount": 5, "Authority": registered["Authority"]})
    unknown = await gateway.invoke(VERIFY_URL, "POST", {"MerchantID": "m", "Amount": 1000, "Authority": "nope"})

    assert mismatch == {"Status": -33}
    assert unknown == {"Status": -11}


@pytest.mark.asyncio
async def test_incomplete_registration_and_configured_failures():
    assert await MockZarinpalInvoker().invoke(REQUEST_URL, "POST", {"Amount": 1000}) == {"Status": -1}
    assert await _register(MockZarinpalInvoker(registration_status=-2)) == {"Status": -2}

    gateway = MockZarinpalInvoker(verification_status=-22)
    registered = await _register(gateway)
    failed = await gateway.invoke(VERIFY_URL, "POST", {"MerchantID": "m", "Amount": 1000, "Authority": registered["Authority"]})
    assert failed == {"Status": -22}


@pytest.mark.asyncio
async def test_fixed_response_is_returned_for_every_call():
    gateway = MockZarinpalInvoker(fixed_response={"Status": "100", "Authority": "A1"})

    first = await gateway.invoke(REQUEST_URL, "POST", {})
    first["Status"] = "mutated"
    second = await gateway.invoke(VERIFY_URL, "POST", {})

    assert second == {"Status": "100", "Authority": "A1"}
