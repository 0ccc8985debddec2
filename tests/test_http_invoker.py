import json

import httpx
import pytest

from src.integrations.clients.real_http.invoker import HttpxServiceInvoker

URL = "https://www.zarinpal.com/pg/rest/WebGate/PaymentRequest.json"


@pytest.mark.asyncio
async def test_invoke_posts_json_and_returns_parsed_body():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"Status": 100, "Authority": "A1"})

    invoker = HttpxServiceInvoker(transport=httpx.MockTransport(handler))
    data = await invoker.invoke(URL, "post", {"MerchantID": "m", "Amount": 1000})

    assert data == {"Status": 100, "Authority": "A1"}
    assert seen[0].method == "POST"
    assert str(seen[0].url) == URL
    assert json.loads(seen[0].content) == {"MerchantID": "m", "Amount": 1000}


@pytest.mark.asyncio
async def test_invoke_returns_empty_dict_for_empty_body():
    invoker = HttpxServiceInvoker(transport=httpx.MockTransport(lambda request: httpx.Response(200)))

    assert await invoker.invoke(URL, "POST", {}) == {}


@pytest.mark.asyncio
async def test_invoke_reraises_http_errors():
    invoker = HttpxServiceInvoker(transport=httpx.MockTransport(lambda request: httpx.Response(503, text="down")))

    with pytest.raises(httpx.HTTPStatusError):
        await invoker.invoke(URL, "POST", {})


@pytest.mark.asyncio
async def test_invoke_reraises_request_errors():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectTimeout("timed out", request=request)

    invoker = HttpxServiceInvoker(transport=httpx.MockTransport(handler))

    with pytest.raises(httpx.ConnectTimeout):
        await invoker.invoke(URL, "POST", {})
