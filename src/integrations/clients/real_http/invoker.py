"""
Real HTTP service invoker.

Purpose:
- Performs the actual network call for the payment session
- Sends the JSON body and hands back the parsed JSON response

Implementation notes:
- Uses httpx for async requests
- HTTP-level failures are logged and re-raised; the session never sees headers
  or HTTP status codes, only the gateway's own JSON body
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from src.integrations.contracts.interfaces import HttpServiceInvoker

logger = logging.getLogger(__name__)


class HttpxServiceInvoker(HttpServiceInvoker):
    def __init__(
        self,
        timeout_seconds: float = 20.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.timeout_seconds = timeout_seconds
        self.transport = transport

    async def invoke(self, url: str, method: str, body: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        headers = {"Content-Type": "application/json", "Accept": "application/json"}
        try:
            logger.info(f"{method.upper()} {url}")
            async with httpx.AsyncClient(timeout=self.timeout_seconds, transport=self.transport) as client:
                response = await client.request(method.upper(), url, json=body, headers=headers)
                response.raise_for_status()
                data = response.json() if response.content else {}
                logger.info(f"Received gateway response: status={response.status_code}")
                return data
        except httpx.HTTPStatusError as e:
            logger.error(f"HTTP error from payment gateway: {e.response.status_code} {e.response.text}")
            raise
        except httpx.RequestError as e:
            logger.error(f"Request error connecting to payment gateway: {e}")
            raise
