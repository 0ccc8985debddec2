"""Error handling helpers for the payment flow."""
from typing import Any, Dict
import logging

import httpx

from src.integrations.policy.response_wrappers import IntegrationResponseError
from src.integrations.zarinpal.errors import GatewayRejection, MalformedCallback, PaymentStateError

logger = logging.getLogger(__name__)


class ErrorHandler:
    def handle_exception(self, exc: Exception, context: Dict[str, Any] = None) -> Dict[str, Any]:
        metadata: Dict[str, Any] = {"error": str(exc), "context": context or {}}

        if isinstance(exc, GatewayRejection):
            logger.warning("Payment gateway rejected request: code=%s %s", exc.code, exc.message)
            metadata["gateway_code"] = exc.code
            return self._payload(f"The payment gateway rejected the request: {exc.message}", True, metadata)

        if isinstance(exc, MalformedCallback):
            logger.warning("Malformed payment callback: %s", exc)
            metadata["callback_url"] = exc.url
            return self._payload("The payment callback could not be validated.", False, metadata)

        if isinstance(exc, (httpx.RequestError, httpx.HTTPStatusError)):
            logger.error("Payment gateway unreachable: %s", exc, exc_info=True)
            return self._payload("The payment gateway could not be reached. Please try again.", True, metadata)

        if isinstance(exc, (IntegrationResponseError, PaymentStateError)):
            logger.error("Unexpected payment gateway response: %s", exc, exc_info=True)
            return self._payload("The payment gateway returned an unexpected response.", False, metadata)

        logger.error("Unhandled exception in payment flow: %s", exc, exc_info=True)
        return self._payload(
            "An internal error occurred while processing your payment. Please try again later.",
            False,
            metadata,
        )

    @staticmethod
    def _payload(message: str, retryable: bool, metadata: Dict[str, Any]) -> Dict[str, Any]:
        return {
            "message": message,
            "retryable": retryable,
            "fallback": True,
            "metadata": metadata,
        }
