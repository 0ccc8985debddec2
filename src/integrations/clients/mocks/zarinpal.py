"""
Zarinpal gateway: MOCK invoker.

⚠️  This is a mock implementation for development and testing.
    It never touches the network. Registrations and verifications are kept
    in memory and answered the way the Zarinpal WebGate REST API answers,
    including the amount-mismatch (-33) and already-verified (101) cases.
"""

import logging
import uuid
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from src.integrations.contracts.interfaces import HttpServiceInvoker

logger = logging.getLogger(__name__)


@dataclass
class RecordedCall:
    url: str
    method: str
    body: Optional[Dict[str, Any]] = None


@dataclass
class _MockTransaction:
    amount: int
    verified: bool = False
    ref_id: Optional[str] = None
    additional_data: Optional[str] = None


class MockZarinpalInvoker(HttpServiceInvoker):
    """
    Mock Zarinpal WebGate.

    Parameters
    ----------
    fixed_response : dict, optional
        When set, every call returns a copy of this body and no bookkeeping
        is done.
    registration_status : int
        Status returned for registrations. Default 100 (success).
    verification_status : int
        Status returned for verifications of a known authority. Default 100.
    """

    def __init__(
        self,
        fixed_response: Optional[Dict[str, Any]] = None,
        registration_status: int = 100,
        verification_status: int = 100,
    ):
        self._fixed_response = fixed_response
        self._registration_status = registration_status
        self._verification_status = verification_status

        # In-memory stores (reset on restart)
        self.calls: List[RecordedCall] = []
        self._transactions: Dict[str, _MockTransaction] = {}

        logger.info("[ZARINPAL MOCK] Invoker initialised")

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _new_authority(self) -> str:
        return f"A{uuid.uuid4().int % 10**35:035d}"

    def _new_ref_id(self) -> str:
        return str(uuid.uuid4().int % 10**12).zfill(12)

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    async def invoke(self, url: str, method: str, body: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        self.calls.append(RecordedCall(url=url, method=method, body=dict(body or {})))
        logger.info("[ZARINPAL MOCK] %s %s", method, url)

        if self._fixed_response is not None:
            return dict(self._fixed_response)

        body = body or {}
        if "/PaymentRequest" in url:
            return self._register(body)
        if "/PaymentVerification" in url:
            return self._verify(body)
        return {"Status": -40}

    def _register(self, body: Dict[str, Any]) -> Dict[str, Any]:
        if self._registration_status != 100:
            return {"Status": self._registration_status}
        if not body.get("MerchantID") or not body.get("CallbackURL"):
            return {"Status": -1}

        authority = self._new_authority()
        self._transactions[authority] = _MockTransaction(
            amount=body.get("Amount", 0),
            additional_data=body.get("AdditionalData"),
        )
        logger.info("[ZARINPAL MOCK] Registered authority=%s amount=%s", authority, body.get("Amount"))
        return {"Status": 100, "Authority": authority}

    def _verify(self, body: Dict[str, Any]) -> Dict[str, Any]:
        transaction = self._transactions.get(body.get("Authority", ""))
        if transaction is None:
            return {"Status": -11}
        if transaction.amount != body.get("Amount"):
            return {"Status": -33}
        if transaction.verified:
            return {"Status": 101, "RefID": transaction.ref_id}
        if self._verification_status != 100:
            return {"Status": self._verification_status}

        transaction.verified = True
        transaction.ref_id = self._new_ref_id()
        logger.info("[ZARINPAL MOCK] Verified authority=%s ref_id=%s", body.get("Authority"), transaction.ref_id)

        response: Dict[str, Any] = {"Status": 100, "RefID": transaction.ref_id}
        if body.get("AdditionalData"):
            response["ExtraDetail"] = {"Transaction": {"CardPanMask": "603799******0000"}}
        return response
