"""
Zarinpal payment session.

One session drives one transaction through CREATED -> REGISTERED -> VERIFIED:
- register(callback_url) asks the gateway for an Authority
- gateway() builds the hosted checkout URL the payer is redirected to
- verify(callback_request, extra_data) confirms the payment on return

Calling register()/verify() in the wrong state is a no-op that returns None
and makes no network call. Callers rely on this to make both operations safe
to repeat; it is part of the contract, not an accident.

Failures (GatewayRejection, MalformedCallback, transport errors, hook errors)
never change the session state, so the same call can simply be retried.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Mapping, Optional

from src.integrations.contracts.interfaces import HttpServiceInvoker
from src.integrations.contracts.payments import (
    Payment,
    PaymentStatus,
    RegistrationResult,
    VerificationResult,
    ZarinpalServiceConfig,
    status_rank,
    validate_payment,
)
from src.integrations.policy.response_wrappers import (
    normalize_registration_response,
    normalize_verification_response,
)
from src.integrations.zarinpal.callback import parse_callback
from src.integrations.zarinpal.endpoints import Operation, endpoint_for, is_extended, start_pay_url
from src.integrations.zarinpal.errors import GatewayRejection, MalformedCallback, PaymentStateError

logger = logging.getLogger(__name__)


class DefaultZarinpalPaymentSession:
    def __init__(self, config: ZarinpalServiceConfig, invoker: HttpServiceInvoker) -> None:
        self.config = config
        self.invoker = invoker
        self._merchant_id = config.merchant_id
        self.payment = Payment()
        self._in_flight = False

    @property
    def merchant_id(self) -> str:
        return self._merchant_id

    @property
    def in_flight(self) -> bool:
        return self._in_flight

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    async def register(self, callback_url: str) -> Optional[RegistrationResult]:
        if self.payment.status != PaymentStatus.CREATED:
            logger.debug("register() skipped: payment is %s", self.payment.status.value)
            return None
        if self._in_flight:
            logger.debug("register() skipped: another call is in flight")
            return None

        validate_payment(self.payment)

        self._in_flight = True
        try:
            url = endpoint_for(Operation.REGISTER, self.config)
            payload = self._registration_payload(callback_url)
            logger.info("Registering payment amount=%s at %s", self.payment.amount, url)
            logger.debug("Registration payload: %s", payload)

            raw = await self.invoker.invoke(url, "POST", payload)
            response = normalize_registration_response(raw)

            if not response.is_success:
                logger.warning("Registration rejected: status=%s message=%s", response.status_code, response.message)
                raise GatewayRejection(response.status_code, response.message, payload=raw)

            self._advance(PaymentStatus.REGISTERED)
            self.payment.authority = response.authority
            self.payment.callback_url = callback_url
        finally:
            self._in_flight = False

        logger.info("Payment registered authority=%s", self.payment.authority)
        return RegistrationResult(
            authority=self.payment.authority,
            gateway_url=self.gateway(),
            status_code=response.status_code,
        )

    async def verify(
        self,
        callback_request: Any,
        extra_data: Optional[Mapping[str, Any]] = None,
    ) -> Optional[VerificationResult]:
        if self.payment.status != PaymentStatus.REGISTERED:
            logger.debug("verify() skipped: payment is %s", self.payment.status.value)
            return None
        if self._in_flight:
            logger.debug("verify() skipped: another call is in flight")
            return None

        callback = parse_callback(callback_request)
        if callback.authority != self.payment.authority:
            logger.warning(
                "Callback authority %s does not match session authority %s",
                callback.authority, self.payment.authority,
            )
            raise MalformedCallback("Callback Authority does not match the registered payment.")

        if not callback.is_ok:
            logger.info("Payer did not complete checkout (Status=%s); not verifying", callback.status)
            return VerificationResult(
                success=False,
                status=callback.status,
                authority=callback.authority,
                amount=self.payment.amount,
            )

        self._in_flight = True
        try:
            url = endpoint_for(Operation.VERIFY, self.config)
            payload = self._verification_payload(extra_data)
            logger.info("Verifying payment authority=%s at %s", self.payment.authority, url)
            logger.debug("Verification payload: %s", payload)

            raw = await self.invoker.invoke(url, "POST", payload)
            response = normalize_verification_response(raw)

            if not response.is_success:
                logger.warning("Verification rejected: status=%s message=%s", response.status_code, response.message)
                raise GatewayRejection(response.status_code, response.message, payload=raw)

            self._advance(PaymentStatus.VERIFIED)
            self.payment.ref_id = response.ref_id
            self.payment.extra_detail = dict(response.extra_detail)
        finally:
            self._in_flight = False

        logger.info("Payment verified ref_id=%s", self.payment.ref_id)
        return VerificationResult(
            success=True,
            status=callback.status,
            authority=self.payment.authority,
            amount=self.payment.amount,
            ref_id=self.payment.ref_id,
            status_code=response.status_code,
            extra_detail=self.payment.extra_detail,
        )

    def gateway(self) -> str:
        """Hosted checkout URL; the authority segment is empty until registration."""
        return start_pay_url(self.payment.authority or "")

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _advance(self, status: PaymentStatus) -> None:
        if status_rank(status) <= status_rank(self.payment.status):
            raise PaymentStateError(f"Cannot move payment from {self.payment.status.value} to {status.value}")
        self.payment.status = status

    def _registration_payload(self, callback_url: str) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "MerchantID": self._merchant_id,
            "Amount": self.payment.amount,
            "Description": self.payment.description,
            "CallbackURL": callback_url,
        }
        if self.payment.email:
            payload["Email"] = self.payment.email
        if self.payment.mobile:
            payload["Mobile"] = self.payment.mobile

        if is_extended(self.config):
            additional: Dict[str, Any] = {}
            if self.config.wage_calculator is not None:
                additional["Wages"] = self.config.wage_calculator(self.payment)
            if self.config.expire_in is not None:
                additional["expireIn"] = self.config.expire_in
            payload["AdditionalData"] = json.dumps(additional)
        return payload

    def _verification_payload(self, extra_data: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "MerchantID": self._merchant_id,
            "Amount": self.payment.amount,
            "Authority": self.payment.authority,
        }

        if is_extended(self.config):
            additional: Dict[str, Any] = {}
            if self.config.wage_calculator is not None:
                additional["Wages"] = self.config.wage_calculator(self.payment)
            additional.update(extra_data or {})
            if additional:
                payload["AdditionalData"] = json.dumps(additional)
        elif extra_data:
            logger.debug("extra_data ignored for the standard verification endpoint")
        return payload
