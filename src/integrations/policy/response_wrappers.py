from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, ValidationError

STATUS_SUCCESS = 100
STATUS_ALREADY_VERIFIED = 101

ZARINPAL_STATUS_MESSAGES: Dict[int, str] = {
    -1: "Submitted information is incomplete.",
    -2: "Merchant code or IP address is not correct.",
    -3: "Amount is below the gateway minimum.",
    -4: "Merchant verification level is lower than silver.",
    -11: "Request not found.",
    -12: "Request cannot be edited.",
    -21: "No financial operation found for this transaction.",
    -22: "Transaction was unsuccessful.",
    -33: "Transaction amount does not match the amount paid.",
    -34: "Transaction split limit exceeded (count or amount).",
    -40: "No access to the requested method.",
    -41: "AdditionalData is invalid.",
    -42: "Authority lifetime must be between 30 minutes and 45 days.",
    -54: "Request is archived.",
    100: "Operation was successful.",
    101: "Operation was successful; the payment was already verified.",
}


class IntegrationResponseError(ValueError):
    def __init__(self, message: str, *, payload: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.payload = payload or {}


class RegistrationResponseModel(BaseModel):
    status_code: int
    authority: Optional[str] = None
    message: str = ""
    raw: Dict[str, Any] = Field(default_factory=dict)

    @property
    def is_success(self) -> bool:
        return self.status_code == STATUS_SUCCESS


class VerificationResponseModel(BaseModel):
    status_code: int
    ref_id: Optional[str] = None
    message: str = ""
    extra_detail: Dict[str, Any] = Field(default_factory=dict)
    raw: Dict[str, Any] = Field(default_factory=dict)

    @property
    def is_success(self) -> bool:
        return self.status_code in {STATUS_SUCCESS, STATUS_ALREADY_VERIFIED}


def describe_status(code: int) -> str:
    return ZARINPAL_STATUS_MESSAGES.get(code, f"Unknown gateway status {code}.")


def normalize_registration_response(raw: Dict[str, Any]) -> RegistrationResponseModel:
    status_code = _coerce_status(_first_non_empty(raw, "Status", "status"), raw)
    authority = _first_non_empty(raw, "Authority", "authority", default="")
    message = str(_first_non_empty(raw, "Message", "message", default=describe_status(status_code)))

    if status_code == STATUS_SUCCESS and not authority:
        raise IntegrationResponseError("Gateway reported success without an Authority.", payload=raw)

    return _build_model(
        RegistrationResponseModel,
        {
            "status_code": status_code,
            "authority": str(authority) if authority else None,
            "message": message,
            "raw": raw,
        },
        raw,
    )


def normalize_verification_response(raw: Dict[str, Any]) -> VerificationResponseModel:
    status_code = _coerce_status(_first_non_empty(raw, "Status", "status"), raw)
    ref_id = _first_non_empty(raw, "RefID", "ref_id", "RefId", default="")
    message = str(_first_non_empty(raw, "Message", "message", default=describe_status(status_code)))
    extra_detail = raw.get("ExtraDetail") if isinstance(raw.get("ExtraDetail"), dict) else {}

    if status_code in {STATUS_SUCCESS, STATUS_ALREADY_VERIFIED} and not ref_id:
        raise IntegrationResponseError("Gateway reported success without a RefID.", payload=raw)

    return _build_model(
        VerificationResponseModel,
        {
            "status_code": status_code,
            "ref_id": str(ref_id) if ref_id else None,
            "message": message,
            "extra_detail": extra_detail,
            "raw": raw,
        },
        raw,
    )


def _first_non_empty(data: Dict[str, Any], *keys: str, default: Any = None) -> Any:
    for key in keys:
        value = data.get(key)
        if value is None:
            continue
        if isinstance(value, str) and not value.strip():
            continue
        return value
    if default is not None:
        return default
    raise IntegrationResponseError(f"Missing required field. Checked keys: {', '.join(keys)}", payload=data)


def _coerce_status(value: Any, raw: Dict[str, Any]) -> int:
    try:
        return int(str(value).strip())
    except (TypeError, ValueError) as exc:
        raise IntegrationResponseError(f"Invalid gateway status: {value!r}", payload=raw) from exc


def _build_model(model_type, payload: Dict[str, Any], raw: Dict[str, Any]):
    try:
        return model_type(**payload)
    except ValidationError as exc:
        raise IntegrationResponseError(f"Response validation failed: {exc}", payload=raw) from exc
