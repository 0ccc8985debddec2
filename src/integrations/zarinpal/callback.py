"""Parsing of the payer's return request from the Zarinpal hosted checkout."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping
from urllib.parse import parse_qs, urlsplit

from src.integrations.zarinpal.errors import MalformedCallback

logger = logging.getLogger(__name__)

STATUS_OK = "OK"


@dataclass
class CallbackParams:
    status: str
    authority: str

    @property
    def is_ok(self) -> bool:
        return self.status == STATUS_OK


def callback_url_of(request: Any) -> str:
    """
    Extract the full callback URL from whatever the web layer hands us.

    Accepts a plain URL string, a mapping with a ``url`` key, or any request
    object exposing ``url`` (Starlette's URL objects are converted with str()).
    """
    if isinstance(request, str):
        return request
    if isinstance(request, Mapping):
        url = request.get("url")
    else:
        url = getattr(request, "url", None)
    if url is None:
        raise MalformedCallback("Callback request carries no URL.")
    return str(url)


def parse_callback(request: Any) -> CallbackParams:
    url = callback_url_of(request)
    query = parse_qs(urlsplit(url).query, keep_blank_values=True)

    status = _single(query, "Status")
    authority = _single(query, "Authority")
    if not status or not authority:
        logger.warning("Callback missing Status/Authority: %s", url)
        raise MalformedCallback("Callback URL must carry both Status and Authority.", url=url)

    return CallbackParams(status=status.strip(), authority=authority.strip())


def _single(query: Mapping[str, list], key: str) -> str:
    values = query.get(key) or [""]
    return values[0]
