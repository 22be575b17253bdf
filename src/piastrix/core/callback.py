"""
Verification of bill and invoice callbacks sent by the gateway.
"""

from __future__ import annotations

import hmac
import logging
from typing import Any, Dict, FrozenSet, Mapping

from .errors import (
    IpAddressError,
    ShopAmountError,
    ShopCurrencyError,
    SignatureError,
    StatusError,
)
from .signing import SIGN_FIELD, build_signature

__all__ = [
    "ALLOWED_IP_ADDRESSES",
    "SUCCESS_STATUS",
    "callback_signed_fields",
    "check_callback",
]

ALLOWED_IP_ADDRESSES: FrozenSet[str] = frozenset(
    {
        "87.98.145.206",
        "51.68.53.104",
        "51.68.53.105",
        "51.68.53.106",
        "51.68.53.107",
        "91.121.216.63",
        "37.48.108.180",
        "37.48.108.181",
    }
)

SUCCESS_STATUS = "success"

_MISSING = object()


def callback_signed_fields(data: Mapping[str, Any]) -> list[str]:
    """
    Callbacks have no fixed schema: every field carrying a value is signed.
    """
    return [key for key, value in data.items() if value is not None and value != ""]


def _matches(received: Any, expected: Any) -> bool:
    # 643.0 and True must not pass for 643 and 1.
    return type(received) is type(expected) and received == expected


def _rejected(error: Exception) -> Exception:
    logging.warning("Rejected Piastrix callback: %s", error)
    return error


def check_callback(
    request_data: Mapping[str, Any],
    remote_ip_address: str,
    shop_amount: Any,
    shop_currency: Any,
    *,
    secret_key: str,
) -> None:
    """
    Authenticate a callback and confirm it reports the expected successful payment.

    ``shop_amount`` and ``shop_currency`` come from the merchant's own order
    record. Values must match in type as well as value, so a form-encoded
    ``"10.5"`` does not match ``10.5`` and ``643.0`` does not match ``643``.

    Raises the :class:`~piastrix.core.errors.PiastrixClientError` subclass of
    the first failing check.
    """
    if remote_ip_address not in ALLOWED_IP_ADDRESSES:
        raise _rejected(
            IpAddressError(f"IP address {remote_ip_address} is not in allowed IP addresses")
        )

    data: Dict[str, Any] = dict(request_data)
    claimed = data.pop(SIGN_FIELD, None)
    expected = build_signature(data, callback_signed_fields(data), secret_key)
    if not isinstance(claimed, str) or not hmac.compare_digest(
        claimed.encode("utf-8"), expected.encode("utf-8")
    ):
        raise _rejected(SignatureError("Wrong sign"))

    if not _matches(data.get("shop_amount", _MISSING), shop_amount):
        raise _rejected(ShopAmountError("Wrong shop_amount"))
    if not _matches(data.get("shop_currency", _MISSING), shop_currency):
        raise _rejected(ShopCurrencyError("Wrong shop_currency"))
    if data.get("status") != SUCCESS_STATUS:
        raise _rejected(StatusError("Wrong status"))

    logging.info("Accepted Piastrix callback from %s", remote_ip_address)
