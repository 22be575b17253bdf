"""
Error codes and exceptions raised by the Piastrix client.
"""

from __future__ import annotations

from enum import IntEnum

__all__ = [
    "AmountTypeError",
    "ErrorCode",
    "ExtraFieldsError",
    "IpAddressError",
    "LanguageError",
    "PiastrixClientError",
    "ShopAmountError",
    "ShopCurrencyError",
    "SignatureError",
    "StatusError",
]


class ErrorCode(IntEnum):
    EXTRA_FIELDS = 1000
    IP = 1001
    SIGN = 1002
    SHOP_AMOUNT = 1003
    SHOP_CURRENCY = 1004
    STATUS = 1005
    LANGUAGE = 1006
    AMOUNT_TYPE = 1007


class PiastrixClientError(Exception):
    """
    Base class for protocol errors detected on the client side.

    ``error_code`` tells callers which check failed without having to match
    on the exception class.
    """

    error_code: ErrorCode

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"[{int(self.error_code)}] {self.message}"


class ExtraFieldsError(PiastrixClientError):
    error_code = ErrorCode.EXTRA_FIELDS


class IpAddressError(PiastrixClientError):
    error_code = ErrorCode.IP


class SignatureError(PiastrixClientError):
    error_code = ErrorCode.SIGN


class ShopAmountError(PiastrixClientError):
    error_code = ErrorCode.SHOP_AMOUNT


class ShopCurrencyError(PiastrixClientError):
    error_code = ErrorCode.SHOP_CURRENCY


class StatusError(PiastrixClientError):
    error_code = ErrorCode.STATUS


class LanguageError(PiastrixClientError):
    error_code = ErrorCode.LANGUAGE


class AmountTypeError(PiastrixClientError):
    error_code = ErrorCode.AMOUNT_TYPE
