"""
Public facade for the Piastrix client package.

The most useful pieces are re-exported so integrators can
``from piastrix import ...`` without navigating the package.
"""

from .api import create_client
from .core import (
    ALLOWED_IP_ADDRESSES,
    AmountTypeError,
    ClientConfig,
    ConfigError,
    ErrorCode,
    ExtraFieldsError,
    IpAddressError,
    Language,
    LanguageError,
    Operation,
    PiastrixClient,
    PiastrixClientError,
    ShopAmountError,
    ShopCurrencyError,
    SignatureError,
    StatusError,
    TransferAmountType,
    WithdrawAmountType,
    build_signature,
    check_callback,
    load_client_config,
    sign,
)

__all__ = (
    "ALLOWED_IP_ADDRESSES",
    "AmountTypeError",
    "ClientConfig",
    "ConfigError",
    "ErrorCode",
    "ExtraFieldsError",
    "IpAddressError",
    "Language",
    "LanguageError",
    "Operation",
    "PiastrixClient",
    "PiastrixClientError",
    "ShopAmountError",
    "ShopCurrencyError",
    "SignatureError",
    "StatusError",
    "TransferAmountType",
    "WithdrawAmountType",
    "build_signature",
    "check_callback",
    "create_client",
    "load_client_config",
    "sign",
)
