"""
Core primitives for signing, sending and verifying Piastrix requests.
"""

from .callback import ALLOWED_IP_ADDRESSES, callback_signed_fields, check_callback
from .client import PiastrixClient, post_request
from .config import ClientConfig, ConfigError, load_client_config
from .environment import build_environment
from .errors import (
    AmountTypeError,
    ErrorCode,
    ExtraFieldsError,
    IpAddressError,
    LanguageError,
    PiastrixClientError,
    ShopAmountError,
    ShopCurrencyError,
    SignatureError,
    StatusError,
)
from .payloads import (
    build_balance_request,
    build_bill_request,
    build_check_account_request,
    build_invoice_request,
    build_invoice_try_request,
    build_pay_form,
    build_transfer_request,
    build_transfer_status_request,
    build_withdraw_request,
    build_withdraw_shop_payment_status_request,
    build_withdraw_status_request,
    build_withdraw_try_request,
)
from .schemas import (
    OPERATIONS,
    Language,
    Operation,
    OperationSchema,
    TransferAmountType,
    WithdrawAmountType,
)
from .signing import build_signature, check_extra_fields, merge_extra_fields, sign

__all__ = [
    "ALLOWED_IP_ADDRESSES",
    "AmountTypeError",
    "ClientConfig",
    "ConfigError",
    "ErrorCode",
    "ExtraFieldsError",
    "IpAddressError",
    "Language",
    "LanguageError",
    "OPERATIONS",
    "Operation",
    "OperationSchema",
    "PiastrixClient",
    "PiastrixClientError",
    "ShopAmountError",
    "ShopCurrencyError",
    "SignatureError",
    "StatusError",
    "TransferAmountType",
    "WithdrawAmountType",
    "build_balance_request",
    "build_bill_request",
    "build_check_account_request",
    "build_environment",
    "build_invoice_request",
    "build_invoice_try_request",
    "build_pay_form",
    "build_signature",
    "build_transfer_request",
    "build_transfer_status_request",
    "build_withdraw_request",
    "build_withdraw_shop_payment_status_request",
    "build_withdraw_status_request",
    "build_withdraw_try_request",
    "callback_signed_fields",
    "check_callback",
    "check_extra_fields",
    "load_client_config",
    "merge_extra_fields",
    "post_request",
    "sign",
]
