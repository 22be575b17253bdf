"""
Static description of the gateway operations and their enumerated arguments.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple, Type, TypeVar, Union

from .errors import AmountTypeError, LanguageError

__all__ = [
    "Language",
    "OPERATIONS",
    "Operation",
    "OperationSchema",
    "PAY_URL_TEMPLATE",
    "TransferAmountType",
    "WithdrawAmountType",
    "parse_language",
    "parse_transfer_amount_type",
    "parse_withdraw_amount_type",
]

PAY_URL_TEMPLATE = "https://pay.piastrix.com/{lang}/pay"


class Operation(str, Enum):
    SHOP_BALANCE = "shop_balance"
    BILL = "bill"
    INVOICE_TRY = "invoice_try"
    INVOICE = "invoice"
    TRANSFER_STATUS = "transfer_status"
    TRANSFER = "transfer"
    WITHDRAW_TRY = "withdraw_try"
    WITHDRAW = "withdraw"
    CHECK_ACCOUNT = "check_account"
    WITHDRAW_STATUS = "withdraw_status"
    WITHDRAW_SHOP_PAYMENT_STATUS = "withdraw_shop_payment_status"
    PAY = "pay"


@dataclass(frozen=True)
class OperationSchema:
    """
    ``path`` is relative to the API base URL; ``None`` for the browser-side
    ``pay`` form which is never POSTed by the client.
    """

    path: Optional[str]
    signed_fields: Tuple[str, ...]


OPERATIONS: Dict[Operation, OperationSchema] = {
    Operation.SHOP_BALANCE: OperationSchema(
        path="shop_balance",
        signed_fields=("shop_id", "now"),
    ),
    Operation.BILL: OperationSchema(
        path="bill/create",
        signed_fields=(
            "payer_currency",
            "shop_amount",
            "shop_currency",
            "shop_id",
            "shop_order_id",
        ),
    ),
    Operation.INVOICE_TRY: OperationSchema(
        path="invoice/try",
        signed_fields=("amount", "currency", "shop_id", "shop_order_id", "payway"),
    ),
    Operation.INVOICE: OperationSchema(
        path="invoice/create",
        signed_fields=("amount", "currency", "shop_id", "shop_order_id", "payway"),
    ),
    Operation.TRANSFER_STATUS: OperationSchema(
        path="transfer/shop_payment_status",
        signed_fields=("shop_id", "now", "shop_payment_id"),
    ),
    Operation.TRANSFER: OperationSchema(
        path="transfer/create",
        signed_fields=(
            "amount",
            "amount_type",
            "payee_account",
            "payee_currency",
            "shop_currency",
            "shop_id",
            "shop_payment_id",
        ),
    ),
    Operation.WITHDRAW_TRY: OperationSchema(
        path="withdraw/try",
        signed_fields=("amount", "amount_type", "payway", "shop_currency", "shop_id"),
    ),
    Operation.WITHDRAW: OperationSchema(
        path="withdraw/create",
        signed_fields=(
            "account",
            "amount",
            "amount_type",
            "payway",
            "shop_currency",
            "shop_id",
            "shop_payment_id",
        ),
    ),
    Operation.CHECK_ACCOUNT: OperationSchema(
        path="check_account",
        signed_fields=("account", "amount", "payway", "shop_id"),
    ),
    Operation.WITHDRAW_STATUS: OperationSchema(
        path="withdraw/status",
        signed_fields=("now", "shop_id", "withdraw_id"),
    ),
    Operation.WITHDRAW_SHOP_PAYMENT_STATUS: OperationSchema(
        path="withdraw/shop_payment_status",
        signed_fields=("now", "shop_id", "shop_payment_id"),
    ),
    Operation.PAY: OperationSchema(
        path=None,
        signed_fields=("amount", "currency", "shop_id", "shop_order_id"),
    ),
}


class TransferAmountType(str, Enum):
    RECEIVE_AMOUNT = "receive_amount"
    WRITEOFF_AMOUNT = "writeoff_amount"


class WithdrawAmountType(str, Enum):
    PS_AMOUNT = "ps_amount"
    SHOP_AMOUNT = "shop_amount"


class Language(str, Enum):
    RU = "ru"
    EN = "en"


_E = TypeVar("_E", bound=Enum)


def _parse(enum_cls: Type[_E], value: Union[_E, str]) -> Optional[_E]:
    try:
        return enum_cls(value)
    except ValueError:
        return None


def parse_transfer_amount_type(value: Union[TransferAmountType, str]) -> TransferAmountType:
    amount_type = _parse(TransferAmountType, value)
    if amount_type is None:
        raise AmountTypeError(f"Wrong amount_type '{value}' for transfer")
    return amount_type


def parse_withdraw_amount_type(value: Union[WithdrawAmountType, str]) -> WithdrawAmountType:
    amount_type = _parse(WithdrawAmountType, value)
    if amount_type is None:
        raise AmountTypeError(f"Wrong amount_type '{value}' for withdraw")
    return amount_type


def parse_language(value: Union[Language, str]) -> Language:
    lang = _parse(Language, value)
    if lang is None:
        raise LanguageError(f"{value} is not valid language")
    return lang
