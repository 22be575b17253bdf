"""
Helpers for constructing the signed JSON payloads sent to the Piastrix API.

Every builder returns a new ``dict`` that already carries its ``sign`` field.
None of them touch the network.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from .config import ClientConfig
from .schemas import (
    OPERATIONS,
    PAY_URL_TEMPLATE,
    Language,
    Operation,
    TransferAmountType,
    WithdrawAmountType,
    parse_language,
    parse_transfer_amount_type,
    parse_withdraw_amount_type,
)
from .signing import merge_extra_fields, sign

__all__ = [
    "NOW_FORMAT",
    "build_balance_request",
    "build_bill_request",
    "build_check_account_request",
    "build_invoice_request",
    "build_invoice_try_request",
    "build_pay_form",
    "build_transfer_request",
    "build_transfer_status_request",
    "build_withdraw_request",
    "build_withdraw_shop_payment_status_request",
    "build_withdraw_status_request",
    "build_withdraw_try_request",
]

NOW_FORMAT = "%Y-%m-%d %H:%M:%S.%f"

Amount = Union[int, float, str]
ExtraFields = Optional[Mapping[str, Any]]


def _timestamp(now: Optional[datetime]) -> str:
    return (datetime.now() if now is None else now).strftime(NOW_FORMAT)


def _signed(
    config: ClientConfig,
    operation: Operation,
    fields: Dict[str, Any],
    extra_fields: ExtraFields = None,
) -> Dict[str, Any]:
    schema = OPERATIONS[operation]
    body = merge_extra_fields(fields, extra_fields)
    sign(body, schema.signed_fields, config.secret_key)
    return body


def build_balance_request(
    config: ClientConfig,
    *,
    now: Optional[datetime] = None,
) -> Dict[str, Any]:
    fields = {"shop_id": config.shop_id, "now": _timestamp(now)}
    return _signed(config, Operation.SHOP_BALANCE, fields)


def build_bill_request(
    config: ClientConfig,
    payer_currency: int,
    shop_amount: Amount,
    shop_currency: int,
    shop_order_id: str,
    extra_fields: ExtraFields = None,
) -> Dict[str, Any]:
    """
    Build a ``bill/create`` request.

    ``extra_fields`` may carry ``description``, ``payer_account``,
    ``failed_url``, ``success_url`` and ``callback_url``.
    """
    fields = {
        "payer_currency": payer_currency,
        "shop_amount": shop_amount,
        "shop_currency": shop_currency,
        "shop_id": config.shop_id,
        "shop_order_id": shop_order_id,
    }
    return _signed(config, Operation.BILL, fields, extra_fields)


def _invoice_fields(
    config: ClientConfig,
    amount: Amount,
    currency: int,
    shop_order_id: str,
    payway: str,
) -> Dict[str, Any]:
    return {
        "amount": amount,
        "currency": currency,
        "payway": payway,
        "shop_id": config.shop_id,
        "shop_order_id": shop_order_id,
    }


def build_invoice_try_request(
    config: ClientConfig,
    amount: Amount,
    currency: int,
    shop_order_id: str,
    payway: str,
    extra_fields: ExtraFields = None,
) -> Dict[str, Any]:
    fields = _invoice_fields(config, amount, currency, shop_order_id, payway)
    return _signed(config, Operation.INVOICE_TRY, fields, extra_fields)


def build_invoice_request(
    config: ClientConfig,
    amount: Amount,
    currency: int,
    shop_order_id: str,
    payway: str,
    extra_fields: ExtraFields = None,
) -> Dict[str, Any]:
    """
    Build an ``invoice/create`` request for paying in a currency other than
    the shop's.

    ``extra_fields`` may carry ``description``, ``phone``, ``failed_url``,
    ``success_url`` and ``callback_url``.
    """
    fields = _invoice_fields(config, amount, currency, shop_order_id, payway)
    return _signed(config, Operation.INVOICE, fields, extra_fields)


def build_transfer_status_request(
    config: ClientConfig,
    shop_payment_id: str,
    *,
    now: Optional[datetime] = None,
) -> Dict[str, Any]:
    fields = {
        "shop_id": config.shop_id,
        "now": _timestamp(now),
        "shop_payment_id": shop_payment_id,
    }
    return _signed(config, Operation.TRANSFER_STATUS, fields)


def build_transfer_request(
    config: ClientConfig,
    amount: Amount,
    amount_type: Union[TransferAmountType, str],
    payee_account: Union[int, str],
    payee_currency: int,
    shop_currency: int,
    shop_payment_id: str,
    extra_fields: ExtraFields = None,
) -> Dict[str, Any]:
    """
    Build a ``transfer/create`` request moving funds from the shop balance to
    a Piastrix wallet (``payee_account`` is a wallet number or an e-mail).

    Raises :class:`~piastrix.core.errors.AmountTypeError` before anything is
    built when ``amount_type`` is not a :class:`TransferAmountType`.
    """
    kind = parse_transfer_amount_type(amount_type)
    fields = {
        "amount": amount,
        "amount_type": kind.value,
        "payee_account": payee_account,
        "payee_currency": payee_currency,
        "shop_id": config.shop_id,
        "shop_currency": shop_currency,
        "shop_payment_id": shop_payment_id,
    }
    return _signed(config, Operation.TRANSFER, fields, extra_fields)


def build_withdraw_try_request(
    config: ClientConfig,
    amount: Amount,
    amount_type: Union[WithdrawAmountType, str],
    payway: str,
    shop_currency: int,
) -> Dict[str, Any]:
    kind = parse_withdraw_amount_type(amount_type)
    fields = {
        "amount": amount,
        "amount_type": kind.value,
        "payway": payway,
        "shop_currency": shop_currency,
        "shop_id": config.shop_id,
    }
    return _signed(config, Operation.WITHDRAW_TRY, fields)


def build_withdraw_request(
    config: ClientConfig,
    account: Union[int, str],
    amount: Amount,
    amount_type: Union[WithdrawAmountType, str],
    payway: str,
    shop_currency: int,
    shop_payment_id: str,
    account_details: Optional[Mapping[str, Any]] = None,
    extra_fields: ExtraFields = None,
) -> Dict[str, Any]:
    """
    Build a ``withdraw/create`` request.

    ``account_details`` depends on the payway; it travels in the body but is
    not signed.
    """
    kind = parse_withdraw_amount_type(amount_type)
    fields: Dict[str, Any] = {
        "account": account,
        "amount": amount,
        "amount_type": kind.value,
        "payway": payway,
        "shop_currency": shop_currency,
        "shop_id": config.shop_id,
        "shop_payment_id": shop_payment_id,
    }
    if account_details is not None:
        fields["account_details"] = dict(account_details)
    return _signed(config, Operation.WITHDRAW, fields, extra_fields)


def build_check_account_request(
    config: ClientConfig,
    account: Union[int, str],
    amount: Amount,
    payway: str,
    account_details: Optional[Mapping[str, Any]] = None,
) -> Dict[str, Any]:
    fields: Dict[str, Any] = {
        "account": account,
        "amount": amount,
        "payway": payway,
        "shop_id": config.shop_id,
    }
    if account_details is not None:
        fields["account_details"] = dict(account_details)
    return _signed(config, Operation.CHECK_ACCOUNT, fields)


def build_withdraw_status_request(
    config: ClientConfig,
    withdraw_id: int,
    *,
    now: Optional[datetime] = None,
) -> Dict[str, Any]:
    fields = {
        "shop_id": config.shop_id,
        "now": _timestamp(now),
        "withdraw_id": withdraw_id,
    }
    return _signed(config, Operation.WITHDRAW_STATUS, fields)


def build_withdraw_shop_payment_status_request(
    config: ClientConfig,
    shop_payment_id: str,
    *,
    now: Optional[datetime] = None,
) -> Dict[str, Any]:
    fields = {
        "shop_id": config.shop_id,
        "now": _timestamp(now),
        "shop_payment_id": shop_payment_id,
    }
    return _signed(config, Operation.WITHDRAW_SHOP_PAYMENT_STATUS, fields)


def build_pay_form(
    config: ClientConfig,
    amount: Amount,
    currency: int,
    shop_order_id: str,
    extra_fields: ExtraFields = None,
    lang: Union[Language, str] = Language.RU,
) -> Tuple[Dict[str, Any], str]:
    """
    Build the form fields for a browser-side POST to the payment page.

    Returns ``(form_data, url)``. ``extra_fields`` may carry ``description``,
    ``payway``, ``payer_account``, ``failed_url``, ``success_url`` and
    ``callback_url``.
    """
    language = parse_language(lang)
    fields = {
        "amount": amount,
        "currency": currency,
        "shop_id": config.shop_id,
        "shop_order_id": shop_order_id,
    }
    form_data = _signed(config, Operation.PAY, fields, extra_fields)
    return form_data, PAY_URL_TEMPLATE.format(lang=language.value)
