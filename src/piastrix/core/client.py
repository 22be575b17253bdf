"""
HTTP client for the Piastrix API.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict, Mapping, Optional, Tuple, Union

import requests

from .callback import check_callback
from .config import ClientConfig
from .payloads import (
    Amount,
    ExtraFields,
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
    TransferAmountType,
    WithdrawAmountType,
)

__all__ = ["PiastrixClient", "post_request"]


def _post_json(
    session: requests.Session,
    url: str,
    body: Dict[str, Any],
    timeout: Union[int, float],
) -> Any:
    response = session.post(url, json=body, timeout=timeout)
    response.raise_for_status()
    return response.json()


def post_request(
    session: requests.Session,
    config: ClientConfig,
    operation: Operation,
    body: Dict[str, Any],
) -> Any:
    """
    POST a signed ``body`` to the endpoint of ``operation``.

    Transport failures (:class:`requests.RequestException`, including
    :class:`requests.HTTPError` for non-2xx answers) propagate unchanged.
    """
    path = OPERATIONS[operation].path
    if path is None:
        raise ValueError(f"{operation.value} is not sent through the API")
    url = config.endpoint(path)
    logging.info("Submitting Piastrix %s request to %s", operation.value, url)
    return _post_json(session, url, body, config.timeout)


class PiastrixClient:
    """
    Builds, signs and sends requests for one shop.

    The configuration, including the secret key, is fixed for the lifetime of
    the client. Calls share no mutable state besides the HTTP session.
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.config = config
        self._owns_session = session is None
        self.session = session or requests.Session()

    def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "PiastrixClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _post(self, operation: Operation, body: Dict[str, Any]) -> Any:
        return post_request(self.session, self.config, operation, body)

    def check_callback(
        self,
        request_data: Mapping[str, Any],
        remote_ip_address: str,
        shop_amount: Any,
        shop_currency: Any,
    ) -> None:
        """
        Validate a bill or invoice callback.

        See :func:`piastrix.core.callback.check_callback`.
        """
        check_callback(
            request_data,
            remote_ip_address,
            shop_amount,
            shop_currency,
            secret_key=self.config.secret_key,
        )

    def check_balance(self, *, now: Optional[datetime] = None) -> Any:
        """
        Return the shop balances (``shop_id``, ``balances`` with
        ``available``, ``currency``, ``hold`` and ``frozen``).
        """
        body = build_balance_request(self.config, now=now)
        return self._post(Operation.SHOP_BALANCE, body)

    def bill(
        self,
        payer_currency: int,
        shop_amount: Amount,
        shop_currency: int,
        shop_order_id: str,
        extra_fields: ExtraFields = None,
    ) -> Any:
        body = build_bill_request(
            self.config,
            payer_currency,
            shop_amount,
            shop_currency,
            shop_order_id,
            extra_fields,
        )
        return self._post(Operation.BILL, body)

    def invoice_try(
        self,
        amount: Amount,
        currency: int,
        shop_order_id: str,
        payway: str,
        extra_fields: ExtraFields = None,
    ) -> Any:
        body = build_invoice_try_request(
            self.config, amount, currency, shop_order_id, payway, extra_fields
        )
        return self._post(Operation.INVOICE_TRY, body)

    def invoice(
        self,
        amount: Amount,
        currency: int,
        shop_order_id: str,
        payway: str,
        extra_fields: ExtraFields = None,
    ) -> Any:
        body = build_invoice_request(
            self.config, amount, currency, shop_order_id, payway, extra_fields
        )
        return self._post(Operation.INVOICE, body)

    def transfer_status(
        self,
        shop_payment_id: str,
        *,
        now: Optional[datetime] = None,
    ) -> Any:
        body = build_transfer_status_request(self.config, shop_payment_id, now=now)
        return self._post(Operation.TRANSFER_STATUS, body)

    def transfer(
        self,
        amount: Amount,
        amount_type: Union[TransferAmountType, str],
        payee_account: Union[int, str],
        payee_currency: int,
        shop_currency: int,
        shop_payment_id: str,
        extra_fields: ExtraFields = None,
    ) -> Any:
        body = build_transfer_request(
            self.config,
            amount,
            amount_type,
            payee_account,
            payee_currency,
            shop_currency,
            shop_payment_id,
            extra_fields,
        )
        return self._post(Operation.TRANSFER, body)

    def withdraw_try(
        self,
        amount: Amount,
        amount_type: Union[WithdrawAmountType, str],
        payway: str,
        shop_currency: int,
    ) -> Any:
        body = build_withdraw_try_request(
            self.config, amount, amount_type, payway, shop_currency
        )
        return self._post(Operation.WITHDRAW_TRY, body)

    def withdraw(
        self,
        account: Union[int, str],
        amount: Amount,
        amount_type: Union[WithdrawAmountType, str],
        payway: str,
        shop_currency: int,
        shop_payment_id: str,
        account_details: Optional[Mapping[str, Any]] = None,
        extra_fields: ExtraFields = None,
    ) -> Any:
        body = build_withdraw_request(
            self.config,
            account,
            amount,
            amount_type,
            payway,
            shop_currency,
            shop_payment_id,
            account_details,
            extra_fields,
        )
        return self._post(Operation.WITHDRAW, body)

    def check_account(
        self,
        account: Union[int, str],
        amount: Amount,
        payway: str,
        account_details: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        body = build_check_account_request(
            self.config, account, amount, payway, account_details
        )
        return self._post(Operation.CHECK_ACCOUNT, body)

    def withdraw_id(
        self,
        withdraw_id: int,
        *,
        now: Optional[datetime] = None,
    ) -> Any:
        """Look up a withdrawal by the gateway's ``withdraw_id``."""
        body = build_withdraw_status_request(self.config, withdraw_id, now=now)
        return self._post(Operation.WITHDRAW_STATUS, body)

    def shop_payment_id(
        self,
        shop_payment_id: str,
        *,
        now: Optional[datetime] = None,
    ) -> Any:
        """Look up a withdrawal by the shop's own payment number."""
        body = build_withdraw_shop_payment_status_request(
            self.config, shop_payment_id, now=now
        )
        return self._post(Operation.WITHDRAW_SHOP_PAYMENT_STATUS, body)

    def pay(
        self,
        amount: Amount,
        currency: int,
        shop_order_id: str,
        extra_fields: ExtraFields = None,
        lang: Union[Language, str] = Language.RU,
    ) -> Tuple[Dict[str, Any], str]:
        return build_pay_form(
            self.config, amount, currency, shop_order_id, extra_fields, lang
        )
