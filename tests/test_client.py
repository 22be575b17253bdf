"""Tests for the HTTP client."""
from datetime import datetime
from decimal import Decimal
from unittest.mock import MagicMock

import pytest
import requests

from piastrix import AmountTypeError, ClientConfig, Operation, PiastrixClient, create_client
from piastrix.core.client import post_request

from conftest import SECRET_KEY, SHOP_ID, FakeResponse, FakeSession

NOW = datetime(2024, 3, 5, 14, 7, 9)


@pytest.mark.parametrize(
    "call, path",
    [
        (lambda c: c.check_balance(now=NOW), "shop_balance"),
        (lambda c: c.bill(643, "10.00", 643, "o-1"), "bill/create"),
        (lambda c: c.invoice_try("10.00", 643, "o-1", "card_rub"), "invoice/try"),
        (lambda c: c.invoice("10.00", 643, "o-1", "card_rub"), "invoice/create"),
        (lambda c: c.transfer_status("tr-1", now=NOW), "transfer/shop_payment_status"),
        (
            lambda c: c.transfer(5, "writeoff_amount", "12345", 643, 643, "tr-1"),
            "transfer/create",
        ),
        (lambda c: c.withdraw_try(100, "ps_amount", "card_rub", 643), "withdraw/try"),
        (
            lambda c: c.withdraw("4111", 100, "ps_amount", "card_rub", 643, "wd-1"),
            "withdraw/create",
        ),
        (lambda c: c.check_account("4111", 100, "card_rub"), "check_account"),
        (lambda c: c.withdraw_id(42, now=NOW), "withdraw/status"),
        (lambda c: c.shop_payment_id("wd-1", now=NOW), "withdraw/shop_payment_status"),
    ],
)
def test_operations_post_signed_json(client, session, call, path):
    result = call(client)

    assert result == {"result": True, "data": {}}
    assert len(session.calls) == 1
    sent = session.calls[0]
    assert sent["url"] == "https://core.piastrix.com/" + path
    assert sent["timeout"] == 10
    assert sent["json"]["shop_id"] == SHOP_ID
    assert len(sent["json"]["sign"]) == 64


def test_base_url_and_timeout_come_from_config(session):
    config = ClientConfig(
        shop_id=SHOP_ID, secret_key=SECRET_KEY, url="https://sandbox.example.com/api", timeout=3
    )
    client = PiastrixClient(config, session=session)

    client.check_balance()

    assert session.calls[0]["url"] == "https://sandbox.example.com/api/shop_balance"
    assert session.calls[0]["timeout"] == 3


def test_pay_does_not_touch_the_network(client, session):
    form, url = client.pay("10.00", 643, "o-1", lang="en")

    assert url == "https://pay.piastrix.com/en/pay"
    assert form["shop_id"] == SHOP_ID
    assert session.calls == []


def test_invalid_amount_type_never_reaches_transport(client, session):
    with pytest.raises(AmountTypeError):
        client.withdraw("4111", 100, "bogus", "card_rub", 643, "wd-1")
    with pytest.raises(AmountTypeError):
        client.transfer(5, "bogus", "12345", 643, 643, "tr-1")

    assert session.calls == []


def test_http_errors_propagate_unchanged(config):
    session = FakeSession(FakeResponse({"error": "bad"}, status_code=502))
    client = PiastrixClient(config, session=session)

    with pytest.raises(requests.HTTPError):
        client.check_balance()


def test_network_errors_propagate_unchanged(config):
    session = MagicMock()
    session.post.side_effect = requests.ConnectionError("unreachable")
    client = PiastrixClient(config, session=session)

    with pytest.raises(requests.ConnectionError):
        client.bill(643, "10.00", 643, "o-1")
    assert session.post.call_count == 1


def test_decimal_amount_never_reaches_transport(client, session):
    with pytest.raises(TypeError):
        client.bill(643, Decimal("10.50"), 643, "o-1")

    assert session.calls == []


def test_post_request_refuses_pay_operation(config, session):
    with pytest.raises(ValueError):
        post_request(session, config, Operation.PAY, {})


def test_request_logging_omits_secret(client, caplog):
    caplog.set_level("INFO")

    client.check_balance()

    assert "shop_balance" in caplog.text
    assert SECRET_KEY not in caplog.text


def test_create_client_from_keyword_arguments(session):
    client = create_client(
        env_file=None, base={}, shop_id="7", secret_key="abc", session=session
    )

    assert client.config.shop_id == 7
    assert client.config.secret_key == "abc"
    assert client.session is session


def test_create_client_rejects_config_and_parameters(config):
    with pytest.raises(ValueError):
        create_client(config=config, shop_id=1)


def test_client_creates_its_own_session(config):
    client = PiastrixClient(config)

    assert isinstance(client.session, requests.Session)
    client.close()


def test_context_manager_closes_owned_session(config, monkeypatch):
    owned = FakeSession()
    monkeypatch.setattr(requests, "Session", lambda: owned)

    with PiastrixClient(config) as client:
        client.check_balance()

    assert owned.closed is True


def test_injected_session_is_left_open(client, session):
    with client:
        client.check_balance()

    assert session.closed is False
