"""
Command-line interface for exercising the Piastrix API.
"""

from __future__ import annotations

import argparse
import json
import logging
from typing import Any, Iterable, Sequence, Tuple, Union

import requests

from .api import create_client
from .core.client import PiastrixClient
from .core.config import ConfigError, load_client_config
from .core.errors import PiastrixClientError
from .core.schemas import Language


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )


def _env_override(value: str) -> Tuple[str, str]:
    if "=" not in value:
        raise argparse.ArgumentTypeError("Overrides must look like KEY=VALUE")
    key, val = value.split("=", 1)
    key = key.strip()
    if not key:
        raise argparse.ArgumentTypeError("Override key must not be empty")
    return key, val


def _collect_overrides(pairs: Iterable[Tuple[str, str]]) -> dict[str, str]:
    overrides: dict[str, str] = {}
    for key, value in pairs:
        overrides[key] = value
    return overrides


def _amount(value: str) -> Union[int, float]:
    try:
        return int(value)
    except ValueError:
        pass
    try:
        return float(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"'{value}' is not a valid amount") from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="piastrix",
        description="Send signed requests to the Piastrix payment API",
    )
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to the .env file containing PIASTRIX_* settings (default: .env)",
    )
    parser.add_argument(
        "--set",
        action="append",
        type=_env_override,
        metavar="KEY=VALUE",
        default=None,
        help="Override an environment variable without editing the .env file",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Python logging level (default: INFO)",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("balance", help="Show the shop balances")

    bill = commands.add_parser("bill", help="Create a bill")
    bill.add_argument("--payer-currency", type=int, required=True)
    bill.add_argument("--shop-amount", type=_amount, required=True)
    bill.add_argument("--shop-currency", type=int, required=True)
    bill.add_argument("--shop-order-id", required=True)
    bill.add_argument("--description")

    pay = commands.add_parser("pay", help="Print the signed form for the payment page")
    pay.add_argument("--amount", type=_amount, required=True)
    pay.add_argument("--currency", type=int, required=True)
    pay.add_argument("--shop-order-id", required=True)
    pay.add_argument("--description")
    pay.add_argument(
        "--lang",
        default=Language.RU.value,
        help="Payment page language: ru or en (default: ru)",
    )

    transfer_status = commands.add_parser(
        "transfer-status", help="Look up a transfer by shop payment id"
    )
    transfer_status.add_argument("shop_payment_id")

    withdraw_status = commands.add_parser(
        "withdraw-status", help="Look up a withdrawal by withdraw id"
    )
    withdraw_status.add_argument("withdraw_id", type=int)

    shop_payment_status = commands.add_parser(
        "shop-payment-status", help="Look up a withdrawal by shop payment id"
    )
    shop_payment_status.add_argument("shop_payment_id")
    return parser


def _description(args: argparse.Namespace) -> dict[str, str] | None:
    if args.description is None:
        return None
    return {"description": args.description}


def _dispatch(client: PiastrixClient, args: argparse.Namespace) -> Any:
    if args.command == "balance":
        return client.check_balance()
    if args.command == "bill":
        return client.bill(
            args.payer_currency,
            args.shop_amount,
            args.shop_currency,
            args.shop_order_id,
            extra_fields=_description(args),
        )
    if args.command == "pay":
        form, url = client.pay(
            args.amount,
            args.currency,
            args.shop_order_id,
            extra_fields=_description(args),
            lang=args.lang,
        )
        return {"url": url, "form": form}
    if args.command == "transfer-status":
        return client.transfer_status(args.shop_payment_id)
    if args.command == "withdraw-status":
        return client.withdraw_id(args.withdraw_id)
    if args.command == "shop-payment-status":
        return client.shop_payment_id(args.shop_payment_id)
    raise ValueError(f"Unknown command {args.command}")


def run_cli(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)
    overrides = _collect_overrides(args.set or ())

    try:
        config = load_client_config(env_file=args.env_file, overrides=overrides)
    except ConfigError as exc:
        logging.error("Invalid configuration: %s", exc)
        return 1

    try:
        with create_client(config=config) as client:
            result = _dispatch(client, args)
    except PiastrixClientError as exc:
        logging.error("Request rejected before sending: %s", exc)
        return 1
    except requests.RequestException as exc:
        logging.error("Piastrix request failed: %s", exc)
        return 1

    print(json.dumps(result, indent=2, ensure_ascii=False))
    return 0
