"""Pytest configuration and fixtures"""
from typing import Any, Dict, List, Optional

import pytest
import requests

from piastrix import ClientConfig, PiastrixClient


SECRET_KEY = "SecretKey01"
SHOP_ID = 112


class FakeResponse:
    def __init__(self, payload: Any, status_code: int = 200):
        self.payload = payload
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)

    def json(self) -> Any:
        return self.payload


class FakeSession:
    """Records POSTs and answers each with the configured response."""

    def __init__(self, response: Optional[FakeResponse] = None):
        self.response = response or FakeResponse({"result": True, "data": {}})
        self.calls: List[Dict[str, Any]] = []
        self.closed = False

    def post(self, url: str, json: Any = None, timeout: Any = None) -> FakeResponse:
        self.calls.append({"url": url, "json": json, "timeout": timeout})
        return self.response

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def config() -> ClientConfig:
    return ClientConfig(shop_id=SHOP_ID, secret_key=SECRET_KEY)


@pytest.fixture
def session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def client(config, session) -> PiastrixClient:
    return PiastrixClient(config, session=session)
