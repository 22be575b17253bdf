"""
Public, high-level helpers for interacting with the Piastrix API.
"""

from __future__ import annotations

from typing import Mapping, Optional, Union

import requests

from .core.client import PiastrixClient
from .core.config import ClientConfig, load_client_config

__all__ = ["create_client"]


def create_client(
    *,
    config: Optional[ClientConfig] = None,
    session: Optional[requests.Session] = None,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    shop_id: Optional[Union[int, str]] = None,
    secret_key: Optional[str] = None,
    url: Optional[str] = None,
    timeout: Optional[Union[int, float, str]] = None,
) -> PiastrixClient:
    """
    Construct a :class:`PiastrixClient`.

    Callers can either supply a ready-made :class:`ClientConfig` or let the
    helper assemble one from environment data and keyword arguments.
    """
    if config is not None:
        extras = (overrides, base, shop_id, secret_key, url, timeout)
        if any(item is not None and item != {} for item in extras):
            raise ValueError(
                "Provide either a pre-built ClientConfig or individual parameters, not both."
            )
        cfg = config
    else:
        cfg = load_client_config(
            env_file=env_file,
            overrides=overrides,
            base=base,
            shop_id=shop_id,
            secret_key=secret_key,
            url=url,
            timeout=timeout,
        )
    return PiastrixClient(cfg, session=session)
