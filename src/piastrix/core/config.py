"""
Configuration objects and helpers for the Piastrix client.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Union

from .environment import build_environment

__all__ = [
    "ConfigError",
    "ClientConfig",
    "DEFAULT_TIMEOUT",
    "DEFAULT_URL",
    "load_client_config",
]

DEFAULT_URL = "https://core.piastrix.com/"
DEFAULT_TIMEOUT = 10

_PARAMETER_TO_ENV_KEY = {
    "shop_id": "PIASTRIX_SHOP_ID",
    "secret_key": "PIASTRIX_SECRET_KEY",
    "url": "PIASTRIX_URL",
    "timeout": "PIASTRIX_TIMEOUT",
}


class ConfigError(Exception):
    """Raised when the supplied configuration is invalid."""


def _collect_parameter_overrides(explicit: Mapping[str, Any]) -> Dict[str, str]:
    overrides: Dict[str, str] = {}
    for key, value in explicit.items():
        if value is None:
            continue
        overrides[_PARAMETER_TO_ENV_KEY[key]] = str(value)
    return overrides


def _parse_shop_id(raw: str) -> int:
    value = raw.strip()
    if not value:
        raise ConfigError("PIASTRIX_SHOP_ID must not be empty")
    try:
        return int(value)
    except ValueError as exc:
        raise ConfigError(f"PIASTRIX_SHOP_ID must be an integer, got '{raw}'") from exc


def _parse_timeout(raw: str) -> Union[int, float]:
    try:
        timeout: Union[int, float] = int(raw)
    except ValueError:
        try:
            timeout = float(raw)
        except ValueError as exc:
            raise ConfigError(
                f"PIASTRIX_TIMEOUT must be a number of seconds, got '{raw}'"
            ) from exc
    if timeout <= 0:
        raise ConfigError("PIASTRIX_TIMEOUT must be greater than zero")
    return timeout


@dataclass(frozen=True)
class ClientConfig:
    shop_id: Union[int, str]
    secret_key: str = field(repr=False)
    url: str = DEFAULT_URL
    timeout: Union[int, float] = DEFAULT_TIMEOUT

    def endpoint(self, path: str) -> str:
        return self.url.rstrip("/") + "/" + path.lstrip("/")

    @classmethod
    def from_mapping(cls, values: Mapping[str, str]) -> "ClientConfig":
        shop_raw = values.get("PIASTRIX_SHOP_ID")
        if shop_raw is None:
            raise ConfigError("PIASTRIX_SHOP_ID must be provided")
        shop_id = _parse_shop_id(shop_raw)

        secret_key = values.get("PIASTRIX_SECRET_KEY")
        if not secret_key:
            raise ConfigError("PIASTRIX_SECRET_KEY must be provided")

        url = values.get("PIASTRIX_URL", DEFAULT_URL).strip()
        if not url:
            raise ConfigError("PIASTRIX_URL must not be empty")

        timeout = _parse_timeout(values.get("PIASTRIX_TIMEOUT", str(DEFAULT_TIMEOUT)))

        return cls(shop_id=shop_id, secret_key=secret_key, url=url, timeout=timeout)

    @classmethod
    def from_env(
        cls,
        *,
        env_file: Optional[str] = ".env",
        overrides: Optional[Mapping[str, str]] = None,
        base: Optional[Mapping[str, str]] = None,
        shop_id: Optional[Union[int, str]] = None,
        secret_key: Optional[str] = None,
        url: Optional[str] = None,
        timeout: Optional[Union[int, float, str]] = None,
    ) -> "ClientConfig":
        parameter_overrides = _collect_parameter_overrides(
            {
                "shop_id": shop_id,
                "secret_key": secret_key,
                "url": url,
                "timeout": timeout,
            }
        )
        merged_overrides = dict(overrides or {})
        merged_overrides.update(parameter_overrides)

        variables = build_environment(
            env_file=env_file,
            base=base,
            overrides=merged_overrides,
        )
        return cls.from_mapping(variables)


def load_client_config(
    *,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    shop_id: Optional[Union[int, str]] = None,
    secret_key: Optional[str] = None,
    url: Optional[str] = None,
    timeout: Optional[Union[int, float, str]] = None,
) -> ClientConfig:
    """
    Convenience wrapper that mirrors :meth:`ClientConfig.from_env`.

    Settings can come from environment variables, a ``.env`` file, direct
    keyword arguments, or any combination of the three. Keyword arguments win.
    """
    return ClientConfig.from_env(
        env_file=env_file,
        overrides=overrides,
        base=base,
        shop_id=shop_id,
        secret_key=secret_key,
        url=url,
        timeout=timeout,
    )
