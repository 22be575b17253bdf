"""
Signature generation for Piastrix requests.

The gateway signs a request by sorting the names of the signed fields, joining
their values with ``:`` and appending the shop's secret key. The SHA-256 hex
digest of that string travels in the ``sign`` field.
"""

from __future__ import annotations

import hashlib
import json
from typing import Any, Dict, Iterable, Mapping, MutableMapping, Optional

from .errors import ExtraFieldsError

__all__ = [
    "SIGN_FIELD",
    "build_signature",
    "check_extra_fields",
    "merge_extra_fields",
    "sign",
    "signature_basis",
]

SIGN_FIELD = "sign"


def _stringify(value: Any) -> str:
    # Must render exactly what the gateway reads back from the JSON body.
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""
    if isinstance(value, (int, float)):
        return str(value)
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def signature_basis(
    data: Mapping[str, Any],
    required_fields: Iterable[str],
    secret_key: str,
) -> str:
    """
    Return the string that gets hashed: sorted field values joined with ``:``
    followed by the secret key.
    """
    values = [_stringify(data[field]) for field in sorted(required_fields)]
    return ":".join(values) + secret_key


def build_signature(
    data: Mapping[str, Any],
    required_fields: Iterable[str],
    secret_key: str,
) -> str:
    basis = signature_basis(data, required_fields, secret_key)
    return hashlib.sha256(basis.encode("utf-8")).hexdigest()


def sign(
    data: MutableMapping[str, Any],
    required_fields: Iterable[str],
    secret_key: str,
) -> None:
    """
    Sign ``data`` in place by storing the signature under ``sign``.

    Raises :class:`KeyError` when a required field is absent from ``data``.
    """
    data[SIGN_FIELD] = build_signature(data, required_fields, secret_key)


def check_extra_fields(
    extra_fields: Mapping[str, Any],
    base: Mapping[str, Any],
) -> None:
    for key in extra_fields:
        if key in base or key == SIGN_FIELD:
            raise ExtraFieldsError(
                f"Wrong key '{key}' in extra_fields. Don't use the same keys as the request"
            )


def merge_extra_fields(
    base: Mapping[str, Any],
    extra_fields: Optional[Mapping[str, Any]],
) -> Dict[str, Any]:
    merged = dict(base)
    if extra_fields is not None:
        check_extra_fields(extra_fields, base)
        merged.update(extra_fields)
    return merged
