"""Signing – canonical byte form of a webhook message.

Two messages with the same logical content always produce the same bytes::

    >>> canonicalize({"user_id": "3a2c", "kind": "ping"})
    b'{"kind":"ping","user_id":"3a2c"}'

Rules, one per value variant:

* ``None``, ``True``, ``False`` -> ``null``, ``true``, ``false``
* ``int`` -> decimal digits
* ``float`` -> ECMAScript ``Number.prototype.toString`` form, which is what
  ``JSON.stringify`` emits: shortest round-trip digits, plain notation for
  magnitudes in ``[1e-6, 1e21)`` (``1e16`` -> ``10000000000000000``,
  ``-0.0`` -> ``0``), otherwise ``d[.ddd]e+N`` / ``d[.ddd]e-N`` without
  exponent padding (``1e-7`` -> ``1e-7``); ``nan`` and infinities are
  rejected
* ``str`` -> JSON string, non-ASCII characters as raw UTF-8
* mapping -> object with ``str`` keys sorted by code point (which is also
  UTF-8 byte order), no whitespace
* ``list`` / ``tuple`` -> array, order preserved

Containers may nest at most :data:`MAX_DEPTH` levels. Anything else,
including cyclic structures, raises :class:`EncodingError`.
"""
from __future__ import annotations

import json
import math
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from typing import Any, Union

from mp_signing.security.signing.errors import EncodingError

__all__ = ["MAX_DEPTH", "Message", "canonicalize", "normalize"]

Scalar = Union[str, int, float, bool, None]
Message = Union[Scalar, Mapping[str, "Message"], list["Message"], tuple["Message", ...]]

MAX_DEPTH = 128

_MAX_EXACT_INT = 2**53


def canonicalize(message: Message) -> bytes:
    """Return the canonical UTF-8 bytes of *message*.

    Raises:
        EncodingError: when any value in the tree has no canonical form.
    """
    tree = normalize(message)
    try:
        return _dump(tree).encode("utf-8")
    except UnicodeEncodeError as exc:
        raise EncodingError("String is not valid Unicode text", cause=exc) from exc


def normalize(message: Message) -> Any:
    """Return a plain ``dict``/``list`` copy of *message* with every variant rule applied.

    Integral floats below 2**53 become ``int``; other floats stay ``float``
    and are formatted when the tree is serialized. The input is never mutated.
    """
    return _normalize(message, "$", set(), 0)


def _normalize(value: Any, path: str, active: set[int], depth: int) -> Any:
    if value is None or isinstance(value, bool):
        return value
    if isinstance(value, str):
        return str(value)
    if isinstance(value, int):
        return int(value)
    if isinstance(value, float):
        return _normalize_float(value, path)
    if isinstance(value, Mapping):
        with _visiting(value, path, active, depth):
            result: dict[str, Any] = {}
            for key, item in value.items():
                if not isinstance(key, str):
                    raise EncodingError(
                        f"Object keys must be strings, got {type(key).__name__}",
                        path=path,
                    )
                result[str(key)] = _normalize(item, f"{path}.{key}", active, depth + 1)
            return result
    if isinstance(value, (list, tuple)):
        with _visiting(value, path, active, depth):
            return [
                _normalize(item, f"{path}[{i}]", active, depth + 1)
                for i, item in enumerate(value)
            ]
    raise EncodingError(f"Unsupported value type {type(value).__name__}", path=path)


def _normalize_float(value: float, path: str) -> int | float:
    if not math.isfinite(value):
        raise EncodingError(f"Non-finite number {value!r}", path=path)
    if value.is_integer() and abs(value) < _MAX_EXACT_INT:
        return int(value)
    return float(value)


@contextmanager
def _visiting(container: object, path: str, active: set[int], depth: int) -> Iterator[None]:
    """Track containers on the current path; re-entering one means a cycle."""
    if depth >= MAX_DEPTH:
        raise EncodingError(f"Nesting exceeds {MAX_DEPTH} levels", path=path)
    marker = id(container)
    if marker in active:
        raise EncodingError("Cyclic structure", path=path)
    active.add(marker)
    try:
        yield
    finally:
        active.discard(marker)


def _dump(value: Any) -> str:
    if value is None:
        return "null"
    if value is True:
        return "true"
    if value is False:
        return "false"
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_number(value)
    if isinstance(value, dict):
        members = (f"{_dump(key)}:{_dump(value[key])}" for key in sorted(value))
        return "{" + ",".join(members) + "}"
    return "[" + ",".join(_dump(item) for item in value) + "]"


def _format_number(value: float) -> str:
    """Format a finite float the way ECMAScript ``Number.prototype.toString`` does.

    >>> _format_number(1e-7), _format_number(1e16), _format_number(2.5)
    ('1e-7', '10000000000000000', '2.5')
    """
    if value == 0:
        return "0"
    sign = "-" if value < 0 else ""
    # repr gives the shortest round-trip digits; only the layout differs.
    mantissa, _, exponent = repr(abs(value)).partition("e")
    whole, _, fraction = mantissa.partition(".")
    digits = whole + fraction
    # value == 0.<digits> * 10**point
    point = len(whole) + int(exponent or 0)
    stripped = digits.lstrip("0")
    point -= len(digits) - len(stripped)
    digits = stripped.rstrip("0")
    k = len(digits)

    if k <= point <= 21:
        text = digits + "0" * (point - k)
    elif 0 < point <= 21:
        text = f"{digits[:point]}.{digits[point:]}"
    elif -6 < point <= 0:
        text = "0." + "0" * -point + digits
    else:
        exp = point - 1
        exp_text = f"e+{exp}" if exp >= 0 else f"e-{-exp}"
        text = (digits if k == 1 else f"{digits[0]}.{digits[1:]}") + exp_text
    return sign + text
