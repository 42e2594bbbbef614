"""Field coercion and validation helpers shared by the configuration loader."""

from __future__ import annotations

import collections.abc as cabc
import typing as typ
from urllib.parse import urlsplit

from .._constants import KEY_ALIASES
from .models import InvalidTypeError, InvalidValueError, MissingFieldError

WEB_SCHEMES = frozenset({"http", "https"})


def _join_field(parent: str, key: str) -> str:
    """Return the dotted field path for ``key`` beneath ``parent``."""
    return f"{parent}.{key}" if parent else key


def _lookup(payload: typ.Mapping[str, typ.Any], key: str) -> object | None:
    """Return the value stored under ``key`` or its snake_case alias."""
    value = payload.get(key)
    if value is None and key in KEY_ALIASES:
        value = payload.get(KEY_ALIASES[key])
    return value


def _require_mapping(value: object, field: str) -> typ.Mapping[str, typ.Any]:
    """Return ``value`` when it is a mapping, otherwise raise."""
    match value:
        case None:
            raise MissingFieldError(field)
        case cabc.Mapping():
            return value
        case _:
            raise InvalidTypeError(field, "a mapping", value)


def _optional_mapping(value: object, field: str) -> typ.Mapping[str, typ.Any]:
    """Return ``value`` as a mapping, treating ``None`` as empty."""
    if value is None:
        return {}
    return _require_mapping(value, field)


def _optional_str(
    payload: typ.Mapping[str, typ.Any], key: str, *, parent: str = ""
) -> str:
    """Return the string stored under ``key`` or ``""`` when it is absent."""
    field = _join_field(parent, key)
    match _lookup(payload, key):
        case None:
            return ""
        case str() as text:
            return text
        case value:
            raise InvalidTypeError(field, "a string", value)


def _require_str(
    payload: typ.Mapping[str, typ.Any], key: str, *, parent: str = ""
) -> str:
    """Return the non-empty string stored under ``key``."""
    field = _join_field(parent, key)
    if _lookup(payload, key) is None:
        raise MissingFieldError(field)
    text = _optional_str(payload, key, parent=parent)
    if not text.strip():
        raise InvalidValueError(field, "must not be empty")
    return text


def _positive_int(value: object, field: str) -> int:
    """Return ``value`` when it is an integer greater than zero."""
    match value:
        case None:
            raise MissingFieldError(field)
        case bool():
            raise InvalidValueError(field, "must be a positive integer")
        case int() if value > 0:
            return value
        case int():
            raise InvalidValueError(field, f"must be a positive integer, got {value}")
        case _:
            raise InvalidValueError(
                field, f"must be a positive integer, got {value!r}"
            )


def _validate_url(value: str, field: str) -> str:
    """Return ``value`` when it is an absolute http(s) URL."""
    if any(char.isspace() for char in value):
        raise InvalidValueError(field, f"must be a valid URL, got {value!r}")
    try:
        parsed = urlsplit(value)
        # Raises ValueError for a non-numeric or out-of-range port.
        parsed.port  # noqa: B018
    except ValueError as exc:
        raise InvalidValueError(field, f"must be a valid URL, got {value!r}") from exc
    if parsed.scheme.lower() not in WEB_SCHEMES or not parsed.hostname:
        raise InvalidValueError(
            field, f"must be an absolute http(s) URL, got {value!r}"
        )
    return value


def _validate_route(value: str, field: str) -> str:
    """Return ``value`` when it is a site route or an absolute http(s) URL."""
    if any(char.isspace() for char in value):
        raise InvalidValueError(field, f"must be a valid route, got {value!r}")
    try:
        parsed = urlsplit(value)
    except ValueError as exc:
        raise InvalidValueError(
            field, f"must be a valid route, got {value!r}"
        ) from exc
    if parsed.scheme:
        return _validate_url(value, field)
    if parsed.netloc:
        msg = f"must be a site route or an absolute URL, got {value!r}"
        raise InvalidValueError(field, msg)
    return value


__all__ = [
    "WEB_SCHEMES",
    "_join_field",
    "_lookup",
    "_optional_mapping",
    "_optional_str",
    "_positive_int",
    "_require_mapping",
    "_require_str",
    "_validate_route",
    "_validate_url",
]
