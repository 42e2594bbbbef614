"""Read raw configuration payloads from files, mappings, and the environment.

Files are parsed by suffix: ``.toml`` goes through :mod:`tomllib`, everything
else (``.yaml``, ``.yml``, ``.json``) through ``ruamel.yaml`` in safe mode
pinned to YAML 1.2, which also accepts JSON documents. Every failure to read
or parse a source is reported as :class:`SourceUnreadableError`.
"""

from __future__ import annotations

import collections.abc as cabc
import tomllib
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .._constants import ENV_OVERRIDES, ENV_PREFIX
from .models import SourceUnreadableError

ConfigSource = Path | str | cabc.Mapping[str, typ.Any]


def read_source(source: ConfigSource) -> dict[str, typ.Any]:
    """Return the raw top-level mapping held by ``source``.

    Parameters
    ----------
    source : Path or str or Mapping
        Path to a YAML, JSON, or TOML file, or an already-built mapping.

    Returns
    -------
    dict[str, Any]
        Shallow copy of the top-level mapping; callers may add keys freely.

    Raises
    ------
    SourceUnreadableError
        If the file is missing, unreadable, unparseable, or does not hold a
        mapping at the top level.
    """
    match source:
        case cabc.Mapping():
            loaded: object = source
        case Path() | str():
            loaded = _read_file(Path(source))
        case _:
            reason = f"unsupported source type {type(source).__name__}"
            raise SourceUnreadableError(source, reason)
    if loaded is None:
        return {}
    if not isinstance(loaded, cabc.Mapping):
        msg = "top-level structure must be a mapping"
        raise SourceUnreadableError(source, msg)
    return dict(loaded)


def _read_file(path: Path) -> object:
    """Parse the file at ``path`` according to its suffix."""
    if not path.is_file():
        raise SourceUnreadableError(path, "file not found")
    try:
        if path.suffix.lower() == ".toml":
            with path.open("rb") as handle:
                return tomllib.load(handle)
        loader = YAML(typ="safe")
        loader.version = (1, 2)
        with path.open("r", encoding="utf-8") as handle:
            return loader.load(handle)
    except OSError as exc:
        raise SourceUnreadableError(path, exc.strerror or str(exc)) from exc
    except UnicodeDecodeError as exc:
        raise SourceUnreadableError(path, "file is not valid UTF-8") from exc
    except (YAMLError, tomllib.TOMLDecodeError) as exc:
        raise SourceUnreadableError(path, f"parse error: {exc}") from exc


def apply_env_overrides(
    raw: cabc.Mapping[str, typ.Any], environ: cabc.Mapping[str, str]
) -> dict[str, typ.Any]:
    """Return a copy of ``raw`` with ``BLOG_*`` environment values applied.

    Only scalar top-level fields can be overridden. ``BLOG_POSTS_PER_PAGE`` is
    converted to an integer when it is a decimal literal; anything else is
    kept as text so validation reports it against ``postsPerPage``.

    Examples
    --------
    >>> apply_env_overrides({"title": "Old"}, {"BLOG_TITLE": "New"})
    {'title': 'New'}
    >>> apply_env_overrides({}, {"BLOG_POSTS_PER_PAGE": "6"})
    {'postsPerPage': 6}
    """
    merged = dict(raw)
    for key, suffix in ENV_OVERRIDES.items():
        value = environ.get(f"{ENV_PREFIX}{suffix}")
        if value is None:
            continue
        if key == "postsPerPage":
            merged[key] = _coerce_int(value)
        else:
            merged[key] = value
    return merged


def _coerce_int(value: str) -> int | str:
    """Return ``value`` as an int when it is a decimal literal."""
    text = value.strip()
    unsigned = text[1:] if text[:1] in ("+", "-") else text
    if unsigned.isdecimal() and unsigned.isascii():
        return int(text)
    return value


__all__ = ["ConfigSource", "apply_env_overrides", "read_source"]
