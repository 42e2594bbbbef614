"""Load blog configuration sources into typed dataclasses."""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

from .._constants import CONTACT_CHANNELS
from .helpers import (
    _join_field,
    _lookup,
    _optional_mapping,
    _optional_str,
    _positive_int,
    _require_mapping,
    _require_str,
    _validate_route,
    _validate_url,
)
from .models import (
    AuthorConfig,
    ContactsConfig,
    InvalidTypeError,
    MenuItem,
    SiteConfig,
)
from .sources import ConfigSource, apply_env_overrides, read_source


def load_site_config(
    source: ConfigSource, *, environ: cabc.Mapping[str, str] | None = None
) -> SiteConfig:
    """Load and validate the blog configuration.

    Parameters
    ----------
    source : Path or str or Mapping
        Filesystem path to a YAML, JSON, or TOML configuration file (for
        example, ``config/site.yaml``), or an in-memory mapping using the same
        camelCase keys.
    environ : Mapping[str, str] or None, optional
        Environment mapping whose ``BLOG_*`` entries override scalar
        top-level fields. ``None`` (default) disables overrides.

    Returns
    -------
    SiteConfig
        Frozen configuration with every optional field defaulted to an empty
        string or empty menu.

    Raises
    ------
    SourceUnreadableError
        If the source file is missing, cannot be parsed, or is not a mapping.
    MissingFieldError
        If a required field such as ``url`` or ``title`` is absent.
    InvalidTypeError
        If a field holds the wrong kind of value, such as a non-list ``menu``.
    InvalidValueError
        If a field value is unacceptable, such as ``postsPerPage: 0`` or a
        malformed ``url``.

    Examples
    --------
    >>> config = load_site_config(
    ...     {
    ...         "url": "https://x.com",
    ...         "title": "X",
    ...         "postsPerPage": 4,
    ...         "menu": [{"label": "Blog", "path": "/"}],
    ...         "author": {"name": "A", "photo": "/p.jpg", "contacts": {}},
    ...     }
    ... )
    >>> config.posts_per_page, config.menu[0].label, config.author.contacts.email
    (4, 'Blog', '')
    """
    raw = read_source(source)
    if environ is not None:
        raw = apply_env_overrides(raw, environ)

    url = _validate_url(_require_str(raw, "url"), "url")
    title = _require_str(raw, "title")
    posts_per_page = _positive_int(_lookup(raw, "postsPerPage"), "postsPerPage")
    menu = _build_menu(raw.get("menu"))
    author = _build_author(raw.get("author"))

    return SiteConfig(
        url=url,
        title=title,
        posts_per_page=posts_per_page,
        author=author,
        subtitle=_optional_str(raw, "subtitle"),
        copyright=_optional_str(raw, "copyright"),
        disqus_shortname=_optional_str(raw, "disqusShortname"),
        google_analytics_id=_optional_str(raw, "googleAnalyticsId"),
        menu=menu,
    )


def _build_menu(entries: object) -> tuple[MenuItem, ...]:
    """Build navigation entries, preserving their source order."""
    match entries:
        case None:
            return ()
        case list() | tuple() as items:
            pass
        case _:
            raise InvalidTypeError("menu", "a list", entries)
    menu: list[MenuItem] = []
    for index, entry in enumerate(items):
        field = f"menu[{index}]"
        payload = _require_mapping(entry, field)
        label = _require_str(payload, "label", parent=field)
        path = _require_str(payload, "path", parent=field)
        menu.append(
            MenuItem(label=label, path=_validate_route(path, f"{field}.path"))
        )
    return tuple(menu)


def _build_author(payload: object) -> AuthorConfig:
    """Build the author card, defaulting bio and contacts to empty values."""
    author = _require_mapping(payload, "author")
    return AuthorConfig(
        name=_require_str(author, "name", parent="author"),
        photo=_require_str(author, "photo", parent="author"),
        bio=_optional_str(author, "bio", parent="author"),
        contacts=_build_contacts(author.get("contacts")),
    )


def _build_contacts(payload: object) -> ContactsConfig:
    """Build contact channels; unknown channels are ignored."""
    field = _join_field("author", "contacts")
    contacts: typ.Mapping[str, typ.Any] = _optional_mapping(payload, field)
    values = {
        channel: _optional_str(contacts, channel, parent=field)
        for channel in CONTACT_CHANNELS
    }
    return ContactsConfig(**values)


__all__ = ["load_site_config"]
