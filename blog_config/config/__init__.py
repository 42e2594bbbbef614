"""Load and validate the blog's site configuration.

This subpackage reads the operator-authored configuration (``site.yaml`` by
default, or a JSON/TOML file, or an in-memory mapping), applies optional
``BLOG_*`` environment overrides, validates every field, and produces frozen
dataclasses (:class:`SiteConfig`, :class:`MenuItem`, :class:`AuthorConfig`)
that the external site generator reads for the rest of the process. The
primary entry point is :func:`load_site_config`.

Examples
--------
>>> from pathlib import Path
>>> from blog_config.config import load_site_config
>>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> [item.label for item in site.menu]  # doctest: +SKIP
['Articles', 'About me', 'Contact me']
"""

from .loader import load_site_config
from .models import (
    AuthorConfig,
    ConfigError,
    ContactLink,
    ContactsConfig,
    FieldError,
    InvalidTypeError,
    InvalidValueError,
    MenuItem,
    MissingFieldError,
    SiteConfig,
    SourceUnreadableError,
)
from .sources import ConfigSource, apply_env_overrides, read_source

__all__ = [
    "AuthorConfig",
    "ConfigError",
    "ConfigSource",
    "ContactLink",
    "ContactsConfig",
    "FieldError",
    "InvalidTypeError",
    "InvalidValueError",
    "MenuItem",
    "MissingFieldError",
    "SiteConfig",
    "SourceUnreadableError",
    "apply_env_overrides",
    "load_site_config",
    "read_source",
]
