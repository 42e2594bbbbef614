"""Validated site configuration for a personal blog.

This package turns the operator-authored blog configuration (site URL, title,
menu, author card, contact links) into a frozen, typed value that the static
site generator reads for the rest of the process. It also exposes the
``blog-config`` CLI used to check the configuration before a build.

Exports
-------
- ``load_site_config``: Parse and validate a configuration source.
- ``SiteConfig``: The validated configuration value.
- ``ConfigError``: Base class for every configuration failure.
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from blog_config import load_site_config
>>> site = load_site_config("config/site.yaml")  # doctest: +SKIP
>>> site.posts_per_page  # doctest: +SKIP
4
>>> from blog_config import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main
from .config import ConfigError, SiteConfig, load_site_config

__all__ = ["ConfigError", "SiteConfig", "app", "load_site_config", "main"]
