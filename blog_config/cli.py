"""Cyclopts CLI entrypoint for checking and inspecting the blog configuration.

The ``blog-config`` console script defined here loads the site configuration
exactly the way the site generator does, including ``BLOG_*`` environment
overrides, and reports the outcome. It never writes files. Typical usage is
running ``blog-config check`` in CI before a site build so a malformed
configuration fails fast, and ``blog-config show`` to see the resolved values.

Examples
--------
Validate the default configuration:

>>> from blog_config.cli import main
>>> main()  # doctest: +SKIP

Print the resolved configuration from a custom file:

>>> from blog_config.cli import app
>>> app(["show", "--config", "site.json"])  # doctest: +SKIP
"""

from __future__ import annotations

import os
import sys
import typing as typ
from pathlib import Path

import cyclopts
import msgspec.json
from cyclopts import App, Parameter

from ._constants import DEFAULT_CONFIG, ENV_PREFIX
from .config import ConfigError, SiteConfig, load_site_config

app = App(name="blog-config", config=cyclopts.config.Env(ENV_PREFIX, command=False))  # type: ignore[unknown-argument]

ConfigOption = typ.Annotated[
    Path, Parameter(help="Path to site config", env_var=f"{ENV_PREFIX}CONFIG")
]


def _load(config: Path) -> SiteConfig:
    """Load ``config`` with process environment overrides or exit with status 1."""
    try:
        return load_site_config(config, environ=os.environ)
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc


@app.command(help="Validate the site configuration and summarize it.")
def check(*, config: ConfigOption = DEFAULT_CONFIG) -> None:
    """Validate the site configuration.

    Parameters
    ----------
    config : Path, optional
        Path to the configuration file; defaults to ``config/site.yaml`` and
        can be overridden via ``BLOG_CONFIG``.

    Raises
    ------
    SystemExit
        With status 1 when the configuration fails to load; the reason is
        printed to stderr.
    """
    site = _load(config)
    entries = len(site.menu)
    noun = "entry" if entries == 1 else "entries"
    print(f"ok: {site.title} ({site.url}), {entries} menu {noun}")


@app.command(help="Print the resolved site configuration as JSON.")
def show(*, config: ConfigOption = DEFAULT_CONFIG) -> None:
    """Print the validated configuration using its camelCase source keys."""
    site = _load(config)
    payload = msgspec.json.format(msgspec.json.encode(site.to_mapping()), indent=2)
    print(payload.decode("utf-8"))


def main() -> None:
    """Invoke the Cyclopts application that powers the ``blog-config`` command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
