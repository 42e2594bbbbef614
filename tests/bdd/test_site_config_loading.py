"""Behaviour tests for loading the blog site configuration.

These scenarios write a ``site.yaml`` to a temporary directory, load it the
way the site generator does, and assert on the resulting value or the error
raised. They are backed by the ``site_config_loading.feature`` file.

Usage:
    Run these behaviour tests with pytest, for example:

        pytest tests/bdd/test_site_config_loading.py -v

Prerequisites:
    - The ``dev`` extra (pytest and pytest-bdd) installed.
    - Access to ``features/site_config_loading.feature`` within this
      repository.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path
from textwrap import dedent

import pytest
from pytest_bdd import given, parsers, scenarios, then, when

from blog_config.config import (
    ConfigError,
    InvalidValueError,
    MissingFieldError,
    SiteConfig,
    load_site_config,
)

FEATURE_FILE = (
    Path(__file__).resolve().parents[2] / "features" / "site_config_loading.feature"
)
scenarios(FEATURE_FILE)

ScenarioState = dict[str, typ.Any]

BASE_CONFIG = dedent(
    """
    url: https://clstephenson.com
    title: Blog by Chris Stephenson
    postsPerPage: 4
    menu:
      - label: Articles
        path: /
      - label: About me
        path: /pages/about
      - label: Contact me
        path: /pages/contacts
    author:
      name: Chris Stephenson
      photo: /profile-pic.jpg
      contacts:
        email: clstephenson@gmail.com
        github: clstephenson
    """
).strip()


@pytest.fixture
def scenario_state() -> ScenarioState:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


def _write(tmp_path: Path, scenario_state: ScenarioState, text: str) -> None:
    """Write ``text`` to ``site.yaml`` and remember its path."""
    config_path = tmp_path / "site.yaml"
    config_path.write_text(text + "\n", encoding="utf-8")
    scenario_state["config_path"] = config_path


@given("a site config file with a three entry menu and no subtitle")
def given_complete_config(tmp_path: Path, scenario_state: ScenarioState) -> None:
    """Write a valid configuration that omits every optional scalar."""
    _write(tmp_path, scenario_state, BASE_CONFIG)


@given("a site config file without a url")
def given_config_without_url(tmp_path: Path, scenario_state: ScenarioState) -> None:
    """Write a configuration whose ``url`` line has been removed."""
    lines = [line for line in BASE_CONFIG.splitlines() if not line.startswith("url:")]
    _write(tmp_path, scenario_state, "\n".join(lines))


@given(parsers.parse("a site config file with postsPerPage set to {value:d}"))
def given_config_with_page_size(
    tmp_path: Path, scenario_state: ScenarioState, value: int
) -> None:
    """Write a configuration with the given page size."""
    text = BASE_CONFIG.replace("postsPerPage: 4", f"postsPerPage: {value}")
    _write(tmp_path, scenario_state, text)


@when("I load the site config")
def when_load(scenario_state: ScenarioState) -> None:
    """Load the configuration, letting any error fail the scenario."""
    config_path = typ.cast("Path", scenario_state["config_path"])
    scenario_state["config"] = load_site_config(config_path)


@when("I try to load the site config")
def when_try_load(scenario_state: ScenarioState) -> None:
    """Load the configuration and capture the expected failure."""
    config_path = typ.cast("Path", scenario_state["config_path"])
    with pytest.raises(ConfigError) as excinfo:
        load_site_config(config_path)
    scenario_state["error"] = excinfo.value


@then(parsers.parse('the menu labels are "{labels}"'))
def then_menu_labels(scenario_state: ScenarioState, labels: str) -> None:
    """Menu entries keep the order they were written in."""
    config = typ.cast("SiteConfig", scenario_state["config"])
    expected = [label.strip() for label in labels.split(",")]
    actual = [item.label for item in config.menu]
    assert actual == expected, f"Expected menu {expected!r}, got {actual!r}"


@then("the subtitle is empty")
def then_subtitle_empty(scenario_state: ScenarioState) -> None:
    """Absent optional strings are loaded as empty strings."""
    config = typ.cast("SiteConfig", scenario_state["config"])
    assert config.subtitle == ""


@then(parsers.parse('the github contact links to "{href}"'))
def then_github_href(scenario_state: ScenarioState, href: str) -> None:
    """The GitHub handle expands into a profile link."""
    config = typ.cast("SiteConfig", scenario_state["config"])
    links = {link.channel: link.href for link in config.author.contacts.links()}
    assert links["github"] == href
    assert "twitter" not in links, "Unset channels must not produce links"


@then(parsers.parse('loading fails with a missing field error for "{field}"'))
def then_missing_field(scenario_state: ScenarioState, field: str) -> None:
    """The loader reports the absent required field."""
    error = scenario_state["error"]
    assert isinstance(error, MissingFieldError), f"Unexpected error {error!r}"
    assert error.field == field


@then(parsers.parse('loading fails with an invalid value error for "{field}"'))
def then_invalid_value(scenario_state: ScenarioState, field: str) -> None:
    """The loader reports the field whose value is unacceptable."""
    error = scenario_state["error"]
    assert isinstance(error, InvalidValueError), f"Unexpected error {error!r}"
    assert error.field == field
