"""Typed dataclasses describing the blog site configuration."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from .._constants import CONTACT_CHANNELS, CONTACT_HREF_TEMPLATES


class ConfigError(ValueError):
    """Raised when the site configuration is invalid or cannot be read."""


class SourceUnreadableError(ConfigError):
    """Raised when the configuration source cannot be read or parsed."""

    def __init__(self, source: object, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Cannot read configuration from '{source}': {reason}")


class FieldError(ConfigError):
    """Base class for errors tied to a single configuration field."""

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        super().__init__(message)


class MissingFieldError(FieldError):
    """Raised when a required field is absent or null."""

    def __init__(self, field: str) -> None:
        super().__init__(field, f"Missing required field '{field}'.")


class InvalidTypeError(FieldError):
    """Raised when a field holds the wrong kind of value."""

    def __init__(self, field: str, expected: str, value: object) -> None:
        self.expected = expected
        actual = type(value).__name__
        super().__init__(field, f"Field '{field}' must be {expected}, got {actual}.")


class InvalidValueError(FieldError):
    """Raised when a field has the right kind but an unacceptable value."""

    def __init__(self, field: str, reason: str) -> None:
        self.reason = reason
        super().__init__(field, f"Field '{field}' {reason}.")


@dc.dataclass(frozen=True, slots=True)
class MenuItem:
    """Navigation link shown in the blog sidebar."""

    label: str
    path: str


@dc.dataclass(frozen=True, slots=True)
class ContactLink:
    """Resolved hyperlink for one populated contact channel."""

    channel: str
    value: str
    href: str


@dc.dataclass(frozen=True, slots=True)
class ContactsConfig:
    """Author contact channels; unset channels hold empty strings."""

    email: str = ""
    linkedin: str = ""
    github: str = ""
    twitter: str = ""
    rss: str = ""

    def links(self) -> tuple[ContactLink, ...]:
        """Return hyperlinks for the populated channels in display order."""
        links: list[ContactLink] = []
        for channel in CONTACT_CHANNELS:
            value = getattr(self, channel)
            if not value:
                continue
            href = CONTACT_HREF_TEMPLATES[channel].format(value=value)
            links.append(ContactLink(channel=channel, value=value, href=href))
        return tuple(links)

    def to_mapping(self) -> dict[str, str]:
        """Return the channels as a plain mapping in display order."""
        return {channel: getattr(self, channel) for channel in CONTACT_CHANNELS}


@dc.dataclass(frozen=True, slots=True)
class AuthorConfig:
    """Author card content."""

    name: str
    photo: str
    bio: str = ""
    contacts: ContactsConfig = dc.field(default_factory=ContactsConfig)


@dc.dataclass(frozen=True, slots=True)
class SiteConfig:
    """Validated, immutable configuration for the whole blog."""

    url: str
    title: str
    posts_per_page: int
    author: AuthorConfig
    subtitle: str = ""
    copyright: str = ""
    disqus_shortname: str = ""
    google_analytics_id: str = ""
    menu: tuple[MenuItem, ...] = ()

    def page_title(self, title: str | None = None) -> str:
        """Return a browser title for a page, suffixed with the site title."""
        if not title:
            return self.title
        return f"{title} - {self.title}"

    def to_mapping(self) -> dict[str, typ.Any]:
        """Return the configuration using the camelCase source keys.

        Every key is present, so the result can be fed back to
        :func:`blog_config.config.load_site_config` unchanged.
        """
        return {
            "url": self.url,
            "title": self.title,
            "subtitle": self.subtitle,
            "copyright": self.copyright,
            "disqusShortname": self.disqus_shortname,
            "postsPerPage": self.posts_per_page,
            "googleAnalyticsId": self.google_analytics_id,
            "menu": [{"label": item.label, "path": item.path} for item in self.menu],
            "author": {
                "name": self.author.name,
                "photo": self.author.photo,
                "bio": self.author.bio,
                "contacts": self.author.contacts.to_mapping(),
            },
        }


__all__ = [
    "AuthorConfig",
    "ConfigError",
    "ContactLink",
    "ContactsConfig",
    "FieldError",
    "InvalidTypeError",
    "InvalidValueError",
    "MenuItem",
    "MissingFieldError",
    "SiteConfig",
    "SourceUnreadableError",
]
