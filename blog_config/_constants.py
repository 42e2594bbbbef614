"""Common literal values used across blog_config.

These constants keep the default config location, environment variable names,
and contact channel metadata centralized so the loader, CLI, and tests import
the same values without drifting.

Examples
--------
>>> from blog_config import _constants
>>> _constants.CONTACT_HREF_TEMPLATES["github"].format(value="octocat")
'https://github.com/octocat'
>>> _constants.ENV_PREFIX + "TITLE"
'BLOG_TITLE'
"""

from pathlib import Path

DEFAULT_CONFIG = Path("config/site.yaml")

ENV_PREFIX = "BLOG_"

# Source key -> environment variable suffix for scalar overrides.
ENV_OVERRIDES: dict[str, str] = {
    "url": "URL",
    "title": "TITLE",
    "subtitle": "SUBTITLE",
    "copyright": "COPYRIGHT",
    "disqusShortname": "DISQUS_SHORTNAME",
    "postsPerPage": "POSTS_PER_PAGE",
    "googleAnalyticsId": "GOOGLE_ANALYTICS_ID",
}

# snake_case spellings accepted alongside the camelCase source keys.
KEY_ALIASES: dict[str, str] = {
    "disqusShortname": "disqus_shortname",
    "postsPerPage": "posts_per_page",
    "googleAnalyticsId": "google_analytics_id",
}

CONTACT_CHANNELS: tuple[str, ...] = ("email", "linkedin", "github", "twitter", "rss")

CONTACT_HREF_TEMPLATES: dict[str, str] = {
    "email": "mailto:{value}",
    "linkedin": "https://www.linkedin.com/in/{value}",
    "github": "https://github.com/{value}",
    "twitter": "https://www.twitter.com/{value}",
    "rss": "{value}",
}
