"""
Portfolio configuration.

Holds the identity of the person the page belongs to and the settings of the
project pipeline, either passed explicitly or read from the environment.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from repofolio.exceptions import ConfigurationError

DEFAULT_API_BASE_URL = "https://api.github.com"


@dataclass(frozen=True)
class PortfolioConfig:
    """
    Configuration for a portfolio page.

    Example:
        ```python
        from repofolio.config import PortfolioConfig

        config = PortfolioConfig(
            username="octocat",
            contact_email="octocat@example.com",
            social_links={"GitHub": "https://github.com/octocat"},
        )

        # Or read it from REPOFOLIO_* environment variables
        config = PortfolioConfig.from_env()
        ```
    """

    username: str
    contact_email: str | None = None
    social_links: Mapping[str, str] = field(default_factory=dict, hash=False)
    api_base_url: str = DEFAULT_API_BASE_URL
    timeout: float | None = None  # None leaves httpx's default in place
    date_format: str | None = None  # strftime pattern; None means M/D/YYYY
    timezone: str = "UTC"

    def __post_init__(self) -> None:
        if not self.username or not self.username.strip():
            raise ConfigurationError("username must be a non-empty string")

        if self.contact_email is not None and "@" not in self.contact_email:
            raise ConfigurationError(
                f"Invalid contact email: {self.contact_email!r}"
            )

        # Read-only copy; excluded from the hash
        object.__setattr__(self, "social_links", MappingProxyType(dict(self.social_links)))

        for label, url in self.social_links.items():
            if not label:
                raise ConfigurationError("Social link labels must be non-empty")
            if not url.startswith(("http://", "https://")):
                raise ConfigurationError(
                    f"Social link {label!r} must be an http(s) URL, got {url!r}"
                )

        if not self.api_base_url.startswith(("http://", "https://")):
            raise ConfigurationError(
                f"api_base_url must be an http(s) URL, got {self.api_base_url!r}"
            )

        if self.timeout is not None and self.timeout <= 0:
            raise ConfigurationError("timeout must be positive")

        try:
            ZoneInfo(self.timezone)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ConfigurationError(f"Unknown timezone: {self.timezone!r}") from e

    @property
    def tzinfo(self) -> ZoneInfo:
        """The viewer time zone used when formatting update dates."""
        return ZoneInfo(self.timezone)

    @classmethod
    def from_env(cls) -> "PortfolioConfig":
        """
        Create a configuration from environment variables.

        Environment variables:
            REPOFOLIO_USERNAME: GitHub username whose repositories are listed (required)
            REPOFOLIO_CONTACT_EMAIL: Contact address shown on the page (optional)
            REPOFOLIO_SOCIAL_LINKS: Comma separated Label=url pairs (optional)
            REPOFOLIO_API_BASE_URL: API root (optional, default: https://api.github.com)
            REPOFOLIO_TIMEOUT: Request timeout in seconds (optional)
            REPOFOLIO_DATE_FORMAT: strftime pattern for update dates (optional)
            REPOFOLIO_TIMEZONE: IANA time zone of the viewer (optional, default: UTC)

        Returns:
            Validated PortfolioConfig instance

        Raises:
            ConfigurationError: If required variables are missing or values are invalid
        """
        username = os.environ.get("REPOFOLIO_USERNAME")
        if not username:
            raise ConfigurationError("REPOFOLIO_USERNAME environment variable not set")

        timeout_str = os.environ.get("REPOFOLIO_TIMEOUT")
        timeout: float | None = None
        if timeout_str:
            try:
                timeout = float(timeout_str)
            except ValueError as e:
                raise ConfigurationError(
                    f"Invalid REPOFOLIO_TIMEOUT: {timeout_str!r}"
                ) from e

        return cls(
            username=username,
            contact_email=os.environ.get("REPOFOLIO_CONTACT_EMAIL") or None,
            social_links=parse_social_links(os.environ.get("REPOFOLIO_SOCIAL_LINKS", "")),
            api_base_url=os.environ.get("REPOFOLIO_API_BASE_URL", DEFAULT_API_BASE_URL),
            timeout=timeout,
            date_format=os.environ.get("REPOFOLIO_DATE_FORMAT") or None,
            timezone=os.environ.get("REPOFOLIO_TIMEZONE", "UTC"),
        )


def parse_social_links(value: str) -> dict[str, str]:
    """
    Parse a ``Label=url,Label=url`` string into an ordered mapping.

    Raises:
        ConfigurationError: If an entry has no ``=`` separator
    """
    links: dict[str, str] = {}
    for entry in value.split(","):
        entry = entry.strip()
        if not entry:
            continue
        label, sep, url = entry.partition("=")
        if not sep:
            raise ConfigurationError(
                f"Invalid social link entry {entry!r}, expected Label=url"
            )
        links[label.strip()] = url.strip()
    return links
