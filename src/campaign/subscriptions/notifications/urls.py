"""Site scoped URL builders."""

from abc import ABC, abstractmethod
from urllib.parse import urlencode

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured


class BaseUrlBuilder(ABC):
    """Base class for all site URL builders."""

    @abstractmethod
    def build_site_url(self, path: str, params: dict, site_id: int) -> str:
        """Build an absolute URL for a path on a site, with query parameters."""


class SettingsUrlBuilder(BaseUrlBuilder):
    """Build URLs from the site base URLs defined in `settings.CAMPAIGN_SITE_URLS`."""

    def __init__(self, site_urls: dict | None = None):
        """Configure the builder, `site_urls` maps site ids, as int or str, to base URLs."""
        self._site_urls = site_urls

    @property
    def site_urls(self):
        """Return the site base URLs, read from the settings when not given."""
        if self._site_urls is None:
            return getattr(settings, "CAMPAIGN_SITE_URLS", {})
        return self._site_urls

    def build_site_url(self, path: str, params: dict, site_id: int) -> str:
        """Join the site base URL and the path, then append the encoded parameters."""
        try:
            base_url = {str(key): value for key, value in self.site_urls.items()}[str(site_id)]
        except KeyError as e:
            raise ImproperlyConfigured(f"No base URL configured for site {site_id!r}") from e

        url = f"{base_url.rstrip('/')}/{path.lstrip('/')}"
        if params:
            url = f"{url}?{urlencode(params)}"
        return url
