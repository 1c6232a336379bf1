"""
Site link building.
"""

from travel_assistant.core.config import get_settings


class LinkBuilder:
    """
    Turns a relative path into a fully-qualified site URL.

    Usage:
        links = LinkBuilder("https://example.org")
        links.friendly_url("browse/pennsylvania")
        # -> "https://example.org/browse/pennsylvania/"
    """

    def __init__(self, site_url: str):
        self.site_url = site_url.rstrip("/")

    @classmethod
    def from_settings(cls) -> "LinkBuilder":
        return cls(get_settings().site_url)

    def friendly_url(self, path: str) -> str:
        path = path.strip("/")
        if not path:
            return f"{self.site_url}/"
        return f"{self.site_url}/{path}/"
