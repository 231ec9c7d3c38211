"""
Turns host-relative URLs (thumbnails etc.) into absolute ones
"""
from typing import Optional, Protocol
from urllib.parse import urljoin, urlparse


class UrlExpansionError(Exception):
    """Raised when a URL cannot be made absolute"""
    pass


class UrlExpander(Protocol):
    def expand(self, url: str) -> str:
        ...


class ServerUrlExpander:
    def __init__(self, server: Optional[str] = None):
        """
        Args:
            server: base URL of the host, eg https://wiki.example.org
        """
        self.server = server.rstrip("/") if server else None

    def expand(self, url: str) -> str:
        """Expand a relative URL against the configured server"""
        if not url:
            raise UrlExpansionError("Cannot expand an empty URL")

        if urlparse(url).scheme:
            return url

        if not self.server:
            raise UrlExpansionError(f"No server configured to expand '{url}'")

        # Protocol-relative, eg //upload.example.org/thumb.jpg
        if url.startswith("//"):
            return f"{urlparse(self.server).scheme}:{url}"

        return urljoin(self.server + "/", url)
