"""
oEmbed client for resolving provider markup from a resource URL
"""
import logging
from dataclasses import dataclass
from typing import Dict, Mapping, Optional, Protocol
from urllib.parse import urlparse

import requests

logger = logging.getLogger(__name__)

# oEmbed endpoints by resource host
# Add new providers here
OEMBED_ENDPOINTS = {
    'soundcloud.com': 'https://soundcloud.com/oembed',
    'open.spotify.com': 'https://open.spotify.com/oembed',
}


class ResolutionError(Exception):
    """Raised when a resource URL cannot be resolved to embeddable markup"""
    pass


@dataclass(frozen=True)
class OEmbedData:
    html: str
    title: Optional[str] = None
    provider_name: Optional[str] = None
    thumbnail_url: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None

    @classmethod
    def from_payload(cls, payload: Mapping) -> "OEmbedData":
        """Build from a decoded oEmbed JSON response"""
        html = payload.get('html') if isinstance(payload, Mapping) else None
        if not isinstance(html, str) or not html:
            raise ResolutionError("The oEmbed response did not contain any HTML")

        return cls(
            html=html,
            title=payload.get('title'),
            provider_name=payload.get('provider_name'),
            thumbnail_url=payload.get('thumbnail_url'),
            width=payload.get('width'),
            height=payload.get('height'),
        )


class OEmbedResolver(Protocol):
    def resolve(self, url: str) -> OEmbedData:
        ...


class OEmbedClient:
    def __init__(self, endpoints: Optional[Mapping[str, str]] = None, timeout: float = 10):
        """
        Initialize oEmbed client

        Args:
            endpoints: oEmbed endpoint per resource host (defaults to OEMBED_ENDPOINTS)
            timeout: request timeout in seconds
        """
        self.endpoints: Dict[str, str] = dict(OEMBED_ENDPOINTS if endpoints is None else endpoints)
        self.timeout = timeout

    def endpoint_for(self, url: str) -> Optional[str]:
        """Find the endpoint registered for the URL's host (www. is ignored)"""
        host = (urlparse(url).hostname or '').lower()
        if host.startswith('www.'):
            host = host[4:]
        return self.endpoints.get(host)

    def resolve(self, url: str) -> OEmbedData:
        """
        Fetch the oEmbed data for a resource

        Raises:
            ResolutionError: with a message fit for display in place of the embed
        """
        endpoint = self.endpoint_for(url)
        if not endpoint:
            raise ResolutionError(f"No oEmbed provider is known for {url}")

        try:
            response = requests.get(
                endpoint,
                params={'url': url, 'format': 'json'},
                timeout=self.timeout
            )
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as e:
            logger.info("oEmbed request for %s failed: %s", url, e)
            raise ResolutionError(f"Could not load embed data for {url}") from e
        except ValueError as e:
            raise ResolutionError(f"Invalid oEmbed response for {url}") from e

        return OEmbedData.from_payload(payload)


class StaticOEmbedResolver:
    """Resolver serving canned responses, keyed by resource URL"""

    def __init__(self, responses: Optional[Mapping[str, OEmbedData]] = None):
        self.responses = dict(responses or {})

    def resolve(self, url: str) -> OEmbedData:
        try:
            return self.responses[url]
        except KeyError:
            raise ResolutionError(f"No oEmbed data for {url}") from None
