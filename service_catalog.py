"""
Catalogue of known embed providers

Builds EmbedService values from a provider key and a resource id.
"""
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Type

from embed_service import DirectEmbedService, EmbedService, LocalThumbnail, OEmbedService


class UnknownServiceError(Exception):
    """Raised for a service key that is not in the catalogue"""
    pass


class InvalidIdError(ValueError):
    """Raised when an id does not match the provider's id format"""
    pass


@dataclass(frozen=True)
class ServiceDefinition:
    service_class: Type
    url_template: str
    id_pattern: str
    default_width: int = 640
    default_height: int = 360
    content_type: str = "video"
    privacy_policy_url: Optional[str] = None
    iframe_attributes: Dict[str, Any] = field(default_factory=dict)


FRAME_ATTRIBUTES = {
    "frameborder": "0",
    "allow": "accelerometer; clipboard-write; encrypted-media; fullscreen; gyroscope; picture-in-picture",
    "allowfullscreen": True,
}

SERVICES: Dict[str, ServiceDefinition] = {
    "youtube": ServiceDefinition(
        DirectEmbedService,
        "https://www.youtube-nocookie.com/embed/{id}",
        r"[\w-]{11}",
        privacy_policy_url="https://policies.google.com/privacy",
        iframe_attributes=FRAME_ATTRIBUTES,
    ),
    "youtubeplaylist": ServiceDefinition(
        DirectEmbedService,
        "https://www.youtube-nocookie.com/embed/videoseries?list={id}",
        r"[\w-]+",
        privacy_policy_url="https://policies.google.com/privacy",
        iframe_attributes=FRAME_ATTRIBUTES,
    ),
    "vimeo": ServiceDefinition(
        DirectEmbedService,
        "https://player.vimeo.com/video/{id}",
        r"\d+",
        privacy_policy_url="https://vimeo.com/privacy",
        iframe_attributes=FRAME_ATTRIBUTES,
    ),
    "dailymotion": ServiceDefinition(
        DirectEmbedService,
        "https://www.dailymotion.com/embed/video/{id}",
        r"[a-zA-Z0-9]+",
        privacy_policy_url="https://www.dailymotion.com/legal/privacy",
        iframe_attributes=FRAME_ATTRIBUTES,
    ),
    # Twitch refuses to play unless the embedding host is passed as parent
    "twitch": ServiceDefinition(
        DirectEmbedService,
        "https://player.twitch.tv/?channel={id}&parent={parent}",
        r"\w{3,25}",
        privacy_policy_url="https://www.twitch.tv/p/legal/privacy-notice/",
        iframe_attributes=FRAME_ATTRIBUTES,
    ),
    "soundcloud": ServiceDefinition(
        OEmbedService,
        "https://soundcloud.com/{id}",
        r"[\w-]+/[\w-]+",
        default_width=640,
        default_height=166,
        content_type="audio",
        privacy_policy_url="https://soundcloud.com/pages/privacy",
    ),
    "spotifytrack": ServiceDefinition(
        OEmbedService,
        "https://open.spotify.com/track/{id}",
        r"[a-zA-Z0-9]{22}",
        default_width=300,
        default_height=80,
        content_type="audio",
        privacy_policy_url="https://www.spotify.com/legal/privacy-policy/",
    ),
}


def create_service(
    service_key: str,
    resource_id: str,
    width: Optional[int] = None,
    height: Optional[int] = None,
    title: Optional[str] = None,
    local_thumb: Optional[str] = None,
    parent: str = "localhost",
) -> EmbedService:
    """
    Build a service for a known provider

    Args:
        service_key: catalogue key, eg "youtube"
        resource_id: provider id of the video/track
        width: requested width; height follows the default aspect ratio when omitted
        height: requested height
        title: optional title shown on the consent overlay
        local_thumb: relative URL of a thumbnail stored on the host
        parent: host name passed to providers that require it (Twitch)

    Raises:
        UnknownServiceError: if the key is not in the catalogue
        InvalidIdError: if the id does not match the provider's format
    """
    definition = SERVICES.get(service_key)
    if definition is None:
        raise UnknownServiceError(f"Unknown service '{service_key}'")

    resource_id = (resource_id or "").strip()
    if not re.fullmatch(definition.id_pattern, resource_id):
        raise InvalidIdError(f"'{resource_id}' is not a valid {service_key} id")

    width, height = _resolve_size(definition, width, height)

    return definition.service_class(
        url=definition.url_template.format(id=resource_id, parent=parent),
        service_key=service_key,
        width=width,
        height=height,
        default_width=definition.default_width,
        default_height=definition.default_height,
        content_type=definition.content_type,
        title=title,
        local_thumb=LocalThumbnail(local_thumb) if local_thumb else None,
        privacy_policy_url=definition.privacy_policy_url,
        iframe_attributes=dict(definition.iframe_attributes),
    )


def _resolve_size(definition: ServiceDefinition, width: Optional[int], height: Optional[int]):
    """Fill in missing or non-positive sizes from the provider defaults"""
    if not width or width <= 0:
        width = None
    if not height or height <= 0:
        height = None

    if width is None:
        return definition.default_width, height or definition.default_height

    if height is None:
        height = round(width * definition.default_height / definition.default_width)

    return width, height
