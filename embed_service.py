"""
Embed service data model

A service is either a direct frame (the host builds the iframe itself) or an
oEmbed service (a provider endpoint hands back ready-made markup).
"""
from dataclasses import dataclass, field, fields, replace
from typing import Any, Dict, Mapping, Optional, Union


@dataclass(frozen=True)
class LocalThumbnail:
    """Thumbnail stored on the host, referenced by a relative URL"""
    url: str


@dataclass(frozen=True)
class _ServiceData:
    url: str
    service_key: str
    width: int
    height: int
    default_width: int
    default_height: int
    content_type: str = "video"
    title: Optional[str] = None
    local_thumb: Optional[LocalThumbnail] = None
    privacy_policy_url: Optional[str] = None
    iframe_attributes: Mapping[str, Any] = field(default_factory=dict)
    # Pre-rendered inner markup; the live frame is used when unset
    fragment: Optional[str] = None


@dataclass(frozen=True)
class DirectEmbedService(_ServiceData):
    """Service embedded through an iframe pointing at ``url``"""


@dataclass(frozen=True)
class OEmbedService(_ServiceData):
    """Service whose markup is resolved through the provider's oEmbed endpoint"""


EmbedService = Union[DirectEmbedService, OEmbedService]


def is_oembed(service: EmbedService) -> bool:
    return isinstance(service, OEmbedService)


# camelCase option names accepted alongside the field names
_CONFIG_ALIASES = {
    "class": "css_class",
    "withConsent": "with_consent",
}


@dataclass(frozen=True)
class RenderConfig:
    """Options for the outer ``<figure>`` of a rendered embed"""
    css_class: str = "embedvideo"
    style: str = ""
    service: str = ""
    with_consent: bool = False
    autoresize: bool = False
    description: str = ""

    @classmethod
    def merge(cls, overrides: Union["RenderConfig", Mapping[str, Any], None] = None) -> "RenderConfig":
        """
        Merge caller overrides over the defaults

        Args:
            overrides: a RenderConfig, or a mapping keyed by field names or the
                camelCase option names (``class``, ``withConsent``)

        Returns:
            A new RenderConfig; caller values win per key, unknown keys are ignored
        """
        if overrides is None:
            return cls()
        if isinstance(overrides, RenderConfig):
            return overrides

        known = {f.name for f in fields(cls)}
        values: Dict[str, Any] = {}
        for key, value in overrides.items():
            name = _CONFIG_ALIASES.get(key, key)
            if name in known:
                values[name] = value

        return replace(cls(), **values)
