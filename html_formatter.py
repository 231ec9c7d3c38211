"""
HTML formatter for embedded media

Renders a service either as a bare provider frame or as a <figure> wrapper
that can carry a caption and a click-to-load consent overlay.
"""
import logging
from typing import Any, Dict, Mapping, Optional, Union

from markupsafe import escape

from attribute_serializer import AttributeSerializer
from consent_policy import ConsentPolicy
from consent_presenter import ConsentPresenter
from embed_service import EmbedService, RenderConfig, is_oembed
from messages import MessageResolver
from oembed_client import OEmbedResolver, ResolutionError
from url_expander import UrlExpander

logger = logging.getLogger(__name__)

AUTORESIZE_CLASS = "embedvideo--autoresize"


class HtmlFormatter:
    """Builds the complete HTML output for embed services"""

    def __init__(self, policy: ConsentPolicy, messages: MessageResolver,
                 url_expander: UrlExpander, oembed_resolver: OEmbedResolver):
        """
        Initialize the formatter

        Args:
            policy: consent flags, read on every render
            messages: localized text for the consent overlay
            url_expander: makes thumbnail URLs absolute
            oembed_resolver: resolves markup for oEmbed services
        """
        self.policy = policy
        self.oembed_resolver = oembed_resolver
        self.serializer = AttributeSerializer()
        self.consent_presenter = ConsentPresenter(policy, messages, url_expander)

    def render(self, service: EmbedService,
               config: Union[RenderConfig, Mapping[str, Any], None] = None) -> str:
        """
        Render the full markup for a service

        oEmbed services are returned as their frame only, without caption,
        wrapper or consent overlay.

        Args:
            service: the service to embed
            config: RenderConfig or a mapping of overrides (class, style,
                service, withConsent, autoresize, description)

        Returns:
            The HTML string
        """
        if is_oembed(service):
            return self.make_frame(service)

        config = RenderConfig.merge(config)
        width = int(service.width)
        height = int(service.height)

        css_class = config.css_class
        container_style = config.style or ""
        wrapper_style = ""

        if config.autoresize is True:
            css_class = f"{css_class} {AUTORESIZE_CLASS}"
        else:
            if container_style and not container_style.rstrip().endswith(";"):
                container_style += ";"
            container_style += f"width:{width}px"
            wrapper_style = f"height:{height}px"

        container_attributes = " ".join(part for part in (
            f'class="{escape(css_class)}"',
            f'data-service="{escape(config.service)}"',
            self._build_iframe_config(service, width, height),
            self._build_style(container_style),
        ) if part)

        wrapper_attributes = " ".join(part for part in (
            'class="embedvideo-wrapper"',
            self._build_style(wrapper_style),
        ) if part)

        consent = self.consent_presenter.render(service) if config.with_consent is True else ""

        return (
            f"<figure {container_attributes}>"
            f"<span {wrapper_attributes}>{consent}{self._inner_html(service)}</span>"
            f"{self._build_caption(config.description)}"
            "</figure>"
        )

    def make_frame(self, service: EmbedService) -> str:
        """
        Render the frame element for a service

        Returns:
            For oEmbed services the provider markup, or the resolution error
            message as plain text. For direct services an <iframe>, or "" when
            consent is required (the frame is then built client-side).
        """
        if is_oembed(service):
            try:
                return self.oembed_resolver.resolve(service.url).html
            except ResolutionError as e:
                logger.info("Could not resolve %s: %s", service.url, e)
                return str(e)

        attributes: Dict[str, Any] = dict(service.iframe_attributes)
        attributes["width"] = service.width
        attributes["height"] = service.height

        if self.policy.consent_required():
            return ""

        attributes["src"] = service.url

        return f"<iframe {self.serializer.serialize(attributes)}></iframe>"

    def _inner_html(self, service: EmbedService) -> str:
        if service.fragment is not None:
            return service.fragment
        return self.make_frame(service)

    def _build_iframe_config(self, service: EmbedService, width: int, height: int) -> str:
        """Build the data-iframeconfig attribute used to create the frame after consent"""
        if not self.policy.consent_required():
            return ""

        attributes: Dict[str, Any] = {}
        if width != service.default_width:
            attributes["width"] = width
        if height != service.default_height:
            attributes["height"] = height
        attributes["src"] = service.url

        try:
            return f"data-iframeconfig='{self.serializer.serialize_json(attributes)}'"
        except (TypeError, ValueError) as e:
            logger.debug("Leaving out iframe config for %s: %s", service.url, e)
            return ""

    def _build_style(self, style: str) -> str:
        if not style:
            return ""
        return f'style="{escape(style)}"'

    def _build_caption(self, description: Optional[str]) -> str:
        if not description:
            return ""
        return f"<figcaption>{description}</figcaption>"
