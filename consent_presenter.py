"""
Click-to-load overlay shown in place of an embed until the reader agrees to load it
"""
import logging

from markupsafe import escape

from consent_policy import ConsentPolicy
from embed_service import EmbedService
from messages import MessageResolver
from url_expander import UrlExpander

logger = logging.getLogger(__name__)

CONSENT_TEMPLATE = (
    '<div class="embedvideo-consent" data-show-privacy-notice="{show_privacy_notice}">'
    '{thumbnail}'
    '<div class="embedvideo-overlay">'
    '<div class="embedvideo-loader" role="button">'
    '{title}'
    '<div class="embedvideo-loader__fakeButton">{load}</div>'
    '<div class="embedvideo-loader__footer">'
    '<div class="embedvideo-loader__service">{service_name}</div>'
    '</div>'
    '</div>'
    '<div class="embedvideo-privacyNotice hidden">'
    '<div class="embedvideo-privacyNotice__content">{notice}{privacy_link}</div>'
    '<div class="embedvideo-privacyNotice__buttons">'
    '<button class="embedvideo-privacyNotice__continue">{continue_label}</button>'
    '<button class="embedvideo-privacyNotice__dismiss">{dismiss_label}</button>'
    '</div>'
    '</div>'
    '</div>'
    '</div>'
)


def make_thumb_html(service: EmbedService, url_expander: UrlExpander) -> str:
    """
    Build the thumbnail shown behind the overlay

    Returns:
        A lazy-loaded <picture>, or "" when the service has no local
        thumbnail or its URL cannot be expanded
    """
    if service.local_thumb is None:
        return ""

    try:
        url = url_expander.expand(service.local_thumb.url)
    except Exception as e:
        logger.debug("Skipping thumbnail for %s: %s", service.service_key, e)
        return ""

    return (
        '<picture class="embedvideo-thumbnail">'
        f'<img src="{escape(url)}" loading="lazy" class="embedvideo-thumbnail__image"'
        f' alt="{escape(service.title or "")}"/>'
        '</picture>'
    )


def make_title_html(service: EmbedService) -> str:
    if service.title is None:
        return ""

    return f'<div class="embedvideo-loader__title">{escape(service.title)}</div>'


def make_privacy_policy_link(service: EmbedService, messages: MessageResolver) -> str:
    """Link to the provider's privacy policy, "" when the service has none"""
    if service.privacy_policy_url is None:
        return ""

    return (
        f' <a href="{escape(service.privacy_policy_url)}" rel="nofollow,noopener" target="_blank"'
        f' class="embedvideo-privacyNotice__link">{messages.text("embedvideo-consent-privacy-policy")}</a>'
    )


class ConsentPresenter:
    """Builds the consent overlay for a service"""

    def __init__(self, policy: ConsentPolicy, messages: MessageResolver, url_expander: UrlExpander):
        self.policy = policy
        self.messages = messages
        self.url_expander = url_expander

    def render(self, service: EmbedService) -> str:
        service_name = self.messages.text(f"embedvideo-service-{service.service_key}")
        content_type = self.messages.text(f"embedvideo-type-{service.content_type}")

        return CONSENT_TEMPLATE.format(
            # "1" or "", as the client script expects
            show_privacy_notice="1" if self.policy.show_privacy_notice() else "",
            thumbnail=make_thumb_html(service, self.url_expander),
            title=make_title_html(service),
            load=self.messages.text("embedvideo-load", content_type),
            service_name=service_name,
            notice=self.messages.text("embedvideo-consent-privacy-notice-text", service_name),
            privacy_link=make_privacy_policy_link(service, self.messages),
            continue_label=self.messages.text("embedvideo-consent-privacy-notice-continue"),
            dismiss_label=self.messages.text("embedvideo-consent-privacy-notice-dismiss"),
        )
