import pytest

from consent_policy import ConsentPolicy, HashConfig, REQUIRE_CONSENT, SHOW_PRIVACY_NOTICE
from embed_service import DirectEmbedService, LocalThumbnail, OEmbedService
from html_formatter import HtmlFormatter
from messages import MessageCatalog
from oembed_client import OEmbedData, StaticOEmbedResolver
from url_expander import ServerUrlExpander

SERVER = "https://wiki.example.org"
VIDEO_URL = "https://www.youtube-nocookie.com/embed/dQw4w9WgXcQ"
TRACK_URL = "https://soundcloud.com/artist/track"


class FailingExpander:
    def expand(self, url):
        raise RuntimeError("expansion failed")


def make_direct(**overrides):
    values = dict(
        url=VIDEO_URL,
        service_key="youtube",
        width=640,
        height=360,
        default_width=640,
        default_height=360,
        title="Never Gonna Give You Up",
        local_thumb=LocalThumbnail("/images/thumb.jpg"),
        privacy_policy_url="https://policies.google.com/privacy",
        iframe_attributes={"frameborder": "0", "allowfullscreen": True},
    )
    values.update(overrides)
    return DirectEmbedService(**values)


def make_oembed(**overrides):
    values = dict(
        url=TRACK_URL,
        service_key="soundcloud",
        width=640,
        height=166,
        default_width=640,
        default_height=166,
        content_type="audio",
    )
    values.update(overrides)
    return OEmbedService(**values)


def make_formatter(consent=False, privacy_notice=False, config=None, expander=None, resolver=None):
    if config is None:
        config = HashConfig({REQUIRE_CONSENT: consent, SHOW_PRIVACY_NOTICE: privacy_notice})
    return HtmlFormatter(
        policy=ConsentPolicy(config),
        messages=MessageCatalog(),
        url_expander=expander or ServerUrlExpander(SERVER),
        oembed_resolver=resolver or StaticOEmbedResolver({
            TRACK_URL: OEmbedData(html='<iframe src="https://w.soundcloud.com/player/"></iframe>'),
        }),
    )


@pytest.fixture
def direct_service():
    return make_direct()


@pytest.fixture
def oembed_service():
    return make_oembed()


@pytest.fixture
def formatter():
    return make_formatter()


@pytest.fixture
def consent_formatter():
    return make_formatter(consent=True)
