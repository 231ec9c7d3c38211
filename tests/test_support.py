import pytest

from consent_policy import (
    ConfigError,
    ConsentPolicy,
    EnvironmentConfig,
    HashConfig,
    REQUIRE_CONSENT,
    SHOW_PRIVACY_NOTICE,
)
from embed_service import DirectEmbedService, OEmbedService, RenderConfig, is_oembed
from messages import MessageCatalog
from url_expander import ServerUrlExpander, UrlExpansionError


# Consent policy

def test_hash_config_missing_key():
    with pytest.raises(ConfigError):
        HashConfig().get(REQUIRE_CONSENT)


def test_environment_config_parses_flags():
    config = EnvironmentConfig({
        "EMBEDVIDEO_REQUIRE_CONSENT": "Yes",
        "EMBEDVIDEO_SHOW_PRIVACY_NOTICE": "0",
    })
    assert config.get(REQUIRE_CONSENT) is True
    assert config.get(SHOW_PRIVACY_NOTICE) is False


def test_environment_config_unset_and_unknown():
    config = EnvironmentConfig({})
    assert config.get(REQUIRE_CONSENT) is False
    with pytest.raises(ConfigError):
        config.get("EmbedVideoSomethingElse")


def test_policy_reads_flags():
    policy = ConsentPolicy(HashConfig({REQUIRE_CONSENT: True, SHOW_PRIVACY_NOTICE: True}))
    assert policy.consent_required() is True
    assert policy.show_privacy_notice() is True


def test_policy_failure_is_disabled():
    policy = ConsentPolicy(HashConfig())
    assert policy.consent_required() is False
    assert policy.show_privacy_notice() is False


def test_policy_only_accepts_true():
    policy = ConsentPolicy(HashConfig({REQUIRE_CONSENT: "true", SHOW_PRIVACY_NOTICE: 1}))
    assert policy.consent_required() is False
    assert policy.show_privacy_notice() is False


# Render config

def test_render_config_defaults():
    config = RenderConfig.merge()
    assert config == RenderConfig(
        css_class="embedvideo", style="", service="",
        with_consent=False, autoresize=False, description="",
    )


def test_render_config_merge_accepts_camelcase_keys():
    config = RenderConfig.merge({"class": "x", "withConsent": True, "autoresize": True, "bogus": 1})
    assert config.css_class == "x"
    assert config.with_consent is True
    assert config.autoresize is True
    assert config.description == ""


def test_render_config_merge_passes_instances_through():
    config = RenderConfig(description="d")
    assert RenderConfig.merge(config) is config


def test_service_variants():
    values = dict(url="u", service_key="k", width=1, height=1, default_width=1, default_height=1)
    assert is_oembed(OEmbedService(**values))
    assert not is_oembed(DirectEmbedService(**values))


# Messages

def test_message_parameters():
    catalog = MessageCatalog({"greeting": "Hello $1 and $2, not $3"})
    assert catalog.text("greeting", "A", "B") == "Hello A and B, not $3"


def test_message_fallback_and_missing():
    catalog = MessageCatalog({"embedvideo-type-video": "Video"})
    assert catalog.text("embedvideo-type-video") == "Video"
    assert catalog.text("embedvideo-type-audio") == "audio"
    assert catalog.text("nope") == "⧼nope⧽"


# URL expansion

@pytest.mark.parametrize("url, expected", [
    ("/images/a.jpg", "https://wiki.example.org/images/a.jpg"),
    ("images/a.jpg", "https://wiki.example.org/images/a.jpg"),
    ("//upload.example.org/a.jpg", "https://upload.example.org/a.jpg"),
    ("http://cdn.example.org/a.jpg", "http://cdn.example.org/a.jpg"),
])
def test_expand(url, expected):
    assert ServerUrlExpander("https://wiki.example.org/").expand(url) == expected


def test_expand_failures():
    with pytest.raises(UrlExpansionError):
        ServerUrlExpander("https://wiki.example.org").expand("")
    with pytest.raises(UrlExpansionError):
        ServerUrlExpander().expand("/images/a.jpg")
