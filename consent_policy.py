"""
Consent settings and the config sources they are read from
"""
import os
import logging
from typing import Any, Dict, Mapping, Optional, Protocol

logger = logging.getLogger(__name__)

REQUIRE_CONSENT = "EmbedVideoRequireConsent"
SHOW_PRIVACY_NOTICE = "EmbedVideoShowPrivacyNotice"

TRUTHY_VALUES = {"1", "true", "yes", "on"}


class ConfigError(Exception):
    """Raised when a config key cannot be read"""
    pass


class ConfigSource(Protocol):
    def get(self, key: str) -> Any:
        ...


class HashConfig:
    """In-memory config source"""

    def __init__(self, values: Optional[Mapping[str, Any]] = None):
        self.values: Dict[str, Any] = dict(values or {})

    def get(self, key: str) -> Any:
        if key not in self.values:
            raise ConfigError(f"Config key '{key}' was not found")
        return self.values[key]


class EnvironmentConfig:
    """
    Config source backed by environment variables.

    EMBEDVIDEO_REQUIRE_CONSENT and EMBEDVIDEO_SHOW_PRIVACY_NOTICE accept
    1/true/yes/on (case-insensitive). Unset variables read as False.
    """

    ENV_KEYS = {
        REQUIRE_CONSENT: "EMBEDVIDEO_REQUIRE_CONSENT",
        SHOW_PRIVACY_NOTICE: "EMBEDVIDEO_SHOW_PRIVACY_NOTICE",
    }

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        self.environ = os.environ if environ is None else environ

    def get(self, key: str) -> bool:
        env_name = self.ENV_KEYS.get(key)
        if env_name is None:
            raise ConfigError(f"Config key '{key}' is not supported")

        raw = self.environ.get(env_name, "")
        return raw.strip().lower() in TRUTHY_VALUES


class ConsentPolicy:
    """Read-only view over the two consent flags of a config source"""

    def __init__(self, config: ConfigSource):
        self.config = config

    def consent_required(self) -> bool:
        return self._flag(REQUIRE_CONSENT)

    def show_privacy_notice(self) -> bool:
        return self._flag(SHOW_PRIVACY_NOTICE)

    def _flag(self, key: str) -> bool:
        try:
            return self.config.get(key) is True
        except Exception as e:
            logger.debug("Treating %s as disabled: %s", key, e)
            return False
