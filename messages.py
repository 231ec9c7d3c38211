"""
Message catalogue for the text shown around embeds
"""
import re
from typing import Dict, Mapping, Optional, Protocol

DEFAULT_MESSAGES: Dict[str, str] = {
    "embedvideo-load": "Click to load $1",
    "embedvideo-type-video": "video",
    "embedvideo-type-audio": "audio",
    "embedvideo-consent-privacy-notice-text":
        "Loading this content sends data to $1. Continue only if you agree.",
    "embedvideo-consent-privacy-policy": "Privacy Policy",
    "embedvideo-consent-privacy-notice-continue": "Continue",
    "embedvideo-consent-privacy-notice-dismiss": "Dismiss",
    # Service display names
    "embedvideo-service-youtube": "YouTube",
    "embedvideo-service-youtubeplaylist": "YouTube",
    "embedvideo-service-vimeo": "Vimeo",
    "embedvideo-service-dailymotion": "Dailymotion",
    "embedvideo-service-twitch": "Twitch",
    "embedvideo-service-soundcloud": "SoundCloud",
    "embedvideo-service-spotifytrack": "Spotify",
}

PLACEHOLDER_PATTERN = re.compile(r"\$(\d+)")


class MessageResolver(Protocol):
    def text(self, message_id: str, *params: str) -> str:
        ...


class MessageCatalog:
    """
    Looks up messages by id and fills in numbered $1, $2... parameters.

    Missing ids render as ⧼id⧽ so they stand out on the page.
    """

    def __init__(self, messages: Optional[Mapping[str, str]] = None,
                 fallback: Mapping[str, str] = DEFAULT_MESSAGES):
        self.messages = dict(messages or {})
        self.fallback = fallback

    def text(self, message_id: str, *params: str) -> str:
        template = self.messages.get(message_id, self.fallback.get(message_id))
        if template is None:
            return f"⧼{message_id}⧽"

        def _fill(match: re.Match) -> str:
            index = int(match.group(1)) - 1
            if 0 <= index < len(params):
                return str(params[index])
            return match.group(0)

        return PLACEHOLDER_PATTERN.sub(_fill, template)
