from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict

from apis.youtube import BROWSER_HEADERS


@dataclass(frozen=True)
class InnertubeConfig:
    """Endpoints and client identity used by the pipeline.

    Read-only; swap a field with dataclasses.replace() to point tests at
    another host.
    """

    watch_url: str = "https://www.youtube.com/watch?v={video_id}"
    player_url: str = "https://www.youtube.com/youtubei/v1/player?key={api_key}"
    client_name: str = "ANDROID"
    client_version: str = "19.30.36"
    headers: Dict[str, str] = field(default_factory=lambda: dict(BROWSER_HEADERS))

    def watch_page_url(self, video_id: str) -> str:
        return self.watch_url.format(video_id=video_id)

    def player_endpoint(self, api_key: str) -> str:
        return self.player_url.format(api_key=api_key)

    def player_payload(self, video_id: str) -> Dict[str, Any]:
        return {
            "context": {
                "client": {
                    "clientName": self.client_name,
                    "clientVersion": self.client_version,
                }
            },
            "videoId": video_id,
        }


DEFAULT_CONFIG = InnertubeConfig()
