from __future__ import annotations

import re
from typing import Optional

import requests

from apis.youtube import get as _get, post_json as _post_json
from yt_transcript.config import InnertubeConfig
from yt_transcript.errors import TranscriptError, VideoUnavailableError
from yt_transcript.logging_utils import get_logger
from yt_transcript.types import PlayerResponse

log = get_logger(__name__)

_API_KEY_RE = re.compile(r'"INNERTUBE_API_KEY":"([a-zA-Z0-9_-]+)"')


def extract_innertube_api_key(html: str) -> Optional[str]:
    """Default key-extraction strategy: pull INNERTUBE_API_KEY out of the watch page."""
    m = _API_KEY_RE.search(html)
    return m.group(1) if m else None


def fetch_watch_page(session: requests.Session, video_id: str, config: InnertubeConfig) -> str:
    """GET the watch page HTML or raise VideoUnavailableError on a non-2xx status."""
    url = config.watch_page_url(video_id)
    log.debug("watch page GET", extra={"url": url, "video_id": video_id})
    resp = _get(session, url)
    if not resp.ok:
        log.warning("watch page unavailable", extra={"video_id": video_id, "status": resp.status_code})
        raise VideoUnavailableError(video_id)
    return resp.text


def fetch_player_response(session: requests.Session, video_id: str, api_key: str,
                          config: InnertubeConfig) -> PlayerResponse:
    """POST to the internal player endpoint and return its typed response."""
    url = config.player_endpoint(api_key)
    log.debug("player POST", extra={"video_id": video_id, "client": config.client_name})
    resp = _post_json(session, url, config.player_payload(video_id))
    if not resp.ok:
        log.error("player request failed", extra={"video_id": video_id, "status": resp.status_code})
        raise TranscriptError(f"Failed to fetch player data: {resp.reason}")
    try:
        data = resp.json()
    except ValueError as e:
        raise TranscriptError(f"Failed to decode player data: {e}") from e
    return PlayerResponse.from_dict(data)


def fetch_caption_xml(session: requests.Session, base_url: str) -> str:
    """GET a caption track payload."""
    log.debug("caption GET", extra={"url": base_url})
    resp = _get(session, base_url)
    if not resp.ok:
        log.error("caption request failed", extra={"status": resp.status_code})
        raise TranscriptError(f"Failed to fetch transcript XML: {resp.reason}")
    return resp.text
