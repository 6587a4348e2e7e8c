"""End-to-end transcript extraction.

watch page -> INNERTUBE_API_KEY -> player API -> caption track -> XML -> items

Every failure leaves as exactly one TranscriptError subclass; anything else
raised along the way is wrapped into the base TranscriptError.
"""

from __future__ import annotations

from typing import Callable, List, Optional, Tuple

import requests

from apis.youtube import build_session
from yt_transcript.config import DEFAULT_CONFIG, InnertubeConfig
from yt_transcript.errors import (
    NoTranscriptAvailableError,
    TranscriptError,
    TranscriptsDisabledError,
    VideoUnavailableError,
)
from yt_transcript.innertube_client import (
    extract_innertube_api_key,
    fetch_caption_xml,
    fetch_player_response,
    fetch_watch_page,
)
from yt_transcript.logging_utils import get_logger
from yt_transcript.tracks import select_caption_track
from yt_transcript.types import CaptionTrack, FetchOptions, PlayerResponse, TranscriptItem
from yt_transcript.video_id import retrieve_video_id
from yt_transcript.xml_parser import parse_transcript_xml

log = get_logger(__name__)

KeyExtractor = Callable[[str], Optional[str]]


def _available_tracks(
    session: requests.Session,
    video_id: str,
    config: InnertubeConfig,
    key_extractor: KeyExtractor,
) -> List[CaptionTrack]:
    html = fetch_watch_page(session, video_id, config)

    api_key = key_extractor(html)
    if not api_key:
        log.error("api key not found in watch page", extra={"video_id": video_id})
        raise TranscriptError("Could not extract YouTube API key from video page.")

    player = fetch_player_response(session, video_id, api_key, config)
    tracks = player.caption_tracks
    if not tracks:
        raise _classify_missing_tracks(video_id, player)
    log.debug("caption tracks found", extra={
        "video_id": video_id, "languages": [t.language_code for t in tracks]
    })
    return tracks


def _classify_missing_tracks(video_id: str, player: PlayerResponse) -> TranscriptError:
    if player.has_playability_error:
        log.warning("player reports playability error", extra={
            "video_id": video_id, "reason": player.playability_status.reason
        })
        return VideoUnavailableError(video_id)
    if player.captions is None:
        return TranscriptsDisabledError(video_id)
    return NoTranscriptAvailableError(video_id)


def _prepare(video: str, options: Optional[FetchOptions],
             session: Optional[requests.Session],
             config: Optional[InnertubeConfig]) -> Tuple[str, FetchOptions, requests.Session, InnertubeConfig]:
    video_id = retrieve_video_id(video)
    options = options or FetchOptions()
    config = config or DEFAULT_CONFIG
    if session is None:
        session = build_session(options.proxy, config.headers)
    return video_id, options, session, config


def list_caption_tracks(
    video: str,
    options: Optional[FetchOptions] = None,
    *,
    session: Optional[requests.Session] = None,
    config: Optional[InnertubeConfig] = None,
    key_extractor: KeyExtractor = extract_innertube_api_key,
) -> List[CaptionTrack]:
    """Return every caption track the player API exposes for a video."""
    owns_session = session is None
    try:
        video_id, options, session, config = _prepare(video, options, session, config)
        return _available_tracks(session, video_id, config, key_extractor)
    except TranscriptError:
        raise
    except Exception as e:
        log.exception("listing caption tracks failed")
        raise TranscriptError(f"Failed to list caption tracks: {e}") from e
    finally:
        if owns_session and session is not None:
            session.close()


def fetch_transcript(
    video: str,
    options: Optional[FetchOptions] = None,
    *,
    session: Optional[requests.Session] = None,
    config: Optional[InnertubeConfig] = None,
    key_extractor: KeyExtractor = extract_innertube_api_key,
) -> List[TranscriptItem]:
    """Fetch and parse the transcript of a video.

    Args:
        video: bare 11-character ID or any supported video URL.
        options: proxy and language preference (default ["en"]).
        session: requests.Session to issue calls with; left open. When
            omitted, one is built from options.proxy and closed on return.
        config: endpoint and client identity overrides.
        key_extractor: html -> api key (or None) strategy.

    Raises:
        InvalidIdentifierError, VideoUnavailableError,
        NoTranscriptAvailableError, MalformedCaptionDataError, or the base
        TranscriptError for any other stage failure.
    """
    owns_session = session is None
    try:
        video_id, options, session, config = _prepare(video, options, session, config)
        log.info("fetch transcript start", extra={"video_id": video_id, "lang": options.lang})

        tracks = _available_tracks(session, video_id, config, key_extractor)
        track = select_caption_track(tracks, options.lang)
        log.debug("caption track selected", extra={
            "video_id": video_id, "language": track.language_code, "kind": track.kind
        })

        xml = fetch_caption_xml(session, track.base_url)
        items = parse_transcript_xml(xml)
        log.info("fetch transcript done", extra={"video_id": video_id, "items": len(items)})
        return items
    except TranscriptError:
        raise
    except Exception as e:
        log.exception("transcript pipeline failed")
        raise TranscriptError(f"Failed to fetch transcript: {e}") from e
    finally:
        if owns_session and session is not None:
            session.close()
