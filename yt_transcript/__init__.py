"""Caption transcript extraction for YouTube videos.

Resolve an ID or URL, scrape the access key, ask the internal player API for
caption tracks, and parse the chosen track into timed segments.
"""

from yt_transcript.errors import (
    InvalidIdentifierError,
    MalformedCaptionDataError,
    NoTranscriptAvailableError,
    TranscriptError,
    TranscriptsDisabledError,
    VideoUnavailableError,
)
from yt_transcript.transcript import fetch_transcript, list_caption_tracks
from yt_transcript.types import CaptionTrack, FetchOptions, TranscriptItem

__all__ = [
    "fetch_transcript",
    "list_caption_tracks",
    "CaptionTrack",
    "FetchOptions",
    "TranscriptItem",
    "TranscriptError",
    "InvalidIdentifierError",
    "VideoUnavailableError",
    "NoTranscriptAvailableError",
    "TranscriptsDisabledError",
    "MalformedCaptionDataError",
]
