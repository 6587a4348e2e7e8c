from __future__ import annotations

class TranscriptError(Exception):
    """Base error for the transcript pipeline."""


class InvalidIdentifierError(TranscriptError):
    """Raised when a string matches no known video ID or URL shape."""


class VideoUnavailableError(TranscriptError):
    """Raised when the watch page fails or the player reports a playability error."""

    def __init__(self, video_id: str):
        super().__init__(f"Video {video_id} is unavailable")
        self.video_id = video_id


class NoTranscriptAvailableError(TranscriptError):
    """Raised when a playable video exposes no caption tracks."""

    def __init__(self, video_id: str, message: str | None = None):
        super().__init__(message or f"No transcript available for video {video_id}")
        self.video_id = video_id


class TranscriptsDisabledError(NoTranscriptAvailableError):
    """Raised when the player response carries no captions block at all."""

    def __init__(self, video_id: str):
        super().__init__(video_id, f"Transcript is disabled for video {video_id}")


class MalformedCaptionDataError(TranscriptError):
    """Raised when caption XML cannot be parsed."""
