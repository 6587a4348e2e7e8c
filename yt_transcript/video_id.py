from __future__ import annotations

import re

from yt_transcript.errors import InvalidIdentifierError

VIDEO_ID_LENGTH = 11

# watch?v=, youtu.be/, embed/, v/, e/ and /<anything>/.../<id> shapes
_VIDEO_ID_RE = re.compile(
    r"(?:youtube\.com/(?:[^/]+/.+/|(?:v|e(?:mbed)?)/|.*[?&]v=)|youtu\.be/)"
    r"([^\"&?/ ]{11})"
)


def retrieve_video_id(value: str) -> str:
    """Return the 11-character video ID for a bare ID or a video URL.

    Strings of exactly 11 characters are taken as IDs without further checks.
    """
    if len(value) == VIDEO_ID_LENGTH:
        return value
    m = _VIDEO_ID_RE.search(value)
    if m:
        return m.group(1)
    raise InvalidIdentifierError(f"Impossible to retrieve Youtube video ID from {value!r}.")
