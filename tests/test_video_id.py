import pytest

from yt_transcript.errors import InvalidIdentifierError, TranscriptError
from yt_transcript.video_id import retrieve_video_id

VIDEO_ID = "dQw4w9WgXcQ"


@pytest.mark.parametrize("value", ["dQw4w9WgXcQ", "abc-_123XYZ", "not a url!!"])
def test_eleven_chars_returned_unchanged(value):
    assert retrieve_video_id(value) == value


@pytest.mark.parametrize("url", [
    f"https://www.youtube.com/watch?v={VIDEO_ID}",
    f"https://www.youtube.com/watch?v={VIDEO_ID}&t=42s",
    f"https://www.youtube.com/watch?feature=share&v={VIDEO_ID}",
    f"youtube.com/watch?v={VIDEO_ID}",
    f"https://youtu.be/{VIDEO_ID}",
    f"https://youtu.be/{VIDEO_ID}?si=abcdef",
    f"https://www.youtube.com/embed/{VIDEO_ID}",
    f"https://www.youtube.com/v/{VIDEO_ID}?version=3",
    f"https://www.youtube.com/e/{VIDEO_ID}",
    f"https://www.youtube.com/user/someone/{VIDEO_ID}",
])
def test_url_shapes(url):
    assert retrieve_video_id(url) == VIDEO_ID


@pytest.mark.parametrize("value", ["", "short", "https://example.com/watch?v=dQw4w9WgXcQ",
                                   "https://www.youtube.com/watch?v=tooShort"])
def test_unrecognized_input_raises(value):
    with pytest.raises(InvalidIdentifierError):
        retrieve_video_id(value)


def test_invalid_identifier_is_transcript_error():
    assert issubclass(InvalidIdentifierError, TranscriptError)
