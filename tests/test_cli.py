import logging
from unittest.mock import patch

import transcript_fetcher
from yt_transcript.errors import NoTranscriptAvailableError
from yt_transcript.logging_utils import get_logger
from yt_transcript.types import CaptionTrack, TranscriptItem

ITEMS = [
    TranscriptItem(text="Hello", start=0.0, duration=1.5),
    TranscriptItem(text="World", start=1.5, duration=2.0),
]


def test_split_langs():
    assert transcript_fetcher._split_langs(None) == ["en"]
    assert transcript_fetcher._split_langs(["de,en", " fr "]) == ["de", "en", "fr"]


def test_format_items():
    assert transcript_fetcher.format_items(ITEMS, "text") == "Hello\nWorld"
    assert '"start": 1.5' in transcript_fetcher.format_items(ITEMS, "json")
    assert transcript_fetcher.format_items(ITEMS, "srt") == (
        "1\n00:00:00,000 --> 00:00:01,500\nHello\n\n"
        "2\n00:00:01,500 --> 00:00:03,500\nWorld\n\n"
    )


def test_main_passes_options(capsys):
    with patch.object(transcript_fetcher, "fetch_transcript", return_value=ITEMS) as fetch:
        code = transcript_fetcher.main(["dQw4w9WgXcQ", "--lang", "de,en", "--proxy", "http://p:1"])

    assert code == 0
    options = fetch.call_args.args[1]
    assert options.lang == ["de", "en"]
    assert options.proxy == "http://p:1"
    assert capsys.readouterr().out == "Hello\nWorld\n"


def test_main_list_tracks(capsys):
    tracks = [CaptionTrack("http://en", "en", "asr", "English (auto-generated)")]
    with patch.object(transcript_fetcher, "list_caption_tracks", return_value=tracks):
        code = transcript_fetcher.main(["dQw4w9WgXcQ", "--list_tracks"])

    assert code == 0
    assert capsys.readouterr().out == "en\tauto\tEnglish (auto-generated)\n"


def test_main_reports_failure(capsys):
    with patch.object(transcript_fetcher, "fetch_transcript",
                      side_effect=NoTranscriptAvailableError("dQw4w9WgXcQ")):
        code = transcript_fetcher.main(["dQw4w9WgXcQ"])

    assert code == 1
    assert capsys.readouterr().out == ""


def test_http_loggers_untouched_until_cli_runs():
    urllib3_log = logging.getLogger("urllib3")
    urllib3_log.setLevel(logging.NOTSET)
    get_logger("yt_transcript.anything")
    assert urllib3_log.level == logging.NOTSET

    with patch.object(transcript_fetcher, "fetch_transcript", return_value=ITEMS):
        transcript_fetcher.main(["dQw4w9WgXcQ"])
    assert urllib3_log.level >= logging.WARNING
    urllib3_log.setLevel(logging.NOTSET)
