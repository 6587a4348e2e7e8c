from __future__ import annotations

import argparse
import json
import sys
from typing import List, Optional, Sequence

from yt_transcript.errors import TranscriptError
from yt_transcript.logging_utils import setup_logging, get_logger, quiet_http_loggers
from yt_transcript.transcript import fetch_transcript, list_caption_tracks
from yt_transcript.types import FetchOptions, TranscriptItem

log = get_logger(__name__)


def _split_langs(values: Optional[List[str]]) -> List[str]:
    """Flatten repeated / comma-separated --lang values."""
    langs: List[str] = []
    for v in values or []:
        langs.extend(x.strip() for x in v.split(",") if x.strip())
    return langs or ["en"]


def format_items(items: Sequence[TranscriptItem], fmt: str) -> str:
    if fmt == "json":
        return json.dumps([item.to_dict() for item in items], ensure_ascii=False, indent=2)
    if fmt == "srt":
        return "".join(item.to_srt_format(i + 1) for i, item in enumerate(items))
    return "\n".join(item.text for item in items)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse CLI arguments for transcript fetching."""
    parser = argparse.ArgumentParser(description="Fetch the caption transcript of a YouTube video")
    parser.add_argument("video", type=str, help="video ID or URL")
    parser.add_argument("--lang", action="append", default=None,
                        help="preferred language code; repeat or comma-separate (default: en)")
    parser.add_argument("--proxy", type=str, default=None, help="proxy URL for every request")
    parser.add_argument("--format", type=str, choices=("text", "json", "srt"), default="text",
                        help="output format (default: text)")
    parser.add_argument("--list_tracks", action="store_true", help="only list available caption tracks")
    parser.add_argument("--log_level", type=str, default=None, help="log level (e.g., INFO, DEBUG)")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """CLI entry point.

    Examples:
      python3 transcript_fetcher.py dQw4w9WgXcQ
      python3 transcript_fetcher.py "https://youtu.be/dQw4w9WgXcQ" --lang de,en --format srt
      python3 transcript_fetcher.py dQw4w9WgXcQ --list_tracks
    """
    args = parse_args(argv)
    setup_logging(args.log_level, force=args.log_level is not None)
    quiet_http_loggers(args.log_level)
    options = FetchOptions(proxy=args.proxy, lang=_split_langs(args.lang))

    try:
        if args.list_tracks:
            for track in list_caption_tracks(args.video, options):
                kind = "auto" if track.is_generated else "manual"
                print(f"{track.language_code}\t{kind}\t{track.name or ''}")
            return 0
        items = fetch_transcript(args.video, options)
    except TranscriptError as e:
        log.error("transcript fetch failed", extra={"video": args.video, "error": str(e),
                                                    "kind": type(e).__name__})
        return 1

    print(format_items(items, args.format))
    return 0


if __name__ == "__main__":
    sys.exit(main())
