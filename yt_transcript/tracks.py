from __future__ import annotations

from typing import Optional, Sequence

from yt_transcript.types import CaptionTrack

DEFAULT_LANGUAGES = ("en",)


def select_caption_track(
    tracks: Sequence[CaptionTrack],
    languages: Sequence[str] = DEFAULT_LANGUAGES,
) -> Optional[CaptionTrack]:
    """Pick one track by language preference.

    For each language in order, a manual track beats an auto-generated (asr)
    one. When nothing matches, the first track is returned as a best effort.
    None only for an empty track list.
    """
    if not tracks:
        return None

    for lang in languages:
        for track in tracks:
            if track.language_code == lang and not track.is_generated:
                return track
        for track in tracks:
            if track.language_code == lang and track.is_generated:
                return track

    return tracks[0]
