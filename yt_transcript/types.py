from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class TranscriptItem:
    text: str
    start: float
    duration: float

    def to_dict(self) -> Dict[str, Any]:
        return {"text": self.text, "start": self.start, "duration": self.duration}

    def to_srt_format(self, index: int) -> str:
        start_time_str = _format_time(self.start)
        end_time_str = _format_time(self.start + self.duration)
        return f"{index}\n{start_time_str} --> {end_time_str}\n{self.text}\n\n"


@dataclass(frozen=True)
class CaptionTrack:
    base_url: str
    language_code: str
    kind: Optional[str] = None
    name: Optional[str] = None

    @property
    def is_generated(self) -> bool:
        return self.kind == "asr"

    @classmethod
    def from_dict(cls, raw: Any) -> Optional["CaptionTrack"]:
        """Build a track from one captionTracks entry; None if it has no baseUrl."""
        if not isinstance(raw, dict):
            return None
        base_url = raw.get("baseUrl")
        if not isinstance(base_url, str) or not base_url:
            return None
        kind = raw.get("kind")
        return cls(
            base_url=base_url,
            language_code=str(raw.get("languageCode") or ""),
            kind=kind if isinstance(kind, str) else None,
            name=_display_name(raw.get("name")),
        )


@dataclass
class FetchOptions:
    proxy: Optional[str] = None
    lang: List[str] = field(default_factory=lambda: ["en"])


@dataclass(frozen=True)
class PlayabilityStatus:
    status: Optional[str] = None
    reason: Optional[str] = None

    @property
    def is_error(self) -> bool:
        return self.status == "ERROR"

    @classmethod
    def from_dict(cls, raw: Any) -> Optional["PlayabilityStatus"]:
        if not isinstance(raw, dict):
            return None
        status = raw.get("status")
        reason = raw.get("reason")
        return cls(
            status=status if isinstance(status, str) else None,
            reason=reason if isinstance(reason, str) else None,
        )


@dataclass(frozen=True)
class CaptionTracklist:
    caption_tracks: List[CaptionTrack] = field(default_factory=list)

    @classmethod
    def from_dict(cls, raw: Any) -> Optional["CaptionTracklist"]:
        """Read captions.playerCaptionsTracklistRenderer; None if the block is absent."""
        if not isinstance(raw, dict):
            return None
        renderer = raw.get("playerCaptionsTracklistRenderer")
        if not isinstance(renderer, dict):
            return cls()
        entries = renderer.get("captionTracks")
        if not isinstance(entries, list):
            return cls()
        tracks = [t for t in (CaptionTrack.from_dict(e) for e in entries) if t is not None]
        return cls(caption_tracks=tracks)


@dataclass(frozen=True)
class PlayerResponse:
    playability_status: Optional[PlayabilityStatus] = None
    captions: Optional[CaptionTracklist] = None

    @property
    def caption_tracks(self) -> List[CaptionTrack]:
        return self.captions.caption_tracks if self.captions else []

    @property
    def has_playability_error(self) -> bool:
        return bool(self.playability_status and self.playability_status.is_error)

    @classmethod
    def from_dict(cls, raw: Any) -> "PlayerResponse":
        if not isinstance(raw, dict):
            return cls()
        return cls(
            playability_status=PlayabilityStatus.from_dict(raw.get("playabilityStatus")),
            captions=CaptionTracklist.from_dict(raw.get("captions")),
        )


def _display_name(raw: Any) -> Optional[str]:
    # name is either {"simpleText": ...} or {"runs": [{"text": ...}, ...]}
    if not isinstance(raw, dict):
        return None
    if isinstance(raw.get("simpleText"), str):
        return raw["simpleText"]
    runs = raw.get("runs")
    if isinstance(runs, list):
        text = "".join(r.get("text", "") for r in runs if isinstance(r, dict))
        return text or None
    return None


def _format_time(seconds: float) -> str:
    total_ms = int(round(seconds * 1000))
    hours, rem = divmod(total_ms, 3_600_000)
    minutes, rem = divmod(rem, 60_000)
    seconds_int, milliseconds = divmod(rem, 1000)
    return f"{hours:02d}:{minutes:02d}:{seconds_int:02d},{milliseconds:03d}"
