"""Parse caption XML into TranscriptItems.

Two payload shapes exist:

  timedtext format 3 (paragraphs, milliseconds):
    <timedtext format="3"><body><p t="1000" d="2000"><s>Hello</s><s> World</s></p></body></timedtext>

  legacy transcript (seconds):
    <transcript><text start="0" dur="2.5">Hello World</text></transcript>

Paragraphs win when present; the two are never mixed.
"""

from __future__ import annotations

import math
from typing import List, Optional
from xml.etree.ElementTree import Element, ParseError

from defusedxml import DefusedXmlException, ElementTree

from yt_transcript.entities import decode_html
from yt_transcript.errors import MalformedCaptionDataError
from yt_transcript.logging_utils import get_logger
from yt_transcript.types import TranscriptItem

log = get_logger(__name__)


def _to_float(value: Optional[str], attr: str) -> float:
    """Parse a timing attribute; missing or empty is 0, negative clamps to 0."""
    if not value:
        return 0.0
    try:
        number = float(value)
    except ValueError:
        raise MalformedCaptionDataError(f"Invalid {attr!r} attribute: {value!r}")
    if not math.isfinite(number):
        raise MalformedCaptionDataError(f"Invalid {attr!r} attribute: {value!r}")
    return max(number, 0.0)


def _paragraph_text(p: Element) -> str:
    parts = ["".join(s.itertext()) for s in p.iter("s")]
    parts = [t for t in parts if t.strip()]
    if parts:
        return "".join(parts)
    return "".join(p.itertext())


def _parse_paragraphs(paragraphs: List[Element]) -> List[TranscriptItem]:
    items: List[TranscriptItem] = []
    for p in paragraphs:
        t = p.get("t")
        if not t:
            continue
        text = _paragraph_text(p).strip()
        if not text:
            continue
        items.append(TranscriptItem(
            text=decode_html(text),
            start=_to_float(t, "t") / 1000,
            duration=_to_float(p.get("d"), "d") / 1000,
        ))
    return items


def _parse_texts(elements: List[Element]) -> List[TranscriptItem]:
    items: List[TranscriptItem] = []
    for el in elements:
        start = el.get("start")
        if not start:
            continue
        dur = el.get("dur") or el.get("duration")
        items.append(TranscriptItem(
            text=decode_html("".join(el.itertext()).strip()),
            start=_to_float(start, "start"),
            duration=_to_float(dur, "dur"),
        ))
    return items


def parse_transcript_xml(xml: str) -> List[TranscriptItem]:
    """Parse a caption payload or raise MalformedCaptionDataError."""
    try:
        root = ElementTree.fromstring(xml)
    except (ParseError, DefusedXmlException) as e:
        log.warning("caption XML parse failed", extra={"error": str(e)})
        raise MalformedCaptionDataError(f"XML parsing error: {e}") from e

    paragraphs = list(root.iter("p"))
    if paragraphs:
        items = _parse_paragraphs(paragraphs)
        log.debug("parsed paragraph captions", extra={"elements": len(paragraphs), "items": len(items)})
        return items

    items = _parse_texts(list(root.iter("text")))
    log.debug("parsed text captions", extra={"items": len(items)})
    return items
