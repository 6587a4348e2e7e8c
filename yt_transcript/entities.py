from __future__ import annotations

import re
from typing import Optional

_NAMED = {
    "amp": "&",
    "lt": "<",
    "gt": ">",
    "quot": '"',
    "apos": "'",
    "nbsp": " ",
}

_ENTITY_RE = re.compile(r"&(?:(amp|lt|gt|quot|apos|nbsp)|#(\d+));")


def _replace(m: re.Match) -> str:
    name, digits = m.group(1), m.group(2)
    if name:
        return _NAMED[name]
    try:
        return chr(int(digits))
    except (ValueError, OverflowError):
        return m.group(0)


def decode_html(text: Optional[str]) -> str:
    """Decode the entities caption payloads use, then trim.

    One pass over the input, so ``&amp;#39;`` becomes ``&#39;`` and not ``'``.
    """
    if not text:
        return ""
    return _ENTITY_RE.sub(_replace, text).strip()
