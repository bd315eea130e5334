"""Turn user-supplied names into single path components."""

from __future__ import annotations

import re

_UNSAFE = re.compile(r'[\\/:*?"<>|\x00-\x1f]')


def safe_filename(name: str, fallback: str = "untitled") -> str:
    """Replace path separators and other characters no filesystem accepts.

    Leading and trailing dots and spaces are dropped so the result can never
    be ``.`` or ``..``.
    """
    cleaned = _UNSAFE.sub("-", name).strip(" .")
    return cleaned or fallback
