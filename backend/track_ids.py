"""Spotify track identifier parsing.

Accepted inputs, checked in this order:

* ``spotify:track:<id>``
* ``http(s)://open.spotify.com/track/<id>[?...]``
* ``http(s)://api.spotify.com/v1/tracks/<id>[?...]``
* a bare ``<id>[?...]``

Spotify track IDs are exactly 22 base62 characters.
"""

from __future__ import annotations

import re
from typing import Any, Optional

TRACK_ID_PATTERNS = [
    re.compile(r"^spotify:track:(.+)$"),
    re.compile(r"^https?://open\.spotify\.com/track/([^?]+)"),
    re.compile(r"^https?://api\.spotify\.com/v1/tracks/([^?]+)"),
]

SPOTIFY_ID_RE = re.compile(r"[a-zA-Z0-9]{22}")


def is_spotify_id(value: Any) -> bool:
    return isinstance(value, str) and SPOTIFY_ID_RE.fullmatch(value) is not None


def normalize_spotify_id(value: Any) -> Optional[str]:
    """Return the canonical 22 character track ID for ``value`` or None.

    Never raises. A value that parses but fails validation is reported on
    stdout; empty and non-string values are rejected silently.
    """
    if not value or not isinstance(value, str):
        return None

    track_id = value.strip()
    if not track_id:
        return None

    for pattern in TRACK_ID_PATTERNS:
        match = pattern.match(track_id)
        if match:
            track_id = match.group(1)
            break

    # Drop query parameters such as ?si=...
    track_id = track_id.split("?", 1)[0]

    if not is_spotify_id(track_id):
        print(f"[spotify.track_id] invalid Spotify track ID: {value!r} -> {track_id!r}")
        return None
    return track_id


def spotify_track_url(track_id: str) -> str:
    return f"https://open.spotify.com/track/{track_id}"
