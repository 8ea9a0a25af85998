"""Match a Spotify track to a song on YouTube Music.

The Spotify track is fetched, YouTube Music is searched with its title and
artists, and the first result credited to the same primary artist wins.
The primary artist comparison is exact and case-sensitive.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from clients import AuthClients
from exceptions import InvalidTrackIdError, MissingTrackIdError, TrackNotFoundError
from track_ids import normalize_spotify_id


def youtube_watch_url(video_id: str) -> str:
    return f"https://youtube.com/watch?v={video_id}"


def build_search_query(track: Dict[str, Any]) -> str:
    """Title followed by every artist name, space separated."""
    artist_names = " ".join(artist["name"] for artist in track["artists"])
    return f"{track['name']} {artist_names}"


def filter_by_primary_artist(candidates: Iterable[Dict[str, Any]], artist: str) -> List[Dict[str, Any]]:
    return [
        song for song in candidates
        if song and song.get("video_id") and song.get("artist") == artist
    ]


def match_track(spotify_id: str, clients: AuthClients) -> Optional[str]:
    """Return a YouTube watch URL for a canonical Spotify ID, or None.

    Raises TrackNotFoundError when Spotify has no such track. Failures while
    searching YouTube Music are reported and treated as no match.
    """
    track = clients.spotify.get_track(spotify_id)
    if not track:
        raise TrackNotFoundError("No track found for the provided ID")

    title = track.get("name")
    try:
        query = build_search_query(track)
        content = clients.ytmusic.search_songs(query)
        content = filter_by_primary_artist(content, track["artists"][0]["name"])
    except Exception as exc:
        print(f"[match] error searching for track {title!r}: {exc!r}")
        return None

    if not content:
        print(f"[match] no YouTube Music song by the primary artist for {title!r}")
        return None
    return youtube_watch_url(content[0]["video_id"])


def parse_track_reference(value: Optional[str]) -> str:
    """Return the canonical Spotify ID for ``value`` or raise.

    Raises MissingTrackIdError for empty input and InvalidTrackIdError when
    the value is not a recognizable track reference.
    """
    if not value:
        raise MissingTrackIdError("You need to provide a Spotify Track!")

    spotify_id = normalize_spotify_id(value)
    if not spotify_id:
        raise InvalidTrackIdError("Invalid Spotify track ID provided")
    return spotify_id


def get_song(value: Optional[str], clients: AuthClients) -> Optional[str]:
    """Resolve any accepted Spotify track reference to a YouTube watch URL.

    :param value: track ID, ``spotify:track:`` URI, open.spotify.com URL or
        api.spotify.com URL.
    :param clients: the pair returned by ``clients.auth``.
    :returns: the watch URL, or None when YouTube Music has no match.
    """
    return match_track(parse_track_reference(value), clients)
