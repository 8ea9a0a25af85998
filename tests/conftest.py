"""Shared fakes for the Spotify and YouTube Music clients."""

from typing import Any, Dict, List, Optional

import pytest

from clients import AuthClients

TRACK_ID = "6rqhFgbbKwnb9MLmUQDhG6"


class FakeSpotify:
    def __init__(self, tracks: Optional[Dict[str, Dict[str, Any]]] = None, error: Optional[Exception] = None) -> None:
        self.tracks = tracks or {}
        self.error = error
        self.requested: List[str] = []

    def get_track(self, track_id: str) -> Optional[Dict[str, Any]]:
        self.requested.append(track_id)
        if self.error:
            raise self.error
        return self.tracks.get(track_id)


class FakeYouTubeMusic:
    def __init__(self, results: Optional[List[Dict[str, Any]]] = None, error: Optional[Exception] = None) -> None:
        self.results = results or []
        self.error = error
        self.queries: List[str] = []

    def search_songs(self, query: str) -> List[Dict[str, Any]]:
        self.queries.append(query)
        if self.error:
            raise self.error
        return list(self.results)


def make_track(name: str = "Song", artists=("Artist A", "Artist B")) -> Dict[str, Any]:
    return {"id": TRACK_ID, "name": name, "artists": [{"name": a} for a in artists]}


def make_song(video_id: str, artist: Optional[str], title: str = "Song") -> Dict[str, Any]:
    return {"video_id": video_id, "title": title, "artist": artist, "album": "", "duration_ms": None}


@pytest.fixture
def track():
    return make_track()


@pytest.fixture
def clients(track):
    return AuthClients(
        spotify=FakeSpotify({TRACK_ID: track}),
        ytmusic=FakeYouTubeMusic([
            make_song("vidB", "Artist B"),
            make_song("vidA1", "Artist A"),
            make_song("vidA2", "Artist A"),
        ]),
    )
