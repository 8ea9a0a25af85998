"""Service clients used by the matcher.

``SpotifyAPI`` authenticates with the client-credentials flow and fetches
track metadata from the Spotify Web API. ``YouTubeMusicAPI`` performs song
searches through ``ytmusicapi``, which needs no credentials for public
search. ``auth`` builds both from a Spotify client ID and secret.
"""

from __future__ import annotations

import os
from typing import Any, Dict, List, NamedTuple, Optional

import requests
from ytmusicapi import YTMusic

from exceptions import ConfigurationError

REQUEST_TIMEOUT = 10


class SpotifyAPI:
    """Helper class to interact with the Spotify Web API."""

    TOKEN_URL = "https://accounts.spotify.com/api/token"
    TRACK_URL = "https://api.spotify.com/v1/tracks/{id}"

    def __init__(self, client_id: str, client_secret: str) -> None:
        self.client_id = client_id
        self.client_secret = client_secret
        self._token: Optional[str] = None

    def authenticate(self) -> str:
        """Run the client-credentials grant and keep the access token."""
        auth_response = requests.post(
            self.TOKEN_URL,
            data={"grant_type": "client_credentials"},
            auth=(self.client_id, self.client_secret),
            timeout=REQUEST_TIMEOUT,
        )
        auth_response.raise_for_status()
        token = auth_response.json().get("access_token")
        if not token:
            raise requests.HTTPError("Spotify token response has no access_token", response=auth_response)
        self._token = token
        return self._token

    def _get_access_token(self) -> str:
        if self._token:
            return self._token
        return self.authenticate()

    def get_track(self, track_id: str) -> Optional[Dict[str, Any]]:
        """Return the track object, or None if Spotify does not know the ID."""
        headers = {"Authorization": f"Bearer {self._get_access_token()}"}
        resp = requests.get(self.TRACK_URL.format(id=track_id), headers=headers, timeout=REQUEST_TIMEOUT)
        print(f"[spotify.request_url] {resp.url} -> {resp.status_code}")
        if resp.status_code in (400, 404):
            return None
        resp.raise_for_status()
        return resp.json() or None


class YouTubeMusicAPI:
    """Song search on YouTube Music."""

    def __init__(self, language: str = "en", location: str = "") -> None:
        self.language = language
        self.location = location
        self._client: Optional[YTMusic] = None

    def initialize(self) -> None:
        try:
            self._client = YTMusic(language=self.language, location=self.location)
        except Exception as exc:
            # ytmusicapi raises a plain Exception for unsupported language or location
            raise ConfigurationError(f"Invalid YouTube Music locale: {exc}") from exc

    def search_songs(self, query: str) -> List[Dict[str, Any]]:
        """Search songs and return simplified candidates in search order.

        ``artist`` is the first artist credited on the result, or None when
        YouTube Music lists none.
        """
        if self._client is None:
            self.initialize()
        print(f"[ytmusic.query] {query!r}")
        results = self._client.search(query, filter="songs")
        candidates = []
        for item in results:
            artists = item.get("artists") or [{}]
            duration = item.get("duration_seconds")
            candidates.append({
                "video_id": item.get("videoId"),
                "title": item.get("title", ""),
                "artist": artists[0].get("name"),
                "album": (item.get("album") or {}).get("name", ""),
                "duration_ms": duration * 1000 if duration else None,
            })
        print(f"[ytmusic.results] {len(candidates)} songs")
        return candidates


class AuthClients(NamedTuple):
    spotify: SpotifyAPI
    ytmusic: YouTubeMusicAPI


def auth(client_id: Optional[str], client_secret: Optional[str]) -> AuthClients:
    """Return an authenticated Spotify client and a ready YouTube Music client.

    Raises ConfigurationError when either credential is missing or empty.
    """
    if not client_id:
        raise ConfigurationError("No Client ID Provided")
    if not client_secret:
        raise ConfigurationError("No Client Secret Key Provided")

    spotify_api = SpotifyAPI(client_id, client_secret)
    spotify_api.authenticate()

    yt_music = YouTubeMusicAPI(
        language=os.getenv("YTMUSIC_LANGUAGE", "en"),
        location=os.getenv("YTMUSIC_LOCATION", ""),
    )
    yt_music.initialize()

    return AuthClients(spotify=spotify_api, ytmusic=yt_music)
