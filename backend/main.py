"""
Track Bridge backend

This FastAPI application takes a Spotify track reference (a bare track ID, a
``spotify:track:`` URI, an ``open.spotify.com`` link or an ``api.spotify.com``
link) and finds the same song on YouTube Music. The Spotify Web API provides
the track title and artists; YouTube Music is searched with those and the
first result credited to the track's primary artist is returned.

Environment variables used:

* ``SPOTIFY_CLIENT_ID`` and ``SPOTIFY_CLIENT_SECRET`` – credentials for the
  Spotify API, used with the client-credentials flow. Both are required.
* ``YTMUSIC_LANGUAGE`` and ``YTMUSIC_LOCATION`` – optional settings passed to
  ``ytmusicapi`` for the search locale.

Endpoints:

* ``/match?track=...`` returns JSON describing the match. ``youtube_url`` is
  null when YouTube Music has no song by the same primary artist.
* ``/redirect?track=...`` sends a 302 to the YouTube link, or shows a small
  page linking back to Spotify when nothing matched.

To run the development server locally:

    uvicorn main:app --reload --port 8000
"""

from __future__ import annotations

import os
from html import escape
from typing import Any, Dict, Optional

from dotenv import load_dotenv

load_dotenv()

import requests
from fastapi import FastAPI, HTTPException, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, RedirectResponse

from clients import AuthClients, auth
from exceptions import (
    ConfigurationError,
    InvalidTrackIdError,
    MissingTrackIdError,
    TrackNotFoundError,
)
from matcher import match_track, parse_track_reference
from track_ids import spotify_track_url

app = FastAPI(title="Track Bridge")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
async def health_check():
    return {"status": "healthy", "service": "trackbridge"}


@app.get("/")
async def index():
    return {"message": "Track Bridge API is running", "docs": "/docs"}


def get_clients() -> AuthClients:
    return auth(os.getenv("SPOTIFY_CLIENT_ID"), os.getenv("SPOTIFY_CLIENT_SECRET"))


def resolve(track: Optional[str]) -> Dict[str, Any]:
    """Run a lookup and translate hard failures into HTTP errors."""
    try:
        spotify_id = parse_track_reference(track)
        clients = get_clients()
        youtube_url = match_track(spotify_id, clients)
    except (MissingTrackIdError, InvalidTrackIdError) as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    except TrackNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    except ConfigurationError as exc:
        print(f"[config] {exc}")
        raise HTTPException(status_code=500, detail=str(exc))
    except requests.RequestException as exc:
        print(f"[spotify.error] {exc!r}")
        raise HTTPException(status_code=502, detail="Spotify request failed")

    print(f"[match] {spotify_id} -> {youtube_url}")
    return {
        "spotify_id": spotify_id,
        "spotify_url": spotify_track_url(spotify_id),
        "youtube_url": youtube_url,
        "found": youtube_url is not None,
    }


def build_fallback_html(spotify_url: str) -> str:
    url = escape(spotify_url, quote=True)
    return f"""
    <html>
    <head><title>Couldn't find a match</title></head>
    <body style="font-family:sans-serif;padding:2em;">
      <h1>Couldn't find this song on YouTube Music</h1>
      <p>No YouTube Music song by the same artist was found.</p>
      <p><a href="{url}" target="_blank">Open the track on Spotify</a></p>
    </body>
    </html>
    """


# Lookups block on network I/O, so the handlers are sync and run in the threadpool.
@app.get("/match")
def match_handler(track: Optional[str] = None) -> Dict[str, Any]:
    """Return the YouTube Music match for a Spotify track as JSON."""
    return resolve(track)


@app.get("/redirect", response_class=HTMLResponse)
def redirect_handler(track: Optional[str] = None) -> Response:
    """Redirect to the YouTube Music match, or show a fallback page."""
    result = resolve(track)
    if result["youtube_url"]:
        return RedirectResponse(url=result["youtube_url"], status_code=302)
    return HTMLResponse(content=build_fallback_html(result["spotify_url"]), status_code=200)
