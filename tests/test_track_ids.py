import pytest

from track_ids import is_spotify_id, normalize_spotify_id, spotify_track_url

TRACK_ID = "6rqhFgbbKwnb9MLmUQDhG6"


@pytest.mark.parametrize("value", [
    TRACK_ID,
    f"spotify:track:{TRACK_ID}",
    f"https://open.spotify.com/track/{TRACK_ID}",
    f"http://open.spotify.com/track/{TRACK_ID}?si=abc123",
    f"https://api.spotify.com/v1/tracks/{TRACK_ID}",
    f"https://api.spotify.com/v1/tracks/{TRACK_ID}?market=US",
    f"{TRACK_ID}?si=xyz",
    f"  spotify:track:{TRACK_ID}\n",
])
def test_every_accepted_form_yields_same_id(value):
    assert normalize_spotify_id(value) == TRACK_ID


def test_uri_example():
    assert normalize_spotify_id("spotify:track:6rqhFgbbKwnb9MLmUQDhG6") == "6rqhFgbbKwnb9MLmUQDhG6"


def test_web_url_with_query_example():
    url = "https://open.spotify.com/track/6rqhFgbbKwnb9MLmUQDhG6?si=abc123"
    assert normalize_spotify_id(url) == "6rqhFgbbKwnb9MLmUQDhG6"


def test_normalizing_is_idempotent():
    assert normalize_spotify_id(normalize_spotify_id(TRACK_ID)) == TRACK_ID


@pytest.mark.parametrize("value", [
    "abc",
    TRACK_ID[:-1],
    TRACK_ID + "x",
    TRACK_ID[:-1] + "!",
    "spotify:track:",
    f"https://open.spotify.com/album/{TRACK_ID}",
    f"https://open.spotify.com/track/{TRACK_ID}/extra",
])
def test_invalid_ids_are_rejected_with_diagnostic(value, capsys):
    assert normalize_spotify_id(value) is None
    out = capsys.readouterr().out
    assert "invalid Spotify track ID" in out
    assert repr(value) in out


@pytest.mark.parametrize("value", ["", "   ", None, 12345, ["spotify:track:" + TRACK_ID]])
def test_empty_or_non_string_rejected_quietly(value, capsys):
    assert normalize_spotify_id(value) is None
    assert capsys.readouterr().out == ""


def test_embedded_newline_is_not_a_valid_id():
    assert normalize_spotify_id(f"https://open.spotify.com/track/{TRACK_ID}\n?si=1") is None


def test_is_spotify_id():
    assert is_spotify_id(TRACK_ID)
    assert not is_spotify_id(TRACK_ID + "\n")
    assert not is_spotify_id(None)


def test_spotify_track_url():
    assert spotify_track_url(TRACK_ID) == f"https://open.spotify.com/track/{TRACK_ID}"
