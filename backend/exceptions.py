"""Errors raised while bridging a Spotify track to YouTube Music.

A track that simply has no counterpart on YouTube Music is *not* an error;
the matcher returns ``None`` for that case.
"""


class TrackBridgeError(Exception):
    """Base class for every hard failure of a lookup."""


class ConfigurationError(TrackBridgeError):
    """A required Spotify credential is missing or empty."""


class MissingTrackIdError(TrackBridgeError):
    pass


class InvalidTrackIdError(TrackBridgeError):
    pass


class TrackNotFoundError(TrackBridgeError):
    """Spotify has no track for the given ID."""
