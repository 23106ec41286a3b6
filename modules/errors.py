"""
Error kinds raised by the analysis and lookup pipelines.

Each one is terminal for the request that raised it; app.py maps them to
HTTP responses via ``status_code``.
"""

from __future__ import annotations


class UrbanscopeError(Exception):
    """Base for every error surfaced to API callers; carries an HTTP status."""

    status_code = 500


class InvalidBounds(UrbanscopeError):
    """Corner input has the wrong number of corners or coordinates."""

    status_code = 400


class UpstreamRequestFailed(UrbanscopeError):
    """Transport-level failure reaching Overpass or Nominatim."""

    status_code = 502


class UpstreamStatusError(UrbanscopeError):
    """The upstream service answered with a non-2xx status."""

    status_code = 502

    def __init__(self, source: str, status: int):
        super().__init__(f"{source} non-OK status: {status}")
        self.source = source
        self.status = status


class UpstreamParseError(UrbanscopeError):
    """The upstream body did not match the expected JSON shape."""

    status_code = 502
