"""
TheTVDB API client for fetching episode titles and air dates.

This module provides a small interface to TheTVDB v4 API, handling the login
token, series search, episode lookup, error handling and response parsing.
"""
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Optional

import requests

from . import constants
from . import logger
from .logger import LogLevel
from tvshow.errors import RenamerError


@dataclass(frozen=True)
class EpisodeMetadata:
    """Episode record returned by the metadata service."""
    title: str
    first_aired: date | None = None


class TvdbError(RenamerError):
    """Base exception for TheTVDB errors."""

    pass


class TvdbAPIError(TvdbError):
    """Exception for API request failures."""

    pass


class SeriesNotFoundError(TvdbError):
    """Exception for when a series cannot be found."""

    def __init__(self, series_name: str):
        self.series_name = series_name
        super().__init__(f"unable to find TV series {series_name!r} on TheTVDB")


class EpisodeNotFoundError(TvdbError):
    """Exception for when an episode does not exist in a series."""

    def __init__(self, series_id: int, season: int, episode: int):
        self.series_id = series_id
        self.season = season
        self.episode = episode
        super().__init__(f"episode {episode} of season {season} does not exist")


def _parse_date(value: str | None) -> date | None:
    """Parse a "YYYY-MM-DD" air date, returning None for empty or malformed values."""
    if not value:
        return None
    try:
        return date.fromisoformat(value[:10])
    except ValueError:
        return None


class TvdbClient:
    """Client for interacting with TheTVDB v4 API."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        pin: Optional[str] = None,
        language: str = constants.DEFAULT_LANGUAGE,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the client.

        Args:
            api_key: TheTVDB API key, defaults to the TVDB_API_KEY environment variable.
            pin: Subscriber PIN for user-supported keys, defaults to TVDB_PIN.
            language: Three-letter language code used for episode titles.
            session: Session to send requests with (a new one when omitted).

        Raises:
            TvdbError: If no API key is available.
        """
        self.api_key = api_key or constants.TVDB_API_KEY
        if not self.api_key:
            raise TvdbError(
                "TheTVDB API key is required for title lookups. "
                "Set the TVDB_API_KEY environment variable or use --no-tvdb."
            )
        self.pin = pin or constants.TVDB_PIN
        self.language = language
        self.session = session or requests.Session()
        self._token: str | None = None
        self._series_cache: Dict[str, int] = {}

    def _login(self) -> None:
        """Exchange the API key for a bearer token."""
        payload = {"apikey": self.api_key}
        if self.pin:
            payload["pin"] = self.pin
        try:
            response = self.session.post(
                f"{constants.TVDB_BASE_URL}/login", json=payload, timeout=constants.TVDB_TIMEOUT
            )
            response.raise_for_status()
            token = response.json().get("data", {}).get("token")
        except (requests.RequestException, ValueError) as e:
            raise TvdbAPIError(f"TheTVDB login failed: {e}") from e
        if not token:
            raise TvdbAPIError("TheTVDB login failed: no token in response")
        self._token = token
        self.session.headers["Authorization"] = f"Bearer {token}"

    def _make_request(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Optional[Dict[str, Any]]:
        """
        Make a GET request to the API and return its "data" member.
        Returns None when the resource does not exist.
        """
        if self._token is None:
            self._login()

        url = f"{constants.TVDB_BASE_URL}/{endpoint.lstrip('/')}"
        try:
            response = self.session.get(url, params=params, timeout=constants.TVDB_TIMEOUT)
            if response.status_code == 404:
                return None
            response.raise_for_status()
            body = response.json()
        except (requests.RequestException, ValueError) as e:
            raise TvdbAPIError(f"TheTVDB request to {endpoint} failed: {e}") from e

        if body.get("status") not in (None, "success"):
            raise TvdbAPIError(f"TheTVDB API error: {body.get('message', 'Unknown error')}")
        return body.get("data")

    def search_series(self, series_name: str) -> int:
        """
        Search TheTVDB for a series and return the identifier of the best match.
        Results are cached per client.
        """
        if series_name in self._series_cache:
            return self._series_cache[series_name]

        data = self._make_request("search", {"query": series_name, "type": "series", "language": self.language})
        if not data:
            raise SeriesNotFoundError(series_name)

        series = data[0]
        try:
            series_id = int(series.get("tvdb_id") or str(series.get("id", "")).replace("series-", ""))
        except ValueError as e:
            raise TvdbAPIError(f"TheTVDB returned a series without an id for {series_name!r}") from e
        logger.log("tvdb.series", LogLevel.DEBUG, query=series_name, name=series.get("name"), tvdb_id=series_id)

        self._series_cache[series_name] = series_id
        return series_id

    def get_episode(self, series_id: int, season: int, episode: int) -> EpisodeMetadata:
        """Get the title and air date of an episode by series id, season and episode number."""
        data = self._make_request(
            f"series/{series_id}/episodes/default/{self.language}",
            {"page": 0, "season": season, "episodeNumber": episode},
        )
        # The listing may hold more than the requested episode
        episodes = (data or {}).get("episodes") or []
        record = next(
            (r for r in episodes if r.get("seasonNumber") == season and r.get("number") == episode),
            None,
        )
        if record is None:
            raise EpisodeNotFoundError(series_id, season, episode)

        metadata = EpisodeMetadata(title=record.get("name") or "", first_aired=_parse_date(record.get("aired")))
        logger.log(
            "tvdb.episode",
            LogLevel.TRACE,
            tvdb_id=series_id,
            season=season,
            episode=episode,
            title=metadata.title,
        )
        return metadata
