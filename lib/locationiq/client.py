"""
LocationIQ API Async Client

This module provides the main LocationIQClient class for interacting with
the LocationIQ API (locationiq.com): reverse geocoding, forward geocoding
(search) and nearby points of interest.
"""

import logging
from typing import Any, Dict, Mapping, Optional, cast

import httpx

import lib.utils as utils

from .errors import FetchingError, InvalidParametersError, NotInitiatedError, ParsingError, ServerError
from .models import NearbyResponse, ReverseResponse, SearchResponse
from .params import normalizeNearbyParams, normalizeReverseParams, normalizeSearchParams, toQueryParams

logger = logging.getLogger(__name__)


class LocationIQClient:
    """Async client for LocationIQ API, dood!

    Each operation checks the client has a token, normalizes its arguments,
    makes a single GET request and returns the parsed JSON body as is.
    Creates new HTTP session for each request. All failures are raised
    as LocationIQError subclasses.

    Example:
        >>> from lib.locationiq import LocationIQClient
        >>>
        >>> client = LocationIQClient()
        >>> client.init("your_token")
        >>>
        >>> # Reverse geocoding
        >>> place = await client.reverse(48.8584, 2.2945)
        >>> place = await client.reverse([48.8584, 2.2945])
        >>> place = await client.reverse({"lat": 48.8584, "lng": 2.2945})
        >>>
        >>> # Forward geocoding
        >>> results = await client.search("10 Downing Street, London")
        >>>
        >>> # Points of interest
        >>> pois = await client.nearby(48.8584, 2.2945, "restaurant", 500)
    """

    API_BASE_URL = "https://us1.locationiq.com"
    API_BASE_URL_EU = "https://eu1.locationiq.com"
    RESPONSE_FORMAT = "json"

    def __init__(
        self,
        token: Optional[str] = None,
        *,
        baseUrl: str = API_BASE_URL,
        requestTimeout: Optional[float] = 10,
    ):
        """Initialize LocationIQ client, dood!

        Args:
            token: LocationIQ access token, may be set later with init() (default: None)
            baseUrl: API host, e.g. API_BASE_URL_EU for the EU region (default: US region)
            requestTimeout: HTTP request timeout in seconds, None to disable (default: 10)
        """
        self.token = token
        self.baseUrl = baseUrl.rstrip("/")
        self.requestTimeout = requestTimeout

    def init(self, token: Optional[str]) -> None:
        """Set LocationIQ token. Last call wins."""
        self.token = token

    @property
    def isInit(self) -> bool:
        """True if the client has a non-empty token."""
        return bool(self.token)

    async def reverse(self, *params: Any) -> ReverseResponse:
        """Reverse geocoding: convert coordinates to address, dood!

        Accepted parameters:
            reverse(latitude, longitude)
            reverse([latitude, longitude])
            reverse({"latitude": ..., "longitude": ...})
            reverse({"lat": ..., "lng": ...})

        Returns:
            Place at the coordinates (object with place_id)

        Raises:
            NotInitiatedError, InvalidParametersError, FetchingError, ParsingError, ServerError
        """
        self._checkInit()
        queryParams = normalizeReverseParams(params)
        if queryParams is None:
            raise self._invalidParameters(params)

        return cast(ReverseResponse, await self._makeRequest("reverse", queryParams))

    async def search(self, *params: Any) -> SearchResponse:
        """Forward geocoding: convert address to coordinates, dood!

        Accepted parameters:
            search(address: str)

        Returns:
            List of matching places

        Raises:
            NotInitiatedError, InvalidParametersError, FetchingError, ParsingError, ServerError
        """
        self._checkInit()
        queryParams = normalizeSearchParams(params)
        if queryParams is None:
            raise self._invalidParameters(params)

        return cast(SearchResponse, await self._makeRequest("search", queryParams))

    async def nearby(self, *params: Any) -> NearbyResponse:
        """Find points of interest around coordinates, dood!

        Accepted parameters:
            nearby(latitude, longitude, tag, radius)
            nearby([latitude, longitude, tag, radius])
            nearby({"lat"|"latitude": ..., "lng"|"longitude": ..., "tag": ..., "radius": ...})

        Args (in any of the shapes above):
            tag: POI tag filter, e.g. "restaurant" or "amenity:school"
            radius: Search radius in meters

        Returns:
            List of points of interest

        Raises:
            NotInitiatedError, InvalidParametersError, FetchingError, ParsingError, ServerError
        """
        self._checkInit()
        queryParams = normalizeNearbyParams(params)
        if queryParams is None:
            raise self._invalidParameters(params)

        return cast(NearbyResponse, await self._makeRequest("nearby", queryParams))

    def _checkInit(self) -> None:
        if not self.isInit:
            logger.error("LocationIQ client isn't initialized")
            raise NotInitiatedError()

    def _invalidParameters(self, params: Any) -> InvalidParametersError:
        try:
            dump = utils.jsonDumps(list(params), indent=2, sort_keys=False)
        except (TypeError, ValueError):
            # Keys json can't encode or circular references
            dump = repr(list(params))
        message = "Invalid parameters : \n" + dump
        logger.warning(message)
        return InvalidParametersError(message)

    def buildUrl(self, endpoint: str, params: Mapping[str, Any]) -> str:
        """Build full request URL with token and response format, dood!

        Args:
            endpoint: API endpoint name ("reverse", "search" or "nearby")
            params: Normalized endpoint parameters

        Returns:
            URL like https://us1.locationiq.com/v1/reverse.php?key=...&format=json&lat=...&lon=...
        """
        queryParams: Dict[str, Any] = {"key": self.token, "format": self.RESPONSE_FORMAT, **params}
        return f"{self.baseUrl}/v1/{endpoint}.php?{toQueryParams(queryParams)}"

    @staticmethod
    def _isValidResponse(data: Any) -> bool:
        # reverse returns object with place_id, search returns array, nearby returns objects with osm_id
        if isinstance(data, dict):
            return "place_id" in data or "osm_id" in data
        if isinstance(data, list):
            return len(data) > 0
        return False

    async def _makeRequest(self, endpoint: str, params: Mapping[str, Any]) -> Any:
        """Make HTTP request to LocationIQ API, dood!

        Single point for all HTTP requests, shared by all operations.

        Args:
            endpoint: API endpoint name ("reverse", "search" or "nearby")
            params: Normalized endpoint parameters (key and format added automatically)

        Returns:
            Parsed JSON response, unchanged

        Raises:
            FetchingError: Transport error (origin is the httpx error)
            ParsingError: Body isn't JSON (origin is the httpx.Response)
            ServerError: Body isn't a geocoding result (origin is the parsed body)
        """
        url = self.buildUrl(endpoint, params)
        # Do not log url, it contains the token
        logger.debug(f"Making request to {endpoint} with params: {dict(params)}")

        try:
            async with httpx.AsyncClient(timeout=self.requestTimeout) as session:
                response = await session.get(url)
        except httpx.RequestError as e:
            logger.error(f"Network error during {endpoint} request: {e}")
            raise FetchingError(e) from e

        if response.status_code != 200:
            logger.warning(f"LocationIQ {endpoint} request returned status {response.status_code}")

        try:
            data = response.json()
        except ValueError as e:
            logger.error(f"Failed to parse JSON response of {endpoint} request: {e}")
            raise ParsingError(response) from e

        if not self._isValidResponse(data):
            logger.error(f"Unexpected response of {endpoint} request: {data}")
            raise ServerError(data)

        logger.debug(f"API request successful: {endpoint}")
        return data
