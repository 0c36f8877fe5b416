"""
LocationIQ API Client Library

This module provides a Python async client library for the LocationIQ API
(locationiq.com): reverse geocoding, forward geocoding and nearby points of interest.

Example usage:
    from lib.locationiq import Errors, LocationIQClient, LocationIQError

    client = LocationIQClient()
    client.init("your_token")

    try:
        # Reverse geocoding
        place = await client.reverse(48.8584, 2.2945)

        # Forward geocoding
        results = await client.search("10 Downing Street, London")

        # Points of interest
        pois = await client.nearby({"lat": 48.8584, "lng": 2.2945, "tag": "restaurant", "radius": 500})
    except LocationIQError as e:
        if e.code == Errors.SERVER:
            print(e.origin)
"""

from lib.locationiq.client import LocationIQClient
from lib.locationiq.errors import (
    Errors,
    FetchingError,
    InvalidParametersError,
    LocationIQError,
    NotInitiatedError,
    ParsingError,
    ServerError,
)
from lib.locationiq.models import (
    Address,
    NearbyQuery,
    NearbyResponse,
    NearbyResult,
    ReverseQuery,
    ReverseResponse,
    ReverseResult,
    SearchQuery,
    SearchResponse,
    SearchResult,
)
from lib.locationiq.params import toQueryParams

__all__ = [
    "LocationIQClient",
    "Errors",
    "LocationIQError",
    "NotInitiatedError",
    "InvalidParametersError",
    "FetchingError",
    "ParsingError",
    "ServerError",
    "Address",
    "ReverseQuery",
    "SearchQuery",
    "NearbyQuery",
    "ReverseResult",
    "SearchResult",
    "NearbyResult",
    "ReverseResponse",
    "SearchResponse",
    "NearbyResponse",
    "toQueryParams",
]
