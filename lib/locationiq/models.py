"""
LocationIQ API Data Models

This module defines TypedDict data models for normalized request parameters
and for the LocationIQ API responses (format=json). Responses are returned
verbatim, the models only describe their usual shape.
"""

import sys
from typing import Any, List, NotRequired

if sys.version_info >= (3, 14):
    from typing import TypedDict
else:
    from typing_extensions import TypedDict


# Request Models


class ReverseQuery(TypedDict):
    """Normalized parameters of /v1/reverse.php, dood!"""

    lat: str | None
    lon: str | None


class SearchQuery(TypedDict):
    """Normalized parameters of /v1/search.php, dood!"""

    q: str


class NearbyQuery(TypedDict):
    """Normalized parameters of /v1/nearby.php, dood!

    tag and radius are kept as given, so a zero radius is dropped from the query string.
    """

    lat: str | None
    lon: str | None
    tag: Any
    radius: Any


# Response Models


class Address(TypedDict, total=False):
    """Structured address components, dood!

    All fields are optional as different locations have different address structures.
    """

    house_number: str
    road: str
    neighbourhood: str
    suburb: str
    city: str
    county: str
    state: str
    postcode: str
    country: str
    country_code: str  # ISO country code (e.g., "fr")


class ReverseResult(TypedDict):
    """Result from /v1/reverse.php, dood!"""

    place_id: str
    licence: str
    osm_type: str
    osm_id: str
    lat: str  # Latitude (string in API response)
    lon: str  # Longitude (string in API response)
    display_name: str
    address: NotRequired[Address]
    boundingbox: List[str]  # [min_lat, max_lat, min_lon, max_lon]


class SearchResult(TypedDict):
    """Single result from /v1/search.php, dood!"""

    place_id: str
    licence: str
    osm_type: str
    osm_id: str
    boundingbox: List[str]
    lat: str
    lon: str
    display_name: str
    type: str
    importance: float
    icon: NotRequired[str]
    address: NotRequired[Address]


class NearbyResult(TypedDict):
    """Single point of interest from /v1/nearby.php, dood!"""

    place_id: str
    osm_type: str
    osm_id: str
    lat: str
    lon: str
    type: str
    tag_type: str
    name: str
    display_name: str
    address: NotRequired[Address]
    distance: int  # Meters from the requested point


# Response types for each endpoint
ReverseResponse = ReverseResult  # reverse returns single object
SearchResponse = List[SearchResult]  # search returns array
NearbyResponse = List[NearbyResult]  # nearby returns array
