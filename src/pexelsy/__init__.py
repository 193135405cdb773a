"""
pexelsy - a small client for the Pexels photo and video API.

    from pexelsy import PexelsClient

    client = PexelsClient(token)
    result = client.search_photos("waves", per_page=15, page=1)
    print(client.remaining_requests)
"""

from pexelsy.models import PexelsError, DecodeError
from pexelsy.client import (
    PexelsClient,
    RequestConstructionError,
    NetworkError,
    NoResultsError,
)

__all__ = [
    "PexelsClient",
    "PexelsError",
    "RequestConstructionError",
    "NetworkError",
    "DecodeError",
    "NoResultsError",
]
