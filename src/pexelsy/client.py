"""
Pexels API Client

PexelsClient holds the API token and a requests Session and exposes one method per Pexels endpoint
this package supports. Each call is a single blocking GET: build the URL (pexels_handler), send it
with the token in the Authorization header, decode the JSON body into a record (models) and hand
that back to the caller.

Pexels expects the bare API key in the Authorization header, without a "Bearer" prefix:

    Authorization: 563492ad6f91700001000001...

Every response carries X-Ratelimit-Remaining, the number of requests left in the current quota
period. The client remembers the last value it saw (see remaining_requests); it is purely
informational and nothing here blocks or delays requests when it reaches zero.

Failures are reported, never retried:
- RequestConstructionError  the method/url could not be turned into a request
- NetworkError              requests could not complete the exchange (DNS, connect, TLS, timeout)
- DecodeError               the body was not JSON or did not match the expected schema
- NoResultsError            a random pick landed on an empty listing
"""

import logging
import threading
from random import randint
from typing import Optional

import requests

from pexelsy import pexels_handler
from pexelsy.models import (
    DecodeError,
    PexelsError,
    CuratedResult,
    Photo,
    PhotoSearchResult,
    PopularVideosResult,
    Video,
    VideoSearchResult,
    decode,
)

logger = logging.getLogger(__name__)

RATELIMIT_REMAINING_HEADER = "X-Ratelimit-Remaining"

# highest page index used when picking a random photo or video
RANDOM_PAGE_LIMIT = 1000


class RequestConstructionError(PexelsError):
    """
    Raised when a request can't be built from the given method and url. The url builders only produce
    well-formed urls, so seeing this usually means a bad base url or method was passed in by hand.
    """

    pass


class NetworkError(PexelsError):
    """
    Raised when the HTTP exchange could not be completed. Wrapper around the requests
    RequestException family, which is chained as __cause__.
    """

    pass


class NoResultsError(PexelsError):
    """Raised when a random pick lands on a listing page with no items."""

    pass


class PexelsClient:
    """
    Minimal synchronous client for the Pexels photo and video API.

    The token is stored exactly as given and sent verbatim on every request. A fresh requests Session
    with default settings is used as the transport (no custom retries, redirects or TLS policy).
    timeout is passed through to requests unchanged; the default of None waits indefinitely.
    """

    def __init__(self, token: str, timeout: Optional[float] = None):
        self.token = token
        self.timeout = timeout
        self.session = requests.Session()

        self._remaining_requests: Optional[int] = None
        self._quota_lock = threading.Lock()

    @classmethod
    def from_config(cls, config, **kwargs) -> "PexelsClient":
        """Create a client with the token from a loaded PexelsConfig."""

        return cls(config.PEXELS_TOKEN, **kwargs)

    @property
    def remaining_requests(self) -> Optional[int]:
        """
        Remaining request quota as reported by the most recent response that carried the header, or None
        if no such response has been seen yet. Never touches the network.
        """

        with self._quota_lock:
            return self._remaining_requests

    def request_with_auth(self, method: str, url: str) -> requests.Response:
        """
        Send an authenticated request and return the raw response. Updates the remaining quota when the
        response includes a numeric X-Ratelimit-Remaining header.

        The caller owns the returned response and is responsible for closing it (use it as a context manager).
        """

        try:
            request = requests.Request(
                method, url, headers={"Authorization": self.token}
            ).prepare()

        except (requests.exceptions.RequestException, ValueError) as error:
            raise RequestConstructionError(
                f"could not build {method} request for {url}: {error}"
            ) from error

        logger.debug("%s %s", request.method, request.url)

        try:
            response = self.session.send(request, timeout=self.timeout)

        except requests.exceptions.RequestException as error:
            raise NetworkError(f"request to {url} failed: {error}") from error

        self._update_remaining_requests(response)
        return response

    def _update_remaining_requests(self, response: requests.Response) -> None:
        """
        A missing or malformed quota header leaves the counter alone. This is intentional: the quota is
        informational and a bad header should never fail an otherwise good response.
        """

        header = response.headers.get(RATELIMIT_REMAINING_HEADER)
        if header is None:
            logger.debug("response has no %s header", RATELIMIT_REMAINING_HEADER)
            return

        value = header.strip()

        # plain ASCII digits only, int() would also take "+42", "4_2" and non-ASCII digits
        if not (value.isascii() and value.isdigit()):
            logger.debug(
                "ignoring unparseable %s header: %r", RATELIMIT_REMAINING_HEADER, header
            )
            return

        remaining = int(value)

        with self._quota_lock:
            self._remaining_requests = remaining

        logger.debug("remaining requests: %d", remaining)

    def _get(self, url: str, record):
        """
        GET url and decode the body into record. The response is closed on every path out of here,
        whether decoding succeeds or not.
        """

        with self.request_with_auth("GET", url) as response:

            try:
                return decode(record, response.content)

            except DecodeError as error:
                raise DecodeError(
                    f"could not decode {record.__name__} from {url} (status code {response.status_code}): {error}"
                ) from error

    # photos

    def search_photos(
        self, query: str, per_page: int = 15, page: int = 1
    ) -> PhotoSearchResult:
        """Search Pexels photos for query."""

        return self._get(
            pexels_handler.search_photos(query, per_page, page), PhotoSearchResult
        )

    def curated_photos(self, per_page: int = 15, page: int = 1) -> CuratedResult:
        """List Pexels curated photos."""

        return self._get(pexels_handler.curated_photos(per_page, page), CuratedResult)

    def get_photo(self, photo_id: int) -> Photo:
        return self._get(pexels_handler.photo(photo_id), Photo)

    def get_random_photo(self) -> Photo:
        """
        Grab one photo from a random page of the curated listing. Raise NoResultsError if that page turns
        out to be empty.
        """

        page = randint(0, RANDOM_PAGE_LIMIT)
        result = self.curated_photos(per_page=1, page=page)

        if not result.photos:
            raise NoResultsError(f"curated photos page {page} returned no photos")

        return result.photos[0]

    # videos

    def search_videos(
        self, query: str, per_page: int = 15, page: int = 1
    ) -> VideoSearchResult:
        """Search Pexels videos for query."""

        return self._get(
            pexels_handler.search_videos(query, per_page, page), VideoSearchResult
        )

    def popular_videos(self, per_page: int = 15, page: int = 1) -> PopularVideosResult:
        """List Pexels popular videos."""

        return self._get(
            pexels_handler.popular_videos(per_page, page), PopularVideosResult
        )

    def get_random_video(self) -> Video:
        """
        Grab one video from a random page of the popular listing. Raise NoResultsError if that page turns
        out to be empty.
        """

        page = randint(0, RANDOM_PAGE_LIMIT)
        result = self.popular_videos(per_page=1, page=page)

        if not result.videos:
            raise NoResultsError(f"popular videos page {page} returned no videos")

        return result.videos[0]

    def close(self) -> None:
        self.session.close()
