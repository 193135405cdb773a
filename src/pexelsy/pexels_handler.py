"""
Pexels API - URL Builder

This module builds well-formed GET request URLs for the Pexels photo and video endpoints. It does no
network activity of its own: the functions here return a string which the client passes to an
authenticated request.

Pexels serves photos and videos from two different base paths on the same host:

    https://api.pexels.com/v1       photos (search, curated, photos/<id>)
    https://api.pexels.com/videos   videos (search, popular)

Every query value is percent-encoded with urlencode (quote_plus rules), so free text such as
"new york & paris" arrives as query=new+york+%26+paris rather than breaking the query string.
"""

from functools import wraps
from inspect import signature
from urllib.parse import quote_plus, urlencode

PHOTO_API = "https://api.pexels.com/v1"
VIDEO_API = "https://api.pexels.com/videos"


def base_url(url: str):
    """
    Use this decorator to inject the base url into each builder. That way should the url change in the future
    it can be done in one place.
    """

    def wrapper(func):
        @wraps(func)
        def inner(*args, **kwargs):
            return func(base_url=url, *args, **kwargs)

        return inner

    return wrapper


def url_path(url_path: str):
    """
    Use this decorator to inject the correct path component for the intended endpoint.
    """

    def wrapper(func):
        @wraps(func)
        def inner(*args, **kwargs):
            return func(url_path=url_path, *args, **kwargs)

        return inner

    return wrapper


def query(*names: str):
    """
    Use this decorator to build the query string from the named parameters of the decorated function.
    Parameters are taken in the order given here and any that are None are left out. The finished string
    (including the leading "?") is passed to the function as the "query_string" keyword argument.
    """

    def wrapper(func):
        sig = signature(func)

        @wraps(func)
        def inner(*args, **kwargs):

            bound = sig.bind(*args, **kwargs)
            bound.apply_defaults()

            params = [
                (name, bound.arguments[name])
                for name in names
                if bound.arguments.get(name) is not None
            ]

            query_string = ""
            if params:
                query_string = "?" + urlencode(params, quote_via=quote_plus)

            return func(query_string=query_string, *args, **kwargs)

        return inner

    return wrapper


def make_pexels_url(path_components: list[str], query: str = "") -> str:
    return "".join(["/".join(str(part) for part in path_components), query])


@base_url(PHOTO_API)
@url_path("search")
@query("query", "per_page", "page")
def search_photos(query: str, per_page: int = 15, page: int = 1, **kwargs) -> str:
    """
    URL for a photo search, e.g. https://api.pexels.com/v1/search?query=waves&per_page=15&page=1
    """

    return make_pexels_url(
        path_components=[kwargs.get("base_url"), kwargs.get("url_path")],
        query=kwargs.get("query_string"),
    )


@base_url(PHOTO_API)
@url_path("curated")
@query("per_page", "page")
def curated_photos(per_page: int = 15, page: int = 1, **kwargs) -> str:

    return make_pexels_url(
        path_components=[kwargs.get("base_url"), kwargs.get("url_path")],
        query=kwargs.get("query_string"),
    )


@base_url(PHOTO_API)
@url_path("photos")
def photo(photo_id: int, **kwargs) -> str:
    """
    URL for a single photo by id. The id is quoted as a path segment so a stray string
    can't escape into another endpoint.
    """

    return make_pexels_url(
        path_components=[
            kwargs.get("base_url"),
            kwargs.get("url_path"),
            quote_plus(str(photo_id)),
        ]
    )


@base_url(VIDEO_API)
@url_path("search")
@query("query", "per_page", "page")
def search_videos(query: str, per_page: int = 15, page: int = 1, **kwargs) -> str:

    return make_pexels_url(
        path_components=[kwargs.get("base_url"), kwargs.get("url_path")],
        query=kwargs.get("query_string"),
    )


@base_url(VIDEO_API)
@url_path("popular")
@query("per_page", "page")
def popular_videos(per_page: int = 15, page: int = 1, **kwargs) -> str:

    return make_pexels_url(
        path_components=[kwargs.get("base_url"), kwargs.get("url_path")],
        query=kwargs.get("query_string"),
    )
