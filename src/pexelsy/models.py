"""
Pexels Data Model

Dataclasses mirroring the JSON documents returned by the Pexels photo and video endpoints.
Every record is built from an already-parsed JSON object by its from_json classmethod, which
checks the keys and value types we rely on and raises DecodeError for anything that doesn't fit.
Optional fields the API adds over time (alt text, average color etc.) are passed through when
present and default to None otherwise.

The records are plain values. Nothing here talks to the network and nothing is shared between
two decoded results, so callers are free to hold on to or mutate what they get back.

Useful References:
Pexels API docs - https://www.pexels.com/api/documentation/
"""

import json
from dataclasses import dataclass, field
from typing import Any, Optional, Union


class PexelsError(Exception):
    """Base class for errors raised by pexelsy when talking to the Pexels API."""

    pass


class DecodeError(PexelsError):
    """
    Raised when a response body is not valid JSON or does not match the expected schema. The
    underlying json/KeyError/TypeError is chained as __cause__.
    """

    pass


"""
Field helpers
"""


def _require(data: dict, key: str, kind, optional=False):
    """
    Pull key out of a decoded JSON object and make sure it has the expected type. kind can be
    a type or a tuple of types, same as isinstance. When optional is set a missing key (or null)
    comes back as None instead of raising.
    """

    if not isinstance(data, dict):
        raise DecodeError(f"expected a JSON object, got {type(data).__name__}")

    try:
        value = data[key]
    except KeyError as error:
        if optional:
            return None
        raise DecodeError(f"missing required field '{key}'") from error

    if value is None and optional:
        return None

    # bool is a subclass of int, don't let true/false pass as an id or a dimension
    if isinstance(value, bool) and kind is not bool:
        raise DecodeError(f"field '{key}' has unexpected type bool")

    if not isinstance(value, kind):
        raise DecodeError(
            f"field '{key}' has unexpected type {type(value).__name__}"
        )

    return value


def _non_negative(data: dict, key: str, optional=False) -> Optional[int]:
    value = _require(data, key, int, optional=optional)
    if value is not None and value < 0:
        raise DecodeError(f"field '{key}' must not be negative, got {value}")
    return value


def _items(data: dict, key: str, record) -> list:
    """Decode a JSON array under key into a list of record, keeping the upstream order."""

    return [record.from_json(item) for item in _require(data, key, list)]


"""
Photos
"""


@dataclass
class PhotoSource:
    """
    Image URLs for each size variant Pexels renders for a photo. Variants missing from a response
    are left as empty strings.
    """

    original: str = ""
    large: str = ""
    large2x: str = ""
    medium: str = ""
    small: str = ""
    portrait: str = ""
    square: str = ""
    landscape: str = ""
    tiny: str = ""

    @classmethod
    def from_json(cls, data: dict) -> "PhotoSource":
        if not isinstance(data, dict):
            raise DecodeError(f"expected a JSON object for 'src', got {type(data).__name__}")

        variants = {}
        for variant in cls.__dataclass_fields__:
            variants[variant] = _require(data, variant, str, optional=True) or ""

        return cls(**variants)

    def get(self, size: str) -> str:
        """Return the URL for a size variant by name, e.g. get("large2x")."""

        if size not in self.__dataclass_fields__:
            raise KeyError(f"unknown photo size '{size}'")
        return getattr(self, size)


@dataclass
class Photo:
    id: int
    width: int
    height: int
    url: str
    photographer: str
    photographer_url: str
    src: PhotoSource
    photographer_id: Optional[int] = None
    avg_color: Optional[str] = None
    alt: Optional[str] = None

    @classmethod
    def from_json(cls, data: dict) -> "Photo":
        return cls(
            id=_non_negative(data, "id"),
            width=_non_negative(data, "width"),
            height=_non_negative(data, "height"),
            url=_require(data, "url", str),
            photographer=_require(data, "photographer", str),
            photographer_url=_require(data, "photographer_url", str),
            src=PhotoSource.from_json(_require(data, "src", dict)),
            photographer_id=_non_negative(data, "photographer_id", optional=True),
            avg_color=_require(data, "avg_color", str, optional=True),
            alt=_require(data, "alt", str, optional=True),
        )


@dataclass
class PhotoSearchResult:
    """
    Envelope returned by the photo search endpoint. next_page is the opaque URL of the following
    page as given by Pexels, or None on the last page.
    """

    page: int
    per_page: int
    photos: list[Photo] = field(default_factory=list)
    total_results: int = 0
    next_page: Optional[str] = None

    @classmethod
    def from_json(cls, data: dict) -> "PhotoSearchResult":
        return cls(
            page=_non_negative(data, "page"),
            per_page=_non_negative(data, "per_page"),
            photos=_items(data, "photos", Photo),
            total_results=_non_negative(data, "total_results", optional=True) or 0,
            next_page=_require(data, "next_page", str, optional=True),
        )


@dataclass
class CuratedResult:
    """
    Envelope returned by the curated photos endpoint. Older API versions reported next_page as a
    page number, current ones as a URL, so both are kept as-is.
    """

    page: int
    per_page: int
    photos: list[Photo] = field(default_factory=list)
    next_page: Union[int, str, None] = None

    @classmethod
    def from_json(cls, data: dict) -> "CuratedResult":
        return cls(
            page=_non_negative(data, "page"),
            per_page=_non_negative(data, "per_page"),
            photos=_items(data, "photos", Photo),
            next_page=_require(data, "next_page", (int, str), optional=True),
        )


"""
Videos
"""


@dataclass
class VideoFile:
    """One rendition of a video. Pexels reports null quality and dimensions for some HLS files."""

    id: int
    quality: Optional[str]
    file_type: str
    width: Optional[int]
    height: Optional[int]
    link: str

    @classmethod
    def from_json(cls, data: dict) -> "VideoFile":
        return cls(
            id=_non_negative(data, "id"),
            quality=_require(data, "quality", str, optional=True),
            file_type=_require(data, "file_type", str),
            width=_non_negative(data, "width", optional=True),
            height=_non_negative(data, "height", optional=True),
            link=_require(data, "link", str),
        )


@dataclass
class VideoPicture:
    id: int
    picture: str
    nr: int

    @classmethod
    def from_json(cls, data: dict) -> "VideoPicture":
        return cls(
            id=_non_negative(data, "id"),
            picture=_require(data, "picture", str),
            nr=_non_negative(data, "nr"),
        )


@dataclass
class Video:
    """
    A single video. full_res has no fixed shape upstream (it is usually null) so whatever JSON
    value arrives is kept untouched.
    """

    id: int
    width: int
    height: int
    url: str
    image: str
    duration: float
    full_res: Any = None
    video_files: list[VideoFile] = field(default_factory=list)
    video_pictures: list[VideoPicture] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: dict) -> "Video":
        duration = _require(data, "duration", (int, float))
        if duration < 0:
            raise DecodeError(f"field 'duration' must not be negative, got {duration}")

        return cls(
            id=_non_negative(data, "id"),
            width=_non_negative(data, "width"),
            height=_non_negative(data, "height"),
            url=_require(data, "url", str),
            image=_require(data, "image", str),
            duration=float(duration),
            full_res=data.get("full_res"),
            video_files=_items(data, "video_files", VideoFile),
            video_pictures=_items(data, "video_pictures", VideoPicture),
        )


@dataclass
class VideoSearchResult:
    page: int
    per_page: int
    videos: list[Video] = field(default_factory=list)
    total_results: int = 0
    next_page: Optional[str] = None

    @classmethod
    def from_json(cls, data: dict) -> "VideoSearchResult":
        return cls(
            page=_non_negative(data, "page"),
            per_page=_non_negative(data, "per_page"),
            videos=_items(data, "videos", Video),
            total_results=_non_negative(data, "total_results", optional=True) or 0,
            next_page=_require(data, "next_page", str, optional=True),
        )


@dataclass
class PopularVideosResult:
    """Envelope returned by the popular videos endpoint. url is the listing's own URL."""

    page: int
    per_page: int
    videos: list[Video] = field(default_factory=list)
    total_results: int = 0
    url: Optional[str] = None

    @classmethod
    def from_json(cls, data: dict) -> "PopularVideosResult":
        return cls(
            page=_non_negative(data, "page"),
            per_page=_non_negative(data, "per_page"),
            videos=_items(data, "videos", Video),
            total_results=_non_negative(data, "total_results", optional=True) or 0,
            url=_require(data, "url", str, optional=True),
        )


def decode(record, body: Union[str, bytes]):
    """
    Parse a raw response body and build record (one of the dataclasses above) from it. Raise
    DecodeError if the body isn't JSON or the document doesn't fit the record.
    """

    try:
        data = json.loads(body)

    except (json.JSONDecodeError, UnicodeDecodeError) as error:
        raise DecodeError(f"response is not valid JSON: {error}") from error

    return record.from_json(data)
