"""
conftest.py

Test configuration for pexelsy tests.

Defines Pytest fixtures for supplying test data to tests across the entire
test suite: sample JSON documents shaped like Pexels API responses and a factory
for requests.Response objects that the mocked transport hands back. Fixtures used
within only a single module are defined directly in that module.

*** MOCKING REQUEST CALLS ***

No test talks to api.pexels.com. Tests patch requests.Session.send (the client) or
requests.get (image downloads) with autospec and return a real requests.Response
built by make_response, so header handling, .content and context manager behavior
are the genuine requests implementations.
"""

import io
import json

import pytest
import requests
from PIL import Image


def _photo(photo_id: int, photographer: str = "Jane Doe") -> dict:
    return {
        "id": photo_id,
        "width": 4000,
        "height": 6000,
        "url": f"https://www.pexels.com/photo/{photo_id}/",
        "photographer": photographer,
        "photographer_url": "https://www.pexels.com/@jane",
        "photographer_id": 680589,
        "avg_color": "#978E82",
        "src": {
            "original": f"https://images.pexels.com/photos/{photo_id}/pexels-photo-{photo_id}.jpeg",
            "large2x": f"https://images.pexels.com/photos/{photo_id}/pexels-photo-{photo_id}.jpeg?dpr=2&h=650&w=940",
            "large": f"https://images.pexels.com/photos/{photo_id}/pexels-photo-{photo_id}.jpeg?h=650&w=940",
            "medium": f"https://images.pexels.com/photos/{photo_id}/pexels-photo-{photo_id}.jpeg?h=350",
            "small": f"https://images.pexels.com/photos/{photo_id}/pexels-photo-{photo_id}.jpeg?h=130",
            "portrait": f"https://images.pexels.com/photos/{photo_id}/pexels-photo-{photo_id}.jpeg?h=1200&w=800",
            "landscape": f"https://images.pexels.com/photos/{photo_id}/pexels-photo-{photo_id}.jpeg?h=627&w=1200",
            "tiny": f"https://images.pexels.com/photos/{photo_id}/pexels-photo-{photo_id}.jpeg?h=200&w=280",
        },
        "liked": False,
        "alt": "Brown Rocks During Golden Hour",
    }


def _video(video_id: int) -> dict:
    return {
        "id": video_id,
        "width": 1920,
        "height": 1080,
        "url": f"https://www.pexels.com/video/{video_id}/",
        "image": f"https://images.pexels.com/videos/{video_id}/pictures/preview-0.jpg",
        "full_res": None,
        "tags": [],
        "duration": 8,
        "user": {"id": 1, "name": "Someone", "url": "https://www.pexels.com/@someone"},
        "video_files": [
            {
                "id": 125004,
                "quality": "hd",
                "file_type": "video/mp4",
                "width": 1280,
                "height": 720,
                "link": f"https://videos.pexels.com/video-files/{video_id}/hd.mp4",
            },
            {
                "id": 125005,
                "quality": "sd",
                "file_type": "video/mp4",
                "width": 640,
                "height": 360,
                "link": f"https://videos.pexels.com/video-files/{video_id}/sd.mp4",
            },
            {
                "id": 125006,
                "quality": None,
                "file_type": "video/mp4",
                "width": None,
                "height": None,
                "link": f"https://videos.pexels.com/video-files/{video_id}/hls.m3u8",
            },
        ],
        "video_pictures": [
            {
                "id": 308178,
                "picture": f"https://static-videos.pexels.com/videos/{video_id}/pictures/preview-0.jpg",
                "nr": 0,
            },
            {
                "id": 308179,
                "picture": f"https://static-videos.pexels.com/videos/{video_id}/pictures/preview-1.jpg",
                "nr": 1,
            },
        ],
    }


@pytest.fixture
def photo_json():
    """
    Return a factory for a single photo object as returned by GET /v1/photos/:id.
    """

    return _photo


@pytest.fixture
def video_json():
    """
    Return a factory for a single video object as found in the video listings.
    """

    return _video


@pytest.fixture
def photo_search_json():
    """
    Return a factory for a photo search envelope holding photos with the given ids, in order.
    """

    def inner(*photo_ids: int) -> dict:
        return {
            "total_results": 10000,
            "page": 1,
            "per_page": max(len(photo_ids), 1),
            "photos": [_photo(photo_id) for photo_id in photo_ids],
            "next_page": "https://api.pexels.com/v1/search/?page=2&per_page=15&query=waves",
        }

    return inner


@pytest.fixture
def curated_json():
    def inner(*photo_ids: int, page: int = 1) -> dict:
        return {
            "page": page,
            "per_page": 1,
            "photos": [_photo(photo_id) for photo_id in photo_ids],
            "next_page": "https://api.pexels.com/v1/curated/?page=2&per_page=1",
        }

    return inner


@pytest.fixture
def popular_json():
    def inner(*video_ids: int, page: int = 1) -> dict:
        return {
            "page": page,
            "per_page": 1,
            "total_results": 8000,
            "url": "https://api-videos.pexels.com/videos/popular",
            "videos": [_video(video_id) for video_id in video_ids],
        }

    return inner


def _make_response(
    body, status_code: int = 200, headers: dict = None, url: str = ""
) -> requests.Response:

    response = requests.Response()
    response.status_code = status_code
    response.url = url
    response.encoding = "utf-8"
    response.headers.update(headers or {})

    if isinstance(body, (dict, list)):
        body = json.dumps(body)
    if isinstance(body, str):
        body = body.encode("utf-8")

    # the body is already in memory, nothing left to read from the (absent) raw stream
    response._content = body
    response._content_consumed = True

    return response


@pytest.fixture
def make_response():
    """
    Return a factory for requests.Response objects. body may be a dict/list (serialized to JSON), a str or bytes.
    """

    return _make_response


@pytest.fixture(scope="session")
def jpeg_bytes() -> bytes:
    """
    A small but valid JPEG image, generated with Pillow so the test suite needs no binary test data.
    """

    buffer = io.BytesIO()
    Image.new("RGB", (16, 9), color="teal").save(buffer, format="JPEG")
    return buffer.getvalue()
