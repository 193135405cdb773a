"""
Tests for image_handler.py

Validate that downloading media referenced by Pexels records behaves as expected:
files land where asked, get a suffix when they have none, never overwrite anything,
and every failure is reported as ImageDownloadError.

*** Fixtures ***
- jpeg_bytes, make_response (defined in conftest.py)
- tmp_path (defined by Pytest)

*** MOCKING REQUEST CALLS ***

requests.get is patched with autospec so no network call is made. The mock returns a
real requests.Response built by make_response.
"""

import io
from unittest.mock import patch

import pytest
import requests
from PIL import Image

# following entities are tested in this module:
from pexelsy.image_handler import download_image
from pexelsy.image_handler import download_file
from pexelsy.image_handler import validate_image
from pexelsy.image_handler import ImageDownloadError
from pexelsy.image_handler import InvalidImageError

PHOTO_URL = "https://images.pexels.com/photos/2014422/pexels-photo-2014422.jpeg?auto=compress&h=650"
VIDEO_URL = "https://videos.pexels.com/video-files/2499611/2499611-hd_1280_720_25fps.mp4"


@patch("pexelsy.image_handler.requests.get", autospec=True)
def test_download_image_success(mock_get, tmp_path, jpeg_bytes, make_response):
    """
    With no suffix on the target path, the detected image format is used. The saved bytes are exactly
    the downloaded bytes.
    """

    mock_get.return_value = make_response(jpeg_bytes, url=PHOTO_URL)

    path = download_image(PHOTO_URL, tmp_path / "pexels-2014422-original")

    assert path == tmp_path / "pexels-2014422-original.jpeg"
    assert path.read_bytes() == jpeg_bytes
    assert validate_image(path) == "JPEG"
    mock_get.assert_called_once_with(PHOTO_URL, timeout=None)


@patch("pexelsy.image_handler.requests.get", autospec=True)
def test_download_image_keeps_suffix(mock_get, tmp_path, jpeg_bytes, make_response):

    mock_get.return_value = make_response(jpeg_bytes, url=PHOTO_URL)

    path = download_image(PHOTO_URL, tmp_path / "waves.jpg")

    assert path == tmp_path / "waves.jpg"


@patch("pexelsy.image_handler.requests.get", autospec=True)
def test_download_image_new_directory(mock_get, tmp_path, jpeg_bytes, make_response):
    """
    Verify that download_image creates a new directory path in the event the target file path does not exist.
    """

    mock_get.return_value = make_response(jpeg_bytes, url=PHOTO_URL)

    path = download_image(PHOTO_URL, tmp_path / "extra_dir" / "photo.jpeg")

    assert path.exists()


@patch("pexelsy.image_handler.requests.get", autospec=True)
def test_download_image_no_overwrite(mock_get, tmp_path, make_response):

    existing = tmp_path / "photo.jpeg"
    existing.write_bytes(b"keep me")

    with pytest.raises(ImageDownloadError):
        download_image(PHOTO_URL, existing)

    with pytest.raises(ImageDownloadError):
        download_image(PHOTO_URL, tmp_path)

    assert existing.read_bytes() == b"keep me"
    mock_get.assert_not_called()


@patch("pexelsy.image_handler.requests.get", autospec=True)
def test_download_image_invalid_image(mock_get, tmp_path, make_response):

    mock_get.return_value = make_response(b"<html>not a photo</html>", url=PHOTO_URL)

    with pytest.raises(ImageDownloadError):
        download_image(PHOTO_URL, tmp_path / "photo")

    assert list(tmp_path.iterdir()) == []


@pytest.mark.parametrize("status_code", [403, 404, 500])
@patch("pexelsy.image_handler.requests.get", autospec=True)
def test_download_image_bad_status(mock_get, tmp_path, jpeg_bytes, make_response, status_code):

    mock_get.return_value = make_response(jpeg_bytes, status_code=status_code, url=PHOTO_URL)

    with pytest.raises(ImageDownloadError) as error:
        download_image(PHOTO_URL, tmp_path / "photo")

    assert str(status_code) in str(error.value)


@patch("pexelsy.image_handler.requests.get", autospec=True)
def test_download_image_network_failure(mock_get, tmp_path):

    mock_get.side_effect = requests.exceptions.ConnectionError("connection refused")

    with pytest.raises(ImageDownloadError):
        download_image(PHOTO_URL, tmp_path / "photo")


@patch("pexelsy.image_handler.requests.get", autospec=True)
def test_download_file_suffix_from_url(mock_get, tmp_path, make_response):

    mock_get.return_value = make_response(b"\x00\x00\x00\x18ftypmp42", url=VIDEO_URL)

    path = download_file(VIDEO_URL, tmp_path / "pexels-2499611-1280")

    assert path == tmp_path / "pexels-2499611-1280.mp4"
    assert path.read_bytes() == b"\x00\x00\x00\x18ftypmp42"


@patch("pexelsy.image_handler.requests.get", autospec=True)
def test_download_file_empty(mock_get, tmp_path, make_response):

    mock_get.return_value = make_response(b"", url=VIDEO_URL)

    with pytest.raises(ImageDownloadError):
        download_file(VIDEO_URL, tmp_path / "video")


def test_validate_image(tmp_path):

    png = tmp_path / "tiny.png"
    Image.new("RGB", (4, 4)).save(png)

    assert validate_image(png) == "PNG"
    assert validate_image(io.BytesIO(png.read_bytes())) == "PNG"


@pytest.mark.parametrize("name, content", [("notes.txt", b"just text"), ("missing.jpg", None)])
def test_validate_image_failure(tmp_path, name, content):

    path = tmp_path / name
    if content is not None:
        path.write_bytes(content)

    with pytest.raises(InvalidImageError):
        validate_image(path)


@patch("pexelsy.image_handler.requests.get", autospec=True)
def test_download_image_twice_without_suffix(mock_get, tmp_path, jpeg_bytes, make_response):
    """
    The overwrite check applies to the final path, after the detected format's suffix is added.
    """

    mock_get.return_value = make_response(jpeg_bytes, url=PHOTO_URL)
    target = tmp_path / "pexels-2014422-original"

    path = download_image(PHOTO_URL, target)
    path.write_bytes(b"keep me")

    with pytest.raises(ImageDownloadError):
        download_image(PHOTO_URL, target)

    assert path.read_bytes() == b"keep me"


@patch("pexelsy.image_handler.requests.get", autospec=True)
def test_download_file_twice_without_suffix(mock_get, tmp_path, make_response):

    mock_get.return_value = make_response(b"\x00\x00\x00\x18ftypmp42", url=VIDEO_URL)
    target = tmp_path / "pexels-2499611-1280"

    path = download_file(VIDEO_URL, target)
    path.write_bytes(b"keep me")

    with pytest.raises(ImageDownloadError):
        download_file(VIDEO_URL, target)

    assert path.read_bytes() == b"keep me"
    mock_get.assert_called_once()
