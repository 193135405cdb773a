"""
Image Handler

Utilities for saving Pexels media to disk once its URL is known. The API client finds photos and videos
(search, curated, by id); this module only fetches a file that a decoded record points at, e.g.
photo.src.large2x or one of video.video_files[i].link.

The media URLs served by images.pexels.com and videos.pexels.com are public, so no API token is sent
with these requests and they don't count against the request quota.
"""

from pathlib import Path
import io
from urllib.parse import urlparse
from typing import Optional

from PIL import Image, UnidentifiedImageError
import requests


class InvalidImageError(Exception):
    """
    Raised when a provided binary input file is not an image. Wrapper around the PIL
    UnidentifiedImageError for better identification of errors during debugging
    and custom error messaging.
    """

    pass


class ImageDownloadError(Exception):
    """
    Raised when a download is unsuccessful.
    """

    pass


def validate_image(input) -> str:
    """
    Determine whether input is a valid image and return its format (e.g. "JPEG"). PIL open accepts a
    Path object, string, or file object. Only the header is read, the pixel data is not loaded.
    """

    try:
        with Image.open(input) as image:

            return image.format

    except UnidentifiedImageError:
        raise InvalidImageError(f"Input {str(input)} does not appear to be an image.")

    except FileNotFoundError:
        raise InvalidImageError(f"Input {str(input)} could not be found.")


def _prepare_destination(file_path) -> Path:
    """
    Resolve file_path and create its parent directory. Refuse to overwrite anything that is already there.
    """

    destination_path = Path(file_path).expanduser().resolve()

    if not destination_path.exists():
        destination_path.parent.mkdir(parents=True, exist_ok=True)

    # edge case where destination path is a folder
    elif destination_path.is_dir():
        raise ImageDownloadError(f"Destination file {destination_path} is a directory.")

    else:
        raise ImageDownloadError(f"File already exists at {destination_path}.")

    return destination_path


def _fetch(url: str, timeout: Optional[float]) -> requests.Response:

    try:
        r = requests.get(url, timeout=timeout)

    except requests.exceptions.RequestException as error:
        raise ImageDownloadError(str(error)) from error

    # successful request but received a bad response from the server.
    try:
        r.raise_for_status()
    except requests.exceptions.HTTPError as error:
        raise ImageDownloadError(
            f"Download error: something went wrong trying to access {url} (status code {r.status_code})"
        ) from error

    return r


def download_image(url: str, file_path, timeout: Optional[float] = None) -> Path:
    """
    Download the image at url and save it at file_path. Returns the location on filesystem where the
    image was saved.

    If file_path has no suffix, one is added from the detected image format. If the file already exists it
    is not overwritten and ImageDownloadError is raised, as it is for network failures, bad status codes
    and content that is not an image.
    """

    destination_path = _prepare_destination(file_path)

    r = _fetch(url, timeout)

    # successful request but did not get back image data as the response.
    try:
        with Image.open(io.BytesIO(r.content)) as image:

            if destination_path.suffix == "":
                destination_path = _prepare_destination(f"{destination_path}.{image.format.lower()}")

            # write the original bytes, re-encoding through PIL would recompress the photo
            destination_path.write_bytes(r.content)

    except UnidentifiedImageError:
        raise ImageDownloadError(
            f"Download error: the target resource at {url} does not appear to be an image."
        )

    return destination_path


def download_file(url: str, file_path, timeout: Optional[float] = None) -> Path:
    """
    Download any media file (used for videos, which PIL can't validate) and save it at file_path. If
    file_path has no suffix the suffix of the url path is used.
    """

    destination_path = Path(file_path).expanduser()

    if destination_path.suffix == "":
        destination_path = destination_path.with_suffix(Path(urlparse(url).path).suffix)

    destination_path = _prepare_destination(destination_path)

    r = _fetch(url, timeout)

    if not r.content:
        raise ImageDownloadError(f"Download error: {url} returned an empty file.")

    destination_path.write_bytes(r.content)
    return destination_path
