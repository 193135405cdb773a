"""
pexelsy download

This module defines the 'download' subcommand. It saves photos given by id, or whatever the previous
command in the chain selected (photos or videos), to a local directory.
Options go before the ids, and a command given ids must come last in a chain:

    $ pexelsy download --size original 2014422
    $ pexelsy random download --dest ~/Pictures
    $ pexelsy search --video -n 3 waves download
"""

from pathlib import Path

import click

from pexelsy.models import Photo, Video, PhotoSource
from pexelsy import image_handler
from pexelsy.cli_utils.decorators import callback
from pexelsy.cli_utils.decorators import catch_errors
from pexelsy.cli_utils.console import confirm_success, describe, warn


def best_video_file(video: Video):
    """Return the video file with the largest width, skipping renditions that don't report one."""

    candidates = [file for file in video.video_files if file.width]
    if not candidates:
        return video.video_files[0] if video.video_files else None

    return max(candidates, key=lambda file: file.width)


@click.command(name="download")
@click.argument("photo_ids", metavar="[ID]...", type=click.IntRange(min=0), nargs=-1)
@click.option(
    "--size",
    "-s",
    type=click.Choice(list(PhotoSource.__dataclass_fields__)),
    default="original",
    show_default=True,
    help="Photo size variant to download.",
)
@click.option(
    "--dest",
    "-d",
    type=click.Path(file_okay=False, path_type=Path),
    default=Path("."),
    show_default=True,
    help="Directory to save files in.",
)
@callback
@catch_errors
def cli(session, photo_ids, size, dest):
    """Download photos by id, or the photos/videos picked by the previous command."""

    if photo_ids:
        items = [session.client.get_photo(photo_id) for photo_id in photo_ids]
    else:
        items = session.selection

    if not items:
        raise click.UsageError(
            "'download' got no ids and the previous command selected nothing."
        )

    for item in items:

        if isinstance(item, Photo):
            url = item.src.get(size)
            describe(f":earth_asia-emoji: 'download' getting photo {item.id} ...", end=" ")
            path = image_handler.download_image(url, dest / f"pexels-{item.id}-{size}")

        else:
            file = best_video_file(item)
            if file is None:
                warn(f"video {item.id} has no downloadable files, skipping.")
                continue

            describe(f":earth_asia-emoji: 'download' getting video {item.id} ...", end=" ")
            path = image_handler.download_file(file.link, dest / f"pexels-{item.id}-{file.width or 'video'}")

        confirm_success(f":floppy_disk-emoji: saved '{path.name}' to {path.parent}")
