"""
pexelsy CLI Utilities

This module contains utilities shared across click subcommands: the PexelsySession object that is
passed from command to command, importing subcommands from the subcommands directory, and printing
decoded results either as Rich tables or as JSON.
"""

import sys
import json
import inspect
import importlib.util

from dataclasses import dataclass, field, asdict
from pathlib import Path
from collections.abc import Iterable
from typing import Optional

import click
from rich.table import Table

import pexelsy

from pexelsy.client import PexelsClient
from pexelsy.config import load_config
from pexelsy.models import Photo, Video
from pexelsy.cli_utils.console import console, warn


@dataclass
class PexelsySession:
    """
    Application data passed around subcommands. Holds the options given to the 'pexelsy' group and the
    client shared by every command in the chain, so the remaining quota seen by one command is visible to
    the next one. selection holds the photos or videos printed by the most recent command, which lets
    commands such as 'download' act on them.

    The client is created on first use. Commands that never talk to the API (e.g. 'configure') therefore
    work without a token.
    """

    token: Optional[str] = None
    json_output: bool = False
    selection: list = field(default_factory=list)
    _client: Optional[PexelsClient] = None

    @property
    def client(self) -> PexelsClient:
        if self._client is None:
            self._client = PexelsClient.from_config(load_config(token=self.token))
        return self._client

    def close(self):
        if self._client is not None:
            self._client.close()


def import_commands(module_paths: Iterable = None) -> list[click.Command]:
    """
    Retrieve a set of click Commands from module_paths. Default directory is the built in subcommands
    directory for commands that come pre-installed with pexelsy.

    A valid pexelsy command module defines a "cli" function wrapped as a click Command object. Set the
    'name' keyword argument in the @click.command decorator to set the name of the command intended for
    the end user.
    """

    if module_paths is None:
        module_paths = sorted(Path(pexelsy.__file__).parent.glob("subcommands/*.py"))

    commands = []

    for path in module_paths:
        name = inspect.getmodulename(path)
        if name != "__init__":

            # Recipe for loading and executing modules from given filepath
            # comes from importlib docs:
            # https://docs.python.org/3/library/importlib.html#importing-a-source-file-directly
            module_name = f"pexelsy.subcommands.{name}"

            spec = importlib.util.spec_from_file_location(module_name, path)
            module = importlib.util.module_from_spec(spec)
            sys.modules[module_name] = module
            spec.loader.exec_module(module)

            try:
                cli = getattr(module, "cli")
                commands.append(cli)

            except AttributeError:
                warn(f"Cannot add command {name}: no 'cli' function found.")

    return commands


def attach_commands(group: click.Group, commands: list[click.Command]):
    """
    Attach each command in a list of click Command objects to a provided group. Useful when
    retrieving a dynamic list of subcommands with import_commands().
    """

    for command in commands:
        group.add_command(command)


"""
Output
"""


def print_json(record):
    """Print a decoded record as indented JSON on stdout."""

    click.echo(json.dumps(asdict(record), indent=2))


def photo_table(photos: list[Photo], title: str = None) -> Table:

    table = Table(title=title)
    table.add_column("id", justify="right")
    table.add_column("size")
    table.add_column("photographer")
    table.add_column("url", overflow="fold")

    for photo in photos:
        table.add_row(
            str(photo.id),
            f"{photo.width}x{photo.height}",
            photo.photographer,
            photo.url,
        )

    return table


def video_table(videos: list[Video], title: str = None) -> Table:

    table = Table(title=title)
    table.add_column("id", justify="right")
    table.add_column("size")
    table.add_column("duration", justify="right")
    table.add_column("files", justify="right")
    table.add_column("url", overflow="fold")

    for video in videos:
        table.add_row(
            str(video.id),
            f"{video.width}x{video.height}",
            f"{video.duration:g}s",
            str(len(video.video_files)),
            video.url,
        )

    return table


def show_result(session: PexelsySession, result, title: str = None):
    """
    Print a listing envelope, a single Photo or a single Video according to the session's output mode.
    """

    if isinstance(result, (Photo, Video)):
        session.selection = [result]
    else:
        items = result.photos if hasattr(result, "photos") else result.videos
        session.selection = list(items)

    if session.json_output:
        print_json(result)
        return

    if isinstance(result, Photo):
        console.print(photo_table([result], title=title))
    elif isinstance(result, Video):
        console.print(video_table([result], title=title))
    elif hasattr(result, "photos"):
        console.print(photo_table(result.photos, title=title))
    else:
        console.print(video_table(result.videos, title=title))
