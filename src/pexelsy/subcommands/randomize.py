"""
pexelsy random

This module defines the 'random' subcommand, which grabs a random photo from the curated listing or a random
video from the popular listing.

The module is not called random.py so that it never shadows the standard library module.
"""

import click

from pexelsy.cli_utils.utils import show_result
from pexelsy.cli_utils.decorators import callback
from pexelsy.cli_utils.decorators import catch_errors
from pexelsy.cli_utils.console import confirm_success


@click.command(name="random")
@click.option(
    "--video/--photo",
    default=False,
    show_default=True,
    help="Pick a popular video instead of a curated photo.",
)
@callback
@catch_errors
def cli(session, video):
    """
    Pick a random curated photo or popular video.
    """

    if video:
        item = session.client.get_random_video()
    else:
        item = session.client.get_random_photo()

    if not session.json_output:
        confirm_success(f":game_die-emoji: 'random' picked {item.url}")

    show_result(session, item)
