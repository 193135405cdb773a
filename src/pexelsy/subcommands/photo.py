"""
pexelsy photo

This module defines the 'photo' subcommand, which shows a single photo by its Pexels id.
"""

import click

from pexelsy.cli_utils.utils import show_result
from pexelsy.cli_utils.decorators import callback
from pexelsy.cli_utils.decorators import catch_errors


@click.command(name="photo")
@click.argument("photo_ids", metavar="ID", type=click.IntRange(min=0), nargs=-1, required=True)
@callback
@catch_errors
def cli(session, photo_ids):
    """Show photos by id, e.g. photo 2014422"""

    selection = []
    for photo_id in photo_ids:
        photo = session.client.get_photo(photo_id)
        show_result(session, photo)
        selection.append(photo)

    session.selection = selection
