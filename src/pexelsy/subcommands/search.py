"""
pexelsy search

This module defines the 'search' subcommand, which searches Pexels photos (default) or videos for a query.
"""

import click

from pexelsy.cli_utils.utils import show_result
from pexelsy.cli_utils.decorators import callback
from pexelsy.cli_utils.decorators import catch_errors


@click.command(name="search")
@click.argument("query")
@click.option(
    "--per-page",
    "-n",
    type=click.IntRange(min=1, max=80),
    default=15,
    show_default=True,
    help="Number of results per page (Pexels allows up to 80).",
)
@click.option(
    "--page",
    "-p",
    type=click.IntRange(min=1),
    default=1,
    show_default=True,
    help="Page of results to show.",
)
@click.option(
    "--video/--photo",
    default=False,
    show_default=True,
    help="Search videos instead of photos.",
)
@callback
@catch_errors
def cli(session, query, per_page, page, video):
    """
    Search Pexels photos or videos, e.g. search --video "ocean waves"
    """

    if video:
        result = session.client.search_videos(query, per_page=per_page, page=page)
    else:
        result = session.client.search_photos(query, per_page=per_page, page=page)

    show_result(
        session,
        result,
        title=f"'{query}' page {result.page}: {result.total_results} results",
    )
