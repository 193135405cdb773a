"""
pexelsy popular

This module defines the 'popular' subcommand, which lists the currently popular Pexels videos.
"""

import click

from pexelsy.cli_utils.utils import show_result
from pexelsy.cli_utils.decorators import callback
from pexelsy.cli_utils.decorators import catch_errors


@click.command(name="popular")
@click.option(
    "--per-page",
    "-n",
    type=click.IntRange(min=1, max=80),
    default=15,
    show_default=True,
)
@click.option("--page", "-p", type=click.IntRange(min=1), default=1, show_default=True)
@callback
@catch_errors
def cli(session, per_page, page):
    """List popular videos."""

    result = session.client.popular_videos(per_page=per_page, page=page)
    show_result(session, result, title=f"popular videos page {result.page}")
