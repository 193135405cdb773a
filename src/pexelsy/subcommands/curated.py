"""
pexelsy curated

This module defines the 'curated' subcommand, which lists the photos currently curated by the Pexels team.
"""

import click

from pexelsy.cli_utils.utils import show_result
from pexelsy.cli_utils.decorators import callback
from pexelsy.cli_utils.decorators import catch_errors


@click.command(name="curated")
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
    """List curated photos."""

    result = session.client.curated_photos(per_page=per_page, page=page)
    show_result(session, result, title=f"curated photos page {result.page}")
