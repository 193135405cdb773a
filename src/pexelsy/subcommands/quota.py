"""
pexelsy quota

This module defines the 'quota' subcommand. It prints the remaining request quota reported by Pexels on the
most recent response in the current chain of commands, so it is only useful after another command, e.g.

    $ pexelsy search waves quota
"""

import click

from pexelsy.cli_utils.decorators import callback
from pexelsy.cli_utils.decorators import catch_errors
from pexelsy.cli_utils.console import describe
from pexelsy.cli_utils.console import warn


@click.command(name="quota")
@callback
@catch_errors
def cli(session):
    """Show the remaining request quota seen by the previous commands."""

    remaining = session.client.remaining_requests

    if remaining is None:
        warn("no quota reported yet. Run 'quota' after a command that calls the API.")
        return

    if session.json_output:
        click.echo(remaining)
    else:
        describe(f"{remaining} requests remaining")
