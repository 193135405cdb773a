"""
pexelsy

Search and browse Pexels photos and videos from the command line.

This module defines the entry point to the pexelsy CLI. It defines a chained 'cli' command group which
collects the global options and sets up a PexelsySession shared by every subcommand in the chain.

Each subcommand returns a callback when it is parsed. The result callback of the group receives the list
of callbacks and runs them in order against the session, so several API calls can be made in a single
invocation and 'quota' reports what the last of them saw.
"""

import click

from pexelsy.cli_utils.decorators import catch_errors
from pexelsy.cli_utils.utils import PexelsySession
from pexelsy.cli_utils.utils import import_commands
from pexelsy.cli_utils.utils import attach_commands
from pexelsy.cli_utils.console import set_verbosity


@click.group(chain=True)
@click.pass_context
@click.option(
    "--token",
    envvar="PEXELS_TOKEN",
    help="Pexels API key. Defaults to PEXELS_TOKEN from the environment, a .env file or the pexelsy config file.",
)
@click.option(
    "--json",
    "json_output",
    is_flag=True,
    default=False,
    help="Print results as JSON instead of tables.",
)
@click.option(
    "--verbose",
    "verbosity",
    flag_value="verbose",
    help="Log every request and the remaining quota to stderr.",
)
@click.option(
    "--quiet",
    "verbosity",
    flag_value="quiet",
    help="Silence all output printed to stdout. JSON output is still written.",
)
@click.version_option(package_name="pexelsy")
def cli(ctx: click.Context, token, json_output, verbosity):
    """
    pexelsy

    search and browse Pexels photos and videos from the command line.


    ====================
    Quickstart
    ====================

    Save your API key once (get one at https://www.pexels.com/api/):

        $ pexelsy configure --token YOUR_API_KEY

    Search for photos of waves:

        $ pexelsy search waves


    ====================
    Usage:
    ====================

    Commands can be chained and share one client, e.g.

        search photos and videos, then show how many requests are left this period:

            $ pexelsy search "northern lights" search --video "northern lights" quota

        grab a random curated photo and save it to ~/Pictures:

            $ pexelsy random download --dest ~/Pictures

        print the popular videos listing as JSON:

            $ pexelsy --json popular --per-page 5


    ====================
    Help
    ====================

    To see what's available and for detailed help text add --help to the specified command, e.g.

        $ pexelsy search --help
    """

    set_verbosity(verbosity)

    ctx.obj = PexelsySession(token=token, json_output=json_output)
    return ctx.obj


@cli.result_callback()
@click.pass_obj
@catch_errors
def process_pipeline(session: PexelsySession, callbacks, *args, **kwargs):
    """
    Run every subcommand callback in the order given on the command line, then release the client.
    """

    try:
        for callback in callbacks:
            callback(session)

    finally:
        session.close()


def main():

    commands = import_commands()
    attach_commands(cli, commands)
    cli()


if __name__ == "__main__":
    main()
