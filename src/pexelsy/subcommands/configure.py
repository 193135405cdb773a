"""
pexelsy configure

This module defines the 'configure' subcommand, which saves the Pexels API token to the pexelsy
config file so it does not need to be exported in every shell.
"""

import click

from pexelsy.config import PexelsConfig, config_dir
from pexelsy.cli_utils.decorators import callback
from pexelsy.cli_utils.decorators import catch_errors
from pexelsy.cli_utils.console import confirm_success


@click.command(name="configure")
@click.option(
    "--token",
    prompt="Pexels API key",
    hide_input=True,
    help="Pexels API key to save.",
)
@callback
@catch_errors
def cli(session, token):
    """Save your Pexels API key to the config file."""

    config = PexelsConfig(PEXELS_TOKEN=token, PEXELSY_CONFIG_DIR=config_dir())
    dest_file = config.generate_config_json()

    confirm_success(f":floppy_disk-emoji: 'configure' saved your API key to {dest_file}")
