"""
conftest.py

Test configuration for CLI and entrypoint tests.

Defines pytest fixtures specifically related to CLI and click operations.
"""


import pytest
import click
from unittest.mock import patch

from pexelsy.cli import cli
from pexelsy.cli_utils.utils import import_commands
from pexelsy.cli_utils.utils import attach_commands
from pexelsy.cli_utils.decorators import callback
from pexelsy.cli_utils.console import set_verbosity


@pytest.fixture(scope="session")
def subcommands():
    """
    Import and attach all of the commands found in the /subcommands folder *without*
    invoking the entrypoint (cli).
    """

    # setup

    cmds = import_commands()

    @click.command(name="_test")
    @callback
    def test_command(session, *args, **kwargs):

        print("TEST COMMAND - I am a functioning command.")

    cmds.append(test_command)

    return cmds


@pytest.fixture(autouse=True)
def setup(subcommands, reset_commands, entry_point: click.Group = cli):
    attach_commands(entry_point, subcommands)
    yield
    reset_commands(entry_point=entry_point)
    set_verbosity(None)


@pytest.fixture
def reset_commands():
    def inner(entry_point: click.Group = cli):
        # teardown the commands that may have been added to clean the test environment.
        entry_point.commands = {}

    return inner


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """
    Keep every CLI test away from the user's real token and config file.
    """

    for name in ("PEXELS_TOKEN", "PIXELS_TOKEN"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("PEXELSY_CONFIG_DIR", str(tmp_path / "config"))

    with patch("pexelsy.config.load_dotenv", autospec=True):
        yield
