"""
pexelsy console utilities

This module provides application-wide access to Rich Console objects for writing to stdout and stderr,
and routes the library's logging output through Rich when the CLI asks for verbose output.
"""

import logging
from io import StringIO

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

pexelsy_theme = Theme(
    {"warning": "orange_red1", "fail": "bold red", "confirm": "", "describe": ""}
)

console = Console(theme=pexelsy_theme)
error_console = Console(theme=pexelsy_theme, stderr=True)
log_console = Console(theme=pexelsy_theme, stderr=True)


"""
Formatting helpers
"""


def warn(msg: str):
    """
    Format msg and print to stderr.
    """

    error_console.print(
        f":exclamation_mark-emoji: [bold]warning: [/] {msg}", style="warning"
    )


def describe(msg: str, **kwargs):
    """
    Format descriptive msg and print to stdout.
    """

    console.print(f"{msg}", style="describe", **kwargs)


def confirm_success(msg: str, **kwargs):
    """
    Format confirmation msg and print to stdout. Accept any additional kwargs that console.print from
    rich module exposes.
    """

    console.print(f"{msg}", style="confirm", **kwargs)


def fail(msg: str):
    """
    Format failure msg and print to stderr.
    """

    error_console.print(f":x-emoji: failed. {msg}", style="fail")


def log(msg: str):
    """
    Print a timestamped msg to stderr.
    """

    log_console.log(msg)


"""
Output levels
"""


def set_verbosity(verbosity: str = None):
    """
    Configure console output for the run.

    - "quiet" sends everything written to the stdout console into a junk stream.
    - "verbose" attaches a RichHandler to the pexelsy logger so request urls and quota updates are shown.
    - anything else restores the defaults.
    """

    # a Console with file=None writes to whatever sys.stdout currently is
    console.file = StringIO() if verbosity == "quiet" else None

    logger = logging.getLogger("pexelsy")
    for handler in [h for h in logger.handlers if isinstance(h, RichHandler)]:
        logger.removeHandler(handler)

    if verbosity == "verbose":
        logger.addHandler(RichHandler(console=log_console, show_path=False))
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(logging.WARNING)
