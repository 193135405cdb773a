"""
pexelsy Decorators

Use these decorators to turn plain functions into pexelsy subcommands. The CLI group is chained, so one
invocation can run several commands in a row against the same client:

    $ pexelsy search waves curated --per-page 5 quota

Every subcommand returns a callback as soon as click parses it. Once all subcommands have been parsed, the
group's result callback runs the callbacks in order, passing each one the shared PexelsySession. A
subcommand body therefore takes the session as its first argument followed by its own click parameters:

    @click.command(name="sparkle")
    @click.option("--count", type=int, default=1)
    @callback
    @catch_errors
    def cli(session, count):
        '''Do something with the client'''

        for photo in session.client.curated_photos(per_page=count).photos:
            ...
"""

from sys import exit
from functools import wraps
from functools import partial

from pexelsy.cli_utils.console import fail


def callback(func):
    """
    Receive a function and convert it into a new function that returns the original function as a callback.

    Invoking the decorated name (which is what click does when the subcommand is parsed) only binds the command
    line arguments. The returned callback has to be called with the remaining arguments, here the session, to
    actually execute the original function body.
    """

    @wraps(func)
    def _callback(*args, **kwargs):
        @wraps(func)
        def wrapper(*fargs, **fkwargs):
            new_func = partial(func, *fargs, **fkwargs)
            return new_func(*args, **kwargs)

        return wrapper

    return _callback


def catch_errors(func):
    """
    Catch and format errors with the "fail" console template and gracefully
    exit the application with an error code.
    """

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except Exception as error:
            fail(str(error))
            exit(1)

    return wrapper
