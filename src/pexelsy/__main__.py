"""
__main__.py

This file adds support for running pexelsy as a python module instead of invoking the "pexelsy" command line entrypoint.

    $ python -m pexelsy search waves
"""

from pexelsy.cli import main


if __name__ == "__main__":
    main()
