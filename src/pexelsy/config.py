"""
pexelsy Configuration Management

This file handles finding the Pexels API token and saving it to a configuration file. The token is the only
setting pexelsy needs. load_config should be called once at startup, before any request is attempted,
and raises a PexelsConfigError if no token can be found.

The token is looked up in this order:

1) PEXELS_TOKEN in the environment (a .env file in the working directory is loaded first with python-dotenv).
   PIXELS_TOKEN is accepted as well for older setups.
2) "config.json" in the directory named by PEXELSY_CONFIG_DIR, or ~/.config/pexelsy/config.json as per
   modern Linux app development conventions.
"""

import json
import os
from dataclasses import dataclass
from dataclasses import asdict
from pathlib import Path, PurePath
from typing import Optional

from dotenv import load_dotenv

TOKEN_ENV_VARS = ("PEXELS_TOKEN", "PIXELS_TOKEN")

DEFAULT_CONFIG_DIR = Path("~/.config/pexelsy").expanduser()


class PexelsConfigError(Exception):
    """Raise when an issue occurs with handling pexelsy configuration."""

    pass


class PathEncoder(json.JSONEncoder):
    """
    custom encoder adds support for serializing pathlib objects as strings
    """

    def default(self, o):
        if isinstance(o, PurePath):
            return str(o)

        else:
            return json.JSONEncoder.default(self, o)


@dataclass
class PexelsConfig:
    """
    Dataclass to represent configuration variables for pexelsy. Instantiated with keyword arguments from a
    deserialized json object so application code never touches raw dictionary keys.
    """

    PEXELS_TOKEN: str = ""
    PEXELSY_CONFIG_DIR: Path = DEFAULT_CONFIG_DIR

    def __post_init__(self):
        """
        Handle the case where a new PexelsConfig is created from JSON, which cannot
        deserialize a str into a Path.
        """

        self.PEXELSY_CONFIG_DIR = Path(self.PEXELSY_CONFIG_DIR).expanduser()

    @property
    def config_file(self) -> Path:
        return self.PEXELSY_CONFIG_DIR / "config.json"

    def generate_config_json(self) -> Path:
        """
        Write the PexelsConfig to file, serializing to JSON. Returns filepath of written
        config.json file which is located at PEXELSY_CONFIG_DIR.

        Warning: will overwrite any existing config file for pexelsy.
        """

        try:
            to_json = json.dumps(
                asdict(self), sort_keys=True, indent=4, cls=PathEncoder
            )

        except TypeError as error:
            raise PexelsConfigError(
                f"There was an error trying to serialize config data to JSON: {error}"
            ) from error

        try:
            self.PEXELSY_CONFIG_DIR.mkdir(parents=True, exist_ok=True)

            dest_file = self.config_file
            with open(dest_file, "w") as file:
                file.write(to_json)

            # the file holds an API key, keep it private to the user
            dest_file.chmod(0o600)

        except OSError as error:
            raise PexelsConfigError(
                f"There was an error saving the configuration file: {error}."
            ) from error

        return dest_file


def config_dir() -> Path:
    """Directory holding config.json: PEXELSY_CONFIG_DIR from environment or ~/.config/pexelsy."""

    try:
        return Path(os.environ["PEXELSY_CONFIG_DIR"]).expanduser()

    except KeyError:
        return DEFAULT_CONFIG_DIR


def token_from_env() -> Optional[str]:
    """
    Return the API token from the environment (after loading any .env file), or None if unset.
    """

    load_dotenv()

    for name in TOKEN_ENV_VARS:
        token = os.environ.get(name)
        if token:
            return token

    return None


def load_config_file(config_src: Path) -> PexelsConfig:
    """
    Load a config.json and instantiate variables as a PexelsConfig dataclass. Raise PexelsConfigError if
    the file can't be found or read.
    """

    try:
        with config_src.open("r") as file:

            from_json = json.loads(file.read())
            config = PexelsConfig(**from_json)

    except json.JSONDecodeError as error:
        raise PexelsConfigError(f"There was an issue reading the config: {error}")

    except TypeError as error:
        raise PexelsConfigError(f"Unexpected setting in {config_src}: {error}")

    except FileNotFoundError as error:
        raise PexelsConfigError(f"There was an issue opening the config: {error}")

    return config


def load_config(token: Optional[str] = None) -> PexelsConfig:
    """
    Build the PexelsConfig for this run. An explicitly supplied token wins, then the environment, then the
    config file. Raise PexelsConfigError if none of them provides a token.
    """

    directory = config_dir()

    token = token or token_from_env()
    if token:
        return PexelsConfig(PEXELS_TOKEN=token, PEXELSY_CONFIG_DIR=directory)

    try:
        config = load_config_file(directory / "config.json")

    except PexelsConfigError as error:
        raise PexelsConfigError(
            f"No Pexels API token found. Set PEXELS_TOKEN or run 'pexelsy configure'. ({error})"
        ) from error

    if not config.PEXELS_TOKEN:
        raise PexelsConfigError(
            f"config file {directory / 'config.json'} does not contain a PEXELS_TOKEN."
        )

    return config
