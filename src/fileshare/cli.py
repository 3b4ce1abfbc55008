# cli.py
import os
import sys
import logging
from typing import Dict, Optional

import click
from dotenv import dotenv_values
from pydantic import ValidationError

from fileshare.config.settings import get_settings
from fileshare.environment import Environment, resolve
from fileshare.errors import StartupConfigError

logger = logging.getLogger(__name__)


def load_environ(env_file: Optional[str]) -> Dict[str, str]:
    """
    Build the variable lookup for the resolver.

    Values from ``env_file`` are used only where the process environment
    does not already define the variable.
    """
    environ: Dict[str, str] = {}
    if env_file:
        for key, value in dotenv_values(env_file).items():
            # keys without a value ("KEY" alone on a line) count as unset
            if value is not None:
                environ[key] = value
        logger.debug(f"Loaded {len(environ)} variables from {env_file}")
    environ.update(os.environ)
    return environ


def _shell_quote(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"').replace("$", "\\$").replace("`", "\\`")


env_file_option = click.option(
    "--env-file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Optional .env file with GOKAPI_* variables",
)


@click.group()
def cli():
    """Inspect the GOKAPI_* startup configuration"""
    try:
        settings = get_settings()
    except ValidationError as e:
        print(f"❌ Invalid tool settings: {e.errors()[0]['msg']}")
        sys.exit(1)
    settings.configure_logging()


@cli.command()
@env_file_option
def show_config(env_file):
    """Show the resolved configuration with secrets masked"""
    env = resolve(load_environ(env_file))

    print("Current Configuration:")
    for name, value in env.redacted().items():
        print(f"  {name}: {value}")
    print(f"  remote storage configured: {'yes' if env.is_aws_provided() else 'no'}")


@cli.command()
@env_file_option
def check(env_file):
    """Exit with status 1 if any integer variable could not be parsed"""
    env = resolve(load_environ(env_file))
    try:
        env.require_valid()
    except StartupConfigError as e:
        print(f"❌ {e}")
        sys.exit(1)
    print("✅ Configuration is valid")


@cli.command()
@env_file_option
def export(env_file):
    """Print the resolved configuration as shell export commands"""
    env: Environment = resolve(load_environ(env_file))
    for key, value in env.to_environ().items():
        print(f'export {key}="{_shell_quote(value)}"')


if __name__ == "__main__":
    cli()
