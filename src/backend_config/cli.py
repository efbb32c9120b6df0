"""Command-line entry point for inspecting configurations."""

from __future__ import annotations

import logging
import sys

import click

from ._formatter import render
from ._loader import DEFAULT_CONFIG_DIR, load
from ._root import RootConfig
from ._secrets import load_secrets
from ._types import ConfigError

logger = logging.getLogger(__name__)


def load_for_cli(run_mode: str, server_id: str, config_dir: str) -> RootConfig:
    """Load secrets and configuration for *run_mode*, exiting with status 1 on error."""
    try:
        secrets = load_secrets(run_mode, config_dir)
        return load(run_mode, server_id, secrets, config_dir=config_dir)
    except ConfigError as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        sys.exit(1)


def _common_options(func):
    func = click.option(
        "--config-dir",
        default=DEFAULT_CONFIG_DIR,
        envvar="BACKEND_CONFIG_DIR",
        show_default=True,
        help="Directory holding <run-mode>.yaml and passwords.yaml.",
    )(func)
    func = click.option(
        "--server-id",
        default="default",
        show_default=True,
        help="Logical id of this server process.",
    )(func)
    return click.argument("run_mode")(func)


@click.group("backend-config")
@click.option("-v", "--verbose", is_flag=True, help="Log loader activity to stderr.")
def main(verbose: bool) -> None:
    """Inspect and validate backend server configurations."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command("show")
@_common_options
def show_cli(run_mode: str, server_id: str, config_dir: str) -> None:
    """Print the configuration for RUN_MODE with passwords masked.

    Examples:\n
        backend-config show development\n
        backend-config show production --config-dir /etc/app/config\n
    """
    config = load_for_cli(run_mode, server_id, config_dir)
    click.echo(render(config), nl=False)


@main.command("check")
@_common_options
def check_cli(run_mode: str, server_id: str, config_dir: str) -> None:
    """Validate the configuration for RUN_MODE and report OK or the first error."""
    load_for_cli(run_mode, server_id, config_dir)
    logger.debug("Configuration for %s is valid", run_mode)
    click.secho("OK", fg="green")
