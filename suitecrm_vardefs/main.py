"""
Command-line entry point for the SuiteCRM vardefs exporter.
"""

import logging
import sys
from typing import Optional

import click
from dotenv import load_dotenv

from .config.provider import ConfigProvider, CRMConfig, EnvConfigProvider
from .logging_config import configure_logging
from .modules.http import HttpClient
from .pipeline import run_pipeline

logger = logging.getLogger(__name__)


def load_config(provider: ConfigProvider) -> CRMConfig:
    """Read the CRM configuration, reporting problems as CLI usage errors."""
    try:
        return provider.get_crm_config()
    except ValueError as e:
        raise click.UsageError(str(e))


@click.command()
@click.option("--env-file", "env_file", type=click.Path(exists=True, dir_okay=False), default=None,
              help="Load environment variables from this dotenv file.")
@click.option("--base-url", "base_url", default=None, help="Overrides SUITECRM_BASE_URL.")
@click.option("--client-id", "client_id", default=None, help="Overrides SUITECRM_CLIENT_ID.")
@click.option("--client-secret", "client_secret", default=None, help="Overrides SUITECRM_CLIENT_SECRET.")
@click.option("--username", "username", default=None, help="Overrides SUITECRM_USERNAME.")
@click.option("--password", "password", default=None, help="Overrides SUITECRM_PASSWORD.")
@click.option("--log-level", "log_level", default="INFO",
              type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False))
def main(
    env_file: Optional[str],
    base_url: Optional[str],
    client_id: Optional[str],
    client_secret: Optional[str],
    username: Optional[str],
    password: Optional[str],
    log_level: str
):
    """Export the vardefs of every SuiteCRM module as JSON."""
    configure_logging(log_level)
    load_dotenv(env_file)

    provider = EnvConfigProvider(overrides={
        "base_url": base_url,
        "client_id": client_id,
        "client_secret": client_secret,
        "username": username,
        "password": password,
    })
    config = load_config(provider)

    logger.info(f"Exporting vardefs from {config.base_url}")
    with HttpClient() as http:
        result = run_pipeline(config, http)

    if not result.ok:
        click.echo(result.error)
        sys.exit(1)

    click.echo(result.output)


if __name__ == "__main__":
    main()
