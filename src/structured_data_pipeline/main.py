"""
Structured Data Pipeline CLI

Inspect the pipeline definition and the ids recorded for it.
"""

import json
import logging

import click
import redis
from dotenv import find_dotenv, load_dotenv

# Load .env variables before settings are read
load_dotenv(dotenv_path=find_dotenv(usecwd=True), override=True)

# Activate logging setup before any other imports that use logging
import structured_data_pipeline.logging_config  # noqa: E402,F401

logger = logging.getLogger("structured_data_pipeline.main")

from structured_data_pipeline.config import settings  # noqa: E402
from structured_data_pipeline.models.pipeline_definition import (  # noqa: E402
    PipelineDefinitionError,
    load_pipeline_definition,
)
from structured_data_pipeline.services.option_store import (  # noqa: E402
    create_option_store,
)
from structured_data_pipeline.services.pipeline_registrar import (  # noqa: E402
    RegistrarState,
)


@click.group()
def cli():
    """Structured Data Pipeline CLI - Data Machine registration"""
    pass


@cli.command("definition")
@click.option("--path", default=None, help="Pipeline definition YAML to load")
def show_definition(path):
    """Print the pipeline definition sent to Data Machine."""
    try:
        definition = load_pipeline_definition(path)
    except PipelineDefinitionError as e:
        raise click.ClickException(str(e))
    click.echo(json.dumps(definition.to_payload(), indent=2))


@cli.command("status")
@click.option("--redis-url", default=None, help="Redis URL of the option store")
def show_status(redis_url):
    """Show the recorded pipeline and flow ids."""
    try:
        state = RegistrarState.load(create_option_store(redis_url))
    except redis.RedisError as e:
        raise click.ClickException(f"Cannot read options: {e}")
    if not (redis_url or settings.REDIS_URL):
        click.echo(
            "Note: no Redis URL configured, options are in memory and not persistent"
        )
    if not state.is_registered:
        click.echo("Pipeline not created")
        return
    click.echo(f"Pipeline ID: {state.pipeline_id}")
    click.echo(f"Flow ID: {state.flow_id}")


if __name__ == "__main__":
    cli()
