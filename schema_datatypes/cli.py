from pathlib import Path

import click

from .config import DataTypeConfig
from .errors import DataTypeError
from .loader import TypeGraphLoader
from .logging import configure_logging, get_logger
from .report import find_unresolved, render_report

logger = get_logger(__name__)


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option("--output", "-o", default=None, type=click.Path(resolve_path=True))
@click.option(
    "--fail-on-unresolved",
    is_flag=True,
    default=False,
    help="Exit with an error if any type could not be resolved",
)
@click.argument("path", type=click.Path(exists=True, resolve_path=True))
def schema_datatypes(config, output, fail_on_unresolved, path):
    """Load a type graph document and report its resolved data types."""
    if config is not None:
        config = DataTypeConfig.from_file(config)
    else:
        config = DataTypeConfig()

    # CLI flag overrides the config file if set
    if fail_on_unresolved:
        config.fail_on_unresolved = True

    configure_logging(config.log_level, config.json_logs)

    try:
        types = TypeGraphLoader.from_file(path).load()
    except DataTypeError as e:
        raise click.ClickException(str(e)) from e

    out = render_report(types, config)
    if output is not None:
        Path(output).write_text(out, encoding="utf-8")
    else:
        click.echo(out, nl=False)

    unresolved = find_unresolved(types)
    if unresolved and config.fail_on_unresolved:
        logger.error("Unresolved types found", types=unresolved)
        raise click.ClickException(f"Unresolved types: {', '.join(unresolved)}")
