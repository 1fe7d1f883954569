"""Command line interface for content-undo."""
import json
import logging
import sys
from typing import Any, Dict, List

import click
import yaml
from click_default_group import DefaultGroup

from content_undo import __version__
from content_undo.config import load_config
from content_undo.formatters.format_utils import humanize_type
from content_undo.serialization import DecodeError
from content_undo.undo import ContentDescriber, InvalidRecordError

__all__ = [
    "main",
]

logger = logging.getLogger(__name__)

table_option = click.option(
    "-t", "--table", help="Table the records belong to (default: the configured table)."
)
config_option = click.option("-C", "--config", help="Path to a YAML describer configuration.")
strict_option = click.option(
    "--strict/--no-strict",
    default=False,
    show_default=True,
    help="Abort on the first record that cannot be described.",
)


def load_records(stream) -> List[Dict[str, Any]]:
    """
    Read one record or a list of records from YAML or JSON.

    :param stream:
    :return:
    """
    # JSON is a subset of YAML
    objs = yaml.safe_load(stream)
    if objs is None:
        return []
    if isinstance(objs, dict):
        return [objs]
    if not isinstance(objs, list) or not all(isinstance(obj, dict) for obj in objs):
        raise click.UsageError("Expected a record or a list of records")
    return objs


@click.group(
    cls=DefaultGroup,
    default="describe",
    default_if_no_args=True,
)
@click.option("-v", "--verbose", count=True)
@click.option("-q", "--quiet", is_flag=True)
@click.version_option(__version__)
def main(verbose: int, quiet: bool):
    """CLI for content-undo.

    :param verbose: Verbosity while running.
    :param quiet: Boolean to be quiet or verbose.
    """
    logging.basicConfig()
    logger = logging.root
    if verbose >= 2:
        logger.setLevel(level=logging.DEBUG)
    elif verbose == 1:
        logger.setLevel(level=logging.INFO)
    else:
        logger.setLevel(level=logging.WARNING)
    if quiet:
        logger.setLevel(level=logging.ERROR)
    logger.info(f"Logger {logger.name} set to level {logger.level}")


@main.command()
@table_option
@config_option
@strict_option
@click.option("--json", "as_json", is_flag=True, help="Emit JSON instead of YAML.")
@click.argument("input_file", type=click.File("r"), default="-")
def describe(input_file, table, config, strict, as_json):
    """
    Describe content element records.

    Reads a record or list of records from INPUT_FILE (YAML or JSON,
    default: stdin) and prints the undo description of each.

    Example:

        content-undo describe tests/input/records.yaml

    """
    describer = ContentDescriber(config=load_config(config))
    if table is None:
        table = describer.config.supported_table
    results = []
    for record in load_records(input_file):
        result = {"id": record.get("id"), "type": record.get("type")}
        try:
            result["description"] = describer.describe(table, record)
        except (InvalidRecordError, DecodeError) as e:
            if strict:
                raise click.ClickException(str(e))
            logger.info(f"Cannot describe record {result['id']}: {e}")
            result["error"] = str(e)
        results.append(result)
    if as_json:
        click.echo(json.dumps(results, indent=2, ensure_ascii=False))
    else:
        click.echo(yaml.dump(results, sort_keys=False, allow_unicode=True), nl=False)


@main.command()
@config_option
def types(config):
    """List the content element types that can be described."""
    describer = ContentDescriber(config=load_config(config))
    for type_name in describer.supported_types:
        click.echo(f"{type_name}\t{humanize_type(type_name)}")
    for type_name in describer.unsupported_types:
        click.echo(f"{type_name}\t{humanize_type(type_name)} (disabled)")


if __name__ == "__main__":
    main(sys.argv[1:])
