"""
Command-line interface for FitFlow.

This module provides CLI commands for inspecting and decoding FIT files.
"""

import json
import sys
from typing import NoReturn, Optional, Tuple

import click

from .config import get_settings
from .decoder import decode, read_source
from .exceptions import FitFlowError
from .processors import FixCategory, Scalar, UnitSystem, read_header
from .utils import setup_logging


def _fail(error: Exception) -> NoReturn:
    click.echo(f"❌ {error}", err=True)
    sys.exit(1)


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug logging")
def cli(debug: bool) -> None:
    """FitFlow command-line interface."""
    if debug:
        config = get_settings().logging
        setup_logging("DEBUG", config.format, config.structlog, config.file)


@cli.command()
@click.argument("path", type=click.Path())
def header(path: str) -> None:
    """Print the file header."""
    try:
        file_header = read_header(read_source(path))
    except FitFlowError as e:
        _fail(e)

    for key, value in file_header.to_dict().items():
        click.echo(f"{key}: {value}")


@cli.command(name="decode")
@click.argument("path", type=click.Path())
@click.option("--units", "-u", type=click.Choice([u.value for u in UnitSystem]), help="Unit system")
@click.option("--pace/--no-pace", default=None, help="Convert speed fields to pace")
@click.option("--fix-data", "-f", multiple=True,
              type=click.Choice([c.value for c in FixCategory]),
              help="Fill missing record samples (repeatable)")
@click.option("--data-every-second", is_flag=True, default=None, help="One record key per second")
@click.option("--garmin-timestamps", is_flag=True, default=None, help="Keep FIT epoch timestamps")
@click.option("--message", "-m", help="Only print one message")
@click.option("--indent", default=2, show_default=True, help="JSON indentation")
def decode_command(path: str, units: Optional[str], pace: Optional[bool], fix_data: Tuple[str, ...],
                   data_every_second: Optional[bool], garmin_timestamps: Optional[bool],
                   message: Optional[str], indent: int) -> None:
    """Decode a FIT file and print it as JSON."""
    options = get_settings().decoder.to_dict()
    overrides = {
        'units': units,
        'pace': pace,
        'fix_data': list(fix_data) or None,
        'data_every_second': data_every_second,
        'garmin_timestamps': garmin_timestamps,
    }
    options.update({key: value for key, value in overrides.items() if value is not None})

    try:
        table = decode(path, options)
    except FitFlowError as e:
        _fail(e)

    output = table.to_dict()
    if message:
        if message not in output:
            _fail(FitFlowError("Message not present in file", {'message': message}))
        output = output[message]

    click.echo(json.dumps(output, indent=indent or None, default=str))


@cli.command()
@click.argument("path", type=click.Path())
def info(path: str) -> None:
    """Summarize the messages in a FIT file."""
    try:
        table = decode(path, {'units': 'raw'})
    except FitFlowError as e:
        _fail(e)

    click.echo(f"📋 {path}")
    click.echo(f"  manufacturer: {table.manufacturer()}")
    click.echo(f"  product: {table.product()}")
    click.echo(f"  sport: {table.sport()}")
    click.echo(f"  records: {len(table.record_timestamps())}")
    for name in table.message_names():
        fields = table[name]
        samples = max(1 if isinstance(v, Scalar) else len(v) for v in fields.values()) if fields else 0
        click.echo(f"  • {name}: {len(fields)} fields, {samples} samples")
    for name, dev_field in table.developer_data.items():
        click.echo(f"  • developer {name} [{dev_field.units}]: {len(dev_field.values)} samples")


if __name__ == "__main__":
    cli()
