import sys

import click
from rich.console import Console
from rich.table import Table

from chash.config import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV
from chash.exceptions import ChashError, LengthMismatchError
from chash.lib.codec import get_chash, validate_chash
from chash.lib.logs import setup_logging
from chash.lib.offsets import get_offsets

LENGTH_CHOICE = click.Choice(["160", "288"])


@click.group()
@click.option(
    "--log-level",
    envvar=LOG_LEVEL_ENV,
    default=DEFAULT_LOG_LEVEL,
    show_default=True,
    help="Logging level for chash diagnostics.",
)
def cli(log_level):
    """Compute and check c-hash identifiers."""
    setup_logging(log_level)


@cli.command("encode")
@click.argument("data")
@click.option(
    "--length",
    type=LENGTH_CHOICE,
    default="160",
    show_default=True,
    help="C-hash length in bits.",
)
def encode(data, length):
    """Prints the c-hash of DATA."""
    try:
        click.echo(get_chash(data, int(length)))
    except ChashError as e:
        raise click.ClickException(str(e))


@cli.command("validate")
@click.argument("encoded")
def validate(encoded):
    """Checks ENCODED and exits non-zero if it is not a valid c-hash."""
    try:
        result = validate_chash(encoded)
    except LengthMismatchError as e:
        raise click.ClickException(f"{e} (expected 32 or 48 characters)")

    if result["status"] == "valid":
        click.echo("valid")
        return
    click.echo(f"invalid ({result['status']})")
    click.echo(result["error_details"], err=True)
    sys.exit(1)


@cli.command("offsets")
@click.option(
    "--length",
    type=LENGTH_CHOICE,
    default="160",
    show_default=True,
    help="C-hash length in bits.",
)
def offsets(length):
    """Shows where the checksum bits go for a c-hash length."""
    table = Table(title=f"Checksum offsets ({length} bits)")
    table.add_column("Bit", justify="right")
    table.add_column("Offset", justify="right")
    table.add_column("Clean-data position", justify="right")

    for i, offset in enumerate(get_offsets(int(length))):
        table.add_row(str(i), str(offset), str(offset - i))

    Console().print(table)


if __name__ == "__main__":
    cli()
