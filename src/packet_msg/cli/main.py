"""
packet-msg CLI — `pktmsg` command.

Commands:
  pktmsg types               List the registered message kinds
  pktmsg show <file>         Recognize a stored message and show its fields
  pktmsg validate <file>     Report field problems and encoding mismatches
  pktmsg create <tag>        Create a new message and print it
"""

import json
import logging
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from packet_msg import __version__
from packet_msg.allmsg import register_all
from packet_msg.registry import Registry

console = Console()
CONFIG_FILE = Path.home() / ".pktmsg" / "config.json"


def _load_config() -> dict:
    try:
        return json.loads(CONFIG_FILE.read_text())
    except (FileNotFoundError, json.JSONDecodeError):
        return {}


@click.group()
@click.version_option(__version__)
@click.option("-v", "--verbose", is_flag=True, help="Log registration and recognition details.")
@click.pass_context
def main(ctx, verbose):
    """Packet message tools — recognize, validate and create typed messages."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    ctx.obj = register_all(Registry())


@main.command("types")
@click.pass_obj
def types_cmd(registry: Registry):
    """List the registered message kinds, in recognition order."""
    table = Table(title="Message types")
    table.add_column("Tag", style="bold")
    table.add_column("Name")
    table.add_column("Creatable")
    for mtype in registry.types():
        table.add_row(mtype.tag, mtype.name, "yes" if mtype.creatable else "no")
    console.print(table)


# Register subcommands from separate modules
from packet_msg.cli.messages import create_cmd, show_cmd, validate_cmd

main.add_command(show_cmd)
main.add_command(validate_cmd)
main.add_command(create_cmd)


if __name__ == "__main__":
    main()
