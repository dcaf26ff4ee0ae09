"""CLI: pktmsg show|validate|create"""

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from packet_msg.errors import MessageParseError
from packet_msg.models.message import RawMessage
from packet_msg.registry import Registry
from packet_msg.typed import TypedMessage

console = Console()


def _load_config() -> dict:
    from packet_msg.cli.main import _load_config
    return _load_config()


def _read_message(registry: Registry, source) -> tuple[str, TypedMessage]:
    text = source.read().replace("\r\n", "\n")
    try:
        raw = RawMessage.parse(text)
    except MessageParseError as e:
        raise click.ClickException(str(e))
    m = registry.recognize(raw)
    if m is None:
        raise click.ClickException("message was not recognized as any known type")
    return text, m


@click.command("show")
@click.argument("source", type=click.File("r"))
@click.pass_obj
def show_cmd(registry: Registry, source):
    """Show the fields of a stored message (use - for stdin)."""
    _, m = _read_message(registry, source)
    table = Table(title=escape(f"{m.message_type.tag}: {m.message_type}"))
    table.add_column("Tag", style="bold")
    table.add_column("Label")
    table.add_column("Value")
    table.add_column("OK")
    for f in m.fields():
        mark = "[green]✓[/green]" if f.is_valid(m) else "[red]✗[/red]"
        table.add_row(escape(f.tag), escape(f.label), escape(f.value), mark)
    console.print(table)


@click.command("validate")
@click.argument("source", type=click.File("r"))
@click.pass_obj
def validate_cmd(registry: Registry, source):
    """Validate a stored message; exit status 1 if it has problems."""
    text, m = _read_message(registry, source)
    console.print(f"Type: [bold]{escape(m.message_type.tag)}[/bold] ({escape(str(m.message_type))})")
    problems = m.validate()
    for problem in problems:
        console.print(f"[red]•[/red] {escape(problem)}")
    encoded = m.save()
    if encoded != text:
        console.print("[yellow]Re-encoded message differs from the input.[/yellow]")
        problems.append("encoding mismatch")
    if problems:
        raise SystemExit(1)
    console.print("[green]OK[/green]")


@click.command("create")
@click.argument("tag")
@click.option("--set", "assignments", multiple=True, metavar="TAG=VALUE", help="Set a field value.")
@click.pass_obj
def create_cmd(registry: Registry, tag, assignments):
    """Create a new message of the given type and print it."""
    m = registry.create(tag)
    if m is None:
        console.print(f"[red]Creating {escape(tag)!r} messages is not permitted.[/red]")
        raise SystemExit(1)
    cfg = _load_config()
    if cfg.get("from"):
        m.raw.set("From", cfg["from"])
    if cfg.get("to"):
        m.raw.set("To", cfg["to"])
    for assignment in assignments:
        ftag, sep, value = assignment.partition("=")
        if not sep:
            raise click.BadParameter(f"expected TAG=VALUE, got {assignment!r}", param_hint="--set")
        if not m.set_value(ftag, value):
            console.print(f"[red]{escape(tag)} messages have no field {escape(ftag)!r}.[/red]")
            raise SystemExit(1)
    click.echo(m.save(), nl=False)
