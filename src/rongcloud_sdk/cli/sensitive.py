"""CLI: rongcloud sensitive list|add|remove"""

import json

import click
from rich.console import Console
from rich.table import Table

from rongcloud_sdk.models.sensitive import SensitiveType

console = Console()


def _get_client():
    from rongcloud_sdk.cli.main import _get_client
    return _get_client()


def _run(coro):
    from rongcloud_sdk.cli.main import _run
    return _run(coro)


@click.group()
def sensitive():
    """Sensitive word management."""


@sensitive.command("list")
@click.option("--json-output", "--json", is_flag=True)
def sensitive_list(json_output):
    """List sensitive words."""

    async def _list():
        async with _get_client() as client:
            words = await client.sensitive.list()
        if json_output:
            click.echo(json.dumps([w.model_dump() for w in words], indent=2, ensure_ascii=False))
            return
        table = Table(title=f"Sensitive words ({len(words)})")
        table.add_column("Word", style="bold")
        table.add_column("Type")
        table.add_column("Replacement")
        for w in words:
            table.add_row(w.word, w.type, w.replace_word)
        console.print(table)

    _run(_list())


@sensitive.command("add")
@click.argument("keyword")
@click.option("--replace", default="", help="Replacement text (omit together with --block)")
@click.option("--block", is_flag=True, help="Block messages containing the word instead of replacing it")
def sensitive_add(keyword, replace, block):
    """Add a sensitive word."""

    async def _add():
        kind = SensitiveType.BLOCK if block else SensitiveType.REPLACE
        async with _get_client() as client:
            await client.sensitive.add(keyword, replace, kind)
        console.print(f"[green]Added {keyword!r}[/green]")

    _run(_add())


@sensitive.command("remove")
@click.argument("keywords", nargs=-1, required=True)
def sensitive_remove(keywords):
    """Remove up to 50 sensitive words."""

    async def _remove():
        async with _get_client() as client:
            await client.sensitive.remove(list(keywords))
        console.print(f"[green]Removed {len(keywords)} word(s)[/green]")

    _run(_remove())
