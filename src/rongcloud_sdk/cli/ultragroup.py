"""CLI: rongcloud ultragroup create|dismiss|groups|members|channels"""

import click
from rich.console import Console
from rich.table import Table

console = Console()


def _get_client():
    from rongcloud_sdk.cli.main import _get_client
    return _get_client()


def _run(coro):
    from rongcloud_sdk.cli.main import _run
    return _run(coro)


@click.group()
def ultragroup():
    """Ultra group management."""


@ultragroup.command("create")
@click.argument("user_id")
@click.argument("group_id")
@click.argument("group_name")
def ultragroup_create(user_id, group_id, group_name):
    """Create an ultra group."""

    async def _create():
        async with _get_client() as client:
            result = await client.ultragroup.create(user_id, group_id, group_name)
        console.print(f"[green]Created {group_id}[/green] [dim](request id {result.request_id})[/dim]")

    _run(_create())


@ultragroup.command("dismiss")
@click.argument("group_id")
@click.confirmation_option(prompt="Dismiss this group?")
def ultragroup_dismiss(group_id):
    """Dismiss an ultra group."""

    async def _dismiss():
        async with _get_client() as client:
            result = await client.ultragroup.dismiss(group_id)
        console.print(f"[green]Dismissed {group_id}[/green] [dim](request id {result.request_id})[/dim]")

    _run(_dismiss())


@ultragroup.command("groups")
@click.argument("user_id")
@click.option("--page", default=1, type=int)
@click.option("--size", default=20, type=int)
def ultragroup_groups(user_id, page, size):
    """List the groups a user belongs to."""

    async def _groups():
        async with _get_client() as client:
            result = await client.ultragroup.query_user_groups(user_id, page=page, size=size)
        table = Table(title=f"Groups of {user_id}")
        table.add_column("ID", style="bold")
        table.add_column("Name")
        for g in result.data:
            table.add_row(g.group_id, g.group_name)
        console.print(table)

    _run(_groups())


@ultragroup.command("members")
@click.argument("group_id")
@click.option("--page", default=1, type=int)
@click.option("--size", default=20, type=int)
def ultragroup_members(group_id, page, size):
    """List group members."""

    async def _members():
        async with _get_client() as client:
            result = await client.ultragroup.query_group_users(group_id, page=page, size=size)
        for u in result.data:
            console.print(u.id)

    _run(_members())


@ultragroup.command("channels")
@click.argument("group_id")
@click.option("--page", default=1, type=int)
@click.option("--limit", default=20, type=int)
def ultragroup_channels(group_id, page, limit):
    """List group channels."""

    async def _channels():
        async with _get_client() as client:
            result = await client.ultragroup.channel_list(group_id, page=page, limit=limit)
        table = Table(title=f"Channels of {group_id}")
        table.add_column("Channel", style="bold")
        table.add_column("Created")
        for c in result.data:
            table.add_row(c.channel_id, c.create_time)
        console.print(table)

    _run(_channels())
