"""CLI: rongcloud conversation mute|unmute|status"""

import click
from rich.console import Console

from rongcloud_sdk.models.conversation import ConversationType

console = Console()

TYPE_CHOICE = click.Choice([t.name.lower() for t in ConversationType], case_sensitive=False)


def _get_client():
    from rongcloud_sdk.cli.main import _get_client
    return _get_client()


def _run(coro):
    from rongcloud_sdk.cli.main import _run
    return _run(coro)


@click.group()
def conversation():
    """Conversation do-not-disturb."""


@conversation.command("mute")
@click.argument("conversation_type", type=TYPE_CHOICE)
@click.argument("user_id")
@click.argument("target_id")
@click.option("--bus-channel", default=None)
def conversation_mute(conversation_type, user_id, target_id, bus_channel):
    """Stop push notifications for a conversation."""

    async def _mute():
        async with _get_client() as client:
            await client.conversation.mute(
                ConversationType[conversation_type.upper()], user_id, target_id, bus_channel=bus_channel,
            )
        console.print(f"[green]Muted {conversation_type} {target_id} for {user_id}[/green]")

    _run(_mute())


@conversation.command("unmute")
@click.argument("conversation_type", type=TYPE_CHOICE)
@click.argument("user_id")
@click.argument("target_id")
@click.option("--bus-channel", default=None)
def conversation_unmute(conversation_type, user_id, target_id, bus_channel):
    """Resume push notifications for a conversation."""

    async def _unmute():
        async with _get_client() as client:
            await client.conversation.unmute(
                ConversationType[conversation_type.upper()], user_id, target_id, bus_channel=bus_channel,
            )
        console.print(f"[green]Unmuted {conversation_type} {target_id} for {user_id}[/green]")

    _run(_unmute())


@conversation.command("status")
@click.argument("conversation_type", type=TYPE_CHOICE)
@click.argument("user_id")
@click.argument("target_id")
def conversation_status(conversation_type, user_id, target_id):
    """Show whether a conversation is muted."""

    async def _status():
        async with _get_client() as client:
            muted = await client.conversation.get(ConversationType[conversation_type.upper()], user_id, target_id)
        console.print("muted" if muted == 1 else "not muted")

    _run(_status())
