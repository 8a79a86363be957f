"""
RongCloud CLI — `rongcloud` command.

Commands:
  rongcloud auth configure      Save app key / secret
  rongcloud conversation <cmd>  Conversation do-not-disturb
  rongcloud sensitive <cmd>     Sensitive word management
  rongcloud ultragroup <cmd>    Ultra group management
"""

import asyncio
import json
import os
from pathlib import Path

try:
    import click
    from rich.console import Console
except ImportError:
    raise SystemExit("CLI requires extras: pip install rongcloud-sdk[cli]")

from pydantic import ValidationError

from rongcloud_sdk.client import AsyncRongCloud
from rongcloud_sdk.errors import RongCloudError
from rongcloud_sdk.models.config import ClientConfig, ClientOptions

console = Console()
CONFIG_FILE = Path.home() / ".rongcloud" / "config.json"


def _load_config() -> dict:
    try:
        return json.loads(CONFIG_FILE.read_text())
    except (FileNotFoundError, json.JSONDecodeError):
        return {}


def _save_config(cfg: dict) -> None:
    CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
    CONFIG_FILE.write_text(json.dumps(cfg, indent=2))
    CONFIG_FILE.chmod(0o600)


def _client_config() -> ClientConfig:
    """Saved config, with RONGCLOUD_* environment variables taking precedence."""
    cfg = _load_config()
    app_key = os.environ.get("RONGCLOUD_APP_KEY") or cfg.get("app_key")
    app_secret = os.environ.get("RONGCLOUD_APP_SECRET") or cfg.get("app_secret")
    if not app_key or not app_secret:
        console.print("[red]No credentials. Run `rongcloud auth configure` first.[/red]")
        raise SystemExit(1)
    try:
        return ClientConfig.build(app_key, app_secret, ClientOptions(
            base_url=os.environ.get("RONGCLOUD_BASE_URL") or cfg.get("base_url"),
            sms_url=os.environ.get("RONGCLOUD_SMS_URL") or cfg.get("sms_url"),
            timeout=os.environ.get("RONGCLOUD_TIMEOUT") or cfg.get("timeout"),
        ))
    except ValidationError as e:
        fields = ", ".join(".".join(str(part) for part in err["loc"]) for err in e.errors())
        console.print(f"[red]Invalid configuration ({fields}). Check RONGCLOUD_* or `rongcloud auth configure`.[/red]")
        raise SystemExit(1)


def _get_client() -> AsyncRongCloud:
    return AsyncRongCloud.from_config(_client_config())


def _run(coro):
    """Run a command coroutine; platform failures end the process with status 1."""
    try:
        return asyncio.run(coro)
    except RongCloudError as e:
        kind = type(e).__name__
        code = f" {e.code}" if e.code is not None else ""
        rid = f" (request id {e.request_id})" if e.request_id else ""
        console.print(f"[red]{kind}{code}: {e.message}{rid}[/red]")
        raise SystemExit(1)


@click.group()
@click.version_option("0.1.0")
def main():
    """RongCloud CLI — server API operations from the shell."""


# Register subcommands from separate modules
from rongcloud_sdk.cli.auth import auth
from rongcloud_sdk.cli.conversation import conversation
from rongcloud_sdk.cli.sensitive import sensitive
from rongcloud_sdk.cli.ultragroup import ultragroup

main.add_command(auth)
main.add_command(conversation)
main.add_command(sensitive)
main.add_command(ultragroup)


if __name__ == "__main__":
    main()
