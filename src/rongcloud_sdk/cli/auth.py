"""CLI: rongcloud auth configure|status|logout"""

from typing import Optional

import click
from rich.console import Console

console = Console()


def _load_config() -> dict:
    from rongcloud_sdk.cli.main import _load_config
    return _load_config()


def _save_config(cfg: dict) -> None:
    from rongcloud_sdk.cli.main import _save_config
    _save_config(cfg)


@click.group()
def auth():
    """Credential commands."""


@auth.command("configure")
@click.option("--app-key", prompt="App key")
@click.option("--app-secret", prompt="App secret", hide_input=True)
@click.option("--base-url", default=None, help="API base URL")
@click.option("--timeout", default=None, type=float, help="Request timeout in seconds")
def auth_configure(app_key: str, app_secret: str, base_url: Optional[str], timeout: Optional[float]):
    """Save app credentials."""
    cfg = _load_config()
    cfg.update({"app_key": app_key, "app_secret": app_secret})
    if base_url:
        cfg["base_url"] = base_url
    if timeout:
        cfg["timeout"] = timeout
    _save_config(cfg)
    console.print("[green]Credentials saved to ~/.rongcloud/config.json[/green]")


@auth.command("status")
def auth_status():
    """Show configured app key."""
    cfg = _load_config()
    if cfg.get("app_key") and cfg.get("app_secret"):
        console.print(f"[green]Configured[/green] app key {cfg['app_key']} ({cfg.get('base_url', 'default endpoint')})")
    else:
        console.print("[yellow]Not configured. Run `rongcloud auth configure`.[/yellow]")


@auth.command("logout")
def auth_logout():
    """Clear saved credentials."""
    _save_config({})
    console.print("[green]Credentials cleared.[/green]")
