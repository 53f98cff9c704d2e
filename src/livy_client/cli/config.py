"""CLI: livy config set|show|clear"""

from typing import Optional

import click
from rich.console import Console

console = Console()


def _load_config() -> dict:
    from livy_client.cli.main import _load_config
    return _load_config()


def _save_config(cfg: dict) -> None:
    from livy_client.cli.main import _save_config
    _save_config(cfg)


@click.group()
def config():
    """Server connection settings."""


@config.command("set")
@click.option("--url", default=None, help="Livy server URL, e.g. http://livy:8998")
@click.option("--negotiate/--no-negotiate", default=None, help="Use SPNEGO (Kerberos) authentication")
@click.option("--username", default=None, help="Kerberos principal for SPNEGO")
def config_set(url: Optional[str], negotiate: Optional[bool], username: Optional[str]):
    """Store connection settings in ~/.livy/config.json."""
    cfg = _load_config()
    if url is not None:
        cfg["url"] = url
    if negotiate is not None:
        cfg["gssnegotiate"] = negotiate
    if username is not None:
        cfg["username"] = username
    _save_config(cfg)
    console.print(f"[green]Saved. Server: {cfg.get('url', '(unset)')}[/green]")


@config.command("show")
def config_show():
    """Show stored connection settings."""
    cfg = _load_config()
    if not cfg.get("url"):
        console.print("[yellow]No server configured. Run `livy config set --url ...`.[/yellow]")
        return
    console.print(f"Server: [bold]{cfg['url']}[/bold]")
    console.print(f"Negotiate: {bool(cfg.get('gssnegotiate'))}")
    if cfg.get("username"):
        console.print(f"Username: {cfg['username']}")


@config.command("clear")
def config_clear():
    """Forget stored settings."""
    _save_config({})
    console.print("[green]Settings cleared.[/green]")
