"""
Livy CLI: `livy` command.

Commands:
  livy config set|show|clear   Stored server URL and auth settings
  livy sessions <cmd>          Interactive session lifecycle
  livy statements <cmd>        Run and inspect statements in a session
  livy batches <cmd>           Batch job lifecycle
"""

import json
import os
from pathlib import Path
from typing import Any, Callable

try:
    import click
    from rich.console import Console
    from rich.markup import escape
except ImportError:
    raise SystemExit("CLI requires extras: pip install livy-client[cli]")

from pydantic import BaseModel

from livy_client.client import LivyClient
from livy_client.errors import LivyError

console = Console()
CONFIG_FILE = Path.home() / ".livy" / "config.json"


def _load_config() -> dict:
    try:
        return json.loads(CONFIG_FILE.read_text())
    except (FileNotFoundError, json.JSONDecodeError):
        return {}


def _save_config(cfg: dict) -> None:
    CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
    CONFIG_FILE.write_text(json.dumps(cfg, indent=2))


def _get_client() -> LivyClient:
    cfg = _load_config()
    url = os.environ.get("LIVY_URL") or cfg.get("url")
    if not url:
        console.print("[red]No Livy URL configured. Run `livy config set --url ...` or set LIVY_URL.[/red]")
        raise SystemExit(1)
    try:
        return LivyClient(url, gssnegotiate=cfg.get("gssnegotiate"), username=cfg.get("username"))
    except ImportError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise SystemExit(1)


def _call(fn: Callable[[LivyClient], Any]) -> Any:
    """Run `fn` against a configured client; LivyErrors exit with status 1."""
    client = _get_client()
    try:
        return fn(client)
    except LivyError as e:
        console.print(f"[red]{e.code}: {escape(str(e))}[/red]")
        raise SystemExit(1)
    finally:
        client.close()


def _echo_json(model: BaseModel) -> None:
    click.echo(json.dumps(model.model_dump(mode="json", by_alias=True, exclude_none=True), indent=2))


@click.group()
@click.version_option("0.1.0")
def main():
    """Livy CLI: interactive sessions and batch jobs on a Livy server."""


# Register subcommands from separate modules
from livy_client.cli.config import config
from livy_client.cli.sessions import sessions
from livy_client.cli.statements import statements
from livy_client.cli.batches import batches

main.add_command(config)
main.add_command(sessions)
main.add_command(statements)
main.add_command(batches)


if __name__ == "__main__":
    main()
