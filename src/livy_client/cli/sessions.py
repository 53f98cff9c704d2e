"""CLI: livy sessions list|create|get|state|kill|log"""

from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from livy_client.models.session import NewSessionRequest, SessionKind

console = Console()


def _call(fn):
    from livy_client.cli.main import _call
    return _call(fn)


def _echo_json(model) -> None:
    from livy_client.cli.main import _echo_json
    _echo_json(model)


def _value(v) -> str:
    if v is None:
        return ""
    return getattr(v, "value", str(v))


@click.group()
def sessions():
    """Interactive session management."""


@sessions.command("list")
@click.option("--from", "from_", default=None, type=int)
@click.option("--size", default=None, type=int)
@click.option("--json-output", "--json", is_flag=True)
def sessions_list(from_, size, json_output):
    """List sessions."""
    result = _call(lambda client: client.sessions.list(from_=from_, size=size))
    if json_output:
        _echo_json(result)
        return
    table = Table(title=f"Sessions ({result.total or 0} total)")
    table.add_column("ID", style="bold")
    table.add_column("Kind")
    table.add_column("State")
    table.add_column("Owner")
    table.add_column("App ID")
    for s in result.sessions or []:
        table.add_row(_value(s.id), _value(s.kind), _value(s.state), s.owner or "", s.app_id or "")
    console.print(table)


@sessions.command("create")
@click.option("--kind", type=click.Choice([k.value for k in SessionKind]), default=SessionKind.SPARK.value)
@click.option("--name", default=None)
@click.option("--proxy-user", default=None)
@click.option("--queue", default=None)
@click.option("--driver-memory", default=None)
@click.option("--executor-memory", default=None)
@click.option("--num-executors", default=None, type=int)
@click.option("--conf", multiple=True, help="Spark conf as key=value, repeatable")
def sessions_create(kind, name, proxy_user, queue, driver_memory, executor_memory, num_executors, conf):
    """Create a new interactive session."""
    request = NewSessionRequest(
        kind=SessionKind(kind),
        name=name,
        proxy_user=proxy_user,
        queue=queue,
        driver_memory=driver_memory,
        executor_memory=executor_memory,
        num_executors=num_executors,
        conf=_parse_conf(conf),
    )
    with console.status("Creating session..."):
        session = _call(lambda client: client.sessions.create(request))
    console.print(f"[green]Session created: {session.id} ({_value(session.state)})[/green]")


@sessions.command("get")
@click.argument("session_id", type=int)
@click.option("--json-output", "--json", is_flag=True)
def sessions_get(session_id, json_output):
    """Show one session."""
    session = _call(lambda client: client.sessions.get(session_id))
    if json_output:
        _echo_json(session)
        return
    console.print(f"[bold]Session {session.id}[/bold] {_value(session.kind)} ({_value(session.state)})")
    if session.app_id:
        console.print(f"App ID: {session.app_id}")
    for key, value in (session.app_info or {}).items():
        console.print(f"  {key}: {escape(value or '')}")


@sessions.command("state")
@click.argument("session_id", type=int)
def sessions_state(session_id):
    """Print the session state."""
    result = _call(lambda client: client.sessions.get_state(session_id))
    click.echo(_value(result.state))


@sessions.command("kill")
@click.argument("session_id", type=int)
def sessions_kill(session_id):
    """Kill (delete) a session."""
    with console.status("Killing..."):
        result = _call(lambda client: client.sessions.kill(session_id))
    console.print(f"[green]Session {session_id}: {result.msg or 'killed'}[/green]")


@sessions.command("log")
@click.argument("session_id", type=int)
@click.option("--from", "from_", default=None, type=int)
@click.option("--size", default=None, type=int)
def sessions_log(session_id, from_, size):
    """Print session log lines."""
    result = _call(lambda client: client.sessions.log(session_id, from_=from_, size=size))
    for line in result.log or []:
        click.echo(line)


def _parse_conf(pairs) -> Optional[dict]:
    if not pairs:
        return None
    conf = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep:
            raise click.BadParameter(f"expected key=value, got {pair!r}", param_hint="--conf")
        conf[key] = value
    return conf
