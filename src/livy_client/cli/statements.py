"""CLI: livy statements list|run|get|cancel"""

import click
from rich.console import Console
from rich.table import Table

from livy_client.models.statement import RunStatementRequest

console = Console()


def _call(fn):
    from livy_client.cli.main import _call
    return _call(fn)


def _echo_json(model) -> None:
    from livy_client.cli.main import _echo_json
    _echo_json(model)


def _print_output(stmt) -> None:
    output = stmt.output
    if output is None:
        return
    if output.status and output.status != "ok":
        console.print(f"[red]{output.status}[/red]")
    for mime, text in (output.data or {}).items():
        if mime == "text/plain" and text is not None:
            click.echo(text)


@click.group()
def statements():
    """Statements in an interactive session."""


@statements.command("list")
@click.argument("session_id", type=int)
@click.option("--json-output", "--json", is_flag=True)
def statements_list(session_id, json_output):
    """List statements of a session."""
    result = _call(lambda client: client.statements.list(session_id))
    if json_output:
        _echo_json(result)
        return
    table = Table(title=f"Statements ({result.total_statements or 0} total)")
    table.add_column("ID", style="bold")
    table.add_column("State")
    table.add_column("Status")
    for s in result.statements or []:
        table.add_row(
            "" if s.id is None else str(s.id),
            s.state.value if s.state else "",
            s.output.status if s.output and s.output.status else "",
        )
    console.print(table)


@statements.command("run")
@click.argument("session_id", type=int)
@click.argument("code")
def statements_run(session_id, code):
    """Submit CODE to a session."""
    stmt = _call(lambda client: client.statements.run(session_id, RunStatementRequest(code=code)))
    console.print(f"[green]Statement {stmt.id} submitted ({stmt.state.value if stmt.state else 'unknown'})[/green]")


@statements.command("get")
@click.argument("session_id", type=int)
@click.argument("statement_id", type=int)
@click.option("--json-output", "--json", is_flag=True)
def statements_get(session_id, statement_id, json_output):
    """Show a statement and its output."""
    stmt = _call(lambda client: client.statements.get(session_id, statement_id))
    if json_output:
        _echo_json(stmt)
        return
    console.print(f"[bold]Statement {stmt.id}[/bold] ({stmt.state.value if stmt.state else 'unknown'})")
    _print_output(stmt)


@statements.command("cancel")
@click.argument("session_id", type=int)
@click.argument("statement_id", type=int)
def statements_cancel(session_id, statement_id):
    """Cancel a running statement."""
    result = _call(lambda client: client.statements.cancel(session_id, statement_id))
    console.print(f"[green]Statement {statement_id}: {result.msg or 'cancel requested'}[/green]")
