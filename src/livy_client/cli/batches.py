"""CLI: livy batches list|create|get|state|kill|log"""

import click
from rich.console import Console
from rich.table import Table

from livy_client.models.batch import NewBatchRequest

console = Console()


def _call(fn):
    from livy_client.cli.main import _call
    return _call(fn)


def _echo_json(model) -> None:
    from livy_client.cli.main import _echo_json
    _echo_json(model)


def _parse_conf(pairs):
    from livy_client.cli.sessions import _parse_conf
    return _parse_conf(pairs)


@click.group()
def batches():
    """Batch job management."""


@batches.command("list")
@click.option("--from", "from_", default=None, type=int)
@click.option("--size", default=None, type=int)
@click.option("--json-output", "--json", is_flag=True)
def batches_list(from_, size, json_output):
    """List batches."""
    result = _call(lambda client: client.batches.list(from_=from_, size=size))
    if json_output:
        _echo_json(result)
        return
    table = Table(title=f"Batches ({result.total or 0} total)")
    table.add_column("ID", style="bold")
    table.add_column("State")
    table.add_column("App ID")
    for b in result.batches or []:
        table.add_row("" if b.id is None else str(b.id), b.state or "", b.app_id or "")
    console.print(table)


@batches.command("create")
@click.argument("file")
@click.argument("args", nargs=-1)
@click.option("--class-name", default=None)
@click.option("--name", default=None)
@click.option("--proxy-user", default=None)
@click.option("--queue", default=None)
@click.option("--driver-memory", default=None)
@click.option("--executor-memory", default=None)
@click.option("--num-executors", default=None, type=int)
@click.option("--conf", multiple=True, help="Spark conf as key=value, repeatable")
def batches_create(file, args, class_name, name, proxy_user, queue, driver_memory, executor_memory,
                   num_executors, conf):
    """Submit FILE as a batch job with optional ARGS."""
    request = NewBatchRequest(
        file=file,
        args=list(args) or None,
        class_name=class_name,
        name=name,
        proxy_user=proxy_user,
        queue=queue,
        driver_memory=driver_memory,
        executor_memory=executor_memory,
        num_executors=num_executors,
        conf=_parse_conf(conf),
    )
    with console.status("Submitting batch..."):
        batch = _call(lambda client: client.batches.create(request))
    console.print(f"[green]Batch created: {batch.id} ({batch.state or 'unknown'})[/green]")


@batches.command("get")
@click.argument("batch_id", type=int)
@click.option("--json-output", "--json", is_flag=True)
def batches_get(batch_id, json_output):
    """Show one batch."""
    batch = _call(lambda client: client.batches.get(batch_id))
    if json_output:
        _echo_json(batch)
        return
    console.print(f"[bold]Batch {batch.id}[/bold] ({batch.state or 'unknown'})")
    if batch.app_id:
        console.print(f"App ID: {batch.app_id}")


@batches.command("state")
@click.argument("batch_id", type=int)
def batches_state(batch_id):
    """Print the batch state."""
    result = _call(lambda client: client.batches.get_state(batch_id))
    click.echo(result.state or "")


@batches.command("kill")
@click.argument("batch_id", type=int)
def batches_kill(batch_id):
    """Kill a batch job."""
    with console.status("Killing..."):
        result = _call(lambda client: client.batches.kill(batch_id))
    console.print(f"[green]Batch {batch_id}: {result.msg or 'killed'}[/green]")


@batches.command("log")
@click.argument("batch_id", type=int)
@click.option("--from", "from_", default=None, type=int)
@click.option("--size", default=None, type=int)
def batches_log(batch_id, from_, size):
    """Print batch log lines."""
    result = _call(lambda client: client.batches.log(batch_id, from_=from_, size=size))
    for line in result.log or []:
        click.echo(line)
