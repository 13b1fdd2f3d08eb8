"""taskjournal CLI - a persistent task journal."""

import logging
import sys

import click

from .config import load_config, resolve_journal_path
from .core.errors import JournalError
from .core.tasks import Task
from .journal import add_task, complete_task, render_tasks


def _fail(e: Exception) -> None:
    click.echo(f"Error: {e}", err=True)
    sys.exit(1)


@click.group()
@click.version_option(package_name="taskjournal")
@click.option("--journal-file", "-j", default=None, help="Use a different journal file")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx, journal_file: str | None, debug: bool):
    """taskjournal - keep a running list of tasks in a JSON file."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )

    config = load_config()
    ctx.obj = {
        "config": config,
        "path": resolve_journal_path(config, journal_file),
    }


@main.command()
@click.argument("text", nargs=-1, required=True)
@click.pass_obj
def add(obj, text: tuple[str, ...]):
    """Write a task to the journal."""
    try:
        add_task(obj["path"], Task.new(" ".join(text)))
    except (OSError, JournalError) as e:
        _fail(e)


@main.command(context_settings={"ignore_unknown_options": True})
@click.argument("position", type=int)
@click.pass_obj
def done(obj, position: int):
    """Remove an entry from the journal by position."""
    try:
        task = complete_task(obj["path"], position)
    except (OSError, JournalError) as e:
        _fail(e)

    click.echo(f"Completed: {task.text}")


@main.command("list")
@click.pass_obj
def list_cmd(obj):
    """List all tasks in the journal."""
    try:
        lines = render_tasks(obj["path"], obj["config"].tzinfo)
    except (OSError, JournalError) as e:
        _fail(e)

    for line in lines:
        click.echo(line)
