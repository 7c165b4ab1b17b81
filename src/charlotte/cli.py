"""Charlotte CLI - Personal Task Assistant."""

import logging
import sys

import click

from .adapters.file_store import FileTaskStore
from .config import load_config
from .core.errors import StoreError
from .session import open_session

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@click.group(invoke_without_command=True)
@click.option("--data-file", type=click.Path(dir_okay=False), default=None,
              help="Task data file (overrides DATA_FILE in charlotte.conf)")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.version_option()
@click.pass_context
def main(ctx, data_file: str | None, debug: bool):
    """Charlotte - Personal Task Assistant CLI."""
    config = load_config()
    if data_file:
        config.data_file = data_file

    logging.basicConfig(
        format=LOG_FORMAT,
        level=logging.DEBUG if debug else config.log_level,
    )

    ctx.obj = config
    if ctx.invoked_subcommand is None:
        ctx.invoke(chat)


@main.command()
@click.pass_obj
def chat(config):
    """Interactive session (type 'bye' to leave)."""
    session = open_session(config)
    click.echo(session.greeting())

    while True:
        try:
            line = click.prompt(">", default="", show_default=False, prompt_suffix=" ")
        except click.Abort:
            # Ctrl+D / Ctrl+C
            click.echo()
            break

        if not line.strip():
            continue

        reply = session.handle(line)
        click.echo(reply.text)
        if reply.exit:
            break


@main.command()
@click.argument("words", nargs=-1, required=True)
@click.pass_obj
def send(config, words: tuple[str, ...]):
    """Run a single command, e.g. charlotte send todo read book."""
    session = open_session(config)
    reply = session.handle(" ".join(words))

    if reply.error:
        click.echo(f"Error: {reply.text}", err=True)
        sys.exit(1)
    click.echo(reply.text)


@main.command()
@click.pass_obj
def check(config):
    """Check the data file and report lines that cannot be loaded."""
    store = FileTaskStore(config.data_path())
    try:
        result = store.load()
    except StoreError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if not result.found:
        click.echo(f"No data file at {store.path}.")
        return

    click.echo(f"Loaded {len(result.tasks)} tasks from {store.path}.")
    if not result.skipped:
        return

    click.echo(f"Skipped {result.skipped_count} line(s):")
    for skipped in result.skipped:
        click.echo(f"  line {skipped.line_number}: {skipped.reason}")
        click.echo(f"    {skipped.line}")


@main.command()
@click.pass_obj
def bot(config):
    """Run the Telegram bot."""
    try:
        from .telegram_bot import run_bot
        click.echo("Starting Charlotte Telegram bot...")
        click.echo("Press Ctrl+C to stop")
        run_bot(config)
    except ImportError as e:
        click.echo("Error: Missing dependencies. Run 'pip install python-telegram-bot'", err=True)
        click.echo(f"Details: {e}", err=True)
        sys.exit(1)
    except ValueError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)
    except KeyboardInterrupt:
        click.echo("\nBot stopped.")


if __name__ == "__main__":
    main()
