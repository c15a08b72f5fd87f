"""jot CLI - line-oriented task tracker."""

import logging
import sys

import click

from .config import load_config
from .core.errors import CommandError, StorageError
from .interpreter import CommandInterpreter
from .workflows import GREETING, open_session, respond


@click.group(invoke_without_command=True)
@click.version_option(package_name="jot")
@click.option("--data-file", type=click.Path(dir_okay=False), envvar="JOT_DATA_FILE",
              default=None, help="Task file to use instead of the configured one")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx, data_file: str | None, debug: bool):
    """jot - keep track of todos, deadlines and events."""
    config = load_config()
    if data_file:
        config.data_file = data_file

    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.DEBUG if debug else config.log_level_value,
    )

    ctx.obj = config
    if ctx.invoked_subcommand is None:
        ctx.invoke(shell)


def _open(config) -> CommandInterpreter:
    try:
        return open_session(config)
    except StorageError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@main.command()
@click.pass_obj
def shell(config):
    """Read commands interactively until 'bye'."""
    interpreter = _open(config)
    click.echo(GREETING)

    while True:
        try:
            line = click.prompt(">", default="", show_default=False, prompt_suffix=" ")
        except click.exceptions.Abort:
            click.echo()
            break

        if not line.strip():
            continue

        click.echo(respond(interpreter, line))
        if interpreter.is_exit(line):
            break


@main.command()
@click.argument("words", nargs=-1, required=True)
@click.pass_obj
def run(config, words: tuple[str, ...]):
    """Run a single command, e.g. jot run deadline report /by Friday."""
    interpreter = _open(config)
    try:
        click.echo(interpreter.interpret(" ".join(words)))
    except (CommandError, StorageError) as e:
        click.echo(interpreter.presenter.render_error(str(e)), err=True)
        sys.exit(1)


@main.command()
@click.pass_obj
def bot(config):
    """Run the Telegram bot."""
    try:
        from .telegram_bot import run_bot
        click.echo("Starting jot Telegram bot...")
        click.echo("Press Ctrl+C to stop")
        run_bot(config)
    except ValueError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)
    except KeyboardInterrupt:
        click.echo("\nBot stopped.")


if __name__ == "__main__":
    main()
