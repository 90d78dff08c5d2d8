import asyncio
import logging
from typing import List, Optional

import typer

from config.settings import settings

from .core import Command, CommandSet, ParseOptions
from .help import text_help

app = typer.Typer(
    name="commandset",
    help="Inspect and try out command definitions",
    add_completion=False,
)


def setup_logging(level: str = "INFO") -> None:
    """Setup logging configuration."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()],
    )


def build_command_set(directory: Optional[str], prefix: Optional[str]) -> CommandSet:
    """Load and initialize the commands of a directory."""
    options = ParseOptions.from_settings(settings)
    if prefix is not None:
        options.prefix = prefix

    command_set = CommandSet(options)
    command_set.load_commands(directory or settings.commands_directory)
    asyncio.run(command_set.init())
    return command_set


def _tree_lines(command: Command, depth: int = 0) -> List[str]:
    line = "  " * depth + command.name
    if command.aliases:
        line += f" ({', '.join(command.aliases)})"
    tags = [tag for tag, on in (("dev", command.dev_only), ("guild", command.guild_only)) if on]
    if tags:
        line += " [" + ", ".join(tags) + "]"

    lines = [line]
    for sub in command.visible_subs():
        lines.extend(_tree_lines(sub, depth + 1))
    return lines


@app.command()
def tree(
    directory: Optional[str] = typer.Argument(None, help="Directory of command modules"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Set log level"),
) -> None:
    """Print the command tree."""
    setup_logging(log_level or settings.log_level)
    command_set = build_command_set(directory, None)

    if not len(command_set.commands):
        typer.echo("No commands found.")
        return
    for command in command_set.commands:
        for line in _tree_lines(command):
            typer.echo(line)


@app.command(name="help")
def help_command(
    path: List[str] = typer.Argument(..., help="Command name, followed by sub command names"),
    directory: Optional[str] = typer.Option(None, "--directory", "-d", help="Directory of command modules"),
    prefix: Optional[str] = typer.Option(None, "--prefix", help="Command prefix"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Set log level"),
) -> None:
    """Print the help of a command."""
    setup_logging(log_level or settings.log_level)
    command_set = build_command_set(directory, prefix)

    resolved = command_set.resolve(path)
    if resolved is None or resolved[1]:
        typer.echo(command_set.options.localization.help.command_not_found)
        raise typer.Exit(code=1)

    typer.echo(text_help(resolved[0], command_set.options.prefix, command_set.options.localization))


@app.command()
def dispatch(
    text: str = typer.Argument(..., help="Raw message text, prefix included"),
    directory: Optional[str] = typer.Option(None, "--directory", "-d", help="Directory of command modules"),
    prefix: Optional[str] = typer.Option(None, "--prefix", help="Command prefix"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Set log level"),
) -> None:
    """Run a message text through the command set, without a transport."""
    setup_logging(log_level or settings.log_level)
    command_set = build_command_set(directory, prefix)

    result = asyncio.run(command_set.parse(text))
    typer.echo(f"Status: {result.status.value}")
    if result.command is not None:
        typer.echo(f"Command: {result.command.full_name}")
    if result.ok:
        typer.echo(f"Returned: {result.return_value!r}")
    elif result.error is not None:
        typer.echo(f"Error: {result.error!r}")
        raise typer.Exit(code=1)


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
