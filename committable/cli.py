#!/usr/bin/env python3
import os
import sys
from pathlib import Path
from typing import List, Optional

import click
from git import Repo
from rich.console import Console
from rich.markup import escape

from .commit import Commit
from .config import DEFAULT_CONFIG_FILENAME, OUTPUT_FORMATS, Config
from .models import GroupError
from .observers import CheckObserver, ConsoleLogObserver, FileLogObserver
from .rendering import render_group_error
from .validator import check_all_rules


def read_message(repo_path: Path, rev: Optional[str], message_file: Optional[Path]) -> str:
    """Read the commit message from a revision, a file, or standard input."""
    if rev is not None:
        repo = Repo(repo_path, search_parent_directories=True)
        message = repo.commit(rev).message
        if isinstance(message, bytes):
            message = message.decode("utf-8", errors="replace")
        return message
    if message_file is not None:
        return message_file.read_text(encoding="utf-8")
    return sys.stdin.read()


def print_config(console: Console, config: Config, repo_path: Path) -> None:
    config_path = repo_path / DEFAULT_CONFIG_FILENAME
    source = "config" if config_path.exists() else "default"

    console.print("\n[bold]Current Configuration Settings:[/bold]")
    if config_path.exists():
        console.print(f"[dim]Config file: {str(config_path).replace(os.sep, '/')}[/dim]")
    else:
        console.print("[dim]Using default values (no config file found)[/dim]")

    console.print(f"\n{'Setting':<20} {'Value':<20} {'Source':<10}")
    console.print("-" * 50)
    for name in ("output_format", "color", "quiet", "always_log", "log_file"):
        value = getattr(config, name)
        console.print(f"{name:<20} {str(value if value is not None else 'None'):<20} {source:<10}")

    console.print(
        f"\nTo modify these settings, create or edit {DEFAULT_CONFIG_FILENAME} in your repository root"
    )


@click.command()
@click.argument(
    "message_file",
    required=False,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-p",
    "--path",
    default=".",
    help="Path to the repository holding the config file (defaults to current directory)",
    type=click.Path(exists=True, file_okay=False, dir_okay=True, path_type=Path),
)
@click.option(
    "-r",
    "--rev",
    help="Check the message of this commit instead of reading a file or stdin",
)
@click.option(
    "-f",
    "--format",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS, case_sensitive=False),
    help="How to report failures (overrides config setting)",
)
@click.option("-v", "--verbose", is_flag=True, help="Log the outcome of every rule")
@click.option(
    "-l",
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Optional file to log rule outcomes to (overrides config setting)",
)
@click.option("--no-color", is_flag=True, help="Disable colored output")
@click.option("-q", "--quiet", is_flag=True, help="Print nothing when the message passes")
@click.option(
    "--config-list", is_flag=True, help="Display current configuration settings"
)
@click.option("--version", is_flag=True, help="Display version information and exit")
def main(
    message_file: Optional[Path],
    path: Path,
    rev: Optional[str],
    output_format: Optional[str],
    verbose: bool,
    log_file: Optional[Path],
    no_color: bool,
    quiet: bool,
    config_list: bool,
    version: bool,
):
    """
    Check the structure of a commit message.

    The message is read from MESSAGE_FILE, from the commit given by
    --rev, or from standard input. It must have a non-empty header of at
    most 50 bytes and, optionally, a body separated from the header by
    exactly one blank line with lines of at most 72 bytes.

    Exits with status 1 when the message breaks any rule, which makes
    the command usable as a git commit-msg hook.
    """
    result: Optional[GroupError] = None
    try:
        repo_path = path.absolute()
        config = Config.load(repo_path)

        if no_color:
            config.color = False
        if quiet:
            config.quiet = True
        if output_format is not None:
            config.output_format = output_format.lower()

        console = Console(no_color=not config.color, highlight=False)
        err_console = Console(stderr=True, no_color=not config.color, highlight=False)

        if version:
            from .version import display_version_info

            display_version_info(console)
            return

        if config_list:
            print_config(console, config, repo_path)
            return

        observers: List[CheckObserver] = []
        if verbose:
            observers.append(ConsoleLogObserver(err_console))
        log_file_path = log_file or config.get_log_file()
        if log_file_path:
            observers.append(FileLogObserver(str(log_file_path)))

        message = read_message(repo_path, rev, message_file)
        result = check_all_rules(Commit(message), observers)

        if config.output_format == "json":
            click.echo((result or GroupError(source=message)).model_dump_json(indent=2))
        elif result is not None:
            render_group_error(result, err_console)
        elif not config.quiet:
            console.print("[green]No errors in commit message[/green]")
    except KeyboardInterrupt:
        Console(stderr=True).print("\n[yellow]Operation cancelled by user[/yellow]")
        raise click.Abort()
    except Exception as e:
        Console(stderr=True).print(f"[red]Error: {escape(str(e))}[/red]")
        raise click.Abort()

    if result is not None:
        sys.exit(1)


if __name__ == "__main__":
    main()
