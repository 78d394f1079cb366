#!/usr/bin/env python3
import sys
from pathlib import Path
from typing import List, Optional

import click
import pyperclip
from rich.console import Console

from .config import Config, DEFAULT_CONFIG_FILENAME
from .exceptions import ConfigError, TitleCheckError, TitleSourceError
from .observers import ConsoleReportObserver, FileLogObserver, ValidationObserver
from .sources import title_from_event_file, title_from_repo
from .title import TitleValidator

console = Console()

EXIT_OK = 0
EXIT_INVALID_TITLE = 1
EXIT_SETUP_ERROR = 2


def resolve_title(
    title: Optional[str],
    from_git: bool,
    event_path: Optional[Path],
    repo_path: Path,
) -> str:
    """Pick the title to check: argument, then git HEAD, then the CI event."""
    if title is not None:
        return title
    if from_git:
        return title_from_repo(repo_path)
    if event_path is not None:
        return title_from_event_file(event_path)
    raise TitleSourceError("unable to get pull request title or commit message")


def show_config(config: Config, repo_path: Path) -> None:
    config_path = repo_path / DEFAULT_CONFIG_FILENAME

    console.print("\n[bold]Current Configuration Settings:[/bold]")
    if config_path.exists():
        console.print(f"[dim]Config file: {config_path.as_posix()}[/dim]")
    else:
        console.print("[dim]Using default values (no config file found)[/dim]")

    console.print(f"\n{'Setting':<24} {'Value':<20}")
    console.print("-" * 44)
    for name, value in config.model_dump().items():
        console.print(f"{name:<24} {str(value):<20}")

    console.print(
        f"\nTo modify these settings, create or edit {DEFAULT_CONFIG_FILENAME} in your repository root"
    )


def notify_error(observers: List[ValidationObserver], message: str) -> None:
    for observer in observers:
        observer.on_source_error(message)


@click.command()
@click.argument("title", required=False)
@click.option(
    "--event-path",
    envvar="GITHUB_EVENT_PATH",
    type=click.Path(dir_okay=False, path_type=Path),
    help="GitHub event payload to read the title from (defaults to $GITHUB_EVENT_PATH)",
)
@click.option(
    "--from-git",
    is_flag=True,
    help="Check the first line of the HEAD commit message of the repository",
)
@click.option(
    "-p",
    "--path",
    default=".",
    help="Path to the repository holding the config file (defaults to current directory)",
    type=click.Path(exists=True, file_okay=False, dir_okay=True, path_type=Path),
)
@click.option(
    "--strict/--no-strict",
    default=None,
    help="Enable or disable the strict style rules (overrides config setting)",
)
@click.option(
    "--max-length",
    type=click.IntRange(min=1),
    help="Maximum description length (overrides config setting)",
)
@click.option(
    "-l",
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Optional file to log checks to (overrides config setting)",
)
@click.option(
    "--config-list", is_flag=True, help="Display current configuration settings"
)
@click.option(
    "--config-dir",
    is_flag=True,
    help="Display the config file location and copy it to clipboard",
)
@click.option("--version", is_flag=True, help="Display version information and exit")
def main(
    title: Optional[str],
    event_path: Optional[Path],
    from_git: bool,
    path: Path,
    strict: Optional[bool],
    max_length: Optional[int],
    log_file: Optional[Path],
    config_list: bool,
    config_dir: bool,
    version: bool,
):
    """
    Check a pull request title or commit subject against Conventional Commits.

    The title is taken from the TITLE argument, from the HEAD commit with
    --from-git, or from the GitHub Actions event payload.

    Exit status is 0 for a valid title, 1 for an invalid title and 2 when no
    title could be obtained or the configuration is invalid.

    Configuration can be set in .prtitlecheck.toml in the repository root.
    Command line options override configuration file settings.
    """
    exit_code = EXIT_OK
    observers: List[ValidationObserver] = [ConsoleReportObserver(console)]
    try:
        if version:
            from .version import display_version_info

            display_version_info(console)
            return

        repo_path = path.absolute()

        if config_dir:
            config_path = repo_path / DEFAULT_CONFIG_FILENAME

            # Create default config file if it doesn't exist
            if not config_path.exists():
                Config().save(repo_path)
                console.print(
                    "[yellow]Created new config file with default values[/yellow]"
                )

            pyperclip.copy(str(config_path))
            console.print(f"[green]Config file location:[/green] {config_path}")
            console.print("[green]Path copied to clipboard![/green]")
            return

        # Command line options override config
        overrides = {}
        if strict is not None:
            overrides["strict"] = strict
        if max_length is not None:
            overrides["max_description_length"] = max_length

        config = Config.load(repo_path, **overrides)

        if config_list:
            show_config(config, repo_path)
            return

        log_file_path = log_file or config.get_log_file()
        if log_file_path:
            observers.append(FileLogObserver(str(log_file_path)))

        title_to_check = resolve_title(title, from_git, event_path, repo_path)

        validator = TitleValidator.from_config(config)
        result = validator.validate(title_to_check)
        for observer in observers:
            observer.on_title_validated(title_to_check, result, validator.strict)

        if not result.is_valid:
            exit_code = EXIT_INVALID_TITLE
    except ConfigError as e:
        notify_error(observers, f"Invalid configuration: {e}")
        exit_code = EXIT_SETUP_ERROR
    except TitleCheckError as e:
        notify_error(observers, str(e))
        exit_code = EXIT_SETUP_ERROR
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        exit_code = EXIT_SETUP_ERROR
    except Exception as e:
        console.print(f"[red]Error: {str(e)}[/red]")
        raise click.Abort()

    if exit_code != EXIT_OK:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
