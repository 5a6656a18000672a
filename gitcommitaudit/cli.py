#!/usr/bin/env python3
import sys
from pathlib import Path
from typing import Optional

import click
import pyperclip
from rich.console import Console
from rich.markup import escape

from .branch import get_current_branch, matches_any_pattern
from .config import DEFAULT_CONFIG_FILENAME, Config
from .core import analyze_commits
from .errors import ValidationFailed
from .models import Severity, Validation
from .observers import FileLogObserver
from .validation import ValidationConfig

console = Console()


def build_validation_config(
    settings: Config,
    error: Optional[str] = None,
    warn: Optional[str] = None,
    ignore: Optional[str] = None,
    disable: Optional[str] = None,
) -> ValidationConfig:
    """Combine file settings with command line overrides.

    Disabled validations are applied first, then severities in the order
    error, warn, ignore.
    """
    config = settings.to_validation_config()
    if disable:
        config.parse_and_disable(disable)
    if error:
        config.parse_and_set(error, Severity.Error)
    if warn:
        config.parse_and_set(warn, Severity.Warning)
    if ignore:
        config.parse_and_set(ignore, Severity.Ignore)
    return config


def print_config_list(settings: Config, config: ValidationConfig) -> None:
    console.print("\n[bold]Current Configuration Settings:[/bold]")
    if settings.source is not None:
        console.print(f"[dim]Config file: {settings.source.as_posix()}[/dim]")
    else:
        console.print("[dim]Using default values (no config file found)[/dim]")

    source = "config" if settings.source is not None else "default"

    console.print(f"\n{'Setting':<20} {'Value':<20} {'Source':<10}")
    console.print("-" * 50)

    def print_setting(name: str, value: object):
        console.print(f"{name:<20} {str(value):<20} {source:<10}", markup=False)

    print_setting("threshold", config.threshold)
    print_setting("strict", settings.strict)
    print_setting("branches", ", ".join(settings.branches) or "all")
    print_setting("always_log", settings.always_log)
    print_setting("log_file", settings.log_file or "None")

    console.print(f"\n{'Validation':<20} {'Severity':<10} {'Enabled':<10}")
    console.print("-" * 40)
    for validation in Validation:
        console.print(
            f"{validation.value:<20} {str(config.get_severity(validation)):<10} "
            f"{str(config.is_enabled(validation)):<10}",
            markup=False,
        )

    console.print(
        f"\nTo modify these settings, create or edit {DEFAULT_CONFIG_FILENAME} "
        "or [tool.git-commit-audit] in pyproject.toml",
        markup=False,
    )


@click.command()
@click.option(
    "--config-dir",
    is_flag=True,
    help="Display the config file location and copy it to clipboard",
)
@click.option(
    "--config-list", is_flag=True, help="Display current configuration settings"
)
@click.option(
    "-p",
    "--path",
    default=".",
    help="Path to git repository (defaults to current directory)",
    type=click.Path(file_okay=False, dir_okay=True, path_type=Path),
)
@click.option(
    "-l", "--limit", type=click.IntRange(min=0), help="Maximum number of commits to analyze"
)
@click.option(
    "-t",
    "--threshold",
    type=click.IntRange(min=0),
    help="Minimum message length in characters (default: 30)",
)
@click.option("-q", "--quiet", is_flag=True, help="Only print the report when commits have issues")
@click.option(
    "--error",
    metavar="VALIDATIONS",
    help="Validations to treat as errors (comma-separated: short, reference, "
    "format, vague, wip, imperative)",
)
@click.option("--warn", metavar="VALIDATIONS", help="Validations to treat as warnings")
@click.option("--ignore", metavar="VALIDATIONS", help="Validations to ignore")
@click.option(
    "--disable",
    metavar="VALIDATIONS",
    help="Validations to skip entirely (unlike --ignore, the check never runs)",
)
@click.option("--strict", is_flag=True, help="Treat warnings as errors")
@click.option(
    "-o",
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Optional file to log analysis results (overrides config setting)",
)
@click.option("--version", is_flag=True, help="Display version information and exit")
def main(
    config_dir: bool,
    config_list: bool,
    path: Path,
    limit: Optional[int],
    threshold: Optional[int],
    quiet: bool,
    error: Optional[str],
    warn: Optional[str],
    ignore: Optional[str],
    disable: Optional[str],
    strict: bool,
    log_file: Optional[Path],
    version: bool,
):
    """
    Analyze git history and report commit messages that need work.

    Checks performed on every commit subject:
    1. Minimum length
    2. Issue reference (#123, GH-45, ABC-678)
    3. Conventional commits format
    4. Vague language
    5. Work-in-progress markers
    6. Imperative mood

    Configuration can be set in .gitcommitaudit.toml or in the
    [tool.git-commit-audit] table of pyproject.toml.
    Command line options override configuration file settings.
    """
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

        # Load configuration; command line options override it
        settings = Config.load(repo_path)
        if threshold is not None:
            settings.threshold = threshold
        if strict:
            settings.strict = True
        if log_file is not None:
            settings.log_file = str(log_file)

        config = build_validation_config(settings, error, warn, ignore, disable)

        if config_list:
            print_config_list(settings, config)
            return

        if settings.branches:
            branch = get_current_branch(repo_path)
            if branch is None or not matches_any_pattern(branch, settings.branches):
                if not quiet:
                    console.print(
                        f"[dim]Skipping analysis: branch '{branch or 'detached HEAD'}' "
                        "does not match the configured branches[/dim]"
                    )
                return

        observers = []
        log_file_path = log_file or settings.get_log_file()
        if log_file_path:
            observers.append(FileLogObserver(str(log_file_path)))

        analyze_commits(
            path=repo_path,
            limit=limit,
            quiet=quiet,
            config=config,
            strict=settings.strict,
            console=console,
            observers=observers,
        )
    except ValidationFailed:
        # The report has already been printed
        sys.exit(1)
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
    except Exception as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]", soft_wrap=True)
        raise click.Abort()


if __name__ == "__main__":
    main()
