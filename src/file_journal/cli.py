"""file-journal CLI - timestamped journal entries."""

import logging
import sys
from pathlib import Path

import click

from .config import Config, load_config, save_config
from .core.errors import JournalError
from .workflows import (
    OUTPUT_FORMATS,
    create_entry,
    format_json,
    format_paths,
    get_entries,
    iter_contents,
)


@click.group()
@click.version_option(package_name="file-journal")
@click.option("--config", "-c", "config_path", type=click.Path(path_type=Path), default=None,
              help="Path to config file")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx, config_path: Path | None, debug: bool):
    """file-journal - create and find journal entries."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )
    ctx.obj = {"config_path": config_path}


def _load(ctx) -> Config | None:
    return load_config(ctx.obj["config_path"])


@main.command()
@click.argument("title")
@click.argument("note", required=False)
@click.option("--path", "-p", type=click.Path(path_type=Path), default=None,
              help="Override the default journal path")
@click.pass_context
def new(ctx, title: str, note: str | None, path: Path | None):
    """Create a new journal entry. TITLE must end with .md."""
    try:
        entry = create_entry(title, note, _load(ctx), explicit_path=path)
    except JournalError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(f"Created journal entry: {entry}")


@main.command()
@click.option("--path", "-p", type=click.Path(path_type=Path), default=None,
              help="Where to write the config file")
def init(path: Path | None):
    """Initialize a new journal configuration."""
    click.echo("Enter the default journal path (e.g., /Users/t/Documents/journal):")
    default_path = click.prompt(">", prompt_suffix=" ").strip()

    config_file = save_config(Config(default_path=default_path), path)
    click.echo(f"Created config at: {config_file}")


@main.command()
@click.option("--day", "-d", type=click.IntRange(1, 31), default=None,
              help="Day of month (1-31), defaults to today")
@click.option("--month", "-m", type=click.IntRange(1, 12), default=None,
              help="Month (1-12), defaults to the current month")
@click.option("--year", "-y", type=int, default=None,
              help="Year (e.g. 2024), defaults to the current year")
@click.option("--week", is_flag=True, help="Entries for the current week (Monday-Sunday)")
@click.option("--path", "-p", type=click.Path(path_type=Path), default=None,
              help="Override the default journal path")
@click.option("--format", "-f", "output_format", type=click.Choice(OUTPUT_FORMATS),
              default="paths", show_default=True, help="Output format")
@click.pass_context
def get(ctx, day, month, year, week: bool, path: Path | None, output_format: str):
    """Get journal entries for a day, month, year or the current week."""
    if week and day is not None:
        raise click.UsageError("--week cannot be used with --day")

    try:
        entries = get_entries(
            _load(ctx), explicit_path=path, day=day, month=month, year=year, week=week
        )
    except JournalError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if output_format == "json":
        click.echo(format_json(entries))
    elif output_format == "content":
        for entry, text, error in iter_contents(entries):
            click.echo(str(entry))
            click.echo("-" * 40)
            if error is not None:
                click.echo(f"Error reading {entry}: {error}", err=True)
            else:
                click.echo(text)
            click.echo()
    elif entries:
        click.echo(format_paths(entries))

    # Non-zero exit for scripts when nothing matched
    if not entries:
        sys.exit(1)


if __name__ == "__main__":
    main()
