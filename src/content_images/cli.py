"""
CLI for content-images.

Commands:
- scan: Attach images to content files of a source tree and report them
- info: Show configuration and default options
"""

import json
from pathlib import Path

import typer
from loguru import logger
from rich.console import Console
from rich.table import Table

from .config import settings
from .logging import setup_logging
from .options import ImageOptions

app = typer.Typer(
    name="content-images",
    help="Attach image directories to content files of a static site build",
)
console = Console()

_defaults = ImageOptions()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """content-images - associate images with content files."""
    log_level = "DEBUG" if verbose else settings.log_level
    setup_logging(level=log_level, json_output=settings.log_json, log_file=settings.log_file)
    logger.debug("CLI initialized with log level: {}", log_level)


@app.command()
def scan(
    source_dir: Path = typer.Argument(
        settings.source_dir,
        help="Root directory of the build input",
    ),
    pattern: str = typer.Option(_defaults.pattern, "--pattern", "-p", help="Content file glob"),
    images_directory: str = typer.Option(
        _defaults.images_directory,
        "--images-directory",
        "-d",
        help="Image directory relative to each content file",
    ),
    images_key: str = typer.Option(
        _defaults.images_key, "--images-key", "-k", help="Metadata key to write"
    ),
    ext: list[str] = typer.Option(
        None,
        "--ext",
        "-e",
        help="Authorized extension (repeatable, default: common image formats)",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print results as JSON"),
):
    """Attach images to matching content files and print the associations."""
    from .association import run
    from .files import load_file_collection
    from .matchers import create_pattern_matcher

    if not source_dir.is_dir():
        logger.error("Source directory not found: {}", source_dir)
        console.print(f"[red]Error: source directory not found: {source_dir}[/]")
        raise typer.Exit(1)

    options = {
        "pattern": pattern,
        "imagesDirectory": images_directory,
        "imagesKey": images_key,
    }
    if ext:
        options["authorizedExts"] = list(ext)

    logger.info("Scanning {} with pattern '{}'", source_dir, pattern)
    files = load_file_collection(source_dir)
    matcher = create_pattern_matcher(settings.matcher_type)
    run(files, options, matcher)

    associations = {
        path: record[images_key] for path, record in files.items() if images_key in record
    }

    if as_json:
        typer.echo(json.dumps(associations, indent=2))
        return

    if not associations:
        logger.warning("No images attached in {}", source_dir)
        console.print("[yellow]No images attached[/]")
        return

    table = Table(title=f"Images ({images_key})")
    table.add_column("Content file", style="cyan")
    table.add_column("Images", style="green")
    for path, images in associations.items():
        table.add_row(path, "\n".join(images) if images else "[dim]none authorized[/]")
    console.print(table)
    console.print(f"[green]✓ {len(associations)} content file(s) with an image directory[/]")


@app.command()
def info():
    """Show configuration and default options."""
    logger.debug("Displaying configuration")
    console.print("[bold blue]content-images Configuration[/]")

    table = Table(title="Settings")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Source Directory", settings.source_dir)
    table.add_row("Pattern Matcher", settings.matcher_type)
    table.add_row("Log Level", settings.log_level)
    table.add_row("Log File", settings.log_file or "none")
    table.add_row("Default Pattern", _defaults.pattern)
    table.add_row("Default Images Directory", _defaults.images_directory)
    table.add_row("Default Images Key", _defaults.images_key)
    table.add_row("Default Extensions", ", ".join(_defaults.authorized_exts))

    console.print(table)


if __name__ == "__main__":
    app()
