"""Main CLI entry point."""

import asyncio
import sys
from pathlib import Path
from typing import List, Optional, Tuple

import click

from .. import __version__
from ..config import Config, ConfigManager
from ..core.models import Item, RatingService
from ..core.services import RatingServiceFactory
from ..infrastructure import setup_logging
from ..utils import ConfigurationError, RatingServiceError


@click.group()
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    help="Path to configuration file",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.version_option(version=__version__, prog_name="media-rating-overlay")
@click.pass_context
def cli(ctx: click.Context, config: Optional[Path], verbose: bool) -> None:
    """Media Rating Overlay - Fetch ratings for movies and shows."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["config_path"] = config

    # Skip configuration loading for commands that don't need it
    if ctx.invoked_subcommand == "init":
        return

    try:
        config_manager = ConfigManager(config)
        app_config = config_manager.load_config()

        if verbose:
            app_config.logger.level = "DEBUG"
        setup_logging(app_config.logger)

        ctx.obj["config"] = app_config

    except (ConfigurationError, FileNotFoundError, ValueError) as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)


@cli.command()
@click.option(
    "--output",
    "-o",
    type=click.Path(path_type=Path),
    default=Path.cwd() / "config" / "config.yaml",
    help="Output path for configuration file",
)
def init(output: Path) -> None:
    """Initialize configuration file."""
    try:
        if output.exists():
            if not click.confirm(f"Configuration file {output} already exists. Overwrite?"):
                return

        output.parent.mkdir(parents=True, exist_ok=True)

        ConfigManager.create_default_config(output)
        click.echo(f"Configuration file created at: {output}")
        click.echo("Please edit the configuration file with your API keys.")

    except OSError as e:
        click.echo(f"Failed to create configuration: {e}", err=True)
        sys.exit(1)


@cli.command()
@click.pass_context
def status(ctx: click.Context) -> None:
    """Show provider configuration."""
    config: Config = ctx.obj["config"]

    click.echo("Media Rating Overlay Status")
    click.echo("=" * 40)

    click.echo(f"TMDB Enabled: {'✓' if config.tmdb.enabled else '✗'}")
    click.echo(f"TMDB API Key: {'✓' if config.tmdb.api_key else '✗'}")
    click.echo(f"IMDB Enabled: {'✓' if config.imdb.enabled else '✗'}")
    click.echo(f"Rotten Tomatoes Enabled: {'✓' if config.rotten.enabled else '✗'}")
    click.echo(f"HTTP Timeout: {config.http.timeout}s")
    click.echo(f"HTTP Max Retries: {config.http.max_retries}")
    click.echo(f"Log File: {config.logger.log_file_path}")


@cli.command()
@click.argument("title")
@click.option("--year", "-y", type=int, help="Release year")
@click.option(
    "--type",
    "media_type",
    type=click.Choice(["movie", "show"]),
    default="movie",
    show_default=True,
    help="Media type",
)
@click.option("--id", "item_id", default="", help="Media library identifier")
@click.pass_context
def rate(
    ctx: click.Context,
    title: str,
    year: Optional[int],
    media_type: str,
    item_id: str,
) -> None:
    """Fetch ratings for TITLE from every configured provider."""
    config: Config = ctx.obj["config"]
    item = Item(id=item_id, title=title, year=year, type=media_type)

    try:
        lines, failures = asyncio.run(_run_rate(config, item))
    except ConfigurationError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)
    except KeyboardInterrupt:
        click.echo("\nOperation cancelled by user.")
        sys.exit(1)

    for line in lines:
        click.echo(line)
    for failure in failures:
        click.echo(failure, err=True)

    if failures:
        sys.exit(1)


async def _run_rate(config: Config, item: Item) -> Tuple[List[str], List[str]]:
    """Build every provider and query the available ones."""
    lines: List[str] = []
    failures: List[str] = []

    async with RatingServiceFactory(config) as factory:
        rating_services = factory.build_all()
        for rating_service in rating_services:
            line, failure = await _rate_with(rating_service, item)
            if line:
                lines.append(line)
            if failure:
                failures.append(failure)

    return lines, failures


async def _rate_with(
    rating_service: RatingService, item: Item
) -> Tuple[Optional[str], Optional[str]]:
    if not rating_service.is_available:
        return f"{rating_service.name}: unavailable", None

    try:
        rating = await rating_service.platform_service.get_rating(item)
    except RatingServiceError as e:
        return None, f"{rating_service.name}: error: {e}"

    if rating.is_empty:
        return f"{rating_service.name}: no rating", None
    return f"{rating.name}: {rating.rating:.1f} ({rating.type})", None


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
