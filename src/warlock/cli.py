"""Command-line interface for Warlock."""

from __future__ import annotations

import logging
import sys

import click
from rich.console import Console
from rich.markup import escape

from warlock import __version__
from warlock.config import ConfigError, MatchConfig
from warlock.core import Warlock

console = Console()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )


@click.command()
@click.version_option(__version__, prog_name="warlock")
@click.option("--verbose", "-v", is_flag=True, help="Show search details and similarity scores")
@click.option(
    "--sensitivity",
    "-s",
    envvar="WARLOCK_SENSITIVITY",
    help="Substitution cost for levenshtein, e.g. 1.0 or .5 (default: 1.0)",
)
@click.option(
    "--algorithm",
    "-a",
    envvar="WARLOCK_ALGORITHM",
    help="Similarity algorithm: levenshtein (lev) or jaro_winkler (jw) (default: jw)",
)
@click.option(
    "--threshold",
    "-t",
    envvar="WARLOCK_THRESHOLD",
    help="Minimum similarity between 0 and 1 (default: 0.75)",
)
@click.option(
    "--num-matches",
    "-n",
    envvar="WARLOCK_MAX_RESULTS",
    help="Maximum number of suggestions (default: 5)",
)
@click.option("--ignore", "-i", multiple=True, help="Skip executables whose name contains this text")
@click.option("--ignore-dir", "-d", multiple=True, help="Skip this PATH directory")
@click.option(
    "--concurrency",
    type=click.Choice(["auto", "sequential", "concurrent"], case_sensitive=False),
    default="sequential",
    show_default=True,
    help="Worker fan-out for long names",
)
@click.option("--jobs", "-j", type=int, help="Worker pool size (default: CPU count)")
@click.argument("command")
def cli(
    verbose: bool,
    sensitivity: str | None,
    algorithm: str | None,
    threshold: str | None,
    num_matches: str | None,
    ignore: tuple[str, ...],
    ignore_dir: tuple[str, ...],
    concurrency: str,
    jobs: int | None,
    command: str,
) -> None:
    """A smarter `which`: locate COMMAND or suggest close matches from PATH."""
    _configure_logging(verbose)

    try:
        config = MatchConfig.from_raw(
            sensitivity=sensitivity,
            algorithm=algorithm,
            threshold=threshold,
            max_results=num_matches,
            concurrency=concurrency,
            max_workers=jobs,
        )
    except ConfigError as e:
        raise click.UsageError(str(e)) from e

    if verbose:
        console.print(f"[dim]Searching for '{escape(command)}' in PATH...[/dim]", highlight=False)
        console.print(
            f"[dim]Sensitivity: {config.substitution_cost}, "
            f"Algorithm: {config.algorithm.value}, Threshold: {config.threshold}[/dim]",
            highlight=False,
        )
        console.print(
            f"[dim]Ignoring: {escape(', '.join(ignore))}, "
            f"Ignored Directories: {escape(', '.join(ignore_dir))}[/dim]",
            highlight=False,
        )

    warlock = Warlock(
        config=config,
        ignore=ignore,
        ignore_dirs=ignore_dir,
        console=console,
        verbose=verbose,
    )

    if warlock.which(command) is None:
        sys.exit(1)


def main() -> None:
    """Entry point."""
    cli()


if __name__ == "__main__":
    main()
