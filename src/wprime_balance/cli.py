"""
Command-line interface for the W' balance package.

Loads a recorded power stream from CSV, runs the W' balance model and reports
the balance and the matches found.
"""

import json
import logging
from datetime import datetime
from pathlib import Path

import click

from .analysis import WPrime
from .data import StreamLoader
from .exceptions import WPrimeBalanceError
from .settings import load_settings
from .zones import ZoneConfiguration


# Configure basic logging
def configure_logging(verbose: bool = False) -> None:
    """Configure logging with appropriate level."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )


@click.group()
def main():
    """
    Model W' balance and detect matches in cycling power data.
    """


@main.command()
@click.argument(
    "stream_file", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
@click.option(
    "--config",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file",
)
@click.option(
    "--date",
    "activity_date",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    help="Activity date used to look up CP and W' (YYYY-MM-DD)",
)
@click.option(
    "--interval",
    type=click.IntRange(min=1),
    help="Recording interval in seconds (overrides config)",
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    default=False,
    help="Print the result as JSON",
)
@click.option(
    "--verbose/--quiet",
    default=False,
    help="Enable verbose output",
)
def analyze(
    stream_file: Path,
    config: Path | None,
    activity_date: datetime | None,
    interval: int | None,
    as_json: bool,
    verbose: bool,
) -> None:
    """
    Compute W' balance and matches for one activity stream.

    STREAM_FILE is a CSV with 'time' (seconds) and 'watts' columns.
    """
    configure_logging(verbose)
    logger = logging.getLogger(__name__)

    try:
        settings = load_settings(config)
        zones = ZoneConfiguration.from_settings(settings)
        stream_df = StreamLoader().load(stream_file)

        result = WPrime(settings).compute(
            stream_df,
            recording_interval=interval,
            activity_date=activity_date.date() if activity_date else None,
            zone_provider=zones,
        )

        min_wprime = (
            round(float(result.values.min()) / 1000.0, 1) if not result.is_empty else 0.0
        )

        if as_json:
            click.echo(
                json.dumps(
                    {
                        "cp": result.cp,
                        "w_prime": result.w_prime,
                        "tau": result.tau,
                        "duration": len(result.values),
                        "min_w_prime_kj": min_wprime,
                        "matches": [m.model_dump() for m in result.matches],
                    },
                    indent=2,
                )
            )
            return

        click.echo("\nW' Balance")
        click.echo("-" * 40)
        click.echo(f"CP: {result.cp:.0f} W")
        click.echo(f"W': {result.w_prime:.0f} J")
        click.echo(f"TAU: {result.tau} s")
        click.echo(f"Minimum W': {min_wprime:.1f} kJ")

        click.echo(f"\nMatches: {len(result.matches)}")
        for match in result.matches:
            click.echo(
                f"{match.start:>6}s - {match.stop:>6}s  "
                f"{match.secs:>5}s  {match.cost:>8.0f} J"
            )

    except WPrimeBalanceError as e:
        logger.error(f"Analysis failed: {str(e)}")
        raise click.Abort() from e


if __name__ == "__main__":
    main()
