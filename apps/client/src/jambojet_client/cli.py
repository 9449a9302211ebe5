"""Command-line access to a few read-only client operations."""

from __future__ import annotations

import json
import logging
import sys

import click

from jambojet_client.client import JamboJetClient
from jambojet_core.exceptions import ApiError, ValidationError

logger = logging.getLogger(__name__)


def _echo_json(data: object) -> None:
    click.echo(json.dumps(data, indent=2, default=str))


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log requests at DEBUG level")
def cli(verbose: bool) -> None:
    """JamboJet booking platform client."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )


@cli.command("quick-search")
@click.argument("origin")
@click.argument("destination")
@click.argument("departure_date")
@click.option("--return-date", default=None, help="Return date (YYYY-MM-DD)")
@click.option("--adults", default=1, show_default=True, type=int)
@click.option("--children", default=0, show_default=True, type=int)
@click.option("--infants", default=0, show_default=True, type=int)
def quick_search(
    origin: str,
    destination: str,
    departure_date: str,
    return_date: str | None,
    adults: int,
    children: int,
    infants: int,
) -> None:
    """Simple availability search from ORIGIN to DESTINATION."""
    passengers = {"adults": adults, "children": children, "infants": infants}
    with JamboJetClient() as client:
        try:
            result = client.availability().quick_search(
                origin.upper(),
                destination.upper(),
                departure_date,
                passengers,
                return_date,
            )
        except ValidationError as exc:
            click.echo(f"Invalid search: {exc.message}", err=True)
            sys.exit(2)
        except ApiError as exc:
            logger.error("Search failed with status %s", exc.code)
            click.echo(str(exc), err=True)
            sys.exit(1)
    _echo_json(result)


@cli.command()
def versions() -> None:
    """Show the API version used for each platform module."""
    for module, version in JamboJetClient.api_versions().items():
        click.echo(f"{module:<16} {version}")


@cli.command()
def services() -> None:
    """List the services exposed by the client."""
    with JamboJetClient() as client:
        for name in client.available_services():
            click.echo(name)


if __name__ == "__main__":
    cli()
