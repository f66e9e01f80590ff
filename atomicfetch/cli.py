"""Click-based CLI for atomicfetch."""

from __future__ import annotations

import click
import requests

from atomicfetch.errors import FetchError


@click.command()
@click.version_option(package_name="atomicfetch")
@click.argument("url")
@click.argument("destination", type=click.Path(dir_okay=False))
@click.option("--timeout", type=float, default=None, help="Connect and read timeout in seconds.")
@click.option("--chunk-size", type=click.IntRange(min=1), default=64 * 1024, show_default=True)
@click.option("--json", "as_json", is_flag=True, help="Print the fetch result as JSON.")
@click.option("--verbose", "-v", is_flag=True, help="Log each pipeline stage.")
def main(
    url: str,
    destination: str,
    timeout: float | None,
    chunk_size: int,
    as_json: bool,
    verbose: bool,
) -> None:
    """Download URL to DESTINATION, decompressing .gz/.bz2/.xz bodies."""
    from atomicfetch.fetcher import fetch
    from atomicfetch.models import FetchConfig
    from atomicfetch.utils.log import configure_logging

    configure_logging("DEBUG" if verbose else "WARNING")
    config = FetchConfig(chunk_size=chunk_size, timeout=timeout)

    with requests.Session() as session:
        try:
            result = fetch(session, url, destination, config=config)
        except FetchError as e:
            raise click.ClickException(str(e)) from e

    if as_json:
        click.echo(result.to_json())
    else:
        click.echo(f"Written to {result.destination}")
