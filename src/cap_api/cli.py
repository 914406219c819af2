"""CLI entry point for cap_api package."""
from __future__ import annotations

import json
import logging
from typing import Optional, Tuple

import click
import requests
from pydantic import ValidationError

from .client import CAPClient
from .config import Settings
from .errors import CAPAPIError, UnknownResource
from .resources import ResourceKind
from .utils import parse_key_values

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@click.group()
def main() -> None:
    """Stanford CAP API command-line tool."""
    pass


@main.command("resources")
def resources_cmd() -> None:
    """List the resource names accepted by `get`."""
    for name in ResourceKind.names():
        click.echo(name)


@main.command("get")
@click.argument("resource")
@click.argument("segments", nargs=-1)
@click.option("--param", "-q", "params", multiple=True, metavar="KEY=VALUE", help="Extra query string parameter.")
@click.option("--limit", type=int, help="Items per page.")
@click.option("--page", type=int, help="Page number.")
@click.option("--endpoint", help="Base URL (default: $CAP_API_ENDPOINT or https://api.stanford.edu).")
@click.option("--token", help="Access token (default: $CAP_API_TOKEN).")
@click.option("--verbose", "-v", is_flag=True, help="Log requests to stderr.")
def get_cmd(
    resource: str,
    segments: Tuple[str, ...],
    params: Tuple[str, ...],
    limit: Optional[int],
    page: Optional[int],
    endpoint: Optional[str],
    token: Optional[str],
    verbose: bool,
) -> None:
    """Fetch RESOURCE[/SEGMENT...] and print the JSON response.

    Example: cap-api get orgs AA00 --limit 10
    """
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format=LOG_FORMAT)

    try:
        query = parse_key_values(params)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--param")

    try:
        settings = Settings.from_env(endpoint=endpoint, api_token=token, limit=limit, page=page)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
        )
        raise click.UsageError(f"Invalid settings: {problems}")
    cap = CAPClient.from_settings(settings)

    try:
        api = cap.api(resource)
    except UnknownResource as exc:
        raise click.BadParameter(
            f"{exc} (choose from: {', '.join(ResourceKind.names())})", param_hint="RESOURCE"
        )

    try:
        data = api.get(*segments, params=query)
    except (CAPAPIError, requests.RequestException) as exc:
        raise click.ClickException(str(exc))

    click.echo(json.dumps(data, indent=2))


if __name__ == "__main__":
    main()
