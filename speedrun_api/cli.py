"""CLI entry point: speedrun-api.

Subcommands:
    speedrun-api list games --param name=mario --limit 50   # stream a list endpoint
    speedrun-api get games j1npme6p                         # fetch one resource
    speedrun-api page runs --offset 40 --page-size 20       # fetch one page
"""

from __future__ import annotations

import asyncio
import contextlib
import itertools
import json
from typing import Any

import click

from speedrun_api.api import (
    categories,
    games,
    guests,
    levels,
    lookups,
    runs,
    series,
    users,
    variables,
)
from speedrun_api.api.client import AsyncSpeedrunApiClient, SpeedrunApiClient
from speedrun_api.api.endpoint import Endpoint
from speedrun_api.api.errors import ApiError
from speedrun_api.api.pagination import MAX_PAGE_SIZE
from speedrun_api.core.logging import setup_logging

_LIST_ENDPOINTS: dict[str, type[Endpoint]] = {
    "games": games.Games,
    "runs": runs.Runs,
    "users": users.Users,
    "series": series.ListSeries,
    "platforms": lookups.Platforms,
    "regions": lookups.Regions,
    "genres": lookups.Genres,
    "engines": lookups.Engines,
    "developers": lookups.Developers,
    "publishers": lookups.Publishers,
    "gametypes": lookups.GameTypes,
}

_ITEM_ENDPOINTS: dict[str, type[Endpoint]] = {
    "games": games.Game,
    "runs": runs.Run,
    "users": users.User,
    "series": series.Series,
    "categories": categories.Category,
    "levels": levels.Level,
    "variables": variables.Variable,
    "guests": guests.Guest,
    "platforms": lookups.Platform,
    "regions": lookups.Region,
    "genres": lookups.Genre,
    "engines": lookups.Engine,
    "developers": lookups.Developer,
    "publishers": lookups.Publisher,
    "gametypes": lookups.GameType,
}

_PAGE_SIZE = click.IntRange(1, MAX_PAGE_SIZE)


def _parse_params(params: tuple[str, ...]) -> dict[str, str]:
    """Turn repeated ``key=value`` options into endpoint fields."""
    fields: dict[str, str] = {}
    for param in params:
        key, sep, value = param.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected key=value, got {param!r}", param_hint="--param")
        fields[key] = value
    return fields


def _build(endpoint_cls: type[Endpoint], fields: dict[str, Any]) -> Endpoint:
    try:
        return endpoint_cls.build(**fields)
    except ApiError as exc:
        raise click.UsageError(str(exc)) from exc


def _echo_json(value: Any, *, indent: int | None = None) -> None:
    click.echo(json.dumps(value, indent=indent, ensure_ascii=False))


@click.group()
@click.option("--api-key", envvar="SPEEDRUN_API_KEY", default=None, help="speedrun.com API key")
@click.option("--base-url", default=None, help="API root (default: speedrun.com v1)")
@click.option("--log-level", default=None, help="Log level (default: INFO)")
@click.option(
    "--log-format",
    type=click.Choice(["console", "json"]),
    default=None,
    help="Log renderer",
)
@click.pass_context
def main(
    ctx: click.Context,
    api_key: str | None,
    base_url: str | None,
    log_level: str | None,
    log_format: str | None,
) -> None:
    """Query the speedrun.com REST API."""
    setup_logging(log_level, log_format)
    ctx.obj = {"api_key": api_key, "base_url": base_url}


@main.command("list")
@click.argument("resource", type=click.Choice(sorted(_LIST_ENDPOINTS)))
@click.option("--limit", type=click.IntRange(min=0), default=None, help="Stop after N items")
@click.option("--page-size", type=_PAGE_SIZE, default=None, help="Items requested per page")
@click.option("--offset", type=click.IntRange(min=0), default=0, help="Skip the first K items")
@click.option("--param", "params", multiple=True, help="Endpoint filter as key=value")
@click.option("--async", "use_async", is_flag=True, help="Fetch pages with the asyncio client")
@click.pass_obj
def list_resource(
    obj: dict[str, Any],
    resource: str,
    limit: int | None,
    page_size: int | None,
    offset: int,
    params: tuple[str, ...],
    use_async: bool,
) -> None:
    """Stream every item of a list endpoint as JSON lines."""
    endpoint = _build(_LIST_ENDPOINTS[resource], _parse_params(params))
    try:
        if use_async:
            asyncio.run(_stream_items(obj, endpoint, limit, page_size, offset))
        else:
            with SpeedrunApiClient(obj["api_key"], base_url=obj["base_url"]) as client:
                items = endpoint.iter(client, offset=offset, page_size=page_size)
                for item in itertools.islice(items, limit):
                    _echo_json(item)
    except ApiError as exc:
        raise click.ClickException(str(exc)) from exc


async def _stream_items(
    obj: dict[str, Any],
    endpoint: Any,
    limit: int | None,
    page_size: int | None,
    offset: int,
) -> None:
    if limit == 0:
        return
    async with AsyncSpeedrunApiClient(obj["api_key"], base_url=obj["base_url"]) as client:
        seen = 0
        stream = endpoint.stream(client, offset=offset, page_size=page_size)
        async with contextlib.aclosing(stream):
            async for item in stream:
                _echo_json(item)
                seen += 1
                if limit is not None and seen >= limit:
                    break


@main.command("get")
@click.argument("resource", type=click.Choice(sorted(_ITEM_ENDPOINTS)))
@click.argument("resource_id")
@click.pass_obj
def get_resource(obj: dict[str, Any], resource: str, resource_id: str) -> None:
    """Fetch one resource by id (guests by name)."""
    key = "name" if resource == "guests" else "id"
    endpoint = _build(_ITEM_ENDPOINTS[resource], {key: resource_id})
    try:
        with SpeedrunApiClient(obj["api_key"], base_url=obj["base_url"]) as client:
            data = endpoint.query(client)
    except ApiError as exc:
        raise click.ClickException(str(exc)) from exc
    _echo_json(data, indent=2)


@main.command("page")
@click.argument("resource", type=click.Choice(sorted(_LIST_ENDPOINTS)))
@click.option("--offset", type=click.IntRange(min=0), default=0, help="Offset of the page")
@click.option("--page-size", type=_PAGE_SIZE, default=None, help="Items requested")
@click.option("--param", "params", multiple=True, help="Endpoint filter as key=value")
@click.pass_obj
def page_resource(
    obj: dict[str, Any],
    resource: str,
    offset: int,
    page_size: int | None,
    params: tuple[str, ...],
) -> None:
    """Fetch a single page and print its items with the pagination metadata."""
    endpoint = _build(_LIST_ENDPOINTS[resource], _parse_params(params))
    try:
        with SpeedrunApiClient(obj["api_key"], base_url=obj["base_url"]) as client:
            items, pagination = endpoint.single_page(offset, page_size).query(client)
    except ApiError as exc:
        raise click.ClickException(str(exc)) from exc
    _echo_json({"data": items, "pagination": pagination.model_dump(mode="json")}, indent=2)


if __name__ == "__main__":
    main()
