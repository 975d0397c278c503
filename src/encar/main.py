"""CLI entry point for the Encar API client."""

from __future__ import annotations

import asyncio
import json
from typing import Any, Dict, Optional, Tuple

import click

from .client import CarapisClient
from .config import get_settings
from .errors import CarapisClientError, SchemaError
from .logging import configure_logging


def _parse_value(raw: str) -> Any:
    try:
        return json.loads(raw)
    except ValueError:
        return raw


def _parse_args(pairs: Tuple[str, ...]) -> Dict[str, Any]:
    args: Dict[str, Any] = {}
    for pair in pairs:
        key, sep, raw = pair.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected key=value, got {pair!r}", param_hint="ARGS")
        args[key] = _parse_value(raw)
    return args


def _build_client(api_key: Optional[str]) -> CarapisClient:
    settings = get_settings()
    key = api_key or settings.carapis_api_key
    if not key:
        raise click.UsageError("No API key: pass --api-key or set CARAPIS_API_KEY.")
    try:
        return CarapisClient(key, settings=settings)
    except SchemaError as exc:
        raise click.ClickException(f"Could not load API schema: {exc}") from exc


@click.group()
@click.option("--api-key", envvar="CARAPIS_API_KEY", default=None, help="Carapis API key.")
@click.pass_context
def main(ctx: click.Context, api_key: Optional[str]) -> None:
    """Call the Carapis Encar v2 API from the command line."""
    configure_logging(get_settings().encar_log_level)
    ctx.obj = {"api_key": api_key}


@main.command()
@click.pass_context
def methods(ctx: click.Context) -> None:
    """List the API methods generated from the schema."""
    client = _build_client(ctx.obj["api_key"])
    for name in client.method_names():
        endpoint = client.endpoints[getattr(client, name).operation_id]
        click.echo(f"{name}\t{endpoint.method} {endpoint.path_template}")


@main.command()
@click.argument("method_name")
@click.argument("args", nargs=-1)
@click.pass_context
def call(ctx: click.Context, method_name: str, args: Tuple[str, ...]) -> None:
    """Invoke METHOD_NAME with key=value ARGS and print the JSON result."""
    client = _build_client(ctx.obj["api_key"])
    if method_name not in client.method_names():
        raise click.BadParameter(f"unknown method {method_name!r}", param_hint="METHOD_NAME")

    call_args = _parse_args(args)
    try:
        result = asyncio.run(client.call(method_name, call_args))
    except CarapisClientError as exc:
        click.echo(f"API error ({exc.status or 'N/A'}): {exc.message}", err=True)
        if exc.details is not None:
            click.echo(f"Details: {json.dumps(exc.details, default=str)}", err=True)
        ctx.exit(1)

    click.echo(json.dumps(result, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
