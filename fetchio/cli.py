from __future__ import annotations

import json
import logging
import pathlib
import sys
import typing

import anyio
import click
import httpx
from rich.console import Console
from rich.syntax import Syntax

from ._client import create_client
from ._payload import FormData
from .fs import LocalFileSystem

if typing.TYPE_CHECKING:
    from ._config import Config
    from ._models import FetchResult

logger = logging.getLogger(__name__)

METHODS = ("GET", "POST", "PUT", "PATCH", "DELETE")
KINDS = ("json", "text", "bytes", "void")


# ---------------------------------------------------------------------------
# Option parsing helpers
# ---------------------------------------------------------------------------


def parse_header(header: str) -> tuple[str, str]:
    """Parse a 'Key: Value' header string."""
    if ":" not in header:
        raise click.BadParameter(
            f"Invalid header format: '{header}'. Expected 'Key: Value'."
        )
    key, _, value = header.partition(":")
    return key.strip(), value.strip()


def parse_pair(pair: str) -> tuple[str, str]:
    """Parse a 'key=value' query parameter or form field."""
    if "=" not in pair:
        raise click.BadParameter(f"Invalid format: '{pair}'. Expected 'key=value'.")
    key, _, value = pair.partition("=")
    return key, value


def build_payload(
    data: str | None, json_body: str | None, form_fields: tuple[str, ...]
) -> typing.Any:
    options = (data, json_body, form_fields or None)
    given = [option for option in options if option is not None]
    if len(given) > 1:
        raise click.UsageError("Use only one of --data, --json-data and --form.")
    if json_body is not None:
        try:
            return json.loads(json_body)
        except json.JSONDecodeError as exc:
            raise click.BadParameter(f"Invalid JSON: {exc}") from exc
    if form_fields:
        return FormData(parse_pair(field) for field in form_fields)
    return data


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------


def format_result_plain(result: FetchResult, kind: str) -> str:
    data = result.data
    if data is None:
        return ""
    if kind == "bytes":
        return f"<{len(data)} bytes of binary data>"
    if kind == "json":
        return json.dumps(data, indent=4, ensure_ascii=False)
    return str(data)


def print_result_rich(console: Console, result: FetchResult, kind: str) -> None:
    data = result.data
    if data is None:
        return
    style = "green" if result.success else "bold red"
    if kind == "bytes":
        console.print(f"[dim]<{len(data)} bytes of binary data>[/dim]")
    elif kind == "json":
        formatted = json.dumps(data, indent=4, ensure_ascii=False)
        console.print(Syntax(formatted, "json", theme="monokai"))
    else:
        console.print(str(data), style=style, markup=False, highlight=False)


# ---------------------------------------------------------------------------
# CLI command
# ---------------------------------------------------------------------------


async def _run(
    url: str,
    method: str,
    config: Config,
    payload: typing.Any,
    params: dict[str, str],
    kind: str,
) -> FetchResult:
    client = create_client(url, config)
    if method == "GET":
        builder = client.get()
    elif method == "DELETE":
        builder = client.delete()
    else:
        builder = getattr(client, method.lower())("", payload)
    return await builder.params(params).fetch(kind)  # type: ignore[arg-type]


@click.command(help="Send an HTTP request and print the decoded response.")
@click.argument("url")
@click.option(
    "-m",
    "--method",
    default="GET",
    type=click.Choice(METHODS, case_sensitive=False),
    help="HTTP method.",
)
@click.option(
    "-H",
    "--header",
    "headers",
    multiple=True,
    help='Add a header, e.g. -H "Authorization: Bearer token".',
)
@click.option(
    "-p", "--param", "params", multiple=True, help="Add a query parameter, key=value."
)
@click.option("-d", "--data", default=None, help="Text to send in the request body.")
@click.option(
    "-j", "--json-data", "json_body", default=None, help="JSON data to send."
)
@click.option(
    "-f", "--form", "form_fields", multiple=True, help="Add a form field, key=value."
)
@click.option(
    "--as",
    "kind",
    default="text",
    type=click.Choice(KINDS),
    help="How to decode the response body.",
)
@click.option(
    "--encode-params",
    is_flag=True,
    default=False,
    help="Percent-encode query parameters.",
)
@click.option("--download", default=None, help="Save the response body to a file.")
@click.option(
    "--no-color", is_flag=True, default=False, help="Disable colored output."
)
def main(
    url: str,
    method: str,
    headers: tuple[str, ...],
    params: tuple[str, ...],
    data: str | None,
    json_body: str | None,
    form_fields: tuple[str, ...],
    kind: str,
    encode_params: bool,
    download: str | None,
    no_color: bool,
) -> None:
    method = method.upper()
    use_rich = not no_color and sys.stdout.isatty()

    config: Config = {"encode_params": encode_params}
    if headers:
        config["headers"] = dict(parse_header(h) for h in headers)
    query = dict(parse_pair(p) for p in params)
    payload = build_payload(data, json_body, form_fields)
    if payload is not None and method in ("GET", "DELETE"):
        raise click.UsageError(f"{method} requests do not take a request body.")
    if download is not None:
        kind = "bytes"

    try:
        result = anyio.run(_run, url, method, config, payload, query, kind)
    except httpx.HTTPError as exc:
        if use_rich:
            console = Console(stderr=True)
            console.print(f"[bold red]{type(exc).__name__}[/bold red]: {exc}")
        else:
            click.echo(f"{type(exc).__name__}: {exc}", err=True)
        sys.exit(1)

    if download is not None and result.data is not None:
        target = pathlib.Path(download)
        fs = LocalFileSystem(target.parent)
        path = anyio.run(fs.save, result.data, target.name)
        logger.info("Saved %d bytes to %s", len(result.data), path)
        if use_rich:
            Console().print(
                f"[green]✓[/green] Downloaded [bold]{len(result.data):,}[/bold] "
                f"bytes to [cyan]{download}[/cyan]"
            )
        else:
            click.echo(f"Downloaded {len(result.data)} bytes to {download}")
    elif use_rich:
        print_result_rich(Console(), result, kind)
    else:
        output = format_result_plain(result, kind)
        if output:
            click.echo(output)

    if not result.success:
        sys.exit(1)
