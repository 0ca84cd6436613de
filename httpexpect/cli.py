#!/usr/bin/env python3
"""
httpexpect CLI - check HTTP endpoints from the command line

Usage:
    httpexpect check <url> [OPTIONS]
    httpexpect validate <settings.yaml>
    httpexpect --version
"""

import asyncio
import json
import logging
from pathlib import Path
from typing import Any, List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from . import __version__
from .config import load_settings
from .expect import Config, Expect
from .printers import DebugPrinter
from .reporting import AssertReporter

app = typer.Typer(
    name="httpexpect",
    help="httpexpect - fluent assertions for HTTP APIs",
    add_completion=False,
)
console = Console()


def version_callback(value: bool):
    if value:
        console.print(f"httpexpect v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None, "--version", "-v", callback=version_callback, is_eager=True,
        help="Show version and exit"
    ),
):
    """
    httpexpect - fluent assertions for HTTP APIs

    Send a request and check status, headers and JSON body.
    """
    pass


def parse_json_option(value: Optional[str]) -> Any:
    """Decode a JSON-valued option, leaving None alone."""
    if value is None:
        return None
    try:
        return json.loads(value)
    except json.JSONDecodeError as e:
        raise typer.BadParameter(f"invalid JSON: {e}")


def parse_headers(values: List[str]) -> dict[str, str]:
    """Split "Name: value" pairs into a dict."""
    headers: dict[str, str] = {}
    for item in values:
        name, sep, value = item.partition(":")
        if not sep or not name.strip():
            raise typer.BadParameter(f"expected 'Name: value', got {item!r}", param_hint="--header")
        headers[name.strip()] = value.strip()
    return headers


async def run_check(
    expect: Expect,
    method: str,
    target: str,
    headers: dict[str, str],
    data: Any = None,
    status: Optional[int] = None,
    expected_json: Any = None,
    path: Optional[str] = None,
    equal: Any = None,
    contains_keys: Optional[List[str]] = None,
) -> None:
    """Send one request and apply the requested checks."""
    async with expect:
        request = expect.request(method, target).with_headers(headers)
        if data is not None:
            request.with_json(data)
        response = await request.expect()

        if status is not None:
            response.status(status)

        if expected_json is None and path is None and not contains_keys:
            return

        body = response.json()
        if expected_json is not None:
            body.equal(expected_json)
        if path is not None:
            selected = body.path(path)
            if equal is not None:
                selected.equal(equal)
        for key in contains_keys or []:
            body.object().contains_key(key)


@app.command()
def check(
    target: str = typer.Argument(
        ...,
        help="URL to request, or a path relative to the server url when --config is given",
    ),
    method: str = typer.Option(
        "GET", "--method", "-X",
        help="HTTP method"
    ),
    config_file: Optional[Path] = typer.Option(
        None, "--config", "-c",
        help="Path to a settings YAML file",
        exists=True,
        readable=True,
    ),
    header: List[str] = typer.Option(
        [], "--header", "-H",
        help="Request header as 'Name: value' (repeatable)"
    ),
    data: Optional[str] = typer.Option(
        None, "--data", "-d",
        help="JSON request body"
    ),
    status: Optional[int] = typer.Option(
        None, "--status", "-s",
        help="Expected status code"
    ),
    expected_json: Optional[str] = typer.Option(
        None, "--json",
        help="Expected JSON body"
    ),
    path: Optional[str] = typer.Option(
        None, "--path", "-p",
        help="JSONPath expression that must match in the body"
    ),
    equal: Optional[str] = typer.Option(
        None, "--equal", "-e",
        help="Expected JSON value at --path"
    ),
    contains_key: List[str] = typer.Option(
        [], "--contains-key", "-k",
        help="Key the JSON object body must contain (repeatable)"
    ),
    output: str = typer.Option(
        "text", "--output", "-o",
        help="Output format: text or json"
    ),
    report_dir: Path = typer.Option(
        Path("reports"), "--report-dir", "-r",
        help="Directory to save JSON reports"
    ),
    no_report: bool = typer.Option(
        False, "--no-report",
        help="Don't save a JSON report file"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-V",
        help="Log requests and responses"
    ),
):
    """
    Send a request and check the response.

    Every failed check is recorded; the exit code is 1 if any failed.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )

    request_headers = parse_headers(header)
    body = parse_json_option(data)
    expected = parse_json_option(expected_json)
    expected_value = parse_json_option(equal)
    if equal is not None and path is None:
        raise typer.BadParameter("--equal requires --path", param_hint="--equal")

    reporter = AssertReporter(name=f"{method.upper()} {target}")

    if config_file is not None:
        settings, validation = load_settings(config_file)
        if not validation.is_valid:
            console.print(f"\n[red]❌ Validation failed:[/red]")
            console.print(str(validation))
            raise typer.Exit(code=1)
        expect = Expect.from_settings(settings, reporter=reporter)
    else:
        expect = Expect(Config(reporter=reporter))

    if verbose:
        expect.config.printers.append(DebugPrinter())

    asyncio.run(run_check(
        expect,
        method,
        target,
        request_headers,
        data=body,
        status=status,
        expected_json=expected,
        path=path,
        equal=expected_value,
        contains_keys=contains_key,
    ))
    report = reporter.finish()

    if output == "json":
        console.print_json(data=report.to_dict())
    else:
        console.print("\n" + report.summary(), markup=False)

    if not no_report:
        report_dir.mkdir(parents=True, exist_ok=True)
        report_path = report_dir / f"{report.run_id}.json"
        reporter.save_json(report_path)
        console.print(f"\n📁 Report saved: {report_path}")

    if report.passed:
        raise typer.Exit(code=0)
    else:
        raise typer.Exit(code=1)


@app.command()
def validate(
    config_file: Path = typer.Argument(
        ...,
        help="Path to the settings YAML file",
        exists=True,
        readable=True,
    ),
):
    """
    Validate a settings YAML file.

    Check the schema and report any errors without sending requests.
    """
    console.print(f"\n📄 Validating: {config_file}")

    settings, validation = load_settings(config_file)

    if validation.is_valid:
        console.print(f"\n[green]✅ Valid settings:[/green] {settings.name}")

        table = Table(title="Settings")
        table.add_column("Key", style="cyan")
        table.add_column("Value")

        table.add_row("server.url", settings.server.url)
        table.add_row("server.auth", settings.server.auth.type.value if settings.server.auth else "none")
        table.add_row("defaults.timeout_ms", str(settings.defaults.timeout_ms))
        for name, value in settings.defaults.headers.items():
            table.add_row(f"defaults.headers.{name}", value)
        table.add_row("reporter", settings.reporter.value)
        table.add_row("printers", ", ".join(p.value for p in settings.printers) or "none")

        console.print()
        console.print(table)
        raise typer.Exit(code=0)
    else:
        console.print(f"\n[red]❌ Validation failed:[/red]")
        console.print(str(validation))
        raise typer.Exit(code=1)


@app.command()
def info():
    """
    Show information about httpexpect.
    """
    console.print(f"""
[bold]httpexpect[/bold] v{__version__}

Fluent assertions for HTTP APIs

[bold]Features:[/bold]
  • Chained assertions over status, headers and JSON bodies
  • One failure reported per root cause
  • JSONPath selection
  • Authentication support (Bearer, API Key, Basic)
  • In-process testing of aiohttp applications

[bold]Quick Start:[/bold]
  httpexpect check http://localhost:8080/health --status 200
  httpexpect check /users/1 --config httpexpect.yaml --contains-key id
  httpexpect validate httpexpect.yaml
""")


if __name__ == "__main__":
    app()
