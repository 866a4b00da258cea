"""
Command-line interface for Pwned Passwords checks.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import asyncio
import dataclasses
import json
import logging

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from pwnedpasswords.client import PwnedPasswordsClient
from pwnedpasswords.config import VERSION, ClientConfig
from pwnedpasswords.errors import PwnedPasswordsError

console = Console()

EXIT_CLEAN = 0
EXIT_COMPROMISED = 1
EXIT_ERROR = 2


def build_config(url: str | None, padding: bool) -> ClientConfig:
    """Merge command-line overrides into the environment config."""
    config = ClientConfig.from_env()
    overrides = {}
    if url:
        overrides["base_url"] = url
    if padding:
        overrides["add_padding"] = True
    return dataclasses.replace(config, **overrides) if overrides else config


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=VERSION, prog_name="pwnedpasswords")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, debug: bool) -> None:
    """Pwned Passwords - check a password against known breaches.

    Your password is SHA-1 hashed locally and only the first five
    characters of the hex-encoded hash are sent to the API. The API
    returns every hash suffix sharing that prefix, and the comparison
    happens on this machine.

    Neither the password nor its full hash is transmitted.
    """
    ctx.ensure_object(dict)
    ctx.obj["console"] = console

    if debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )


@main.command("check")
@click.option("--hash", "password_hash", help="SHA-1 hash to check instead of prompting")
@click.option("--url", envvar="PWNEDPASSWORDS_URL", help="Range API base URL (with trailing slash)")
@click.option("--padding", is_flag=True, help="Ask the API to pad its response")
@click.option("--json", "json_output", is_flag=True, help="Output as JSON")
@click.pass_context
def check_password(
    ctx: click.Context,
    password_hash: str | None,
    url: str | None,
    padding: bool,
    json_output: bool,
) -> None:
    """Check if a password has been exposed in data breaches.

    Exits 0 when the password is clean, 1 when it has been compromised
    and 2 when the check could not be completed.

    Example:
        pwnedpasswords check
        pwnedpasswords check --hash 5BAA61E4C9B93F3F0682250B6CF8331B7EE68FD8
    """
    try:
        config = build_config(url, padding)
    except (PwnedPasswordsError, ValueError) as e:
        console.print(f"[red]Error: {e}[/red]")
        ctx.exit(EXIT_ERROR)

    password = None
    if not password_hash:
        password = click.prompt(
            "enter password",
            hide_input=True,
            default="",
            show_default=False,
        ).encode("utf-8")

    async def _check():
        async with PwnedPasswordsClient(config) as client:
            if password_hash:
                return await client.check_digest(password_hash)
            else:
                return await client.check_password(password)

    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
            transient=True,
        ) as progress:
            progress.add_task("Checking password...", total=None)
            result = asyncio.run(_check())
    except (PwnedPasswordsError, ValueError) as e:
        console.print(f"[red]failed to check for password compromise: {e}[/red]")
        ctx.exit(EXIT_ERROR)

    if json_output:
        console.print(json.dumps(result.to_dict(), indent=2, default=str))
    elif not result.is_pwned:
        console.print("[green]no compromises detected[/green]")
    else:
        color = result.risk_level.style
        console.print(Panel(
            f"[red]!! ATTENTION !![/red]\n\n"
            f"your password has been compromised at least [bold]{result.occurrences:,}[/bold] times\n\n"
            f"Risk Level: [{color}]{result.risk_level.value.upper()}[/{color}]\n\n"
            f"{result.risk_description}",
            title="Password Check Result",
        ))

    ctx.exit(EXIT_COMPROMISED if result.is_pwned else EXIT_CLEAN)


@main.command("config")
@click.option("--url", envvar="PWNEDPASSWORDS_URL", help="Range API base URL (with trailing slash)")
@click.pass_context
def show_config(ctx: click.Context, url: str | None) -> None:
    """Show the effective client configuration."""
    try:
        config = build_config(url, padding=False)
    except (PwnedPasswordsError, ValueError) as e:
        console.print(f"[red]Error: {e}[/red]")
        ctx.exit(EXIT_ERROR)

    table = Table(title="Pwned Passwords Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")

    for key, value in config.to_dict().items():
        table.add_row(key, str(value))

    console.print(table)


if __name__ == "__main__":
    main()
