# cli.py
import argparse
import asyncio
import sys
from datetime import datetime
from typing import Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import Confirm
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich import box

from prompt_toolkit import prompt
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.styles import Style as PromptStyle

import requests
from loguru import logger

from sdk.client import CatalogClient
from sdk.config import ClientConfig
from sdk.logging_config import setup_logging
from sdk.orchestrator import FetchOrchestrator
from sdk.state import ViewState

console = Console()

custom_style = PromptStyle.from_dict({
    'completion-menu.completion': 'bg:#008888 #ffffff',
    'completion-menu.completion.current': 'bg:#00aaaa #000000',
    'scrollbar.background': 'bg:#88aaaa',
    'scrollbar.button': 'bg:#222222',
})


# ---------------------------
# Display helpers
# ---------------------------
def show_products(state: ViewState):
    if not state.products:
        console.print("[italic yellow]No products found[/italic yellow]")
        return

    table = Table(
        title="📦 Products Catalog",
        box=box.ROUNDED,
        header_style="bold cyan",
        title_style="bold magenta",
        show_lines=True
    )
    table.add_column("ID", style="dim", width=6)
    table.add_column("Name", style="bold", width=20)
    table.add_column("Price", justify="right", width=12)
    table.add_column("Stock", justify="right", width=8)
    table.add_column("Category", width=15)

    for p in state.products:
        table.add_row(
            str(p.id),
            p.name,
            f"${p.price:,.2f}",
            str(p.stock),
            p.category.name,
        )
    console.print(table)

    if state.reported_count != len(state.products):
        console.print(
            f"[dim]showing {len(state.products)} of {state.reported_count} reported[/dim]"
        )


def show_status(message: str, is_success: bool = True):
    style = "green" if is_success else "red"
    return Panel.fit(f"[{style}]{message}[/{style}]", title="Status")


def show_error(state: ViewState):
    failure = state.error
    console.print(show_status(f"{failure.user_message}\n[dim]{failure.kind.value}: {failure.message}[/dim]", False))
    console.print("[yellow]Choose 2 to retry.[/yellow]")


def render(state: ViewState):
    if state.error is not None:
        show_error(state)
    else:
        show_products(state)


# ---------------------------
# Fetch wrappers
# ---------------------------
def run_with_spinner(coro_fn):
    """Runs coro_fn() to completion while a spinner is shown."""
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        transient=True,
    ) as progress:
        progress.add_task(description="Loading products...", total=None)
        return asyncio.run(coro_fn())


def show_health(client: CatalogClient):
    try:
        h = client.health()
    except requests.exceptions.RequestException as e:
        console.print(show_status(f"Health check failed: {e}", False))
        return
    ok = h.get("status") == "Healthy"
    console.print(show_status(f"Server: {h.get('status', 'unknown')} at {h.get('timestamp', '?')}", ok))


# ---------------------------
# Layout and Header
# ---------------------------
def create_header(endpoint: str):
    header = Table(show_header=False, box=box.ROUNDED)
    header.add_column("left", width=24)
    header.add_column("center", width=46)
    header.add_column("right", width=22)

    now = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    header.add_row(
        "🛍️ Catalog Viewer",
        f"[bold blue]{endpoint}[/bold blue]",
        f"[dim]{now}[/dim]"
    )
    return Panel(header, style="bold blue")


def prompt_with_autocomplete(message: str, completer=None, default: str = ""):
    return prompt(f"{message} ", completer=completer, style=custom_style, default=default)


# ---------------------------
# Main menu
# ---------------------------
def menu(orchestrator: FetchOrchestrator, client: CatalogClient):
    console.clear()
    console.print(create_header(orchestrator.endpoint))

    run_with_spinner(orchestrator.fetch)
    render(orchestrator.state)

    while True:
        menu_table = Table.grid(padding=(0, 2))
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)
        for row in (("1", "📦 Load products"), ("2", "🔄 Retry"), ("3", "❤️ Server health"), ("q", "👋 Quit")):
            menu_table.add_row(*row)
        console.print(Panel(menu_table, title="📋 Menu", border_style="yellow"))

        choice = prompt_with_autocomplete(
            "\nChoose an option",
            completer=WordCompleter(["1", "2", "3", "q", "quit", "exit"])
        ).strip()

        if choice == "1":
            run_with_spinner(orchestrator.fetch)
            render(orchestrator.state)

        elif choice == "2":
            run_with_spinner(orchestrator.retry)
            render(orchestrator.state)

        elif choice == "3":
            show_health(client)

        elif choice.lower() in ("q", "quit", "exit"):
            if Confirm.ask("Are you sure you want to quit?"):
                console.print(Panel.fit("[bold green]Bye! 👋[/bold green]", title="Goodbye"))
                return

        console.print()
        console.rule(style="dim")


def run_once(orchestrator: FetchOrchestrator) -> int:
    run_with_spinner(orchestrator.fetch)
    render(orchestrator.state)
    return 1 if orchestrator.state.error is not None else 0


def build_parser():
    parser = argparse.ArgumentParser(description="Catalog viewer")
    parser.add_argument("--endpoint", default=ClientConfig.PRODUCTS_ENDPOINT, help="Products endpoint URL")
    parser.add_argument("--timeout", type=float, default=ClientConfig.REQUEST_TIMEOUT_SECONDS, help="Seconds to wait for a response")
    parser.add_argument("--once", action="store_true", help="Fetch and render once, then exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging (shows response previews)")
    return parser


def main(argv: Optional[list] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(verbose=args.verbose)

    orchestrator = FetchOrchestrator(endpoint=args.endpoint, timeout=args.timeout)
    if args.once:
        return run_once(orchestrator)

    menu(orchestrator, CatalogClient(endpoint=args.endpoint, timeout=args.timeout))
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        console.print("\n\n[bold red]Interrupted by user[/bold red]")
        sys.exit(1)
    except Exception as e:
        logger.exception("Unexpected error")
        console.print(f"\n\n[bold red]Unexpected error: {e}[/bold red]")
        sys.exit(1)
