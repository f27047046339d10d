import asyncio
import logging
from pathlib import Path

import aiohttp
from pyfiglet import figlet_format
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
import typer

from modcounter_cli.api import CurseForgeAPIConfig
from modcounter_cli.core import (
    MODLOADER_NAMES,
    FetchFailedError,
    ModCounterError,
    collect_inputs,
    count_mods,
    get_api_session,
    load_api_key,
    load_counts,
    loader_display_name,
    parse_loader_id,
    pause,
    save_counts,
    setup_crash_logging,
)

# Import version info
try:
    from modcounter_cli.__version__ import __author__, __version__
except ImportError:
    __version__ = "unknown"
    __author__ = "Chace Pratt"

app = typer.Typer(
    add_completion=False,
    no_args_is_help=False,
)
console = Console()
logger = logging.getLogger(__name__)

# Configuration
DEFAULT_API_KEY_FILE = Path("apikey.txt")
DEFAULT_OUTPUT_FILE = Path("data.json")

# Setup crash logging
LOG_DIR = setup_crash_logging()


def render_banner() -> None:
    """Renders a stylized banner"""
    width = console.width
    font = "slant" if width > 60 else "small"

    ascii_art = figlet_format("ModCounter", font=font)
    banner_text = Text(ascii_art, style="bold cyan")

    info_line = Text.assemble(
        ("Minecraft Mod Counter ", "white"),
        (f"v{__version__}", "bold white"),
        (" - made by ", "italic white"),
        (f"{__author__}", "bold magenta"),
    )

    console.print(
        Panel(
            Text.assemble(banner_text, "\n", info_line),
            border_style="blue",
            padding=(1, 2),
            expand=False,
        ),
        justify="left",
    )


def finish(pause_at_end: bool) -> None:
    if pause_at_end:
        pause(console)


def run_count(api_key_file: Path, output: Path, pause_at_end: bool) -> None:
    """Prompt for versions and mod loaders, count, report and optionally save"""
    render_banner()
    console.print()

    api_key = load_api_key(api_key_file, console)
    if not api_key:
        finish(pause_at_end)
        raise typer.Exit(1)

    inputs = collect_inputs(console)
    api = CurseForgeAPIConfig()

    async def do_count():
        async with await get_api_session() as session:
            return await count_mods(
                session, api, api_key, inputs.versions, inputs.modloaders, console
            )

    try:
        counts = asyncio.run(do_count())
    except FetchFailedError as e:
        # Already reported by count_mods
        logger.error("Counting aborted: %s", e)
        finish(pause_at_end)
        raise typer.Exit(1) from e
    except ModCounterError as e:
        logger.error("Counting aborted: %s", e)
        console.print(f"[bold red]Counting failed:[/bold red] {escape(str(e))}")
        finish(pause_at_end)
        raise typer.Exit(1) from e
    except aiohttp.ClientError as e:
        logger.error("Request failed: %s", e)
        console.print(f"[bold red]Could not reach the CurseForge API:[/bold red] {escape(str(e))}")
        finish(pause_at_end)
        raise typer.Exit(1) from e

    if inputs.save_to_file and save_counts(counts, output, console):
        console.print(f"\n[green]✓ Saved results to {escape(str(output))}[/green]")

    console.print()
    finish(pause_at_end)


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    version: bool | None = typer.Option(None, "--version", "-v", help="Show version and exit"),
    verbose: bool | None = typer.Option(None, "--verbose", help="Enable verbose logging"),
) -> None:
    """ModCounter-CLI: Count CurseForge mods per Minecraft version and mod loader."""

    if verbose:
        # Enable verbose logging

        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            handlers=[
                logging.FileHandler(LOG_DIR / f"modcounter-{__version__}.log"),
                logging.StreamHandler(),
            ],
        )

    if version:
        console.print(f"ModCounter-CLI Version: [bold cyan]{__version__}[/bold cyan]")
        raise typer.Exit()

    # Bare invocation behaves like the interactive `count` command
    if ctx.invoked_subcommand is None:
        run_count(DEFAULT_API_KEY_FILE, DEFAULT_OUTPUT_FILE, pause_at_end=True)


@app.command()
def count(
    api_key_file: Path = typer.Option(
        DEFAULT_API_KEY_FILE, "--api-key-file", help="File holding the CurseForge API key"
    ),
    output: Path = typer.Option(
        DEFAULT_OUTPUT_FILE, "--output", "-o", help="Where to save the results"
    ),
    no_pause: bool = typer.Option(False, "--no-pause", help="Exit without waiting for a key"),
) -> None:
    """Count mods for Minecraft versions and mod loaders"""
    run_count(api_key_file, output, pause_at_end=not no_pause)


@app.command()
def show(path: Path = typer.Argument(DEFAULT_OUTPUT_FILE, help="Saved results file")) -> None:
    """Display a saved results file"""
    if not path.exists():
        console.print(f"[red]File not found: {escape(str(path))}[/red]")
        raise typer.Exit(1)

    try:
        counts = load_counts(path)
    except ModCounterError as e:
        console.print(f"[red]Invalid results file:[/red] {escape(str(e))}")
        raise typer.Exit(1) from e

    if not counts:
        console.print("[yellow]No versions recorded[/yellow]")
        return

    table = Table(title=f"Mod counts ({path.name})", header_style="bold magenta")
    table.add_column("Version", style="cyan")
    table.add_column("Mod Loader")
    table.add_column("ID", style="dim", justify="right")
    table.add_column("Mods", style="bold green", justify="right")

    for game_version, version_counts in counts.items():
        if not version_counts:
            table.add_row(escape(game_version), "[dim]-[/dim]", "", "")
            continue
        for loader, mod_count in version_counts.items():
            loader_id = parse_loader_id(loader)
            name = loader_display_name(loader_id) if loader_id is not None else "?"
            table.add_row(escape(game_version), name, escape(loader), str(mod_count))

    console.print(table)
    console.print(f"[dim]Known mod loaders: {', '.join(MODLOADER_NAMES)}[/dim]")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
