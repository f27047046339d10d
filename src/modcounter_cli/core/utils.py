from datetime import datetime
import logging
import os
from pathlib import Path
import sys
import traceback

import aiohttp
from pydantic import ValidationError
from rich.console import Console

from modcounter_cli.core.errors import ModCounterError
from modcounter_cli.core.models import ModCounts, OutputFile

try:
    from modcounter_cli.__version__ import __author__, __version__
except ImportError:
    __version__ = "unknown"
    __author__ = "Chace Pratt"

logger = logging.getLogger(__name__)

API_KEY_ENV = "CF_API_KEY"


def load_api_key(path: Path, console: Console) -> str:
    """
    Read the CurseForge API key.

    CF_API_KEY wins when set. Otherwise the key file is used exactly as
    stored; an empty string means no key could be found.
    """
    env_key = os.environ.get(API_KEY_ENV)
    if env_key:
        logger.debug("Using API key from %s", API_KEY_ENV)
        return env_key

    try:
        return path.read_text()
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Could not read API key file %s: %s", path, e)
        console.print(f"[bold red]Failed to find/read {path.name}[/bold red]")
        return ""


# --- Async Helper ---
async def get_api_session() -> aiohttp.ClientSession:
    """Returns a session with the ModCounter-CLI user agent."""
    return aiohttp.ClientSession(
        headers={"User-Agent": f"{__author__}/ModCounter-CLI/{__version__}"},
        raise_for_status=False,  # Statuses are handled by the fetcher
    )


def save_counts(counts: ModCounts, path: Path, console: Console) -> bool:
    """Write the counts as pretty printed JSON, keeping their order"""
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(OutputFile(data=counts).model_dump_json(indent=4))
    except OSError as e:
        logger.error("Failed to write %s: %s", path, e)
        console.print(f"[bold red]Failed to write to/create {path.name} file.[/bold red]")
        return False

    logger.debug("Saved %d version(s) to %s", len(counts), path)
    return True


def load_counts(path: Path) -> ModCounts:
    """Read a file written by save_counts"""
    try:
        return OutputFile.model_validate_json(path.read_text(encoding="utf-8")).data
    except (OSError, ValidationError) as e:
        raise ModCounterError(f"Could not read {path}: {e}") from e


def pause(console: Console) -> None:
    """Keep the window open until the user hits enter"""
    console.print("\n=== Press any key to close ===")
    try:
        console.input()
    except EOFError:
        pass


def setup_crash_logging() -> Path:
    """Configure crash logging for bug reports"""
    log_dir = Path.home() / ".config" / "ModCounter-CLI" / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)

    def excepthook(exc_type, exc_value, exc_traceback) -> None:
        """Log crashes for bug reports"""

        log_file = log_dir / f"crash-{datetime.now():%Y%m%d-%H%M%S}.log"

        with open(log_file, "w") as f:
            f.write(f"ModCounter-CLI v{__version__}\n")
            f.write(f"Python {sys.version}\n")
            f.write(f"Platform: {sys.platform}\n\n")
            traceback.print_exception(exc_type, exc_value, exc_traceback, file=f)

        console = Console()
        console.print("\n[red bold]ModCounter-CLI crashed![/red bold]")
        console.print(f"[yellow]Crash log saved to:[/yellow] {log_file}")
        console.print("[dim]Please include this file when reporting the issue.[/dim]\n")

    sys.excepthook = excepthook
    return log_dir
