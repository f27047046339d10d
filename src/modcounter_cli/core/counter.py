import logging
from typing import Sequence

import aiohttp
from rich.console import Console
from rich.markup import escape

from modcounter_cli.api import CurseForgeAPIConfig
from modcounter_cli.core.errors import FetchFailedError
from modcounter_cli.core.fetcher import get_mod_count
from modcounter_cli.core.loaders import loader_display_name, parse_loader_id
from modcounter_cli.core.models import ModCounts

logger = logging.getLogger(__name__)

FETCH_FAILED_MESSAGE = "Failed to receive data from the CurseForge API. Is your API key valid?"
NOT_A_NUMBER_MESSAGE = "ERROR: Mod loader ID is not a number."


async def count_mods(
    session: aiohttp.ClientSession,
    api: CurseForgeAPIConfig,
    api_key: str,
    versions: Sequence[str],
    modloaders: Sequence[str],
    console: Console,
) -> ModCounts:
    """
    Count mods for every version / mod loader pair, one request at a time.

    Every version gets an entry, even when none of its mod loader IDs
    were numeric. The first pair the API gives no result for stops the
    whole run with FetchFailedError.
    """
    counts: ModCounts = {}

    for version in versions:
        console.print(
            f"\n[cyan]Initializing search for mod count(s) of version [/cyan]"
            f"[bold cyan]{escape(version)}[/bold cyan][cyan]...[/cyan]"
        )
        version_counts: dict[str, int] = {}

        for modloader in modloaders:
            count = await get_mod_count(session, api, api_key, version, modloader, console)

            if count is None:
                console.print(f"[bold red]{FETCH_FAILED_MESSAGE}[/bold red]")
                raise FetchFailedError(version, modloader)

            loader_id = parse_loader_id(modloader)
            if loader_id is None:
                logger.debug("Dropping count %s for non-numeric loader %r", count, modloader)
                console.print(f"[bold red]{NOT_A_NUMBER_MESSAGE}[/bold red]")
                continue

            version_counts[modloader] = count
            console.print(
                f"    \\\\--- {loader_display_name(loader_id)} ({modloader}): "
                f"[bold green]{count}[/bold green]",
                highlight=False,
            )

        counts[version] = version_counts

    return counts
