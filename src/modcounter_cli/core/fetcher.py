import logging

import aiohttp
from pydantic import ValidationError
from rich.console import Console

from modcounter_cli.api import CurseForgeAPIConfig
from modcounter_cli.core.errors import SearchResponseError
from modcounter_cli.core.models import SearchResponse

logger = logging.getLogger(__name__)


async def get_mod_count(
    session: aiohttp.ClientSession,
    api: CurseForgeAPIConfig,
    api_key: str,
    game_version: str,
    modloader: str,
    console: Console,
) -> int | None:
    """
    Ask CurseForge how many mods exist for one version / mod loader pair.

    Returns the pagination total on a 2xx response and None on any other
    status, after printing what the API said. A 2xx body without a
    readable total raises SearchResponseError.
    """
    url = api.search_url()
    params = api.search_params(game_version, modloader)
    logger.debug("GET %s params=%s", url, params)

    async with session.get(url, params=params, headers=api.headers(api_key)) as response:
        status = response.status
        status_line = f"{status} {response.reason or '<unknown status code>'}"
        logger.debug("%s -> %s", response.url, status_line)

        if 200 <= status <= 299:
            try:
                body = await response.text()
                return SearchResponse.model_validate_json(body).pagination.total_count
            except (UnicodeDecodeError, ValidationError) as e:
                raise SearchResponseError(
                    f"Unreadable search response for {game_version} / {modloader}: {e}"
                ) from e

        if 400 <= status <= 599:
            # Undecodable bytes in error bodies are replaced
            error_message = await response.text(errors="replace")
            console.print(
                f"Error {status_line}: {error_message} (URL: {response.url})",
                markup=False,
                highlight=False,
            )
            logger.warning("Search failed with status %s for %s", status_line, response.url)
            return None

        console.print(f"Unexpected status code: {status_line}", markup=False, highlight=False)
        logger.warning("Unexpected status %s for %s", status_line, response.url)
        return None
