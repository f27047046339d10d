"""
curseforge.py - URL, query and header building for the CurseForge mod search.

Only the first page of results is ever requested; the count comes from
the pagination block of the response, so the hits themselves are unused.
"""

API_BASE = "https://api.curseforge.com/v1"
SEARCH_PATH = "/mods/search"
API_KEY_HEADER = "x-api-key"

GAME_ID = 432  # Minecraft
PAGE_SIZE = 50
SORT_FIELD = 1
SORT_ORDER = "desc"
PAGE_INDEX = 0

# "0" means any loader, which the API expresses as an empty filter
ANY_LOADER = "0"


class CurseForgeAPIConfig:
    """Builds requests against the CurseForge v1 API"""

    def __init__(self, base_url: str = API_BASE) -> None:
        self.base_url = base_url.rstrip("/")

    def search_url(self) -> str:
        return f"{self.base_url}{SEARCH_PATH}"

    def search_params(self, game_version: str, modloader: str) -> list[tuple[str, str]]:
        """
        Query parameters for a mod count search.

        The mod loader token is passed through untouched (except for "0"),
        so out-of-range or non-numeric IDs reach the API as typed.
        """
        modloader_type = "" if modloader == ANY_LOADER else modloader

        return [
            ("gameId", str(GAME_ID)),
            ("gameVersion", game_version),
            ("modLoaderType", modloader_type),
            ("pageSize", str(PAGE_SIZE)),
            ("sortField", str(SORT_FIELD)),
            ("sortOrder", SORT_ORDER),
            ("index", str(PAGE_INDEX)),
        ]

    def headers(self, api_key: str) -> dict[str, str]:
        return {
            "Accept": "application/json",
            API_KEY_HEADER: api_key,
        }
