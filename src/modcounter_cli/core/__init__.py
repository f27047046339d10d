from .counter import count_mods
from .errors import FetchFailedError, ModCounterError, SearchResponseError
from .fetcher import get_mod_count
from .loaders import (
    LOADER_DOCS_URL,
    LOADER_TABLE_HINT,
    MODLOADER_NAMES,
    UNKNOWN_LOADER,
    loader_display_name,
    parse_loader_id,
)
from .models import ModCounts, OutputFile, Pagination, SearchResponse
from .prompts import RunInputs, collect_inputs, normalize_list, parse_save_choice
from .utils import (
    get_api_session,
    load_api_key,
    load_counts,
    pause,
    save_counts,
    setup_crash_logging,
)

__all__ = [
    "count_mods",
    "get_mod_count",
    "ModCounterError",
    "SearchResponseError",
    "FetchFailedError",
    "MODLOADER_NAMES",
    "UNKNOWN_LOADER",
    "LOADER_TABLE_HINT",
    "LOADER_DOCS_URL",
    "loader_display_name",
    "parse_loader_id",
    "ModCounts",
    "OutputFile",
    "Pagination",
    "SearchResponse",
    "RunInputs",
    "collect_inputs",
    "normalize_list",
    "parse_save_choice",
    "get_api_session",
    "load_api_key",
    "load_counts",
    "pause",
    "save_counts",
    "setup_crash_logging",
]
