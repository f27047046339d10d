class ModCounterError(RuntimeError):
    pass


class SearchResponseError(ModCounterError):
    """A successful search response whose body could not be read"""


class FetchFailedError(ModCounterError):
    """The API returned no result for a version / mod loader pair"""

    def __init__(self, game_version: str, modloader: str) -> None:
        super().__init__(f"No result for version {game_version!r}, mod loader {modloader!r}")
        self.game_version = game_version
        self.modloader = modloader
