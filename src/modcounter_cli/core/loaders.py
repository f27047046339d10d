"""
CurseForge mod loader IDs and their display names
"""

MODLOADER_NAMES = ("Any", "Forge", "Cauldron", "LiteLoader", "Fabric", "Quilt", "NeoForge")
UNKNOWN_LOADER = "Unknown mod loader"

LOADER_TABLE_HINT = "CurseForge mod loaders as of May 30th, 2024: " + ", ".join(
    f"{i}={name}" for i, name in enumerate(MODLOADER_NAMES)
)
LOADER_DOCS_URL = "https://docs.curseforge.com/#tocS_ModLoaderType"


# Largest ID a 64-bit index can hold, larger numbers are not IDs
MAX_LOADER_ID = 2**64 - 1


def parse_loader_id(token: str) -> int | None:
    """
    Parse a mod loader token as a non-negative integer, None if it isn't one.

    A single leading "+" is allowed ("+4" is Fabric). Signs elsewhere,
    whitespace, non-ASCII digits and values above MAX_LOADER_ID are not.
    """
    digits = token[1:] if token.startswith("+") else token
    if not digits.isascii() or not digits.isdigit():
        return None

    value = int(digits)
    if value > MAX_LOADER_ID:
        return None
    return value


def loader_display_name(index: int) -> str:
    if 0 <= index < len(MODLOADER_NAMES):
        return MODLOADER_NAMES[index]
    return UNKNOWN_LOADER
