"""
Interactive input collection for a counting run
"""

from typing import NamedTuple

from rich.console import Console

from modcounter_cli.core.loaders import LOADER_DOCS_URL, LOADER_TABLE_HINT

INVALID_SAVE_CHOICE = (
    "Invalid character entered, will default to not saving data to a JSON file."
)


class RunInputs(NamedTuple):
    versions: list[str]
    modloaders: list[str]
    save_to_file: bool


def strip_line_ending(raw: str) -> str:
    """Drop one trailing newline and, behind it, one carriage return"""
    if raw.endswith("\n"):
        raw = raw[:-1]
    if raw.endswith("\r"):
        raw = raw[:-1]
    return raw


def normalize_list(raw: str) -> list[str]:
    """
    Turn a comma separated answer into a list of tokens.

    Spaces are removed everywhere. Empty tokens (from "a,,b" or an empty
    answer) are kept so the caller sees exactly what was typed.

    Examples:
        " 1.20.1 , 1.19.2\\r\\n" -> ["1.20.1", "1.19.2"]
        "0,,4" -> ["0", "", "4"]
    """
    return strip_line_ending(raw).replace(" ", "").split(",")


def parse_save_choice(raw: str) -> tuple[bool, bool]:
    """Returns (save, valid). Anything but y/n/empty is invalid and means no."""
    answer = strip_line_ending(raw)

    if answer in ("y", "Y"):
        return True, True
    if answer in ("n", "N", ""):
        return False, True
    return False, False


def collect_inputs(console: Console) -> RunInputs:
    """Ask for versions, mod loaders and whether to save the results"""
    versions = normalize_list(
        console.input(
            "[bold cyan]Please enter a list of Minecraft version numbers "
            "separated by commas: [/bold cyan]"
        )
    )

    console.print(f"[cyan]{LOADER_TABLE_HINT}[/cyan]")
    console.print(f"[cyan]Latest mod loader IDs can be found here: {LOADER_DOCS_URL}[/cyan]")
    modloaders = normalize_list(
        console.input(
            "[bold cyan]Please enter a list of Minecraft mod loader IDs "
            "separated by commas: [/bold cyan]"
        )
    )

    save_to_file, valid = parse_save_choice(
        console.input("[bold cyan]Save to JSON file? (y/N): [/bold cyan]")
    )
    if not valid:
        console.print(f"[bold red]{INVALID_SAVE_CHOICE}[/bold red]")

    return RunInputs(versions, modloaders, save_to_file)
