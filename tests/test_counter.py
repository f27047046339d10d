import asyncio

import pytest

from conftest import FakeSession, search_body
from modcounter_cli.api import CurseForgeAPIConfig
from modcounter_cli.core.counter import (
    FETCH_FAILED_MESSAGE,
    NOT_A_NUMBER_MESSAGE,
    count_mods,
)
from modcounter_cli.core.errors import FetchFailedError


def run(session, console, versions, modloaders):
    return asyncio.run(
        count_mods(session, CurseForgeAPIConfig(), "key", versions, modloaders, console)
    )


def result_lines(text: str) -> list[str]:
    return [line for line in text.splitlines() if line.startswith("    \\\\--- ")]


def test_counts_are_nested_in_input_order(console_output) -> None:
    console, buffer = console_output
    session = FakeSession([(200, search_body(n)) for n in (150, 87, 120, 64)])

    counts = run(session, console, ["1.20.1", "1.19.2"], ["4", "0"])

    assert counts == {"1.20.1": {"4": 150, "0": 87}, "1.19.2": {"4": 120, "0": 64}}
    assert list(counts) == ["1.20.1", "1.19.2"]
    assert list(counts["1.20.1"]) == ["4", "0"]

    # One request per pair, versions outermost
    versions_requested = [dict(c["params"])["gameVersion"] for c in session.calls]
    assert versions_requested == ["1.20.1", "1.20.1", "1.19.2", "1.19.2"]

    assert result_lines(buffer.getvalue()) == [
        "    \\\\--- Fabric (4): 150",
        "    \\\\--- Any (0): 87",
        "    \\\\--- Fabric (4): 120",
        "    \\\\--- Any (0): 64",
    ]


def test_out_of_range_loader_is_kept_as_unknown(console_output) -> None:
    console, buffer = console_output
    session = FakeSession([(200, search_body(3))])

    counts = run(session, console, ["1.20.1"], ["9"])

    assert counts == {"1.20.1": {"9": 3}}
    assert result_lines(buffer.getvalue()) == ["    \\\\--- Unknown mod loader (9): 3"]


def test_non_numeric_loader_is_fetched_but_dropped(console_output) -> None:
    console, buffer = console_output
    session = FakeSession([(200, search_body(10)), (200, search_body(20)), (200, search_body(30))])

    counts = run(session, console, ["1.20.1"], ["fabric", "", "4"])

    assert counts == {"1.20.1": {"4": 30}}
    assert len(session.calls) == 3
    assert buffer.getvalue().count(NOT_A_NUMBER_MESSAGE) == 2


def test_version_with_no_numeric_loaders_still_gets_an_entry(console_output) -> None:
    console, _ = console_output
    session = FakeSession([(200, search_body(1)), (200, search_body(2))])

    counts = run(session, console, ["1.20.1", "1.19.2"], ["forge"])

    assert counts == {"1.20.1": {}, "1.19.2": {}}


def test_zero_is_a_result_not_a_failure(console_output) -> None:
    console, _ = console_output

    counts = run(FakeSession([(200, search_body(0))]), console, ["1.0"], ["5"])

    assert counts == {"1.0": {"5": 0}}


def test_first_failure_stops_the_run(console_output) -> None:
    console, buffer = console_output
    session = FakeSession([(200, search_body(150)), (403, "Forbidden"), (200, search_body(1))])

    with pytest.raises(FetchFailedError) as excinfo:
        run(session, console, ["1.20.1", "1.19.2"], ["0", "4"])

    assert excinfo.value.game_version == "1.20.1"
    assert excinfo.value.modloader == "4"
    assert len(session.calls) == 2
    out = buffer.getvalue()
    assert "Error 403 Forbidden: Forbidden" in out
    assert FETCH_FAILED_MESSAGE in out
    assert "1.19.2" not in out


def test_plus_signed_loader_id_is_kept_under_its_token(console_output) -> None:
    console, buffer = console_output

    counts = run(FakeSession([(200, search_body(42))]), console, ["1.20.1"], ["+4"])

    assert counts == {"1.20.1": {"+4": 42}}
    assert result_lines(buffer.getvalue()) == ["    \\\\--- Fabric (+4): 42"]
