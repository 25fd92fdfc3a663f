"""Tests for the end-to-end inspect service."""

from __future__ import annotations

from pathlib import Path

import pytest

from hi_app.services.inspect_service import EXIT_FAILURE, EXIT_OK, InspectService
from hi_common.errors import ListingUnavailableError
from hi_runner.collectors import ProcessEntry, UserEntry
from hi_runner.streams import StreamSinks
from hi_ui.adapters import HeadlessUIAdapter


pytestmark = pytest.mark.unit_app

USERS = [UserEntry("alice", "/home/alice"), UserEntry("bob", "/home/bob")]
PROCESSES = [ProcessEntry(1, "/sbin/init"), ProcessEntry(42, "sleep 60")]


def _failing_processes():
    raise ListingUnavailableError("failed to retrieve the process list")
    yield  # pragma: no cover


@pytest.fixture
def service() -> InspectService:
    return InspectService(
        user_lister=lambda: iter(USERS),
        process_lister=lambda: iter(PROCESSES),
        prog="hostinfo",
    )


def _run(service: InspectService, argv: list[str], sinks: StreamSinks) -> int:
    with sinks:
        return service.run(argv, sinks, HeadlessUIAdapter(sinks))


def _out(sinks: StreamSinks) -> str:
    return sinks.original_out.getvalue()  # type: ignore[attr-defined]


def _err(sinks: StreamSinks) -> str:
    return sinks.original_err.getvalue()  # type: ignore[attr-defined]


def test_users_then_processes(service: InspectService, sinks: StreamSinks) -> None:
    code = _run(service, ["-u", "-p"], sinks)

    assert code == EXIT_OK
    assert _out(sinks).splitlines() == [
        USERS[0].format(),
        USERS[1].format(),
        PROCESSES[0].format(),
        PROCESSES[1].format(),
    ]
    assert _err(sinks) == ""


def test_order_is_fixed_regardless_of_flag_order(service: InspectService, sinks: StreamSinks) -> None:
    assert _run(service, ["--processes", "--users"], sinks) == EXIT_OK
    lines = _out(sinks).splitlines()
    assert lines[0].startswith("alice")
    assert lines[-1] == PROCESSES[-1].format()


@pytest.mark.parametrize("argv", [["-h"], ["--help"], ["-u", "--help", "--bogus"]])
def test_help_exits_zero_with_usage(service: InspectService, sinks: StreamSinks, argv) -> None:
    assert _run(service, argv, sinks) == EXIT_OK
    assert _out(sinks).startswith("Usage: hostinfo")
    assert "alice" not in _out(sinks)
    assert _err(sinks) == ""


def test_no_action_prints_diagnostic_and_usage(service: InspectService, sinks: StreamSinks) -> None:
    code = _run(service, ["--log", "x.txt"], sinks)

    assert code == EXIT_FAILURE
    assert _out(sinks) == ""
    err = _err(sinks)
    assert err.startswith("Error: no action specified")
    assert "\n\nUsage: hostinfo" in err


def test_no_action_does_not_touch_log_path(service: InspectService, sinks: StreamSinks, tmp_path: Path) -> None:
    target = tmp_path / "out.txt"

    assert _run(service, ["--log", str(target)], sinks) == EXIT_FAILURE
    assert not target.exists()


def test_unknown_option_names_it(service: InspectService, sinks: StreamSinks) -> None:
    assert _run(service, ["-u", "--bogus"], sinks) == EXIT_FAILURE
    assert "bogus" in _err(sinks)
    assert _out(sinks) == ""


def test_missing_argument(service: InspectService, sinks: StreamSinks) -> None:
    assert _run(service, ["-u", "-l"], sinks) == EXIT_FAILURE
    assert _err(sinks) == "Error: option -l requires an argument\n"


def test_users_logged_to_file(service: InspectService, sinks: StreamSinks, tmp_path: Path) -> None:
    target = tmp_path / "out.txt"

    assert _run(service, ["--users", "--log", str(target)], sinks) == EXIT_OK

    assert target.read_text() == "".join(entry.format() + "\n" for entry in USERS)
    assert _out(sinks) == ""
    assert _err(sinks) == ""


def test_missing_log_directory(service: InspectService, sinks: StreamSinks, tmp_path: Path) -> None:
    missing = tmp_path / "no" / "such" / "dir"
    target = missing / "out.txt"

    assert _run(service, ["--processes", "--log", str(target)], sinks) == EXIT_FAILURE

    assert _err(sinks) == f"Error: directory '{missing}' does not exist\n"
    assert _out(sinks) == ""
    assert not target.exists()


def test_repeated_log_uses_last_path(service: InspectService, sinks: StreamSinks, tmp_path: Path) -> None:
    first = tmp_path / "first.txt"
    last = tmp_path / "last.txt"

    assert _run(service, ["-u", "-l", str(first), "--log", str(last)], sinks) == EXIT_OK

    assert not first.exists()
    assert last.read_text().startswith("alice")


def test_process_failure_keeps_user_output(sinks: StreamSinks) -> None:
    service = InspectService(user_lister=lambda: iter(USERS), process_lister=_failing_processes)

    assert _run(service, ["-u", "-p"], sinks) == EXIT_FAILURE

    assert _out(sinks).splitlines() == [entry.format() for entry in USERS]
    assert _err(sinks) == "Error: failed to retrieve the process list\n"


def test_listing_failure_goes_to_redirected_errors(sinks: StreamSinks, tmp_path: Path) -> None:
    err_file = tmp_path / "err.txt"
    service = InspectService(user_lister=lambda: iter(USERS), process_lister=_failing_processes)

    assert _run(service, ["-p", "-e", str(err_file)], sinks) == EXIT_FAILURE

    assert err_file.read_text() == "Error: failed to retrieve the process list\n"
    assert _err(sinks) == ""


def test_errors_path_failure_reported_on_original_stderr(
    service: InspectService, sinks: StreamSinks, tmp_path: Path
) -> None:
    out_file = tmp_path / "out.txt"

    code = _run(service, ["-u", "-l", str(out_file), "-e", str(tmp_path)], sinks)

    assert code == EXIT_FAILURE
    assert "is a directory" in _err(sinks)
    assert out_file.read_text() == ""


def test_collectors_not_called_on_parse_error(sinks: StreamSinks) -> None:
    calls: list[str] = []
    service = InspectService(
        user_lister=lambda: calls.append("users") or iter(()),
        process_lister=lambda: calls.append("processes") or iter(()),
    )

    assert _run(service, ["-u", "-p", "-x"], sinks) == EXIT_FAILURE
    assert calls == []
