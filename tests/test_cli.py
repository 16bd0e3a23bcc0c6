"""CLI behaviour coverage for the click command group."""

from __future__ import annotations

import json
import re
from typing import Callable

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner

from lib_log_chain import __init__conf__
from lib_log_chain import cli as cli_mod
from lib_log_chain.runtime import summary_info

ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")


def strip_ansi(text: str) -> str:
    """Return ``text`` without ANSI colour codes.

    Examples
    --------
    >>> strip_ansi("\x1b[31mred\x1b[0m")
    'red'
    """

    return ANSI_RE.sub("", text)


@pytest.fixture(autouse=True)
def _clean_log_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("LOG_THRESHOLD", "LOG_DATE_FORMAT", "LOG_DEBUG", "LOG_ENVIRONMENT", "LOG_CHAIN_USE_DOTENV"):
        monkeypatch.delenv(name, raising=False)


def run_cli(args: list[str] | None = None) -> tuple[int, str, BaseException | None]:
    """Invoke the click group with ``CliRunner`` and capture output."""

    runner = CliRunner()
    result = runner.invoke(cli_mod.cli, args or [], prog_name=__init__conf__.shell_command)
    return result.exit_code, result.output, result.exception


def test_cli_without_subcommand_prints_summary() -> None:
    exit_code, stdout, _ = run_cli()

    assert exit_code == 0
    assert stdout == summary_info()


def test_cli_info_command_matches_summary() -> None:
    exit_code, stdout, _ = run_cli(["info"])

    assert exit_code == 0
    assert stdout == summary_info()


def test_cli_version_option() -> None:
    exit_code, stdout, _ = run_cli(["--version"])

    assert exit_code == 0
    assert __init__conf__.version in stdout


def test_cli_levels_lists_every_rank() -> None:
    exit_code, stdout, _ = run_cli(["levels"])

    plain = strip_ansi(stdout)
    assert exit_code == 0
    for label in ("emergency", "alert", "critical", "error", "debug", "warning", "notice", "info"):
        assert label in plain


def test_cli_threshold_ceiling() -> None:
    exit_code, stdout, _ = run_cli(["threshold", "5"])

    assert exit_code == 0
    assert stdout.splitlines() == ["1 emergency", "2 alert", "3 critical", "4 error", "5 debug"]


def test_cli_threshold_list_drops_unknown_ranks() -> None:
    exit_code, stdout, _ = run_cli(["threshold", "8,1,12"])

    assert exit_code == 0
    assert stdout.splitlines() == ["1 emergency", "8 info"]


def test_cli_threshold_zero_logs_nothing() -> None:
    exit_code, stdout, _ = run_cli(["threshold", "0"])

    assert exit_code == 0
    assert stdout.strip() == "(nothing is logged)"


def test_cli_threshold_rejects_garbage() -> None:
    exit_code, stdout, _ = run_cli(["threshold", "loud"])

    assert exit_code == 2
    assert "Invalid value" in stdout


def test_cli_logdemo_emits_every_level_and_dumps_cache() -> None:
    exit_code, stdout, _ = run_cli(["logdemo", "--no-color"])

    plain = strip_ansi(stdout)
    assert exit_code == 0
    assert "emitted 8 of 8 messages" in plain
    assert "EMERGENCY - " in plain
    assert "INFO: user alice logged in" in plain
    assert "DEBUG: cache {missing} lookup took 3 ms" in plain


def test_cli_logdemo_respects_threshold_and_json_dump() -> None:
    exit_code, stdout, _ = run_cli(["logdemo", "--threshold", "1,4", "--dump-format", "json", "--no-color"])

    assert exit_code == 0
    lines = strip_ansi(stdout).splitlines()
    assert "emitted 2 of 8 messages" in lines
    assert json.loads(lines[-1]) == [
        {"level": "emergency", "message": "checkout is unusable"},
        {"level": "error", "message": "request req-42 failed"},
    ]


def test_cli_no_traceback_option(monkeypatch: pytest.MonkeyPatch) -> None:
    """`--no-traceback` should disable verbose tracebacks for subsequent commands."""

    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", True, raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback_force_color", True, raising=False)

    exit_code, _stdout, _exception = run_cli(["--no-traceback", "info"])

    assert exit_code == 0
    assert lib_cli_exit_tools.config.traceback is False
    assert lib_cli_exit_tools.config.traceback_force_color is False


def test_main_restores_traceback_preferences(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", False, raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback_force_color", False, raising=False)

    recorded: dict[str, bool] = {}

    def fake_run_cli(command: Callable[..., int], argv: list[str] | None = None, *, prog_name: str | None = None, **_: object) -> int:
        runner = CliRunner()
        result = runner.invoke(command, ["info"] if argv is None else argv)
        if result.exception is not None:
            raise result.exception
        recorded["traceback"] = lib_cli_exit_tools.config.traceback
        recorded["prog_name"] = prog_name == __init__conf__.shell_command
        return result.exit_code

    monkeypatch.setattr(lib_cli_exit_tools, "run_cli", fake_run_cli)

    exit_code = cli_mod.main(["--traceback", "info"])

    assert exit_code == 0
    assert recorded == {"traceback": True, "prog_name": True}
    assert lib_cli_exit_tools.config.traceback is False
    assert lib_cli_exit_tools.config.traceback_force_color is False
