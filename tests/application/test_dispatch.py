from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import pytest

from lib_log_chain.application.registry import HandlerRegistry
from lib_log_chain.application.use_cases.dispatch import DispatchResult, HandlerChain, build_diagnostic_emitter
from lib_log_chain.domain.levels import Severity
from lib_log_chain.errors import ConfigurationError, UnknownHandlerError


class ScriptedHandler:
    """Handler whose behaviour is driven entirely by its options."""

    def __init__(self, options: Mapping[str, Any]) -> None:
        self.name = options["name"]
        self.calls: list[tuple[Any, ...]] = options["calls"]
        self.accepts = options.get("accepts", frozenset(Severity))
        self.result = options.get("result", True)
        self.error = options.get("error")
        self.date_format: str | None = None

    def can_handle(self, level: Severity) -> bool:
        self.calls.append(("can_handle", self.name, level))
        return level in self.accepts

    def set_date_format(self, date_format: str) -> "ScriptedHandler":
        self.date_format = date_format
        self.calls.append(("set_date_format", self.name, date_format))
        return self

    def handle(self, level: Severity, message: str) -> bool:
        self.calls.append(("handle", self.name, message))
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def registry() -> HandlerRegistry:
    return HandlerRegistry({"a": ScriptedHandler, "b": ScriptedHandler, "c": ScriptedHandler})


def _handled(calls: list[tuple[Any, ...]]) -> list[str]:
    return [name for kind, name, _ in calls if kind == "handle"]


def test_false_return_stops_the_chain(registry: HandlerRegistry) -> None:
    calls: list[tuple[Any, ...]] = []
    chain = HandlerChain(
        {"a": {"name": "a", "calls": calls, "result": False}, "b": {"name": "b", "calls": calls}},
        registry=registry,
    )

    result = chain.dispatch(Severity.ERROR, "disk full")

    assert _handled(calls) == ["a"]
    assert result == DispatchResult(invoked=("a",), stopped_by="a")


def test_true_return_lets_later_handlers_run(registry: HandlerRegistry) -> None:
    calls: list[tuple[Any, ...]] = []
    chain = HandlerChain(
        {"a": {"name": "a", "calls": calls}, "b": {"name": "b", "calls": calls}},
        registry=registry,
    )

    result = chain.dispatch(Severity.INFO, "hello")

    assert _handled(calls) == ["a", "b"]
    assert result.stopped_by is None
    assert result.invoked == ("a", "b")


def test_handlers_that_decline_the_level_are_skipped(registry: HandlerRegistry) -> None:
    calls: list[tuple[Any, ...]] = []
    chain = HandlerChain(
        {
            "a": {"name": "a", "calls": calls, "accepts": frozenset({Severity.DEBUG}), "result": False},
            "b": {"name": "b", "calls": calls},
        },
        registry=registry,
    )

    result = chain.dispatch(Severity.ERROR, "boom")

    assert _handled(calls) == ["b"]
    assert ("set_date_format", "a", "Y-m-d H:i:s") not in calls
    assert result.invoked == ("b",)


def test_can_handle_precedes_date_format_and_handle(registry: HandlerRegistry) -> None:
    calls: list[tuple[Any, ...]] = []
    chain = HandlerChain({"a": {"name": "a", "calls": calls}}, registry=registry, date_format="d/m/Y")

    chain.dispatch(Severity.NOTICE, "ordered")

    assert calls == [
        ("can_handle", "a", Severity.NOTICE),
        ("set_date_format", "a", "d/m/Y"),
        ("handle", "a", "ordered"),
    ]


def test_dispatch_follows_declaration_order(registry: HandlerRegistry) -> None:
    calls: list[tuple[Any, ...]] = []
    chain = HandlerChain(
        {"c": {"name": "c", "calls": calls}, "a": {"name": "a", "calls": calls}, "b": {"name": "b", "calls": calls}},
        registry=registry,
    )

    chain.dispatch(Severity.INFO, "x")

    assert _handled(calls) == ["c", "a", "b"]
    assert chain.handler_ids == ("c", "a", "b")


def test_handlers_are_built_once_per_chain(registry: HandlerRegistry) -> None:
    calls: list[tuple[Any, ...]] = []
    chain = HandlerChain({"a": {"name": "a", "calls": calls}}, registry=registry)

    chain.dispatch(Severity.INFO, "one")
    first = chain.handler("a")
    chain.dispatch(Severity.INFO, "two")

    assert chain.handler("a") is first


def test_handler_errors_propagate_by_default(registry: HandlerRegistry) -> None:
    calls: list[tuple[Any, ...]] = []
    chain = HandlerChain(
        {"a": {"name": "a", "calls": calls, "error": OSError("disk gone")}, "b": {"name": "b", "calls": calls}},
        registry=registry,
    )

    with pytest.raises(OSError, match="disk gone"):
        chain.dispatch(Severity.ERROR, "x")

    assert _handled(calls) == ["a"]


def test_isolated_faults_are_reported_and_skipped(registry: HandlerRegistry, caplog: pytest.LogCaptureFixture) -> None:
    calls: list[tuple[Any, ...]] = []
    diagnostics: list[tuple[str, dict[str, Any]]] = []
    chain = HandlerChain(
        {"a": {"name": "a", "calls": calls, "error": OSError("disk gone")}, "b": {"name": "b", "calls": calls}},
        registry=registry,
        isolate_faults=True,
        diagnostic=lambda name, payload: diagnostics.append((name, payload)),
    )

    with caplog.at_level(logging.ERROR, logger="lib_log_chain.application.use_cases.dispatch"):
        result = chain.dispatch(Severity.ERROR, "x")

    assert _handled(calls) == ["a", "b"]
    assert result.failed == ("a",)
    assert diagnostics[0][0] == "handler_failed"
    assert diagnostics[0][1]["handler"] == "a"
    assert "handler 'a' failed" in caplog.text


def test_chain_stop_is_reported_to_diagnostic_hook(registry: HandlerRegistry) -> None:
    calls: list[tuple[Any, ...]] = []
    diagnostics: list[tuple[str, dict[str, Any]]] = []
    chain = HandlerChain(
        {"a": {"name": "a", "calls": calls, "result": False}},
        registry=registry,
        diagnostic=lambda name, payload: diagnostics.append((name, payload)),
    )

    chain.dispatch(Severity.ALERT, "x")

    assert diagnostics == [("chain_stopped", {"handler": "a", "level": "alert"})]


def test_unknown_handler_id_fails_at_construction(registry: HandlerRegistry) -> None:
    with pytest.raises(UnknownHandlerError, match="Unknown handler id: 'file'"):
        HandlerChain({"file": {}}, registry=registry)


@pytest.mark.parametrize("descriptors", [{}, None, [("a", {})]])
def test_empty_or_malformed_descriptors_fail(registry: HandlerRegistry, descriptors: Any) -> None:
    with pytest.raises(ConfigurationError, match="at least one handler"):
        HandlerChain(descriptors, registry=registry)


def test_diagnostic_emitter_swallows_hook_errors(caplog: pytest.LogCaptureFixture) -> None:
    def broken(name: str, payload: dict[str, Any]) -> None:
        raise RuntimeError("hook down")

    emit = build_diagnostic_emitter(broken)

    with caplog.at_level(logging.WARNING):
        emit("chain_stopped", {})

    assert "diagnostic hook failed for chain_stopped" in caplog.text


def test_diagnostic_emitter_without_hook_is_a_noop() -> None:
    build_diagnostic_emitter(None)("anything", {"x": 1})
