from __future__ import annotations

import pytest

from lib_log_chain.domain.levels import Severity
from lib_log_chain.domain.thresholds import parse_threshold, resolve_threshold
from lib_log_chain.errors import ConfigurationError


def test_ceiling_three_selects_the_three_most_severe_levels() -> None:
    assert resolve_threshold(3) == {Severity.EMERGENCY, Severity.ALERT, Severity.CRITICAL}


def test_ceiling_five_includes_debug_but_not_warning() -> None:
    selected = resolve_threshold(5)

    assert Severity.DEBUG in selected
    assert Severity.WARNING not in selected
    assert len(selected) == 5


def test_ceiling_eight_selects_every_level() -> None:
    assert resolve_threshold(8) == frozenset(Severity)


@pytest.mark.parametrize("ceiling", [0, -3])
def test_non_positive_ceiling_selects_nothing(ceiling: int) -> None:
    assert resolve_threshold(ceiling) == frozenset()


def test_ceiling_above_known_ranks_is_capped() -> None:
    assert resolve_threshold(99) == frozenset(Severity)


def test_explicit_list_selects_exactly_the_listed_ranks() -> None:
    assert resolve_threshold([1, 2, 8]) == {Severity.EMERGENCY, Severity.ALERT, Severity.INFO}


def test_explicit_list_drops_unknown_ranks() -> None:
    assert resolve_threshold([0, 4, 9, 4]) == {Severity.ERROR}


def test_explicit_list_coerces_numeric_strings() -> None:
    assert resolve_threshold(["6", 7]) == {Severity.WARNING, Severity.NOTICE}


@pytest.mark.parametrize("value", [True, "5", b"5", ["one"], [None], 5.0, None, object()])
def test_invalid_threshold_values_raise(value: object) -> None:
    with pytest.raises(ConfigurationError):
        resolve_threshold(value)  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("4", 4),
        (" 8 ", 8),
        ("1,2,8", [1, 2, 8]),
        ("1, 2 , 8", [1, 2, 8]),
        ("5,", None),
    ],
)
def test_parse_threshold(raw: str, expected: object) -> None:
    if expected is None:
        with pytest.raises(ConfigurationError):
            parse_threshold(raw)
    else:
        assert parse_threshold(raw) == expected


@pytest.mark.parametrize("raw", ["", "   ", "debug", "1;2"])
def test_parse_threshold_rejects_garbage(raw: str) -> None:
    with pytest.raises(ConfigurationError):
        parse_threshold(raw)
