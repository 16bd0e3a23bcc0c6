from __future__ import annotations

import asyncio
from types import MappingProxyType

import pytest

from lib_log_chain.domain.context import RequestBinder, RequestData


def test_request_data_freezes_payloads() -> None:
    source = {"user": "alice"}
    data = RequestData(post=source, get={"page": 2}, session={"id": "s1"})
    source["user"] = "mallory"

    assert data.post == {"user": "alice"}
    assert isinstance(data.post, MappingProxyType)
    assert isinstance(data.session, MappingProxyType)
    with pytest.raises(TypeError):
        data.get["page"] = 3  # type: ignore[index]


def test_request_data_defaults_are_empty_without_session() -> None:
    data = RequestData()

    assert dict(data.post) == {}
    assert dict(data.get) == {}
    assert data.session is None


def test_merge_only_applies_given_values() -> None:
    data = RequestData(post={"a": 1}, get={"b": 2})

    merged = data.merge(get={"c": 3}, session=None)

    assert merged.post == {"a": 1}
    assert merged.get == {"c": 3}
    assert merged.session is None


def test_binder_scopes_nest_and_restore() -> None:
    binder = RequestBinder()
    assert binder.current() is None

    with binder.bind(post={"name": "alice"}, session={"sid": "x"}) as outer:
        assert binder.current() is outer
        with binder.bind(get={"q": "shoes"}) as inner:
            assert inner.post == {"name": "alice"}
            assert inner.get == {"q": "shoes"}
            assert inner.session == {"sid": "x"}
        assert binder.current() is outer

    assert binder.current() is None


def test_binder_restores_state_when_block_raises() -> None:
    binder = RequestBinder()

    with pytest.raises(RuntimeError):
        with binder.bind(post={"a": 1}):
            raise RuntimeError("boom")

    assert binder.current() is None


def test_clear_drops_all_frames() -> None:
    binder = RequestBinder()
    with binder.bind(post={"a": 1}):
        binder.clear()
        assert binder.current() is None


def test_concurrent_tasks_see_their_own_request() -> None:
    binder = RequestBinder()

    async def handle(user: str) -> str:
        with binder.bind(post={"user": user}):
            await asyncio.sleep(0)
            current = binder.current()
            assert current is not None
            return str(current.post["user"])

    async def main() -> list[str]:
        return list(await asyncio.gather(handle("alice"), handle("bob")))

    assert asyncio.run(main()) == ["alice", "bob"]
