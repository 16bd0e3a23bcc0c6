from __future__ import annotations

from lib_log_chain.adapters.runtime_context import ProcessRuntimeContext
from lib_log_chain.application.ports import RuntimeContextPort
from lib_log_chain.domain.context import RequestBinder
from lib_log_chain.domain.paths import PathRoots


def test_request_data_follows_the_bound_scope() -> None:
    binder = RequestBinder()
    ctx = ProcessRuntimeContext(binder=binder, environ={})

    assert dict(ctx.post_data()) == {}
    assert ctx.session_data() is None

    with binder.bind(post={"user": "alice"}, get={"page": 1}, session={"sid": "s"}):
        assert ctx.post_data() == {"user": "alice"}
        assert ctx.get_data() == {"page": 1}
        assert ctx.session_data() == {"sid": "s"}

    assert dict(ctx.get_data()) == {}


def test_environment_and_roots_are_exposed() -> None:
    ctx = ProcessRuntimeContext(
        binder=RequestBinder(),
        environment="staging",
        roots=PathRoots(app_root="/a", framework_root="/f", public_root="/p"),
        environ={"DB_HOST": "db"},
    )

    assert isinstance(ctx, RuntimeContextPort)
    assert ctx.environment() == "staging"
    assert (ctx.app_root(), ctx.framework_root(), ctx.public_root()) == ("/a", "/f", "/p")
    assert ctx.env_var("DB_HOST") == "db"
    assert ctx.env_var("MISSING") is None


def test_defaults_read_process_environment(monkeypatch) -> None:
    monkeypatch.setenv("LIB_LOG_CHAIN_PROBE", "yes")
    ctx = ProcessRuntimeContext(binder=RequestBinder())

    assert ctx.env_var("LIB_LOG_CHAIN_PROBE") == "yes"
    assert ctx.environment() == "production"
    assert ctx.app_root() is None
