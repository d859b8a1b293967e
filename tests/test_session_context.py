"""Контекст сессии поверх обычного словаря."""

from types import SimpleNamespace

from utils.session_context import SessionContext


def test_empty_session_is_anonymous():
    ctx = SessionContext({})

    assert not ctx.is_authenticated
    assert ctx.user_id is None
    assert ctx.identity() is None


def test_establish_replaces_previous_state():
    store = {"user_id": 1, "username": "old", "cart_hint": "stale"}
    ctx = SessionContext(store)

    ctx.establish(SimpleNamespace(id=7, username="alice", email=None))

    assert ctx.identity() == {"id": 7, "username": "alice", "email": None}
    assert "cart_hint" not in store
    assert isinstance(store["login_time"], int)


def test_clear_forgets_user():
    store = {}
    ctx = SessionContext(store)
    ctx.establish(SimpleNamespace(id=7, username="alice", email="a@example.com"))

    ctx.clear()

    assert store == {}
    assert not ctx.is_authenticated


def test_establish_regenerates_session_id_before_writing():
    calls = []
    store = {"user_id": 1}
    ctx = SessionContext(store, regenerate=lambda: calls.append(dict(store)))

    ctx.establish(SimpleNamespace(id=7, username="alice", email=None))
    ctx.clear()

    assert calls == [{"user_id": 1}]
    assert store == {}
