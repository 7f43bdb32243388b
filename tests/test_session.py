from src.auth.session import MemorySessionStore, RequestSessionStore


def test_memory_store_get_set_clear():
    store = MemorySessionStore()
    assert store.get("k") is None
    store.set("k", "v")
    assert store.get("k") == "v"
    store.clear("k")
    store.clear("k")
    assert store.get("k") is None


def test_request_store_writes_through_to_session():
    session = {}
    store = RequestSessionStore(session)
    store.set("travely_user", '{"id": "a", "name": "A"}')
    assert session == {"travely_user": '{"id": "a", "name": "A"}'}
    store.clear("travely_user")
    assert session == {}


def test_request_store_ignores_non_text_values():
    assert RequestSessionStore({"travely_user": {"id": "a"}}).get("travely_user") is None
