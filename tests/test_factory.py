import threading
import time

import pytest

from data_type_registry import DataTypeHandler, Factory, RegistrationError


def test_register_twice_keeps_only_last_entry(registry):
    registry.register("https://example.org/T", lambda: DataTypeHandler(type="first"))
    registry.register("https://example.org/T", lambda: DataTypeHandler(type="second"))

    assert registry.get("https://example.org/T").type == "second"
    assert registry.names() == ["https://example.org/T"]


def test_overwrite_drops_entry_already_built(registry):
    registry.register("t", lambda: DataTypeHandler(type="first"))
    assert registry.get("t").type == "first"

    registry.register("t", lambda: DataTypeHandler(type="second"))
    assert registry.get("t").type == "second"


def test_get_missing_returns_none(registry):
    assert registry.get("https://example.org/missing") is None
    assert not registry.exists("https://example.org/missing")
    assert "https://example.org/missing" not in registry


def test_generator_runs_once_on_first_get():
    calls = []
    factory = Factory("widget")
    factory.register("a", lambda: calls.append(1) or {"name": "a"})

    assert calls == []
    first = factory.get("a")
    second = factory.get("a")

    assert first is second
    assert calls == [1]


def test_reset_rebuilds_entries():
    calls = []
    factory = Factory("widget")
    factory.register("a", lambda: calls.append(1) or object())

    first = factory.get("a")
    factory.reset()
    second = factory.get("a")

    assert first is not second
    assert len(calls) == 2
    assert factory.names() == ["a"]


def test_names_in_registration_order(registry):
    for name in ("c", "a", "b"):
        registry.register(name, lambda name=name: DataTypeHandler(type=name))
    assert registry.names() == ["c", "a", "b"]
    assert len(registry) == 3
    assert [registry.get(name).type for name in registry.names()] == ["c", "a", "b"]


def test_unregister_and_remove(registry):
    registry.register("a", lambda: DataTypeHandler(type="a"))
    registry.register("b", lambda: DataTypeHandler(type="b"))

    registry.unregister("a")
    registry.remove("b")

    assert registry.names() == []
    assert registry.get("a") is None


def test_unregister_unknown_raises(registry):
    with pytest.raises(RegistrationError):
        registry.unregister("nope")


def test_clear_removes_everything(registry):
    registry.register("a", lambda: DataTypeHandler(type="a"))
    registry.get("a")

    registry.clear()

    assert len(registry) == 0
    assert registry.instances() == {}


@pytest.mark.parametrize("name", [None, "", "   ", 42])
def test_register_rejects_invalid_names(registry, name):
    with pytest.raises(RegistrationError):
        registry.register(name, lambda: DataTypeHandler(type="x"))


def test_register_rejects_non_callable_generator(registry):
    with pytest.raises(RegistrationError):
        registry.register("a", DataTypeHandler(type="a"))


def test_generator_returning_none_raises(registry):
    registry.register("a", lambda: None)
    with pytest.raises(RegistrationError):
        registry.get("a")


def test_custom_matcher_maps_requested_name():
    factory = Factory("widget", matcher=lambda names, name: name.lower() if name.lower() in names else None)
    factory.register("alpha", lambda: "A")

    assert factory.get("ALPHA") == "A"
    assert factory.match("Alpha") == "alpha"
    assert factory.get("beta") is None


def test_concurrent_get_builds_single_entry():
    calls = []
    factory = Factory("widget")

    def build():
        calls.append(1)
        time.sleep(0.01)
        return object()

    factory.register("a", build)
    results = []
    threads = [threading.Thread(target=lambda: results.append(factory.get("a"))) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(calls) == 1
    assert all(r is results[0] for r in results)
