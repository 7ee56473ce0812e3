"""Tests for _reader.py and _source.py — the environment boundary."""

import os

import pytest

from camelspace._reader import _auto_source, dump, get_source, load, read_env, set_source
from camelspace._scope import root
from camelspace._source import EnvSource, FakeEnvSource, OsEnvironSource


def _source(**env) -> FakeEnvSource:
    return FakeEnvSource(env)


@pytest.fixture(autouse=True)
def _reset_module_source():
    """Reset module-level source before and after each test."""
    set_source(None)
    yield
    set_source(None)


class TestSources:
    def test_implementations_satisfy_protocol(self):
        assert isinstance(OsEnvironSource(), EnvSource)
        assert isinstance(FakeEnvSource(), EnvSource)

    def test_minimal_source_works_with_boundary_helpers(self):
        class DictSource:
            def __init__(self):
                self.env = {"CORE_MODE": "test"}

            def snapshot(self):
                return dict(self.env)

            def update_env(self, values):
                self.env.update(values)

        source = DictSource()
        assert isinstance(source, EnvSource)
        assert load("core", source=source) == {"core": {"mode": "test"}}
        dump(root()("core"), {"token": "abc"}, source=source)
        assert source.env == {"CORE_MODE": "test", "CORE_TOKEN": "abc"}

    def test_fake_source_copies_initial_mapping(self):
        initial = {"HOST": "localhost"}
        source = FakeEnvSource(initial)
        source.set_env("PORT", "80")
        assert initial == {"HOST": "localhost"}
        assert source.get_env("PORT") == "80"
        assert source.get_env("MISSING") is None

    def test_fake_snapshot_is_independent(self):
        source = _source(HOST="localhost")
        snapshot = source.snapshot()
        snapshot["HOST"] = "changed"
        assert source.get_env("HOST") == "localhost"

    def test_os_environ_source(self, monkeypatch):
        monkeypatch.setenv("CAMELSPACE_TEST_VAR", "value")
        source = OsEnvironSource()
        assert source.snapshot()["CAMELSPACE_TEST_VAR"] == "value"

    def test_os_environ_source_update(self, monkeypatch):
        monkeypatch.delenv("CAMELSPACE_WRITTEN", raising=False)
        OsEnvironSource().update_env({"CAMELSPACE_WRITTEN": "yes"})
        try:
            assert os.environ["CAMELSPACE_WRITTEN"] == "yes"
        finally:
            del os.environ["CAMELSPACE_WRITTEN"]


class TestModuleSource:
    def test_auto_source_defaults_to_os_environ(self):
        assert get_source() is None
        assert isinstance(_auto_source(), OsEnvironSource)
        assert isinstance(get_source(), OsEnvironSource)

    def test_set_source(self):
        source = _source(HOST="localhost")
        set_source(source)
        assert get_source() is source
        assert read_env() == {"HOST": "localhost"}

    def test_explicit_source_bypasses_module_level(self):
        set_source(_source(HOST="module"))
        assert read_env(_source(HOST="explicit")) == {"HOST": "explicit"}


class TestLoad:
    def test_load_namespaces(self):
        source = _source(CORE_MODE="test", TELEMETRY_LOG_LEVEL="debug", port="80")
        assert load("telemetry", "core", source=source) == {
            "telemetry": {"logLevel": "debug"},
            "core": {"mode": "test"},
        }

    def test_load_uses_active_source(self):
        set_source(_source(MY_APP_CORE_MODE="test"))
        assert load("myApp") == {"myApp": {"coreMode": "test"}}

    def test_load_without_labels(self):
        assert load(source=_source(HOST="x")) == {}


class TestDump:
    def test_dump_writes_exported_keys(self):
        source = _source()
        written = dump(root()("myApp")("core"), {"mode": "test", "token": "abc"}, source=source)
        assert written == {"MY_APP_CORE_MODE": "test", "MY_APP_CORE_TOKEN": "abc"}
        assert source.snapshot() == written

    def test_dump_stringifies_values(self):
        source = _source()
        dump(root()("myApp"), {"port": 8000, "debug": True}, source=source)
        assert source.get_env("MY_APP_PORT") == "8000"
        assert source.get_env("MY_APP_DEBUG") == "True"

    def test_dump_then_load_round_trip(self):
        source = _source(OTHER_VAR="keep")
        config = {"apiEndpoint": "https://example.com", "logLevel": "debug"}
        dump(root()("telemetry"), config, source=source)
        assert load("telemetry", source=source) == {"telemetry": config}
        assert source.get_env("OTHER_VAR") == "keep"

    def test_dump_uses_active_source(self):
        source = _source()
        set_source(source)
        dump(root(), {"host": "localhost"})
        assert source.get_env("HOST") == "localhost"
