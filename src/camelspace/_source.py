"""Environment source protocol and its implementations."""

from __future__ import annotations

import os
from typing import Any, Mapping, Protocol, runtime_checkable


@runtime_checkable
class EnvSource(Protocol):
    """Abstraction over where the flat environment mapping comes from.

    Scopes never touch ``os.environ`` themselves; they are handed a mapping
    taken from one of these at the outermost boundary.
    """

    def snapshot(self) -> dict[str, str]:
        ...

    def update_env(self, values: Mapping[str, str]) -> None:
        ...


class OsEnvironSource:
    """Reads and writes the live process environment (``os.environ``)."""

    def snapshot(self) -> dict[str, str]:
        return dict(os.environ)

    def update_env(self, values: Mapping[str, str]) -> None:
        os.environ.update(values)


class FakeEnvSource:
    """Dict-backed environment source for tests.

    >>> source = FakeEnvSource(env={"MY_APP_MODE": "test"})
    >>> source.snapshot()
    {'MY_APP_MODE': 'test'}
    """

    def __init__(self, env: Mapping[str, str] | None = None) -> None:
        self._env: dict[str, str] = dict(env or {})

    # -- Protocol methods ---------------------------------------------------

    def snapshot(self) -> dict[str, str]:
        return dict(self._env)

    def update_env(self, values: Mapping[str, Any]) -> None:
        self._env.update(values)

    # -- Helpers for test setup and assertions -------------------------------

    def get_env(self, key: str) -> str | None:
        return self._env.get(key)

    def set_env(self, key: str, value: str) -> None:
        self._env[key] = value
