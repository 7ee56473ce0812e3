"""Test utilities for camelspace."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Mapping

from ._reader import get_source, set_source
from ._source import FakeEnvSource


@contextmanager
def override_env(env: Mapping[str, str] | None = None) -> Iterator[FakeEnvSource]:
    """Temporarily replace the environment source with a ``FakeEnvSource``.

    Usage::

        with override_env({"MY_APP_MODE": "test"}) as source:
            assert root().of(["myApp"]) == {"myApp": {"mode": "test"}}
            source.set_env("MY_APP_TOKEN", "abc")  # mutate inside context
    """
    previous = get_source()
    fake = FakeEnvSource(env)
    set_source(fake)
    try:
        yield fake
    finally:
        set_source(previous)
