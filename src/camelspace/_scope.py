"""Namespace scopes — prefix-bound import/export of flat environment mappings.

A scope is an immutable ``prefix``. The root scope has an empty prefix and
every narrowing appends one SCREAMING_SNAKE_CASE label plus ``_``::

    app = root()("myApp")            # prefix "MY_APP_"
    core = app("core")               # prefix "MY_APP_CORE_"

    cfg = core.from_env({"MY_APP_CORE_MODE": "test"})
    cfg                              # {"mode": "test"}
    core.to_env(cfg)                 # {"MY_APP_CORE_MODE": "test"}
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

from pydantic import BaseModel, ConfigDict

from ._case import is_valid_key_name, to_camel_case, to_constant_case

logger = logging.getLogger(__name__)


def _resolve_env(env: Mapping[str, str] | None) -> Mapping[str, str]:
    """Return *env*, or one snapshot of the active environment source."""
    if env is not None:
        return env
    from ._reader import read_env

    return read_env()


class Scope(BaseModel):
    """All environment keys under one namespace prefix."""

    model_config = ConfigDict(frozen=True)

    prefix: str = ""

    # -- Narrowing ----------------------------------------------------------

    def __call__(self, label: str | None = None) -> Scope:
        """Narrow by *label*, or return this scope when no label is given."""
        if label is None or label == "":
            return self
        return self.narrow(label)

    def narrow(self, label: str) -> Scope:
        """Return a child scope with *label* appended to the prefix."""
        segment = to_constant_case(label)
        if not segment:
            return self
        return Scope(prefix=f"{self.prefix}{segment}_")

    # -- Import / export ----------------------------------------------------

    def from_env(self, env: Mapping[str, str]) -> dict[str, str]:
        """Collect the keys under this prefix, camelCased and unprefixed.

        Keys outside the prefix are ignored. Keys inside it that are not
        valid uppercase names are dropped without raising.
        """
        result: dict[str, str] = {}
        for key, value in env.items():
            if not key.startswith(self.prefix):
                continue
            if not is_valid_key_name(key):
                logger.debug("Skipping %r: not a valid environment key name", key)
                continue
            result[to_camel_case(key[len(self.prefix) :])] = value
        return result

    def to_env(self, config: Mapping[str, Any]) -> dict[str, Any]:
        """Prefix and SCREAMING_SNAKE_CASE every key of *config*."""
        return {f"{self.prefix}{to_constant_case(key)}": value for key, value in config.items()}

    # -- Batch helpers ------------------------------------------------------

    def sections(
        self,
        labels: Iterable[str],
        env: Mapping[str, str] | None = None,
        *,
        scope: str | None = None,
    ) -> list[dict[str, str]]:
        """Import one sub-namespace per label, in order.

        With *scope* given, the labels are resolved under ``self(scope)``.
        """
        source = _resolve_env(env)
        space = self(scope)
        return [space.narrow(label).from_env(source) for label in labels]


class RootScope(Scope):
    """The unscoped namespace. Only the root offers :meth:`of`."""

    def of(
        self,
        labels: Iterable[str],
        env: Mapping[str, str] | None = None,
    ) -> dict[str, dict[str, str]]:
        """Map each label, verbatim, to the import of its namespace."""
        source = _resolve_env(env)
        return {label: self.narrow(label).from_env(source) for label in labels}


ROOT = RootScope()


def root() -> RootScope:
    """Return the root scope singleton."""
    return ROOT
