"""Boundary helpers — the only place the ambient environment is consulted.

Scopes work on plain mappings. When a caller omits the mapping, it is read
once from the active :class:`EnvSource`, which defaults to ``os.environ``
and can be swapped with :func:`set_source` or ``override_env``.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from ._scope import ROOT, Scope
from ._source import EnvSource

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Module-level source management
# ---------------------------------------------------------------------------

_active_source: EnvSource | None = None


def set_source(source: EnvSource | None) -> None:
    """Set the module-level environment source."""
    global _active_source
    _active_source = source


def get_source() -> EnvSource | None:
    """Return the current module-level environment source (may be ``None``)."""
    return _active_source


def _auto_source() -> EnvSource:
    """Lazily create an ``OsEnvironSource`` if none is set."""
    global _active_source
    if _active_source is None:
        from ._source import OsEnvironSource

        _active_source = OsEnvironSource()
    return _active_source


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def read_env(source: EnvSource | None = None) -> dict[str, str]:
    """Return a snapshot of *source*, or of the active source."""
    return (source or _auto_source()).snapshot()


def load(*labels: str, source: EnvSource | None = None) -> dict[str, dict[str, str]]:
    """Import each namespace in *labels* from a single environment snapshot::

        settings = load("telemetry", "core")
        settings["core"]     # {"mode": "test"} for CORE_MODE=test
    """
    return ROOT.of(labels, read_env(source))


def dump(
    scope: Scope,
    config: Mapping[str, Any],
    *,
    source: EnvSource | None = None,
) -> dict[str, str]:
    """Export *config* through *scope* and write it into the environment.

    Values are stored with ``str()`` applied, since environment tables only
    hold strings. Returns the mapping that was written.
    """
    exported = {key: str(value) for key, value in scope.to_env(config).items()}
    active = source or _auto_source()
    logger.debug("Writing %d keys under prefix %r", len(exported), scope.prefix)
    active.update_env(exported)
    return exported
