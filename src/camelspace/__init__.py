"""Namespaced camelCase views of flat environment mappings.

Reads ``SCREAMING_SNAKE_CASE`` keys under a namespace prefix into camelCase
dicts, and writes them back the same way. Values pass through untouched.
"""

from ._case import is_valid_key_name, to_camel_case, to_constant_case
from ._reader import dump, get_source, load, read_env, set_source
from ._scope import ROOT, RootScope, Scope, root
from ._source import EnvSource, FakeEnvSource, OsEnvironSource
from ._testing import override_env
from ._version import __version__

__all__ = [
    "__version__",
    # Scopes
    "root",
    "ROOT",
    "Scope",
    "RootScope",
    # Name transcoding
    "to_camel_case",
    "to_constant_case",
    "is_valid_key_name",
    # Environment boundary
    "EnvSource",
    "OsEnvironSource",
    "FakeEnvSource",
    "read_env",
    "load",
    "dump",
    "get_source",
    "set_source",
    # Testing
    "override_env",
]
