"""Read namespaced settings from the environment and write changes back.

Run with, for example::

    MY_APP_CORE_MODE=test MY_APP_TELEMETRY_LOG_LEVEL=debug python examples/app_settings.py
"""

from __future__ import annotations

from camelspace import dump, load, read_env, root

my_app = root()("myApp")

# One snapshot of os.environ, split into two sub-namespaces.
settings = load("myAppCore", "myAppTelemetry")
print("core:", settings["myAppCore"])
print("telemetry:", settings["myAppTelemetry"])

# Same result through a scope, reusing an explicit mapping.
env = read_env()
core, telemetry = my_app.sections(["core", "telemetry"], env)
print("sections:", core, telemetry)

# Turn telemetry logging off and export the change.
telemetry["logEnabled"] = ""
print("written:", dump(my_app("telemetry"), telemetry))
