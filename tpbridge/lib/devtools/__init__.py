"""Developer harness for the query compiler.

Run it via:

    python -m tpbridge.lib.devtools compile --where "Priority eq High" --take 10
"""

from .compile import list_presets, run_compile
from .utils import configure_dev_logging, parse_variables, resolve_auth

__all__ = [
    "run_compile",
    "list_presets",
    "configure_dev_logging",
    "parse_variables",
    "resolve_auth",
]
