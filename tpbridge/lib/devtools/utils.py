"""Shared helpers for the query compiler dev harness."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Mapping

from tpbridge.lib.common.config import auth_from_config, auth_from_env, load_config
from tpbridge.lib.common.schemas import AuthDescriptor

LOGGER = logging.getLogger(__name__)


def configure_dev_logging(level: int = logging.INFO) -> None:
    """Enable basic logging when running the harness directly.

    Only configures logging if nothing is set yet.
    """
    if not logging.getLogger().handlers:
        logging.basicConfig(
            level=level,
            format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        )


def parse_variables(pairs: Iterable[str] | None) -> dict[str, str]:
    """Parse ``key=value`` strings into a dict."""
    variables: dict[str, str] = {}
    for pair in pairs or []:
        key, sep, value = pair.partition("=")
        if not sep or not key.strip():
            raise ValueError(f"Expected key=value, got {pair!r}")
        variables[key.strip()] = value
    return variables


def resolve_auth(
    config: str | Path | dict | None = None,
    environ: Mapping[str, str] | None = None,
) -> AuthDescriptor:
    """Auth from a config file/dict when given, else from the environment."""
    if config is not None:
        return auth_from_config(load_config(config))
    return auth_from_env(environ)
