"""Configuration loading for authentication descriptors."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from tpbridge.lib.common.schemas import AuthDescriptor
from tpbridge.lib.enums import AUTH_SCHEMES, AuthScheme, normalize_auth_scheme

logger = logging.getLogger(__name__)

ENV_API_KEY = "TP_API_KEY"
ENV_AUTH_TYPE = "TP_AUTH_TYPE"
ENV_TOKEN = "TP_TOKEN"


def load_config(config: str | Path | dict[str, Any]) -> dict[str, Any]:
    """Load a configuration dict from a JSON/YAML path or return an existing dict."""
    if isinstance(config, dict):
        return config
    path = Path(config)
    if not path.is_file():
        raise FileNotFoundError(f"Config file not found: {path}")
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() in {".yml", ".yaml"}:
        return yaml.safe_load(text) or {}
    return json.loads(text)


def parse_auth_scheme(raw: Any) -> AuthScheme:
    """Parse an auth scheme from an enum member, name or alias."""
    if isinstance(raw, AuthScheme):
        return raw
    if isinstance(raw, str):
        normalized = normalize_auth_scheme(raw)
        if normalized in AUTH_SCHEMES:
            return AuthScheme(normalized)
    raise ValueError(f"auth type must be one of {', '.join(AUTH_SCHEMES)}; got {raw!r}")


def auth_from_config(config: Mapping[str, Any]) -> AuthDescriptor:
    """Build an AuthDescriptor from the ``auth`` section of a config dict.

    Accepts ``{"auth": {"type": "apikey", "token": "..."}}``; ``apiKey`` is
    read when ``token`` is absent. A missing section means basic auth.
    """
    section = config.get("auth") or {}
    if not isinstance(section, Mapping):
        raise ValueError("auth section must be a mapping")
    token = section.get("token") or section.get("apiKey") or ""
    raw_type = section.get("type") or ("apikey" if section.get("apiKey") else "basic")
    scheme = parse_auth_scheme(raw_type)
    if scheme == AuthScheme.API_KEY and not token:
        raise ValueError("apikey auth requires a token")
    return AuthDescriptor(scheme=scheme, token=str(token))


def auth_from_env(environ: Mapping[str, str] | None = None) -> AuthDescriptor:
    """Build an AuthDescriptor from environment variables.

    ``TP_API_KEY`` selects API key auth. Otherwise ``TP_AUTH_TYPE`` (with
    ``TP_TOKEN``) is used when set, and basic auth is the default; basic
    credentials stay with the transport.
    """
    env = os.environ if environ is None else environ
    api_key = env.get(ENV_API_KEY, "").strip()
    if api_key:
        logger.debug(f"Using API key auth from {ENV_API_KEY}")
        return AuthDescriptor(scheme=AuthScheme.API_KEY, token=api_key)
    raw_type = env.get(ENV_AUTH_TYPE, "").strip()
    if raw_type:
        return auth_from_config({"auth": {"type": raw_type, "token": env.get(ENV_TOKEN, "")}})
    return AuthDescriptor(scheme=AuthScheme.BASIC)
