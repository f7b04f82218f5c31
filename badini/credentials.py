from __future__ import annotations

import os
from typing import Mapping, Sequence

import structlog

from .errors import MissingApiKeyError

_LOG = structlog.get_logger(__name__)

# Only VITE_-prefixed variables reach the browser bundle, so it is checked first.
DEFAULT_API_KEY_ENV_VARS: tuple[str, ...] = (
    "VITE_GEMINI_API_KEY",
    "REACT_APP_GEMINI_API_KEY",
    "GEMINI_API_KEY",
    "API_KEY",
)


def resolve_api_key(
    env_vars: Sequence[str] = DEFAULT_API_KEY_ENV_VARS,
    *,
    explicit: str | None = None,
    environ: Mapping[str, str] | None = None,
) -> str:
    """Return the first non-blank API key from ``explicit`` then ``env_vars`` in order.

    The environment is read on every call. Raises ``MissingApiKeyError`` when
    every source is unset or blank.
    """
    if explicit is not None and explicit.strip():
        return explicit.strip()

    source = os.environ if environ is None else environ
    for name in env_vars:
        value = source.get(name)
        if value is not None and value.strip():
            return value.strip()

    checked = list(env_vars)
    if explicit is not None:
        checked.insert(0, "config.api_key")

    _LOG.error(
        "api_key_missing",
        checked=checked,
        hint=f"Set {env_vars[0] if env_vars else 'an API key variable'} in the deployment environment.",
    )
    raise MissingApiKeyError(checked)
