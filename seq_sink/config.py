# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Sink configuration resolved from arguments, environment and .env files."""

import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

from .levels import Level

DEFAULT_INGEST_URL = "http://localhost:5341"
DEFAULT_APPLICATION = "app"
DEFAULT_LEVEL = "INFO"


@dataclass(frozen=True)
class SeqSinkConfig:
    """Settings needed to build a SeqSink.

    Attributes:
        api_key: Seq API key ("" when the server does not require one)
        ingest_url: Base URL of the Seq server
        application: Application name attached to every event
        module_filter: Logger-name substring required for records below WARN
        level: Minimum level name
        timeout: Request timeout in seconds, or None for no timeout
    """

    api_key: str = ""
    ingest_url: str = DEFAULT_INGEST_URL
    application: str = DEFAULT_APPLICATION
    module_filter: str = ""
    level: str = DEFAULT_LEVEL
    timeout: float | None = None


def _default(value: str | None, env_var: str, fallback: str) -> str:
    """Helper to pick an explicit value, then env var, then fallback."""
    if value is not None:
        return value
    return os.getenv(env_var, fallback)


def _parse_timeout(value: float | str | None) -> float | None:
    if value is None or value == "":
        return None
    try:
        timeout = float(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid timeout: {value!r}. Must be a number of seconds") from e
    if timeout <= 0:
        raise ValueError(f"timeout must be positive, got {value!r}")
    return timeout


def load_config(
    dotenv_path: str | os.PathLike | None = None,
    api_key: str | None = None,
    ingest_url: str | None = None,
    application: str | None = None,
    module_filter: str | None = None,
    level: str | None = None,
    timeout: float | None = None,
) -> SeqSinkConfig:
    """Resolve sink settings.

    Each field comes from the explicit argument if given, otherwise from its
    environment variable, otherwise from the default. A .env file is loaded
    first; variables already present in the environment win over it.

    Environment Variables:
    - SEQ_API_KEY: API key sent with every event
    - SEQ_INGEST_URL: Base URL of the Seq server
    - SEQ_APPLICATION: Application name
    - SEQ_MODULE_FILTER: Logger-name substring filter
    - SEQ_LEVEL: Minimum level (TRACE, DEBUG, INFO, WARN, ERROR, CRITICAL)
    - SEQ_TIMEOUT_SECONDS: Request timeout; unset means block until answered

    Args:
        dotenv_path: Path to a .env file; None searches upward from the
            current working directory

    Returns:
        SeqSinkConfig

    Raises:
        ValueError: If the level or timeout is invalid
    """
    load_dotenv(dotenv_path or find_dotenv(usecwd=True), override=False)

    resolved_level = _default(level, "SEQ_LEVEL", DEFAULT_LEVEL)
    # Validate early so a bad SEQ_LEVEL fails at startup
    Level.parse(resolved_level)

    return SeqSinkConfig(
        api_key=_default(api_key, "SEQ_API_KEY", ""),
        ingest_url=_default(ingest_url, "SEQ_INGEST_URL", DEFAULT_INGEST_URL),
        application=_default(application, "SEQ_APPLICATION", DEFAULT_APPLICATION),
        module_filter=_default(module_filter, "SEQ_MODULE_FILTER", ""),
        level=resolved_level.upper(),
        timeout=_parse_timeout(timeout if timeout is not None else os.getenv("SEQ_TIMEOUT_SECONDS")),
    )
