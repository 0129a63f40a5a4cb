from __future__ import annotations

import os

DEFAULT_SOURCE_URL = "http://localhost:5000/api/motorcycles"
DEFAULT_SOURCE_TIMEOUT_SECONDS = 10.0


def motorcycles_source_url() -> str:
    return os.getenv("MOTORCYCLES_SOURCE_URL") or DEFAULT_SOURCE_URL


def motorcycles_source_timeout() -> float:
    raw = os.getenv("MOTORCYCLES_SOURCE_TIMEOUT")

    if not raw:
        return DEFAULT_SOURCE_TIMEOUT_SECONDS

    try:
        timeout = float(raw)
    except ValueError:
        raise RuntimeError(
            f"MOTORCYCLES_SOURCE_TIMEOUT must be a number of seconds, got {raw!r}"
        ) from None

    if timeout <= 0:
        raise RuntimeError("MOTORCYCLES_SOURCE_TIMEOUT must be > 0")

    return timeout
