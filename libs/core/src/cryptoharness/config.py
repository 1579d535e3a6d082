"""Environment-driven settings.

Variables:

* ``CRYPTOHARNESS_LOG_LEVEL``: logging level name (default ``WARNING``).
* ``CRYPTOHARNESS_OUTPUT``: artifact encoding on stdout, ``base64`` or ``hex``.
* ``CRYPTOHARNESS_HKDF_LENGTH``: HKDF output length in bytes; unset means the
  digest size of the selected hash.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

LOG_LEVEL_ENV = "CRYPTOHARNESS_LOG_LEVEL"
OUTPUT_ENV = "CRYPTOHARNESS_OUTPUT"
HKDF_LENGTH_ENV = "CRYPTOHARNESS_HKDF_LENGTH"

OUTPUT_ENCODINGS = ("base64", "hex")


@dataclass(frozen=True)
class Settings:
    log_level: int = logging.WARNING
    output: str = "base64"
    hkdf_length: Optional[int] = None


def _log_level(environ: Mapping[str, str]) -> int:
    raw = environ.get(LOG_LEVEL_ENV)
    if not raw:
        return logging.WARNING
    level = logging.getLevelName(raw.strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"{LOG_LEVEL_ENV} must be a logging level name, got {raw!r}")
    return level


def _output(environ: Mapping[str, str]) -> str:
    raw = environ.get(OUTPUT_ENV)
    if not raw:
        return "base64"
    value = raw.strip().lower()
    if value not in OUTPUT_ENCODINGS:
        raise ValueError(f"{OUTPUT_ENV} must be one of {', '.join(OUTPUT_ENCODINGS)}, got {raw!r}")
    return value


def _hkdf_length(environ: Mapping[str, str]) -> Optional[int]:
    raw = environ.get(HKDF_LENGTH_ENV)
    if not raw:
        return None
    try:
        length = int(raw)
    except ValueError as exc:
        raise ValueError(f"{HKDF_LENGTH_ENV} must be an integer") from exc
    if length <= 0:
        raise ValueError(f"{HKDF_LENGTH_ENV} must be positive")
    return length


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    env = os.environ if environ is None else environ
    return Settings(
        log_level=_log_level(env),
        output=_output(env),
        hkdf_length=_hkdf_length(env),
    )


def hkdf_length() -> Optional[int]:
    """HKDF override, read at call time so handlers see the live environment."""
    return _hkdf_length(os.environ)
