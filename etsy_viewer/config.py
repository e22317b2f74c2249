"""
Runtime configuration.

Everything comes from environment variables, so the same code runs locally
and on a serverless host. Defaults mirror the ports and endpoint the two
halves were originally written against.
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_LISTING_DETAILS_URL = "http://localhost:3001/api/listing-details"
LOG_FORMAT = "%(levelname)s: %(message)s"


def _int_env(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = environ.get(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _float_env(environ: Mapping[str, str], name: str) -> Optional[float]:
    raw = environ.get(name)
    if raw is None or raw == "":
        return None
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number of seconds, got {raw!r}") from None


@dataclass(frozen=True)
class Settings:
    host: str = "0.0.0.0"
    backend_port: int = 8080
    frontend_port: int = 3000
    listing_details_url: str = DEFAULT_LISTING_DETAILS_URL
    # None means wait for the response indefinitely
    listing_details_timeout: Optional[float] = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        return cls(
            host=env.get("HOST") or cls.host,
            backend_port=_int_env(env, "BACKEND_PORT", cls.backend_port),
            frontend_port=_int_env(env, "FRONTEND_PORT", cls.frontend_port),
            listing_details_url=env.get("LISTING_DETAILS_URL") or cls.listing_details_url,
            listing_details_timeout=_float_env(env, "LISTING_DETAILS_TIMEOUT"),
            log_level=(env.get("LOG_LEVEL") or cls.log_level).upper(),
        )


def setup_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)
