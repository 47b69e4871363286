"""
Load test configuration.

The runner reads one LoadConfig at startup: how many virtual users to hold
and for how long, plus where to send requests and which payload variant
to use. Values come from the environment (and .env) unless overridden.
"""
import os
import re
from typing import Dict, Literal, Optional, Tuple

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator

load_dotenv()

DEFAULT_VUS = 10
DEFAULT_DURATION = "30s"
DEFAULT_HOST = "http://localhost:9999"
DEFAULT_PATH = "/endpoint"
DEFAULT_VARIANT = "static"

# Seconds per unit
_UNITS = {"h": 3600.0, "m": 60.0, "s": 1.0, "ms": 0.001}
# "ms" is tried before "m"
_DURATION_PART = re.compile(r"(\d+)(ms|h|m|s)")


def parse_duration(value: str) -> float:
    """
    Parse a k6/Locust style time span into seconds.

    Accepts "30s", "2m", "1h30m", "500ms" and bare integers (seconds).

    Raises:
        ValueError: if the string is empty, malformed or adds up to zero
    """
    text = str(value).strip().lower()
    if not text:
        raise ValueError("Duration must not be empty")

    if text.isdigit():
        seconds = float(text)
    else:
        pos = 0
        seconds = 0.0
        for match in _DURATION_PART.finditer(text):
            if match.start() != pos:
                break
            seconds += int(match.group(1)) * _UNITS[match.group(2)]
            pos = match.end()
        if pos != len(text):
            raise ValueError(
                f"Invalid duration {value!r}: expected e.g. '30s', '2m', '1h30m' or '500ms'"
            )

    if seconds <= 0:
        raise ValueError(f"Duration {value!r} must be greater than zero")
    return seconds


class LoadConfig(BaseModel):
    """Virtual user count and test duration, immutable once built."""

    model_config = ConfigDict(frozen=True)

    vus: int = DEFAULT_VUS
    duration: str = DEFAULT_DURATION
    host: str = DEFAULT_HOST
    path: str = DEFAULT_PATH
    variant: Literal["static", "timestamp"] = DEFAULT_VARIANT

    @field_validator("vus")
    @classmethod
    def _check_vus(cls, value: int) -> int:
        if value < 1:
            raise ValueError("vus must be at least 1")
        return value

    @field_validator("duration")
    @classmethod
    def _check_duration(cls, value: str) -> str:
        parse_duration(value)
        return value

    @field_validator("host")
    @classmethod
    def _strip_host(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("path")
    @classmethod
    def _check_path(cls, value: str) -> str:
        if not value.startswith("/"):
            raise ValueError("path must start with '/'")
        return value

    @property
    def duration_seconds(self) -> float:
        return parse_duration(self.duration)

    @classmethod
    def from_env(cls, **overrides) -> "LoadConfig":
        """
        Build a config from LOAD_VUS, LOAD_DURATION, TARGET_HOST,
        TARGET_PATH and LOAD_VARIANT. Keyword overrides that are not None
        win over the environment.
        """
        values = {
            "vus": os.getenv("LOAD_VUS", DEFAULT_VUS),
            "duration": os.getenv("LOAD_DURATION", DEFAULT_DURATION),
            "host": os.getenv("TARGET_HOST", DEFAULT_HOST),
            "path": os.getenv("TARGET_PATH", DEFAULT_PATH),
            "variant": os.getenv("LOAD_VARIANT", DEFAULT_VARIANT),
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

    def to_env(self) -> Dict[str, str]:
        """Environment variables that make from_env() rebuild this config."""
        return {
            "LOAD_VUS": str(self.vus),
            "LOAD_DURATION": self.duration,
            "TARGET_HOST": self.host,
            "TARGET_PATH": self.path,
            "LOAD_VARIANT": self.variant,
        }


def target_users(config: LoadConfig, run_time: float) -> Optional[Tuple[int, float]]:
    """
    Shape tick for a flat load: all users at once until the duration ends.

    Returns (user_count, spawn_rate), or None to stop the test.
    """
    if run_time >= config.duration_seconds:
        return None
    return (config.vus, float(config.vus))
