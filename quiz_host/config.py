"""Runtime configuration read from the environment."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
import logging
import os

from quiz_host.constants.network_constants import DEFAULT_SERVER_URL
from quiz_host.constants.quiz_constants import (
    DEFAULT_QUESTION_COUNT,
    DEFAULT_ROOM_CAPACITY,
    MAX_QUESTION_COUNT,
)

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class HostConfig:
    """Settings for one run of the host console."""

    server_url: str = DEFAULT_SERVER_URL
    default_capacity: int = DEFAULT_ROOM_CAPACITY
    default_question_count: int = DEFAULT_QUESTION_COUNT
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> HostConfig:
        env = os.environ if environ is None else environ
        return cls(
            server_url=env.get("QUIZ_HOST_SERVER_URL") or DEFAULT_SERVER_URL,
            default_capacity=_positive_int(env, "QUIZ_HOST_DEFAULT_CAPACITY", DEFAULT_ROOM_CAPACITY),
            default_question_count=_positive_int(
                env, "QUIZ_HOST_DEFAULT_QUESTION_COUNT", DEFAULT_QUESTION_COUNT, MAX_QUESTION_COUNT
            ),
            log_level=env.get("QUIZ_HOST_LOG_LEVEL", "INFO").upper(),
        )


def _positive_int(env: Mapping[str, str], key: str, default: int, maximum: int | None = None) -> int:
    raw_value = env.get(key)
    if raw_value is None or not raw_value.strip():
        return default
    try:
        value = int(raw_value)
    except ValueError:
        logger.warning("Ignoring %s=%r: not an integer, using %d", key, raw_value, default)
        return default
    if value <= 0:
        logger.warning("Ignoring %s=%r: must be positive, using %d", key, raw_value, default)
        return default
    if maximum is not None and value > maximum:
        logger.warning("Clamping %s=%r to %d", key, raw_value, maximum)
        return maximum
    return value
