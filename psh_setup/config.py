# stdlib
import logging
import os
from dataclasses import dataclass, field
from typing import Optional

logger = logging.getLogger(__name__)

ENV_PREFIX = "PSH_SETUP_"

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Settings:
    # Optional fields, overridable from PSH_SETUP_* environment variables
    auth_url: str = field(default="https://auth.api.platform.sh/oauth2/token")
    api_url: str = field(default="https://api.platform.sh")
    sites_dir: str = field(default="sites")
    log_level: str = field(default="WARNING")
    max_workers: int = field(default=4)

    # None leaves the transport default in place
    http_timeout: Optional[float] = field(default=None)

    def __post_init__(self):
        self.api_url = self.api_url.rstrip("/")
        self.log_level = self.log_level.upper()
        if self.log_level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid log level: {self.log_level}. "
                f"Valid log levels are: {VALID_LOG_LEVELS}"
            )

    @classmethod
    def from_env(cls) -> "Settings":
        """Create a Settings instance from environment variables."""

        def is_valid_field(cls, field_name: str) -> bool:
            return field_name in cls.__dataclass_fields__

        env_vars = {}
        for env_var in os.environ:
            if env_var.startswith(ENV_PREFIX):
                name = env_var.replace(ENV_PREFIX, "", 1).lower()
                if is_valid_field(cls, name):
                    env_vars[name] = os.environ[env_var]
                else:
                    logger.warning(
                        f"Ignoring invalid field name found in environment: {name}"
                    )

        if "max_workers" in env_vars:
            env_vars["max_workers"] = _parse_number(
                "max_workers", env_vars["max_workers"], int
            )

        if "http_timeout" in env_vars:
            env_vars["http_timeout"] = _parse_number(
                "http_timeout", env_vars["http_timeout"], float
            )

        return cls(**env_vars)


def _parse_number(name: str, value: str, cast):
    try:
        return cast(value)
    except ValueError:
        raise ValueError(
            f"Invalid value for {ENV_PREFIX}{name.upper()}: {value!r}"
        ) from None
