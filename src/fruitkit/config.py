"""Runtime settings read from the environment.

Centralises environment variables (pydantic-settings) so that the
infra and CLI layers read configuration the same way.  Variables use the
``FRUITKIT_`` prefix, e.g. ``FRUITKIT_HTTP_TIMEOUT_SECONDS=5``.
"""

from __future__ import annotations

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from fruitkit.exceptions import ConfigurationError
from fruitkit.version import __version__

_LOG_LEVELS: frozenset[str] = frozenset(
    {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}
)


class FruitkitSettings(BaseSettings):
    """Central configuration contract for the requester and the CLI."""

    model_config = SettingsConfigDict(
        env_prefix="FRUITKIT_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    http_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Per-request timeout in seconds. None disables timeouts.",
    )
    user_agent: str = Field(
        default=f"fruitkit/{__version__}",
        min_length=1,
        description="User-Agent header sent by the HTTP requester.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Root log level used when the CLI configures logging.",
    )

    @field_validator("log_level")
    @classmethod
    def _normalise_log_level(cls, value: str) -> str:
        upper = value.strip().upper()
        if upper not in _LOG_LEVELS:
            raise ValueError(f"unknown log level: {value!r}")
        return upper


def load_settings() -> FruitkitSettings:
    """Build :class:`FruitkitSettings`, mapping validation errors to our hierarchy.

    Raises
    ------
    ConfigurationError
        If an environment variable or ``.env`` entry fails validation.
        The hint names the offending ``FRUITKIT_*`` variable(s).
    """
    try:
        return FruitkitSettings()
    except ValidationError as exc:
        names = sorted(
            {
                f"FRUITKIT_{str(error['loc'][0]).upper()}"
                for error in exc.errors()
                if error.get("loc")
            }
        )
        variables = ", ".join(names) or "FRUITKIT_* variables"
        raise ConfigurationError(
            f"Invalid configuration: {variables}.",
            hint=f"Fix or unset {variables} in the environment or .env file.",
        ) from exc
