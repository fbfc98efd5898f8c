"""
Client configuration
====================

``ClientConfig`` is the immutable, already-validated configuration a client
works from.  ``SDKSettings`` loads the same options from ``GEBETA_*``
environment variables (or a ``.env`` file) via Pydantic ``BaseSettings``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from gebeta_maps.core.constants import DEFAULT_TIMEOUT


def _option(config: Any, name: str) -> Any:
    if isinstance(config, Mapping):
        return config.get(name)
    return getattr(config, name, None)


class ClientConfig(BaseModel):
    """Options shared by every request a client makes."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    api_key: str
    timeout: int | float = Field(
        default=DEFAULT_TIMEOUT,
        description="Per-request timeout in milliseconds",
    )
    headers: dict[str, str] = Field(
        default_factory=dict,
        description="Extra HTTP headers; they win over the SDK defaults",
    )
    debug: bool = False

    @classmethod
    def from_input(cls, config: Any) -> "ClientConfig":
        """Merge caller-supplied options (mapping or object) with the defaults.

        A falsy timeout falls back to ``DEFAULT_TIMEOUT``.
        """
        if isinstance(config, ClientConfig):
            return config

        headers = _option(config, "headers") or {}
        return cls(
            api_key=str(_option(config, "api_key") or ""),
            timeout=_option(config, "timeout") or DEFAULT_TIMEOUT,
            headers={str(key): str(value) for key, value in headers.items()},
            debug=bool(_option(config, "debug")),
        )


class SDKSettings(BaseSettings):
    """SDK options read from the environment."""

    model_config = SettingsConfigDict(
        env_prefix="GEBETA_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str = ""
    timeout: int = DEFAULT_TIMEOUT
    debug: bool = False

    def to_config(self) -> dict[str, Any]:
        return {
            "api_key": self.api_key,
            "timeout": self.timeout,
            "debug": self.debug,
        }


__all__ = ["ClientConfig", "SDKSettings"]
