# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for axioslike."""

import os
from dataclasses import dataclass, field

from .version import __version__

DEFAULT_USER_AGENT = f"axioslike/{__version__} (+python-httpx)"


def _float_env(name: str, default: float) -> float:
    try:
        value = os.getenv(name)
        return float(value) if value is not None else default
    except ValueError:
        return default


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class ClientSettings:
    """
    Options for the transport client plus the adapter-specific error policy.

    `throw_on_error` only affects SimpleClient; the interceptor facade always
    raises unhandled failures.
    """

    base_url: str = ""
    timeout: float = 10.0
    headers: dict[str, str] = field(default_factory=dict)
    user_agent: str = DEFAULT_USER_AGENT
    allow_redirects: bool = True
    verify_ssl: bool = True
    throw_on_error: bool = False

    @classmethod
    def from_env(cls) -> "ClientSettings":
        """Create settings from environment variables (evaluated at call time)."""
        return cls(
            base_url=os.getenv("AXIOSLIKE_BASE_URL", cls.base_url),
            timeout=_float_env("AXIOSLIKE_HTTP_TIMEOUT", cls.timeout),
            user_agent=os.getenv("AXIOSLIKE_USER_AGENT", cls.user_agent),
            allow_redirects=_bool_env("AXIOSLIKE_HTTP_REDIRECTS", cls.allow_redirects),
            verify_ssl=_bool_env("AXIOSLIKE_HTTP_VERIFY_SSL", cls.verify_ssl),
            throw_on_error=_bool_env("AXIOSLIKE_THROW_ON_ERROR", cls.throw_on_error),
        )


def load_settings() -> ClientSettings:
    """Load client settings from environment with sensible defaults."""
    return ClientSettings.from_env()
