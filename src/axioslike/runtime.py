# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Factories that wire a transport client into either facade."""

from __future__ import annotations

from dataclasses import replace
from typing import Any

from .adapter.facade import AxiosStyleClient
from .adapter.simple import SimpleClient
from .config import ClientSettings, load_settings
from .http.client import TransportClient


def _resolve_settings(settings: ClientSettings | None, overrides: dict[str, Any]) -> ClientSettings:
    base = settings or load_settings()
    return replace(base, **overrides) if overrides else base


def create_client(
    settings: ClientSettings | None = None,
    *,
    transport: TransportClient | None = None,
    **overrides: Any,
) -> AxiosStyleClient:
    """
    Build an interceptor-capable client.

    Keyword overrides are applied onto the settings, e.g.
    `create_client(base_url="https://api.example.com")`. `throw_on_error` is accepted
    but has no effect here: unhandled failures always raise.
    """
    resolved = _resolve_settings(settings, overrides)
    return AxiosStyleClient(transport, resolved)


def create_simple_client(
    settings: ClientSettings | None = None,
    *,
    transport: TransportClient | None = None,
    **overrides: Any,
) -> SimpleClient:
    """Build a verb-only client honouring `throw_on_error`."""
    resolved = _resolve_settings(settings, overrides)
    return SimpleClient(transport, resolved)


__all__ = ["create_client", "create_simple_client"]
