# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Transport request/result data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, Mapping, TypeVar

T = TypeVar("T")

Headers = dict[str, str]


@dataclass
class TransportRequest:
    """Request representation seen by transport-level interceptors."""

    method: str
    url: str
    headers: Headers = field(default_factory=dict)
    body: Any = None


@dataclass
class TransportError:
    """Error half of a TransportResult envelope."""

    message: str
    category: str | None = None
    type: str | None = None
    status: int | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "TransportError":
        """Helper to normalize dictionary-like errors (e.g. `{"message": "boom"}`)."""
        status = data.get("status")
        return cls(
            message=str(data.get("message") or ""),
            category=data.get("category"),
            type=data.get("type"),
            status=int(status) if status is not None else None,
        )


@dataclass
class TransportResult(Generic[T]):
    """
    Envelope returned by a transport client instead of raising.

    At most one of `content`/`error` is meaningful per call; consumers treat a
    set `error` as authoritative.
    """

    status: int = 0
    headers: Headers = field(default_factory=dict)
    content: T | None = None
    error: TransportError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "TransportResult[Any]":
        """Build a result from a plain mapping such as `{"content": ..., "status": 200}`."""
        error = data.get("error")
        if isinstance(error, Mapping):
            error = TransportError.from_mapping(error)
        return cls(
            status=int(data.get("status") or 0),
            headers=dict(data.get("headers") or {}),
            content=data.get("content"),
            error=error,
        )


__all__ = ["Headers", "TransportError", "TransportRequest", "TransportResult"]
