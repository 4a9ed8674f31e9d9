# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Header normalization utilities.

HTTP header field names are case-insensitive (RFC 9110), but the adapter keeps
headers as plain dicts with their original casing so callers see what they set.
Lookups are therefore case-insensitive while merges keep the caller's keys.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def _coerce_headers_mapping(headers: Any) -> Mapping[object, object] | None:
    """
    Best-effort coercion of "dict-like" header containers into a Mapping.

    Accepts plain dicts, httpx.Headers and iterable-of-pairs.
    """
    if not headers:
        return None
    if isinstance(headers, Mapping):
        return headers

    items = getattr(headers, "items", None)
    if callable(items):
        return dict(items())

    try:
        return dict(headers)
    except (TypeError, ValueError):
        return None


def stringify_headers(headers: Any) -> dict[str, str]:
    """Return a copy of a header mapping with every name and value coerced to `str`."""
    coerced = _coerce_headers_mapping(headers)
    if not coerced:
        return {}
    out: dict[str, str] = {}
    for key, value in coerced.items():
        if key is None:
            continue
        name = str(key).strip()
        if not name:
            continue
        out[name] = "" if value is None else str(value)
    return out


def merge_headers(*layers: Any) -> dict[str, str]:
    """
    Merge header layers, lowest priority first.

    A later layer overrides an earlier one when the names match case-insensitively;
    the later layer's casing wins.
    """
    merged: dict[str, str] = {}
    index: dict[str, str] = {}
    for layer in layers:
        for name, value in stringify_headers(layer).items():
            lower = name.lower()
            previous = index.get(lower)
            if previous is not None and previous != name:
                merged.pop(previous, None)
            merged[name] = value
            index[lower] = name
    return merged


def header_value(headers: Mapping[object, object] | None, name: str, default: str = "") -> str:
    """
    Return a header value using case-insensitive key matching.

    Fast-paths common key casings before falling back to a full scan.
    """
    if not headers or not name:
        return default

    coerced = _coerce_headers_mapping(headers)
    if not coerced:
        return default

    lower = str(name).lower()
    for key in (name, lower, lower.title()):
        if key in coerced:
            value = coerced.get(key)
            return default if value is None else str(value).strip()

    for key, value in coerced.items():
        if key is None:
            continue
        if str(key).lower() == lower:
            return default if value is None else str(value).strip()

    return default


__all__ = ["header_value", "merge_headers", "stringify_headers"]
