# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Query-string encoding for request URLs."""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any
from urllib.parse import urlencode


def stringify_param(value: Any) -> str:
    """
    Conventional string conversion for query values, spelled the way a browser's
    `String()` would.

    Booleans and None use the lowercase spelling (`true`, `false`, `null`), integral
    floats drop the fraction (`1.0` -> `1`), non-finite floats become `NaN`/`Infinity`,
    and lists/tuples join their items with commas (`[1, 2]` -> `1,2`, None items empty).
    """
    if value is True:
        return "true"
    if value is False:
        return "false"
    if value is None:
        return "null"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
        return repr(value)
    if isinstance(value, (list, tuple)):
        return ",".join("" if item is None else stringify_param(item) for item in value)
    return str(value)


def encode_url(base_url: str, params: Mapping[str, Any] | None = None) -> str:
    """
    Append `params` to `base_url` as a form-encoded query string.

    Example:
      encode_url("/users", {"page": 2}) -> "/users?page=2"
      encode_url("/users?sort=asc", {"page": 2}) -> "/users?sort=asc&page=2"
    """
    if not params:
        return base_url
    query = urlencode({str(key): stringify_param(value) for key, value in params.items()})
    separator = "&" if "?" in base_url else "?"
    return f"{base_url}{separator}{query}"


__all__ = ["encode_url", "stringify_param"]
