# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Helpers for callbacks that may be plain functions or coroutines."""

from __future__ import annotations

import inspect
from typing import Awaitable, TypeVar, Union

T = TypeVar("T")


async def maybe_await(value: Union[T, Awaitable[T]]) -> T:
    """Await `value` when a callback returned an awaitable, otherwise pass it through."""
    if inspect.isawaitable(value):
        return await value
    return value


__all__ = ["maybe_await"]
