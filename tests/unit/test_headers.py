# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import httpx

from axioslike.http.headers import header_value, merge_headers, stringify_headers


def test_merge_headers_later_layer_wins_case_insensitively():
    merged = merge_headers({"authorization": "A", "X-Default": "1"}, {"Authorization": "B"})
    assert merged == {"X-Default": "1", "Authorization": "B"}


def test_merge_headers_ignores_empty_layers():
    assert merge_headers(None, {}, {"A": "1"}) == {"A": "1"}


def test_stringify_headers_coerces_values():
    assert stringify_headers({"X-Count": 3, "X-Empty": None, "": "skip"}) == {"X-Count": "3", "X-Empty": ""}
    assert stringify_headers([("A", "1")]) == {"A": "1"}


def test_header_value_is_case_insensitive():
    headers = httpx.Headers({"Content-Type": "application/json"})
    assert header_value(headers, "content-type") == "application/json"
    assert header_value({"X-Token": " abc "}, "x-token") == "abc"
    assert header_value({}, "missing", "fallback") == "fallback"
