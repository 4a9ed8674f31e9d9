# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

from axioslike.http.url import encode_url, stringify_param


def test_encode_url_without_params_returns_input():
    assert encode_url("/users") == "/users"
    assert encode_url("/users", None) == "/users"
    assert encode_url("/users", {}) == "/users"


def test_encode_url_picks_separator_from_existing_query():
    assert encode_url("/users", {"page": 2}) == "/users?page=2"
    assert encode_url("/users?sort=asc", {"page": 2}) == "/users?sort=asc&page=2"


def test_encode_url_stringifies_values_like_js():
    url = encode_url("/search", {"q": "hello world", "exact": True, "draft": False, "limit": 10, "cursor": None})
    assert url == "/search?q=hello+world&exact=true&draft=false&limit=10&cursor=null"


def test_encode_url_is_deterministic_and_escapes_reserved_characters():
    params = {"filter": "a&b=c", "tag": "ü"}
    first = encode_url("https://api.example.com/items", params)
    assert first == encode_url("https://api.example.com/items", params)
    assert first == "https://api.example.com/items?filter=a%26b%3Dc&tag=%C3%BC"


def test_stringify_param_matches_browser_spelling():
    assert stringify_param(1.5) == "1.5"
    assert stringify_param(1.0) == "1"
    assert stringify_param(float("nan")) == "NaN"
    assert stringify_param(float("-inf")) == "-Infinity"
    assert stringify_param([1, 2]) == "1,2"
    assert stringify_param((True, None, "a")) == "true,,a"
    assert stringify_param("x") == "x"


def test_encode_url_joins_sequence_values():
    assert encode_url("/items", {"ids": [1, 2], "ratio": 2.0}) == "/items?ids=1%2C2&ratio=2"
