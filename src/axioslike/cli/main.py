# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""axioslike CLI."""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from typing import Any

from ..adapter.facade import AxiosStyleClient
from ..adapter.models import RequestConfig, Response
from ..config import ClientSettings, load_settings
from ..errors import AxiosLikeError
from ..log import setup_logging

CLI_TEXT_TRUNCATION_BYTES = 4096


def _parse_pairs(values: list[str] | None, separator: str, *, option: str) -> dict[str, str]:
    pairs: dict[str, str] = {}
    for raw in values or []:
        name, sep, value = raw.partition(separator)
        if not sep or not name.strip():
            raise argparse.ArgumentTypeError(f"{option} expects NAME{separator}VALUE, got {raw!r}")
        pairs[name.strip()] = value.strip()
    return pairs


def _parse_data(raw: str | None) -> Any:
    if raw is None:
        return None
    try:
        return json.loads(raw)
    except ValueError:
        return raw


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Send one HTTP request through the axioslike adapter")
    parser.add_argument("method", help="HTTP method (get, post, put, delete, patch)")
    parser.add_argument("url", help="Absolute URL, or a path relative to --base-url")
    parser.add_argument("--base-url", default=None, help="Base URL prepended to relative paths")
    parser.add_argument(
        "-H",
        "--header",
        action="append",
        dest="headers",
        metavar="NAME:VALUE",
        help="Request header (repeatable)",
    )
    parser.add_argument(
        "-p",
        "--param",
        action="append",
        dest="params",
        metavar="KEY=VALUE",
        help="Query parameter (repeatable)",
    )
    parser.add_argument("-d", "--data", default=None, help="Request body; parsed as JSON when possible")
    parser.add_argument("--timeout", type=float, default=None, help="Request timeout in seconds")
    parser.add_argument(
        "--ignore-ssl-errors",
        action="store_true",
        help="Skip TLS verification (useful for lab/self-signed targets)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output status, headers and data as JSON instead of the data alone",
    )
    return parser


def _truncate_text_bytes(text: str, max_bytes: int) -> str:
    raw = text.encode("utf-8")
    if len(raw) <= max_bytes:
        return text
    suffix = "...[truncated]"
    keep = max_bytes - len(suffix.encode("utf-8"))
    if keep <= 0:
        return suffix
    return raw[:keep].decode("utf-8", errors="ignore") + suffix


def _print_json(response: Response[Any]) -> None:
    payload = {"status": response.status, "headers": response.headers, "data": response.data}
    json.dump(payload, sys.stdout, indent=2, sort_keys=True, default=str)
    sys.stdout.write("\n")


def _pretty_print(response: Response[Any]) -> None:
    data = response.data
    if isinstance(data, (dict, list)):
        text = json.dumps(data, indent=2, default=str)
    else:
        text = "" if data is None else str(data)
    print(_truncate_text_bytes(text, CLI_TEXT_TRUNCATION_BYTES))


async def _run(settings: ClientSettings, config: RequestConfig) -> Response[Any]:
    async with AxiosStyleClient(settings=settings) as client:
        return await client.request(config)


def main(argv: list[str] | None = None) -> int:
    setup_logging()
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        headers = _parse_pairs(args.headers, ":", option="--header")
        params = _parse_pairs(args.params, "=", option="--param")
    except argparse.ArgumentTypeError as exc:
        parser.error(str(exc))

    settings = load_settings()
    if args.base_url is not None:
        settings.base_url = args.base_url
    if args.timeout is not None:
        settings.timeout = args.timeout
    if args.ignore_ssl_errors:
        settings.verify_ssl = False

    config = RequestConfig(
        url=args.url,
        method=args.method,
        headers=headers or None,
        params=params or None,
        data=_parse_data(args.data),
    )

    try:
        response = asyncio.run(_run(settings, config))
    except AxiosLikeError as exc:
        print(f"[axioslike] {exc}", file=sys.stderr)
        return 1

    if args.json:
        _print_json(response)
    else:
        _pretty_print(response)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
