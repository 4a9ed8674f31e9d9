# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import json
import logging

import pytest

from axioslike import log
from axioslike.adapter import facade
from axioslike.adapter.facade import AxiosStyleClient
from axioslike.adapter.simple import SimpleClient
from axioslike.cli import main as cli_main
from axioslike.config import ClientSettings
from axioslike.http.adapters import StubTransportClient
from axioslike.http.models import TransportError, TransportResult
from axioslike.runtime import create_client, create_simple_client


def test_build_parser():
    parser = cli_main.build_parser()
    args = parser.parse_args(["get", "/posts/1", "-H", "Accept: text/plain", "-p", "page=2", "--json"])
    assert args.method == "get"
    assert args.url == "/posts/1"
    assert args.headers == ["Accept: text/plain"]
    assert args.params == ["page=2"]
    assert args.json is True


def _patch_transport(monkeypatch, stub, captured):
    def factory(settings):
        captured["settings"] = settings
        return stub

    monkeypatch.setattr(facade, "create_default_transport", factory)


def test_main_prints_response_data(monkeypatch, capsys):
    stub = StubTransportClient({"/posts/1?full=1": TransportResult(status=200, content={"id": 1})})
    captured = {}
    _patch_transport(monkeypatch, stub, captured)

    code = cli_main.main(
        ["GET", "/posts/1", "--base-url", "https://api.test", "-p", "full=1", "-H", "X-A: 1", "--ignore-ssl-errors"]
    )

    assert code == 0
    assert json.loads(capsys.readouterr().out) == {"id": 1}
    assert captured["settings"].base_url == "https://api.test"
    assert captured["settings"].verify_ssl is False
    assert stub.requests[0].headers == {"X-A": "1"}
    assert stub.closed is True


def test_main_json_output_and_body(monkeypatch, capsys):
    stub = StubTransportClient({"/items": TransportResult(status=201, headers={"x-id": "9"}, content="created")})
    _patch_transport(monkeypatch, stub, {})

    code = cli_main.main(["post", "/items", "--data", '{"name": "n"}', "--json"])

    assert code == 0
    assert json.loads(capsys.readouterr().out) == {"status": 201, "headers": {"x-id": "9"}, "data": "created"}
    assert stub.requests[0].body == {"name": "n"}


def test_main_reports_failures(monkeypatch, capsys):
    stub = StubTransportClient({"/x": TransportResult(status=500, error=TransportError(message="boom"))})
    _patch_transport(monkeypatch, stub, {})

    assert cli_main.main(["get", "/x"]) == 1
    assert "boom" in capsys.readouterr().err
    assert cli_main.main(["trace", "/x"]) == 1
    assert "Unsupported method: trace" in capsys.readouterr().err


def test_main_rejects_malformed_header(monkeypatch):
    _patch_transport(monkeypatch, StubTransportClient(), {})
    with pytest.raises(SystemExit) as excinfo:
        cli_main.main(["get", "/x", "-H", "no-separator"])
    assert excinfo.value.code == 2


def test_runtime_factories_apply_overrides():
    stub = StubTransportClient()
    client = create_client(ClientSettings(), transport=stub, base_url="https://api.test")
    assert isinstance(client, AxiosStyleClient)
    assert client.transport is stub
    assert client.settings.base_url == "https://api.test"

    simple = create_simple_client(ClientSettings(), transport=stub, throw_on_error=True)
    assert isinstance(simple, SimpleClient)
    assert simple.throw_on_error is True


def test_setup_logging_uses_requested_level(monkeypatch):
    captured = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: captured.update(kwargs))
    log.setup_logging("debug")
    assert captured["level"] == logging.DEBUG
