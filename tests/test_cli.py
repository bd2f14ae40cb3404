"""CLI tests with the Shoper client swapped for a dummy."""

from __future__ import annotations

from typing import Any, List, Tuple

import orjson
import pytest

from shoper_api import cli
from shoper_api.clients import ApiError
from shoper_api.settings import Settings


class DummyClient:
    result: Any = None
    calls: List[Tuple[str, str, Any]] = []

    @classmethod
    def from_settings(cls, settings: Settings) -> "DummyClient":
        return cls()

    def call(self, endpoint: str, method: str = "GET", body: Any = None) -> Any:
        DummyClient.calls.append((endpoint, method, body))
        return DummyClient.result

    def __enter__(self) -> "DummyClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        return None


@pytest.fixture
def patched_cli(monkeypatch: pytest.MonkeyPatch) -> type:
    monkeypatch.setenv("SHOPER_SHOP_URL", "https://sklep.shoparena.pl")
    monkeypatch.setenv("SHOPER_CLIENT_ID", "client")
    monkeypatch.setenv("SHOPER_CLIENT_SECRET", "supersecret")
    monkeypatch.setattr(cli, "get_settings", lambda: Settings())
    monkeypatch.setattr(cli, "configure_logging", lambda settings: None)
    monkeypatch.setattr(cli, "ShoperClient", DummyClient)
    DummyClient.calls = []
    DummyClient.result = None
    return DummyClient


def test_call_prints_json_payload(patched_cli: type, capsys: pytest.CaptureFixture[str]) -> None:
    patched_cli.result = {"id": 42}

    code = cli.run(["call", "products", "-X", "post", "--data", '{"code": "X"}'])

    assert code == 0
    assert patched_cli.calls == [("products", "POST", {"code": "X"})]
    assert orjson.loads(capsys.readouterr().out) == {"id": 42}


def test_call_reports_failure_with_exit_code(patched_cli: type, capsys: pytest.CaptureFixture[str]) -> None:
    patched_cli.result = ApiError(status_code=404, status_line="HTTP/1.1 404 Not Found")

    code = cli.run(["call", "products/999"])

    assert code == 1
    assert "404" in capsys.readouterr().err


def test_call_rejects_invalid_json_data(patched_cli: type) -> None:
    assert cli.run(["call", "products", "-X", "PUT", "--data", "{nope"]) == 2
    assert patched_cli.calls == []


def test_check_config_masks_secret(patched_cli: type, capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.run(["check-config"]) == 0

    out = capsys.readouterr().out
    assert "supersecret" not in out
    assert "su*******et" in out
