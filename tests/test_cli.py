"""Tests for the command-line entry point."""

from __future__ import annotations

import pytest

from kandinsky.cli import main, parse_addr


@pytest.mark.parametrize(
    "addr,expected",
    [(":8080", ("0.0.0.0", 8080)), ("127.0.0.1:6000", ("127.0.0.1", 6000)), ("localhost:80", ("localhost", 80))],
)
def test_parse_addr(addr, expected):
    assert parse_addr(addr) == expected


@pytest.mark.parametrize("addr", ["8080", "host:", "host:port"])
def test_parse_addr_invalid(addr):
    with pytest.raises(ValueError):
        parse_addr(addr)


def test_main_serves_app(monkeypatch):
    calls = {}

    def fake_run(app, host, port, log_level):
        calls.update(app=app, host=host, port=port)

    monkeypatch.setattr("uvicorn.run", fake_run)
    main(["--http", "127.0.0.1:9000"])

    from kandinsky.main import app

    assert calls == {"app": app, "host": "127.0.0.1", "port": 9000}


def test_main_rejects_bad_address():
    with pytest.raises(SystemExit):
        main(["--http", "nowhere"])
