import asyncio
import os
import signal
import socket
import subprocess
import sys
import time
from pathlib import Path

import httpx
import pytest
from uvicorn import Config, Server

from bookmark_api.app.core.config import Settings
from bookmark_api.app import server as server_module
from bookmark_api.app.main import create_app
from bookmark_api.app.server import BookmarkServer, parse_listen_address

PROJECT_ROOT = Path(__file__).resolve().parent.parent


@pytest.mark.parametrize(
    "addr, expected",
    [
        (":8080", ("0.0.0.0", 8080)),
        ("127.0.0.1:9000", ("127.0.0.1", 9000)),
        ("localhost:80", ("localhost", 80)),
        ("[::1]:8080", ("::1", 8080)),
    ],
)
def test_parse_listen_address(addr, expected):
    assert parse_listen_address(addr) == expected


@pytest.mark.parametrize("addr", ["8080", "localhost", "host:", "host:http", ":70000"])
def test_parse_listen_address_invalid(addr):
    with pytest.raises(ValueError):
        parse_listen_address(addr)


def _server(grace_period: float) -> BookmarkServer:
    config = Config(app=create_app(settings=Settings()), log_config=None)
    return BookmarkServer(config, grace_period=grace_period)


def test_shutdown_within_grace_period(monkeypatch):
    async def quick_shutdown(self, sockets=None):
        await asyncio.sleep(0)

    monkeypatch.setattr(Server, "shutdown", quick_shutdown)
    server = _server(grace_period=1.0)
    asyncio.run(server.shutdown())
    assert server.shutdown_timed_out is False


def test_shutdown_overrunning_grace_period_is_flagged(monkeypatch):
    async def slow_shutdown(self, sockets=None):
        await asyncio.sleep(5)

    monkeypatch.setattr(Server, "shutdown", slow_shutdown)
    server = _server(grace_period=0.05)
    asyncio.run(server.shutdown())
    assert server.shutdown_timed_out is True


@pytest.fixture
def run_main(monkeypatch):
    """Call ``main()`` with settings pinned and SIGTERM restored afterwards."""
    previous = signal.getsignal(signal.SIGTERM)
    monkeypatch.setattr(server_module, "get_settings", lambda: Settings(http_addr="127.0.0.1:8080"))

    def _run(fake_run):
        monkeypatch.setattr(BookmarkServer, "run", fake_run)
        return server_module.main()

    yield _run
    signal.signal(signal.SIGTERM, previous)


def test_main_exits_zero_after_signal(run_main):
    def fake_run(self, sockets=None):
        self.started = True
        raise KeyboardInterrupt

    assert run_main(fake_run) == 0


def test_main_maps_sigterm_to_keyboard_interrupt(run_main):
    def fake_run(self, sockets=None):
        self.started = True
        assert signal.getsignal(signal.SIGTERM) is signal.default_int_handler

    assert run_main(fake_run) == 0


def test_main_exits_non_zero_when_shutdown_overruns(run_main):
    def fake_run(self, sockets=None):
        self.started = True
        self.shutdown_timed_out = True
        raise KeyboardInterrupt

    assert run_main(fake_run) == 1


def test_main_exits_non_zero_when_server_never_started(run_main):
    def fake_run(self, sockets=None):
        return None

    assert run_main(fake_run) == 1


def test_main_exits_non_zero_when_bind_fails(run_main):
    def fake_run(self, sockets=None):
        # uvicorn exits this way when the listen address is taken.
        sys.exit(3)

    assert run_main(fake_run) == 1


def _free_port() -> int:
    with socket.socket() as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


def _launch(port: int) -> subprocess.Popen:
    env = dict(os.environ, HTTP_ADDR=f"127.0.0.1:{port}", HTTP_SHUTDOWN_TIMEOUT="5s")
    return subprocess.Popen(
        [sys.executable, "run.py"],
        cwd=PROJECT_ROOT,
        env=env,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
    )


@pytest.mark.skipif(sys.platform == "win32", reason="needs POSIX signals")
def test_process_exits_zero_on_sigterm():
    port = _free_port()
    proc = _launch(port)
    try:
        deadline = time.monotonic() + 15
        while True:
            try:
                response = httpx.get(f"http://127.0.0.1:{port}/bookmarks", timeout=1)
                break
            except httpx.TransportError:
                if proc.poll() is not None or time.monotonic() > deadline:
                    pytest.fail("server did not come up")
                time.sleep(0.1)
        assert response.status_code == 200

        proc.send_signal(signal.SIGTERM)
        assert proc.wait(timeout=15) == 0
    finally:
        if proc.poll() is None:
            proc.kill()
            proc.wait()


def test_process_exits_non_zero_when_address_in_use():
    with socket.socket() as holder:
        holder.bind(("127.0.0.1", 0))
        holder.listen()
        port = holder.getsockname()[1]
        proc = _launch(port)
        try:
            assert proc.wait(timeout=15) != 0
        finally:
            if proc.poll() is None:
                proc.kill()
                proc.wait()
