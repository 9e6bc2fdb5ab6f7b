"""
Tests for the process entry point.
"""
import errno
import logging
import socket

import pytest

from timestamp_service import run
from timestamp_service.config import Config


class FakeServer:
    def __init__(self):
        self.served = False
        self.closed = False

    def serve_forever(self):
        self.served = True

    def shutdown(self):
        pass

    def server_close(self):
        self.closed = True


def assert_logged_critical(caplog):
    assert any(record.levelno == logging.CRITICAL for record in caplog.records)


def test_port_in_use_logs_critical_and_exits(monkeypatch, caplog):
    """A real bind failure on an occupied port is fatal and logged."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as occupied:
        occupied.bind(('0.0.0.0', 0))
        occupied.listen(1)
        monkeypatch.setattr(Config, 'PORT', occupied.getsockname()[1])

        with pytest.raises(SystemExit) as excinfo:
            run.main()

    assert excinfo.value.code == 1
    assert_logged_critical(caplog)


def test_server_exiting_on_bind_is_logged(monkeypatch, caplog):
    def exit_like_werkzeug(*args, **kwargs):
        raise SystemExit(1)

    monkeypatch.setattr(run, 'make_server', exit_like_werkzeug)

    with pytest.raises(SystemExit) as excinfo:
        run.main()
    assert excinfo.value.code == 1
    assert_logged_critical(caplog)


def test_bind_oserror_is_logged(monkeypatch, caplog):
    def fail_to_bind(*args, **kwargs):
        raise OSError(errno.EADDRINUSE, 'Address already in use')

    monkeypatch.setattr(run, 'make_server', fail_to_bind)

    with pytest.raises(SystemExit) as excinfo:
        run.main()
    assert excinfo.value.code == 1
    assert_logged_critical(caplog)


def test_main_starts_listener_and_bootstrap_client(monkeypatch, capsys):
    server = FakeServer()
    bound = {}

    def fake_make_server(host, port, app, threaded=False):
        bound.update(host=host, port=port, threaded=threaded)
        return server

    monkeypatch.setattr(run, 'make_server', fake_make_server)

    run.main()

    assert bound == {'host': Config.HOST, 'port': Config.PORT, 'threaded': True}
    assert server.served
    assert server.closed
    printed = capsys.readouterr().out
    assert printed.endswith('\n')
    assert printed.strip().isdigit()
