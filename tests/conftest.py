import socket

import pytest

import api_server


@pytest.fixture(scope='session')
def _server():
    httpd = api_server.start()
    yield httpd
    httpd.shutdown()
    httpd.server_close()


@pytest.fixture
def server(_server):
    _server.state.reset()
    return _server


@pytest.fixture
def closed_port_url():
    """URL of a local port nothing is listening on."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(('127.0.0.1', 0))
        port = s.getsockname()[1]
    return f"http://127.0.0.1:{port}/"
