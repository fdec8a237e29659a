import socket

import pytest

from hello_responder.check_port import check_port, is_port_available


@pytest.fixture
def busy_port():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        sock.listen(1)
        yield sock.getsockname()[1]


def test_free_port_is_available(free_port):
    assert is_port_available("127.0.0.1", free_port) is True


def test_listening_port_is_not_available(busy_port):
    assert is_port_available("127.0.0.1", busy_port) is False


def test_check_port_exits_zero_when_free(clean_env, free_port, capsys):
    clean_env.setenv("HOST", "127.0.0.1")
    clean_env.setenv("PORT", str(free_port))

    with pytest.raises(SystemExit) as exc:
        check_port()

    assert exc.value.code == 0
    assert f"Port {free_port} is available." in capsys.readouterr().out


def test_check_port_exits_one_when_taken(clean_env, busy_port, capsys):
    clean_env.setenv("HOST", "127.0.0.1")
    clean_env.setenv("PORT", str(busy_port))

    with pytest.raises(SystemExit) as exc:
        check_port()

    assert exc.value.code == 1
    assert "already in use" in capsys.readouterr().out
