from pathlib import Path

import pytest

from qr_file_server.file_server import QRFileServer
from qr_file_server.utils.config import ServerConfig


def test_no_arguments_gives_defaults():
    assert QRFileServer.parse_launch_arguments([]) == ServerConfig()


def test_long_flags():
    config = QRFileServer.parse_launch_arguments(
        ["--port", "9000", "--mount-path", "/share", "--serve-from", "/tmp"]
    )

    assert config.port == 9000
    assert config.mount_path == "/share"
    assert config.serve_from == Path("/tmp")


def test_short_flags():
    config = QRFileServer.parse_launch_arguments(["-p", "1", "-m", "/x", "-s", "data"])

    assert config == ServerConfig(port=1, mount_path="/x", serve_from=Path("data"))


@pytest.mark.parametrize("port", ["abc", "80.5", "-1", "0", "65536", "99999999"])
def test_invalid_port_terminates(port: str, capsys):
    with pytest.raises(SystemExit) as exit_info:
        QRFileServer.parse_launch_arguments(["--port", port])

    assert exit_info.value.code == 2
    assert "usage:" in capsys.readouterr().err


def test_unknown_flag_terminates():
    with pytest.raises(SystemExit) as exit_info:
        QRFileServer.parse_launch_arguments(["--listen", "all"])

    assert exit_info.value.code == 2
