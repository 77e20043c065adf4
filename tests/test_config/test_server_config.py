from argparse import Namespace
from pathlib import Path

import pytest
from pydantic import ValidationError

from qr_file_server.utils.config import (
    DEFAULT_MOUNT_PATH,
    DEFAULT_PORT,
    DEFAULT_SERVE_FROM,
    ServerConfig,
)


def test_defaults():
    config = ServerConfig()

    assert config.port == DEFAULT_PORT == 8080
    assert config.mount_path == DEFAULT_MOUNT_PATH == "/static"
    assert config.serve_from == DEFAULT_SERVE_FROM == Path(".")
    assert config.bind_host == "0.0.0.0"


def test_provided_values():
    config = ServerConfig(port=9090, mount_path="/files", serve_from=Path("/srv/share"))

    assert config.port == 9090
    assert config.mount_path == "/files"
    assert config.serve_from == Path("/srv/share")


def test_omitted_arguments_use_defaults():
    config = ServerConfig.from_launch_arguments(
        Namespace(port=None, mount_path="/files", serve_from=None)
    )

    assert config.port == DEFAULT_PORT
    assert config.mount_path == "/files"
    assert config.serve_from == DEFAULT_SERVE_FROM


@pytest.mark.parametrize(
    "mount_path, expected",
    [
        ("files", "/files"),
        ("/files/", "/files"),
        ("/nested/path", "/nested/path"),
        ("/", ""),
        ("", ""),
    ]
)
def test_mount_path_normalization(mount_path: str, expected: str):
    assert ServerConfig(mount_path=mount_path).mount_path == expected


@pytest.mark.parametrize("port", [0, -1, 65536, 100000])
def test_port_out_of_range(port: int):
    with pytest.raises(ValidationError):
        ServerConfig(port=port)


def test_config_is_immutable():
    config = ServerConfig()

    with pytest.raises(ValidationError):
        config.port = 1234


def test_advertised_url_ipv4():
    assert ServerConfig(port=8081).advertised_url("192.168.1.20") == "http://192.168.1.20:8081/static"


def test_advertised_url_ipv6():
    assert ServerConfig().advertised_url("fd00::1") == "http://[fd00::1]:8080/static"


def test_advertised_url_root_mount():
    assert ServerConfig(mount_path="/").advertised_url("10.0.0.1") == "http://10.0.0.1:8080/"


def test_advertised_url_encodes_ipv6_zone():
    assert ServerConfig().advertised_url("fe80::1%eth0") == "http://[fe80::1%25eth0]:8080/static"
