from pathlib import Path
from typing import AsyncGenerator

import httpx
import pytest
import pytest_asyncio

from qr_file_server.file_server import QRFileServer
from qr_file_server.utils.config import ServerConfig

A_TXT_CONTENT: bytes = "hello from a.txt, привет\n".encode("utf-8")
SECRET_CONTENT: bytes = b"top secret, must never leak"


@pytest.fixture()
def served_directory(tmp_path: Path) -> Path:
    root: Path = tmp_path / "root"
    (root / "sub").mkdir(parents=True)
    (root / "a.txt").write_bytes(A_TXT_CONTENT)
    (root / "sub" / "b.bin").write_bytes(bytes(range(256)))
    (tmp_path / "secret.txt").write_bytes(SECRET_CONTENT)
    return root


@pytest.fixture()
def config(served_directory: Path) -> ServerConfig:
    return ServerConfig(serve_from=served_directory)


@pytest.fixture()
def file_server(config: ServerConfig) -> QRFileServer:
    return QRFileServer(config)


@pytest_asyncio.fixture()
async def client(file_server: QRFileServer) -> AsyncGenerator[httpx.AsyncClient, None]:
    transport = httpx.ASGITransport(app=file_server.app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client


@pytest.fixture()
def a_txt_content() -> bytes:
    return A_TXT_CONTENT


@pytest.fixture()
def secret_content() -> bytes:
    return SECRET_CONTENT
