import ipaddress
from argparse import Namespace
from pathlib import Path
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_PORT: int = 8080
DEFAULT_MOUNT_PATH: str = "/static"
DEFAULT_SERVE_FROM: Path = Path(".")
DEFAULT_BIND_HOST: str = "0.0.0.0"


class ServerConfig(BaseModel):
    """
    Конфигурация файлового сервиса, собираемая один раз при запуске.
    """
    port: int = Field(default=DEFAULT_PORT, ge=1, lt=65536)
    mount_path: str = Field(default=DEFAULT_MOUNT_PATH)
    serve_from: Path = Field(default=DEFAULT_SERVE_FROM)
    bind_host: str = Field(default=DEFAULT_BIND_HOST)

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    @field_validator("mount_path", mode="before")
    @classmethod
    def normalize_mount_path(cls, v: Any) -> Any:
        if not isinstance(v, str):
            return v

        # Starlette mounts expect "" for the root and no trailing slash otherwise
        return "/" + v.strip("/") if v.strip("/") else ""

    @classmethod
    def from_launch_arguments(cls, args: Namespace) -> "ServerConfig":
        """
        Собирает конфигурацию из аргументов запуска, подставляя значения по умолчанию
            для незаданных параметров.

        :param args: Пространство имен с аргументами запуска.
        :return: Конфигурация сервера.
        :raise ValidationError: Когда значения аргументов не проходят проверку.
        """
        provided: dict[str, Any] = {
            name: value
            for name in ("port", "mount_path", "serve_from")
            if (value := getattr(args, name, None)) is not None
        }
        return cls(**provided)

    @property
    def url_path(self) -> str:
        """
        Путь монтирования в виде, пригодном для URL.

        :return: Путь монтирования, для корня возвращается "/".
        """
        return self.mount_path or "/"

    def advertised_url(self, local_address: str) -> str:
        """
        Формирует адрес сервиса, по которому к нему можно подключиться из локальной сети.

        :param local_address: Адрес хоста в локальной сети.
        :return: URL вида http://<адрес>:<порт><путь монтирования>.
        """
        host: str = local_address
        if ipaddress.ip_address(local_address.split("%", 1)[0]).version == 6:
            # Zone separator must be percent-encoded inside a URL
            host = "[" + local_address.replace("%", "%25", 1) + "]"

        return f"http://{host}:{self.port}{self.url_path}"
