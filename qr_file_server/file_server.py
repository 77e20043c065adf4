import argparse
import logging
import sys
from argparse import Namespace
from typing import Optional, Sequence, TextIO

import uvicorn
from fastapi import FastAPI
from pydantic import ValidationError
from starlette.middleware.base import BaseHTTPMiddleware

from qr_file_server.algorithms import render_qr_code
from qr_file_server.controllers import ListingStaticFiles, log_request
from qr_file_server.utils.config import (
    DEFAULT_MOUNT_PATH,
    DEFAULT_PORT,
    DEFAULT_SERVE_FROM,
    ServerConfig,
)

logger = logging.getLogger(__name__)


class QRFileServer:
    app: FastAPI

    def __init__(self, config: ServerConfig, **fastapi_app_config) -> None:
        self.config: ServerConfig = config
        self.app = FastAPI(
            docs_url=None,
            redoc_url=None,
            openapi_url=None,
            **fastapi_app_config
        )

        # Initialize middlewares
        self.app.add_middleware(BaseHTTPMiddleware, dispatch=log_request)

        # Files are checked per request, so a missing directory yields 404 instead of failing startup
        self.app.mount(
            config.mount_path,
            ListingStaticFiles(directory=config.serve_from, check_dir=False),
            name="static"
        )

    def print_banner(self, local_address: str, stream: Optional[TextIO] = None) -> str:
        """
        Выводит адрес сервиса и QR-код с ним до начала приема подключений.

        :param local_address: Адрес хоста в локальной сети.
        :param stream: Поток вывода, по умолчанию стандартный вывод.
        :return: Адрес, закодированный в QR-код.
        :raise QRCodeEncodingError: Когда адрес не помещается в QR-код.
        """
        stream = stream or sys.stdout
        url: str = self.config.advertised_url(local_address)
        connect_code: str = render_qr_code(url)

        print(f"The file service is about to listen to {url}", file=stream)
        print(connect_code, file=stream, flush=True)
        return url

    @staticmethod
    def build_argument_parser() -> argparse.ArgumentParser:
        """
        Создает разборщик параметров запуска.

        :return: Разборщик аргументов командной строки.
        """
        parser: argparse.ArgumentParser = argparse.ArgumentParser(
            prog="qr-file-server",
            add_help=False,
            description="Раздает файлы из каталога в локальной сети и выводит QR-код с адресом сервиса"
        )
        parser.add_argument(
            '-h', '--help', action='help', default=argparse.SUPPRESS,
            help='Показывает сообщение с помощью и закрывает программу'
        )
        parser.add_argument(
            "--port", "-p", default=None, type=int,
            dest="port",
            help=f"Порт файлового сервиса (по умолчанию {DEFAULT_PORT})"
        )
        parser.add_argument(
            "--mount-path", "-m", default=None, type=str,
            dest="mount_path",
            help=f"URL путь, по которому доступны файлы (по умолчанию `{DEFAULT_MOUNT_PATH}`)"
        )
        parser.add_argument(
            "--serve-from", "-s", default=None, type=str,
            dest="serve_from",
            help=f"Путь до раздаваемого каталога (по умолчанию `{DEFAULT_SERVE_FROM}`)"
        )

        return parser

    @classmethod
    def parse_launch_arguments(cls, argv: Optional[Sequence[str]] = None) -> ServerConfig:
        """
        Получает параметры запуска при инициализации приложения.

        При некорректных значениях выводит справку об использовании и завершает процесс
            с ненулевым кодом.

        :param argv: Аргументы командной строки, по умолчанию аргументы процесса.
        :return: Конфигурация сервера с подставленными значениями по умолчанию.
        """
        parser: argparse.ArgumentParser = cls.build_argument_parser()
        args: Namespace = parser.parse_args(argv)

        try:
            return ServerConfig.from_launch_arguments(args)

        except ValidationError as err:
            details: str = "; ".join(
                f"{'.'.join(str(loc) for loc in error['loc'])}: {error['msg']}"
                for error in err.errors()
            )
            parser.error(details)

    def start(self, log_level: int = logging.INFO) -> None:
        logger.info(
            "Serving %s under %s on %s:%d",
            self.config.serve_from.resolve(),
            self.config.url_path,
            self.config.bind_host,
            self.config.port
        )
        uvicorn.run(
            self.app,
            host=self.config.bind_host,
            port=self.config.port,
            log_config=None,
            log_level=log_level,
            access_log=False
        )
