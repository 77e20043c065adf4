import errno
import logging
import stat

import anyio
import anyio.to_thread
from fastapi import HTTPException
from fastapi.staticfiles import StaticFiles
from starlette.datastructures import URL
from starlette.responses import HTMLResponse, RedirectResponse, Response
from starlette.types import Scope

from qr_file_server.algorithms.data_types import DirectoryEntry
from qr_file_server.views import DirectoryListingView

logger = logging.getLogger(__name__)


class ListingStaticFiles(StaticFiles):
    """
    Отдает файлы из каталога, а для запросов к каталогам формирует страницу со списком файлов.
    """

    async def check_config(self) -> None:
        # A missing directory is reported once, requests then get 404
        try:
            await super().check_config()

        except RuntimeError as err:
            logger.warning("%s", err)

    async def get_response(self, path: str, scope: Scope) -> Response:
        """
        Формирует ответ на запрос к пути внутри раздаваемого каталога.

        :param path: Нормализованный путь относительно раздаваемого каталога.
        :param scope: ASGI scope запроса.
        :return: Ответ с содержимым файла или списком файлов каталога.
        :raise HTTPException: Когда метод не поддерживается, путь не существует
            или выходит за пределы раздаваемого каталога.
        """
        if scope["method"] not in ("GET", "HEAD"):
            raise HTTPException(status_code=405)

        try:
            full_path, stat_result = await anyio.to_thread.run_sync(self.lookup_path, path)

        except PermissionError:
            raise HTTPException(status_code=401)

        except OSError as exc:
            # Filename is too long, so it can't be a valid static file
            if exc.errno == errno.ENAMETOOLONG:
                raise HTTPException(status_code=404)

            raise exc

        if stat_result is None:
            # Either missing or resolved outside of the served directory
            raise HTTPException(status_code=404)

        if stat.S_ISREG(stat_result.st_mode):
            try:
                await anyio.to_thread.run_sync(self.check_readable, full_path)

            except OSError:
                # Headers go out before the file is opened, so fail early
                raise HTTPException(status_code=403)

            return self.file_response(full_path, stat_result, scope)

        if stat.S_ISDIR(stat_result.st_mode):
            return await self.directory_response(full_path, path, scope)

        raise HTTPException(status_code=404)

    @staticmethod
    def check_readable(full_path: str) -> None:
        """
        Проверяет, что файл можно открыть на чтение.

        :param full_path: Абсолютный путь до файла.
        :raise OSError: Когда файл не удается открыть.
        """
        with open(full_path, "rb"):
            pass

    async def directory_response(self, full_path: str, path: str, scope: Scope) -> Response:
        """
        Формирует страницу со списком файлов каталога.

        :param full_path: Абсолютный путь до каталога.
        :param path: Путь относительно раздаваемого каталога.
        :param scope: ASGI scope запроса.
        :return: HTML страница или перенаправление на путь с завершающим "/".
        """
        request_path: str = scope["path"]
        if not request_path.endswith("/"):
            # Relative links of the listing only resolve under the slash form
            url = URL(scope=scope)
            return RedirectResponse(url=url.replace(path=url.path + "/"))

        try:
            entries: list[DirectoryEntry] = await anyio.to_thread.run_sync(
                DirectoryListingView.scan_directory, full_path
            )

        except PermissionError:
            raise HTTPException(status_code=403)

        except (FileNotFoundError, NotADirectoryError):
            raise HTTPException(status_code=404)

        logger.debug("Listing %d entries of %s", len(entries), full_path)
        return HTMLResponse(
            DirectoryListingView.render(request_path, entries, show_parent=path != ".")
        )
