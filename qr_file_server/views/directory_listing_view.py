import html
import os
from urllib.parse import quote

from qr_file_server.algorithms.data_types import DirectoryEntry

LISTING_TEMPLATE: str = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="utf-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Index of {title}</title>
    <style>
        body {{
            font-family: Arial, sans-serif;
            margin: 20px;
        }}
        li {{
            padding: 4px 0;
        }}
    </style>
</head>
<body>
<h1>Index of {title}</h1>
<ul>
{items}
</ul>
</body>
</html>
"""


class DirectoryListingView:
    """
    Предоставляет получение содержимого каталога и его представление в виде HTML страницы.
    """

    @staticmethod
    def scan_directory(path: str) -> list[DirectoryEntry]:
        """
        Получает непосредственное содержимое каталога.

        Выполняется синхронно, вызывающая сторона должна запускать метод в отдельном потоке.

        :param path: Путь до каталога.
        :return: Элементы каталога: сначала каталоги, затем файлы, по алфавиту.
        :raise PermissionError: Когда нет прав на чтение каталога.
        """
        entries: list[DirectoryEntry] = []
        with os.scandir(path) as it:
            for entry in it:
                try:
                    is_dir: bool = entry.is_dir()

                except OSError:
                    is_dir = False

                entries.append(DirectoryEntry(entry.name, is_dir))

        entries.sort(key=DirectoryEntry.sort_key)
        return entries

    @staticmethod
    def render_entry(entry: DirectoryEntry) -> str:
        href: str = quote(entry.name, errors="surrogateescape")
        if entry.is_dir:
            href += "/"

        return f'<li><a href="{html.escape(href)}">{html.escape(entry.display_name)}</a></li>'

    @classmethod
    def render(cls, url_path: str, entries: list[DirectoryEntry], show_parent: bool = True) -> str:
        """
        Отрисовывает страницу со списком файлов каталога.

        Ссылки относительные, поэтому страница должна отдаваться по пути с завершающим "/".

        :param url_path: Путь запроса, отображаемый в заголовке.
        :param entries: Элементы каталога.
        :param show_parent: Добавлять ли ссылку на родительский каталог.
        :return: HTML документ.
        """
        items: list[str] = []
        if show_parent:
            items.append('<li><a href="../">../</a></li>')

        items.extend(cls.render_entry(entry) for entry in entries)
        return LISTING_TEMPLATE.format(title=html.escape(url_path), items="\n".join(items))
