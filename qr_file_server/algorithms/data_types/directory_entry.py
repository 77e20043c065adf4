from typing import NamedTuple


class DirectoryEntry(NamedTuple):
    """
    Элемент содержимого каталога для страницы со списком файлов.
    """
    name: str
    is_dir: bool

    @property
    def display_name(self) -> str:
        """
        Имя элемента для отображения, некорректные для UTF-8 байты заменяются.

        :return: Имя для вывода пользователю.
        """
        name: str = self.name.encode("utf-8", "surrogateescape").decode("utf-8", "replace")
        return name + "/" if self.is_dir else name

    def sort_key(self) -> tuple[bool, str]:
        return not self.is_dir, self.name.casefold()
