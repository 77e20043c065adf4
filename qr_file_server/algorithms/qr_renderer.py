import qrcode
from qrcode.constants import ERROR_CORRECT_M
from qrcode.exceptions import DataOverflowError

from qr_file_server.algorithms.exceptions import QRCodeEncodingError

QRMatrix = list[list[bool]]

DARK_MODULE: str = "█"
LIGHT_MODULE: str = " "


def encode_qr_matrix(data: str, error_correction: int = ERROR_CORRECT_M) -> QRMatrix:
    """
    Кодирует строку в матрицу модулей QR-кода минимальной подходящей версии без рамки.

    :param data: Кодируемая строка.
    :param error_correction: Уровень коррекции ошибок.
    :return: Матрица модулей, где True означает темный модуль.
    :raise QRCodeEncodingError: Когда данные не помещаются в QR-код.
    """
    code = qrcode.QRCode(version=None, error_correction=error_correction, border=0)
    code.add_data(data)

    try:
        code.make(fit=True)

    # qrcode reports overflow either way depending on the release
    except (DataOverflowError, ValueError) as err:
        raise QRCodeEncodingError(data) from err

    return [[bool(module) for module in row] for row in code.get_matrix()]


def render_qr_matrix(
    matrix: QRMatrix,
    dark: str = DARK_MODULE,
    light: str = LIGHT_MODULE,
    module_width: int = 2,
    module_height: int = 1
) -> str:
    """
    Отрисовывает матрицу QR-кода в виде текстового блока.

    Модуль по умолчанию занимает два символа в ширину и одну строку в высоту,
    чтобы код оставался квадратным в терминале.

    :param matrix: Матрица модулей QR-кода.
    :param dark: Символ темного модуля.
    :param light: Символ светлого модуля.
    :param module_width: Ширина модуля в символах.
    :param module_height: Высота модуля в строках.
    :return: Текстовый блок без завершающего перевода строки.
    """
    lines: list[str] = []
    for row in matrix:
        line: str = "".join((dark if module else light) * module_width for module in row)
        lines.extend([line] * module_height)

    return "\n".join(lines)


def render_qr_code(data: str) -> str:
    """
    Кодирует строку в QR-код и отрисовывает его текстом.

    :param data: Кодируемая строка.
    :return: Текстовый блок с QR-кодом.
    :raise QRCodeEncodingError: Когда данные не помещаются в QR-код.
    """
    return render_qr_matrix(encode_qr_matrix(data))
