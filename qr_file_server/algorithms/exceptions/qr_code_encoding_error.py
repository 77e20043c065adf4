class QRCodeEncodingError(ValueError):
    """
    Представляет ошибку кодирования данных в QR-код.
    """
    def __init__(self, data: str):
        super().__init__(data)
        self.data: str = data

    def __str__(self) -> str:
        """
        Представляет читаемый текст ошибки.

        :return: Сообщение ошибки.
        """
        return f"Can not fit {len(self.data)} characters into a QR code: {self.data!r}"
