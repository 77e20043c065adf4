class LocalAddressNotFound(OSError):
    """
    Представляет ошибку при отсутствии адреса в локальной сети, отличного от loopback.
    """
