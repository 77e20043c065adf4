from .local_address_not_found import LocalAddressNotFound
from .qr_code_encoding_error import QRCodeEncodingError

__all__ = (
    "LocalAddressNotFound",
    "QRCodeEncodingError",
)
