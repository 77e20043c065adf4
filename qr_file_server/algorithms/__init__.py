from .qr_renderer import QRMatrix, encode_qr_matrix, render_qr_code, render_qr_matrix

__all__ = (
    "QRMatrix",
    "encode_qr_matrix",
    "render_qr_code",
    "render_qr_matrix",
)
