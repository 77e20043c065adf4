from .local_address import get_local_address
from .logging_config import setup_logging

__all__ = (
    "get_local_address",
    "setup_logging",
)
