from .access_log import log_request
from .listing_static_files import ListingStaticFiles

__all__ = (
    "ListingStaticFiles",
    "log_request",
)
