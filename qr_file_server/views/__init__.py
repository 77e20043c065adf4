from .directory_listing_view import DirectoryListingView

__all__ = (
    "DirectoryListingView",
)
