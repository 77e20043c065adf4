from .directory_entry import DirectoryEntry

__all__ = (
    "DirectoryEntry",
)
