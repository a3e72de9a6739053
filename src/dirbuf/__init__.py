"""Public interface for the directory buffer navigator."""

from .browser import DirbufError, DirectoryBrowser
from .entry import Entry, EntryType
from .lister import DirectoryListingError, list_directory
from .navigator import Navigator, NavigatorSettings

__version__ = "0.1.0"
__all__ = [
    "DirbufError",
    "DirectoryBrowser",
    "DirectoryListingError",
    "Entry",
    "EntryType",
    "Navigator",
    "NavigatorSettings",
    "__version__",
    "list_directory",
]
