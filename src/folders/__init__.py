"""Project folder lookup."""

from src.folders.lookup import ProjectFolderLookup

__all__ = ["ProjectFolderLookup"]
