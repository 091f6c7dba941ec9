"""Utility modules for Folder Mirror.

This package provides:
- hashing: File digests and content equality
- tree: Recursive file enumeration and relative path mapping
- logging: Append-only sync log and diagnostic logging setup
"""

from folder_mirror.utils.hashing import hash_file, files_equal
from folder_mirror.utils.tree import iter_files, relative_path, counterpart
from folder_mirror.utils.logging import get_sync_logger, configure_root_logger

__all__ = [
    "hash_file",
    "files_equal",
    "iter_files",
    "relative_path",
    "counterpart",
    "get_sync_logger",
    "configure_root_logger",
]
